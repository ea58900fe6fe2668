"""
Posts router for post CRUD.
"""
from fastapi import APIRouter, Depends, status

from app.dependencies.auth import OptionalIdentity
from app.dependencies.database import get_post_service
from app.schemas.common import MessageResponse
from app.schemas.post import PostCreate, PostResponse, PostUpdate
from app.services.post_service import PostService

router = APIRouter(prefix="/api/posts", tags=["Posts"])


@router.post(
    "",
    response_model=PostResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create post",
)
async def create_post(
    body: PostCreate,
    identity: OptionalIdentity,
    post_service: PostService = Depends(get_post_service),
):
    """
    Create a post authored by the caller.

    Requires `Authorization: Bearer <token>`.
    """
    return await post_service.create_post(identity, body)


@router.get(
    "",
    response_model=list[PostResponse],
    summary="List posts",
)
async def list_posts(post_service: PostService = Depends(get_post_service)):
    return await post_service.list_posts()


@router.get(
    "/title/{title}",
    response_model=list[PostResponse],
    summary="Search posts by title",
)
async def list_posts_by_title(
    title: str,
    post_service: PostService = Depends(get_post_service),
):
    """Case-insensitive substring search on post titles."""
    return await post_service.list_posts_by_title(title)


@router.get(
    "/author/{author}",
    response_model=list[PostResponse],
    summary="List posts by author",
)
async def list_posts_by_author(
    author: str,
    post_service: PostService = Depends(get_post_service),
):
    return await post_service.list_posts_by_author(author)


@router.get(
    "/{post_id}",
    response_model=PostResponse,
    summary="Get post",
)
async def get_post(
    post_id: str,
    post_service: PostService = Depends(get_post_service),
):
    return await post_service.get_post(post_id)


@router.put(
    "/{post_id}",
    response_model=PostResponse,
    summary="Update post",
)
async def update_post(
    post_id: str,
    body: PostUpdate,
    identity: OptionalIdentity,
    post_service: PostService = Depends(get_post_service),
):
    """
    Update title and/or content. Only the post author may do this.

    Omitted fields keep their current value.
    """
    return await post_service.update_post(identity, post_id, body)


@router.delete(
    "/{post_id}",
    response_model=MessageResponse,
    summary="Delete post",
)
async def delete_post(
    post_id: str,
    identity: OptionalIdentity,
    post_service: PostService = Depends(get_post_service),
):
    """
    Delete a post and all of its comments. Only the post author may do this.
    """
    await post_service.delete_post(identity, post_id)
    return MessageResponse(message="Post deleted successfully")
