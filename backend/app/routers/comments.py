"""
Comments router for comments nested under posts.
"""
from fastapi import APIRouter, Depends, status

from app.dependencies.auth import OptionalIdentity
from app.dependencies.database import get_comment_service
from app.schemas.common import MessageResponse
from app.schemas.post import CommentCreate, CommentResponse, CommentUpdate
from app.services.comment_service import CommentService

router = APIRouter(prefix="/api", tags=["Comments"])


@router.post(
    "/posts/{post_id}/comments",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add comment",
)
async def add_comment(
    post_id: str,
    body: CommentCreate,
    identity: OptionalIdentity,
    comment_service: CommentService = Depends(get_comment_service),
):
    """
    Add a comment to a post.

    Requires `Authorization: Bearer <token>`.
    """
    return await comment_service.add_comment(identity, post_id, body)


@router.put(
    "/posts/{post_id}/comments/{comment_id}",
    response_model=CommentResponse,
    summary="Update comment",
)
async def update_comment(
    post_id: str,
    comment_id: str,
    body: CommentUpdate,
    identity: OptionalIdentity,
    comment_service: CommentService = Depends(get_comment_service),
):
    """
    Update a comment. Only the comment author may do this, not the post author.
    """
    return await comment_service.update_comment(identity, post_id, comment_id, body)


@router.delete(
    "/posts/{post_id}/comments/{comment_id}",
    response_model=MessageResponse,
    summary="Delete comment",
)
async def delete_comment(
    post_id: str,
    comment_id: str,
    identity: OptionalIdentity,
    comment_service: CommentService = Depends(get_comment_service),
):
    """
    Delete a comment. Only the comment author may do this, not the post author.
    """
    await comment_service.delete_comment(identity, post_id, comment_id)
    return MessageResponse(message="Comment deleted successfully")


@router.get(
    "/comments/author/{author}",
    response_model=list[CommentResponse],
    summary="List comments by author",
)
async def list_comments_by_author(
    author: str,
    comment_service: CommentService = Depends(get_comment_service),
):
    """All comments written by a user across every post."""
    return await comment_service.list_comments_by_author(author)
