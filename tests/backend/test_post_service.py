"""
Tests for PostService: public lookups and author-only mutations.
"""

import pytest

from app.schemas.post import PostCreate, PostUpdate


class TestCreatePost:
    """Tests for PostService.create_post."""

    @pytest.mark.asyncio
    async def test_create_post_sets_caller_as_author(
        self, post_service, alice, assert_datetime_recent
    ):
        post = await post_service.create_post(alice, PostCreate(title="T", content="C"))

        assert post.id
        assert post.title == "T"
        assert post.content == "C"
        assert post.author == alice.user_id
        assert post.comments == []
        assert_datetime_recent(post.created_at)

    @pytest.mark.asyncio
    async def test_create_post_without_identity_raises_unauthenticated(self, post_service, mock_blog_db):
        from app.core.errors import Unauthenticated

        with pytest.raises(Unauthenticated):
            await post_service.create_post(None, PostCreate(title="T", content="C"))

        assert await mock_blog_db.posts.count_documents({}) == 0


class TestReadPosts:
    """Tests for the public lookups."""

    @pytest.mark.asyncio
    async def test_get_post_returns_stored_post(self, post_service, alice):
        created = await post_service.create_post(alice, PostCreate(title="Hello", content="World"))

        fetched = await post_service.get_post(created.id)

        assert fetched.id == created.id
        assert fetched.title == "Hello"

    @pytest.mark.asyncio
    async def test_get_post_missing_raises_not_found(self, post_service):
        from app.core.errors import NotFound

        with pytest.raises(NotFound):
            await post_service.get_post("507f1f77bcf86cd799439099")

    @pytest.mark.asyncio
    async def test_get_post_malformed_id_raises_not_found(self, post_service):
        from app.core.errors import NotFound

        with pytest.raises(NotFound):
            await post_service.get_post("definitely-not-an-id")

    @pytest.mark.asyncio
    async def test_list_posts_returns_all(self, post_service, alice, bob):
        await post_service.create_post(alice, PostCreate(title="A", content="a"))
        await post_service.create_post(bob, PostCreate(title="B", content="b"))

        posts = await post_service.list_posts()

        assert sorted(p.title for p in posts) == ["A", "B"]

    @pytest.mark.asyncio
    async def test_list_posts_by_title_is_case_insensitive_substring(self, post_service, alice):
        await post_service.create_post(alice, PostCreate(title="Learning Python", content="x"))
        await post_service.create_post(alice, PostCreate(title="Cooking", content="y"))

        posts = await post_service.list_posts_by_title("PYTH")

        assert [p.title for p in posts] == ["Learning Python"]

    @pytest.mark.asyncio
    async def test_list_posts_by_title_treats_pattern_literally(self, post_service, alice):
        await post_service.create_post(alice, PostCreate(title="What is C++?", content="x"))
        await post_service.create_post(alice, PostCreate(title="Cxx", content="y"))

        posts = await post_service.list_posts_by_title("C++")

        assert [p.title for p in posts] == ["What is C++?"]

    @pytest.mark.asyncio
    async def test_list_posts_by_author_filters(self, post_service, alice, bob):
        await post_service.create_post(alice, PostCreate(title="A", content="a"))
        await post_service.create_post(bob, PostCreate(title="B", content="b"))

        posts = await post_service.list_posts_by_author(bob.user_id)

        assert [p.title for p in posts] == ["B"]


class TestUpdatePost:
    """Tests for PostService.update_post."""

    @pytest.mark.asyncio
    async def test_author_update_persists_changes(self, post_service, alice):
        created = await post_service.create_post(alice, PostCreate(title="Old", content="Body"))

        updated = await post_service.update_post(alice, created.id, PostUpdate(title="New"))
        reread = await post_service.get_post(created.id)

        assert updated.title == "New"
        assert reread.title == "New"
        # Omitted field keeps its value
        assert reread.content == "Body"

    @pytest.mark.asyncio
    async def test_update_with_no_fields_leaves_post_unchanged(self, post_service, alice):
        created = await post_service.create_post(alice, PostCreate(title="Old", content="Body"))

        updated = await post_service.update_post(alice, created.id, PostUpdate())

        assert updated.title == "Old"
        assert updated.content == "Body"

    @pytest.mark.asyncio
    async def test_non_author_update_raises_forbidden_and_keeps_post(self, post_service, alice, bob):
        from app.core.errors import Forbidden

        created = await post_service.create_post(alice, PostCreate(title="Old", content="Body"))

        with pytest.raises(Forbidden):
            await post_service.update_post(bob, created.id, PostUpdate(title="Hijacked"))

        assert (await post_service.get_post(created.id)).title == "Old"

    @pytest.mark.asyncio
    async def test_update_missing_post_raises_not_found(self, post_service, alice):
        from app.core.errors import NotFound

        with pytest.raises(NotFound):
            await post_service.update_post(alice, "507f1f77bcf86cd799439099", PostUpdate(title="x"))

    @pytest.mark.asyncio
    async def test_update_without_identity_raises_unauthenticated(self, post_service, alice):
        from app.core.errors import Unauthenticated

        created = await post_service.create_post(alice, PostCreate(title="Old", content="Body"))

        with pytest.raises(Unauthenticated):
            await post_service.update_post(None, created.id, PostUpdate(title="x"))

    def test_update_schema_rejects_empty_strings(self):
        from pydantic import ValidationError

        with pytest.raises(ValidationError):
            PostUpdate(title="")


class TestDeletePost:
    """Tests for PostService.delete_post."""

    @pytest.mark.asyncio
    async def test_author_delete_removes_post(self, post_service, alice):
        from app.core.errors import NotFound

        created = await post_service.create_post(alice, PostCreate(title="T", content="C"))

        await post_service.delete_post(alice, created.id)

        with pytest.raises(NotFound):
            await post_service.get_post(created.id)

    @pytest.mark.asyncio
    async def test_non_author_delete_raises_forbidden(self, post_service, alice, bob):
        from app.core.errors import Forbidden

        created = await post_service.create_post(alice, PostCreate(title="T", content="C"))

        with pytest.raises(Forbidden):
            await post_service.delete_post(bob, created.id)

        assert (await post_service.get_post(created.id)).id == created.id
