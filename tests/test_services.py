"""
Tests for the service layer used directly, without HTTP.
"""

import os

import pytest

from crud_demos_api.app.core.config import Settings
from crud_demos_api.app.core.repository import InMemoryRepository, NotFoundError
from crud_demos_api.app.schemas.comment import CommentCreate
from crud_demos_api.app.schemas.file import FileUpdate
from crud_demos_api.app.schemas.memo import MemoCreate, MemoUpdate
from crud_demos_api.app.schemas.post import PostCreate, PostRead, PostUpdate
from crud_demos_api.app.schemas.profile import ProfileCreate
from crud_demos_api.app.schemas.task import TaskCreate
from crud_demos_api.app.services.comment_service import CommentService
from crud_demos_api.app.services.file_service import FileService, generate_file_name
from crud_demos_api.app.services.memo_service import MemoService
from crud_demos_api.app.services.post_service import PostService
from crud_demos_api.app.services.profile_service import ProfileService
from crud_demos_api.app.services.registry import ServiceRegistry
from crud_demos_api.app.services.task_service import TaskService


@pytest.mark.asyncio
async def test_post_service_round_trip():
    service = PostService()
    post = await service.create_post(PostCreate(title="A", content="x"))
    updated = await service.update_post(post.id, PostUpdate(content="y"))
    assert updated.title == "A"
    assert updated.content == "y"
    assert updated.updated_at is not None
    assert await service.delete_post(post.id) == updated
    with pytest.raises(NotFoundError):
        await service.get_post(post.id)


@pytest.mark.asyncio
async def test_update_ignores_explicit_nulls():
    service = MemoService()
    memo = await service.create_memo(MemoCreate(title="t", content="c"))
    updated = await service.update_memo(memo.id, MemoUpdate(title=None, content="d"))
    assert updated.title == "t"
    assert updated.content == "d"


@pytest.mark.asyncio
async def test_comment_scoping_never_leaks_other_posts():
    service = CommentService()
    for post_id in (1, 2, 1, 3, 2):
        await service.create_comment(post_id, CommentCreate(content=f"on {post_id}"))
    for post_id in (1, 2, 3):
        comments = await service.list_comments(post_id)
        assert all(c.post_id == post_id for c in comments)
        for comment in await service.list_comments(post_id):
            for other in {1, 2, 3} - {post_id}:
                with pytest.raises(NotFoundError):
                    await service.get_comment(other, comment.id)


@pytest.mark.asyncio
async def test_task_complete():
    service = TaskService()
    task = await service.create_task(TaskCreate(title="t"))
    assert task.is_completed is False
    assert (await service.complete_task(task.id)).is_completed is True
    await service.delete_task(task.id)
    with pytest.raises(NotFoundError, match="タスクID: 1"):
        await service.complete_task(task.id)


@pytest.mark.asyncio
async def test_profile_by_user():
    service = ProfileService()
    await service.create_profile(ProfileCreate(user_id=4, bio="b"))
    assert (await service.get_profile_by_user(4)).bio == "b"
    with pytest.raises(NotFoundError) as exc_info:
        await service.get_profile_by_user(5)
    assert exc_info.value.record_id == 5


@pytest.mark.asyncio
async def test_file_service_lifecycle(tmp_path):
    service = FileService(str(tmp_path / "up"))
    record = await service.create_file(b"data", "notes.md", "text/markdown")
    assert record.size == 4
    assert await service.read_content(record.id) == b"data"
    updated = await service.update_file(record.id, FileUpdate(original_name="renamed.md"))
    assert updated.original_name == "renamed.md"
    assert updated.file_name == record.file_name
    deleted = await service.delete_file(record.id)
    assert not os.path.exists(deleted.path)
    assert await service.list_files() == []


@pytest.mark.asyncio
async def test_file_service_defaults(tmp_path):
    service = FileService(str(tmp_path))
    record = await service.create_file(b"", None)
    assert record.original_name == "upload"
    assert record.mime_type == "application/octet-stream"
    assert record.size == 0


def test_generate_file_name_keeps_extension():
    name = generate_file_name("photo.JPG")
    stem, ext = os.path.splitext(name)
    assert ext == ".JPG"
    millis, suffix = stem.split("-")
    assert millis.isdigit() and suffix.isdigit()


def test_service_keeps_empty_injected_repository():
    repository = InMemoryRepository(PostRead, "post", id_strategy="length", locale="en")
    assert len(repository) == 0
    assert PostService(repository).repository is repository


def test_registry_passes_settings_to_every_repository(tmp_path):
    registry = ServiceRegistry.from_settings(
        Settings(upload_dir=str(tmp_path), id_strategy="length", locale="en")
    )
    services = [
        registry.posts,
        registry.comments,
        registry.files,
        registry.memos,
        registry.tasks,
        registry.users,
        registry.profiles,
    ]
    for service in services:
        assert service.repository.id_strategy == "length"
        assert service.repository.locale == "en"


@pytest.mark.asyncio
async def test_registry_locale_reaches_error_messages(tmp_path):
    registry = ServiceRegistry.from_settings(Settings(upload_dir=str(tmp_path), locale="en"))
    with pytest.raises(NotFoundError) as exc_info:
        await registry.memos.get_memo(9)
    assert str(exc_info.value) == "Memo with ID 9 not found"
