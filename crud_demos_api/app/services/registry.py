"""
Per-application service registry.

``ServiceRegistry.from_settings`` builds one service (and therefore one
repository) per resource.  ``create_app`` stores the registry on
``app.state.services`` so that every application instance, including
each one created by the test suite, starts from empty stores.

Endpoints obtain their service through the ``get_*_service``
dependencies below, e.g.::

    async def list_memos(service: MemoService = Depends(get_memo_service)):
        ...
"""

from dataclasses import dataclass

from fastapi import Request

from crud_demos_api.app.core.config import Settings
from crud_demos_api.app.core.repository import InMemoryRepository
from crud_demos_api.app.schemas.comment import CommentRead
from crud_demos_api.app.schemas.file import FileRead
from crud_demos_api.app.schemas.memo import MemoRead
from crud_demos_api.app.schemas.post import PostRead
from crud_demos_api.app.schemas.profile import ProfileRead
from crud_demos_api.app.schemas.task import TaskRead
from crud_demos_api.app.schemas.user import UserRead
from crud_demos_api.app.services.comment_service import CommentService
from crud_demos_api.app.services.file_service import FileService
from crud_demos_api.app.services.memo_service import MemoService
from crud_demos_api.app.services.post_service import PostService
from crud_demos_api.app.services.profile_service import ProfileService
from crud_demos_api.app.services.task_service import TaskService
from crud_demos_api.app.services.user_service import UserService


@dataclass
class ServiceRegistry:
    """All resource services of one application instance."""

    posts: PostService
    comments: CommentService
    files: FileService
    memos: MemoService
    tasks: TaskService
    users: UserService
    profiles: ProfileService

    @classmethod
    def from_settings(cls, settings: Settings) -> "ServiceRegistry":
        def repo(model, resource):
            return InMemoryRepository(
                model,
                resource,
                id_strategy=settings.id_strategy,
                locale=settings.locale,
            )

        return cls(
            posts=PostService(repo(PostRead, "post")),
            comments=CommentService(repo(CommentRead, "comment")),
            files=FileService(
                settings.upload_dir,
                repo(FileRead, "file"),
                metadata_snapshot=settings.files_metadata_snapshot,
            ),
            memos=MemoService(repo(MemoRead, "memo")),
            tasks=TaskService(repo(TaskRead, "task")),
            users=UserService(repo(UserRead, "user")),
            profiles=ProfileService(repo(ProfileRead, "profile")),
        )


def get_services(request: Request) -> ServiceRegistry:
    return request.app.state.services


def get_post_service(request: Request) -> PostService:
    return get_services(request).posts


def get_comment_service(request: Request) -> CommentService:
    return get_services(request).comments


def get_file_service(request: Request) -> FileService:
    return get_services(request).files


def get_memo_service(request: Request) -> MemoService:
    return get_services(request).memos


def get_task_service(request: Request) -> TaskService:
    return get_services(request).tasks


def get_user_service(request: Request) -> UserService:
    return get_services(request).users


def get_profile_service(request: Request) -> ProfileService:
    return get_services(request).profiles
