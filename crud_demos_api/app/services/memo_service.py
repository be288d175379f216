"""
Business logic for memos.
"""

import logging
from typing import List, Optional

from crud_demos_api.app.core.repository import InMemoryRepository, utcnow
from crud_demos_api.app.schemas.base import changes_from
from crud_demos_api.app.schemas.memo import MemoCreate, MemoRead, MemoUpdate

logger = logging.getLogger(__name__)


class MemoService:
    """メモの作成・取得・更新・削除を扱うサービス."""

    def __init__(self, repository: Optional[InMemoryRepository[MemoRead]] = None) -> None:
        self.repository = repository if repository is not None else InMemoryRepository(MemoRead, "memo")

    async def create_memo(self, data: MemoCreate) -> MemoRead:
        now = utcnow()
        memo = self.repository.create(**data.model_dump(), created_at=now, updated_at=now)
        logger.info("Created memo %s", memo.id)
        return memo

    async def list_memos(self) -> List[MemoRead]:
        return self.repository.list()

    async def get_memo(self, memo_id: int) -> MemoRead:
        return self.repository.get(memo_id)

    async def update_memo(self, memo_id: int, data: MemoUpdate) -> MemoRead:
        memo = self.repository.update(memo_id, changes_from(data))
        logger.info("Updated memo %s", memo_id)
        return memo

    async def delete_memo(self, memo_id: int) -> None:
        self.repository.delete(memo_id)
        logger.info("Deleted memo %s", memo_id)
