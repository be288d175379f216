"""
In-memory repository shared by every resource service.

``InMemoryRepository`` owns an ordered list of pydantic records of a
single model type and provides create/read/update/delete access with
fail-fast semantics: every lookup that misses raises ``NotFoundError``
carrying a localized message that names the requested id.

Lookups are linear scans.  The collections are small demo stores, so
O(n) access is acceptable; create is an O(1) append.

Identifiers are assigned by one of two strategies:

* ``counter`` (default) -- a monotonic counter.  Ids are never reused,
  even after deletions.
* ``length`` -- ``len(store) + 1``.  After a deletion this can hand out
  an id that is still in use by another record.  Kept so that clients
  relying on the historical numbering can opt into it.
"""

from __future__ import annotations

import itertools
import logging
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Generic, List, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel

from .messages import DEFAULT_LOCALE, not_found_message

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)
Predicate = Callable[[Any], bool]

ID_STRATEGIES = ("counter", "length")


def utcnow() -> datetime:
    """Current UTC time, timezone aware."""
    return datetime.now(timezone.utc)


class NotFoundError(ValueError):
    """Raised when no record matches the requested identifier."""

    def __init__(self, resource: str, record_id: int, message: str) -> None:
        super().__init__(message)
        self.resource = resource
        self.record_id = record_id
        self.message = message


class InMemoryRepository(Generic[ModelT]):
    """Ordered in-memory collection of ``model`` records.

    Parameters
    ----------
    model : Type[BaseModel]
        Pydantic model used to build records.  It must declare an
        integer ``id`` field.
    resource : str
        Resource key used to look up the "not found" message
        (``"post"``, ``"memo"``, ...).
    id_strategy : str
        ``"counter"`` or ``"length"``.
    locale : str
        Locale of the "not found" messages.
    """

    def __init__(
        self,
        model: Type[ModelT],
        resource: str,
        *,
        id_strategy: str = "counter",
        locale: str = DEFAULT_LOCALE,
    ) -> None:
        if id_strategy not in ID_STRATEGIES:
            raise ValueError(
                f"Unknown id strategy {id_strategy!r}; expected one of {', '.join(ID_STRATEGIES)}"
            )
        self.model = model
        self.resource = resource
        self.id_strategy = id_strategy
        self.locale = locale
        self._records: List[ModelT] = []
        self._ids = itertools.count(1)

    def __len__(self) -> int:
        return len(self._records)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _next_id(self) -> int:
        if self.id_strategy == "length":
            return len(self._records) + 1
        return next(self._ids)

    def _not_found(self, record_id: int) -> NotFoundError:
        logger.debug("%s %s not found", self.resource, record_id)
        return NotFoundError(
            self.resource,
            record_id,
            not_found_message(self.resource, record_id, self.locale),
        )

    def _index_of(self, record_id: int, where: Optional[Predicate]) -> int:
        for index, record in enumerate(self._records):
            if record.id == record_id and (where is None or where(record)):
                return index
        raise self._not_found(record_id)

    # ------------------------------------------------------------------
    # CRUD
    # ------------------------------------------------------------------
    def create(self, **fields: Any) -> ModelT:
        """Assign an id, build a record from ``fields`` and append it."""
        record = self.model(id=self._next_id(), **fields)
        self._records.append(record)
        return record

    def list(self, predicate: Optional[Predicate] = None) -> List[ModelT]:
        """Return records in insertion order, optionally filtered.

        The returned list is a new list; adding or removing items does
        not affect the store.
        """
        if predicate is None:
            return list(self._records)
        return [record for record in self._records if predicate(record)]

    def find(self, predicate: Predicate) -> Optional[ModelT]:
        """Return the first record matching ``predicate`` or ``None``."""
        for record in self._records:
            if predicate(record):
                return record
        return None

    def get(self, record_id: int, *, where: Optional[Predicate] = None) -> ModelT:
        """Return the record with ``record_id``.

        ``where`` further qualifies the match (e.g. a parent key).
        Raises ``NotFoundError`` when nothing matches.
        """
        return self._records[self._index_of(record_id, where)]

    def update(
        self,
        record_id: int,
        changes: Mapping[str, Any],
        *,
        where: Optional[Predicate] = None,
    ) -> ModelT:
        """Shallow-merge ``changes`` over the record and return it.

        ``updated_at`` is stamped when the model declares that field.
        The ``id`` of a record can not be changed.
        """
        index = self._index_of(record_id, where)
        update: Dict[str, Any] = {k: v for k, v in changes.items() if k != "id"}
        if "updated_at" in self.model.model_fields:
            update["updated_at"] = utcnow()
        record = self._records[index].model_copy(update=update)
        self._records[index] = record
        return record

    def delete(self, record_id: int, *, where: Optional[Predicate] = None) -> ModelT:
        """Remove the record with ``record_id`` and return it."""
        index = self._index_of(record_id, where)
        return self._records.pop(index)

    def clear(self) -> None:
        """Drop all records.  The id counter is not reset."""
        self._records.clear()
