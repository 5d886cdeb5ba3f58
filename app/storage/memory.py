# app/storage/memory.py
from typing import Any, Dict, List, Optional

from app.storage.base import RecordT, Repository, Storage
from app.storage.entities import EntitySpec


class MemoryRepository(Repository[RecordT]):
    """Dict-backed repository. Every query is a linear scan."""

    def __init__(self, spec: EntitySpec):
        super().__init__(spec)
        self._items: Dict[str, RecordT] = {}

    def get(self, record_id: str) -> Optional[RecordT]:
        return self._items.get(record_id)

    def delete(self, record_id: str) -> bool:
        return self._items.pop(record_id, None) is not None

    def list(
        self,
        filters: Optional[Dict[str, Any]] = None,
        search: Optional[str] = None,
        offset: int = 0,
        limit: Optional[int] = None,
    ) -> List[RecordT]:
        active = self._active_filters(filters)
        items = [r for r in self._items.values() if self._matches(r, active, search)]
        items = self._sorted(items)

        end = None if limit is None else offset + limit
        return items[offset:end]

    def count(self, filters: Optional[Dict[str, Any]] = None) -> int:
        active = self._active_filters(filters)
        return sum(1 for r in self._items.values() if self._matches(r, active, None))

    def _insert(self, record: RecordT) -> None:
        self._items[record.id] = record

    def _replace(self, record: RecordT) -> None:
        # Re-assigning an existing key keeps its insertion position
        self._items[record.id] = record

    def _matches(
        self, record: RecordT, filters: Dict[str, Any], search: Optional[str]
    ) -> bool:
        for field, value in filters.items():
            if getattr(record, field) != value:
                return False

        if search and self.spec.search_fields:
            needle = search.lower()
            return any(
                needle in (getattr(record, field) or "").lower()
                for field in self.spec.search_fields
            )
        return True

    def _sorted(self, items: List[RecordT]) -> List[RecordT]:
        if self.spec.order_by is None:
            return items

        if self.spec.descending:
            # Ties break on id, matching the SQL backend
            return sorted(
                items, key=lambda r: (getattr(r, self.spec.order_by), r.id), reverse=True
            )
        return sorted(items, key=lambda r: getattr(r, self.spec.order_by))


class MemStorage(Storage):
    """In-process store. No locking: the last write wins."""

    def _make_repository(self, spec: EntitySpec) -> Repository:
        return MemoryRepository(spec)
