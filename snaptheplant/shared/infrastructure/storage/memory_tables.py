# 📄 File: snaptheplant/shared/infrastructure/storage/memory_tables.py

# 🧭 Purpose (Layman Explanation):
# A tiny pretend database table kept in memory, used when the app runs without a real database.

# 🧪 Purpose (Technical Summary):
# Generic keyed row store with autoincrement IDs. Rows are deep-copied on the way in and out
# so callers never mutate stored state by accident.

# 🔗 Dependencies:
# - pydantic domain models

# 🔄 Connected Modules / Calls From:
# - Memory repository implementations in every module
# - snaptheplant.shared.infrastructure.storage.memory (MemoryStorageBackend)

from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T", bound=BaseModel)


class MemoryTable(Generic[T]):
    """In-process table of pydantic entities keyed by integer ID."""

    def __init__(self, model: type):
        self.model = model
        self.rows: Dict[int, T] = {}
        self._next_id = 1

    def insert(self, entity: T) -> T:
        stored = entity.model_copy(update={"id": self._next_id}, deep=True)
        self.rows[self._next_id] = stored
        self._next_id += 1
        return stored.model_copy(deep=True)

    def get(self, row_id: int) -> Optional[T]:
        row = self.rows.get(row_id)
        return row.model_copy(deep=True) if row is not None else None

    def select(
        self,
        predicate: Callable[[T], bool] = lambda row: True,
        key: Optional[Callable[[T], Any]] = None,
        reverse: bool = False,
    ) -> List[T]:
        matches = [row for row in self.rows.values() if predicate(row)]
        matches.sort(key=key or (lambda row: row.id), reverse=reverse)
        return [row.model_copy(deep=True) for row in matches]

    def update(self, row_id: int, changes: Dict[str, Any]) -> Optional[T]:
        row = self.rows.get(row_id)
        if row is None:
            return None
        changes = {k: v for k, v in changes.items() if k != "id"}
        updated = self.model.model_validate({**row.model_dump(), **changes})
        self.rows[row_id] = updated
        return updated.model_copy(deep=True)

    def delete(self, row_id: int) -> bool:
        return self.rows.pop(row_id, None) is not None

    def delete_where(self, predicate: Callable[[T], bool]) -> int:
        doomed = [row_id for row_id, row in self.rows.items() if predicate(row)]
        for row_id in doomed:
            del self.rows[row_id]
        return len(doomed)
