import dataclasses
from itertools import count
from threading import Lock
from typing import Any, Callable, Dict, Generic, Optional, Protocol, TypeVar, runtime_checkable

# --- entities must expose .id ---
@runtime_checkable
class HasId(Protocol):
    id: int

ModelT = TypeVar("ModelT", bound=HasId)

IdGenerator = Callable[[Dict[int, Any]], int]


def count_based_ids() -> IdGenerator:
    """
    Next id is the live entry count + 1.

    Deleting an entry lowers the count, so a later create can land on an id
    that is still in use and overwrite it.
    """
    def _next(rows: Dict[int, Any]) -> int:
        return len(rows) + 1
    return _next


def sequential_ids(start: int = 1) -> IdGenerator:
    """Strictly increasing ids, never reused after deletes."""
    counter = count(start)

    def _next(rows: Dict[int, Any]) -> int:
        return next(counter)
    return _next


class BaseRepository(Generic[ModelT]):
    """
    In-memory store keyed by integer id.

    Every operation holds one lock so handlers running on worker threads
    never interleave on the mapping or on id assignment.
    """

    def __init__(self, id_generator: Optional[IdGenerator] = None) -> None:
        self._rows: Dict[int, ModelT] = {}
        self._lock = Lock()
        self._next_id = id_generator or count_based_ids()

    def add(self, entity: ModelT) -> ModelT:
        with self._lock:
            stored = dataclasses.replace(entity, id=self._next_id(self._rows))
            self._rows[stored.id] = stored
            return stored

    def get_by_id(self, id_: int) -> Optional[ModelT]:
        with self._lock:
            return self._rows.get(id_)

    def list_all(self) -> list[ModelT]:
        with self._lock:
            return list(self._rows.values())

    def replace(self, id_: int, entity: ModelT) -> Optional[ModelT]:
        with self._lock:
            if id_ not in self._rows:
                return None
            stored = dataclasses.replace(entity, id=id_)
            self._rows[id_] = stored
            return stored

    def delete_by_id(self, id_: int) -> int:
        with self._lock:
            if self._rows.pop(id_, None) is None:
                return 0
            return 1

    def count(self) -> int:
        with self._lock:
            return len(self._rows)

    def clear(self) -> None:
        with self._lock:
            self._rows.clear()
