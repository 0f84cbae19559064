"""
In‑process entity store.

The store holds the four entity collections (accounts, boards,
memberships, todos) and hands out identifiers.  It is the single owner
of entity state: services read and write through ``get``, ``insert``,
``update``, ``delete`` and ``enumerate`` and never keep their own
copies.  Records are frozen pydantic models, so a caller holding a
record cannot change what the store sees.

Handles are assigned per kind starting at 1, increase monotonically
and are never reused, even after a delete.  Nothing here enforces
referential integrity; cascades are the services' job.

Services run every operation under ``store.lock`` so that multi‑step
writes (a board plus its bootstrap membership, a board delete plus its
cascade) are never observed half done.  The lock is re‑entrant because
one service operation may call another.
"""

import threading
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional, Type

from fastapi import Request
from pydantic import BaseModel

from ..schemas.account import Account
from ..schemas.board import Board
from ..schemas.member import Membership
from ..schemas.todo import Todo


class EntityKind(str, Enum):
    ACCOUNT = "account"
    BOARD = "board"
    MEMBERSHIP = "membership"
    TODO = "todo"


ENTITY_MODELS: Dict[EntityKind, Type[BaseModel]] = {
    EntityKind.ACCOUNT: Account,
    EntityKind.BOARD: Board,
    EntityKind.MEMBERSHIP: Membership,
    EntityKind.TODO: Todo,
}


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class EntityStore:
    """Handle‑indexed collections for every entity kind."""

    def __init__(self, clock: Optional[Callable[[], datetime]] = None) -> None:
        self.lock = threading.RLock()
        self._clock = clock or _utcnow
        self._last_timestamp: Optional[datetime] = None
        self._rows: Dict[EntityKind, Dict[int, BaseModel]] = {kind: {} for kind in EntityKind}
        self._next_handle: Dict[EntityKind, int] = {kind: 1 for kind in EntityKind}

    def now(self) -> datetime:
        """Return the current time, strictly later than any earlier call."""
        with self.lock:
            current = self._clock()
            if self._last_timestamp is not None and current <= self._last_timestamp:
                current = self._last_timestamp + timedelta(microseconds=1)
            self._last_timestamp = current
            return current

    def get(self, kind: EntityKind, handle: int) -> Optional[Any]:
        return self._rows[kind].get(handle)

    def insert(self, kind: EntityKind, data: Mapping[str, Any]) -> int:
        """Build a record of ``kind`` from ``data`` and store it under a new handle.

        Returns the assigned handle.  Pydantic validation errors propagate
        unchanged; the handle counter only advances once the record
        has been built.
        """
        with self.lock:
            handle = self._next_handle[kind]
            record = ENTITY_MODELS[kind](**dict(data), id=handle)
            self._next_handle[kind] = handle + 1
            self._rows[kind][handle] = record
            return handle

    def update(self, kind: EntityKind, record: BaseModel) -> bool:
        """Replace the stored record that has the same handle as ``record``."""
        with self.lock:
            rows = self._rows[kind]
            handle = getattr(record, "id")
            if handle not in rows:
                return False
            rows[handle] = record
            return True

    def delete(self, kind: EntityKind, handle: int) -> bool:
        with self.lock:
            return self._rows[kind].pop(handle, None) is not None

    def enumerate(self, kind: EntityKind) -> List[Any]:
        """Snapshot of every record of ``kind``, in insertion order."""
        with self.lock:
            return list(self._rows[kind].values())


def get_store(request: Request) -> EntityStore:
    """FastAPI dependency returning the store owned by the running app."""
    return request.app.state.store
