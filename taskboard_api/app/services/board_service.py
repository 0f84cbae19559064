"""
Service for creating, editing and deleting boards.

Creating a board also makes its creator an ``admin`` member; deleting
a board removes every membership and todo that belongs to it.  Both
happen under the store lock, so readers see either none or all of the
change.
"""

import logging
from typing import Optional

from ..core.store import EntityKind, EntityStore
from ..schemas.board import Board, BoardColor, BoardCreate, BoardUpdate
from ..schemas.member import MemberRole, MembershipCreate
from .member_service import MemberService

logger = logging.getLogger(__name__)


class BoardService:
    """Multi‑step writes for boards."""

    def __init__(self, store: EntityStore) -> None:
        self.store = store
        self.members = MemberService(store)

    def create_board(self, data: BoardCreate) -> Board:
        with self.store.lock:
            handle = self.store.insert(
                EntityKind.BOARD,
                {
                    "title": data.title,
                    "description": data.description,
                    "color": data.color or BoardColor.PRIMARY,
                    "created_by": data.created_by,
                    "created_at": self.store.now(),
                },
            )
            self.members.add_member(
                MembershipCreate(board_id=handle, account_id=data.created_by, role=MemberRole.ADMIN)
            )
            board = self.store.get(EntityKind.BOARD, handle)
        logger.info("Account %s created board %s '%s'", data.created_by, board.id, board.title)
        return board

    def update_board(self, board_id: int, updates: BoardUpdate) -> Optional[Board]:
        """Apply the fields present in ``updates``; ``None`` if the board is missing."""
        changes = updates.model_dump(exclude_unset=True)
        with self.store.lock:
            board = self.store.get(EntityKind.BOARD, board_id)
            if board is None:
                return None
            updated = board.model_copy(update=changes)
            self.store.update(EntityKind.BOARD, updated)
        logger.info("Board %s updated: %s", board_id, sorted(changes))
        return updated

    def delete_board(self, board_id: int) -> bool:
        """Delete a board together with its memberships and todos."""
        with self.store.lock:
            if not self.store.delete(EntityKind.BOARD, board_id):
                return False
            members = [m.id for m in self.store.enumerate(EntityKind.MEMBERSHIP) if m.board_id == board_id]
            todos = [t.id for t in self.store.enumerate(EntityKind.TODO) if t.board_id == board_id]
            for handle in members:
                self.store.delete(EntityKind.MEMBERSHIP, handle)
            for handle in todos:
                self.store.delete(EntityKind.TODO, handle)
        logger.info(
            "Board %s deleted with %d membership(s) and %d todo(s)", board_id, len(members), len(todos)
        )
        return True
