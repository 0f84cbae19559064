"""
Read‑only queries and projections over the entity store.

The store has no indexes beyond the entity handle, so every lookup by
another field is a full scan of the relevant collection.  None of the
methods here write to the store.

Cross‑entity references are plain handles and may dangle (an account
referenced by a membership or a todo might be missing).  Such
references are tolerated: the member is left out of
``BoardWithMembers.members`` and the todo is projected without an
assignee.
"""

import logging
from typing import List, Optional, Set

from ..core.store import EntityKind, EntityStore
from ..schemas.account import Account, AccountRead
from ..schemas.board import Board, BoardWithCounts, BoardWithMembers
from ..schemas.member import Membership
from ..schemas.todo import Todo, TodoWithAssignee

logger = logging.getLogger(__name__)


class QueryService:
    """Joins and lookups across accounts, boards, memberships and todos."""

    def __init__(self, store: EntityStore) -> None:
        self.store = store

    # ------------------------------------------------------------------
    # Accounts
    # ------------------------------------------------------------------
    def get_account(self, account_id: int) -> Optional[Account]:
        return self.store.get(EntityKind.ACCOUNT, account_id)

    def get_account_by_username(self, username: str) -> Optional[Account]:
        with self.store.lock:
            return next(
                (a for a in self.store.enumerate(EntityKind.ACCOUNT) if a.username == username),
                None,
            )

    def get_account_by_phone(self, phone_number: str) -> Optional[Account]:
        with self.store.lock:
            return next(
                (a for a in self.store.enumerate(EntityKind.ACCOUNT) if a.phone_number == phone_number),
                None,
            )

    # ------------------------------------------------------------------
    # Boards
    # ------------------------------------------------------------------
    def get_board(self, board_id: int) -> Optional[Board]:
        return self.store.get(EntityKind.BOARD, board_id)

    def list_boards(self) -> List[BoardWithCounts]:
        """Every board in the store, with its todo and member counts."""
        with self.store.lock:
            return [self._with_counts(board) for board in self.store.enumerate(EntityKind.BOARD)]

    def list_boards_for_account(self, account_id: int) -> List[BoardWithCounts]:
        """Boards the account created or is a member of, each listed once.

        Boards created by the account come first, in creation order,
        followed by boards reached only through a membership.
        """
        with self.store.lock:
            board_ids: List[int] = []
            seen: Set[int] = set()
            created = (b.id for b in self.store.enumerate(EntityKind.BOARD) if b.created_by == account_id)
            joined = (
                m.board_id for m in self.store.enumerate(EntityKind.MEMBERSHIP) if m.account_id == account_id
            )
            for board_id in (*created, *joined):
                if board_id not in seen:
                    seen.add(board_id)
                    board_ids.append(board_id)

            boards: List[BoardWithCounts] = []
            for board_id in board_ids:
                board = self.store.get(EntityKind.BOARD, board_id)
                if board is None:
                    # A membership can only outlive its board if a cascade was skipped.
                    logger.warning("Membership of account %s points at missing board %s", account_id, board_id)
                    continue
                boards.append(self._with_counts(board))
            return boards

    def get_board_with_members(self, board_id: int) -> Optional[BoardWithMembers]:
        with self.store.lock:
            board = self.store.get(EntityKind.BOARD, board_id)
            if board is None:
                return None
            members: List[AccountRead] = []
            for membership in self.list_members(board_id):
                account = self.store.get(EntityKind.ACCOUNT, membership.account_id)
                if account is None:
                    logger.warning(
                        "Board %s membership %s references missing account %s",
                        board_id,
                        membership.id,
                        membership.account_id,
                    )
                    continue
                members.append(AccountRead.model_validate(account))
            return BoardWithMembers(**board.model_dump(), members=members)

    def _with_counts(self, board: Board) -> BoardWithCounts:
        todo_count = sum(1 for t in self.store.enumerate(EntityKind.TODO) if t.board_id == board.id)
        member_count = sum(1 for m in self.store.enumerate(EntityKind.MEMBERSHIP) if m.board_id == board.id)
        return BoardWithCounts(**board.model_dump(), todo_count=todo_count, member_count=member_count)

    # ------------------------------------------------------------------
    # Memberships
    # ------------------------------------------------------------------
    def list_members(self, board_id: int) -> List[Membership]:
        return [m for m in self.store.enumerate(EntityKind.MEMBERSHIP) if m.board_id == board_id]

    def get_membership(self, board_id: int, account_id: int) -> Optional[Membership]:
        with self.store.lock:
            return next(
                (
                    m
                    for m in self.store.enumerate(EntityKind.MEMBERSHIP)
                    if m.board_id == board_id and m.account_id == account_id
                ),
                None,
            )

    # ------------------------------------------------------------------
    # Todos
    # ------------------------------------------------------------------
    def get_todo(self, todo_id: int) -> Optional[Todo]:
        return self.store.get(EntityKind.TODO, todo_id)

    def list_todos(self, board_id: int) -> List[TodoWithAssignee]:
        """Todos of a board; ``assignee`` is resolved when ``assigned_to`` is set.

        When there is no assignee (or it no longer resolves) the field is
        left unset rather than set to ``None``.
        """
        with self.store.lock:
            todos: List[TodoWithAssignee] = []
            for todo in self.store.enumerate(EntityKind.TODO):
                if todo.board_id != board_id:
                    continue
                fields = todo.model_dump()
                if todo.assigned_to is not None:
                    account = self.store.get(EntityKind.ACCOUNT, todo.assigned_to)
                    if account is not None:
                        fields["assignee"] = AccountRead.model_validate(account)
                todos.append(TodoWithAssignee(**fields))
            return todos
