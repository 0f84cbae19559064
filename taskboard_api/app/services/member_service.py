"""
Service for board memberships.

A board has at most one membership per account.  Adding a member who
is already on the board returns the existing membership untouched,
including its role: the add is idempotent, not an upsert.  Role
changes go through ``set_member_role``.
"""

import logging
from typing import Optional

from ..core.store import EntityKind, EntityStore
from ..schemas.member import MemberRole, Membership, MembershipCreate
from .query_service import QueryService

logger = logging.getLogger(__name__)


class MemberService:
    """Add, remove and re‑role board members."""

    def __init__(self, store: EntityStore) -> None:
        self.store = store
        self.queries = QueryService(store)

    def add_member(self, data: MembershipCreate) -> Membership:
        with self.store.lock:
            existing = self.queries.get_membership(data.board_id, data.account_id)
            if existing is not None:
                return existing
            handle = self.store.insert(
                EntityKind.MEMBERSHIP,
                {
                    "board_id": data.board_id,
                    "account_id": data.account_id,
                    "role": data.role or MemberRole.EDITOR,
                },
            )
            member = self.store.get(EntityKind.MEMBERSHIP, handle)
        logger.info(
            "Account %s joined board %s as %s", member.account_id, member.board_id, member.role.value
        )
        return member

    def remove_member(self, board_id: int, account_id: int) -> bool:
        with self.store.lock:
            member = self.queries.get_membership(board_id, account_id)
            if member is None:
                return False
            self.store.delete(EntityKind.MEMBERSHIP, member.id)
        logger.info("Account %s removed from board %s", account_id, board_id)
        return True

    def set_member_role(self, board_id: int, account_id: int, role: MemberRole) -> Optional[Membership]:
        with self.store.lock:
            member = self.queries.get_membership(board_id, account_id)
            if member is None:
                return None
            updated = member.model_copy(update={"role": role})
            self.store.update(EntityKind.MEMBERSHIP, updated)
        logger.info("Account %s is now %s on board %s", account_id, role.value, board_id)
        return updated
