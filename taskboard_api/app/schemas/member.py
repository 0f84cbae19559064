"""
Pydantic models for board memberships.

A membership grants one account a role on one board.  At most one
membership exists per (board, account) pair.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class MemberRole(str, Enum):
    VIEWER = "viewer"
    EDITOR = "editor"
    ADMIN = "admin"


class MembershipCreate(BaseModel):
    board_id: int
    account_id: int
    role: Optional[MemberRole] = None


class MemberAddRequest(BaseModel):
    """Client payload for ``POST /boards/{id}/members``."""

    account_id: int
    role: Optional[MemberRole] = None


class MemberRoleUpdate(BaseModel):
    role: MemberRole


class Membership(BaseModel):
    """Membership record held by the entity store."""

    model_config = ConfigDict(frozen=True)

    id: int
    board_id: int
    account_id: int
    role: MemberRole = MemberRole.EDITOR
