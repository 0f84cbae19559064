"""
Pydantic models for boards.

``BoardUpdate`` is a partial update: only the fields the client sent
are applied (``model_dump(exclude_unset=True)``).  ``description`` may
be cleared with an explicit ``null``; ``title`` and ``color`` may not.
"""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .account import AccountRead


class BoardColor(str, Enum):
    PRIMARY = "primary"
    SECONDARY = "secondary"
    ACCENT = "accent"
    WARNING = "warning"
    ERROR = "error"


class BoardCreate(BaseModel):
    title: str = Field(..., min_length=1, examples=["Launch Plan"])
    description: Optional[str] = Field(None, examples=["Everything for the release"])
    color: Optional[BoardColor] = None
    created_by: int


class BoardCreateRequest(BaseModel):
    """Client payload for ``POST /boards``; the creator comes from the token."""

    title: str = Field(..., min_length=1, examples=["Launch Plan"])
    description: Optional[str] = None
    color: Optional[BoardColor] = None


class BoardUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    color: Optional[BoardColor] = None

    @model_validator(mode="after")
    def _reject_null_required(self) -> "BoardUpdate":
        for name in ("title", "color"):
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self


class Board(BaseModel):
    """Board record held by the entity store."""

    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    description: Optional[str] = None
    color: BoardColor = BoardColor.PRIMARY
    created_by: int
    created_at: datetime


class BoardWithCounts(Board):
    model_config = ConfigDict(frozen=False)

    todo_count: int
    member_count: int


class BoardWithMembers(Board):
    model_config = ConfigDict(frozen=False)

    members: List[AccountRead]
