"""
Pydantic models for todos.

Status may move between any two values (``completed`` back to ``todo``
is how the client toggles completion).  ``TodoUpdate`` follows the
same partial‑update rules as ``BoardUpdate``: ``description``,
``due_date`` and ``assigned_to`` can be cleared with ``null``, the
other fields cannot.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .account import AccountRead


class TodoPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class TodoStatus(str, Enum):
    TODO = "todo"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


class TodoCreate(BaseModel):
    board_id: int
    title: str = Field(..., min_length=1, examples=["Draft agenda"])
    description: Optional[str] = None
    due_date: Optional[datetime] = None
    priority: Optional[TodoPriority] = None
    status: Optional[TodoStatus] = None
    assigned_to: Optional[int] = None
    created_by: int


class TodoCreateRequest(BaseModel):
    """Client payload for ``POST /boards/{id}/todos``."""

    title: str = Field(..., min_length=1, examples=["Draft agenda"])
    description: Optional[str] = None
    due_date: Optional[datetime] = None
    priority: Optional[TodoPriority] = None
    status: Optional[TodoStatus] = None
    assigned_to: Optional[int] = None


class TodoUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    due_date: Optional[datetime] = None
    priority: Optional[TodoPriority] = None
    status: Optional[TodoStatus] = None
    assigned_to: Optional[int] = None

    @model_validator(mode="after")
    def _reject_null_required(self) -> "TodoUpdate":
        for name in ("title", "priority", "status"):
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self


class Todo(BaseModel):
    """Todo record held by the entity store."""

    model_config = ConfigDict(frozen=True)

    id: int
    board_id: int
    title: str
    description: Optional[str] = None
    due_date: Optional[datetime] = None
    priority: TodoPriority = TodoPriority.MEDIUM
    status: TodoStatus = TodoStatus.TODO
    assigned_to: Optional[int] = None
    created_by: int
    created_at: datetime
    updated_at: datetime


class TodoWithAssignee(Todo):
    model_config = ConfigDict(frozen=False)

    assignee: Optional[AccountRead] = None
