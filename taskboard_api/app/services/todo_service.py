"""
Service for todos.

Every update refreshes ``updated_at``, even when the submitted values
equal the current ones.  Status changes are unrestricted: any status
may follow any other.
"""

import logging
from typing import Optional

from ..core.store import EntityKind, EntityStore
from ..schemas.todo import Todo, TodoCreate, TodoPriority, TodoStatus, TodoUpdate

logger = logging.getLogger(__name__)


class TodoService:
    """Create, update and delete todos."""

    def __init__(self, store: EntityStore) -> None:
        self.store = store

    def create_todo(self, data: TodoCreate) -> Todo:
        with self.store.lock:
            now = self.store.now()
            handle = self.store.insert(
                EntityKind.TODO,
                {
                    "board_id": data.board_id,
                    "title": data.title,
                    "description": data.description,
                    "due_date": data.due_date,
                    "priority": data.priority or TodoPriority.MEDIUM,
                    "status": data.status or TodoStatus.TODO,
                    "assigned_to": data.assigned_to,
                    "created_by": data.created_by,
                    "created_at": now,
                    "updated_at": now,
                },
            )
            todo = self.store.get(EntityKind.TODO, handle)
        logger.info("Todo %s created on board %s", todo.id, todo.board_id)
        return todo

    def update_todo(self, todo_id: int, updates: TodoUpdate) -> Optional[Todo]:
        changes = updates.model_dump(exclude_unset=True)
        with self.store.lock:
            todo = self.store.get(EntityKind.TODO, todo_id)
            if todo is None:
                return None
            updated = todo.model_copy(update={**changes, "updated_at": self.store.now()})
            self.store.update(EntityKind.TODO, updated)
        logger.info("Todo %s updated: %s", todo_id, sorted(changes))
        return updated

    def delete_todo(self, todo_id: int) -> bool:
        deleted = self.store.delete(EntityKind.TODO, todo_id)
        if deleted:
            logger.info("Todo %s deleted", todo_id)
        return deleted
