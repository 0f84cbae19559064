"""
Todo endpoints for API v1.

Todos are listed and created under their board and addressed by their
own handle afterwards.  ``PUT /todos/{id}`` is a partial update: send
only the fields to change, ``null`` clears description, due date or
assignee.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from taskboard_api.app.api.deps import get_query_service, get_todo_service
from taskboard_api.app.core.security import get_current_account
from taskboard_api.app.schemas.account import Account
from taskboard_api.app.schemas.todo import Todo, TodoCreate, TodoCreateRequest, TodoUpdate, TodoWithAssignee
from taskboard_api.app.services.query_service import QueryService
from taskboard_api.app.services.todo_service import TodoService

router = APIRouter()


@router.get(
    "/boards/{board_id}/todos",
    response_model=List[TodoWithAssignee],
    response_model_exclude_unset=True,
)
def list_todos(
    board_id: int,
    current: Account = Depends(get_current_account),
    queries: QueryService = Depends(get_query_service),
) -> List[TodoWithAssignee]:
    """Todos of the board; ``assignee`` is only present when one is set."""
    return queries.list_todos(board_id)


@router.post("/boards/{board_id}/todos", response_model=Todo, status_code=status.HTTP_201_CREATED)
def create_todo(
    board_id: int,
    payload: TodoCreateRequest,
    current: Account = Depends(get_current_account),
    todos: TodoService = Depends(get_todo_service),
    queries: QueryService = Depends(get_query_service),
) -> Todo:
    if queries.get_board(board_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Board not found")
    return todos.create_todo(TodoCreate(**payload.model_dump(), board_id=board_id, created_by=current.id))


@router.get("/todos/{todo_id}", response_model=Todo)
def get_todo(
    todo_id: int,
    current: Account = Depends(get_current_account),
    queries: QueryService = Depends(get_query_service),
) -> Todo:
    todo = queries.get_todo(todo_id)
    if todo is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Todo not found")
    return todo


@router.put("/todos/{todo_id}", response_model=Todo)
def update_todo(
    todo_id: int,
    payload: TodoUpdate,
    current: Account = Depends(get_current_account),
    todos: TodoService = Depends(get_todo_service),
) -> Todo:
    todo = todos.update_todo(todo_id, payload)
    if todo is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Todo not found")
    return todo


@router.delete("/todos/{todo_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_todo(
    todo_id: int,
    current: Account = Depends(get_current_account),
    todos: TodoService = Depends(get_todo_service),
) -> None:
    if not todos.delete_todo(todo_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Todo not found")
