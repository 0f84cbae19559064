"""
Board endpoints for API v1.

Every route requires a bearer token.  The boards listed are those the
caller created or is a member of; a new board is owned by the caller,
who becomes its first admin member.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from taskboard_api.app.api.deps import get_board_service, get_query_service
from taskboard_api.app.core.security import get_current_account
from taskboard_api.app.schemas.account import Account
from taskboard_api.app.schemas.board import (
    Board,
    BoardCreate,
    BoardCreateRequest,
    BoardUpdate,
    BoardWithCounts,
    BoardWithMembers,
)
from taskboard_api.app.services.board_service import BoardService
from taskboard_api.app.services.query_service import QueryService

router = APIRouter()


@router.get("/", response_model=List[BoardWithCounts])
def list_boards(
    current: Account = Depends(get_current_account),
    queries: QueryService = Depends(get_query_service),
) -> List[BoardWithCounts]:
    return queries.list_boards_for_account(current.id)


@router.post("/", response_model=Board, status_code=status.HTTP_201_CREATED)
def create_board(
    payload: BoardCreateRequest,
    current: Account = Depends(get_current_account),
    boards: BoardService = Depends(get_board_service),
) -> Board:
    return boards.create_board(BoardCreate(**payload.model_dump(), created_by=current.id))


@router.get("/{board_id}", response_model=BoardWithMembers)
def get_board(
    board_id: int,
    current: Account = Depends(get_current_account),
    queries: QueryService = Depends(get_query_service),
) -> BoardWithMembers:
    board = queries.get_board_with_members(board_id)
    if board is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Board not found")
    return board


@router.put("/{board_id}", response_model=Board)
def update_board(
    board_id: int,
    payload: BoardUpdate,
    current: Account = Depends(get_current_account),
    boards: BoardService = Depends(get_board_service),
) -> Board:
    """Change title, description and/or color; omitted fields keep their value."""
    board = boards.update_board(board_id, payload)
    if board is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Board not found")
    return board


@router.delete("/{board_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_board(
    board_id: int,
    current: Account = Depends(get_current_account),
    boards: BoardService = Depends(get_board_service),
) -> None:
    """Delete the board with all of its memberships and todos."""
    if not boards.delete_board(board_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Board not found")
