"""
Board membership endpoints for API v1.

Adding a member who is already on the board returns the existing
membership with its original role.  Role changes use ``PATCH``.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from taskboard_api.app.api.deps import get_member_service, get_query_service
from taskboard_api.app.core.security import get_current_account
from taskboard_api.app.schemas.account import Account
from taskboard_api.app.schemas.member import MemberAddRequest, MemberRoleUpdate, Membership, MembershipCreate
from taskboard_api.app.services.member_service import MemberService
from taskboard_api.app.services.query_service import QueryService

router = APIRouter()


@router.get("/boards/{board_id}/members", response_model=List[Membership])
def list_members(
    board_id: int,
    current: Account = Depends(get_current_account),
    queries: QueryService = Depends(get_query_service),
) -> List[Membership]:
    return queries.list_members(board_id)


@router.post("/boards/{board_id}/members", response_model=Membership, status_code=status.HTTP_201_CREATED)
def add_member(
    board_id: int,
    payload: MemberAddRequest,
    current: Account = Depends(get_current_account),
    members: MemberService = Depends(get_member_service),
    queries: QueryService = Depends(get_query_service),
) -> Membership:
    if queries.get_board(board_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Board not found")
    if queries.get_account(payload.account_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return members.add_member(MembershipCreate(board_id=board_id, **payload.model_dump()))


@router.patch("/boards/{board_id}/members/{account_id}", response_model=Membership)
def set_member_role(
    board_id: int,
    account_id: int,
    payload: MemberRoleUpdate,
    current: Account = Depends(get_current_account),
    members: MemberService = Depends(get_member_service),
) -> Membership:
    member = members.set_member_role(board_id, account_id, payload.role)
    if member is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Board member not found")
    return member


@router.delete("/boards/{board_id}/members/{account_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_member(
    board_id: int,
    account_id: int,
    current: Account = Depends(get_current_account),
    members: MemberService = Depends(get_member_service),
) -> None:
    if not members.remove_member(board_id, account_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Board member not found")
