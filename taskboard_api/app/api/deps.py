"""
FastAPI dependencies wiring request handlers to the services.

Services are cheap wrappers around the app's ``EntityStore`` and are
built per request.
"""

from typing import Optional

from fastapi import Depends, HTTPException, Request, status

from ..core.identity import IdentityVerifier
from ..core.store import EntityStore, get_store
from ..services.account_service import AccountService
from ..services.board_service import BoardService
from ..services.member_service import MemberService
from ..services.query_service import QueryService
from ..services.todo_service import TodoService


def get_query_service(store: EntityStore = Depends(get_store)) -> QueryService:
    return QueryService(store)


def get_account_service(store: EntityStore = Depends(get_store)) -> AccountService:
    return AccountService(store)


def get_board_service(store: EntityStore = Depends(get_store)) -> BoardService:
    return BoardService(store)


def get_member_service(store: EntityStore = Depends(get_store)) -> MemberService:
    return MemberService(store)


def get_todo_service(store: EntityStore = Depends(get_store)) -> TodoService:
    return TodoService(store)


def get_identity_verifier(request: Request) -> IdentityVerifier:
    verifier: Optional[IdentityVerifier] = request.app.state.identity_verifier
    if verifier is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Phone sign-in is not configured",
        )
    return verifier
