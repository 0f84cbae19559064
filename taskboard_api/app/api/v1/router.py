"""
Top‑level router for version 1 of the API.

Aggregates the domain routers under a common prefix.  The members and
todos routers declare full paths themselves because they span both
``/boards/{id}/...`` and standalone resources.
"""

from fastapi import APIRouter

from .endpoints import auth, boards, members, todos

router = APIRouter()

router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(boards.router, prefix="/boards", tags=["boards"])
router.include_router(members.router, tags=["members"])
router.include_router(todos.router, tags=["todos"])
