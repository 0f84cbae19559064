"""
Main entrypoint for the Taskboard API.

``create_app`` is the composition root: it configures logging, builds
the ``EntityStore`` every request works against, picks the identity
verifier for phone sign‑in and mounts the versioned routers.  The
module‑level ``app`` lets ASGI servers find the application::

    uvicorn taskboard_api.app.main:app --reload

Tests call ``create_app`` with their own store and verifier.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.identity import FirebaseIdentityVerifier, IdentityVerifier
from .core.logging_config import setup_logging
from .core.middleware import AccessLogMiddleware, SecurityHeadersMiddleware
from .core.store import EntityStore


def _default_verifier() -> Optional[IdentityVerifier]:
    if not settings.firebase_api_key:
        logging.getLogger(__name__).warning("FIREBASE_API_KEY is not set; phone sign-in is disabled")
        return None
    return FirebaseIdentityVerifier(settings.firebase_api_key, timeout=settings.identity_timeout_seconds)


def create_app(
    store: Optional[EntityStore] = None,
    identity_verifier: Optional[IdentityVerifier] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[EntityStore]
        Store holding all entity state.  A fresh, empty store is
        created when omitted.
    identity_verifier : Optional[IdentityVerifier]
        Verifier used by phone sign‑in.  Defaults to the Firebase
        verifier when ``FIREBASE_API_KEY`` is configured.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.store = store if store is not None else EntityStore()
    app.state.identity_verifier = identity_verifier if identity_verifier is not None else _default_verifier()

    app.add_middleware(SecurityHeadersMiddleware, production=settings.is_production)
    app.add_middleware(AccessLogMiddleware)

    app.include_router(v1_router, prefix="/api/v1")
    return app


app = create_app()
