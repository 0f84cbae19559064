"""
Application package initializer.

The service is organised in layers: ``core`` holds configuration,
logging, security primitives and the in‑process entity store;
``services`` implements queries and multi‑step writes against the
store; ``schemas`` defines entity records and request/response
payloads; ``api`` exposes the services over versioned HTTP routes.
"""

from .main import app  # noqa: F401
