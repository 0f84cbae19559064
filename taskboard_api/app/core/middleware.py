"""
HTTP middleware: security headers and a one‑line access log.

``SecurityHeadersMiddleware`` adds browser hardening headers to every
response; the Content‑Security‑Policy is only sent in production,
where the client is served from the same origin.  ``AccessLogMiddleware``
logs ``METHOD path status in Nms`` for API requests.
"""

import logging
import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

SECURITY_HEADERS = {
    "X-XSS-Protection": "1; mode=block",
    "X-Content-Type-Options": "nosniff",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "X-Frame-Options": "SAMEORIGIN",
}

CONTENT_SECURITY_POLICY = (
    "default-src 'self'; script-src 'self' 'unsafe-inline'; style-src 'self' 'unsafe-inline'; "
    "img-src 'self' data:; font-src 'self' data:; connect-src 'self'"
)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, *, production: bool = False):
        super().__init__(app)
        self.production = production

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers.update(SECURITY_HEADERS)
        if self.production:
            response.headers["Content-Security-Policy"] = CONTENT_SECURITY_POLICY
        return response


class AccessLogMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, *, path_prefix: str = "/api"):
        super().__init__(app)
        self.path_prefix = path_prefix
        self._log = logging.getLogger("taskboard_api.access")

    async def dispatch(self, request: Request, call_next):
        path = request.url.path
        if not path.startswith(self.path_prefix):
            return await call_next(request)
        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            self._log.exception("%s %s failed", request.method, path)
            raise
        duration_ms = (time.perf_counter() - start) * 1000.0
        self._log.info("%s %s %s in %.0fms", request.method, path, response.status_code, duration_ms)
        return response
