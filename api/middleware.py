"""
Global middleware — request timer and route guard.
"""

from __future__ import annotations

import logging
import re
import time
from urllib.parse import quote

from fastapi import FastAPI, Request
from fastapi.responses import RedirectResponse

from auth.dependencies import get_session_token
from auth.jwt import verify_token
from config.settings import config

logger = logging.getLogger(__name__)

# Paths reachable without a session: sign-in pages, the auth API,
# the diagnostic API and static assets.
PUBLIC_PATHS = re.compile(
    r"^/(?:auth|api/auth|api/diagnostic-accounts|static)(?:/|$)|^/favicon\.ico$"
)


def is_public_path(path: str) -> bool:
    return PUBLIC_PATHS.match(path) is not None


def register_middleware(app: FastAPI) -> None:
    """Attach any app-level middleware."""

    @app.middleware("http")
    async def route_guard(request: Request, call_next):
        path = request.url.path
        if is_public_path(path):
            return await call_next(request)

        if verify_token(get_session_token(request)) is None:
            logger.debug("Unauthenticated %s %s, redirecting to sign-in", request.method, path)
            target = path
            if request.url.query:
                target = f"{path}?{request.url.query}"
            return RedirectResponse(
                url=f"{config.signin_path}?callbackUrl={quote(target, safe='')}",
            )
        return await call_next(request)

    @app.middleware("http")
    async def request_timer(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        elapsed = time.perf_counter() - start
        response.headers["X-Process-Time"] = f"{elapsed:.4f}"
        logger.debug("%s %s — %.3fs", request.method, request.url.path, elapsed)
        return response
