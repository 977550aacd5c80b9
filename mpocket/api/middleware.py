"""
Access Gates
============

ASGI middleware run before any route handler. Neither gate touches the
store, so a rejected request never reaches MongoDB.

Registration order matters: Starlette runs the last added middleware first,
so register_gates() adds the content-type gate before the auth gate.
"""
import hmac
import logging
from typing import Iterable, Optional

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from starlette.datastructures import Headers
from starlette.types import ASGIApp, Receive, Scope, Send

logger = logging.getLogger(__name__)

UNAUTHORIZED_MESSAGE = "❌ Unauthorized Access"
CONTENT_TYPE_MESSAGE = "❌ Content-Type must be application/json"

# Paths served without passing through the gates
OPEN_PATHS = frozenset({"/", "/health", "/docs", "/docs/oauth2-redirect", "/redoc", "/openapi.json"})


class _GateMiddleware:
    """Base for gates: skips non-HTTP scopes and open paths."""

    def __init__(self, app: ASGIApp, open_paths: Optional[Iterable[str]] = None) -> None:
        self.app = app
        self.open_paths = frozenset(OPEN_PATHS if open_paths is None else open_paths)

    def rejection(self, headers: Headers) -> Optional[JSONResponse]:
        raise NotImplementedError

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http" or scope["path"] in self.open_paths:
            return await self.app(scope, receive, send)

        response = self.rejection(Headers(scope=scope))
        if response is not None:
            logger.warning(
                "%s rejected %s %s with %d",
                type(self).__name__,
                scope["method"],
                scope["path"],
                response.status_code,
            )
            return await response(scope, receive, send)
        return await self.app(scope, receive, send)


class AuthKeyMiddleware(_GateMiddleware):
    """Rejects requests whose auth header does not equal the configured key (403)."""

    def __init__(
        self,
        app: ASGIApp,
        auth_key: str,
        header_name: str = "x-auth-key",
        open_paths: Optional[Iterable[str]] = None,
    ) -> None:
        super().__init__(app, open_paths)
        self.auth_key = auth_key
        self.header_name = header_name

    def rejection(self, headers: Headers) -> Optional[JSONResponse]:
        presented = headers.get(self.header_name)
        if not presented or not hmac.compare_digest(presented.encode(), self.auth_key.encode()):
            return JSONResponse(status_code=403, content={"message": UNAUTHORIZED_MESSAGE})
        return None


class JSONContentTypeMiddleware(_GateMiddleware):
    """Rejects requests whose Content-Type is not exactly application/json (400)."""

    def rejection(self, headers: Headers) -> Optional[JSONResponse]:
        if headers.get("content-type") != "application/json":
            return JSONResponse(status_code=400, content={"message": CONTENT_TYPE_MESSAGE})
        return None


def register_gates(application: FastAPI, auth_key: str, header_name: str = "x-auth-key") -> None:
    """
    Install the gates so that auth runs first, then content type.

    Args:
        application: FastAPI app
        auth_key: Shared secret expected in the auth header
        header_name: Name of the auth header
    """
    application.add_middleware(JSONContentTypeMiddleware)
    application.add_middleware(AuthKeyMiddleware, auth_key=auth_key, header_name=header_name)
