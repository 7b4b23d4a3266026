"""Limite de tamanho do corpo das requisições (JSON, urlencoded e demais)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from starlette.datastructures import Headers
from starlette.exceptions import HTTPException

from api.errors import render_error
from utils.errors import PayloadTooLargeError

if TYPE_CHECKING:
    from starlette.types import ASGIApp, Message, Receive, Scope, Send

    from app.infra.webhook import ErrorNotifier


class PayloadTooLargeHTTPException(HTTPException):
    """PayloadTooLargeError na forma que o FastAPI repassa durante a leitura do corpo."""

    error = PayloadTooLargeError.error

    def __init__(self) -> None:
        super().__init__(
            status_code=PayloadTooLargeError.status,
            detail=str(PayloadTooLargeError()),
        )


class BodySizeLimitMiddleware:
    """Rejeita corpos acima de `max_body_bytes` antes dos handlers.

    Content-Length declarado acima do limite é recusado de imediato;
    corpos em streaming são contados e interrompidos ao cruzar o limite.
    """

    def __init__(
        self,
        app: ASGIApp,
        max_body_bytes: int,
        notifier: ErrorNotifier | None = None,
    ) -> None:
        self.app = app
        self.max_body_bytes = max_body_bytes
        self._notifier = notifier

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        declared = Headers(scope=scope).get("content-length", "")
        if declared.isdigit() and int(declared) > self.max_body_bytes:
            response = render_error(PayloadTooLargeError(), self._notifier)
            await response(scope, receive, send)
            return

        received = 0

        async def limited_receive() -> Message:
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > self.max_body_bytes:
                    raise PayloadTooLargeHTTPException
            return message

        await self.app(scope, limited_receive, send)
