"""Propagação do correlation_id por requisição."""

from __future__ import annotations

from typing import TYPE_CHECKING

from starlette.datastructures import Headers, MutableHeaders

from app.observability import get_correlation_id, reset_correlation_id, set_correlation_id

if TYPE_CHECKING:
    from starlette.types import ASGIApp, Message, Receive, Scope, Send

CORRELATION_HEADER = "x-correlation-id"
MAX_CORRELATION_ID_LENGTH = 128


class CorrelationIdMiddleware:
    """Define o correlation_id do contexto e o devolve no header da resposta.

    Usa o header recebido quando presente e razoável; senão gera um UUID.
    """

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        incoming = Headers(scope=scope).get(CORRELATION_HEADER, "")
        if len(incoming) > MAX_CORRELATION_ID_LENGTH:
            incoming = ""
        token = set_correlation_id(incoming or None)
        correlation_id = get_correlation_id()

        async def send_with_header(message: Message) -> None:
            if message["type"] == "http.response.start":
                MutableHeaders(scope=message)[CORRELATION_HEADER] = correlation_id
            await send(message)

        try:
            await self.app(scope, receive, send_with_header)
        finally:
            reset_correlation_id(token)
