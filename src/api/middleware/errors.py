"""Envelope de erro para exceções não tratadas, dentro do CORS.

O handler de `Exception` do FastAPI roda no ServerErrorMiddleware, fora
de todos os middlewares do app; a resposta sairia sem os headers de CORS
e sem x-correlation-id. Este middleware fica logo abaixo do CORS e
responde o envelope antes disso.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.errors import render_error

if TYPE_CHECKING:
    from starlette.types import ASGIApp, Message, Receive, Scope, Send

    from app.infra.webhook import ErrorNotifier

logger = logging.getLogger(__name__)


class UnhandledErrorMiddleware:
    """Converte exceções inesperadas no envelope 500 (e notifica)."""

    def __init__(self, app: ASGIApp, notifier: ErrorNotifier | None = None) -> None:
        self.app = app
        self._notifier = notifier

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        response_started = False

        async def send_tracking_start(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.app(scope, receive, send_tracking_start)
        except Exception as exc:
            # Resposta já parcialmente enviada: só resta o servidor abortar
            if response_started:
                raise
            logger.exception(
                "unhandled_request_error",
                extra={
                    "method": scope["method"],
                    "path": scope["path"],
                    "error_type": type(exc).__name__,
                },
            )
            response = render_error(exc, self._notifier)
            await response(scope, receive, send)
