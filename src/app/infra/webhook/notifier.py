"""Notificador de erros via webhook.

`ErrorNotifier.notify()` retorna imediatamente: o POST roda numa task
destacada e qualquer falha (rede, timeout, status != 2xx) é só logada.
A resposta ao cliente nunca depende do webhook.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx

from app.infra.webhook.events import build_error_event
from app.runtime import schedule_background_task
from utils.errors import describe_error

if TYPE_CHECKING:
    from app.infra.webhook.events import ErrorEvent
    from config.settings import AppSettings
    from utils.errors import ErrorDetails

logger = logging.getLogger(__name__)


class ErrorNotifier:
    """Envia eventos de erro para o webhook configurado.

    Args:
        settings: Settings efetivas do processo (webhook, auth e URL pública).
        transport: Transporte httpx alternativo (testes usam MockTransport).
    """

    def __init__(
        self,
        settings: AppSettings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._webhook = settings.webhook
        self._api_key = settings.auth.api_key
        self._server_url = settings.server.url
        self._transport = transport

    @property
    def enabled(self) -> bool:
        return self._webhook.is_active

    def notify(self, exc: BaseException, details: ErrorDetails | None = None) -> None:
        """Reporta o erro sem bloquear nem levantar exceção.

        Args:
            exc: Exceção em voo.
            details: Detalhes já normalizados (quando o handler já os calculou).
        """
        if not self.enabled:
            return
        try:
            event = build_error_event(
                details or describe_error(exc),
                api_key=self._api_key,
                server_url=self._server_url,
            )
            logger.error(
                "error_event",
                extra={
                    "error_type": type(exc).__name__,
                    "status": event.data.status,
                    "error": event.data.error,
                    "error_message": event.data.message,
                    "date_time": event.date_time,
                },
            )
            schedule_background_task(name="error_webhook", coroutine=self.dispatch(event))
        except Exception as dispatch_exc:
            logger.warning(
                "error_webhook_not_scheduled",
                extra={"error_type": type(dispatch_exc).__name__},
            )

    async def dispatch(self, event: ErrorEvent) -> bool:
        """POST único, sem retry, na URL configurada (sem sufixo).

        Returns:
            True se o webhook respondeu 2xx.
        """
        try:
            async with httpx.AsyncClient(
                transport=self._transport,
                timeout=self._webhook.request_timeout_seconds,
            ) as client:
                response = await client.post(
                    self._webhook.errors_url,
                    json=event.model_dump(mode="json"),
                )
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.warning(
                "error_webhook_failed",
                extra={"error_type": type(exc).__name__},
            )
            return False

        if not response.is_success:
            logger.warning(
                "error_webhook_rejected",
                extra={"status_code": response.status_code},
            )
            return False

        logger.debug("error_webhook_sent", extra={"status_code": response.status_code})
        return True
