"""Gerenciador de eventos do gateway."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.protocols import ListenerProtocol
    from config.settings import AppSettings

logger = logging.getLogger(__name__)


class EventManager:
    """Recebe o listener antes do bind para publicar eventos sobre ele."""

    def __init__(self) -> None:
        self._listener: ListenerProtocol | None = None
        self._server_url = ""

    @property
    def listener(self) -> ListenerProtocol | None:
        return self._listener

    def init(self, listener: ListenerProtocol, settings: AppSettings) -> None:
        self._listener = listener
        self._server_url = settings.server.url
        logger.info("event_manager_ready", extra={"transport": listener.kind})
