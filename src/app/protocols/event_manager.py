"""Contrato do gerenciador de eventos."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.protocols.listener import ListenerProtocol
    from config.settings import AppSettings


class EventManagerProtocol(Protocol):
    """Recebe o listener antes do bind. Pode ser síncrono ou corrotina."""

    def init(self, listener: ListenerProtocol, settings: AppSettings) -> Any: ...
