"""Contrato do listener (endpoint de rede ligado a um transporte)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from config.settings import TransportKind


class ListenerProtocol(Protocol):
    """Listener de um único transporte, pertencente ao orquestrador.

    Ciclo: bind(port) → serve() → close(). `close()` é chamado uma vez.
    """

    @property
    def kind(self) -> TransportKind: ...

    def bind(self, host: str, port: int) -> None: ...

    async def serve(self) -> None: ...

    async def close(self) -> None: ...
