"""Drenagem limitada do processo no SIGTERM.

Duas fontes alimentam uma única decisão de saída; a primeira vence:
- o close do listener termina → drena tasks destacadas → código 0
  (código 1 se o próprio close falhar)
- o timer de DRAIN_TIMEOUT_SECONDS dispara → saída forçada com código 0
"""

from __future__ import annotations

import asyncio
import logging
import os
from typing import TYPE_CHECKING

from app.runtime import drain_background_tasks

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

logger = logging.getLogger(__name__)

DRAIN_TIMEOUT_SECONDS = 10.0


class ShutdownCoordinator:
    """Decide o código de saída do processo.

    Args:
        timeout_seconds: Limite total da drenagem.
        force_exit: Encerra o processo sem esperar o loop (padrão: os._exit).
    """

    def __init__(
        self,
        *,
        timeout_seconds: float = DRAIN_TIMEOUT_SECONDS,
        force_exit: Callable[[int], object] = os._exit,
    ) -> None:
        self._timeout_seconds = timeout_seconds
        self._force_exit = force_exit
        self._decision: asyncio.Future[int] | None = None
        self.reason: str | None = None

    def _future(self) -> asyncio.Future[int]:
        if self._decision is None:
            self._decision = asyncio.get_running_loop().create_future()
        return self._decision

    @property
    def decided(self) -> bool:
        return self._decision is not None and self._decision.done()

    def decide(self, exit_code: int, reason: str) -> bool:
        """Registra a decisão; retorna False se outra fonte já decidiu."""
        decision = self._future()
        if decision.done():
            return False
        self.reason = reason
        decision.set_result(exit_code)
        logger.info("shutdown_decided", extra={"exit_code": exit_code, "reason": reason})
        return True

    def force_exit(self, exit_code: int, reason: str) -> None:
        if self.decide(exit_code, reason):
            self._force_exit(exit_code)

    async def wait(self) -> int:
        """Aguarda a decisão de saída."""
        return await self._future()

    async def drain(self, close: Callable[[], Awaitable[None]]) -> int:
        """Corre o close contra o timer e devolve o código de saída."""
        loop = asyncio.get_running_loop()
        self._future()
        timer = loop.call_later(self._timeout_seconds, self._on_timeout)
        closing = loop.create_task(self._close_then_decide(close), name="listener_close")
        try:
            return await self.wait()
        finally:
            timer.cancel()
            if not closing.done():
                closing.cancel()

    async def _close_then_decide(self, close: Callable[[], Awaitable[None]]) -> None:
        try:
            await close()
        except Exception:
            logger.exception("shutdown_close_failed")
            self.decide(1, "close_failed")
            return
        logger.info("listener_closed")
        await drain_background_tasks(timeout_seconds=self._timeout_seconds)
        self.decide(0, "closed")

    def _on_timeout(self) -> None:
        logger.warning(
            "shutdown_timeout_forcing_exit",
            extra={"timeout_seconds": self._timeout_seconds},
        )
        self.force_exit(0, "timeout")
