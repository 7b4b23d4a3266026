"""Registro de tasks assíncronas destacadas.

Usado para efeitos colaterais que não podem bloquear quem os dispara:
envio do webhook de erros, init do gerenciador de eventos e carga das
instâncias. Falhas são apenas logadas; o shutdown aguarda as pendentes
com limite de tempo.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Coroutine

logger = logging.getLogger(__name__)

_active_tasks: set[asyncio.Task[Any]] = set()


def schedule_background_task(
    *,
    name: str,
    coroutine: Coroutine[Any, Any, Any],
) -> asyncio.Task[Any]:
    """Agenda task destacada no loop corrente e a registra."""
    task = asyncio.get_running_loop().create_task(coroutine, name=name)
    _active_tasks.add(task)
    task.add_done_callback(_on_task_done)
    logger.debug(
        "background_task_scheduled",
        extra={"task": name, "active_tasks": len(_active_tasks)},
    )
    return task


def active_task_count() -> int:
    return len(_active_tasks)


def _on_task_done(task: asyncio.Task[Any]) -> None:
    _active_tasks.discard(task)
    with contextlib.suppress(asyncio.CancelledError):
        exc = task.exception()
        if exc is not None:
            logger.error(
                "background_task_failed",
                extra={
                    "task": task.get_name(),
                    "error_type": type(exc).__name__,
                    "active_tasks": len(_active_tasks),
                },
            )


async def drain_background_tasks(timeout_seconds: float = 5.0) -> None:
    """Aguarda tasks pendentes durante o shutdown; cancela as que sobrarem."""
    if not _active_tasks:
        return

    pending_now = list(_active_tasks)
    logger.info(
        "background_tasks_shutdown_wait",
        extra={"pending_tasks": len(pending_now), "timeout_seconds": timeout_seconds},
    )
    _, pending = await asyncio.wait(pending_now, timeout=timeout_seconds)
    if not pending:
        return

    for task in pending:
        task.cancel()
    await asyncio.gather(*pending, return_exceptions=True)
    logger.warning(
        "background_tasks_shutdown_cancelled",
        extra={"cancelled_tasks": len(pending)},
    )
