"""Hook global para erros inesperados do processo.

Cobre exceções não capturadas na thread principal, em threads auxiliares
e exceções nunca recuperadas de tasks/callbacks do event loop.
"""

from __future__ import annotations

import asyncio
import logging
import sys
import threading
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from types import TracebackType

logger = logging.getLogger(__name__)


def _log_uncaught(
    exc_type: type[BaseException],
    exc: BaseException,
    tb: TracebackType | None,
) -> None:
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc, tb)
        return
    logger.error(
        "unexpected_error",
        exc_info=(exc_type, exc, tb),
        extra={"origin": "uncaught_exception", "error_type": exc_type.__name__},
    )


def _log_thread_exception(args: threading.ExceptHookArgs) -> None:
    exc_type = args.exc_type
    logger.error(
        "unexpected_error",
        exc_info=(exc_type, args.exc_value, args.exc_traceback)
        if args.exc_value is not None
        else None,
        extra={
            "origin": "thread",
            "thread_name": args.thread.name if args.thread else "",
            "error_type": exc_type.__name__,
        },
    )


def _log_loop_exception(loop: asyncio.AbstractEventLoop, context: dict[str, Any]) -> None:
    exc = context.get("exception")
    logger.error(
        "unexpected_error",
        exc_info=exc if isinstance(exc, BaseException) else None,
        extra={
            "origin": "event_loop",
            "error_type": type(exc).__name__ if exc is not None else "",
            "loop_message": context.get("message", ""),
        },
    )


def install_unexpected_error_handler(loop: asyncio.AbstractEventLoop | None = None) -> None:
    """Instala os hooks; deve ser chamada de dentro do loop em execução."""
    sys.excepthook = _log_uncaught
    threading.excepthook = _log_thread_exception
    (loop or asyncio.get_running_loop()).set_exception_handler(_log_loop_exception)
    logger.debug("unexpected_error_handler_installed")
