"""Setup do logging do processo.

Um único StreamHandler JSON no root logger; os loggers do uvicorn
deixam de ter handlers próprios e propagam para ele, então requisições,
startup e shutdown saem no mesmo formato.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="whatsapp_gateway")
    logger = get_logger(__name__)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter, RedactSecretsFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "whatsapp_gateway"

# Loggers do uvicorn (servidor roda com log_config=None)
SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Instala o handler JSON no root logger. Chamar uma vez, no entrypoint.

    Args:
        level: DEBUG, INFO, WARNING, ERROR ou CRITICAL (case-insensitive).
        service_name: Valor do campo `service` em toda linha.
        correlation_id_getter: Fonte do correlation_id (ContextVar da requisição).

    Raises:
        ValueError: Nível fora de VALID_LOG_LEVELS.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))
    handler.addFilter(RedactSecretsFilter())

    root = logging.getLogger()
    root.setLevel(level_upper)
    root.handlers = [handler]

    route_server_loggers()


def route_server_loggers() -> None:
    """Remove os handlers do uvicorn e liga a propagação para o root."""
    for name in SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers = []
        server_logger.propagate = True


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def log_fallback(
    logger: logging.Logger,
    component: str,
    reason: str | None = None,
    elapsed_ms: float | None = None,
) -> None:
    """Registra que um caminho degradado foi escolhido.

    Exemplo:
        log_fallback(logger, "transport", reason="ssl_certificate_load_failed")
    """
    extra: dict[str, object] = {"fallback_used": True, "component": component}
    if reason:
        extra["reason"] = reason
    if elapsed_ms is not None:
        extra["elapsed_ms"] = elapsed_ms

    logger.info("Fallback applied for %s", component, extra=extra)
