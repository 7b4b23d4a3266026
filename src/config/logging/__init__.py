"""Logging estruturado JSON do gateway.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="whatsapp_gateway")
    logger = get_logger(__name__)
    logger.info("listener_bound", extra={"port": 8080})

Toda linha carrega: timestamp, level, logger, message, correlation_id, service.
"""

from config.logging.config import (
    configure_logging,
    get_logger,
    log_fallback,
    route_server_loggers,
)
from config.logging.filters import CorrelationIdFilter, RedactSecretsFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "RedactSecretsFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "log_fallback",
    "route_server_loggers",
]
