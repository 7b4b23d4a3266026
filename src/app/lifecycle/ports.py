"""Resolução da porta efetiva: override > porta configurada > padrão."""

from __future__ import annotations

import logging

from config.settings import DEFAULT_PORT

logger = logging.getLogger(__name__)


def _as_port(value: str | int | None, source: str) -> int | None:
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
        if not value.isdigit():
            logger.warning("invalid_port_ignored", extra={"source": source})
            return None
        value = int(value)
    if not 0 <= value < 65536:
        logger.warning("invalid_port_ignored", extra={"source": source, "port": value})
        return None
    return value


def resolve_port(
    override: str | int | None,
    configured: int | None,
    default: int = DEFAULT_PORT,
) -> int:
    """Primeira porta válida entre override (ex: PORT) e a configurada.

    Valores ausentes ou inválidos são pulados; sem nenhuma, usa `default`.
    """
    for value, source in ((override, "override"), (configured, "configured")):
        port = _as_port(value, source)
        if port is not None:
            return port
    return default
