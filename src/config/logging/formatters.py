"""Formatter JSON dos logs do gateway (uma linha JSON por record)."""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Campos presentes em toda linha, além do `extra` de cada chamada
REQUIRED_LOG_FIELDS = frozenset(
    {
        "asctime",
        "levelname",
        "name",
        "message",
        "correlation_id",
        "service",
    }
)

FIELD_RENAME_MAP = {
    "asctime": "timestamp",
    "levelname": "level",
    "name": "logger",
}

# ISO 8601 com offset local
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


def create_json_formatter() -> JsonFormatter:
    """Formatter com os campos obrigatórios renomeados.

    Exemplo:
        {"timestamp": "2026-10-17T10:30:00-0300", "level": "INFO",
         "logger": "app.lifecycle.orchestrator", "message": "HTTP - ON: 8080",
         "correlation_id": "", "service": "whatsapp_gateway"}
    """
    format_string = " ".join(f"%({field})s" for field in sorted(REQUIRED_LOG_FIELDS))
    return JsonFormatter(
        format_string,
        datefmt=TIMESTAMP_FORMAT,
        rename_fields=FIELD_RENAME_MAP,
        json_ensure_ascii=False,
    )
