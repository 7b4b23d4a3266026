"""Modelos do evento de erro enviado ao webhook."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel

from utils.errors import ErrorDetails


class ErrorEventResponse(BaseModel):
    message: str | list[str]


class ErrorEventData(BaseModel):
    """Dados do erro (mesmo conteúdo devolvido ao cliente)."""

    error: str
    message: str
    status: int
    response: ErrorEventResponse


class ErrorEvent(BaseModel):
    """Evento `error` postado no webhook. Nunca persistido."""

    event: Literal["error"] = "error"
    data: ErrorEventData
    date_time: str
    api_key: str
    server_url: str


def local_iso_timestamp(now: datetime | None = None) -> str:
    """Relógio local com o offset do fuso, ISO 8601 com milissegundos."""
    current = now or datetime.now().astimezone()
    if current.tzinfo is None:
        current = current.astimezone()
    return current.isoformat(timespec="milliseconds")


def build_error_event(
    details: ErrorDetails,
    *,
    api_key: str,
    server_url: str,
    now: datetime | None = None,
) -> ErrorEvent:
    """Monta o ErrorEvent a partir dos detalhes normalizados do erro."""
    return ErrorEvent(
        data=ErrorEventData(
            error=details.error,
            message=details.message_text,
            status=details.status,
            response=ErrorEventResponse(message=details.message),
        ),
        date_time=local_iso_timestamp(now),
        api_key=api_key,
        server_url=server_url,
    )
