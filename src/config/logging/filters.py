"""Filters que enriquecem ou saneiam cada record antes do formatter.

- CorrelationIdFilter: injeta `service` e `correlation_id`
- RedactSecretsFilter: mascara campos sensíveis passados via `extra`
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

# Atributos de record que nunca podem sair em claro
SENSITIVE_FIELDS = frozenset({"api_key", "apikey", "authorization", "token"})

REDACTED = "***"


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record de log.

    Args:
        service_name: Nome do serviço (ex: whatsapp_gateway).
        correlation_id_getter: Devolve o correlation_id da requisição
            corrente; sem getter o campo fica vazio.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        # `extra={"correlation_id": ...}` explícito tem precedência
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True


class RedactSecretsFilter(logging.Filter):
    """Mascara API keys e tokens que cheguem aos logs via `extra`."""

    def __init__(self, fields: frozenset[str] = SENSITIVE_FIELDS) -> None:
        super().__init__()
        self._fields = fields

    def filter(self, record: logging.LogRecord) -> bool:
        for name in self._fields:
            if getattr(record, name, None):
                setattr(record, name, REDACTED)
        return True
