"""Webhook de erros: evento e notificador."""

from app.infra.webhook.events import (
    ErrorEvent,
    ErrorEventData,
    build_error_event,
    local_iso_timestamp,
)
from app.infra.webhook.notifier import ErrorNotifier

__all__ = [
    "ErrorEvent",
    "ErrorEventData",
    "ErrorNotifier",
    "build_error_event",
    "local_iso_timestamp",
]
