"""Colaboradores externos consumidos pelo orquestrador.

Colaboradores opcionais são `Enabled(service) | Disabled(reason)`,
decididos uma vez no startup e nunca reconsultados por requisição.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Generic, TypeVar

from app.observability import install_unexpected_error_handler

if TYPE_CHECKING:
    from collections.abc import Callable

    from fastapi import APIRouter

    from app.protocols import (
        ErrorTrackingProtocol,
        EventManagerProtocol,
        FileProviderProtocol,
        InstanceRepositoryProtocol,
        SessionMonitorProtocol,
    )

T = TypeVar("T")


@dataclass(frozen=True)
class Enabled(Generic[T]):
    """Colaborador ligado."""

    service: T


@dataclass(frozen=True)
class Disabled:
    """Colaborador desligado."""

    reason: str = "disabled"


Toggle = Enabled[T] | Disabled


@dataclass(frozen=True)
class Collaborators:
    """Pontos de entrada dos serviços externos.

    Attributes:
        repository: Persistência (init obrigatório e fatal em caso de falha)
        session_monitor: Monitor das instâncias WhatsApp (carga destacada)
        event_manager: Recebe o listener antes do bind (best-effort)
        primary_router: Rotas de negócio montadas no app
        file_provider: Provedor de arquivos (opcional)
        error_tracking: Integração de rastreamento de erros (opcional)
        install_unexpected_error_handler: Hook global de erros inesperados
    """

    repository: InstanceRepositoryProtocol
    session_monitor: SessionMonitorProtocol
    event_manager: EventManagerProtocol
    primary_router: APIRouter
    file_provider: Toggle[FileProviderProtocol] = field(default_factory=Disabled)
    error_tracking: Toggle[ErrorTrackingProtocol] = field(default_factory=Disabled)
    install_unexpected_error_handler: Callable[[], None] = install_unexpected_error_handler
