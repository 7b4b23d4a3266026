"""Composition root do gateway.

Logging, validação das settings e montagem dos colaboradores padrão
acontecem aqui, antes do orquestrador assumir o processo.

Uso:
    from app.bootstrap import create_collaborators, initialize_app

    settings = load_app_settings()
    initialize_app(settings)
    validate_runtime_settings(settings)
    collaborators = create_collaborators(settings)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.bootstrap.dependencies import create_collaborators
from app.observability import get_correlation_id
from config.logging import configure_logging

if TYPE_CHECKING:
    from config.settings import AppSettings

STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app(settings: AppSettings) -> None:
    """Liga o logging JSON com o nível e o nome de serviço das settings.

    O correlation_id de cada linha vem do ContextVar da requisição.
    """
    configure_logging(
        level=settings.base.log_level,
        service_name=settings.base.service_name,
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings(settings: AppSettings) -> None:
    """Falha o boot em staging/production se houver settings inválidas.

    Fora desses ambientes os erros viram apenas um warning.
    """
    environment = settings.base.environment
    strict_mode = environment in STRICT_VALIDATION_ENVS
    errors = settings.validate()

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if strict_mode:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {environment}:\n{details}")


__all__ = [
    "create_collaborators",
    "initialize_app",
    "validate_runtime_settings",
]
