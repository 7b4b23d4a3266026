"""Factories dos colaboradores: criação de implementações concretas.

Centraliza a escolha de backends a partir das AppSettings.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from api.routes import create_api_router
from app.bootstrap.clients import create_async_redis_client
from app.infra.events.manager import EventManager
from app.infra.files.local_provider import LocalFileProvider
from app.infra.stores import MemoryInstanceRepository, RedisInstanceRepository
from app.lifecycle import Collaborators, Disabled, Enabled
from app.sessions.monitor import InstanceMonitor

if TYPE_CHECKING:
    from fastapi import APIRouter

    from app.lifecycle import Toggle
    from app.protocols import FileProviderProtocol, InstanceRepositoryProtocol
    from config.settings import AppSettings

logger = logging.getLogger(__name__)


def create_instance_repository(settings: AppSettings) -> InstanceRepositoryProtocol:
    """Cria o repositório de instâncias conforme DATABASE_BACKEND.

    - "memory": MemoryInstanceRepository (dev only)
    - "redis": RedisInstanceRepository (staging/production)
    """
    database = settings.database

    if database.backend == "redis":
        repository: InstanceRepositoryProtocol = RedisInstanceRepository(
            create_async_redis_client(database.redis_url)
        )
        logger.info("instance_repository_created", extra={"backend": "redis"})
        return repository

    if not settings.base.is_development:
        logger.warning(
            "memory_store_in_non_dev",
            extra={"backend": "memory", "environment": settings.base.environment},
        )
    logger.info("instance_repository_created", extra={"backend": "memory"})
    return MemoryInstanceRepository()


def create_file_provider(settings: AppSettings) -> Toggle[FileProviderProtocol]:
    """Provedor de arquivos, se habilitado por PROVIDER_ENABLED."""
    provider = settings.provider
    if not provider.enabled:
        return Disabled("PROVIDER_ENABLED=false")
    store_dir = (
        Path(provider.store_dir) if provider.store_dir else settings.base.store_dir / "instances"
    )
    return Enabled(LocalFileProvider(store_dir))


def create_collaborators(
    settings: AppSettings,
    primary_router: APIRouter | None = None,
) -> Collaborators:
    """Monta os colaboradores padrão do gateway.

    Args:
        settings: Settings carregadas no entrypoint.
        primary_router: Rotas de negócio (padrão: create_api_router()).
    """
    repository = create_instance_repository(settings)
    return Collaborators(
        repository=repository,
        session_monitor=InstanceMonitor(repository),
        event_manager=EventManager(),
        primary_router=primary_router if primary_router is not None else create_api_router(),
        file_provider=create_file_provider(settings),
        error_tracking=Disabled("not_configured"),
    )
