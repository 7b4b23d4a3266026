"""Settings do repositório de instâncias."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from config.settings.base import BaseSettings

DatabaseBackend = Literal["memory", "redis"]


@dataclass(frozen=True)
class DatabaseSettings:
    """Configurações de persistência.

    Attributes:
        backend: Backend do repositório (memory|redis)
        redis_url: URL de conexão Redis (obrigatória para backend=redis)
    """

    backend: DatabaseBackend = "memory"
    redis_url: str = ""

    def validate(self, base: BaseSettings) -> list[str]:
        """Valida configurações de persistência.

        Args:
            base: BaseSettings para verificar ambiente.
        """
        errors: list[str] = []

        if self.backend not in ("memory", "redis"):
            errors.append(f"DATABASE_BACKEND inválido: {self.backend}")

        if self.backend == "redis" and not self.redis_url:
            errors.append("REDIS_URL não configurado")

        if self.backend == "memory" and not base.is_development:
            errors.append("DATABASE_BACKEND=memory proibido em staging/production")

        return errors


def _load_database_from_env() -> DatabaseSettings:
    """Carrega DatabaseSettings de variáveis de ambiente."""
    redis_url = os.getenv("REDIS_URL", "")
    default_backend = "redis" if redis_url else "memory"
    backend_str = os.getenv("DATABASE_BACKEND", default_backend).lower()
    backend: DatabaseBackend = backend_str if backend_str in ("memory", "redis") else "memory"
    return DatabaseSettings(backend=backend, redis_url=redis_url)
