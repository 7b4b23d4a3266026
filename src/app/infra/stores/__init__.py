"""Stores: implementações concretas de persistência.

Módulos disponíveis:
    - redis_instance_repository: repositório de instâncias em Redis
    - memory_stores: repositório em memória para desenvolvimento/testes
"""

from __future__ import annotations

from app.infra.stores.memory_stores import MemoryInstanceRepository
from app.infra.stores.redis_instance_repository import RedisInstanceRepository

__all__ = [
    "MemoryInstanceRepository",
    "RedisInstanceRepository",
]
