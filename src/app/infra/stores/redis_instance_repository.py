"""Repositório de instâncias em Redis.

As instâncias conhecidas ficam no set `instances`; o startup só exige
que o Redis responda ao PING.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from utils.errors import RedisConnectionError

if TYPE_CHECKING:
    from redis.asyncio import Redis as AsyncRedis

logger = logging.getLogger(__name__)

INSTANCES_KEY = "instances"
PING_TIMEOUT_SECONDS = 5.0


class RedisInstanceRepository:
    """Repositório de instâncias usando Redis.

    Args:
        redis_client: Cliente Redis assíncrono
    """

    def __init__(self, redis_client: AsyncRedis[bytes]) -> None:
        self._redis = redis_client

    async def on_module_init(self) -> None:
        """Verifica conectividade. Falha é fatal para o startup."""
        try:
            await asyncio.wait_for(self._redis.ping(), timeout=PING_TIMEOUT_SECONDS)
        except Exception as exc:
            logger.error("repository_unavailable", extra={"error_type": type(exc).__name__})
            raise RedisConnectionError("Redis indisponível no startup") from exc
        logger.info("repository_connected", extra={"backend": "redis"})

    async def list_instances(self) -> list[str]:
        members = await self._redis.smembers(INSTANCES_KEY)
        return sorted(
            member.decode("utf-8") if isinstance(member, bytes) else str(member)
            for member in members
        )

    async def add_instance(self, name: str) -> None:
        await self._redis.sadd(INSTANCES_KEY, name)
