"""Stores em memória, apenas para desenvolvimento e testes.

ATENÇÃO: Não usar em staging/production. Sem persistência entre reinícios.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)


class MemoryInstanceRepository:
    """Repositório de instâncias em memória, apenas para dev/test."""

    def __init__(self, instances: Iterable[str] = ()) -> None:
        self._instances: set[str] = set(instances)

    async def on_module_init(self) -> None:
        logger.info("repository_connected", extra={"backend": "memory"})

    async def list_instances(self) -> list[str]:
        return sorted(self._instances)

    async def add_instance(self, name: str) -> None:
        self._instances.add(name)
