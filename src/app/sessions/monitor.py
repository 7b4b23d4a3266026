"""Monitor das instâncias WhatsApp.

No startup carrega as instâncias conhecidas do repositório; a
reconexão de cada sessão fica a cargo do módulo de sessões.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.protocols import InstanceRepositoryProtocol

logger = logging.getLogger(__name__)


class InstanceMonitor:
    """Carrega e mantém a lista de instâncias ativas."""

    def __init__(self, repository: InstanceRepositoryProtocol) -> None:
        self._repository = repository
        self._instances: list[str] = []

    @property
    def instances(self) -> list[str]:
        return list(self._instances)

    async def load_instances(self) -> None:
        self._instances = await self._repository.list_instances()
        logger.info("instances_loaded", extra={"count": len(self._instances)})
