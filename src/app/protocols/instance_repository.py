"""Contrato do repositório de instâncias (persistência)."""

from __future__ import annotations

from typing import Protocol


class InstanceRepositoryProtocol(Protocol):
    """Persistência opaca; o orquestrador só chama `on_module_init`."""

    async def on_module_init(self) -> None: ...

    async def list_instances(self) -> list[str]: ...
