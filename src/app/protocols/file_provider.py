"""Contrato do provedor de arquivos das instâncias."""

from __future__ import annotations

from typing import Protocol


class FileProviderProtocol(Protocol):
    async def on_module_init(self) -> None: ...
