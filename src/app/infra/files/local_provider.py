"""Provedor local dos arquivos de sessão das instâncias."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


class LocalFileProvider:
    """Guarda os arquivos de sessão em disco, sob `store_dir`."""

    def __init__(self, store_dir: Path) -> None:
        self._store_dir = store_dir

    @property
    def store_dir(self) -> Path:
        return self._store_dir

    async def on_module_init(self) -> None:
        """Garante o diretório; erro de permissão propaga."""
        await asyncio.to_thread(self._store_dir.mkdir, parents=True, exist_ok=True)
        logger.debug("file_provider_ready", extra={"store_dir": str(self._store_dir)})
