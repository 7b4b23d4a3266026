"""Settings do provedor de arquivos de sessão."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class ProviderSettings:
    """Provedor de arquivos das instâncias.

    Attributes:
        enabled: Se o provedor deve ser inicializado no startup
        store_dir: Diretório dos arquivos (vazio = <root_dir>/store/instances)
    """

    enabled: bool = False
    store_dir: str = ""


def _load_provider_from_env() -> ProviderSettings:
    """Carrega ProviderSettings de variáveis de ambiente."""
    return ProviderSettings(
        enabled=os.getenv("PROVIDER_ENABLED", "").lower() in ("true", "1", "yes"),
        store_dir=os.getenv("PROVIDER_STORE_DIR", ""),
    )
