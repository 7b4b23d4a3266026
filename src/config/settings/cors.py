"""Settings de CORS."""

from __future__ import annotations

import os
from dataclasses import dataclass

# Sentinela que libera qualquer origem
WILDCARD_ORIGIN = "*"

DEFAULT_METHODS = ("POST", "GET", "PUT", "DELETE")


@dataclass(frozen=True)
class CorsSettings:
    """Política de CORS carregada do ambiente.

    Attributes:
        origins: Origens permitidas (pode conter "*")
        methods: Métodos HTTP permitidos
        credentials: Se cookies/credenciais são aceitos
    """

    origins: tuple[str, ...] = (WILDCARD_ORIGIN,)
    methods: tuple[str, ...] = DEFAULT_METHODS
    credentials: bool = True

    def validate(self) -> list[str]:
        errors: list[str] = []
        if not self.origins:
            errors.append("CORS_ORIGIN não pode ser vazio")
        if not self.methods:
            errors.append("CORS_METHODS não pode ser vazio")
        return errors


def _split_csv(value: str) -> tuple[str, ...]:
    return tuple(item.strip() for item in value.split(",") if item.strip())


def _load_cors_from_env() -> CorsSettings:
    """Carrega CorsSettings de variáveis de ambiente (listas separadas por vírgula)."""
    methods = _split_csv(os.getenv("CORS_METHODS", ",".join(DEFAULT_METHODS)))
    return CorsSettings(
        origins=_split_csv(os.getenv("CORS_ORIGIN", WILDCARD_ORIGIN)),
        methods=tuple(method.upper() for method in methods),
        credentials=os.getenv("CORS_CREDENTIALS", "true").lower() in ("true", "1", "yes"),
    )
