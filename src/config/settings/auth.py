"""Settings de autenticação global."""

from __future__ import annotations

import os
from dataclasses import dataclass, field


@dataclass(frozen=True)
class AuthSettings:
    """Chave global da API.

    Attributes:
        api_key: Chave global; segue nos eventos de erro, nunca em logs
    """

    api_key: str = field(default="", repr=False)

    def validate(self) -> list[str]:
        errors: list[str] = []
        if not self.api_key:
            errors.append("AUTHENTICATION_API_KEY não configurado")
        return errors


def _load_auth_from_env() -> AuthSettings:
    """Carrega AuthSettings de variáveis de ambiente."""
    return AuthSettings(api_key=os.getenv("AUTHENTICATION_API_KEY", ""))
