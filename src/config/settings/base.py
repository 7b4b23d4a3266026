"""Settings base do gateway.

Configurações comuns a todo o processo (ambiente, nome do serviço, logs).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

Environment = Literal["development", "staging", "production"]

# Raiz do projeto (contém public/ e store/)
DEFAULT_ROOT_DIR = Path(__file__).resolve().parents[3]


@dataclass(frozen=True)
class BaseSettings:
    """Configurações base do sistema.

    Attributes:
        environment: Ambiente de execução (development|staging|production)
        service_name: Nome do serviço para logs
        log_level: Nível do root logger
        root_dir: Diretório com os recursos estáticos (public/, store/)
    """

    environment: Environment = "development"
    service_name: str = "whatsapp_gateway"
    log_level: str = "INFO"
    root_dir: Path = DEFAULT_ROOT_DIR

    @property
    def is_production(self) -> bool:
        """Retorna True se ambiente é produção."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Retorna True se ambiente é desenvolvimento."""
        return self.environment == "development"

    @property
    def public_dir(self) -> Path:
        return self.root_dir / "public"

    @property
    def store_dir(self) -> Path:
        return self.root_dir / "store"

    def validate(self) -> list[str]:
        """Valida configurações base.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []

        if self.environment not in {"development", "staging", "production"}:
            errors.append(f"ENVIRONMENT inválido: {self.environment}")

        if not self.service_name:
            errors.append("SERVICE_NAME não pode ser vazio")

        return errors


def _parse_environment(env_str: str) -> Environment:
    """Converte string de ambiente para tipo Environment."""
    env_lower = env_str.lower()
    if env_lower in ("production", "prod"):
        return "production"
    if env_lower in ("staging", "stage"):
        return "staging"
    return "development"


def _load_base_from_env() -> BaseSettings:
    """Carrega BaseSettings de variáveis de ambiente."""
    root_dir = os.getenv("ROOT_DIR", "")
    return BaseSettings(
        environment=_parse_environment(os.getenv("ENVIRONMENT", "development")),
        service_name=os.getenv("SERVICE_NAME", "whatsapp_gateway"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        root_dir=Path(root_dir) if root_dir else DEFAULT_ROOT_DIR,
    )
