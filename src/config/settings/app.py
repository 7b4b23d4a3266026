"""Agregado de settings do processo.

`load_app_settings()` é chamado uma única vez no entrypoint; o valor
resultante é repassado explicitamente ao orquestrador e aos colaboradores.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from config.settings.auth import AuthSettings, _load_auth_from_env
from config.settings.base import BaseSettings, _load_base_from_env
from config.settings.cors import CorsSettings, _load_cors_from_env
from config.settings.database import DatabaseSettings, _load_database_from_env
from config.settings.provider import ProviderSettings, _load_provider_from_env
from config.settings.server import ServerSettings, _load_server_from_env
from config.settings.webhook import WebhookSettings, _load_webhook_from_env

if TYPE_CHECKING:
    from config.settings.server import TransportKind


@dataclass(frozen=True)
class AppSettings:
    """Configuração completa e imutável do processo."""

    base: BaseSettings = field(default_factory=BaseSettings)
    server: ServerSettings = field(default_factory=ServerSettings)
    cors: CorsSettings = field(default_factory=CorsSettings)
    webhook: WebhookSettings = field(default_factory=WebhookSettings)
    auth: AuthSettings = field(default_factory=AuthSettings)
    provider: ProviderSettings = field(default_factory=ProviderSettings)
    database: DatabaseSettings = field(default_factory=DatabaseSettings)

    def with_transport(self, kind: TransportKind) -> AppSettings:
        """Cópia com o tipo de transporte efetivamente em uso."""
        return replace(self, server=replace(self.server, kind=kind))

    def with_port(self, port: int) -> AppSettings:
        """Cópia com a porta resolvida."""
        return replace(self, server=replace(self.server, port=port))

    def validate(self) -> list[str]:
        """Valida todas as seções, prefixando cada erro com a seção."""
        errors: list[str] = []
        errors.extend(f"base: {error}" for error in self.base.validate())
        errors.extend(f"server: {error}" for error in self.server.validate())
        errors.extend(f"cors: {error}" for error in self.cors.validate())
        errors.extend(f"webhook: {error}" for error in self.webhook.validate())
        errors.extend(f"auth: {error}" for error in self.auth.validate())
        errors.extend(f"database: {error}" for error in self.database.validate(self.base))
        return errors


def load_app_settings() -> AppSettings:
    """Carrega todas as settings a partir das variáveis de ambiente."""
    return AppSettings(
        base=_load_base_from_env(),
        server=_load_server_from_env(),
        cors=_load_cors_from_env(),
        webhook=_load_webhook_from_env(),
        auth=_load_auth_from_env(),
        provider=_load_provider_from_env(),
        database=_load_database_from_env(),
    )
