"""Agregador de settings do gateway.

Re-exporta as settings de cada seção. Cada seção tem seu próprio
módulo para isolamento de mudanças.
"""

from __future__ import annotations

from config.settings.app import AppSettings, load_app_settings
from config.settings.auth import AuthSettings
from config.settings.base import BaseSettings, Environment
from config.settings.cors import WILDCARD_ORIGIN, CorsSettings
from config.settings.database import DatabaseBackend, DatabaseSettings
from config.settings.provider import ProviderSettings
from config.settings.server import (
    DEFAULT_PORT,
    SSL_FULLCHAIN_ENV,
    SSL_PRIVKEY_ENV,
    ServerSettings,
    TransportKind,
)
from config.settings.webhook import WebhookSettings

__all__ = [
    # Constants
    "DEFAULT_PORT",
    "SSL_FULLCHAIN_ENV",
    "SSL_PRIVKEY_ENV",
    "WILDCARD_ORIGIN",
    # Aggregate
    "AppSettings",
    "AuthSettings",
    "BaseSettings",
    "CorsSettings",
    "DatabaseBackend",
    "DatabaseSettings",
    "Environment",
    "ProviderSettings",
    "ServerSettings",
    "TransportKind",
    "WebhookSettings",
    "load_app_settings",
]
