"""Settings do servidor HTTP/HTTPS.

Tipo de transporte, porta, URL pública e caminhos do material TLS.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Literal

TransportKind = Literal["http", "https"]

# Porta usada quando nem override nem SERVER_PORT estão presentes
DEFAULT_PORT = 8080

# Variáveis de ambiente com o material do certificado
SSL_PRIVKEY_ENV = "SSL_CONF_PRIVKEY"
SSL_FULLCHAIN_ENV = "SSL_CONF_FULLCHAIN"


@dataclass(frozen=True)
class ServerSettings:
    """Configurações do listener.

    Attributes:
        kind: Transporte configurado (http|https)
        port: Porta configurada (None = usar override ou padrão)
        url: URL pública do servidor (vai nos eventos de erro)
        host: Endereço de bind
        ssl_privkey: Caminho da chave privada (SSL_CONF_PRIVKEY)
        ssl_fullchain: Caminho da cadeia completa (SSL_CONF_FULLCHAIN)
    """

    kind: TransportKind = "http"
    port: int | None = None
    url: str = ""
    host: str = "0.0.0.0"  # noqa: S104
    ssl_privkey: str = ""
    ssl_fullchain: str = ""

    @property
    def is_tls(self) -> bool:
        return self.kind == "https"

    def validate(self) -> list[str]:
        """Valida configurações do servidor.

        Certificados ausentes não são erro: o transporte cai para HTTP.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if self.kind not in ("http", "https"):
            errors.append(f"SERVER_TYPE inválido: {self.kind}")

        if self.port is not None and not 0 < self.port < 65536:
            errors.append("SERVER_PORT deve estar entre 1 e 65535")

        return errors


def _parse_kind(value: str) -> TransportKind:
    return "https" if value.strip().lower() == "https" else "http"


def _parse_port(value: str | None) -> int | None:
    """Porta numérica; vazio ou não numérico vira None (usa override ou padrão)."""
    if value is None or not value.strip().isdigit():
        return None
    return int(value)


def _load_server_from_env() -> ServerSettings:
    """Carrega ServerSettings de variáveis de ambiente."""
    return ServerSettings(
        kind=_parse_kind(os.getenv("SERVER_TYPE", "http")),
        port=_parse_port(os.getenv("SERVER_PORT")),
        url=os.getenv("SERVER_URL", ""),
        host=os.getenv("SERVER_HOST", "0.0.0.0"),  # noqa: S104
        ssl_privkey=os.getenv(SSL_PRIVKEY_ENV, ""),
        ssl_fullchain=os.getenv(SSL_FULLCHAIN_ENV, ""),
    )
