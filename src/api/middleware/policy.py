"""Policy Builder: CORS, limite de corpo e compressão a partir das settings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from starlette.middleware.gzip import GZipMiddleware

from api.middleware.body_limit import BodySizeLimitMiddleware
from api.middleware.correlation import CorrelationIdMiddleware
from api.middleware.cors import CorsPolicy, PolicyCORSMiddleware
from api.middleware.errors import UnhandledErrorMiddleware

if TYPE_CHECKING:
    from fastapi import FastAPI

    from app.infra.webhook import ErrorNotifier
    from config.settings import CorsSettings

# Teto único para JSON e urlencoded
BODY_LIMIT_BYTES = 136 * 1024 * 1024

# Respostas menores que isso não são comprimidas
GZIP_MINIMUM_SIZE = 1000


@dataclass(frozen=True)
class HttpPolicy:
    """Política HTTP aplicada como middleware."""

    cors: CorsPolicy
    max_body_bytes: int = BODY_LIMIT_BYTES
    gzip_minimum_size: int = GZIP_MINIMUM_SIZE


def build_http_policy(cors_settings: CorsSettings) -> HttpPolicy:
    return HttpPolicy(cors=CorsPolicy.from_settings(cors_settings))


def apply_http_policy(
    app: FastAPI,
    policy: HttpPolicy,
    notifier: ErrorNotifier | None = None,
) -> None:
    """Instala os middlewares; ordem final (externo → interno):
    correlation_id, CORS, erros não tratados, limite de corpo, GZip.
    """
    # add_middleware empilha: o último adicionado fica mais externo
    app.add_middleware(GZipMiddleware, minimum_size=policy.gzip_minimum_size)
    app.add_middleware(
        BodySizeLimitMiddleware,
        max_body_bytes=policy.max_body_bytes,
        notifier=notifier,
    )
    app.add_middleware(UnhandledErrorMiddleware, notifier=notifier)
    app.add_middleware(PolicyCORSMiddleware, policy=policy.cors, notifier=notifier)
    app.add_middleware(CorrelationIdMiddleware)
