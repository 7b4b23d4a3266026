"""Montagem da aplicação FastAPI (fase CONFIGURING).

Ordem de registro:
1. política HTTP (correlation_id, CORS, erros não tratados, limite de corpo, GZip)
2. rotas primárias
3. /healthz
4. rastreamento de erros externo (se habilitado)
5. handlers de erro e, por último, a rota catch-all: arquivos de public/
   (na raiz) e store/ (sob /store), senão 404
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.errors import register_error_handlers, register_not_found_route
from api.middleware import apply_http_policy, build_http_policy
from api.routes import health_router
from api.static import StaticDirectory
from app.constants.service import SERVICE_NAME, SERVICE_VERSION
from app.lifecycle.collaborators import Enabled

if TYPE_CHECKING:
    from app.infra.webhook import ErrorNotifier
    from app.lifecycle.collaborators import Collaborators
    from config.settings import AppSettings, BaseSettings

logger = logging.getLogger(__name__)


def static_directories(base: BaseSettings) -> tuple[StaticDirectory, ...]:
    """public/ na raiz e store/ sob /store, apenas os que existirem."""
    found: list[StaticDirectory] = []
    for prefix, directory in (("", base.public_dir), ("/store", base.store_dir)):
        if not directory.is_dir():
            logger.debug("static_dir_missing", extra={"prefix": prefix or "/"})
            continue
        found.append(StaticDirectory.from_path(prefix, directory))
    return tuple(found)


def build_application(
    settings: AppSettings,
    collaborators: Collaborators,
    notifier: ErrorNotifier | None,
) -> FastAPI:
    """Cria o app com middlewares, rotas e handlers, sem iniciar colaboradores."""
    app = FastAPI(
        title=SERVICE_NAME,
        version=SERVICE_VERSION,
        docs_url="/docs",
        redoc_url=None,
        openapi_url="/openapi.json",
    )

    apply_http_policy(app, build_http_policy(settings.cors), notifier)
    app.include_router(collaborators.primary_router)
    app.include_router(health_router, tags=["health"])

    if isinstance(collaborators.error_tracking, Enabled):
        collaborators.error_tracking.service.install(app)
        logger.info("error_tracking_enabled")

    register_error_handlers(app, notifier)
    register_not_found_route(app, static_directories(settings.base))

    app.state.error_notifier = notifier
    return app
