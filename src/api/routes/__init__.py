"""Rotas HTTP do gateway.

- router.py: rotas primárias (montadas pelo orquestrador)
- health/: healthcheck `/healthz`
- index/: rota raiz
"""

from __future__ import annotations

from api.routes.health.router import router as health_router
from api.routes.router import create_api_router

__all__ = ["create_api_router", "health_router"]
