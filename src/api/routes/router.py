"""Agregador de rotas primárias.

O healthcheck não entra aqui: o orquestrador o registra depois das rotas
primárias, junto com os handlers de erro e a rota de 404.

Uso:
    from api.routes import create_api_router

    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.index.router import router as index_router


def create_api_router() -> APIRouter:
    """Cria o router primário com as rotas de negócio registradas."""
    api_router = APIRouter()
    api_router.include_router(index_router, tags=["index"])
    return api_router
