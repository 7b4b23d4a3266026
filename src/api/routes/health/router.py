"""Healthcheck do processo.

Responde 200 "ok" sempre: não consulta repositório, provedor de arquivos
nem qualquer outro colaborador.
"""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()


@router.get("/healthz", response_class=PlainTextResponse, include_in_schema=False)
async def healthz() -> str:
    """Liveness check exigido pela plataforma de deploy."""
    return "ok"
