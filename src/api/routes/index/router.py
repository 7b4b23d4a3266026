"""Rota raiz do gateway."""

from __future__ import annotations

from fastapi import APIRouter
from pydantic import BaseModel

from app.constants.service import SERVICE_NAME, SERVICE_VERSION

router = APIRouter()


class WelcomeResponse(BaseModel):
    status: int = 200
    message: str
    version: str


@router.get("/", response_model=WelcomeResponse)
async def welcome() -> WelcomeResponse:
    return WelcomeResponse(
        message=f"Welcome to the {SERVICE_NAME}, it is working!",
        version=SERVICE_VERSION,
    )
