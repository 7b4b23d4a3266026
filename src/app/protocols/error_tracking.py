"""Contrato da integração externa de rastreamento de erros."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from fastapi import FastAPI


class ErrorTrackingProtocol(Protocol):
    def install(self, app: FastAPI) -> None: ...
