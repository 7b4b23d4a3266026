"""Handlers terminais: erro → envelope JSON (+ webhook) e rota inexistente → 404.

Os handlers de erro são registrados antes da rota catch-all de 404, que é
sempre a última rota do app; ela só responde quando nada mais casou.
"""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import TYPE_CHECKING

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.errors.envelope import (
    ErrorEnvelope,
    describe_http_error,
    not_found_envelope,
    request_target,
)
from api.static import lookup_static
from utils.errors import ApiError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from fastapi import FastAPI

    from api.static import StaticDirectory
    from app.infra.webhook import ErrorNotifier

logger = logging.getLogger(__name__)

# Métodos atendidos pela rota de 404
NOT_FOUND_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]


def render_error(exc: BaseException, notifier: ErrorNotifier | None = None) -> JSONResponse:
    """Converte a exceção no envelope e dispara o webhook (sem aguardar)."""
    details = describe_http_error(exc)
    if notifier is not None:
        notifier.notify(exc, details)
    envelope = ErrorEnvelope.from_details(details)
    return JSONResponse(status_code=details.status, content=envelope.model_dump())


def register_error_handlers(app: FastAPI, notifier: ErrorNotifier | None) -> None:
    """Registra o handler de erro para todas as famílias de exceção.

    Com a política HTTP instalada, exceções genéricas já viram envelope no
    UnhandledErrorMiddleware; o handler de `Exception` cobre apps sem ela.
    """

    async def handle_error(request: Request, exc: Exception) -> JSONResponse:
        if not isinstance(exc, (ApiError, StarletteHTTPException, RequestValidationError)):
            logger.error(
                "unhandled_request_error",
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "error_type": type(exc).__name__,
                },
            )
        return render_error(exc, notifier)

    app.add_exception_handler(ApiError, handle_error)
    app.add_exception_handler(StarletteHTTPException, handle_error)
    app.add_exception_handler(RequestValidationError, handle_error)
    app.add_exception_handler(Exception, handle_error)


def not_found_response(request: Request) -> JSONResponse:
    envelope = not_found_envelope(request.method, request_target(request))
    return JSONResponse(status_code=HTTPStatus.NOT_FOUND, content=envelope.model_dump())


def register_not_found_route(
    app: FastAPI,
    static_directories: Sequence[StaticDirectory] = (),
) -> None:
    """Adiciona a rota catch-all. Deve ser a última rota registrada.

    Antes do 404, GET/HEAD procuram o arquivo nos diretórios estáticos.
    """

    async def not_found(request: Request) -> Response:
        response = await lookup_static(static_directories, request.scope)
        if response is not None:
            return response
        return not_found_response(request)

    app.add_api_route(
        "/{path:path}",
        not_found,
        response_model=None,
        methods=NOT_FOUND_METHODS,
        include_in_schema=False,
    )
