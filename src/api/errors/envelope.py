"""Envelope JSON de erro devolvido ao cliente.

Formato único para qualquer falha:
    {"status": 500, "error": "Internal Server Error",
     "response": {"message": "..."}}

Para rotas inexistentes a mensagem é uma lista:
    {"status": 404, "error": "Not Found",
     "response": {"message": ["Cannot PATCH /foo/bar"]}}
"""

from __future__ import annotations

from http import HTTPStatus
from typing import TYPE_CHECKING

from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from utils.errors import DEFAULT_ERROR_TEXT, ErrorDetails, describe_error

if TYPE_CHECKING:
    from starlette.requests import Request


class EnvelopeResponse(BaseModel):
    message: str | list[str]


class ErrorEnvelope(BaseModel):
    """Corpo JSON de qualquer resposta de erro."""

    status: int
    error: str
    response: EnvelopeResponse

    @classmethod
    def from_details(cls, details: ErrorDetails) -> ErrorEnvelope:
        return cls(
            status=details.status,
            error=details.error,
            response=EnvelopeResponse(message=details.message),
        )


def _reason_phrase(status: int) -> str:
    try:
        return HTTPStatus(status).phrase
    except ValueError:
        return DEFAULT_ERROR_TEXT


def _format_validation_issue(issue: dict[str, object]) -> str:
    location = ".".join(str(part) for part in issue.get("loc", ()))  # type: ignore[union-attr]
    message = str(issue.get("msg", "invalid"))
    return f"{location}: {message}" if location else message


def describe_http_error(exc: BaseException) -> ErrorDetails:
    """Como describe_error, reconhecendo também as exceções do Starlette/FastAPI."""
    if isinstance(exc, RequestValidationError):
        issues = [_format_validation_issue(issue) for issue in exc.errors()]
        return ErrorDetails(
            status=int(HTTPStatus.BAD_REQUEST),
            error=HTTPStatus.BAD_REQUEST.phrase,
            message=issues or [HTTPStatus.BAD_REQUEST.phrase],
        )
    if isinstance(exc, StarletteHTTPException):
        error = getattr(exc, "error", None)
        phrase = error if isinstance(error, str) and error else _reason_phrase(exc.status_code)
        detail = exc.detail if isinstance(exc.detail, str) and exc.detail else phrase
        return ErrorDetails(status=exc.status_code, error=phrase, message=detail)
    return describe_error(exc)


def error_envelope(exc: BaseException) -> ErrorEnvelope:
    return ErrorEnvelope.from_details(describe_http_error(exc))


def request_target(request: Request) -> str:
    """Path da requisição, com query string quando houver."""
    query = request.url.query
    return f"{request.url.path}?{query}" if query else request.url.path


def not_found_envelope(method: str, target: str) -> ErrorEnvelope:
    return ErrorEnvelope(
        status=int(HTTPStatus.NOT_FOUND),
        error=HTTPStatus.NOT_FOUND.phrase,
        response=EnvelopeResponse(message=[f"Cannot {method.upper()} {target}"]),
    )
