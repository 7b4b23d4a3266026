"""Testes da normalização de exceções (describe_error)."""

from __future__ import annotations

import pytest

from utils.errors import (
    ApiError,
    CorsNotAllowedError,
    ErrorDetails,
    InfrastructureError,
    PayloadTooLargeError,
    RedisConnectionError,
    TransportUnavailableError,
    describe_error,
)


class _WithAttributes(Exception):
    def __init__(self, message: str, status: object, error: object) -> None:
        super().__init__(message)
        self.status = status
        self.error = error


def test_plain_exception_defaults() -> None:
    details = describe_error(ValueError())

    assert details == ErrorDetails(
        status=500,
        error="Internal Server Error",
        message="Internal Server Error",
    )


def test_attributes_are_used_when_valid() -> None:
    details = describe_error(_WithAttributes("instance not found", 404, "Not Found"))

    assert details == ErrorDetails(status=404, error="Not Found", message="instance not found")


@pytest.mark.parametrize("status", ["404", True, 200, 700, None, 4.04])
def test_invalid_status_falls_back_to_500(status: object) -> None:
    assert describe_error(_WithAttributes("x", status, "Oops")).status == 500


@pytest.mark.parametrize("error", ["", None, 42])
def test_invalid_error_falls_back(error: object) -> None:
    assert describe_error(_WithAttributes("x", 400, error)).error == "Internal Server Error"


def test_message_text_joins_lists() -> None:
    details = ErrorDetails(status=400, error="Bad Request", message=["a", "b"])

    assert details.message_text == "a; b"


def test_api_error_overrides() -> None:
    exc = ApiError("gone", status=410, error="Gone")

    assert (exc.status, exc.error, str(exc)) == (410, "Gone", "gone")


def test_http_errors_carry_fixed_texts() -> None:
    assert describe_error(CorsNotAllowedError()) == ErrorDetails(
        status=403, error="Forbidden", message="Not allowed by CORS"
    )
    assert describe_error(PayloadTooLargeError()) == ErrorDetails(
        status=413, error="Payload Too Large", message="request entity too large"
    )


def test_infrastructure_hierarchy() -> None:
    assert issubclass(RedisConnectionError, InfrastructureError)
    assert issubclass(TransportUnavailableError, InfrastructureError)
    assert issubclass(InfrastructureError, RuntimeError)
