"""Exceções utilitárias compartilhadas."""

from .details import DEFAULT_ERROR_TEXT, DEFAULT_STATUS, ErrorDetails, describe_error
from .exceptions import (
    ApiError,
    CorsNotAllowedError,
    InfrastructureError,
    PayloadTooLargeError,
    RedisConnectionError,
    TransportUnavailableError,
)

__all__ = [
    "DEFAULT_ERROR_TEXT",
    "DEFAULT_STATUS",
    "ApiError",
    "CorsNotAllowedError",
    "ErrorDetails",
    "InfrastructureError",
    "PayloadTooLargeError",
    "RedisConnectionError",
    "TransportUnavailableError",
    "describe_error",
]
