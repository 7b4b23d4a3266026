"""Finalização de respostas de erro: envelope JSON e 404."""

from api.errors.envelope import (
    ErrorEnvelope,
    describe_http_error,
    error_envelope,
    not_found_envelope,
    request_target,
)
from api.errors.handlers import (
    render_error,
    register_error_handlers,
    register_not_found_route,
)

__all__ = [
    "ErrorEnvelope",
    "describe_http_error",
    "error_envelope",
    "not_found_envelope",
    "register_error_handlers",
    "register_not_found_route",
    "render_error",
    "request_target",
]
