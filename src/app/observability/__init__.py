"""Observabilidade: correlation_id e hook de erros inesperados.

Uso:
    from app.observability import get_correlation_id, set_correlation_id
    from app.observability import install_unexpected_error_handler
"""

from app.observability.correlation import (
    generate_correlation_id,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from app.observability.unexpected import install_unexpected_error_handler

__all__ = [
    "generate_correlation_id",
    "get_correlation_id",
    "install_unexpected_error_handler",
    "reset_correlation_id",
    "set_correlation_id",
]
