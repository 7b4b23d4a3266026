"""Normalização de exceções em status/erro/mensagem.

Atributos opcionais lidos da exceção:
- status: int (fallback 500)
- error: str (fallback "Internal Server Error")
A mensagem vem de str(exc), com o mesmo fallback do erro.
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_STATUS = 500
DEFAULT_ERROR_TEXT = "Internal Server Error"


@dataclass(frozen=True, slots=True)
class ErrorDetails:
    """Representação estável de um erro para envelope e webhook."""

    status: int
    error: str
    message: str | list[str]

    @property
    def message_text(self) -> str:
        """Mensagem como string única (listas viram texto separado por '; ')."""
        if isinstance(self.message, list):
            return "; ".join(self.message)
        return self.message


def _coerce_status(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        return DEFAULT_STATUS
    if not 400 <= value <= 599:
        return DEFAULT_STATUS
    return value


def describe_error(exc: BaseException) -> ErrorDetails:
    """Extrai status, texto de erro e mensagem de qualquer exceção."""
    error = getattr(exc, "error", None)
    if not isinstance(error, str) or not error:
        error = DEFAULT_ERROR_TEXT
    return ErrorDetails(
        status=_coerce_status(getattr(exc, "status", None)),
        error=error,
        message=str(exc) or DEFAULT_ERROR_TEXT,
    )
