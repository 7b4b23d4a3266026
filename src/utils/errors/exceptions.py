"""Exceções compartilhadas do gateway.

Duas famílias:
- InfrastructureError: falhas de dependências externas no startup
- ApiError: falhas visíveis ao cliente HTTP; carregam `status` e `error`,
  lidos pelo finalizador de respostas e pelo notificador de erros.
"""

from __future__ import annotations


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura."""


class RedisConnectionError(InfrastructureError):
    """Falha de conexão/timeout ao acessar Redis."""


class TransportUnavailableError(InfrastructureError):
    """Nenhum listener pôde ser criado (nem TLS, nem HTTP)."""


class ApiError(Exception):
    """Erro com status HTTP e texto de erro próprios."""

    status: int = 500
    error: str = "Internal Server Error"

    def __init__(
        self,
        message: str = "",
        *,
        status: int | None = None,
        error: str | None = None,
    ) -> None:
        super().__init__(message)
        if status is not None:
            self.status = status
        if error is not None:
            self.error = error


class CorsNotAllowedError(ApiError):
    """Origem fora da política de CORS. A mensagem nunca lista as origens.

    Responde 403 "Forbidden", não o 500 que um erro sem status teria.
    """

    status = 403
    error = "Forbidden"

    def __init__(self) -> None:
        super().__init__("Not allowed by CORS")


class PayloadTooLargeError(ApiError):
    """Corpo da requisição acima do limite configurado."""

    status = 413
    error = "Payload Too Large"

    def __init__(self) -> None:
        super().__init__("request entity too large")
