"""Transport Selector: listener TLS (com certificado) ou HTTP simples.

Falha ao carregar o certificado nunca atravessa esta fronteira:
`select_listener` devolve None e o orquestrador decide o fallback.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
import ssl
from typing import TYPE_CHECKING

import uvicorn

if TYPE_CHECKING:
    import socket
    from collections.abc import Callable, Iterator

    from starlette.types import ASGIApp

    from app.protocols import ListenerProtocol
    from config.settings import ServerSettings, TransportKind

    TransportSelector = Callable[[ServerSettings, ASGIApp], ListenerProtocol | None]

logger = logging.getLogger(__name__)

# Limite do uvicorn para esperar conexões abertas após o close
GRACEFUL_TIMEOUT_SECONDS = 10


class _ManagedServer(uvicorn.Server):
    """uvicorn.Server sem captura própria de sinais: o SIGTERM é do orquestrador."""

    @contextlib.contextmanager
    def capture_signals(self) -> Iterator[None]:
        yield


class UvicornListener:
    """Listener sobre uvicorn com socket ligado explicitamente.

    Args:
        app: Aplicação ASGI servida.
        kind: Transporte (http|https).
        ssl_keyfile: Chave privada (apenas https).
        ssl_certfile: Cadeia completa do certificado (apenas https).
    """

    def __init__(
        self,
        app: ASGIApp,
        kind: TransportKind,
        *,
        ssl_keyfile: str | None = None,
        ssl_certfile: str | None = None,
        graceful_timeout_seconds: int = GRACEFUL_TIMEOUT_SECONDS,
    ) -> None:
        self._app = app
        self._kind: TransportKind = kind
        self._ssl_keyfile = ssl_keyfile
        self._ssl_certfile = ssl_certfile
        self._graceful_timeout_seconds = graceful_timeout_seconds
        self._server: _ManagedServer | None = None
        self._socket: socket.socket | None = None
        self._serving = False
        self._closed = False
        self._stopped = asyncio.Event()

    @property
    def kind(self) -> TransportKind:
        return self._kind

    @property
    def bound_port(self) -> int | None:
        if self._socket is None:
            return None
        return self._socket.getsockname()[1]

    def bind(self, host: str, port: int) -> None:
        """Liga o socket. Falha de bind é fatal (uvicorn encerra com código 1)."""
        if self._socket is not None:
            raise RuntimeError("listener já está ligado")
        config = uvicorn.Config(
            self._app,
            host=host,
            port=port,
            ssl_keyfile=self._ssl_keyfile,
            ssl_certfile=self._ssl_certfile,
            log_config=None,
            lifespan="off",
            timeout_graceful_shutdown=self._graceful_timeout_seconds,
        )
        self._server = _ManagedServer(config)
        self._socket = config.bind_socket()

    async def serve(self) -> None:
        if self._server is None or self._socket is None:
            raise RuntimeError("bind() deve ser chamado antes de serve()")
        self._serving = True
        try:
            await self._server.serve(sockets=[self._socket])
        finally:
            self._stopped.set()

    async def close(self) -> None:
        """Para de aceitar conexões e aguarda o servidor encerrar. Idempotente."""
        if self._closed:
            return
        self._closed = True
        if self._server is None:
            return
        self._server.should_exit = True
        if self._serving:
            await self._stopped.wait()
        elif self._socket is not None:
            self._socket.close()


def load_tls_context(settings: ServerSettings) -> ssl.SSLContext:
    """Carrega cadeia e chave; levanta OSError/ssl.SSLError se inválidos."""
    context = ssl.SSLContext(ssl.PROTOCOL_TLS_SERVER)
    context.load_cert_chain(certfile=settings.ssl_fullchain, keyfile=settings.ssl_privkey)
    return context


def select_listener(settings: ServerSettings, app: ASGIApp) -> UvicornListener | None:
    """Cria o listener do transporte configurado.

    Returns:
        Listener, ou None quando o material TLS não pôde ser carregado.
    """
    if not settings.is_tls:
        return UvicornListener(app, "http")

    try:
        load_tls_context(settings)
    except (OSError, ValueError) as exc:
        logger.warning(
            "ssl_certificate_load_failed",
            extra={"error_type": type(exc).__name__},
        )
        return None

    return UvicornListener(
        app,
        "https",
        ssl_keyfile=settings.ssl_privkey,
        ssl_certfile=settings.ssl_fullchain,
    )
