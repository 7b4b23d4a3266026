"""Lifecycle Orchestrator: startup e shutdown do processo.

Sequência de `run()`:

    IDLE → CONFIGURING        app montado; provedor de arquivos e repositório iniciados
         → BINDING_TRANSPORT  listener escolhido (fallback TLS → HTTP); porta resolvida
         → SERVING            event manager (best-effort); bind; log; SIGTERM; serve
         → DRAINING           SIGTERM: close do listener contra timer de 10s
         → STOPPED            código de saída devolvido ao entrypoint

As duas mutações de configuração (downgrade do transporte e porta
resolvida) geram novas AppSettings antes do bind e não mudam depois.
"""

from __future__ import annotations

import asyncio
import contextlib
import inspect
import logging
import signal
from typing import TYPE_CHECKING, Any

from app.infra.webhook import ErrorNotifier
from app.lifecycle.application import build_application
from app.lifecycle.collaborators import Enabled
from app.lifecycle.ports import resolve_port
from app.lifecycle.shutdown import ShutdownCoordinator
from app.lifecycle.state import LifecycleState
from app.lifecycle.transport import select_listener
from app.runtime import schedule_background_task
from config.logging import log_fallback
from config.settings import SSL_FULLCHAIN_ENV, SSL_PRIVKEY_ENV
from utils.errors import TransportUnavailableError

if TYPE_CHECKING:
    from fastapi import FastAPI

    from app.lifecycle.collaborators import Collaborators
    from app.lifecycle.transport import TransportSelector
    from app.protocols import ListenerProtocol
    from config.settings import AppSettings

logger = logging.getLogger(__name__)


class LifecycleOrchestrator:
    """Dono exclusivo do listener e da sequência de vida do processo.

    Args:
        settings: Settings carregadas no entrypoint.
        collaborators: Serviços externos (repositório, monitor, eventos...).
        port_override: Porta injetada externamente (ex: env PORT).
        transport_selector: Fábrica de listeners (padrão: select_listener).
        shutdown: Coordenador da drenagem (padrão: timer de 10s, os._exit).
        notifier: Notificador de erros (padrão: ErrorNotifier das settings).
    """

    def __init__(
        self,
        settings: AppSettings,
        collaborators: Collaborators,
        *,
        port_override: str | int | None = None,
        transport_selector: TransportSelector = select_listener,
        shutdown: ShutdownCoordinator | None = None,
        notifier: ErrorNotifier | None = None,
    ) -> None:
        self._settings = settings
        self._collaborators = collaborators
        self._port_override = port_override
        self._select_listener = transport_selector
        self._shutdown = shutdown or ShutdownCoordinator()
        self._notifier = notifier
        self._state = LifecycleState.IDLE
        self._app: FastAPI | None = None
        self._listener: ListenerProtocol | None = None
        self._serve_task: asyncio.Task[None] | None = None
        self._drain_task: asyncio.Task[int] | None = None
        self._signal_registered = False

    @property
    def state(self) -> LifecycleState:
        return self._state

    @property
    def settings(self) -> AppSettings:
        """Settings efetivas (transporte e porta reais após o bind)."""
        return self._settings

    @property
    def app(self) -> FastAPI | None:
        return self._app

    @property
    def listener(self) -> ListenerProtocol | None:
        return self._listener

    # ──────────────────────────────────────────────────────────────
    # Sequência completa
    # ──────────────────────────────────────────────────────────────

    async def run(self) -> int:
        """Executa o ciclo completo e devolve o código de saída do processo."""
        await self.configure()
        self.bind_transport()
        await self.start_serving()
        exit_code = await self._shutdown.wait()
        self._transition(LifecycleState.STOPPED)
        return exit_code

    # ──────────────────────────────────────────────────────────────
    # IDLE → CONFIGURING
    # ──────────────────────────────────────────────────────────────

    async def configure(self) -> FastAPI:
        """Monta o app e inicia, em sequência, provedor de arquivos e repositório.

        Falhas de init dos colaboradores propagam e abortam o startup.
        """
        self._require(LifecycleState.IDLE)
        self._transition(LifecycleState.CONFIGURING)

        if self._notifier is None:
            self._notifier = ErrorNotifier(self._settings)
        self._app = build_application(self._settings, self._collaborators, self._notifier)

        file_provider = self._collaborators.file_provider
        if isinstance(file_provider, Enabled):
            await file_provider.service.on_module_init()
            logger.info("Provider:Files - ON")

        await self._collaborators.repository.on_module_init()
        logger.info("repository_ready")
        return self._app

    # ──────────────────────────────────────────────────────────────
    # CONFIGURING → BINDING_TRANSPORT
    # ──────────────────────────────────────────────────────────────

    def bind_transport(self) -> ListenerProtocol:
        """Escolhe o listener (com fallback para HTTP) e resolve a porta."""
        self._require(LifecycleState.CONFIGURING)
        self._transition(LifecycleState.BINDING_TRANSPORT)

        listener = self._select_listener(self._settings.server, self._app)
        if listener is None and self._settings.server.is_tls:
            logger.warning("SSL cert load failed, falling back to HTTP")
            logger.info(
                "Ensure '%s' and '%s' env vars point to valid certificate files",
                SSL_PRIVKEY_ENV,
                SSL_FULLCHAIN_ENV,
            )
            log_fallback(logger, "transport", reason="ssl_certificate_load_failed")
            self._settings = self._settings.with_transport("http")
            listener = self._select_listener(self._settings.server, self._app)

        if listener is None:
            raise TransportUnavailableError("Nenhum listener HTTP disponível")

        port = resolve_port(self._port_override, self._settings.server.port)
        self._settings = self._settings.with_port(port)
        self._listener = listener
        return listener

    # ──────────────────────────────────────────────────────────────
    # BINDING_TRANSPORT → SERVING
    # ──────────────────────────────────────────────────────────────

    async def start_serving(self) -> None:
        """Entrega o listener ao event manager, faz o bind e começa a servir."""
        self._require(LifecycleState.BINDING_TRANSPORT)
        listener = self._listener
        if listener is None:
            raise TransportUnavailableError("bind_transport() não foi executado")

        server = self._settings.server
        self._init_event_manager(listener)

        listener.bind(server.host, server.port)
        logger.info(
            "%s - ON: %s",
            server.kind.upper(),
            server.port,
            extra={"transport": server.kind, "port": server.port},
        )

        self._register_signal_handler()
        self._serve_task = asyncio.get_running_loop().create_task(
            listener.serve(), name="listener_serve"
        )
        self._serve_task.add_done_callback(self._on_serve_done)
        self._transition(LifecycleState.SERVING)

        schedule_background_task(
            name="session_monitor_load",
            coroutine=self._collaborators.session_monitor.load_instances(),
        )
        self._collaborators.install_unexpected_error_handler()

    def _init_event_manager(self, listener: ListenerProtocol) -> None:
        try:
            result: Any = self._collaborators.event_manager.init(listener, self._settings)
            if inspect.iscoroutine(result):
                schedule_background_task(name="event_manager_init", coroutine=result)
        except Exception:
            logger.exception("event_manager_init_failed")

    def _register_signal_handler(self) -> None:
        if self._signal_registered:
            return
        try:
            asyncio.get_running_loop().add_signal_handler(signal.SIGTERM, self.handle_sigterm)
        except (NotImplementedError, RuntimeError) as exc:
            logger.warning(
                "sigterm_handler_unavailable",
                extra={"error_type": type(exc).__name__},
            )
            return
        self._signal_registered = True

    def _on_serve_done(self, task: asyncio.Task[None]) -> None:
        if self._state is not LifecycleState.SERVING:
            return
        exc: BaseException | None = None
        with contextlib.suppress(asyncio.CancelledError):
            exc = task.exception()
        if exc is not None:
            logger.error("listener_serve_failed", extra={"error_type": type(exc).__name__})
            self._shutdown.decide(1, "serve_failed")
            return
        logger.warning("listener_stopped_unexpectedly")
        self._shutdown.decide(0, "serve_stopped")

    # ──────────────────────────────────────────────────────────────
    # SERVING → DRAINING → STOPPED
    # ──────────────────────────────────────────────────────────────

    def handle_sigterm(self) -> None:
        """Handler do SIGTERM; qualquer falha ainda força a saída."""
        logger.warning("SIGTERM received, shutting down gracefully")
        try:
            self.request_shutdown()
        except Exception:
            logger.exception("graceful_shutdown_failed")
            self._shutdown.force_exit(1, "signal_handler_failed")

    def request_shutdown(self) -> asyncio.Task[int] | None:
        """Inicia a drenagem; chamadas repetidas reaproveitam a mesma."""
        if self._drain_task is not None:
            return self._drain_task
        if self._state is not LifecycleState.SERVING or self._listener is None:
            logger.warning("shutdown_ignored", extra={"state": self._state.value})
            return None
        self._transition(LifecycleState.DRAINING)
        self._drain_task = asyncio.get_running_loop().create_task(
            self._shutdown.drain(self._listener.close), name="shutdown_drain"
        )
        return self._drain_task

    # ──────────────────────────────────────────────────────────────
    # Helpers
    # ──────────────────────────────────────────────────────────────

    def _require(self, expected: LifecycleState) -> None:
        if self._state is not expected:
            raise RuntimeError(
                f"Transição inválida: esperado {expected.value}, atual {self._state.value}"
            )

    def _transition(self, target: LifecycleState) -> None:
        logger.info(
            "lifecycle_transition",
            extra={"from_state": self._state.value, "to_state": target.value},
        )
        self._state = target
