"""Testes do LifecycleOrchestrator com colaboradores e listener fake."""

from __future__ import annotations

import asyncio

import pytest
from fastapi.testclient import TestClient

from app.lifecycle import LifecycleOrchestrator, LifecycleState, ShutdownCoordinator
from app.runtime import drain_background_tasks
from config.settings import AppSettings, ServerSettings
from tests.fakes.fake_lifecycle import FakeListener, ListenerFactory, make_collaborators
from utils.errors import RedisConnectionError, TransportUnavailableError


def _settings(**server: object) -> AppSettings:
    return AppSettings(server=ServerSettings(**server))


async def _wait_for_state(
    orchestrator: LifecycleOrchestrator,
    state: LifecycleState,
    timeout: float = 1.0,
) -> None:
    deadline = asyncio.get_running_loop().time() + timeout
    while orchestrator.state is not state:
        if asyncio.get_running_loop().time() > deadline:
            raise AssertionError(f"estado {state.value} não atingido: {orchestrator.state.value}")
        await asyncio.sleep(0.01)


@pytest.fixture(autouse=True)
async def _drain_detached_tasks() -> None:
    yield
    await drain_background_tasks(timeout_seconds=0.1)


class TestRunSequence:
    """Sequência completa: startup, SIGTERM e código de saída."""

    @pytest.mark.asyncio
    async def test_run_initializes_in_order_and_exits_zero_after_sigterm(self) -> None:
        calls: list[str] = []
        collaborators = make_collaborators(calls)
        listener = FakeListener("http", calls=calls)
        orchestrator = LifecycleOrchestrator(
            _settings(),
            collaborators,
            transport_selector=ListenerFactory({"http": listener}),
        )

        run_task = asyncio.create_task(orchestrator.run())
        await _wait_for_state(orchestrator, LifecycleState.SERVING)
        orchestrator.handle_sigterm()
        exit_code = await asyncio.wait_for(run_task, timeout=1.0)

        assert exit_code == 0
        assert orchestrator.state is LifecycleState.STOPPED
        assert calls[:4] == ["file_provider", "repository", "event_manager", "bind"]
        assert "session_monitor" in calls
        assert "unexpected_error_hook" in calls
        assert listener.close_count == 1
        assert collaborators.session_monitor.loaded is True

    @pytest.mark.asyncio
    async def test_logs_transport_line_with_kind_and_port(
        self,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        listener = FakeListener("http")
        orchestrator = LifecycleOrchestrator(
            _settings(port=3000),
            make_collaborators([]),
            transport_selector=ListenerFactory({"http": listener}),
        )

        with caplog.at_level("INFO"):
            await orchestrator.configure()
            orchestrator.bind_transport()
            await orchestrator.start_serving()

        assert "HTTP - ON: 3000" in caplog.messages
        assert "Provider:Files - ON" in caplog.messages
        assert listener.bound == ("0.0.0.0", 3000)

        await orchestrator.request_shutdown()

    @pytest.mark.asyncio
    async def test_repeated_sigterm_reuses_the_same_drain(self) -> None:
        listener = FakeListener("http")
        orchestrator = LifecycleOrchestrator(
            _settings(),
            make_collaborators([]),
            transport_selector=ListenerFactory({"http": listener}),
        )

        run_task = asyncio.create_task(orchestrator.run())
        await _wait_for_state(orchestrator, LifecycleState.SERVING)
        first = orchestrator.request_shutdown()
        second = orchestrator.request_shutdown()

        assert first is second
        assert await asyncio.wait_for(run_task, timeout=1.0) == 0
        assert listener.close_count == 1

    @pytest.mark.asyncio
    async def test_close_failure_exits_with_one(self) -> None:
        listener = FakeListener("http", close_error=RuntimeError("close failed"))
        orchestrator = LifecycleOrchestrator(
            _settings(),
            make_collaborators([]),
            transport_selector=ListenerFactory({"http": listener}),
        )

        run_task = asyncio.create_task(orchestrator.run())
        await _wait_for_state(orchestrator, LifecycleState.SERVING)
        orchestrator.handle_sigterm()

        assert await asyncio.wait_for(run_task, timeout=1.0) == 1

    @pytest.mark.asyncio
    async def test_hanging_close_is_forced_out_by_the_timer(self) -> None:
        forced: list[int] = []
        listener = FakeListener("http", close_hangs=True)
        orchestrator = LifecycleOrchestrator(
            _settings(),
            make_collaborators([]),
            transport_selector=ListenerFactory({"http": listener}),
            shutdown=ShutdownCoordinator(timeout_seconds=0.05, force_exit=forced.append),
        )

        run_task = asyncio.create_task(orchestrator.run())
        await _wait_for_state(orchestrator, LifecycleState.SERVING)
        orchestrator.handle_sigterm()

        assert await asyncio.wait_for(run_task, timeout=1.0) == 0
        assert forced == [0]

        listener.stop()

    @pytest.mark.asyncio
    async def test_sigterm_handler_failure_still_forces_exit(
        self,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        forced: list[int] = []
        listener = FakeListener("http")
        orchestrator = LifecycleOrchestrator(
            _settings(),
            make_collaborators([]),
            transport_selector=ListenerFactory({"http": listener}),
            shutdown=ShutdownCoordinator(timeout_seconds=1.0, force_exit=forced.append),
        )
        await orchestrator.configure()
        orchestrator.bind_transport()
        await orchestrator.start_serving()

        def _explode() -> None:
            raise RuntimeError("boom")

        monkeypatch.setattr(orchestrator, "request_shutdown", _explode)
        orchestrator.handle_sigterm()

        assert forced == [1]
        listener.stop()

    @pytest.mark.asyncio
    async def test_server_stopping_on_its_own_ends_run(self) -> None:
        listener = FakeListener("http")
        orchestrator = LifecycleOrchestrator(
            _settings(),
            make_collaborators([]),
            transport_selector=ListenerFactory({"http": listener}),
        )

        run_task = asyncio.create_task(orchestrator.run())
        await _wait_for_state(orchestrator, LifecycleState.SERVING)
        listener.stop()

        assert await asyncio.wait_for(run_task, timeout=1.0) == 0

    @pytest.mark.asyncio
    async def test_server_failure_ends_run_with_one(self) -> None:
        listener = FakeListener("http", serve_error=OSError("socket closed"))
        orchestrator = LifecycleOrchestrator(
            _settings(),
            make_collaborators([]),
            transport_selector=ListenerFactory({"http": listener}),
        )

        run_task = asyncio.create_task(orchestrator.run())
        await _wait_for_state(orchestrator, LifecycleState.SERVING)
        listener.stop()

        assert await asyncio.wait_for(run_task, timeout=1.0) == 1


class TestConfigure:
    """Fase CONFIGURING."""

    @pytest.mark.asyncio
    async def test_repository_failure_aborts_startup(self) -> None:
        calls: list[str] = []
        orchestrator = LifecycleOrchestrator(
            _settings(),
            make_collaborators(calls, repository_error=RedisConnectionError("down")),
            transport_selector=ListenerFactory({"http": FakeListener()}),
        )

        with pytest.raises(RedisConnectionError):
            await orchestrator.configure()

        assert calls == ["file_provider", "repository"]
        assert orchestrator.listener is None

    @pytest.mark.asyncio
    async def test_disabled_file_provider_is_skipped(
        self,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        calls: list[str] = []
        orchestrator = LifecycleOrchestrator(
            _settings(),
            make_collaborators(calls, with_file_provider=False),
        )

        with caplog.at_level("INFO"):
            await orchestrator.configure()

        assert calls == ["repository"]
        assert "Provider:Files - ON" not in caplog.messages

    @pytest.mark.asyncio
    async def test_configure_twice_is_rejected(self) -> None:
        orchestrator = LifecycleOrchestrator(_settings(), make_collaborators([]))
        await orchestrator.configure()

        with pytest.raises(RuntimeError, match="Transição inválida"):
            await orchestrator.configure()

    @pytest.mark.asyncio
    async def test_healthz_answers_ok_after_configure(self) -> None:
        orchestrator = LifecycleOrchestrator(_settings(), make_collaborators([]))
        app = await orchestrator.configure()

        with TestClient(app) as client:
            response = client.get("/healthz")

        assert response.status_code == 200
        assert response.text == "ok"


class TestBindTransport:
    """Fase BINDING_TRANSPORT: fallback TLS e porta."""

    @pytest.mark.asyncio
    async def test_tls_failure_falls_back_to_http(
        self,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        http_listener = FakeListener("http")
        selector = ListenerFactory({"https": None, "http": http_listener})
        orchestrator = LifecycleOrchestrator(
            _settings(kind="https", ssl_privkey="/missing/key.pem"),
            make_collaborators([]),
            transport_selector=selector,
        )
        await orchestrator.configure()

        with caplog.at_level("INFO"):
            listener = orchestrator.bind_transport()

        assert listener is http_listener
        assert selector.requested == ["https", "http"]
        assert orchestrator.settings.server.kind == "http"
        assert orchestrator.settings.server.ssl_privkey == "/missing/key.pem"
        assert "SSL cert load failed, falling back to HTTP" in caplog.messages
        assert "SSL_CONF_PRIVKEY" in caplog.text
        assert "SSL_CONF_FULLCHAIN" in caplog.text

    @pytest.mark.asyncio
    async def test_tls_success_keeps_https(self) -> None:
        tls_listener = FakeListener("https")
        orchestrator = LifecycleOrchestrator(
            _settings(kind="https", port=443),
            make_collaborators([]),
            transport_selector=ListenerFactory({"https": tls_listener}),
        )
        await orchestrator.configure()

        assert orchestrator.bind_transport() is tls_listener
        assert orchestrator.settings.server.kind == "https"
        assert orchestrator.settings.server.port == 443

    @pytest.mark.asyncio
    async def test_no_listener_at_all_is_fatal(self) -> None:
        orchestrator = LifecycleOrchestrator(
            _settings(kind="https"),
            make_collaborators([]),
            transport_selector=ListenerFactory({}),
        )
        await orchestrator.configure()

        with pytest.raises(TransportUnavailableError):
            orchestrator.bind_transport()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("override", "configured", "expected"),
        [
            ("9000", 8081, 9000),
            (None, 8081, 8081),
            (None, None, 8080),
        ],
    )
    async def test_port_precedence(
        self,
        override: str | None,
        configured: int | None,
        expected: int,
    ) -> None:
        orchestrator = LifecycleOrchestrator(
            _settings(port=configured),
            make_collaborators([]),
            port_override=override,
            transport_selector=ListenerFactory({"http": FakeListener()}),
        )
        await orchestrator.configure()
        orchestrator.bind_transport()

        assert orchestrator.settings.server.port == expected


class TestStartServing:
    """Fase SERVING."""

    @pytest.mark.asyncio
    async def test_event_manager_failure_is_not_fatal(
        self,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        calls: list[str] = []
        listener = FakeListener("http", calls=calls)
        orchestrator = LifecycleOrchestrator(
            _settings(),
            make_collaborators(calls, event_manager_error=RuntimeError("no events")),
            transport_selector=ListenerFactory({"http": listener}),
        )
        await orchestrator.configure()
        orchestrator.bind_transport()

        with caplog.at_level("ERROR"):
            await orchestrator.start_serving()

        assert orchestrator.state is LifecycleState.SERVING
        assert "event_manager_init_failed" in caplog.text
        assert "bind" in calls

        await orchestrator.request_shutdown()

    @pytest.mark.asyncio
    async def test_event_manager_receives_listener_and_effective_settings(self) -> None:
        collaborators = make_collaborators([])
        listener = FakeListener("http")
        orchestrator = LifecycleOrchestrator(
            _settings(kind="https"),
            collaborators,
            port_override=7000,
            transport_selector=ListenerFactory({"https": None, "http": listener}),
        )
        await orchestrator.configure()
        orchestrator.bind_transport()
        await orchestrator.start_serving()

        received_listener, received_settings = collaborators.event_manager.received
        assert received_listener is listener
        assert received_settings.server.kind == "http"
        assert received_settings.server.port == 7000

        await orchestrator.request_shutdown()

    @pytest.mark.asyncio
    async def test_shutdown_outside_serving_is_ignored(
        self,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        orchestrator = LifecycleOrchestrator(_settings(), make_collaborators([]))

        with caplog.at_level("WARNING"):
            result = orchestrator.request_shutdown()

        assert result is None
        assert orchestrator.state is LifecycleState.IDLE
        assert "shutdown_ignored" in caplog.text
