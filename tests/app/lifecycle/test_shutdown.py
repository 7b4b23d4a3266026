"""Testes do ShutdownCoordinator (close x timer)."""

from __future__ import annotations

import asyncio

import pytest

from app.lifecycle import ShutdownCoordinator
from app.runtime import schedule_background_task


@pytest.mark.asyncio
async def test_clean_close_decides_zero_without_forcing() -> None:
    forced: list[int] = []
    coordinator = ShutdownCoordinator(timeout_seconds=1.0, force_exit=forced.append)
    closed = asyncio.Event()

    async def _close() -> None:
        closed.set()

    exit_code = await coordinator.drain(_close)

    assert exit_code == 0
    assert closed.is_set()
    assert forced == []
    assert coordinator.reason == "closed"


@pytest.mark.asyncio
async def test_close_raising_decides_one(caplog: pytest.LogCaptureFixture) -> None:
    forced: list[int] = []
    coordinator = ShutdownCoordinator(timeout_seconds=1.0, force_exit=forced.append)

    async def _close() -> None:
        raise RuntimeError("close failed")

    with caplog.at_level("ERROR"):
        exit_code = await coordinator.drain(_close)

    assert exit_code == 1
    assert forced == []
    assert "shutdown_close_failed" in caplog.text


@pytest.mark.asyncio
async def test_timer_wins_over_hanging_close(caplog: pytest.LogCaptureFixture) -> None:
    forced: list[int] = []
    coordinator = ShutdownCoordinator(timeout_seconds=0.05, force_exit=forced.append)

    async def _close() -> None:
        await asyncio.Event().wait()

    with caplog.at_level("WARNING"):
        exit_code = await asyncio.wait_for(coordinator.drain(_close), timeout=1.0)

    assert exit_code == 0
    assert forced == [0]
    assert coordinator.reason == "timeout"
    assert "shutdown_timeout_forcing_exit" in caplog.text


@pytest.mark.asyncio
async def test_first_decision_wins() -> None:
    coordinator = ShutdownCoordinator(force_exit=lambda code: None)

    assert coordinator.decide(1, "close_failed") is True
    assert coordinator.decide(0, "timeout") is False
    assert coordinator.decided is True
    assert await coordinator.wait() == 1


@pytest.mark.asyncio
async def test_clean_close_waits_for_detached_tasks() -> None:
    finished = asyncio.Event()

    async def _pending_webhook() -> None:
        await asyncio.sleep(0.02)
        finished.set()

    schedule_background_task(name="error_webhook", coroutine=_pending_webhook())
    coordinator = ShutdownCoordinator(timeout_seconds=1.0, force_exit=lambda code: None)

    async def _close() -> None:
        return None

    assert await coordinator.drain(_close) == 0
    assert finished.is_set()
