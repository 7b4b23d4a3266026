"""Contrato do monitor de sessões WhatsApp."""

from __future__ import annotations

from typing import Protocol


class SessionMonitorProtocol(Protocol):
    async def load_instances(self) -> None: ...
