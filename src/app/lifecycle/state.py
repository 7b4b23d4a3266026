"""Estados do ciclo de vida do processo."""

from __future__ import annotations

from enum import Enum


class LifecycleState(str, Enum):
    """IDLE → CONFIGURING → BINDING_TRANSPORT → SERVING → DRAINING → STOPPED."""

    IDLE = "idle"
    CONFIGURING = "configuring"
    BINDING_TRANSPORT = "binding_transport"
    SERVING = "serving"
    DRAINING = "draining"
    STOPPED = "stopped"
