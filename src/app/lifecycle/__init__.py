"""Ciclo de vida do processo: montagem, transporte, serviço e drenagem."""

from app.lifecycle.application import build_application, static_directories
from app.lifecycle.collaborators import Collaborators, Disabled, Enabled, Toggle
from app.lifecycle.orchestrator import LifecycleOrchestrator
from app.lifecycle.ports import resolve_port
from app.lifecycle.shutdown import DRAIN_TIMEOUT_SECONDS, ShutdownCoordinator
from app.lifecycle.state import LifecycleState
from app.lifecycle.transport import UvicornListener, load_tls_context, select_listener

__all__ = [
    "DRAIN_TIMEOUT_SECONDS",
    "Collaborators",
    "Disabled",
    "Enabled",
    "LifecycleOrchestrator",
    "LifecycleState",
    "ShutdownCoordinator",
    "Toggle",
    "UvicornListener",
    "build_application",
    "load_tls_context",
    "resolve_port",
    "select_listener",
    "static_directories",
]
