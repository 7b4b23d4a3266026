"""Protocolos dos colaboradores consumidos pelo orquestrador."""

from .error_tracking import ErrorTrackingProtocol
from .event_manager import EventManagerProtocol
from .file_provider import FileProviderProtocol
from .instance_repository import InstanceRepositoryProtocol
from .listener import ListenerProtocol
from .session_monitor import SessionMonitorProtocol

__all__ = [
    "ErrorTrackingProtocol",
    "EventManagerProtocol",
    "FileProviderProtocol",
    "InstanceRepositoryProtocol",
    "ListenerProtocol",
    "SessionMonitorProtocol",
]
