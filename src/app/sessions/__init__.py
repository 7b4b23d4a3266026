"""Sessões das instâncias WhatsApp.

Exporta o monitor que carrega as instâncias conhecidas no startup.
"""

from app.sessions.monitor import InstanceMonitor

__all__ = ["InstanceMonitor"]
