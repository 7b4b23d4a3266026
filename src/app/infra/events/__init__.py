"""Eventos do gateway."""

from app.infra.events.manager import EventManager

__all__ = ["EventManager"]
