"""Observability helpers: the mutation event bus and logging setup."""

from .events import Event, EventBus
from .log import configure_logging

__all__ = ["Event", "EventBus", "configure_logging"]
