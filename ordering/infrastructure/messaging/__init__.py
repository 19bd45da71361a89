"""Messaging infrastructure - Event Bus for committed domain events."""

from .event_bus import EventBus, EventBusEmpty, EventHandler

__all__ = ["EventBus", "EventBusEmpty", "EventHandler"]
