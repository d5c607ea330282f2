"""Event system: bus and event types for snapshot lifecycle."""

from stylepatch.events.bus import EventBus, Subscription
from stylepatch.events.types import TextChanged, TextLoaded, TextReset

__all__ = [
    "EventBus",
    "Subscription",
    "TextChanged",
    "TextLoaded",
    "TextReset",
]
