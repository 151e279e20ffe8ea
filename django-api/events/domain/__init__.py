from events.domain.models import Event, EventDraft
from events.domain.value_objects import EventId, EventStatus, Money

__all__ = [
    "Event",
    "EventDraft",
    "EventId",
    "EventStatus",
    "Money",
]
