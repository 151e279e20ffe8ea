from events.handlers.views import EventCountView, EventDetailView, EventListView, HealthView

__all__ = ["EventListView", "EventCountView", "EventDetailView", "HealthView"]
