from django.urls import path

from events.handlers import EventCountView, EventDetailView, EventListView, HealthView

urlpatterns = [
    path("health", HealthView.as_view(), name="health"),
    path("events", EventListView.as_view(), name="event-list"),
    path("events/count", EventCountView.as_view(), name="event-count"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
]
