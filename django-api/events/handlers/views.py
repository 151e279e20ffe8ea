"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Leave error mapping to the exception translator
- Never contain business logic
"""

from django.core.cache import cache
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events import cache_keys
from events.handlers.serializers import EventRequestSerializer, EventSerializer
from events.services.event_service import EventService
from events.stores.django_store import DjangoEventStore

FILTER_PARAMS = ("category", "status", "location")


class EventServiceMixin:
    store_class = DjangoEventStore

    def get_service(self) -> EventService:
        return EventService(self.store_class())


class HealthView(APIView):
    """Handler for GET /api/health"""

    def get(self, request: Request) -> Response:
        return Response({"status": "ok"})


class EventListView(EventServiceMixin, APIView):
    """Handler for GET and POST /api/events"""

    def get(self, request: Request) -> Response:
        filters = {name: request.query_params.get(name) for name in FILTER_PARAMS}
        if any(value and value.strip() for value in filters.values()):
            events = self.get_service().list_events(**filters)
            return Response(EventSerializer(events, many=True).data)

        data = cache.get(cache_keys.LIST_KEY)
        if data is None:
            events = self.get_service().list_events()
            data = list(EventSerializer(events, many=True).data)
            cache.set(cache_keys.LIST_KEY, data, cache_keys.timeout())
        return Response(data)

    def post(self, request: Request) -> Response:
        serializer = EventRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event = self.get_service().create_event(serializer.to_draft())
        return Response(EventSerializer(event).data, status=status.HTTP_201_CREATED)


class EventCountView(EventServiceMixin, APIView):
    """Handler for GET /api/events/count"""

    def get(self, request: Request) -> Response:
        count = self.get_service().count_events(request.query_params.get("status"))
        return Response({"count": count})


class EventDetailView(EventServiceMixin, APIView):
    """Handler for GET, PUT, PATCH and DELETE /api/events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        key = cache_keys.detail_key(event_id)
        data = cache.get(key) if key is not None else None
        if data is None:
            event = self.get_service().get_event(event_id)
            data = dict(EventSerializer(event).data)
            cache.set(cache_keys.detail_key(event.id), data, cache_keys.timeout())
        return Response(data)

    def put(self, request: Request, event_id: str) -> Response:
        serializer = EventRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event = self.get_service().update_event(event_id, serializer.to_draft())
        return Response(EventSerializer(event).data)

    def patch(self, request: Request, event_id: str) -> Response:
        serializer = EventRequestSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        event = self.get_service().partial_update_event(event_id, serializer.to_changes())
        return Response(EventSerializer(event).data)

    def delete(self, request: Request, event_id: str) -> Response:
        self.get_service().delete_event(event_id)
        return Response(status=status.HTTP_204_NO_CONTENT)
