"""Django ORM implementation of the EventStore."""

from collections.abc import Iterable
from datetime import date
from typing import Any

from django.db.models import QuerySet

from events import cache_keys
from events import models
from events.domain import Event, EventDraft, EventId, EventStatus, Money
from events.stores.interfaces import EventStore


def _to_domain(row: models.Event) -> Event:
    return Event(
        id=EventId(row.id),
        name=row.name,
        category=row.category,
        location=row.location,
        organizer_name=row.organizer_name,
        description=row.description,
        start_date=row.start_date,
        end_date=row.end_date,
        status=EventStatus(row.status),
        fee=row.fee,
        admission_price=Money(row.admission_price) if row.admission_price is not None else None,
        latitude=row.latitude,
        longitude=row.longitude,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _to_columns(draft: EventDraft) -> dict[str, Any]:
    return {
        "name": draft.name,
        "category": draft.category,
        "location": draft.location,
        "organizer_name": draft.organizer_name,
        "description": draft.description,
        "start_date": draft.start_date,
        "end_date": draft.end_date,
        "status": draft.status.value,
        "fee": draft.fee,
        "admission_price": draft.admission_price.amount if draft.admission_price else None,
        "latitude": draft.latitude,
        "longitude": draft.longitude,
    }


def _all(queryset: QuerySet) -> list[Event]:
    return [_to_domain(row) for row in queryset]


class DjangoEventStore(EventStore):
    """Relational event store using Django ORM."""

    def find_all(self) -> list[Event]:
        return _all(models.Event.objects.order_by("-created_at"))

    def find_by_id(self, event_id: EventId) -> Event | None:
        row = models.Event.objects.filter(pk=event_id.value).first()
        return _to_domain(row) if row is not None else None

    def find_all_by_category_order_by_start_date_asc(self, category: str) -> list[Event]:
        return _all(models.Event.objects.filter(category=category).order_by("start_date"))

    def find_all_by_status_order_by_created_at_desc(self, status: EventStatus) -> list[Event]:
        return _all(models.Event.objects.filter(status=status.value).order_by("-created_at"))

    def find_all_by_location_containing_ignore_case(self, location: str) -> list[Event]:
        return _all(models.Event.objects.filter(location__icontains=location))

    def find_all_by_category_and_status_order_by_start_date_asc(
        self, category: str, status: EventStatus
    ) -> list[Event]:
        return _all(
            models.Event.objects.filter(category=category, status=status.value).order_by(
                "start_date"
            )
        )

    def exists_by_id(self, event_id: EventId) -> bool:
        return models.Event.objects.filter(pk=event_id.value).exists()

    def exists_by_name_and_start_date(
        self, name: str, start_date: date | None, exclude_id: EventId | None = None
    ) -> bool:
        queryset = models.Event.objects.filter(name=name, start_date=start_date)
        if exclude_id is not None:
            queryset = queryset.exclude(pk=exclude_id.value)
        return queryset.exists()

    def count(self) -> int:
        return models.Event.objects.count()

    def count_by_status(self, status: EventStatus) -> int:
        return models.Event.objects.filter(status=status.value).count()

    def save(self, draft: EventDraft, event_id: EventId | None = None) -> Event:
        columns = _to_columns(draft)
        if event_id is None:
            row = models.Event.objects.create(**columns)
        else:
            row = models.Event.objects.get(pk=event_id.value)
            for name, value in columns.items():
                setattr(row, name, value)
            row.save()
        return _to_domain(row)

    def save_all(self, drafts: Iterable[EventDraft]) -> int:
        rows = [models.Event(**_to_columns(draft)) for draft in drafts]
        if not rows:
            return 0
        models.Event.objects.bulk_create(rows)
        # bulk_create skips post_save, so the list cache is dropped here.
        cache_keys.invalidate_list()
        return len(rows)

    def delete_by_id(self, event_id: EventId) -> bool:
        deleted, _ = models.Event.objects.filter(pk=event_id.value).delete()
        return deleted > 0
