"""Load events from a CSV dataset into an empty store.

Field parsing is best-effort: a value that cannot be parsed is stored as
null rather than rejecting the row.
"""

import csv
import logging
import re
from collections.abc import Iterable, Iterator
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from os import PathLike

from events.domain import EventDraft, EventStatus, Money
from events.domain.value_objects import MAX_LATITUDE, MAX_LONGITUDE
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)

BATCH_SIZE = 500
DATE_FORMAT = "%Y/%m/%d %I:%M:%S %p"
CENTS = Decimal("0.01")
MAX_PRICE = Decimal("99999999.99")
_NOT_MONEY = re.compile(r"[^0-9.\-]")


def first_non_blank(*values: str | None) -> str | None:
    for value in values:
        if value and value.strip():
            return value
    return None


def parse_date(value: str | None) -> date | None:
    if not value or not value.strip():
        return None
    try:
        return datetime.strptime(value.strip(), DATE_FORMAT).date()
    except ValueError:
        logger.warning("Unable to parse date: %r", value)
        return None


def parse_money(value: str | None) -> Money | None:
    if not value or not value.strip():
        return None
    cleaned = _NOT_MONEY.sub("", value)
    if not cleaned:
        return None
    try:
        amount = Decimal(cleaned).quantize(CENTS)
        return Money(amount) if amount <= MAX_PRICE else None
    except (InvalidOperation, ValueError):
        return None


def parse_float(value: str | None) -> float | None:
    if not value or not value.strip():
        return None
    try:
        return float(value)
    except ValueError:
        return None


def parse_degrees(value: str | None, limit: float) -> float | None:
    degrees = parse_float(value)
    if degrees is None or not -limit <= degrees <= limit:
        return None
    return degrees


def row_to_draft(row: dict[str, str | None]) -> EventDraft:
    """Map one dataset row onto an event draft."""

    def text(column: str, limit: int | None = None) -> str:
        value = (row.get(column) or "").strip()
        return value[:limit] if limit else value

    location = first_non_blank(text("site_location_name"), text("site_address")) or ""
    return EventDraft(
        organizer_name=text("org_name", 255),
        name=text("event_name", 255),
        description=text("event_description"),
        category=text("events_category", 100),
        location=location[:255],
        start_date=parse_date(row.get("event_start_date")),
        end_date=parse_date(row.get("event_end_date")),
        fee=text("fee").lower() == "true",
        admission_price=parse_money(row.get("admission_price")),
        latitude=parse_degrees(row.get("latitude"), MAX_LATITUDE),
        longitude=parse_degrees(row.get("longitude"), MAX_LONGITUDE),
        status=EventStatus.ACTIVE,
    )


def batched(drafts: Iterable[EventDraft], size: int) -> Iterator[list[EventDraft]]:
    batch: list[EventDraft] = []
    for draft in drafts:
        batch.append(draft)
        if len(batch) == size:
            yield batch
            batch = []
    if batch:
        yield batch


def seed_events_from_csv(
    store: EventStore, path: str | PathLike, batch_size: int = BATCH_SIZE
) -> int:
    """Insert every row of the CSV at ``path``, unless the store already has events.

    Returns the number of events inserted.
    """
    if store.count() > 0:
        logger.info("Store already holds events; skipping seed")
        return 0

    inserted = 0
    # Undecodable bytes are read as U+FFFD.
    with open(path, encoding="utf-8-sig", errors="replace", newline="") as handle:
        drafts = (row_to_draft(row) for row in csv.DictReader(handle))
        for batch in batched(drafts, batch_size):
            inserted += store.save_all(batch)
            logger.debug("Inserted batch of %d events", len(batch))
    return inserted
