"""Cache keys for event responses and their invalidation."""

from uuid import UUID

from django.conf import settings
from django.core.cache import cache

LIST_KEY = "events:list"


def detail_key(event_id) -> str | None:
    """Return the cache key for one event, or None if the ID is not a UUID."""
    try:
        return f"events:{UUID(str(event_id))}"
    except ValueError:
        return None


def timeout() -> int:
    return settings.EVENTS_CACHE_TIMEOUT


def invalidate_list() -> None:
    cache.delete(LIST_KEY)


def invalidate_event(event_id) -> None:
    keys = [LIST_KEY]
    key = detail_key(event_id)
    if key is not None:
        keys.append(key)
    cache.delete_many(keys)
