"""Django signal handlers for cache invalidation and post-migrate seeding."""

import logging

from django.conf import settings
from django.db import transaction
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from events import cache_keys
from events.models import Event

logger = logging.getLogger(__name__)


@receiver([post_save, post_delete], sender=Event)
def invalidate_event_cache(sender, instance, **kwargs):
    """Invalidate caches when an event is saved or deleted."""
    cache_keys.invalidate_event(instance.pk)


def seed_after_migrate(sender, **kwargs):
    """Load the events dataset once the schema exists, if enabled."""
    if not settings.EVENTS_SEED_ON_MIGRATE:
        return
    from events.seed import seed_events_from_csv
    from events.stores.django_store import DjangoEventStore

    path = settings.EVENTS_SEED_CSV_PATH
    try:
        with transaction.atomic():
            inserted = seed_events_from_csv(
                DjangoEventStore(), path, batch_size=settings.EVENTS_SEED_BATCH_SIZE
            )
    except FileNotFoundError:
        logger.warning("Events dataset %s not found; skipping seed", path)
        return
    if inserted:
        logger.info("Seeded %d events from %s", inserted, path)
