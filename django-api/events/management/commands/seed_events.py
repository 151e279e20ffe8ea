from django.conf import settings
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from events.seed import seed_events_from_csv
from events.stores.django_store import DjangoEventStore


class Command(BaseCommand):
    help = "Load the events dataset when the catalog is empty."

    def add_arguments(self, parser):
        parser.add_argument("--path", help="CSV file to load (defaults to EVENTS_SEED_CSV_PATH).")
        parser.add_argument("--batch-size", type=int, help="Rows per bulk insert.")

    def handle(self, *args, **options):
        path = options["path"] or settings.EVENTS_SEED_CSV_PATH
        batch_size = options["batch_size"] or settings.EVENTS_SEED_BATCH_SIZE
        if batch_size < 1:
            raise CommandError("--batch-size must be positive")

        try:
            with transaction.atomic():
                inserted = seed_events_from_csv(DjangoEventStore(), path, batch_size=batch_size)
        except FileNotFoundError as exc:
            raise CommandError(f"Dataset not found: {path}") from exc

        if inserted:
            self.stdout.write(self.style.SUCCESS(f"Seeded {inserted} events from {path}"))
        else:
            self.stdout.write("Events already present; nothing seeded.")
