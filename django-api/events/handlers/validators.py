"""Field rules that DRF's built-in validators do not cover."""

from datetime import date, datetime, time, timedelta

from django.utils import timezone
from rest_framework import serializers

MIN_LEAD_TIME = timedelta(hours=24)


def validate_at_least_24_hours_ahead(value: date) -> None:
    """Reject event dates whose start (midnight, local time) is less than 24h away."""
    starts_at = timezone.make_aware(datetime.combine(value, time.min))
    if starts_at < timezone.now() + MIN_LEAD_TIME:
        raise serializers.ValidationError(
            "Event date must be at least 24 hours in the future."
        )
