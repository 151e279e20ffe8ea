"""Serializers for validating requests and rendering domain models."""

from decimal import Decimal
from typing import Any

from rest_framework import serializers

from events.domain import EventDraft, EventStatus, Money
from events.handlers.validators import validate_at_least_24_hours_ahead


class EventRequestSerializer(serializers.Serializer):
    """Validates the body of create and update requests."""

    name = serializers.CharField(max_length=255)
    organizer_name = serializers.CharField(max_length=255, required=False, allow_blank=True)
    description = serializers.CharField(max_length=5000, required=False, allow_blank=True)
    category = serializers.CharField(max_length=100)
    location = serializers.CharField(max_length=255)
    start_date = serializers.DateField(validators=[validate_at_least_24_hours_ahead])
    end_date = serializers.DateField(required=False, allow_null=True)
    status = serializers.CharField(required=False, default=EventStatus.ACTIVE.value)
    fee = serializers.BooleanField(required=False, default=False)
    admission_price = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        min_value=Decimal("0"),
        required=False,
        allow_null=True,
    )
    latitude = serializers.FloatField(
        min_value=-90, max_value=90, required=False, allow_null=True
    )
    longitude = serializers.FloatField(
        min_value=-180, max_value=180, required=False, allow_null=True
    )

    def validate_status(self, value: str) -> EventStatus:
        try:
            return EventStatus.parse(value)
        except ValueError:
            choices = ", ".join(status.value for status in EventStatus)
            raise serializers.ValidationError(f"Must be one of: {choices}.") from None

    def validate(self, attrs: dict[str, Any]) -> dict[str, Any]:
        errors: dict[str, str] = {}

        start_date, end_date = attrs.get("start_date"), attrs.get("end_date")
        if start_date and end_date and end_date < start_date:
            errors["end_date"] = "End date must not be before start date."

        price = attrs.get("admission_price")
        if price and "fee" in attrs and not attrs["fee"]:
            errors["admission_price"] = "A paid admission price requires fee to be true."

        if errors:
            raise serializers.ValidationError(errors)
        return attrs

    def to_changes(self) -> dict[str, Any]:
        """Return validated fields keyed and typed as on EventDraft."""
        changes = dict(self.validated_data)
        if "admission_price" in changes:
            price = changes["admission_price"]
            changes["admission_price"] = Money(price) if price is not None else None
        return changes

    def to_draft(self) -> EventDraft:
        return EventDraft(**self.to_changes())


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.UUIDField(source="id.value")
    name = serializers.CharField()
    organizer_name = serializers.CharField()
    description = serializers.CharField()
    category = serializers.CharField()
    location = serializers.CharField()
    start_date = serializers.DateField()
    end_date = serializers.DateField()
    status = serializers.CharField(source="status.value")
    fee = serializers.BooleanField()
    admission_price = serializers.SerializerMethodField()
    latitude = serializers.FloatField()
    longitude = serializers.FloatField()
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()

    def get_admission_price(self, event) -> str | None:
        return str(event.admission_price) if event.admission_price is not None else None
