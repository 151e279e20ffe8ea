"""Unit tests for domain primitives.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

import uuid
from decimal import Decimal

import pytest

from events.domain import EventDraft, EventId, EventStatus, Money
from events.domain.errors import ErrorCode, EventNotFoundError


class TestMoney:
    """Tests for Money value object."""

    def test_money_accepts_positive_amount(self):
        assert Money(Decimal("12.50")).amount == Decimal("12.50")

    def test_money_accepts_zero(self):
        assert Money(Decimal("0")).amount == 0

    def test_money_rejects_negative_amount(self):
        with pytest.raises(ValueError):
            Money(Decimal("-0.01"))

    def test_money_str_format(self):
        assert str(Money(Decimal("7"))) == "7.00"
        assert str(Money(Decimal("19.5"))) == "19.50"


class TestEventDraftCoordinates:
    """Tests for latitude and longitude on EventDraft."""

    def test_accepts_boundaries(self):
        draft = EventDraft(name="x", latitude=-90, longitude=180)
        assert (draft.latitude, draft.longitude) == (-90, 180)

    def test_accepts_one_half_only(self):
        assert EventDraft(name="x", longitude=-122.4).latitude is None

    def test_rejects_latitude_out_of_range(self):
        with pytest.raises(ValueError, match="Latitude"):
            EventDraft(name="x", latitude=90.1)

    def test_rejects_longitude_out_of_range(self):
        with pytest.raises(ValueError, match="Longitude"):
            EventDraft(name="x", longitude=-180.5)


class TestEventStatus:
    """Tests for EventStatus parsing."""

    def test_parse_ignores_case_and_whitespace(self):
        assert EventStatus.parse("  cancelled ") is EventStatus.CANCELLED

    def test_parse_rejects_unknown(self):
        with pytest.raises(ValueError, match="Unknown event status"):
            EventStatus.parse("ARCHIVED")

    def test_label(self):
        assert EventStatus.POSTPONED.label == "Postponed"


class TestEventId:
    """Tests for EventId value object."""

    def test_from_string_valid_uuid(self):
        value = uuid.uuid4()
        assert EventId.from_string(str(value)).value == value

    def test_from_string_invalid_uuid(self):
        with pytest.raises(ValueError):
            EventId.from_string("not-a-uuid")


class TestDomainErrors:
    """Tests for domain error construction."""

    def test_not_found_carries_code_and_safe_message(self):
        error = EventNotFoundError("abc")
        assert error.code is ErrorCode.EVENT_NOT_FOUND
        assert error.details == {"event_id": "abc"}
        assert str(error) == "EVENT_NOT_FOUND: Event not found"
