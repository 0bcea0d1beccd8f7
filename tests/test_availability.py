"""Tests for ilslogic.availability."""

import pytest

from ilslogic.availability import (
    AvailabilityCode,
    AvailabilityStatus,
    InvisibleAvailabilityStatus,
)

ALL_CODES = list(AvailabilityCode)


class TestIs:
    @pytest.mark.parametrize("code", ALL_CODES)
    def test_matches_only_own_code(self, code):
        status = AvailabilityStatus(code)
        assert status.is_(code)
        for other in ALL_CODES:
            if other != code:
                assert not status.is_(other)

    def test_bool_maps_to_codes(self):
        assert AvailabilityStatus(True).is_(AvailabilityCode.AVAILABLE)
        assert AvailabilityStatus(False).is_(AvailabilityCode.UNAVAILABLE)

    def test_invalid_code_rejected(self):
        with pytest.raises(ValueError, match="Invalid availability value"):
            AvailabilityStatus(7)


class TestIsAvailable:
    def test_available_and_uncertain(self):
        assert AvailabilityStatus(AvailabilityCode.AVAILABLE).is_available()
        assert AvailabilityStatus(AvailabilityCode.UNCERTAIN).is_available()

    def test_unavailable_and_unknown(self):
        assert not AvailabilityStatus(AvailabilityCode.UNAVAILABLE).is_available()
        assert not AvailabilityStatus(AvailabilityCode.UNKNOWN).is_available()


class TestDescriptions:
    def test_defaults(self):
        assert AvailabilityStatus(True).get_status_description() == "Available"
        assert AvailabilityStatus(False).get_status_description() == "Unavailable"
        assert AvailabilityStatus(2).get_status_description() == "Uncertain"
        assert AvailabilityStatus(3).get_status_description() == "status_unknown_message"

    def test_explicit_description_wins(self):
        status = AvailabilityStatus(False, "Checked Out")
        assert status.get_status_description() == "Checked Out"
        assert str(status) == "Checked Out"

    def test_tokens(self):
        status = AvailabilityStatus(False, "due_on", {"%%date%%": "2024-05-01"})
        assert status.get_status_description_tokens() == {"%%date%%": "2024-05-01"}


class TestStringForms:
    def test_schema_uris(self):
        assert AvailabilityStatus(1).get_schema_availability_uri() == "http://schema.org/InStock"
        assert AvailabilityStatus(0).get_schema_availability_uri() == "http://schema.org/OutOfStock"
        assert (
            AvailabilityStatus(2).get_schema_availability_uri()
            == "http://schema.org/LimitedAvailability"
        )
        assert AvailabilityStatus(3).get_schema_availability_uri() is None

    def test_availability_as_string(self):
        assert AvailabilityStatus(1).availability_as_string() == "true"
        assert AvailabilityStatus(0).availability_as_string() == "false"
        assert AvailabilityStatus(2).availability_as_string() == "uncertain"
        assert AvailabilityStatus(3).availability_as_string() == "unknown"

    def test_to_dict(self):
        assert AvailabilityStatus(True).to_dict() == {
            "available": "true",
            "status": "Available",
            "statusTokens": {},
            "schemaAvailability": "http://schema.org/InStock",
        }


class TestPriority:
    def test_ordering(self):
        priorities = [
            AvailabilityStatus(code).get_priority()
            for code in (
                AvailabilityCode.AVAILABLE,
                AvailabilityCode.UNCERTAIN,
                AvailabilityCode.UNAVAILABLE,
                AvailabilityCode.UNKNOWN,
            )
        ]
        assert priorities == [3, 2, 1, 0]

    @pytest.mark.parametrize("a", ALL_CODES)
    @pytest.mark.parametrize("b", ALL_CODES)
    def test_compare_to_antisymmetric(self, a, b):
        first, second = AvailabilityStatus(a), AvailabilityStatus(b)
        assert first.compare_to(second) == -second.compare_to(first)

    def test_higher_priority_sorts_first(self):
        available = AvailabilityStatus(True)
        unavailable = AvailabilityStatus(False)
        assert available.compare_to(unavailable) == -1
        assert unavailable.compare_to(available) == 1
        assert available.compare_to(AvailabilityStatus(True, "On shelf")) == 0


class TestVisibility:
    def test_default_visible(self):
        status = AvailabilityStatus(True)
        assert status.is_visible_in_holdings()
        assert status.is_visible()

    def test_invisible_status(self):
        status = InvisibleAvailabilityStatus(False, "Withdrawn")
        assert not status.is_visible_in_holdings()
        assert not status.is_visible()
        assert status.get_status_description() == "Withdrawn"
        assert status.is_(AvailabilityCode.UNAVAILABLE)


def test_status_is_immutable():
    status = AvailabilityStatus(True)
    with pytest.raises(AttributeError):
        status.availability = 0
