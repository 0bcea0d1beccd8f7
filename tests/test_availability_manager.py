"""Tests for ilslogic.availability_manager."""

import pytest

from ilslogic.availability import AvailabilityCode, AvailabilityStatus
from ilslogic.availability_manager import AvailabilityStatusManager
from ilslogic.models import HoldingItem


@pytest.fixture
def manager():
    return AvailabilityStatusManager()


class TestCreateAvailabilityStatus:
    def test_from_bool(self, manager):
        assert manager.create_availability_status(True).is_(AvailabilityCode.AVAILABLE)
        assert manager.create_availability_status(False).is_(AvailabilityCode.UNAVAILABLE)

    def test_from_int_with_description(self, manager):
        status = manager.create_availability_status(2, "On order")
        assert status.is_(AvailabilityCode.UNCERTAIN)
        assert status.get_status_description() == "On order"


class TestCombine:
    def test_empty_is_unavailable(self, manager):
        combined = manager.combine([])
        assert combined.availability.is_(AvailabilityCode.UNAVAILABLE)

    def test_available_wins(self, manager):
        unavailable = HoldingItem(id="a", availability=AvailabilityStatus(False))
        available = HoldingItem(id="b", availability=AvailabilityStatus(True))
        assert manager.combine([unavailable, available]) is available

    def test_uncertain_beats_unavailable_and_unknown(self, manager):
        items = [
            HoldingItem(id="unknown", availability=AvailabilityStatus(3)),
            HoldingItem(id="unavailable", availability=AvailabilityStatus(0)),
            HoldingItem(id="uncertain", availability=AvailabilityStatus(2)),
        ]
        assert manager.combine(items).id == "uncertain"

    @pytest.mark.parametrize("missing_first", [True, False])
    def test_missing_availability_never_wins(self, manager, missing_first):
        missing = HoldingItem(id="missing")
        unknown = HoldingItem(id="unknown", availability=AvailabilityStatus(3))
        items = [missing, unknown] if missing_first else [unknown, missing]
        assert manager.combine(items) is unknown

    def test_first_input_wins_ties(self, manager):
        first = HoldingItem(id="first", availability=AvailabilityStatus(True, "On shelf"))
        second = HoldingItem(id="second", availability=AvailabilityStatus(True))
        assert manager.combine([first, second]) is first
        assert manager.combine([second, first]) is second

    def test_does_not_reorder_input(self, manager):
        items = [
            HoldingItem(id="a", availability=AvailabilityStatus(False)),
            HoldingItem(id="b", availability=AvailabilityStatus(True)),
        ]
        manager.combine(items)
        assert [item.id for item in items] == ["a", "b"]
