"""Creation and combination of availability statuses."""

import functools
import logging
from collections.abc import Iterable
from typing import Optional

from .availability import AvailabilityStatus, AvailabilityStatusInterface
from .models.holding import HoldingItem

_LOGGER = logging.getLogger(__name__)


def _compare_items(a: HoldingItem, b: HoldingItem) -> int:
    # Items without availability sort last
    if a.availability is None and b.availability is None:
        return 0
    if a.availability is None:
        return 1
    if b.availability is None:
        return -1
    return a.availability.compare_to(b.availability)


class AvailabilityStatusManager:
    """Factory and reducer for availability statuses."""

    def create_availability_status(
        self,
        availability: int | bool,
        status: str = "",
        extra_status_information: Optional[dict[str, str]] = None,
    ) -> AvailabilityStatusInterface:
        """Create a status from a bool or integer availability code.

        Args:
            availability: True/False or one of the AvailabilityCode values
            status: Optional description overriding the default one
            extra_status_information: Tokens for translating the description

        Returns:
            The availability status

        Raises:
            ValueError: If availability is not a valid code
        """
        return AvailabilityStatus(availability, status, dict(extra_status_information or {}))

    def combine(self, items: Iterable[HoldingItem]) -> HoldingItem:
        """Pick the item with the best availability.

        The sort is stable, so among items with the same priority the first
        one in the input wins. Items without availability never win over
        items that have one.

        Args:
            items: Holdings items to combine

        Returns:
            The winning item, or a new unavailable item if there are none
        """
        items = list(items)
        if not items:
            return HoldingItem(availability=AvailabilityStatus(False))
        ordered = sorted(items, key=functools.cmp_to_key(_compare_items))
        _LOGGER.debug(
            "Combined %d items, best availability: %s",
            len(items),
            ordered[0].availability,
        )
        return ordered[0]
