"""Availability status values for holdings items."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Optional

from .const import (
    SCHEMA_IN_STOCK,
    SCHEMA_LIMITED_AVAILABILITY,
    SCHEMA_OUT_OF_STOCK,
)


class AvailabilityCode(IntEnum):
    UNAVAILABLE = 0
    AVAILABLE = 1
    UNCERTAIN = 2
    UNKNOWN = 3


_PRIORITIES = {
    AvailabilityCode.UNKNOWN: 0,
    AvailabilityCode.UNAVAILABLE: 1,
    AvailabilityCode.UNCERTAIN: 2,
    AvailabilityCode.AVAILABLE: 3,
}

_DESCRIPTIONS = {
    AvailabilityCode.UNAVAILABLE: "Unavailable",
    AvailabilityCode.UNKNOWN: "status_unknown_message",
    AvailabilityCode.UNCERTAIN: "Uncertain",
    AvailabilityCode.AVAILABLE: "Available",
}

_SCHEMA_URIS = {
    AvailabilityCode.AVAILABLE: SCHEMA_IN_STOCK,
    AvailabilityCode.UNAVAILABLE: SCHEMA_OUT_OF_STOCK,
    AvailabilityCode.UNCERTAIN: SCHEMA_LIMITED_AVAILABILITY,
}

_AS_STRING = {
    AvailabilityCode.AVAILABLE: "true",
    AvailabilityCode.UNAVAILABLE: "false",
    AvailabilityCode.UNCERTAIN: "uncertain",
    AvailabilityCode.UNKNOWN: "unknown",
}


def normalize_availability(value: Any) -> AvailabilityCode:
    """Convert a bool or int availability value to an AvailabilityCode.

    Raises:
        ValueError: If the value is not one of the four availability codes.
    """
    if isinstance(value, bool):
        return AvailabilityCode.AVAILABLE if value else AvailabilityCode.UNAVAILABLE
    try:
        return AvailabilityCode(value)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid availability value: {value!r}") from None


class AvailabilityStatusInterface(ABC):
    """Contract for availability status values."""

    @abstractmethod
    def is_available(self) -> bool:
        """True if the item is available or possibly available."""

    @abstractmethod
    def is_(self, availability: int) -> bool:
        """True if the status has exactly the given availability code."""

    @abstractmethod
    def is_visible_in_holdings(self) -> bool:
        """True if an item with this status should be rendered in holdings."""

    def is_visible(self) -> bool:
        return self.is_visible_in_holdings()

    @abstractmethod
    def get_status_description(self) -> str:
        """Return the explicit description or the default for the code."""

    @abstractmethod
    def get_status_description_tokens(self) -> dict[str, str]:
        """Return tokens used when translating the description."""

    @abstractmethod
    def get_schema_availability_uri(self) -> Optional[str]:
        """Return the schema.org availability URI, if any."""

    @abstractmethod
    def availability_as_string(self) -> str:
        """Return the availability as used in templates."""

    @abstractmethod
    def get_priority(self) -> int:
        """Return the priority used when picking the best status."""

    def compare_to(self, other: "AvailabilityStatusInterface") -> int:
        """Compare by priority so that the higher priority status sorts first."""
        mine = self.get_priority()
        theirs = other.get_priority()
        return (theirs > mine) - (theirs < mine)

    def to_dict(self) -> dict[str, Any]:
        return {
            "available": self.availability_as_string(),
            "status": self.get_status_description(),
            "statusTokens": self.get_status_description_tokens(),
            "schemaAvailability": self.get_schema_availability_uri(),
        }


@dataclass(frozen=True)
class AvailabilityStatus(AvailabilityStatusInterface):
    """Immutable availability of a single item.

    ``availability`` accepts a bool (True/False map to AVAILABLE/UNAVAILABLE)
    or one of the integer codes. ``status`` overrides the default description.
    """

    availability: AvailabilityCode | int | bool
    status: str = ""
    extra_status_information: dict[str, str] = field(default_factory=dict, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "availability", normalize_availability(self.availability))

    @property
    def code(self) -> AvailabilityCode:
        return self.availability

    def is_available(self) -> bool:
        return self.availability in (AvailabilityCode.AVAILABLE, AvailabilityCode.UNCERTAIN)

    def is_(self, availability: int) -> bool:
        if isinstance(availability, bool):
            return False
        return self.availability == availability

    def is_visible_in_holdings(self) -> bool:
        return True

    def get_status_description(self) -> str:
        if self.status:
            return self.status
        return _DESCRIPTIONS[self.availability]

    def get_status_description_tokens(self) -> dict[str, str]:
        return dict(self.extra_status_information)

    def get_schema_availability_uri(self) -> Optional[str]:
        return _SCHEMA_URIS.get(self.availability)

    def availability_as_string(self) -> str:
        return _AS_STRING[self.availability]

    def get_priority(self) -> int:
        return _PRIORITIES.get(self.availability, _PRIORITIES[AvailabilityCode.AVAILABLE])

    def __str__(self) -> str:
        return self.get_status_description()


@dataclass(frozen=True)
class InvisibleAvailabilityStatus(AvailabilityStatus):
    """Status for items that count toward availability but are not listed in holdings."""

    def is_visible_in_holdings(self) -> bool:
        return False
