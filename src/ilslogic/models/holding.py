from dataclasses import dataclass, field
from typing import Any, Optional

from ..availability import AvailabilityStatus, AvailabilityStatusInterface
from .base import LogicDataClass

# Attribute name -> key used in connector records
_FIELD_KEYS = {
    "id": "id",
    "source": "source",
    "location": "location",
    "locationhref": "locationhref",
    "availability": "availability",
    "status": "status",
    "holdings_id": "holdings_id",
    "item_id": "item_id",
    "callnumber": "callnumber",
    "barcode": "barcode",
    "add_link": "addLink",
    "hold_override": "holdOverride",
    "is_holdable": "is_holdable",
    "notes": "notes",
    "holdings_notes": "holdings_notes",
    "summary": "summary",
    "purchase_history": "purchase_history",
    "add_storage_retrieval_request_link": "addStorageRetrievalRequestLink",
    "add_ill_request_link": "addILLRequestLink",
    "link": "link",
    "link_lightbox": "linkLightbox",
    "check": "check",
    "storage_retrieval_request_link": "storageRetrievalRequestLink",
    "check_storage_retrieval_request": "checkStorageRetrievalRequest",
    "ill_request_link": "ILLRequestLink",
    "check_ill_request": "checkILLRequest",
}
_KEY_FIELDS = {key: name for name, key in _FIELD_KEYS.items()}


def _availability_from(value: Any) -> Optional[AvailabilityStatusInterface]:
    if value is None or isinstance(value, AvailabilityStatusInterface):
        return value
    return AvailabilityStatus(value)


@dataclass
class HoldingItem(LogicDataClass):
    """A single copy reported by the catalog.

    Keys the model does not know about stay in ``_raw`` and are still
    available through ``get()`` and ``to_details()``, since any of them may
    be part of the signed request parameters.
    """

    id: str = ""
    source: Optional[str] = None
    location: str = ""
    locationhref: str = ""
    availability: Optional[AvailabilityStatusInterface] = None
    status: str = ""
    holdings_id: Optional[str] = None
    item_id: Optional[str] = None
    callnumber: Optional[str] = None
    barcode: Optional[str] = None
    add_link: bool | str = False
    hold_override: Optional[str] = None
    is_holdable: Optional[bool] = None
    notes: list[str] = field(default_factory=list)
    holdings_notes: list[str] = field(default_factory=list)
    summary: list[str] = field(default_factory=list)
    purchase_history: list[str] = field(default_factory=list)
    add_storage_retrieval_request_link: bool | str = False
    add_ill_request_link: bool | str = False
    link: Optional[str] = None
    link_lightbox: Optional[bool] = None
    check: Optional[bool] = None
    storage_retrieval_request_link: Optional[str] = None
    check_storage_retrieval_request: Optional[bool] = None
    ill_request_link: Optional[str] = None
    check_ill_request: Optional[bool] = None
    _raw: dict | None = field(default=None, repr=False)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "HoldingItem":
        """Build an item from a connector record.

        Raises:
            ValueError: If the availability value is not a valid code
        """
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            name = _KEY_FIELDS.get(key)
            if name is None:
                continue
            if name == "availability":
                value = _availability_from(value)
            elif name in ("notes", "holdings_notes", "summary", "purchase_history"):
                value = _as_list(value)
            elif name in ("id", "holdings_id", "item_id") and value is not None:
                value = str(value)
            elif name == "location" and value is None:
                value = ""
            kwargs[name] = value
        return cls(_raw=data, **kwargs)

    def get(self, key: str, default: Any = None) -> Any:
        """Read a value by its connector key name."""
        name = _KEY_FIELDS.get(key)
        if name is not None:
            value = getattr(self, name)
            return default if value is None else value
        return (self._raw or {}).get(key, default)

    def to_details(self) -> dict[str, Any]:
        """Return the item as an ordered connector-style mapping.

        Keys keep the order of the original record; fields set afterwards
        are appended.
        """
        details: dict[str, Any] = {}
        for key in self._raw or {}:
            details[key] = self.get(key) if key in _KEY_FIELDS else self._raw[key]
        for name, key in _FIELD_KEYS.items():
            if key in details:
                continue
            value = getattr(self, name)
            if value != getattr(_DEFAULTS, name):
                details[key] = value
        return details


def _as_list(value: Any) -> list:
    if value is None or value == "":
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


_DEFAULTS = HoldingItem()


@dataclass
class HoldingsGroup(LogicDataClass):
    """Holdings items sharing a group key, with text fields collected from the items."""

    items: list[HoldingItem] = field(default_factory=list)
    location: str = ""
    locationhref: str = ""
    textfields: dict[str, list[str]] = field(default_factory=dict)
    purchase_history: list[str] = field(default_factory=list)


@dataclass
class HoldingsResult(LogicDataClass):
    total: int = 0
    holdings: dict[str, HoldingsGroup] = field(default_factory=dict)
    blocks: Optional[list[str]] = None
    _raw: dict | None = field(default=None, repr=False)

    @property
    def items(self) -> list[HoldingItem]:
        return [item for group in self.holdings.values() for item in group.items]
