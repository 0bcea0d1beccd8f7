from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..const import REQUEST_ANCHOR
from .base import LogicDataClass


class NoHoldReason(Enum):
    """Why no title level hold link is offered."""

    NO_CATALOG = "no_catalog"
    DISABLED = "disabled"
    NO_PATRON = "no_patron"
    NOT_SUPPORTED = "not_supported"
    INVALID_REQUEST = "invalid_request"
    AVAILABLE = "available"
    UNKNOWN_MODE = "unknown_mode"
    CATALOG_ERROR = "catalog_error"


@dataclass
class RequestDetails(LogicDataClass):
    """Parameters of a signed request form link."""

    action: str
    record: str
    source: str
    query: str
    anchor: str = REQUEST_ANCHOR


@dataclass
class TitleHoldResult(LogicDataClass):
    """Outcome of a title level hold lookup: either a link or the reason there is none."""

    link: Optional[str] = None
    reason: Optional[NoHoldReason] = None

    @classmethod
    def linked(cls, link: str) -> "TitleHoldResult":
        return cls(link=link)

    @classmethod
    def denied(cls, reason: NoHoldReason) -> "TitleHoldResult":
        return cls(reason=reason)

    def __bool__(self) -> bool:
        return self.link is not None
