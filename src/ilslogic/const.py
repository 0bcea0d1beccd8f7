"""Constants shared by the availability and hold logic."""

from enum import Enum
from typing import Optional

CONFIG_DIR_ENV = "ILSLOGIC_CONFIG_DIR"
HMAC_KEY_ENV = "ILSLOGIC_HMAC_KEY"

DEFAULT_SEARCH_BACKEND = "Solr"
DEFAULT_HOLDINGS_GROUPING = "holdings_id,location"
DEFAULT_HOLDINGS_TEXT_FIELDS = ["holdings_notes", "summary", "supplements", "indexes"]
DEFAULT_CURRENCY = "USD"

# Fragment appended to request form URLs so the record page opens on its tabs
REQUEST_ANCHOR = "#tabnav"

# Connector function names passed to check_function()
FUNCTION_HOLDS = "Holds"
FUNCTION_STORAGE_RETRIEVAL_REQUESTS = "StorageRetrievalRequests"
FUNCTION_ILL_REQUESTS = "ILLRequests"
FUNCTION_GET_HOLD_LINK = "getHoldLink"
CAPABILITY_REQUEST_BLOCKS = "getRequestBlocks"

# Request actions
ACTION_HOLD = "Hold"
ACTION_BLOCKED_HOLD = "BlockedHold"
ACTION_STORAGE_RETRIEVAL_REQUEST = "StorageRetrievalRequest"
ACTION_ILL_REQUEST = "ILLRequest"

SCHEMA_IN_STOCK = "http://schema.org/InStock"
SCHEMA_OUT_OF_STOCK = "http://schema.org/OutOfStock"
SCHEMA_LIMITED_AVAILABILITY = "http://schema.org/LimitedAvailability"


class HoldsMode(str, Enum):
    """Item level holds modes."""

    DISABLED = "disabled"
    DRIVER = "driver"
    ALL = "all"
    HOLDS = "holds"
    RECALLS = "recalls"
    AVAILABILITY = "availability"

    @classmethod
    def parse(cls, value: object) -> Optional["HoldsMode"]:
        """Return the mode for a config string, or None when it is not a known mode."""
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None


class TitleHoldsMode(str, Enum):
    """Title level holds modes."""

    DISABLED = "disabled"
    DRIVER = "driver"
    ALWAYS = "always"
    AVAILABILITY = "availability"

    @classmethod
    def parse(cls, value: object) -> Optional["TitleHoldsMode"]:
        """Return the mode for a config string, or None when it is not a known mode."""
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None
