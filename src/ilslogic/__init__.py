"""Availability aggregation and hold link logic for library catalogs."""

__version__ = "0.1.0"

from .availability import (
    AvailabilityCode,
    AvailabilityStatus,
    AvailabilityStatusInterface,
    InvisibleAvailabilityStatus,
)
from .availability_manager import AvailabilityStatusManager
from .config import Config, LogicConfig
from .const import HoldsMode, TitleHoldsMode
from .crypt import HMAC
from .exceptions import ConfigError, ILSError, ILSLogicError
from .logic import (
    Holds,
    TitleHolds,
    get_fine_summary,
    get_request_summary,
    get_transaction_summary,
)
from .models import (
    FineSummary,
    HoldingItem,
    HoldingsGroup,
    HoldingsResult,
    NoHoldReason,
    RequestDetails,
    RequestSummary,
    TitleHoldResult,
    TransactionSummary,
)

__all__ = [
    "AvailabilityCode",
    "AvailabilityStatus",
    "AvailabilityStatusInterface",
    "InvisibleAvailabilityStatus",
    "AvailabilityStatusManager",
    "Config",
    "LogicConfig",
    "HoldsMode",
    "TitleHoldsMode",
    "HMAC",
    "ILSLogicError",
    "ILSError",
    "ConfigError",
    "Holds",
    "TitleHolds",
    "get_fine_summary",
    "get_request_summary",
    "get_transaction_summary",
    "HoldingItem",
    "HoldingsGroup",
    "HoldingsResult",
    "NoHoldReason",
    "RequestDetails",
    "TitleHoldResult",
    "FineSummary",
    "RequestSummary",
    "TransactionSummary",
    "__version__",
]
