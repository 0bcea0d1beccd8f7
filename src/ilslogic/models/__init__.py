from .base import LogicDataClass
from .holding import HoldingItem, HoldingsGroup, HoldingsResult
from .request import NoHoldReason, RequestDetails, TitleHoldResult
from .summary import FineSummary, RequestSummary, TransactionSummary

__all__ = [
    "LogicDataClass",
    "HoldingItem",
    "HoldingsGroup",
    "HoldingsResult",
    "NoHoldReason",
    "RequestDetails",
    "TitleHoldResult",
    "FineSummary",
    "RequestSummary",
    "TransactionSummary",
]
