from dataclasses import dataclass

from .base import LogicDataClass


@dataclass
class FineSummary(LogicDataClass):
    total: int = 0
    display: str = ""


@dataclass
class RequestSummary(LogicDataClass):
    available: int = 0
    in_transit: int = 0
    other: int = 0


@dataclass
class TransactionSummary(LogicDataClass):
    ok: int = 0
    overdue: int = 0
    warn: int = 0
