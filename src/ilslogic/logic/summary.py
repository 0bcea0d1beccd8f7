"""Tallies of a patron's fines, requests and checkouts."""

from collections.abc import Iterable, Mapping
from typing import Any

from ..currency import CurrencyFormatter
from ..models.summary import FineSummary, RequestSummary, TransactionSummary

# Fine balances are reported in minor currency units (cents)
MINOR_UNITS_PER_MAJOR = 100


def get_fine_summary(
    fines: Iterable[Mapping[str, Any]],
    formatter: CurrencyFormatter,
    minor_units: int = MINOR_UNITS_PER_MAJOR,
) -> FineSummary:
    """Sum fine balances and format the total for display.

    Args:
        fines: Fine records with an integer ``balance`` in minor units
        formatter: Currency formatter for the display value
        minor_units: Minor units per major unit

    Returns:
        Total in minor units and its display string
    """
    total = 0
    for fine in fines:
        total += fine.get("balance") or 0
    return FineSummary(
        total=total,
        display=formatter.convert_to_display_format(total / minor_units),
    )


def get_request_summary(requests: Iterable[Mapping[str, Any]]) -> RequestSummary:
    """Count requests that are available for pickup, in transit, or neither."""
    summary = RequestSummary()
    for request in requests:
        if request.get("available"):
            summary.available += 1
        elif request.get("in_transit"):
            summary.in_transit += 1
        else:
            summary.other += 1
    return summary


def get_transaction_summary(transactions: Iterable[Mapping[str, Any]]) -> TransactionSummary:
    """Count checkouts that are fine, due soon ("due") or overdue."""
    summary = TransactionSummary()
    for transaction in transactions:
        due_status = transaction.get("dueStatus")
        if due_status == "due":
            summary.warn += 1
        elif due_status == "overdue":
            summary.overdue += 1
        else:
            summary.ok += 1
    return summary
