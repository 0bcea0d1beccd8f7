"""Shared helpers for consistent human-readable CLI output."""

from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from ilslogic.models import (
        FineSummary,
        HoldingItem,
        HoldingsResult,
        RequestSummary,
        TitleHoldResult,
        TransactionSummary,
    )


def format_heading_lines(title: str) -> list[str]:
    """Return heading lines with a title and matching underline."""
    normalized = title.strip()
    return [normalized, "=" * len(normalized)]


def print_heading(title: str) -> None:
    """Print a consistent heading block."""
    for line in format_heading_lines(title):
        click.echo(line)


def print_empty(resource: str) -> None:
    """Print the shared empty-state sentence."""
    click.echo(f"No {resource} found.")


def print_error(message: str) -> None:
    """Print the shared error sentence."""
    click.echo(f"Error: {message}", err=True)


def clip(text: str, max_len: int = 120) -> str:
    """Clip long text with ellipsis for compact output rows."""
    if len(text) <= max_len:
        return text
    if max_len <= 3:
        return "." * max_len
    return f"{text[: max_len - 3].rstrip()}..."


def format_row(primary: str, secondary: str | None = None, tertiary: str | None = None) -> str:
    """Format a row as 'primary | secondary | tertiary' while skipping blanks."""
    parts = [primary]
    for value in (secondary, tertiary):
        if value and value.strip():
            parts.append(value.strip())
    return " | ".join(parts)


def format_item_lines(item: "HoldingItem") -> list[str]:
    """Format one copy as a status row plus indented request links."""
    status = item.availability.get_status_description() if item.availability else "No status"
    label = item.callnumber or item.item_id or item.id or "(no id)"
    lines = [format_row(label, status, item.barcode)]
    if item.link:
        suffix = " (check)" if item.check else ""
        lines.append(f"  Hold: {item.link}{suffix}")
    if item.storage_retrieval_request_link:
        lines.append(f"  Storage retrieval: {item.storage_retrieval_request_link}")
    if item.ill_request_link:
        lines.append(f"  ILL: {item.ill_request_link}")
    return lines


def format_holdings_lines(result: "HoldingsResult") -> list[str]:
    """Format grouped holdings: one block per group with its items and notes."""
    lines: list[str] = []
    if result.blocks:
        lines.append(f"Requests blocked: {'; '.join(result.blocks)}")
    for group_key, group in result.holdings.items():
        lines.append(format_row(group.location or group_key, f"{len(group.items)} item(s)"))
        for name, values in group.textfields.items():
            lines.append(f"  {name}: {clip('; '.join(str(v) for v in values))}")
        for item in group.items:
            lines.extend(f"  {line}" for line in format_item_lines(item))
    return lines


def format_title_hold_lines(result: "TitleHoldResult") -> list[str]:
    if result.link:
        return [f"Title hold: {result.link}"]
    reason = result.reason.value if result.reason else "unknown"
    return [f"No title hold ({reason})"]


def format_summary_lines(
    fines: "FineSummary",
    requests: "RequestSummary",
    transactions: "TransactionSummary",
) -> list[str]:
    return [
        f"Fines: {fines.display}",
        f"Requests: {requests.available} available, {requests.in_transit} in transit, "
        f"{requests.other} other",
        f"Checkouts: {transactions.ok} ok, {transactions.warn} due soon, "
        f"{transactions.overdue} overdue",
    ]
