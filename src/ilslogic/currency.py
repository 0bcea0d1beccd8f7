"""Currency display formatting for fine summaries."""

from typing import Optional, Protocol, runtime_checkable

from .const import DEFAULT_CURRENCY

_SYMBOLS = {
    "USD": "$",
    "CAD": "CA$",
    "AUD": "A$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
}


@runtime_checkable
class CurrencyFormatter(Protocol):
    def convert_to_display_format(self, amount: float, currency: Optional[str] = None) -> str: ...


class DecimalCurrencyFormatter:
    """Format amounts as symbol, grouped thousands and two decimals (e.g. "$1,234.50")."""

    def __init__(
        self,
        default_currency: str = DEFAULT_CURRENCY,
        decimal_point: str = ".",
        thousands_separator: str = ",",
    ):
        self.default_currency = default_currency
        self.decimal_point = decimal_point
        self.thousands_separator = thousands_separator

    def convert_to_display_format(self, amount: float, currency: Optional[str] = None) -> str:
        currency = (currency or self.default_currency).upper()
        formatted = f"{abs(amount):,.2f}"
        formatted = (
            formatted.replace(",", "\0")
            .replace(".", self.decimal_point)
            .replace("\0", self.thousands_separator)
        )
        sign = "-" if amount < 0 else ""
        symbol = _SYMBOLS.get(currency)
        if symbol is None:
            return f"{sign}{formatted} {currency}"
        return f"{sign}{symbol}{formatted}"
