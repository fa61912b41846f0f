"""
Cell formatting for host-rendered tables and captions.

Table columns are formatted through ``format_cell`` using the same
``{"type": ..., "decimals": ..., "currency": ...}`` column config that page
components pass to ``render_table``.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Mapping, Optional

MISSING = "–"

CURRENCY_SYMBOLS = {
    "GBP": "£",
    "USD": "$",
    "EUR": "€",
}


def _as_float(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def format_number(value: Any, decimals: int = 0) -> str:
    numeric = _as_float(value)
    return MISSING if numeric is None else f"{numeric:,.{decimals}f}"


def format_currency(value: Any, currency: str = "GBP", decimals: int = 0) -> str:
    amount = format_number(value, decimals)
    if amount == MISSING:
        return MISSING
    symbol = CURRENCY_SYMBOLS.get(currency)
    return f"{symbol}{amount}" if symbol else f"{currency} {amount}"


def format_percent(value: Any, decimals: int = 1) -> str:
    numeric = _as_float(value)
    return MISSING if numeric is None else f"{numeric:.{decimals}f}%"


_FORMATTERS: Dict[str, Callable[[Any, Mapping[str, Any], int], str]] = {
    "number": lambda value, _, decimals: format_number(value, decimals),
    "percent": lambda value, _, decimals: format_percent(value, decimals),
    "currency": lambda value, column, decimals: format_currency(
        value, currency=column.get("currency", "GBP"), decimals=decimals
    ),
}


def default_decimals(fmt_type: Optional[str]) -> int:
    return 1 if fmt_type == "percent" else 0


def format_cell(value: Any, column: Mapping[str, Any]) -> Any:
    """Format one table cell according to its column config.

    Unknown or missing ``type`` values leave the cell untouched.
    """
    fmt_type = column.get("type")
    formatter = _FORMATTERS.get(fmt_type)
    if formatter is None:
        return value
    decimals = int(column.get("decimals", default_decimals(fmt_type)))
    return formatter(value, column, decimals)
