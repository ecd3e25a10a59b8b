from __future__ import annotations

from typing import Dict, Iterable


def cad(value: float, symbol: str = "$") -> str:
    return f"{value:,.0f} {symbol}".replace(",", " ")


def percent(value: float, digits: int = 1) -> str:
    """Format a percentage expressed as a number (12.5 -> '12.5 %')."""
    return f"{value:,.{digits}f} %".replace(",", " ")


def table_formats(columns: Iterable[str], percent_columns: Iterable[str] = ()) -> Dict[str, str]:
    """Column -> format string for numeric tables: whole units, percentages to one decimal."""
    percent_set = set(percent_columns)
    return {col: "{:.1f}" if col in percent_set else "{:,.0f}" for col in columns}
