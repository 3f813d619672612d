"""
Value parsing/formatting shared by the table and section builders.
Amounts are parsed once to float and only formatted when drawn.
"""

from __future__ import annotations

import math
from datetime import date, datetime

from invoice_pdf.core.errors import DataError


def parse_amount(value, field: str = "amount") -> float:
    if isinstance(value, bool) or value is None:
        raise DataError(f"{field}: expected a number, got {value!r}", field=field)
    if isinstance(value, str):
        value = value.strip()
    try:
        numeric = float(value)
    except (TypeError, ValueError):
        raise DataError(f"{field}: cannot parse {value!r} as a number", field=field) from None
    if not math.isfinite(numeric):
        raise DataError(f"{field}: {value!r} is not a finite number", field=field)
    return numeric


def format_amount(value: float) -> str:
    # -0.00 looks odd on a printed total
    text = f"{value:.2f}"
    return "0.00" if text == "-0.00" else text


def format_quantity(value) -> str:
    return str(value)


def format_date(value, pattern: str = "%Y-%m-%d") -> str:
    if isinstance(value, (date, datetime)):
        return value.strftime(pattern)
    return str(value or "")


def group_account_number(account: str, size: int = 4) -> str:
    """'PL61109010140000071219812874' -> 'PL61 1090 1014 0000 0712 1981 2874'."""
    compact = "".join(str(account).split())
    return " ".join(compact[i : i + size] for i in range(0, len(compact), size))


def strip_left(text: str, prefix: str) -> str:
    text = str(text or "")
    if prefix and text.startswith(prefix):
        return text[len(prefix) :]
    return text
