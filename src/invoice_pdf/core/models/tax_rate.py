"""
Tax-rate codes as a tagged variant.

Line items carry the raw code string (``"23"``, ``"-1"``, ``"ZW"``); this module
turns it into one of three kinds.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Union

from invoice_pdf.core.errors import FormatError

NOT_APPLICABLE_CODE = "-1"
EXEMPT_CODE = "ZW"


@dataclass(frozen=True)
class Percentage:
    rate: Decimal
    code: str

    @property
    def display(self) -> str:
        return f"{self.code} %"


@dataclass(frozen=True)
class NotApplicable:
    code: str = NOT_APPLICABLE_CODE

    @property
    def display(self) -> str:
        return "n/a"


@dataclass(frozen=True)
class Exempt:
    code: str = EXEMPT_CODE

    @property
    def display(self) -> str:
        return EXEMPT_CODE


TaxRate = Union[Percentage, NotApplicable, Exempt]


def parse_tax_rate(code) -> TaxRate:
    """
    Classify a raw tax-rate code.
    Raises FormatError for anything that is not ``-1``, ``ZW`` (any case) or a
    non-negative finite number.
    """
    if code is None:
        raise FormatError("Missing tax-rate code")
    raw = str(code).strip()
    if raw == NOT_APPLICABLE_CODE:
        return NotApplicable()
    if raw.upper() == EXEMPT_CODE:
        return Exempt(code=raw)
    try:
        rate = Decimal(raw)
    except InvalidOperation:
        raise FormatError(f"Unknown tax-rate code: {code!r}") from None
    if not rate.is_finite() or rate < 0:
        raise FormatError(f"Unknown tax-rate code: {code!r}")
    return Percentage(rate=rate, code=raw)
