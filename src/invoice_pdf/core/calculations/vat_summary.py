from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from invoice_pdf.core.models.invoice import LineItem
from invoice_pdf.core.models.tax_rate import Exempt, NotApplicable, parse_tax_rate
from invoice_pdf.utils.pdf.core.totals import parse_amount


@dataclass
class TaxSummaryRow:
    """Net/tax/gross accumulated for one tax-rate code."""

    vat_rate: str
    net_value: float = 0.0
    vat_amount: float = 0.0
    gross_value: float = 0.0

    def add(self, net: float, vat: float, gross: float) -> None:
        self.net_value += net
        self.vat_amount += vat
        self.gross_value += gross


@dataclass(frozen=True)
class GrandTotal:
    net_value: float
    vat_amount: float
    gross_value: float


def _item_amounts(item: LineItem, index: int) -> tuple[float, float, float]:
    prefix = f"items[{index}]"
    return (
        parse_amount(item.net_value, f"{prefix}.net_value"),
        parse_amount(item.vat_amount, f"{prefix}.vat_amount"),
        parse_amount(item.gross_value, f"{prefix}.gross_value"),
    )


def summarize_vat(items: Iterable[LineItem]) -> list[TaxSummaryRow]:
    """
    Group items by their raw tax-rate code, in order of first appearance.
    Codes are compared verbatim, so "23" and "23.0" are separate groups.
    """
    rows: dict[str, TaxSummaryRow] = {}
    for index, item in enumerate(items):
        net, vat, gross = _item_amounts(item, index)
        code = str(item.vat_rate)
        row = rows.get(code)
        if row is None:
            row = rows[code] = TaxSummaryRow(vat_rate=code)
        row.add(net, vat, gross)
    return list(rows.values())


def grand_total(items: Iterable[LineItem]) -> GrandTotal:
    net_sum = vat_sum = gross_sum = 0.0
    for index, item in enumerate(items):
        net, vat, gross = _item_amounts(item, index)
        net_sum += net
        vat_sum += vat
        gross_sum += gross
    return GrandTotal(net_value=net_sum, vat_amount=vat_sum, gross_value=gross_sum)


def vat_description(code: str, field: str = "label") -> str:
    """
    Display text for a tax-rate code.
    field: "label" (Polish summary label), "label_en" (English caption) or "value" (rate cell).
    """
    rate = parse_tax_rate(code)
    if field == "value":
        return rate.display
    if field not in ("label", "label_en"):
        raise ValueError(f"Unknown description field: {field!r}")
    english = field == "label_en"
    if isinstance(rate, NotApplicable):
        return "Total charges not subject to VAT" if english else "Wartość usług nie podlegających VAT"
    if isinstance(rate, Exempt):
        return "Total charges exempt from VAT" if english else "Wartość usług zwolnionych z VAT"
    if english:
        return f"Total charges subject to VAT at {rate.code}%"
    return f"Wartość usług podlegających VAT {rate.code}%"
