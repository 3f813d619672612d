"""
Items table: bilingual header, one row per item, per-rate VAT summary rows and
a grand total. Every row is followed by a separator line.
"""

from __future__ import annotations

import logging

from invoice_pdf.core.calculations.vat_summary import TaxSummaryRow, grand_total, summarize_vat, vat_description
from invoice_pdf.core.models.invoice import Invoice, LineItem
from invoice_pdf.utils.pdf.backends.base import RenderBackend
from invoice_pdf.utils.pdf.core.drawing import Cell, font_state, horizontal_line, write_row
from invoice_pdf.utils.pdf.core.layout_common import (
    BASE_FONT_SIZE,
    ITEM_COLUMNS,
    LABEL_FONT_SIZE,
    REGULAR,
    SUMMARY_LABEL_WIDTH,
    TABLE_WIDTH,
)
from invoice_pdf.utils.pdf.core.totals import format_amount, format_quantity, parse_amount

logger = logging.getLogger(__name__)

NET, RATE, TAX, GROSS = ITEM_COLUMNS[4:8]


def _header_row(backend: RenderBackend, position: float, left: float) -> float:
    with font_state(backend, REGULAR, LABEL_FONT_SIZE):
        position = write_row(backend, position, left, [Cell(col.label_en, col.width, col.align) for col in ITEM_COLUMNS])
    with font_state(backend, REGULAR, BASE_FONT_SIZE):
        position = write_row(backend, position, left, [Cell(col.label, col.width, col.align, bold=True) for col in ITEM_COLUMNS])
    return position


def build_item_cells(ordinal: int, item: LineItem) -> list[Cell]:
    field = f"items[{ordinal - 1}]"
    values = [
        str(ordinal),
        item.display_description,
        format_quantity(item.quantity),
        format_amount(parse_amount(item.unit_price, f"{field}.unit_price")),
        format_amount(parse_amount(item.net_value, f"{field}.net_value")),
        vat_description(item.vat_rate, "value"),
        format_amount(parse_amount(item.vat_amount, f"{field}.vat_amount")),
        format_amount(parse_amount(item.gross_value, f"{field}.gross_value")),
    ]
    return [Cell(text, col.width, col.align) for text, col in zip(values, ITEM_COLUMNS)]


def _totals_row(
    backend: RenderBackend,
    position: float,
    left: float,
    caption: str,
    label: str,
    net: float,
    rate: str,
    tax: float,
    gross: float,
) -> float:
    with font_state(backend, REGULAR, LABEL_FONT_SIZE):
        position = write_row(backend, position, left, [Cell(caption, SUMMARY_LABEL_WIDTH, "left")])
    with font_state(backend, REGULAR, BASE_FONT_SIZE):
        position = write_row(
            backend,
            position,
            left,
            [
                Cell(label, SUMMARY_LABEL_WIDTH, "left", bold=True),
                Cell(format_amount(net), NET.width, "right"),
                Cell(rate, RATE.width, "center"),
                Cell(format_amount(tax), TAX.width, "right"),
                Cell(format_amount(gross), GROSS.width, "right"),
            ],
        )
    return position


def render_vat_summary_row(backend: RenderBackend, position: float, left: float, row: TaxSummaryRow) -> float:
    return _totals_row(
        backend,
        position,
        left,
        vat_description(row.vat_rate, "label_en"),
        vat_description(row.vat_rate, "label"),
        row.net_value,
        vat_description(row.vat_rate, "value"),
        row.vat_amount,
        row.gross_value,
    )


def render_items_table(backend: RenderBackend, position: float, invoice: Invoice, left: float) -> float:
    items = list(invoice.items)

    position = _header_row(backend, position, left)
    position = horizontal_line(backend, position, left, TABLE_WIDTH)

    with font_state(backend, REGULAR, BASE_FONT_SIZE):
        for ordinal, item in enumerate(items, start=1):
            position = write_row(backend, position, left, build_item_cells(ordinal, item))
            position = horizontal_line(backend, position, left, TABLE_WIDTH)

    summary = summarize_vat(items)
    for row in summary:
        position = render_vat_summary_row(backend, position, left, row)
        position = horizontal_line(backend, position, left, TABLE_WIDTH)
    position = horizontal_line(backend, position, left, TABLE_WIDTH)

    total = grand_total(items)
    position = _totals_row(backend, position, left, "Total", "Razem", total.net_value, " ", total.vat_amount, total.gross_value)
    logger.debug("Items table: %d item(s), %d VAT group(s), ends at %.2f", len(items), len(summary), position)
    return position
