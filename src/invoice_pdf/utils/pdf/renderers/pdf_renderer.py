"""
Page assembly and batch rendering.

One page per invoice: header, parties, items table, additional information and
(when configured) the footer, each block starting BLOCK_GAP below the previous one.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from invoice_pdf.core.models.invoice import Invoice
from invoice_pdf.core.models.options import RenderOptions
from invoice_pdf.utils.pdf.backends.base import RenderBackend
from invoice_pdf.utils.pdf.backends.factory import create_backend
from invoice_pdf.utils.pdf.core.layout_common import BASE_FONT_SIZE, BLOCK_GAP, PAGE_TOP, REGULAR, RIGHT_COLUMN_OFFSET
from invoice_pdf.utils.pdf.sections.additional_info import render_additional_info
from invoice_pdf.utils.pdf.sections.footer import render_footer
from invoice_pdf.utils.pdf.sections.header import render_header
from invoice_pdf.utils.pdf.sections.items_table import render_items_table
from invoice_pdf.utils.pdf.sections.parties import render_parties

logger = logging.getLogger(__name__)


def add_invoice(backend: RenderBackend, invoice: Invoice, options: RenderOptions) -> float:
    """Render one invoice on a new page; returns the final cursor position."""
    backend.add_page(options.margins)
    backend.set_font(REGULAR).set_font_size(BASE_FONT_SIZE)

    left = options.margins.left
    right = left + RIGHT_COLUMN_OFFSET

    position = float(PAGE_TOP)
    position = render_header(backend, position, invoice, options, right)
    position += BLOCK_GAP
    position = render_parties(backend, position, invoice, options, left, right)
    position += BLOCK_GAP
    position = render_items_table(backend, position, invoice, left)
    position += BLOCK_GAP
    position = render_additional_info(backend, position, invoice, options, left)
    if options.footer is not None:
        position = render_footer(backend, position, options.footer)

    logger.debug("Invoice %s rendered on page %d, cursor at %.2f", invoice.number, backend.page_count, position)
    return position


def _as_list(invoices: Invoice | Iterable[Invoice]) -> list[Invoice]:
    if isinstance(invoices, Invoice):
        return [invoices]
    return list(invoices)


def render_invoices(
    invoices: Invoice | Iterable[Invoice],
    sink=None,
    options: RenderOptions | None = None,
    *,
    backend: RenderBackend | None = None,
    backend_name: str = "reportlab",
    close: bool = True,
) -> int:
    """
    Render a single invoice or a sequence of invoices into one document.
    Pass either a sink (path or binary stream) or a ready backend. The sink is
    closed when rendering ends, also on error, unless close=False. Returns the page count.
    """
    options = options or RenderOptions()
    batch = _as_list(invoices)
    if backend is None:
        if sink is None:
            raise ValueError("render_invoices needs a sink or a backend")
        backend = create_backend(backend_name, sink, options)

    logger.info("Rendering %d invoice(s) with %s", len(batch), type(backend).__name__)
    try:
        if options.document_metadata:
            backend.set_metadata(options.document_metadata)
        for invoice in batch:
            add_invoice(backend, invoice, options)
        backend.finish()
    finally:
        if close and sink is not None and hasattr(sink, "close"):
            sink.close()
    return len(batch)


def render_pdf(
    path: Path | str,
    invoices: Invoice | Iterable[Invoice],
    options: RenderOptions | None = None,
    backend_name: str = "reportlab",
) -> int:
    """Render invoices straight into a PDF file."""
    path = Path(path)
    batch = _as_list(invoices)
    with path.open("wb") as fh:
        count = render_invoices(batch, fh, options, backend_name=backend_name, close=False)
    logger.info("Saved %d page(s) to %s", count, path)
    return count
