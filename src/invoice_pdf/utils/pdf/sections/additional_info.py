from __future__ import annotations

from typing import Sequence

from invoice_pdf.core.models.invoice import Invoice
from invoice_pdf.core.models.options import RenderOptions
from invoice_pdf.utils.pdf.backends.base import RenderBackend
from invoice_pdf.utils.pdf.core.drawing import font_state, write_bilingual_label
from invoice_pdf.utils.pdf.core.layout_common import BASE_FONT_SIZE, NOTE_GAP, REGULAR
from invoice_pdf.utils.pdf.core.totals import group_account_number


def render_notes(backend: RenderBackend, position: float, notes: Sequence[str], x: float, width: float) -> float:
    """Each note is its own paragraph, spaced by its measured height."""
    if not notes:
        return position
    position = write_bilingual_label(backend, x, position, "Additional information", "Dodatkowe informacje:")
    with font_state(backend, REGULAR, BASE_FONT_SIZE):
        for note in notes:
            position += backend.text(note, x, position, width=width, align="left") + NOTE_GAP
    return position


def render_additional_info(
    backend: RenderBackend,
    position: float,
    invoice: Invoice,
    options: RenderOptions,
    x: float,
) -> float:
    position = write_bilingual_label(backend, x, position, "Currency", f"Waluta: {options.currency}")

    account = invoice.seller.bank_account
    if account:
        position = write_bilingual_label(backend, x, position, "Bank account", f"Numer konta: {group_account_number(account)}")

    if invoice.payment_method:
        position = write_bilingual_label(backend, x, position, "Payment method", f"Sposób płatności: {invoice.payment_method}")

    return render_notes(backend, position, invoice.notes_lines, x, backend.content_width)
