from __future__ import annotations

from invoice_pdf.core.models.invoice import DocumentType, Invoice
from invoice_pdf.core.models.options import RenderOptions
from invoice_pdf.utils.pdf.backends.base import RenderBackend
from invoice_pdf.utils.pdf.core.drawing import write_bilingual_label
from invoice_pdf.utils.pdf.core.layout_common import BASE_FONT_SIZE, TITLE_FONT_SIZE
from invoice_pdf.utils.pdf.core.totals import format_date

# (Polish title, English caption)
DOCUMENT_TITLES = {
    DocumentType.STANDARD: ("Faktura VAT", "VAT Invoice"),
    DocumentType.VATLESS: ("Faktura", "Invoice"),
    DocumentType.PROFORMA: ("Faktura pro forma", "Pro forma invoice"),
    DocumentType.DUPLICATE: ("Faktura VAT - duplikat", "VAT Invoice - duplicate"),
}

# (Invoice attribute, Polish label, English caption); issue date is always present
DATE_FIELDS = (
    ("issue_date", "Data wystawienia:", "Issue date"),
    ("duplicate_issue_date", "Data wystawienia duplikatu:", "Duplicate issue date"),
    ("payment_received_date", "Data otrzymania zapłaty:", "Payment received date"),
    ("due_date", "Termin płatności:", "Due date"),
)


def document_title(document_type) -> tuple[str, str]:
    return DOCUMENT_TITLES[DocumentType.parse(document_type)]


def render_header(backend: RenderBackend, position: float, invoice: Invoice, options: RenderOptions, x: float) -> float:
    title, title_en = document_title(invoice.document_type)
    position = write_bilingual_label(
        backend,
        x,
        position,
        title_en,
        f"{title}\n{invoice.number}",
        caption_size=BASE_FONT_SIZE,
        value_size=TITLE_FONT_SIZE,
    )
    for attr, label, label_en in DATE_FIELDS:
        value = getattr(invoice, attr)
        if not value:
            continue
        position = write_bilingual_label(
            backend,
            x,
            position,
            label_en,
            label,
            line_break=False,
            inline_value=format_date(value, options.date_format),
        )
    return position
