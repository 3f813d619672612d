from __future__ import annotations

from invoice_pdf.core.models.invoice import Address, Invoice, Party
from invoice_pdf.core.models.options import RenderOptions
from invoice_pdf.utils.pdf.backends.base import RenderBackend
from invoice_pdf.utils.pdf.core.drawing import font_state, write_bilingual_label
from invoice_pdf.utils.pdf.core.layout_common import BASE_FONT_SIZE, PARTY_COLUMN_WIDTH, REGULAR
from invoice_pdf.utils.pdf.core.totals import strip_left


def build_party_lines(party: Party, tax_id: str | None = None) -> list[str]:
    """Always four lines: company, street, zip + city + country, tax id. Missing parts stay blank."""
    address = party.address or Address()
    locality = " ".join(part for part in (address.zip_code, address.city) if part)
    if address.country:
        locality = f"{locality}, {address.country}" if locality else address.country
    tax_id = party.tax_id if tax_id is None else tax_id
    return [
        party.company or "",
        f"ul. {address.street}" if address.street else "",
        locality,
        f"NIP: {tax_id}" if tax_id else "",
    ]


def buyer_tax_id(buyer: Party, options: RenderOptions) -> str:
    return strip_left(buyer.tax_id, options.strip_buyer_country)


def render_parties(
    backend: RenderBackend,
    position: float,
    invoice: Invoice,
    options: RenderOptions,
    left: float,
    right: float,
) -> float:
    seller_y = write_bilingual_label(backend, left, position, "Seller", "Sprzedawca:")
    buyer_y = write_bilingual_label(backend, right, position, "Bill to", "Nabywca:")

    seller_lines = build_party_lines(invoice.seller)
    buyer_lines = build_party_lines(invoice.buyer, buyer_tax_id(invoice.buyer, options))
    with font_state(backend, REGULAR, BASE_FONT_SIZE):
        seller_height = backend.text("\n".join(seller_lines), left, seller_y, width=PARTY_COLUMN_WIDTH)
        buyer_height = backend.text("\n".join(buyer_lines), right, buyer_y, width=PARTY_COLUMN_WIDTH)

    return max(seller_y + seller_height, buyer_y + buyer_height)
