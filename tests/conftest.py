import sys
from datetime import date
from pathlib import Path

import pytest

# Ensure `src` is importable when running tests from repo root.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def seller():
    from invoice_pdf.core.models.invoice import Address, Party

    return Party(
        company="XYZ sp. z o.o.",
        address=Address(street="Prosta 1", zip_code="50-001", city="Wrocław", country="Polska"),
        tax_id="8971234567",
        bank_account="PL61109010140000071219812874",
    )


@pytest.fixture
def buyer():
    from invoice_pdf.core.models.invoice import Address, Party

    return Party(
        company="ACME Corp",
        address=Address(street="Długa 5", zip_code="00-950", city="Warszawa", country="Polska"),
        tax_id="PL1234567890",
    )


@pytest.fixture
def make_item():
    from invoice_pdf.core.models.invoice import LineItem

    def _make(net="100.00", rate="23", vat="23.00", gross="123.00", description="Usługa programistyczna", quantity=1, price=None):
        return LineItem(
            description=description,
            quantity=quantity,
            unit_price=net if price is None else price,
            net_value=net,
            vat_rate=rate,
            vat_amount=vat,
            gross_value=gross,
        )

    return _make


@pytest.fixture
def sample_invoice(seller, buyer, make_item):
    """Two items: 23% and not subject to VAT."""
    from invoice_pdf.core.models.invoice import Invoice

    return Invoice(
        number="FV/2024/01/001",
        issue_date=date(2024, 1, 15),
        seller=seller,
        buyer=buyer,
        items=(
            make_item("100.00", "23", "23.00", "123.00"),
            make_item("50.00", "-1", "0.00", "50.00", description="Opłata"),
        ),
    )


@pytest.fixture
def backend():
    from invoice_pdf.utils.pdf.backends.recording import RecordingBackend

    rec = RecordingBackend()
    rec.add_page()
    return rec
