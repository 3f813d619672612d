import json
from datetime import date

import pytest

from invoice_pdf.app import main
from invoice_pdf.core.errors import DataError, InvoiceRenderError
from invoice_pdf.core.models.invoice import DocumentType
from invoice_pdf.core.models.options import FooterOptions, Margins, RenderOptions
from invoice_pdf.core.services.invoice import invoice_from_mapping, load_invoices, parse_date
from invoice_pdf.core.services.options import load_options
from invoice_pdf.utils.pdf.core.totals import format_amount, group_account_number, parse_amount, strip_left

INVOICE_JSON = {
    "invoiceNo": "FV/2024/02/007",
    "issueDate": "2024-02-05T10:15:00.000Z",
    "dueDate": "2024-02-19",
    "type": "proforma",
    "paymentMethod": "przelew",
    "invoiceInfo": "Zamówienie 17/2024",
    "notes": "Dziękujemy za współpracę",
    "seller": {
        "company": "XYZ sp. z o.o.",
        "address": {"street": "Prosta 1", "zipcode": "50-001", "city": "Wrocław", "country": "Polska"},
        "nip": "8971234567",
        "bankAccount": "PL61109010140000071219812874",
    },
    "buyer": {"company": "ACME Corp", "address": {"street": "Długa 5", "zipcode": "00-950", "city": "Warszawa"}, "nip": "PL1234567890"},
    "items": [
        {"name": "Hosting", "quantity": 1, "price": 100, "netto": 100, "vatRate": "23", "vatAmount": 23, "brutto": 123},
        {"name": ["Opłata", "administracyjna"], "quantity": 2, "price": "25.00", "netto": "50.00", "vatRate": -1, "vatAmount": "0", "brutto": "50.00"},
    ],
}


def test_invoice_from_mapping():
    invoice = invoice_from_mapping(INVOICE_JSON)

    assert invoice.number == "FV/2024/02/007"
    assert invoice.issue_date == date(2024, 2, 5)
    assert invoice.due_date == date(2024, 2, 19)
    assert invoice.duplicate_issue_date is None
    assert invoice.document_type is DocumentType.PROFORMA
    assert invoice.seller.address.zip_code == "50-001"
    assert invoice.buyer.address.country == ""
    assert invoice.seller.bank_account == "PL61109010140000071219812874"
    assert invoice.items[1].vat_rate == "-1"
    assert invoice.items[1].display_description == "Opłata\nadministracyjna"
    assert invoice.notes_lines == ["Zamówienie 17/2024", "Dziękujemy za współpracę"]


@pytest.mark.parametrize("missing", ["invoiceNo", "issueDate"])
def test_invoice_requires_number_and_date(missing):
    data = {k: v for k, v in INVOICE_JSON.items() if k != missing}
    with pytest.raises(DataError) as excinfo:
        invoice_from_mapping(data)
    assert excinfo.value.field == missing


def test_item_missing_field():
    data = dict(INVOICE_JSON, items=[{"name": "Hosting", "quantity": 1, "price": 1, "netto": 1, "vatAmount": 0, "brutto": 1}])
    with pytest.raises(DataError) as excinfo:
        invoice_from_mapping(data)
    assert excinfo.value.field == "items[0].vat_rate"


def test_parse_date():
    assert parse_date("2024-03-01", "d") == date(2024, 3, 1)
    assert parse_date("", "d") is None
    with pytest.raises(DataError):
        parse_date("jutro", "dueDate")


def test_load_invoices_accepts_object_or_list(tmp_path):
    single = tmp_path / "one.json"
    single.write_text(json.dumps(INVOICE_JSON), encoding="utf-8")
    many = tmp_path / "many.json"
    many.write_text(json.dumps([INVOICE_JSON, INVOICE_JSON]), encoding="utf-8")
    broken = tmp_path / "broken.json"
    broken.write_text("{", encoding="utf-8")

    assert len(load_invoices(single)) == 1
    assert len(load_invoices(many)) == 2
    with pytest.raises(DataError):
        load_invoices(broken)


def test_errors_are_value_errors():
    assert issubclass(DataError, InvoiceRenderError)
    assert issubclass(InvoiceRenderError, ValueError)


# --- options ----------------------------------------------------------------


def test_options_from_mapping():
    options = RenderOptions.from_mapping(
        {
            "currency": "EUR",
            "footer": {"text": "Stopka", "align": "Right"},
            "margins": {"left": 40},
            "stripBuyerCountry": "DE",
            "dateFormat": "%d.%m.%Y",
        }
    )

    assert options.currency == "EUR"
    assert options.footer == FooterOptions("Stopka", "right")
    assert options.margins == Margins(left=40, right=30, bottom=44)
    assert options.strip_buyer_country == "DE"
    assert options.date_format == "%d.%m.%Y"
    assert options.document_metadata is None


def test_options_defaults():
    options = RenderOptions.from_mapping(None)
    assert options == RenderOptions()
    assert RenderOptions.from_mapping({"footer": "Stopka"}).footer == FooterOptions("Stopka")


@pytest.mark.parametrize(
    "data",
    [{"footer": {"text": "x", "align": "middle"}}, {"margins": {"left": "wide"}}, {"documentMetadata": ["title"]}],
)
def test_options_reject_invalid(data):
    with pytest.raises(DataError):
        RenderOptions.from_mapping(data)


def test_load_options(tmp_path):
    assert load_options(None) == RenderOptions()
    with pytest.raises(FileNotFoundError):
        load_options(tmp_path / "missing.json")

    path = tmp_path / "options.json"
    path.write_text(json.dumps({"currency": "USD"}), encoding="utf-8")
    assert load_options(path).currency == "USD"

    path.write_text("[]", encoding="utf-8")
    with pytest.raises(DataError):
        load_options(path)


# --- value helpers --------------------------------------------------------------


def test_amount_helpers():
    assert parse_amount(" 12.5 ") == 12.5
    assert format_amount(-0.001) == "0.00"
    assert format_amount(1234.5) == "1234.50"
    for bad in (None, True, "1,5", "inf"):
        with pytest.raises(DataError):
            parse_amount(bad)


def test_account_and_prefix_helpers():
    assert group_account_number("PL61 1090 101400000712") == "PL61 1090 1014 0000 0712"
    assert strip_left("PL123", "PL") == "123"
    assert strip_left("DE123", "PL") == "DE123"
    assert strip_left(None, "PL") == ""


# --- command line ----------------------------------------------------------------


def test_cli_renders_plain_pdf(tmp_path):
    source = tmp_path / "invoices.json"
    source.write_text(json.dumps([INVOICE_JSON]), encoding="utf-8")
    target = tmp_path / "out.pdf"

    code = main([str(source), str(target), "--backend", "plain", "--currency", "EUR", "--footer-text", "Stopka"])

    assert code == 0
    data = target.read_bytes()
    assert data.startswith(b"%PDF")
    assert b"(Waluta: EUR) Tj" in data
    assert b"(Stopka) Tj" in data


def test_cli_reports_bad_data(tmp_path, caplog):
    source = tmp_path / "invoices.json"
    source.write_text(json.dumps({"issueDate": "2024-01-01"}), encoding="utf-8")

    code = main([str(source), str(tmp_path / "out.pdf"), "--backend", "plain"])

    assert code == 1
    assert "invoiceNo" in caplog.text


@pytest.mark.parametrize(
    "override, field",
    [
        ({"items": ["Hosting"]}, "items[0]"),
        ({"items": 5}, "items"),
        ({"items": [dict(INVOICE_JSON["items"][0], name=5)]}, "items[0].description"),
        ({"notes": 7}, "notes"),
        ({"seller": "XYZ"}, "seller"),
        ({"seller": dict(INVOICE_JSON["seller"], address=5)}, "seller.address"),
        ({"buyer": [1, 2]}, "buyer"),
    ],
)
def test_non_object_records_are_data_errors(override, field):
    with pytest.raises(DataError) as excinfo:
        invoice_from_mapping(dict(INVOICE_JSON, **override))
    assert excinfo.value.field == field


def test_cli_reports_malformed_notes(tmp_path, caplog):
    source = tmp_path / "invoices.json"
    source.write_text(json.dumps(dict(INVOICE_JSON, notes=7)), encoding="utf-8")

    code = main([str(source), str(tmp_path / "out.pdf"), "--backend", "plain"])

    assert code == 1
    assert "notes" in caplog.text


def test_cli_reports_missing_options_file(tmp_path, caplog):
    source = tmp_path / "invoices.json"
    source.write_text(json.dumps(INVOICE_JSON), encoding="utf-8")

    code = main([str(source), str(tmp_path / "out.pdf"), "--backend", "plain", "--options", str(tmp_path / "nope.json")])

    assert code == 1
    assert "nope.json" in caplog.text
