from decimal import Decimal

import pytest

from invoice_pdf.core.calculations.vat_summary import grand_total, summarize_vat, vat_description
from invoice_pdf.core.errors import DataError, FormatError
from invoice_pdf.core.models.tax_rate import Exempt, NotApplicable, Percentage, parse_tax_rate


def test_summarize_vat_two_rates(sample_invoice):
    rows = summarize_vat(sample_invoice.items)

    assert [row.vat_rate for row in rows] == ["23", "-1"]
    assert (rows[0].net_value, rows[0].vat_amount, rows[0].gross_value) == (100.0, 23.0, 123.0)
    assert (rows[1].net_value, rows[1].vat_amount, rows[1].gross_value) == (50.0, 0.0, 50.0)


def test_summarize_vat_keeps_first_seen_order_and_sums_groups(make_item):
    items = [
        make_item("10.00", "8", "0.80", "10.80"),
        make_item("100.00", "23", "23.00", "123.00"),
        make_item("20.00", "8", "1.60", "21.60"),
        make_item("5", "ZW", "0", "5"),
        make_item(200, "23", 46, 246),
    ]

    rows = summarize_vat(items)

    assert [row.vat_rate for row in rows] == ["8", "23", "ZW"]
    for row in rows:
        group = [it for it in items if it.vat_rate == row.vat_rate]
        assert row.net_value == pytest.approx(sum(float(it.net_value) for it in group))
        assert row.vat_amount == pytest.approx(sum(float(it.vat_amount) for it in group))
        assert row.gross_value == pytest.approx(sum(float(it.gross_value) for it in group))


def test_summarize_vat_groups_on_exact_code(make_item):
    rows = summarize_vat([make_item(rate="23"), make_item(rate="23.0"), make_item(rate="23")])
    assert [row.vat_rate for row in rows] == ["23", "23.0"]
    assert rows[0].net_value == pytest.approx(200.0)


def test_summarize_vat_empty():
    assert summarize_vat([]) == []


def test_summarize_vat_rejects_malformed_amount(make_item):
    with pytest.raises(DataError) as excinfo:
        summarize_vat([make_item(), make_item(net="12,x")])
    assert excinfo.value.field == "items[1].net_value"


def test_grand_total_ignores_grouping(make_item):
    items = [
        make_item("100.00", "23", "23.00", "123.00"),
        make_item("50.00", "-1", "0.00", "50.00"),
        make_item("0.10", "ZW", "0", "0.10"),
        make_item("0.20", "23.0", "0.05", "0.25"),
    ]

    total = grand_total(items)
    grouped = summarize_vat(items)

    assert total.net_value == pytest.approx(150.30)
    assert total.vat_amount == pytest.approx(23.05)
    assert total.gross_value == pytest.approx(173.35)
    assert total.net_value == pytest.approx(sum(row.net_value for row in grouped))


@pytest.mark.parametrize(
    "code, expected",
    [("-1", "n/a"), ("ZW", "ZW"), ("zw", "ZW"), ("23", "23 %"), ("8", "8 %"), ("0", "0 %"), ("5.5", "5.5 %")],
)
def test_vat_description_value(code, expected):
    assert vat_description(code, "value") == expected


def test_vat_description_labels():
    assert "not subject to VAT" in vat_description("-1", "label_en")
    assert "exempt from VAT" in vat_description("ZW", "label_en")
    assert "exempt from VAT" in vat_description("zw", "label_en")
    assert vat_description("23", "label_en") == "Total charges subject to VAT at 23%"
    assert vat_description("23", "label") == "Wartość usług podlegających VAT 23%"
    assert vat_description("-1", "label") == "Wartość usług nie podlegających VAT"
    assert vat_description("ZW", "label") == "Wartość usług zwolnionych z VAT"


@pytest.mark.parametrize("code", ["abc", "", "-5", "NaN", "Infinity", None])
def test_vat_description_rejects_unknown_codes(code):
    with pytest.raises(FormatError):
        vat_description(code, "value")


def test_vat_description_unknown_field():
    with pytest.raises(ValueError):
        vat_description("23", "tooltip")


def test_parse_tax_rate_variants():
    assert parse_tax_rate("-1") == NotApplicable()
    assert isinstance(parse_tax_rate("zw"), Exempt)
    rate = parse_tax_rate(" 23 ")
    assert rate == Percentage(rate=Decimal("23"), code="23")
