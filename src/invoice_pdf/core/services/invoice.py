"""
Build Invoice models from JSON-shaped mappings.

Accepted keys follow the JSON invoice format (camelCase, Polish amount names):
``invoiceNo``, ``issueDate``, ``seller``/``buyer`` (``company``, ``address``,
``nip``, ``bankAccount``), ``items`` (``name``, ``quantity``, ``price``,
``netto``, ``vatRate``, ``vatAmount``, ``brutto``), ``invoiceInfo``, ``notes``,
``paymentMethod``, ``type``, ``duplicateIssueDate``, ``paymentReceivedDate``,
``dueDate``. snake_case model field names are accepted as well.
"""

from __future__ import annotations

import json
import logging
from datetime import date, datetime
from pathlib import Path
from typing import Mapping

from invoice_pdf.core.errors import DataError
from invoice_pdf.core.models.invoice import Address, DocumentType, Invoice, LineItem, Party

logger = logging.getLogger(__name__)

_ITEM_FIELDS = {
    "description": ("name", "description"),
    "quantity": ("quantity",),
    "unit_price": ("price", "unit_price"),
    "net_value": ("netto", "net_value"),
    "vat_rate": ("vatRate", "vat_rate"),
    "vat_amount": ("vatAmount", "vat_amount"),
    "gross_value": ("brutto", "gross_value"),
}


def _pick(data: Mapping, *keys, default=None):
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return default


def parse_date(value, field: str) -> date | None:
    if value in (None, ""):
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        pass
    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        raise DataError(f"{field}: cannot parse date {value!r}", field=field) from None


def party_from_mapping(data: Mapping | None, field: str = "party") -> Party:
    """Missing fields become empty strings; the parties block prints them blank."""
    data = data or {}
    if not isinstance(data, Mapping):
        raise DataError(f"{field} must be an object", field=field)
    address = data.get("address") or {}
    if isinstance(address, str):
        address = {"street": address}
    elif not isinstance(address, Mapping):
        raise DataError(f"{field}.address must be an object or a string", field=f"{field}.address")
    return Party(
        company=str(_pick(data, "company", "name", default="")),
        address=Address(
            street=str(_pick(address, "street", default="")),
            zip_code=str(_pick(address, "zipcode", "zipCode", "zip_code", default="")),
            city=str(_pick(address, "city", default="")),
            country=str(_pick(address, "country", default="")),
        ),
        tax_id=str(_pick(data, "nip", "taxId", "tax_id", default="")),
        bank_account=_pick(data, "bankAccount", "bank_account"),
    )


def item_from_mapping(data: Mapping, index: int = 0) -> LineItem:
    if not isinstance(data, Mapping):
        raise DataError(f"items[{index}] must be an object", field=f"items[{index}]")
    values = {}
    for name, keys in _ITEM_FIELDS.items():
        value = _pick(data, *keys)
        if value is None:
            raise DataError(f"items[{index}]: missing '{keys[0]}'", field=f"items[{index}].{name}")
        values[name] = value
    description = values["description"]
    if isinstance(description, (list, tuple)):
        values["description"] = tuple(str(line) for line in description)
    elif not isinstance(description, str):
        raise DataError(f"items[{index}]: name must be a string or a list of lines", field=f"items[{index}].description")
    values["vat_rate"] = str(values["vat_rate"])
    return LineItem(**values)


def invoice_from_mapping(data: Mapping) -> Invoice:
    if not isinstance(data, Mapping):
        raise DataError(f"Invoice must be an object, got {type(data).__name__}")
    number = _pick(data, "invoiceNo", "number")
    if number is None:
        raise DataError("Invoice is missing 'invoiceNo'", field="invoiceNo")
    issue_date = parse_date(_pick(data, "issueDate", "issue_date"), "issueDate")
    if issue_date is None:
        raise DataError("Invoice is missing 'issueDate'", field="issueDate")

    raw_items = data.get("items") or []
    if not isinstance(raw_items, (list, tuple)):
        raise DataError("items must be an array", field="items")
    notes = _pick(data, "notes", default=())
    if isinstance(notes, str):
        notes = [notes]
    elif not isinstance(notes, (list, tuple)):
        raise DataError("notes must be a string or an array", field="notes")

    return Invoice(
        number=str(number),
        issue_date=issue_date,
        seller=party_from_mapping(data.get("seller"), "seller"),
        buyer=party_from_mapping(data.get("buyer"), "buyer"),
        items=tuple(item_from_mapping(item, i) for i, item in enumerate(raw_items)),
        document_type=DocumentType.parse(_pick(data, "type", "documentType", "document_type")),
        duplicate_issue_date=parse_date(_pick(data, "duplicateIssueDate", "duplicate_issue_date"), "duplicateIssueDate"),
        payment_received_date=parse_date(_pick(data, "paymentReceivedDate", "payment_received_date"), "paymentReceivedDate"),
        due_date=parse_date(_pick(data, "dueDate", "due_date"), "dueDate"),
        info=_pick(data, "invoiceInfo", "info"),
        notes=tuple(str(note) for note in notes),
        payment_method=_pick(data, "paymentMethod", "payment_method"),
    )


def load_invoices(path: Path | str) -> list[Invoice]:
    """Read one invoice object or an array of them from a JSON file."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise DataError(f"{path}: invalid JSON ({exc})") from exc
    records = data if isinstance(data, list) else [data]
    invoices = [invoice_from_mapping(record) for record in records]
    logger.info("Loaded %d invoice(s) from %s", len(invoices), path)
    return invoices
