from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Sequence, Union

Amount = Union[str, int, float]
DateValue = Union[date, str]


class DocumentType(str, Enum):
    """Kind of document printed in the header; decides the title."""

    STANDARD = "standard"
    VATLESS = "vatless"
    PROFORMA = "proforma"
    DUPLICATE = "duplicate"

    @classmethod
    def parse(cls, value) -> "DocumentType":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value or "").strip().lower())
        except ValueError:
            return cls.STANDARD


@dataclass(frozen=True)
class Address:
    street: str = ""
    zip_code: str = ""
    city: str = ""
    country: str = ""


@dataclass(frozen=True)
class Party:
    """Seller or buyer as printed in the parties block."""

    company: str = ""
    address: Address = field(default_factory=Address)
    tax_id: str = ""
    bank_account: str | None = None


@dataclass(frozen=True)
class LineItem:
    """One billed position. Amounts are taken as supplied, never recomputed."""

    description: Union[str, Sequence[str]]
    quantity: Amount
    unit_price: Amount
    net_value: Amount
    vat_rate: str
    vat_amount: Amount
    gross_value: Amount

    @property
    def display_description(self) -> str:
        if isinstance(self.description, str):
            return self.description
        return "\n".join(str(line) for line in self.description)


@dataclass(frozen=True)
class Invoice:
    number: str
    issue_date: DateValue
    seller: Party
    buyer: Party
    items: Sequence[LineItem] = ()
    document_type: DocumentType = DocumentType.STANDARD
    duplicate_issue_date: DateValue | None = None
    payment_received_date: DateValue | None = None
    due_date: DateValue | None = None
    info: str | None = None
    notes: Sequence[str] = ()
    payment_method: str | None = None

    @property
    def notes_lines(self) -> list[str]:
        """Info line first, then the notes, skipping empty entries."""
        lines: list[str] = []
        if self.info:
            lines.append(self.info)
        lines.extend(note for note in self.notes if note)
        return lines
