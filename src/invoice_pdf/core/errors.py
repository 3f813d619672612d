from __future__ import annotations


class InvoiceRenderError(ValueError):
    """Base class for errors raised while preparing or laying out an invoice."""


class FormatError(InvoiceRenderError):
    """A value (typically a tax-rate code) has no known display form."""


class DataError(InvoiceRenderError):
    """An input field cannot be interpreted, e.g. a non-numeric amount."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field
