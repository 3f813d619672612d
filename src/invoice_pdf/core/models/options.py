"""
Render configuration.

Field names are snake_case; ``RenderOptions.from_mapping`` also understands the
camelCase keys used by JSON option files (``stripBuyerCountry`` etc.).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from invoice_pdf.core.errors import DataError

ALIGNMENTS = ("left", "center", "right", "justify")


@dataclass(frozen=True)
class Margins:
    left: float = 30
    right: float = 30
    bottom: float = 44


@dataclass(frozen=True)
class FooterOptions:
    """Fixed text printed at the bottom margin of every page."""

    text: str
    align: str = "center"


@dataclass(frozen=True)
class RenderOptions:
    """
    currency: code shown in the additional-information block.
    footer: footer block settings; no footer block when None.
    margins: page margins in points.
    strip_buyer_country: prefix removed from the buyer tax id when present.
    document_metadata: info entries (title, author, ...) stamped on the document.
    date_format: strftime pattern for date fields given as ``date`` objects.
    font_dir: directory with ``regular.ttf``/``bold.ttf`` for the reportlab backend.
    """

    currency: str = "PLN"
    footer: FooterOptions | None = None
    margins: Margins = field(default_factory=Margins)
    strip_buyer_country: str = "PL"
    document_metadata: Mapping[str, str] | None = None
    date_format: str = "%Y-%m-%d"
    font_dir: str | None = None

    @classmethod
    def from_mapping(cls, data: Mapping | None) -> "RenderOptions":
        data = data or {}
        footer = _parse_footer(data.get("footer"))

        margins_raw = data.get("margins") or {}
        defaults = Margins()
        try:
            margins = Margins(
                left=float(margins_raw.get("left", defaults.left)),
                right=float(margins_raw.get("right", defaults.right)),
                bottom=float(margins_raw.get("bottom", defaults.bottom)),
            )
        except (TypeError, ValueError, AttributeError) as exc:
            raise DataError(f"Invalid margins: {margins_raw!r}", field="margins") from exc

        strip = _first(data, "stripBuyerCountry", "strip_buyer_country", default="PL")
        metadata = _first(data, "documentMetadata", "document_metadata")
        if metadata is not None and not isinstance(metadata, Mapping):
            raise DataError("documentMetadata must be an object", field="documentMetadata")

        return cls(
            currency=str(data.get("currency") or "PLN"),
            footer=footer,
            margins=margins,
            strip_buyer_country=str(strip or ""),
            document_metadata=MappingProxyType({str(k): str(v) for k, v in metadata.items()}) if metadata else None,
            date_format=str(_first(data, "dateFormat", "date_format", default="%Y-%m-%d")),
            font_dir=_first(data, "fontDir", "font_dir"),
        )


def _first(data: Mapping, *keys, default=None):
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return default


def _parse_footer(raw) -> FooterOptions | None:
    if not raw:
        return None
    if isinstance(raw, str):
        return FooterOptions(text=raw)
    text = raw.get("text")
    if not text:
        return None
    align = str(raw.get("align") or "center").lower()
    if align not in ALIGNMENTS:
        raise DataError(f"Unknown footer alignment: {align!r}", field="footer.align")
    return FooterOptions(text=str(text), align=align)
