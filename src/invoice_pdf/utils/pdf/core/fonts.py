"""
Font registration for the reportlab backend.

Polish labels need a Unicode TrueType pair; the built-in Helvetica is used only
when no usable TTF is found.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont

from invoice_pdf.utils.pdf.core.layout_common import BOLD

logger = logging.getLogger(__name__)

FONT_DIR_ENV = "INVOICE_PDF_FONT_DIR"


@dataclass(frozen=True)
class FontPair:
    regular: str
    bold: str

    def name(self, role: str) -> str:
        return self.bold if role == BOLD else self.regular


BUILTIN_FONTS = FontPair("Helvetica", "Helvetica-Bold")

# (family, regular path, bold path)
_SYSTEM_CANDIDATES = [
    ("DejaVuSans", "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf", "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf"),
    ("DejaVuSans", "/usr/share/fonts/dejavu/DejaVuSans.ttf", "/usr/share/fonts/dejavu/DejaVuSans-Bold.ttf"),
    ("DejaVuSans", "/usr/share/fonts/TTF/DejaVuSans.ttf", "/usr/share/fonts/TTF/DejaVuSans-Bold.ttf"),
    ("Arial", "/Library/Fonts/Arial.ttf", "/Library/Fonts/Arial Bold.ttf"),
    ("Arial", r"C:\Windows\Fonts\arial.ttf", r"C:\Windows\Fonts\arialbd.ttf"),
]

# Registered pairs by font directory (None = system lookup)
_FONT_CACHE: Dict[str | None, FontPair] = {}


def _candidates(font_dir: str | None) -> list[tuple[str, Path, Path]]:
    found: list[tuple[str, Path, Path]] = []
    override = font_dir or os.environ.get(FONT_DIR_ENV)
    if override:
        base = Path(override)
        found.append(("InvoiceSans", base / "regular.ttf", base / "bold.ttf"))
    found.extend((family, Path(regular), Path(bold)) for family, regular, bold in _SYSTEM_CANDIDATES)
    return found


def register_fonts(font_dir: str | None = None) -> FontPair:
    """
    Register the first available regular/bold TTF pair with reportlab and
    return its names. Falls back to Helvetica.
    """
    if font_dir in _FONT_CACHE:
        return _FONT_CACHE[font_dir]

    pair = BUILTIN_FONTS
    for family, regular_path, bold_path in _candidates(font_dir):
        if not regular_path.exists() or not bold_path.exists():
            continue
        try:
            pdfmetrics.registerFont(TTFont(family, str(regular_path)))
            pdfmetrics.registerFont(TTFont(f"{family}-Bold", str(bold_path)))
        except Exception as exc:  # reportlab raises its own TTFError and plain IOErrors
            logger.warning("Failed to register font '%s' from %s: %s", family, regular_path.parent, exc)
            continue
        pair = FontPair(family, f"{family}-Bold")
        logger.info("Font '%s' registered from %s", family, regular_path.parent)
        break
    else:
        logger.warning("No Unicode TTF font found; using Helvetica, Polish characters may not render")

    _FONT_CACHE[font_dir] = pair
    return pair


def clear_font_cache() -> None:
    _FONT_CACHE.clear()
