"""
Layout and style constants for PDF rendering.
Coordinates are in points, measured from the top-left corner of the page.
"""

from __future__ import annotations

from dataclasses import dataclass

# Page geometry (A4, points)
PAGE_W, PAGE_H = 595.28, 841.89

# Font roles understood by every backend
REGULAR = "regular"
BOLD = "bold"

# Type sizes
BASE_FONT_SIZE = 7
LABEL_FONT_SIZE = BASE_FONT_SIZE - 2
TITLE_FONT_SIZE = BASE_FONT_SIZE + 7
LINE_HEIGHT = 1.2  # leading as a multiple of font size

# Vertical rhythm
PAGE_TOP = 50
BLOCK_GAP = 30
LABEL_GAP = 4
NOTE_GAP = 4
INLINE_GAP = 5

# Cells
DEFAULT_CELL_WIDTH = 60
DEFAULT_CELL_ALIGN = "center"

# Right addressing column, relative to the left margin
RIGHT_COLUMN_OFFSET = 280
PARTY_COLUMN_WIDTH = 250

SEPARATOR_COLOR = "#bbbbbb"
SEPARATOR_WIDTH = 0.5


@dataclass(frozen=True)
class ColumnHeader:
    label: str
    label_en: str
    width: float = DEFAULT_CELL_WIDTH
    align: str = DEFAULT_CELL_ALIGN


ITEM_COLUMNS: tuple[ColumnHeader, ...] = (
    ColumnHeader("Lp.", "#", width=20, align="left"),
    ColumnHeader("Nazwa pozycji", "Description", width=150, align="left"),
    ColumnHeader("Ilość", "Quantity"),
    ColumnHeader("Cena netto", "Net price", align="right"),
    ColumnHeader("Wartość netto", "Net value", align="right"),
    ColumnHeader("Stawka VAT", "VAT rate"),
    ColumnHeader("Kwota VAT", "VAT Amount", align="right"),
    ColumnHeader("Wartość brutto", "Gross value", align="right"),
)

TABLE_WIDTH = sum(col.width for col in ITEM_COLUMNS)
SUMMARY_LABEL_WIDTH = sum(col.width for col in ITEM_COLUMNS[:4])


def line_height(size: float) -> float:
    return size * LINE_HEIGHT
