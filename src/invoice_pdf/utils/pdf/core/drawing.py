"""
Drawing primitives shared by all sections. Every function takes the current
vertical position and returns the position below what it drew.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Sequence

from invoice_pdf.utils.pdf.backends.base import RenderBackend
from invoice_pdf.utils.pdf.core.layout_common import (
    BASE_FONT_SIZE,
    BOLD,
    DEFAULT_CELL_ALIGN,
    DEFAULT_CELL_WIDTH,
    INLINE_GAP,
    LABEL_FONT_SIZE,
    LABEL_GAP,
    REGULAR,
    SEPARATOR_COLOR,
    SEPARATOR_WIDTH,
)


@dataclass(frozen=True)
class Cell:
    text: object = ""
    width: float | None = None
    align: str | None = None
    bold: bool = False


@contextmanager
def font_state(backend: RenderBackend, font: str | None = None, size: float | None = None) -> Iterator[RenderBackend]:
    """Temporarily switch font role and/or size, restoring both afterwards."""
    saved_font, saved_size = backend.current_font, backend.current_size
    if font is not None:
        backend.set_font(font)
    if size is not None:
        backend.set_font_size(size)
    try:
        yield backend
    finally:
        backend.set_font(saved_font)
        backend.set_font_size(saved_size)


def write_cell(
    backend: RenderBackend,
    text,
    x: float,
    y: float,
    width: float = DEFAULT_CELL_WIDTH,
    align: str = DEFAULT_CELL_ALIGN,
    bold: bool = False,
) -> float:
    """Draw wrapped text in a fixed-width column; returns the block height."""
    with font_state(backend, BOLD if bold else None):
        return backend.text("" if text is None else str(text), x, y, width=width, align=align)


def write_row(backend: RenderBackend, position: float, start: float, cells: Sequence[Cell]) -> float:
    """Lay cells out left to right from `start`; the tallest cell sets the row height."""
    offset = start
    heights: list[float] = []
    for cell in cells:
        width = cell.width or DEFAULT_CELL_WIDTH
        heights.append(write_cell(backend, cell.text, offset, position, width, cell.align or DEFAULT_CELL_ALIGN, cell.bold))
        offset += width
    return position + max(heights, default=0.0)


def horizontal_line(backend: RenderBackend, position: float, start: float, width: float) -> float:
    backend.line(start, position, start + width, position, color=SEPARATOR_COLOR, width=SEPARATOR_WIDTH)
    return position


def write_bilingual_label(
    backend: RenderBackend,
    x: float,
    y: float,
    caption: str,
    value: str,
    *,
    caption_size: float = LABEL_FONT_SIZE,
    value_size: float = BASE_FONT_SIZE,
    width: float | None = None,
    line_break: bool = True,
    inline_value: str | None = None,
    gap: float = LABEL_GAP,
) -> float:
    """
    Small secondary-language caption with the bold primary-language value
    under it. `inline_value` continues the value's line in the regular font
    (used for dates).
    """
    with font_state(backend, REGULAR, caption_size):
        caption_height = backend.text(caption, x, y, width=width, line_break=line_break)

    value_y = y + caption_height
    with font_state(backend, BOLD, value_size):
        value_height = backend.text(value, x, value_y, width=width, line_break=line_break)
        value_width = backend.width_of_string(str(value).split("\n")[-1])

    if inline_value:
        with font_state(backend, REGULAR, value_size):
            backend.text(inline_value, x + value_width + INLINE_GAP, value_y, line_break=False)

    return value_y + value_height + gap
