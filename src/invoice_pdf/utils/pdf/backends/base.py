"""
Rendering backend interface.

The layout code only talks to a ``RenderBackend``: it selects a font role and
size, draws (wrapped) text at top-left based coordinates, measures text, draws
lines and starts pages. Adapters translate that into a concrete PDF library.

Subclasses implement:
- ``string_width`` for the given font role and size,
- ``_show_text`` to draw one already wrapped line whose top edge is at ``top``,
- ``line``, ``_start_page``, ``set_metadata`` and ``finish``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Mapping

from invoice_pdf.core.models.options import Margins
from invoice_pdf.utils.pdf.core.layout_common import (
    BASE_FONT_SIZE,
    BOLD,
    PAGE_H,
    PAGE_W,
    REGULAR,
    SEPARATOR_COLOR,
    SEPARATOR_WIDTH,
    line_height,
)
from invoice_pdf.utils.pdf.core.wrapping import wrap_text

# Distance from the top of a line box to its baseline, as a fraction of font size
BASELINE_RATIO = 0.9


class RenderBackend(ABC):
    """Stateful drawing surface: current font role, size, page and margins."""

    def __init__(self, page_size: tuple[float, float] = (PAGE_W, PAGE_H)) -> None:
        self.page_width, self.page_height = page_size
        self.margins = Margins()
        self.current_font = REGULAR
        self.current_size: float = BASE_FONT_SIZE
        self.page_count = 0

    # -- font state ---------------------------------------------------------
    def set_font(self, font: str) -> "RenderBackend":
        if font not in (REGULAR, BOLD):
            raise ValueError(f"Unknown font role: {font!r}")
        self.current_font = font
        return self

    def set_font_size(self, size: float) -> "RenderBackend":
        if size <= 0:
            raise ValueError(f"Font size must be positive, got {size!r}")
        self.current_size = size
        return self

    # -- measuring ----------------------------------------------------------
    @abstractmethod
    def string_width(self, text: str, font: str, size: float) -> float:
        """Width of a single line of text in points."""

    def width_of_string(self, text) -> float:
        return self.string_width(str(text), self.current_font, self.current_size)

    def available_width(self, x: float) -> float:
        return max(0.0, self.page_width - self.margins.right - x)

    @property
    def content_width(self) -> float:
        return self.page_width - self.margins.left - self.margins.right

    @property
    def max_y(self) -> float:
        """Lowest y usable for content: the top of the bottom margin."""
        return self.page_height - self.margins.bottom

    def wrap(self, text, width: float | None = None, x: float = 0.0, line_break: bool = True) -> list[str]:
        if not line_break:
            return wrap_text(text, None, self.width_of_string)
        if width is None:
            width = self.available_width(x)
        return wrap_text(text, width, self.width_of_string)

    def height_of_string(self, text, width: float | None = None, x: float = 0.0, line_break: bool = True) -> float:
        lines = self.wrap(text, width, x, line_break)
        return len(lines) * line_height(self.current_size)

    # -- drawing ------------------------------------------------------------
    def text(
        self,
        text,
        x: float,
        y: float,
        width: float | None = None,
        align: str = "left",
        line_break: bool = True,
    ) -> float:
        """
        Draw text with its top edge at y, wrapping to width (or to the right
        margin when width is None). Returns the height of the drawn block.
        """
        lines = self.wrap(text, width, x, line_break)
        box_width = width if width is not None else self.available_width(x)
        leading = line_height(self.current_size)
        for index, line in enumerate(lines):
            if not line:
                continue
            line_x = self._aligned_x(line, x, box_width, align)
            self._show_text(line, line_x, y + index * leading)
        return len(lines) * leading

    def _aligned_x(self, line: str, x: float, box_width: float, align: str) -> float:
        if align == "right":
            return x + box_width - self.width_of_string(line)
        if align == "center":
            return x + (box_width - self.width_of_string(line)) / 2
        return x

    @abstractmethod
    def _show_text(self, line: str, x: float, top: float) -> None:
        """Draw one line in the current font with its top edge at ``top``."""

    @abstractmethod
    def line(
        self,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        color: str = SEPARATOR_COLOR,
        width: float = SEPARATOR_WIDTH,
    ) -> None:
        """Stroke a straight line between two points."""

    # -- pages / document -----------------------------------------------------
    def add_page(self, margins: Margins | None = None) -> None:
        self.margins = margins or Margins()
        self.page_count += 1
        self._start_page()

    @abstractmethod
    def _start_page(self) -> None:
        """Begin a fresh page; ``page_count`` already includes it."""

    @abstractmethod
    def set_metadata(self, metadata: Mapping[str, str]) -> None:
        """Stamp document info entries (title, author, subject, ...)."""

    @abstractmethod
    def finish(self) -> None:
        """Finalize the document and write it to the sink."""


def hex_to_rgb(color: str) -> tuple[float, float, float]:
    value = color.lstrip("#")
    if len(value) == 3:
        value = "".join(ch * 2 for ch in value)
    if len(value) != 6:
        raise ValueError(f"Invalid color: {color!r}")
    return tuple(int(value[i : i + 2], 16) / 255.0 for i in (0, 2, 4))  # type: ignore[return-value]
