from __future__ import annotations

import logging
from typing import Mapping

from reportlab.lib.colors import HexColor, black
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfgen import canvas

from invoice_pdf.utils.pdf.backends.base import BASELINE_RATIO, RenderBackend
from invoice_pdf.utils.pdf.core.fonts import FontPair, register_fonts
from invoice_pdf.utils.pdf.core.layout_common import PAGE_H, PAGE_W, SEPARATOR_COLOR, SEPARATOR_WIDTH

logger = logging.getLogger(__name__)


class ReportLabBackend(RenderBackend):
    """Draws on a reportlab canvas; the sink is a path or a binary file object."""

    def __init__(self, sink, page_size: tuple[float, float] = (PAGE_W, PAGE_H), fonts: FontPair | None = None) -> None:
        super().__init__(page_size)
        self.fonts = fonts or register_fonts()
        self._canvas = canvas.Canvas(sink, pagesize=page_size)
        self._metadata_setters = {
            "title": self._canvas.setTitle,
            "author": self._canvas.setAuthor,
            "subject": self._canvas.setSubject,
            "keywords": self._canvas.setKeywords,
            "creator": self._canvas.setCreator,
        }

    def string_width(self, text: str, font: str, size: float) -> float:
        return pdfmetrics.stringWidth(text, self.fonts.name(font), size)

    def _show_text(self, line: str, x: float, top: float) -> None:
        c = self._canvas
        c.setFillColor(black)
        c.setFont(self.fonts.name(self.current_font), self.current_size)
        c.drawString(x, self.page_height - top - self.current_size * BASELINE_RATIO, line)

    def line(self, x1, y1, x2, y2, color: str = SEPARATOR_COLOR, width: float = SEPARATOR_WIDTH) -> None:
        c = self._canvas
        c.saveState()
        c.setStrokeColor(HexColor(color))
        c.setLineWidth(width)
        c.line(x1, self.page_height - y1, x2, self.page_height - y2)
        c.restoreState()

    def _start_page(self) -> None:
        # the canvas opens the first page by itself
        if self.page_count > 1:
            self._canvas.showPage()

    def set_metadata(self, metadata: Mapping[str, str]) -> None:
        for key, value in metadata.items():
            setter = self._metadata_setters.get(key.lower())
            if setter is None:
                logger.warning("Document metadata key '%s' is not supported by reportlab; skipped", key)
                continue
            setter(str(value))

    def finish(self) -> None:
        self._canvas.save()
