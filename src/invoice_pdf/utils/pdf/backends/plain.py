"""
Dependency-light PDF backend: writes raw content streams with the built-in
Helvetica pair. Text is reduced to ASCII (no font embedding), widths come from
reportlab's standard font metrics.
"""

from __future__ import annotations

from typing import Mapping

from reportlab.pdfbase.pdfmetrics import stringWidth

from invoice_pdf.utils.pdf.backends.base import BASELINE_RATIO, RenderBackend, hex_to_rgb
from invoice_pdf.utils.pdf.core.builder import build_pdf_bytes, escape_pdf_text, normalize_ascii
from invoice_pdf.utils.pdf.core.layout_common import BOLD, PAGE_H, PAGE_W, REGULAR, SEPARATOR_COLOR, SEPARATOR_WIDTH

_PDF_FONTS = {REGULAR: ("/F1", "Helvetica"), BOLD: ("/F2", "Helvetica-Bold")}


class PlainPdfBackend(RenderBackend):
    def __init__(self, sink, page_size: tuple[float, float] = (PAGE_W, PAGE_H)) -> None:
        super().__init__(page_size)
        self.sink = sink
        self._pages: list[list[str]] = []
        self._info: dict[str, str] = {}

    def string_width(self, text: str, font: str, size: float) -> float:
        return stringWidth(normalize_ascii(text), _PDF_FONTS[font][1], size)

    def _emit(self, op: str) -> None:
        if not self._pages:
            self._pages.append([])
        self._pages[-1].append(op)

    def _show_text(self, line: str, x: float, top: float) -> None:
        font_ref = _PDF_FONTS[self.current_font][0]
        baseline = self.page_height - top - self.current_size * BASELINE_RATIO
        self._emit(f"BT {font_ref} {self.current_size:g} Tf {x:.2f} {baseline:.2f} Td ({escape_pdf_text(line)}) Tj ET\n")

    def line(self, x1, y1, x2, y2, color: str = SEPARATOR_COLOR, width: float = SEPARATOR_WIDTH) -> None:
        r, g, b = hex_to_rgb(color)
        h = self.page_height
        self._emit(
            f"q {r:.3f} {g:.3f} {b:.3f} RG {width:g} w {x1:.2f} {h - y1:.2f} m {x2:.2f} {h - y2:.2f} l S Q\n"
        )

    def _start_page(self) -> None:
        self._pages.append([])

    def set_metadata(self, metadata: Mapping[str, str]) -> None:
        self._info.update({str(k): str(v) for k, v in metadata.items()})

    def finish(self) -> None:
        streams = ["".join(ops) for ops in self._pages]
        data = build_pdf_bytes(streams, page_size=(self.page_width, self.page_height), info=self._info)
        if hasattr(self.sink, "write"):
            self.sink.write(data)
        else:
            with open(self.sink, "wb") as fh:
                fh.write(data)
