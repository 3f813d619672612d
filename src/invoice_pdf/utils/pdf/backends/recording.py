"""
Backend that draws nothing and records every call.

Text width is a fixed fraction of the font size per character, so wrapping and
heights are predictable in tests.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from invoice_pdf.utils.pdf.backends.base import RenderBackend
from invoice_pdf.utils.pdf.core.layout_common import PAGE_H, PAGE_W, SEPARATOR_COLOR, SEPARATOR_WIDTH

CHAR_WIDTH_RATIO = 0.5


@dataclass(frozen=True)
class TextCall:
    page: int
    text: str
    x: float
    y: float
    font: str
    size: float


@dataclass(frozen=True)
class LineCall:
    page: int
    x1: float
    y1: float
    x2: float
    y2: float
    color: str
    width: float


class RecordingBackend(RenderBackend):
    def __init__(self, sink=None, page_size: tuple[float, float] = (PAGE_W, PAGE_H)) -> None:
        super().__init__(page_size)
        self.sink = sink
        self.texts: list[TextCall] = []
        self.lines: list[LineCall] = []
        self.metadata: dict[str, str] = {}
        self.finished = False

    def string_width(self, text: str, font: str, size: float) -> float:
        return len(text) * size * CHAR_WIDTH_RATIO

    def _show_text(self, line: str, x: float, top: float) -> None:
        self.texts.append(TextCall(self.page_count, line, x, top, self.current_font, self.current_size))

    def line(self, x1, y1, x2, y2, color: str = SEPARATOR_COLOR, width: float = SEPARATOR_WIDTH) -> None:
        self.lines.append(LineCall(self.page_count, x1, y1, x2, y2, color, width))

    def _start_page(self) -> None:
        pass

    def set_metadata(self, metadata: Mapping[str, str]) -> None:
        self.metadata.update(metadata)

    def finish(self) -> None:
        self.finished = True
        if self.sink is not None:
            self.sink.write(self.transcript().encode("utf-8"))

    # -- helpers for assertions ----------------------------------------------
    def transcript(self) -> str:
        out = [f"pages {self.page_count}"]
        out.extend(f"text p{t.page} {t.font} {t.size:g} {t.x:.2f},{t.y:.2f} {t.text}" for t in self.texts)
        out.extend(f"line p{ln.page} {ln.x1:.2f},{ln.y1:.2f} {ln.x2:.2f},{ln.y2:.2f}" for ln in self.lines)
        return "\n".join(out) + "\n"

    def strings(self, page: int | None = None) -> list[str]:
        return [t.text for t in self.texts if page is None or t.page == page]

    def find(self, text: str) -> TextCall:
        for call in self.texts:
            if call.text == text:
                return call
        raise LookupError(text)
