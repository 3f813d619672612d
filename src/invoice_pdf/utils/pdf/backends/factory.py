from __future__ import annotations

from invoice_pdf.core.models.options import RenderOptions
from invoice_pdf.utils.pdf.backends.base import RenderBackend
from invoice_pdf.utils.pdf.backends.plain import PlainPdfBackend
from invoice_pdf.utils.pdf.backends.reportlab_backend import ReportLabBackend
from invoice_pdf.utils.pdf.core.fonts import register_fonts

BACKENDS = ("reportlab", "plain")


def create_backend(name: str, sink, options: RenderOptions | None = None) -> RenderBackend:
    """Build a backend by name; sink is a path or a writable binary stream."""
    options = options or RenderOptions()
    key = (name or "reportlab").strip().lower()
    if key == "reportlab":
        return ReportLabBackend(sink, fonts=register_fonts(options.font_dir))
    if key == "plain":
        return PlainPdfBackend(sink)
    raise ValueError(f"Unknown backend {name!r}; expected one of: {', '.join(BACKENDS)}")
