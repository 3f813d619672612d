from __future__ import annotations

from invoice_pdf.core.models.options import FooterOptions
from invoice_pdf.utils.pdf.backends.base import RenderBackend
from invoice_pdf.utils.pdf.core.drawing import font_state
from invoice_pdf.utils.pdf.core.layout_common import BASE_FONT_SIZE, REGULAR


def render_footer(backend: RenderBackend, position: float, footer: FooterOptions | None) -> float:
    """Bottom-anchored: the last footer line sits on the bottom margin."""
    if footer is None or not footer.text:
        return position
    left = backend.margins.left
    width = backend.content_width
    with font_state(backend, REGULAR, BASE_FONT_SIZE):
        height = backend.height_of_string(footer.text, width=width)
        top = backend.max_y - height
        backend.text(footer.text, left, top, width=width, align=footer.align)
    return max(position, top + height)
