import pytest

from invoice_pdf.utils.pdf.core.drawing import Cell, font_state, horizontal_line, write_bilingual_label, write_cell, write_row
from invoice_pdf.utils.pdf.core.layout_common import BASE_FONT_SIZE, BOLD, LABEL_FONT_SIZE, LABEL_GAP, REGULAR, line_height
from invoice_pdf.utils.pdf.core.wrapping import wrap_text

LONG_TEXT = "Projekt i wdrożenie modułu fakturowania wraz z dokumentacją techniczną oraz szkoleniem"

ROW_TEXTS = ["1", LONG_TEXT, "2", "100.00", "200.00", "23 %", "46.00", "246.00"]


def test_write_cell_returns_wrapped_height(backend):
    height = write_cell(backend, LONG_TEXT, 30, 100, width=150, align="left")
    lines = backend.wrap(LONG_TEXT, 150)

    assert len(lines) > 1
    assert height == pytest.approx(len(lines) * line_height(BASE_FONT_SIZE))
    assert [t.text for t in backend.texts] == lines
    assert [t.y for t in backend.texts] == pytest.approx([100 + i * line_height(BASE_FONT_SIZE) for i in range(len(lines))])


def test_write_cell_empty_text_measures_one_line(backend):
    assert write_cell(backend, "", 30, 100) == pytest.approx(line_height(BASE_FONT_SIZE))
    assert backend.texts == []


def test_write_cell_bold_restores_font(backend):
    write_cell(backend, "Razem", 30, 100, bold=True)
    assert backend.texts[0].font == BOLD
    assert backend.current_font == REGULAR


@pytest.mark.parametrize("count", range(1, 9))
def test_write_row_advances_by_tallest_cell(backend, count):
    cells = [Cell(text, width=60 if i != 1 else 150) for i, text in enumerate(ROW_TEXTS[:count])]

    end = write_row(backend, 200, 30, cells)

    expected = max(backend.height_of_string(c.text, width=c.width) for c in cells)
    assert end == pytest.approx(200 + expected)


def test_write_row_places_cells_at_successive_offsets(backend):
    cells = [Cell("a", width=20, align="left"), Cell("b", align="left"), Cell("c", width=40, align="left")]
    write_row(backend, 10, 30, cells)
    assert [t.x for t in backend.texts] == [30, 50, 110]
    assert {t.y for t in backend.texts} == {10}


def test_write_row_default_alignment_is_center(backend):
    write_row(backend, 10, 0, [Cell("ab")])
    call = backend.texts[0]
    assert call.x == pytest.approx((60 - backend.width_of_string("ab")) / 2)


def test_write_row_single_right_aligned_cell(backend):
    end = write_row(backend, 10, 30, [Cell("Total", width=100, align="right")])
    assert backend.texts[0].x == pytest.approx(30 + 100 - backend.width_of_string("Total"))
    assert end == pytest.approx(10 + line_height(BASE_FONT_SIZE))


def test_horizontal_line_keeps_position(backend):
    assert horizontal_line(backend, 120.5, 30, 530) == 120.5
    line = backend.lines[0]
    assert (line.x1, line.y1, line.x2, line.y2) == (30, 120.5, 560, 120.5)


def test_bilingual_label_stacks_caption_over_value(backend):
    end = write_bilingual_label(backend, 30, 100, "Currency", "Waluta: PLN")

    caption, value = backend.texts
    assert (caption.text, caption.size, caption.font) == ("Currency", LABEL_FONT_SIZE, REGULAR)
    assert (value.text, value.size, value.font) == ("Waluta: PLN", BASE_FONT_SIZE, BOLD)
    assert value.y == pytest.approx(100 + line_height(LABEL_FONT_SIZE))
    assert end == pytest.approx(100 + line_height(LABEL_FONT_SIZE) + line_height(BASE_FONT_SIZE) + LABEL_GAP)
    assert (backend.current_font, backend.current_size) == (REGULAR, BASE_FONT_SIZE)


def test_bilingual_label_inline_value(backend):
    write_bilingual_label(backend, 310, 50, "Issue date", "Data wystawienia:", line_break=False, inline_value="2024-01-15")

    value = backend.find("Data wystawienia:")
    date_call = backend.find("2024-01-15")
    with font_state(backend, BOLD):
        label_width = backend.width_of_string("Data wystawienia:")
    assert date_call.y == value.y
    assert date_call.font == REGULAR
    assert date_call.x == pytest.approx(310 + label_width + 5)


def test_font_state_restores_after_error(backend):
    with pytest.raises(RuntimeError):
        with font_state(backend, BOLD, 14):
            raise RuntimeError("boom")
    assert (backend.current_font, backend.current_size) == (REGULAR, BASE_FONT_SIZE)


def test_wrap_text_keeps_explicit_newlines():
    measure = len
    assert wrap_text("a\n\nb", 10, measure) == ["a", "", "b"]
    assert wrap_text("", 10, measure) == [""]
    assert wrap_text("alpha beta gamma", 10, measure) == ["alpha beta", "gamma"]
    assert wrap_text("abcdefghijkl", 5, measure) == ["abcde", "fghij", "kl"]
    assert wrap_text("no wrap at all", None, measure) == ["no wrap at all"]
