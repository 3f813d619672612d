"""
PDF object builder: assembles page content streams into a minimal PDF byte output
using the built-in Type1 Helvetica pair (/F1 regular, /F2 bold).
"""

from __future__ import annotations

import re
import unicodedata
from typing import List, Mapping


# Letters NFKD does not decompose into a base letter plus a mark
_ASCII_FOLDS = str.maketrans({"ł": "l", "Ł": "L", "đ": "d", "Đ": "D", "ø": "o", "Ø": "O", "ß": "ss"})


def normalize_ascii(text: str) -> str:
    """Remove diacritics to stay compatible with built-in PDF Type1 fonts."""
    normalized = unicodedata.normalize("NFKD", str(text).translate(_ASCII_FOLDS))
    return normalized.encode("ascii", "ignore").decode("ascii")


def escape_pdf_text(text: str) -> str:
    ascii_text = normalize_ascii(text)
    return ascii_text.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")


def _info_key(key: str) -> str:
    cleaned = re.sub(r"[^A-Za-z0-9]", "", str(key))
    return cleaned[:1].upper() + cleaned[1:]


def build_pdf_bytes(
    content_streams: List[str],
    page_size=(595, 842),
    info: Mapping[str, str] | None = None,
) -> bytes:
    """
    Given list of page content streams (str), return ready-to-write PDF bytes.
    """
    streams_bytes = [s.encode("ascii", "ignore") for s in content_streams]

    font_objs = [
        b"3 0 obj << /Type /Font /Subtype /Type1 /BaseFont /Helvetica >> endobj\n",
        b"4 0 obj << /Type /Font /Subtype /Type1 /BaseFont /Helvetica-Bold >> endobj\n",
    ]
    next_obj_id = 5
    page_objs: list[bytes] = []
    pages_kids: list[int] = []

    width, height = (f"{page_size[0]:g}", f"{page_size[1]:g}")
    for stream in streams_bytes:
        content_id = next_obj_id
        page_id = next_obj_id + 1
        pages_kids.append(page_id)
        page_objs.append(
            f"{content_id} 0 obj << /Length {len(stream)} >> stream\n".encode("ascii") + stream + b"\nendstream endobj\n"
        )
        page_objs.append(
            f"{page_id} 0 obj << /Type /Page /Parent 2 0 R /MediaBox [0 0 {width} {height}] /Contents {content_id} 0 R /Resources << /Font << /F1 3 0 R /F2 4 0 R >> >> >> endobj\n".encode(
                "ascii"
            )
        )
        next_obj_id += 2

    info_objs: list[bytes] = []
    info_ref = ""
    entries = {_info_key(k): v for k, v in (info or {}).items() if _info_key(k)}
    if entries:
        body = " ".join(f"/{key} ({escape_pdf_text(value)})" for key, value in entries.items())
        info_objs.append(f"{next_obj_id} 0 obj << {body} >> endobj\n".encode("ascii"))
        info_ref = f" /Info {next_obj_id} 0 R"

    kids_ref = " ".join(f"{kid} 0 R" for kid in pages_kids)
    pages_obj = f"2 0 obj << /Type /Pages /Count {len(pages_kids)} /Kids [{kids_ref}] >> endobj\n".encode("ascii")
    catalog_obj = b"1 0 obj << /Type /Catalog /Pages 2 0 R >> endobj\n"

    objs = [catalog_obj, pages_obj] + font_objs + page_objs + info_objs

    header = b"%PDF-1.4\n"
    offsets = [0]
    pdf_body = bytearray()
    current_offset = len(header)
    for obj in objs:
        offsets.append(current_offset)
        pdf_body += obj
        current_offset += len(obj)

    xref_entries = ["0000000000 65535 f \n"] + [_format_xref_entry(off) for off in offsets[1:]]
    xref = ("xref\n0 %d\n" % len(offsets)).encode("ascii") + "".join(xref_entries).encode("ascii")
    startxref = len(header) + len(pdf_body)
    trailer = f"trailer << /Size {len(offsets)} /Root 1 0 R{info_ref} >>\nstartxref\n{startxref}\n%%EOF\n".encode("ascii")

    return header + bytes(pdf_body) + xref + trailer


def _format_xref_entry(offset: int) -> str:
    return f"{offset:010d} 00000 n \n"
