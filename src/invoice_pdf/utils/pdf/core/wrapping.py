from __future__ import annotations

from typing import Callable

Measure = Callable[[str], float]


def _split_long_token(token: str, max_width: float, measure: Measure) -> list[str]:
    """Break a single token wider than the column (IBAN, e-mail) into fitting chunks."""
    if measure(token) <= max_width:
        return [token]
    chunks = []
    remaining = token
    while remaining:
        lo, hi = 1, len(remaining)
        fit = 1
        while lo <= hi:
            mid = (lo + hi) // 2
            if measure(remaining[:mid]) <= max_width:
                fit = mid
                lo = mid + 1
            else:
                hi = mid - 1
        chunks.append(remaining[:fit])
        remaining = remaining[fit:]
    return chunks


def _wrap_paragraph(paragraph: str, max_width: float, measure: Measure) -> list[str]:
    words: list[str] = []
    for word in paragraph.split():
        words.extend(_split_long_token(word, max_width, measure))

    lines: list[str] = []
    current = ""
    for word in words:
        candidate = f"{current} {word}" if current else word
        if measure(candidate) <= max_width:
            current = candidate
        else:
            if current:
                lines.append(current)
            current = word
    if current:
        lines.append(current)
    return lines or [""]


def wrap_text(text, max_width: float | None, measure: Measure) -> list[str]:
    """
    Split text into drawable lines. Explicit newlines always break; words wrap
    at max_width when given. Never returns an empty list.
    """
    paragraphs = str("" if text is None else text).split("\n")
    if not max_width or max_width <= 0:
        return paragraphs
    lines: list[str] = []
    for paragraph in paragraphs:
        lines.extend(_wrap_paragraph(paragraph, max_width, measure))
    return lines
