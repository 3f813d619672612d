from __future__ import annotations

import json
import logging
from pathlib import Path

from invoice_pdf.core.errors import DataError
from invoice_pdf.core.models.options import RenderOptions

logger = logging.getLogger(__name__)


def load_options(path: Path | str | None) -> RenderOptions:
    """Read render options from a JSON file; no path means defaults."""
    if path is None:
        logger.debug("No options file given, using defaults")
        return RenderOptions()
    target = Path(path)
    if not target.is_file():
        raise FileNotFoundError(f"Options file not found: {target}")
    try:
        data = json.loads(target.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise DataError(f"{target}: invalid JSON ({exc})") from exc
    if not isinstance(data, dict):
        raise DataError(f"{target}: options must be a JSON object")
    return RenderOptions.from_mapping(data)
