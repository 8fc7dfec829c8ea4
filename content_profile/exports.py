"""
Downloadable artifacts.

Two files can be produced from a run: the raw model output (byte-identical
to the streamed text, UTF-8 encoded) and the RTF document rendered from the
parsed record.
"""

from __future__ import annotations

import datetime
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .interpreter import ParsedRecord
from .rtf_document import to_rich_text_bytes

logger = logging.getLogger(__name__)

DEFAULT_BASE_NAME = "content-profile"

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


@dataclass(frozen=True)
class Export:
    filename: str
    content_type: str
    data: bytes


def _safe_base_name(slug: Optional[str]) -> str:
    base = _UNSAFE_FILENAME_CHARS.sub("-", str(slug or "")).strip(".-")
    return base or DEFAULT_BASE_NAME


def raw_export(buffer: str, on: Optional[datetime.date] = None) -> Export:
    """Package the raw model output as ``content-profile-YYYY-MM-DD.json``."""
    on = on or datetime.date.today()
    return Export(
        filename=f"{DEFAULT_BASE_NAME}-{on.isoformat()}.json",
        content_type="application/json",
        data=buffer.encode("utf-8"),
    )


def document_export(record: ParsedRecord) -> Export:
    """Package the RTF document, named after the record's slug."""
    return Export(
        filename=f"{_safe_base_name(record.slug)}.rtf",
        content_type="application/rtf",
        data=to_rich_text_bytes(record),
    )


def write_export(export: Export, directory: Union[str, Path]) -> Path:
    """Write ``export`` into ``directory`` and return the file path."""
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / export.filename
    path.write_bytes(export.data)
    logger.info("Saved %s (%d bytes)", path, len(export.data))
    return path
