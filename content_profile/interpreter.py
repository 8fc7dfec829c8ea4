"""
Interpretation of the accumulated model output.

The model is asked for a single JSON object, but while the response is still
streaming the buffer is almost always an incomplete document.  ``interpret``
is therefore called after every fragment and only commits a new record when
the whole buffer parses.  Once the run is over a buffer that still does not
parse is reported as ``raw`` so callers can fall back to showing the text.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Optional, Union

logger = logging.getLogger(__name__)

PENDING = "pending"
PARSED = "parsed"
RAW = "raw"


@dataclass
class ParsedRecord:
    """Content profile fields returned by the model.

    Every field is optional; no schema validation is done.  Fields the model
    adds beyond these are kept in ``extra``.
    """

    title: Optional[str] = None
    slug: Optional[str] = None
    series: Optional[str] = None
    tags: Union[List[str], str, None] = None
    subhead: Optional[str] = None
    summary: Optional[str] = None
    description_html: Optional[str] = None
    keywords: Optional[str] = None
    thumbnail_concept: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ParsedRecord":
        known = {f.name for f in fields(cls)} - {"extra"}
        values = {key: value for key, value in data.items() if key in known}
        extra = {key: value for key, value in data.items() if key not in known}
        return cls(**values, extra=extra)

    def to_dict(self) -> Dict[str, Any]:
        data = {f.name: getattr(self, f.name) for f in fields(self) if f.name != "extra"}
        data.update(self.extra)
        return data

    @property
    def tags_text(self) -> str:
        """Tags as a single comma-separated string."""
        if isinstance(self.tags, list):
            return ", ".join(str(tag) for tag in self.tags if tag is not None)
        return "" if self.tags is None else str(self.tags)


@dataclass(frozen=True)
class Interpretation:
    status: str = PENDING
    record: Optional[ParsedRecord] = None

    @property
    def parsed(self) -> bool:
        return self.status == PARSED

    @property
    def raw_only(self) -> bool:
        return self.status == RAW


NOT_ATTEMPTED = Interpretation()


def parse_record(text: str) -> Optional[ParsedRecord]:
    """Parse ``text`` as a JSON object, returning ``None`` if it is not one."""
    try:
        data = json.loads(text)
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None
    return ParsedRecord.from_dict(data)


def interpret(
    buffer: str,
    streaming: bool,
    previous: Interpretation = NOT_ATTEMPTED,
) -> Interpretation:
    """Interpret the buffer after an update.

    Args:
        buffer: Everything received so far in the current run.
        streaming: ``True`` while more fragments are expected.
        previous: The last interpretation of this run.  Returned unchanged
            when the buffer does not parse yet and the run is still going.

    Returns:
        An :class:`Interpretation`.  An empty buffer is ``pending`` while the
        run is going; once it ends, an empty or unparseable buffer is ``raw``.
    """
    if not buffer:
        return NOT_ATTEMPTED if streaming else Interpretation(RAW)
    record = parse_record(buffer)
    if record is not None:
        return Interpretation(PARSED, record)
    if streaming:
        return previous
    logger.info("Model output is not a JSON object; falling back to raw view")
    return Interpretation(RAW)
