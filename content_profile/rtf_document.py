"""
RTF rendering of a content profile.

Plain fields are escaped for RTF: braces and backslashes first, then line
breaks become ``\\par``, then every non-ASCII character becomes a ``\\uN?``
escape.  The HTML description is limited to what the model is asked to
produce (paragraphs, line breaks, bold and italic).  Those tags map to RTF
control words, anything else is dropped, and the text between tags is
decoded and escaped on its own so the inserted control words are never
escaped a second time.  No attempt is made to validate nesting.
"""

from __future__ import annotations

import re
from typing import Any, Mapping, Optional, Union

from .interpreter import ParsedRecord

_RTF_SPECIAL = re.compile(r"[{}\\]")
_NON_ASCII = re.compile(r"[^\x00-\x7f]")
_HTML_TAG = re.compile(r"<[^>]+>")
_HTML_ENTITY = re.compile(r"&(nbsp|amp|lt|gt|quot);")

_ENTITIES = {"nbsp": " ", "amp": "&", "lt": "<", "gt": ">", "quot": '"'}

_TAG_CONTROLS = [
    (re.compile(r"<(?:strong|b)(?:\s[^>]*)?>", re.IGNORECASE), "\\b "),
    (re.compile(r"</(?:strong|b)\s*>", re.IGNORECASE), "\\b0 "),
    (re.compile(r"<(?:em|i)(?:\s[^>]*)?>", re.IGNORECASE), "\\i "),
    (re.compile(r"</(?:em|i)\s*>", re.IGNORECASE), "\\i0 "),
    (re.compile(r"<p(?:\s[^>]*)?>", re.IGNORECASE), ""),
    (re.compile(r"</p\s*>", re.IGNORECASE), "\\par\\par "),
    (re.compile(r"<br\s*/?>", re.IGNORECASE), "\\line "),
]

PREAMBLE = (
    r"{\rtf1\ansi\deff0" "\n"
    r"{\fonttbl{\f0\fswiss\fcharset0 Helvetica;}{\f1\fswiss\fcharset0 Courier New;}}" "\n"
    r"{\colortbl;\red0\green0\blue0;\red100\green100\blue100;\red79\green70\blue229;}" "\n"
)

RecordLike = Union[ParsedRecord, Mapping[str, Any]]


def _unicode_escape(match: "re.Match[str]") -> str:
    # RTF \u takes a signed 16-bit value; astral characters need a surrogate pair.
    data = match.group(0).encode("utf-16-le")
    units = (int.from_bytes(data[i:i + 2], "little") for i in range(0, len(data), 2))
    return "".join(
        "\\u%d?" % (unit - 0x10000 if unit > 0x7FFF else unit) for unit in units
    )


def escape_rtf(text: Optional[str]) -> str:
    """Escape plain text for inclusion in an RTF document."""
    if not text:
        return ""
    escaped = _RTF_SPECIAL.sub(lambda m: "\\" + m.group(0), text)
    escaped = escaped.replace("\r\n", "\n").replace("\r", "\n").replace("\n", "\\par ")
    return _NON_ASCII.sub(_unicode_escape, escaped)


def decode_entities(text: str) -> str:
    """Decode the five common named HTML entities in a single pass."""
    return _HTML_ENTITY.sub(lambda m: _ENTITIES[m.group(1)], text)


def _tag_to_control(tag: str) -> str:
    for pattern, control in _TAG_CONTROLS:
        if pattern.fullmatch(tag):
            return control
    return ""


def _text_run(text: str) -> str:
    return escape_rtf(decode_entities(text))


def html_to_rtf(html: Optional[str]) -> str:
    """Convert the description HTML subset to RTF."""
    if not html:
        return ""
    pieces = []
    position = 0
    for match in _HTML_TAG.finditer(html):
        pieces.append(_text_run(html[position:match.start()]))
        pieces.append(_tag_to_control(match.group(0)))
        position = match.end()
    pieces.append(_text_run(html[position:]))
    return "".join(pieces)


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, list):
        return ", ".join(str(item) for item in value if item is not None)
    return str(value)


def _field(record: ParsedRecord, name: str) -> str:
    return escape_rtf(_text(getattr(record, name)))


def to_rich_text(record: Optional[RecordLike]) -> str:
    """Render ``record`` as a complete RTF document.

    Missing fields render as empty text, never as placeholder words.

    Raises:
        ValueError: If there is no record at all.
    """
    if record is None:
        raise ValueError("No structured record to render")
    if not isinstance(record, ParsedRecord):
        record = ParsedRecord.from_dict(dict(record))

    series_line = " - ".join(
        part for part in (_field(record, "series"), _field(record, "subhead")) if part
    )
    lines = [
        r"\viewkind4\uc1\pard\sa200\sl276\slmult1\f0\fs36\b " + _field(record, "title") + r"\b0\par",
        r"\fs24\cf2 " + series_line + r"\cf0\par",
        r"\fs20\i " + escape_rtf(record.tags_text) + r"\i0\par",
        r"\par",
        r"\fs24\b\cf3 SUMMARY\cf0\b0\par",
        _field(record, "summary") + r"\par",
        r"\par",
        r"\b\cf3 DESCRIPTION\cf0\b0\par",
        "{" + html_to_rtf(_text(record.description_html)) + r"}\par",
        r"\pard\sa200\sl276\slmult1\cf2\fs20\b METADATA\b0\par",
        r"\b Slug:\b0  \f1 " + _field(record, "slug") + r"\f0\par",
        r"\b Keywords:\b0  " + _field(record, "keywords") + r"\par",
        r"\b Thumbnail:\b0  " + _field(record, "thumbnail_concept") + r"\par",
        "}",
    ]
    return PREAMBLE + "\n".join(lines)


def to_rich_text_bytes(record: Optional[RecordLike]) -> bytes:
    """Render ``record`` and encode it for download."""
    return to_rich_text(record).encode("ascii")
