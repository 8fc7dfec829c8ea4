"""
Prompt composition.

The task template normally carries ``{{TRANSCRIPT}}`` and ``{{CONTEXT}}``
placeholders.  Users edit templates by hand, so either token may be missing;
in that case the composer picks a fixed insertion point instead of dropping
the material:

* No transcript token: the transcript is wrapped in a
  ``<transcript_content>`` block which is placed ahead of the template.
* No context token: the context block goes on its own line right after the
  first ``</transcript_content>`` tag, or ahead of everything when the
  template has no transcript block at all.  Blank context inserts nothing.

Template text is scanned for tokens; the transcript and context themselves
are inserted verbatim and never scanned, so user text that happens to look
like a placeholder survives untouched.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Tuple

from .prompts import (
    CONTEXT_BLOCK,
    CONTEXT_PLACEHOLDER,
    TRANSCRIPT_CLOSE_TAG,
    TRANSCRIPT_PLACEHOLDER,
    TRANSCRIPT_WRAPPER,
)

logger = logging.getLogger(__name__)

_TOKENS = (TRANSCRIPT_PLACEHOLDER, CONTEXT_PLACEHOLDER)


@dataclass(frozen=True)
class ComposedRequest:
    """Payload handed to the generation transport."""

    instruction: str
    task: str


def build_context_block(context: str) -> str:
    """Wrap ``context`` in ``<additional_context>`` tags.

    Returns an empty string when ``context`` is blank.
    """
    context = (context or "").strip()
    if not context:
        return ""
    return CONTEXT_BLOCK.format(context=context)


def _strip_tokens(text: str, tokens: Tuple[str, ...] = _TOKENS) -> str:
    """Remove ``tokens`` from ``text``, including any the removal itself forms."""
    while any(token in text for token in tokens):
        for token in tokens:
            text = text.replace(token, "")
    return text


def _split_on_transcript(task_template: str) -> Tuple[str, str]:
    """Return the template text before and after the transcript slot."""
    if TRANSCRIPT_PLACEHOLDER in task_template:
        head, tail = task_template.split(TRANSCRIPT_PLACEHOLDER, 1)
        return head, _strip_tokens(tail, (TRANSCRIPT_PLACEHOLDER,))
    logger.info("Task template has no %s token; wrapping transcript", TRANSCRIPT_PLACEHOLDER)
    prefix, suffix = TRANSCRIPT_WRAPPER.split("{transcript}")
    return prefix, suffix + task_template


def _splice_after_close_tag(text: str, context_block: str) -> str:
    index = text.index(TRANSCRIPT_CLOSE_TAG) + len(TRANSCRIPT_CLOSE_TAG)
    return text[:index] + "\n" + context_block + "\n" + text[index:]


def _fill_first_token(text: str, context_block: str) -> str:
    before, after = text.split(CONTEXT_PLACEHOLDER, 1)
    return before + context_block + _strip_tokens(after)


def _place_context(head: str, tail: str, context_block: str) -> Tuple[str, str]:
    if not context_block:
        return _strip_tokens(head), _strip_tokens(tail)
    if CONTEXT_PLACEHOLDER in head:
        return _fill_first_token(head, context_block), _strip_tokens(tail)
    if CONTEXT_PLACEHOLDER in tail:
        return head, _fill_first_token(tail, context_block)
    if TRANSCRIPT_CLOSE_TAG in head:
        return _splice_after_close_tag(head, context_block), tail
    if TRANSCRIPT_CLOSE_TAG in tail:
        return head, _splice_after_close_tag(tail, context_block)
    return context_block + "\n\n" + head, tail


def compose(
    transcript: str,
    context: str,
    instruction_template: str,
    task_template: str,
) -> ComposedRequest:
    """Build the request for one generation run.

    Args:
        transcript: Raw transcript text.  Inserted exactly once, verbatim.
        context: Optional free-text notes.  Blank context adds nothing.
        instruction_template: System instruction, passed through unchanged.
        task_template: Task text containing the placeholder tokens.

    Returns:
        A :class:`ComposedRequest`.  The task never contains a leftover
        ``{{TRANSCRIPT}}`` or ``{{CONTEXT}}`` token from the template.
    """
    context_block = build_context_block(context)
    head, tail = _split_on_transcript(task_template)
    head, tail = _place_context(head, tail, context_block)
    return ComposedRequest(instruction=instruction_template, task=head + transcript + tail)
