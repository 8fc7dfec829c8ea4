"""
Orchestration layer for content profile generation.

:class:`ContentProfiler` ties the steps together for the HTTP and CLI
entrypoints:

1. Compose the request from the transcript, context and templates.
2. Stream the model output, forwarding every fragment to the caller.
3. Re-interpret the accumulated text after each fragment, then once more
   when the run has ended.
4. Offer the raw text and the RTF document as downloadable exports.

Configuration and transport errors are reported on the returned
:class:`GenerationResult` rather than raised, with any text received before
the failure kept in place.  A run that ends without any output is reported
as an error too.
"""

from __future__ import annotations

import datetime
import logging
from dataclasses import dataclass
from typing import Callable, Optional

from . import exports
from .config import Settings
from .errors import (
    ConfigurationError,
    EmptyOutputError,
    EmptyTranscriptError,
    TransportError,
)
from .gemini_transport import GeminiTransport
from .interpreter import NOT_ATTEMPTED, Interpretation, ParsedRecord, interpret
from .prompt_composer import ComposedRequest, compose
from .stream_aggregator import StreamAggregator, Transport

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    raw: str = ""
    interpretation: Interpretation = NOT_ATTEMPTED
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def record(self) -> Optional[ParsedRecord]:
        return self.interpretation.record

    def raw_export(self, on: Optional[datetime.date] = None) -> exports.Export:
        return exports.raw_export(self.raw, on)

    def document_export(self) -> Optional[exports.Export]:
        """The RTF export, or ``None`` when no record was parsed."""
        if self.record is None:
            return None
        return exports.document_export(self.record)


class ContentProfiler:
    """Runs the compose → stream → interpret pipeline, one run at a time."""

    def __init__(self, transport: Optional[Transport] = None, settings: Optional[Settings] = None):
        self.settings = settings or Settings.from_env()
        self.transport = transport or GeminiTransport(self.settings)
        self.aggregator = StreamAggregator(self.transport)

    def compose(
        self,
        transcript: str,
        context: str = "",
        system_prompt: Optional[str] = None,
        user_prompt: Optional[str] = None,
    ) -> ComposedRequest:
        """Compose a request, using the configured templates by default."""
        return compose(
            transcript,
            context,
            self.settings.system_prompt if system_prompt is None else system_prompt,
            self.settings.user_prompt if user_prompt is None else user_prompt,
        )

    def generate(
        self,
        transcript: str,
        context: str = "",
        system_prompt: Optional[str] = None,
        user_prompt: Optional[str] = None,
        on_fragment: Optional[Callable[[str], None]] = None,
        on_update: Optional[Callable[[Interpretation], None]] = None,
    ) -> GenerationResult:
        """Generate a content profile for ``transcript``.

        Args:
            transcript: Raw transcript text.  Blank input is rejected without
                contacting the model.
            context: Optional notes placed next to the transcript.
            system_prompt: Instruction template override.
            user_prompt: Task template override.
            on_fragment: Called with each fragment as it arrives.
            on_update: Called with the interpretation after each fragment.

        Returns:
            A :class:`GenerationResult` holding the raw text, the final
            interpretation and the error message, if any.
        """
        result = GenerationResult()
        if not (transcript or "").strip():
            result.error = str(EmptyTranscriptError())
            return result

        request = self.compose(transcript, context, system_prompt, user_prompt)

        def sink(fragment: str) -> None:
            result.raw = self.aggregator.buffer
            if on_fragment is not None:
                on_fragment(fragment)
            result.interpretation = interpret(result.raw, True, result.interpretation)
            if on_update is not None:
                on_update(result.interpretation)

        try:
            self.aggregator.run(request, sink)
        except (ConfigurationError, TransportError) as exc:
            logger.error("Generation run failed: %s", exc)
            result.error = str(exc)

        result.raw = self.aggregator.buffer
        if result.ok and not result.raw:
            logger.warning("Generation run finished without any output")
            result.error = str(EmptyOutputError())
        result.interpretation = interpret(result.raw, False, result.interpretation)
        logger.info(
            "Generation run finished: %d characters, status=%s",
            len(result.raw),
            result.interpretation.status,
        )
        return result
