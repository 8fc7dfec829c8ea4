"""
Gemini text-generation transport.

Wraps the ``google-generativeai`` client.  The composed instruction is sent
as the system instruction, the task as the content, and the response is
requested as JSON and streamed back chunk by chunk.
"""

from __future__ import annotations

import logging
from typing import Iterator, Optional

import google.generativeai as genai

from .config import Settings
from .errors import TransportError
from .prompt_composer import ComposedRequest

logger = logging.getLogger(__name__)

GENERATION_CONFIG = {"response_mime_type": "application/json"}


def _chunk_text(chunk) -> str:
    """Return the text carried by one streamed chunk ("" if none).

    Raises:
        TransportError: If the model refused the prompt.
    """
    if not chunk.candidates:
        block_reason = getattr(chunk.prompt_feedback, "block_reason", None)
        if block_reason:
            logger.warning("Generative model blocked the prompt: %s", block_reason)
            raise TransportError(f"The model blocked the prompt ({block_reason}).")
        return ""
    parts = chunk.candidates[0].content.parts
    return "".join(part.text for part in parts if part.text)


class GeminiTransport:
    """Streams fragments for a :class:`ComposedRequest` from Gemini."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or Settings.from_env()

    @property
    def model_name(self) -> str:
        return self.settings.model_name

    def check_configuration(self) -> None:
        """Raise :class:`ConfigurationError` if no usable API key is set."""
        genai.configure(api_key=self.settings.require_api_key())

    def generate(self, request: ComposedRequest) -> Iterator[str]:
        logger.info("Calling generative model %s for content profile", self.model_name)
        model = genai.GenerativeModel(
            self.model_name,
            system_instruction=request.instruction or None,
        )
        response = model.generate_content(
            request.task,
            generation_config=GENERATION_CONFIG,
            stream=True,
        )
        for chunk in response:
            text = _chunk_text(chunk)
            if text:
                yield text
