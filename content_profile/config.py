"""
Runtime configuration.

Settings come from environment variables, matching the way the Cloud
Function deployment is configured:

* ``GENAI_API_KEY`` – API key for the generative model.  Required.
* ``GENAI_MODEL`` – Model name (default: ``gemini-3-flash-preview``).
* ``SYSTEM_PROMPT`` – Optional override for the instruction template.
* ``USER_PROMPT`` – Optional override for the task template.
* ``PORT`` – Port for the HTTP app (default: 8080).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .errors import ConfigurationError
from .prompts import DEFAULT_SYSTEM_PROMPT, DEFAULT_USER_PROMPT

DEFAULT_MODEL = "gemini-3-flash-preview"
DEFAULT_PORT = 8080

# Value shipped in the sample .env; treated the same as a missing key.
PLACEHOLDER_KEY_MARKER = "PASTE_YOUR_"

MISSING_KEY_MESSAGE = (
    "API Key is missing. If you are running locally, check your .env file. "
    "If you are deployed, check your Environment Variables configuration."
)


@dataclass(frozen=True)
class Settings:
    api_key: Optional[str] = None
    model_name: str = DEFAULT_MODEL
    system_prompt: str = DEFAULT_SYSTEM_PROMPT
    user_prompt: str = DEFAULT_USER_PROMPT
    port: int = DEFAULT_PORT

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from ``environ`` (defaults to ``os.environ``)."""
        env = os.environ if environ is None else environ
        return cls(
            api_key=env.get("GENAI_API_KEY"),
            model_name=env.get("GENAI_MODEL") or DEFAULT_MODEL,
            system_prompt=env.get("SYSTEM_PROMPT") or DEFAULT_SYSTEM_PROMPT,
            user_prompt=env.get("USER_PROMPT") or DEFAULT_USER_PROMPT,
            port=int(env.get("PORT", DEFAULT_PORT)),
        )

    def require_api_key(self) -> str:
        """Return the API key or raise :class:`ConfigurationError`.

        A blank key, or one still containing the ``PASTE_YOUR_`` marker from
        the sample environment file, counts as missing.
        """
        key = (self.api_key or "").strip()
        if not key or PLACEHOLDER_KEY_MARKER in key:
            raise ConfigurationError(MISSING_KEY_MESSAGE)
        return key
