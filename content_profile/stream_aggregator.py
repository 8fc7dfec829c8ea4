"""
Streaming aggregation.

A :class:`StreamAggregator` drives one generation run at a time.  Fragments
are appended to :attr:`StreamAggregator.buffer` in arrival order and handed
to the caller unchanged, one at a time; the next fragment is not requested
until the caller has dealt with the current one.

The buffer is cleared when a run starts.  Configuration problems are raised
before the first fragment is requested.  Failures after that surface as
:class:`TransportError`, leaving whatever was already buffered in place.
"""

from __future__ import annotations

import logging
from contextlib import closing
from typing import Callable, Iterable, Iterator, Protocol

from .errors import ContentProfileError, RunInProgressError, TransportError
from .prompt_composer import ComposedRequest

logger = logging.getLogger(__name__)


class Transport(Protocol):
    def check_configuration(self) -> None:
        ...

    def generate(self, request: ComposedRequest) -> Iterable[str]:
        ...


class StreamAggregator:
    """Accumulates the fragments of a single generation run."""

    def __init__(self, transport: Transport):
        self.transport = transport
        self.buffer = ""
        self._active = False

    @property
    def active(self) -> bool:
        return self._active

    def stream(self, request: ComposedRequest) -> Iterator[str]:
        """Start a run and return an iterator over its fragments.

        Raises:
            RunInProgressError: If a previous run has not terminated.
            ConfigurationError: If the transport is not configured.
        """
        if self._active:
            raise RunInProgressError("A generation run is already in progress.")
        self.buffer = ""
        self.transport.check_configuration()
        return self._drain(request)

    def _drain(self, request: ComposedRequest) -> Iterator[str]:
        if self._active:
            raise RunInProgressError("A generation run is already in progress.")
        self._active = True
        try:
            for fragment in self.transport.generate(request):
                self.buffer += fragment
                yield fragment
        except ContentProfileError:
            raise
        except Exception as exc:
            logger.exception("Generation failed after %d characters", len(self.buffer))
            raise TransportError(str(exc)) from exc
        finally:
            self._active = False

    def run(self, request: ComposedRequest, on_fragment: Callable[[str], None]) -> str:
        """Run to completion, passing each fragment to ``on_fragment``.

        Returns:
            The final buffer, equal to the concatenation of all fragments.
        """
        fragments = self.stream(request)
        with closing(fragments):
            for fragment in fragments:
                on_fragment(fragment)
        return self.buffer
