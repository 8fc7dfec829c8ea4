"""Exceptions raised by the content profile pipeline."""


DEFAULT_TRANSPORT_MESSAGE = "Failed to generate document. Check API Key and Quota."


class ContentProfileError(Exception):
    """Base class for all pipeline errors."""


class ConfigurationError(ContentProfileError):
    """The generation service is not configured (missing or placeholder key)."""


class TransportError(ContentProfileError):
    """The generation service failed while a run was in progress."""

    def __init__(self, message: str = ""):
        super().__init__(message or DEFAULT_TRANSPORT_MESSAGE)


class RunInProgressError(ContentProfileError):
    """A new run was started before the previous one terminated."""


class EmptyTranscriptError(ContentProfileError):
    """No transcript text was supplied."""

    def __init__(self, message: str = "Please provide a transcript before processing."):
        super().__init__(message)


class EmptyOutputError(ContentProfileError):
    """The run ended without the model producing any text."""

    def __init__(self, message: str = "The model returned no output."):
        super().__init__(message)
