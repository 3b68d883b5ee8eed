"""Error kinds raised while handling a transcription request."""

from typing import Any


class TranscriptionError(Exception):
    """Base class for transcription request failures."""

    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.message = message
        self.details = details


class ValidationError(TranscriptionError):
    """The upload or request body was rejected before reaching the provider."""
    pass


class UploadError(TranscriptionError):
    """The upload could not be stored or delivered to the provider."""
    pass


class ExtractionError(TranscriptionError):
    """The provider response did not have the expected shape."""
    pass


class ProviderError(TranscriptionError):
    """The provider answered with a non-2xx status."""

    def __init__(self, message: str, status_code: int, details: Any = None):
        super().__init__(message, details)
        self.status_code = status_code
