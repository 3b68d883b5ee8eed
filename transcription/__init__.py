"""Format-aware translation between upload options, Deepgram and results."""

import os
from .base import (
    CaptionResult,
    JsonResult,
    TextResult,
    TranscriptionResult,
    Utterance,
    UtterancesResult,
    result_from_dict,
    result_to_dict,
)
from .deepgram import DeepgramProvider
from .errors import (
    ExtractionError,
    ProviderError,
    TranscriptionError,
    UploadError,
    ValidationError,
)
from .options import TranscriptionOptions, normalize_options
from .request import build_params
from .response import translate_response


__all__ = [
    "CaptionResult",
    "DeepgramProvider",
    "ExtractionError",
    "JsonResult",
    "ProviderError",
    "TextResult",
    "TranscriptionError",
    "TranscriptionOptions",
    "TranscriptionResult",
    "UploadError",
    "Utterance",
    "UtterancesResult",
    "ValidationError",
    "build_params",
    "get_client",
    "normalize_options",
    "result_from_dict",
    "result_to_dict",
    "translate_response",
]


def get_client() -> DeepgramProvider:
    """
    Get a Deepgram client configured from the environment.

    Raises:
        ValueError: If DEEPGRAM_API_KEY is missing
    """
    api_key = os.getenv("DEEPGRAM_API_KEY", "").strip()
    if not api_key:
        raise ValueError("DEEPGRAM_API_KEY is required for Deepgram provider")
    return DeepgramProvider(api_key=api_key)
