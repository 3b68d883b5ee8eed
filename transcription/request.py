"""Mapping from transcription options to provider query parameters."""

from .base import CAPTION_FORMATS
from .options import TranscriptionOptions


def _flag(value: bool) -> str:
    return "true" if value else "false"


def build_params(options: TranscriptionOptions) -> dict[str, str]:
    """Build the /v1/listen query parameters for the given options."""
    params = {
        "model": options.model,
        "smart_format": _flag(options.smart_format),
        "utterances": _flag(options.utterances),
    }

    if options.detect_language:
        params["detect_language"] = "true"
    else:
        params["language"] = options.language

    # Caption formats are rendered by the provider
    if options.output_format in CAPTION_FORMATS:
        params["format"] = options.output_format

    return params
