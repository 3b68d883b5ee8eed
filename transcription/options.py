"""Normalization of raw form fields into transcription options."""

import logging
from dataclasses import dataclass
from typing import Any, Mapping

from .base import CAPTION_FORMATS

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("text", "json") + CAPTION_FORMATS

DEFAULT_MODEL = "nova-3"
DEFAULT_LANGUAGE = "auto"
DEFAULT_OUTPUT_FORMAT = "text"


@dataclass(frozen=True)
class TranscriptionOptions:
    model: str = DEFAULT_MODEL
    smart_format: bool = True
    language: str = DEFAULT_LANGUAGE
    utterances: bool = True
    output_format: str = DEFAULT_OUTPUT_FORMAT

    @property
    def detect_language(self) -> bool:
        return self.language == "auto"


def _as_bool(value: Any) -> bool:
    # Only the exact string "false" disables a flag
    return value != "false"


def _as_str(value: Any, default: str) -> str:
    # Missing or empty values take the default; anything else passes through
    if value is None or value == "":
        return default
    return str(value)


def normalize_options(fields: Mapping[str, Any]) -> TranscriptionOptions:
    """
    Build TranscriptionOptions from raw form fields.

    Args:
        fields: Form fields; values may be missing or booleans-as-strings

    Returns:
        TranscriptionOptions with defaults applied
    """
    output_format = _as_str(fields.get("output_format"), DEFAULT_OUTPUT_FORMAT)
    if output_format not in OUTPUT_FORMATS:
        logger.warning("Unknown output_format=%r; defaulting to %s", output_format, DEFAULT_OUTPUT_FORMAT)
        output_format = DEFAULT_OUTPUT_FORMAT

    return TranscriptionOptions(
        model=_as_str(fields.get("model"), DEFAULT_MODEL),
        smart_format=_as_bool(fields.get("smart_format")),
        language=_as_str(fields.get("language"), DEFAULT_LANGUAGE),
        utterances=_as_bool(fields.get("utterances")),
        output_format=output_format,
    )
