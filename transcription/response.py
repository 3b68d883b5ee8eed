"""Translation of provider responses into transcription results."""

import logging
from typing import Any

from .base import (
    CAPTION_FORMATS,
    CaptionResult,
    JsonResult,
    TextResult,
    TranscriptionResult,
    Utterance,
    UtterancesResult,
)
from .errors import ExtractionError
from .options import TranscriptionOptions

logger = logging.getLogger(__name__)


def _first(items: Any) -> Any:
    if isinstance(items, list) and items:
        return items[0]
    return None


def _paragraph_to_utterance(paragraph: Any) -> Utterance:
    if not isinstance(paragraph, dict):
        raise ExtractionError(f"Invalid paragraph in response: {paragraph!r}")
    sentences = paragraph.get("sentences") or []
    if not isinstance(sentences, list) or not all(isinstance(s, dict) for s in sentences):
        raise ExtractionError("Invalid sentences in response paragraph")
    return Utterance(
        speaker=paragraph.get("speaker") or 0,
        start=paragraph.get("start", 0.0),
        end=paragraph.get("end", 0.0),
        text=" ".join(str(s.get("text", "")) for s in sentences),
    )


def translate_response(payload: Any, options: TranscriptionOptions) -> TranscriptionResult:
    """
    Normalize a provider response into one result variant.

    Args:
        payload: Parsed JSON body, or the raw body text for caption formats
        options: Options the request was made with

    Returns:
        The result variant selected by options.output_format

    Raises:
        ExtractionError: If no transcript can be located on the text path
    """
    if options.output_format == "json":
        return JsonResult(content=payload)

    if options.output_format in CAPTION_FORMATS:
        return CaptionResult(format=options.output_format, content=payload)

    results = payload.get("results") if isinstance(payload, dict) else None
    channel = _first(results.get("channels")) if isinstance(results, dict) else None
    if not isinstance(channel, dict):
        raise ExtractionError("Invalid response format from provider")

    alternative = _first(channel.get("alternatives"))
    if not isinstance(alternative, dict):
        alternative = {}

    if options.utterances:
        paragraphs = alternative.get("paragraphs")
        entries = paragraphs.get("paragraphs") if isinstance(paragraphs, dict) else None
        if isinstance(entries, list) and entries:
            return UtterancesResult(
                content=[_paragraph_to_utterance(p) for p in entries]
            )
        logger.debug("utterances requested but no paragraph data; falling back to transcript")

    transcript = alternative.get("transcript")
    if isinstance(transcript, str) and transcript:
        return TextResult(content=transcript)

    raise ExtractionError("Unable to extract transcript from response")
