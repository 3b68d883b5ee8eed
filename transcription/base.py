"""Result types produced by the transcription translator."""

import math
from dataclasses import dataclass, field
from typing import Any, ClassVar

from .errors import ValidationError

CAPTION_FORMATS = ("webvtt", "srt")


@dataclass
class Utterance:
    """A speaker-attributed, time-bounded span of speech."""
    speaker: int
    start: float
    end: float
    text: str


@dataclass
class TextResult:
    content: str
    type: ClassVar[str] = "text"


@dataclass
class UtterancesResult:
    content: list[Utterance] = field(default_factory=list)
    type: ClassVar[str] = "utterances"


@dataclass
class JsonResult:
    """Raw provider payload, passed through unmodified."""
    content: Any
    type: ClassVar[str] = "json"


@dataclass
class CaptionResult:
    format: str
    content: str
    type: ClassVar[str] = "caption"


TranscriptionResult = TextResult | UtterancesResult | JsonResult | CaptionResult


def result_to_dict(result: TranscriptionResult) -> dict[str, Any]:
    """Serialize a result into its tagged wire shape."""
    if isinstance(result, UtterancesResult):
        content = [
            {"speaker": u.speaker, "start": u.start, "end": u.end, "text": u.text}
            for u in result.content
        ]
        return {"type": result.type, "content": content}
    if isinstance(result, CaptionResult):
        return {"type": result.type, "format": result.format, "content": result.content}
    return {"type": result.type, "content": result.content}


def result_from_dict(data: Any) -> TranscriptionResult:
    """
    Rebuild a result from its wire shape.

    Raises:
        ValidationError: If the payload is not a known result variant
    """
    if not isinstance(data, dict) or "content" not in data:
        raise ValidationError("Result must be an object with a content field")

    kind = data.get("type")
    content = data["content"]

    if kind == "json":
        return JsonResult(content=content)
    if kind == "text":
        if not isinstance(content, str):
            raise ValidationError("Text result content must be a string")
        return TextResult(content=content)
    if kind == "caption":
        fmt = data.get("format")
        if fmt not in CAPTION_FORMATS or not isinstance(content, str):
            raise ValidationError(f"Invalid caption result (format={fmt!r})")
        return CaptionResult(format=fmt, content=content)
    if kind == "utterances":
        if not isinstance(content, list):
            raise ValidationError("Utterances result content must be a list")
        try:
            utterances = [
                Utterance(
                    speaker=int(item.get("speaker") or 0),
                    start=float(item["start"]),
                    end=float(item["end"]),
                    text=str(item.get("text", "")),
                )
                for item in content
            ]
        except (AttributeError, KeyError, OverflowError, TypeError, ValueError) as e:
            raise ValidationError(f"Invalid utterance entry: {e}")
        for u in utterances:
            if not (math.isfinite(u.start) and math.isfinite(u.end)):
                raise ValidationError("Utterance times must be finite numbers")
        return UtterancesResult(content=utterances)

    raise ValidationError(f"Unknown result type: {kind!r}")
