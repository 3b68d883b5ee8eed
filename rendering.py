import html
import json
from dataclasses import dataclass

from transcription.base import (
    CaptionResult,
    JsonResult,
    TranscriptionResult,
    UtterancesResult,
)

EXPORT_BASENAME = "transcription"


@dataclass
class ExportFile:
    content: str
    filename: str
    media_type: str


def format_time(seconds: float) -> str:
    """Format seconds as m:ss."""
    minutes = int(seconds // 60)
    secs = int(seconds % 60)
    return f"{minutes}:{secs:02d}"


def _pretty_json(payload) -> str:
    return json.dumps(payload, indent=2, ensure_ascii=False)


def _utterance_lines(result: UtterancesResult) -> str:
    return "\n\n".join(
        f"[{format_time(u.start)} - {format_time(u.end)}] Speaker {u.speaker}: {u.text}"
        for u in result.content
    )


def render_html(result: TranscriptionResult) -> str:
    """Render a result as an HTML fragment for the results panel."""
    if isinstance(result, UtterancesResult):
        blocks = []
        for u in result.content:
            blocks.append(
                '<div class="utterance">'
                '<div class="utterance-header">'
                f'<span class="speaker">Speaker {u.speaker}</span>'
                f'<span class="timestamp">{format_time(u.start)} - {format_time(u.end)}</span>'
                "</div>"
                f'<div class="utterance-text">{html.escape(u.text)}</div>'
                "</div>"
            )
        return "".join(blocks)
    if isinstance(result, JsonResult):
        return f"<pre>{html.escape(_pretty_json(result.content))}</pre>"
    return f"<pre>{html.escape(result.content)}</pre>"


def export_text(result: TranscriptionResult) -> str:
    """Flatten a result into the text placed on the clipboard."""
    if isinstance(result, UtterancesResult):
        return _utterance_lines(result)
    if isinstance(result, JsonResult):
        return _pretty_json(result.content)
    return result.content


def export_file(result: TranscriptionResult) -> ExportFile:
    """Build the downloadable file for a result."""
    content = export_text(result)
    if isinstance(result, JsonResult):
        return ExportFile(content, f"{EXPORT_BASENAME}.json", "application/json")
    if isinstance(result, CaptionResult):
        media_type = "text/vtt" if result.format == "webvtt" else "text/plain"
        return ExportFile(content, f"{EXPORT_BASENAME}.{result.format}", media_type)
    # TextResult and UtterancesResult
    return ExportFile(content, f"{EXPORT_BASENAME}.txt", "text/plain")
