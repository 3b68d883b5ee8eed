"""Deepgram transcription provider."""

import httpx
import logging
import os
from typing import Any

from .base import CAPTION_FORMATS, TranscriptionResult
from .errors import ExtractionError, ProviderError, UploadError
from .options import TranscriptionOptions
from .request import build_params
from .response import translate_response

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://eu.api.deepgram.com/v1/listen"


def _error_details(response: httpx.Response) -> Any:
    """Provider error body, parsed as JSON when possible."""
    try:
        return response.json()
    except ValueError:
        return response.text or None


class DeepgramProvider:
    """Deepgram transcription provider using the pre-recorded REST API."""

    def __init__(self, api_key: str | None = None, api_url: str | None = None):
        self.api_key = api_key or os.getenv("DEEPGRAM_API_KEY", "")
        if not self.api_key:
            raise ValueError("DEEPGRAM_API_KEY is required for Deepgram provider")
        self.api_url = api_url or os.getenv("DEEPGRAM_API_URL", "").strip() or DEFAULT_API_URL

    async def transcribe(
        self,
        audio_bytes: bytes,
        content_type: str | None,
        options: TranscriptionOptions,
    ) -> TranscriptionResult:
        """
        Transcribe audio bytes and translate the response.

        Args:
            audio_bytes: Raw audio/video data
            content_type: MIME type of the upload (defaults to audio/wav)
            options: Normalized transcription options

        Returns:
            The result variant selected by options.output_format

        Raises:
            ProviderError: Deepgram answered with a non-2xx status
            UploadError: Deepgram could not be reached or timed out
            ExtractionError: The response body could not be interpreted
        """
        headers = {
            "Authorization": f"Token {self.api_key}",
            "Content-Type": content_type or "audio/wav",
        }
        params = build_params(options)

        timeout_seconds = self._get_timeout_seconds()
        timeout = httpx.Timeout(
            connect=10.0,
            read=timeout_seconds,
            write=timeout_seconds,
            pool=10.0,
        )

        try:
            async with httpx.AsyncClient(timeout=timeout) as client:
                response = await client.post(
                    self.api_url,
                    headers=headers,
                    params=params,
                    content=audio_bytes,
                )

                try:
                    logger.debug(
                        "Deepgram response: status=%s content_type=%s body_preview=%s",
                        response.status_code,
                        response.headers.get("Content-Type"),
                        (response.text[:500] if response.text else ""),
                    )
                except Exception:
                    logger.debug("Failed to log Deepgram response preview")

                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            details = _error_details(e.response)
            logger.error("Deepgram API error: status=%s details=%s", status, details)
            raise ProviderError(f"Deepgram API error (status {status})", status_code=status, details=details)
        except httpx.TimeoutException:
            logger.warning("Deepgram request timed out after %ss", timeout_seconds)
            raise UploadError("Deepgram request timed out")
        except httpx.RequestError as e:
            logger.error("Deepgram request failed: %s", str(e))
            raise UploadError(f"Failed to reach Deepgram: {e}")

        if options.output_format in CAPTION_FORMATS:
            payload = response.text
        else:
            try:
                payload = response.json()
            except ValueError as e:
                logger.error("Deepgram returned a non-JSON body: %s", response.text[:500])
                raise ExtractionError(f"Failed to parse transcription response: {e}")

        return translate_response(payload, options)

    def _get_timeout_seconds(self) -> float:
        """Get timeout from environment variable."""
        raw = os.getenv("DEEPGRAM_TIMEOUT_SECONDS", "300").strip()
        try:
            return float(raw)
        except ValueError:
            logger.warning("Invalid DEEPGRAM_TIMEOUT_SECONDS=%r; defaulting to 300", raw)
            return 300.0
