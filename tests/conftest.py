"""
Shared test fixtures and configuration for pytest.
"""
import pytest
from unittest.mock import AsyncMock, MagicMock


@pytest.fixture
def mock_deepgram_response():
    """Mock response from Deepgram API with paragraph data."""
    return {
        "metadata": {"request_id": "abc-123", "duration": 14.2},
        "results": {
            "channels": [
                {
                    "alternatives": [
                        {
                            "transcript": "Hello there. How are you? Fine thanks.",
                            "confidence": 0.98,
                            "paragraphs": {
                                "transcript": "\nSpeaker 0: Hello there. How are you?\n\nSpeaker 1: Fine thanks.",
                                "paragraphs": [
                                    {
                                        "speaker": 0,
                                        "start": 0.5,
                                        "end": 4.2,
                                        "sentences": [
                                            {"text": "Hello there.", "start": 0.5, "end": 1.6},
                                            {"text": "How are you?", "start": 2.0, "end": 4.2},
                                        ],
                                    },
                                    {
                                        "speaker": 1,
                                        "start": 65.0,
                                        "end": 66.9,
                                        "sentences": [
                                            {"text": "Fine thanks.", "start": 65.0, "end": 66.9},
                                        ],
                                    },
                                ],
                            },
                        }
                    ],
                    "detected_language": "en",
                }
            ]
        },
    }


@pytest.fixture
def transcript_only_response():
    """Mock Deepgram response without paragraph data."""
    return {
        "results": {
            "channels": [
                {
                    "alternatives": [
                        {"transcript": "This is a test transcription"}
                    ]
                }
            ]
        }
    }


@pytest.fixture
def valid_wav_content():
    """Create a minimal WAV file for testing."""
    wav_header = b'RIFF'
    wav_header += b'\x24\x00\x00\x00'  # File size - 8
    wav_header += b'WAVE'
    wav_header += b'fmt '
    wav_header += b'\x10\x00\x00\x00'  # fmt chunk size
    wav_header += b'\x01\x00'  # Audio format (PCM)
    wav_header += b'\x01\x00'  # Number of channels
    wav_header += b'\x44\xac\x00\x00'  # Sample rate (44100)
    wav_header += b'\x88\x58\x01\x00'  # Byte rate
    wav_header += b'\x02\x00'  # Block align
    wav_header += b'\x10\x00'  # Bits per sample
    wav_header += b'data'
    wav_header += b'\x00\x00\x00\x00'  # Data chunk size
    return wav_header


@pytest.fixture
def make_httpx_client():
    """Build a mocked httpx.AsyncClient returning a JSON or text body, or raising."""

    def _make(json_body=None, text="mock response", side_effect=None):
        mock_response = MagicMock()
        mock_response.status_code = 200
        mock_response.text = text
        mock_response.json.return_value = json_body
        mock_response.headers.get.return_value = "application/json"

        mock_client = AsyncMock()
        mock_client.__aenter__.return_value = mock_client
        mock_client.__aexit__.return_value = None
        if side_effect is not None:
            mock_client.post.side_effect = side_effect
        else:
            mock_client.post.return_value = mock_response
        return mock_client

    return _make
