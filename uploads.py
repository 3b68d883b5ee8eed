import logging
import os
import random
import time
from contextlib import asynccontextmanager
from typing import AsyncIterator, BinaryIO

from fastapi import UploadFile
from fastapi.concurrency import run_in_threadpool

from transcription.errors import UploadError, ValidationError

logger = logging.getLogger("uploads")

MAX_UPLOAD_BYTES = 2 * 1024 * 1024 * 1024  # 2 GiB
ACCEPTED_MEDIA_PREFIXES = ("audio/", "video/")
_CHUNK_SIZE = 1024 * 1024


def _upload_dir() -> str:
    return os.getenv("UPLOAD_DIR", "uploads").strip() or "uploads"


def validate_media_type(content_type: str | None) -> None:
    """Reject uploads that are not audio or video."""
    ctype = (content_type or "").strip().lower()
    if not ctype.startswith(ACCEPTED_MEDIA_PREFIXES):
        raise ValidationError("Please select an audio or video file")


def _unique_name(filename: str | None) -> str:
    _, ext = os.path.splitext(filename or "")
    return f"audio-{int(time.time() * 1000)}-{random.randint(0, 10**9)}{ext}"


def _spool(source: BinaryIO, path: str, max_bytes: int) -> int:
    written = 0
    with open(path, "wb") as out:
        while True:
            chunk = source.read(_CHUNK_SIZE)
            if not chunk:
                break
            written += len(chunk)
            if written > max_bytes:
                raise ValidationError("File size exceeds 2GB limit")
            out.write(chunk)
    return written


def _read(path: str) -> bytes:
    with open(path, "rb") as f:
        return f.read()


def remove_file(path: str) -> None:
    """Delete a stored upload; failures are only logged."""
    try:
        os.unlink(path)
    except OSError as e:
        logger.error("Error cleaning up file %s: %s", path, e)


@asynccontextmanager
async def stored_upload(upload: UploadFile, max_bytes: int = MAX_UPLOAD_BYTES) -> AsyncIterator[str]:
    """
    Write an upload to the upload directory for the duration of a request.

    The file is removed when the block exits, whether or not it raised.

    Yields:
        Path of the stored file
    """
    upload_dir = _upload_dir()
    try:
        os.makedirs(upload_dir, exist_ok=True)
    except OSError as e:
        logger.error("Error creating upload directory %s: %s", upload_dir, e)
        raise UploadError(f"Failed to store upload: {e}")

    path = os.path.join(upload_dir, _unique_name(upload.filename))
    try:
        try:
            size = await run_in_threadpool(_spool, upload.file, path, max_bytes)
        except OSError as e:
            raise UploadError(f"Failed to store upload: {e}")
        logger.debug("Stored upload %s (%d bytes) at %s", upload.filename, size, path)
        yield path
    finally:
        if os.path.exists(path):
            await run_in_threadpool(remove_file, path)


async def read_upload(path: str) -> bytes:
    return await run_in_threadpool(_read, path)
