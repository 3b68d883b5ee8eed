from datetime import datetime, timezone
from fastapi import FastAPI, File, Request, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse, Response
from fastapi.staticfiles import StaticFiles
import logging
import os

import rendering
import transcription
import uploads
from transcription import TranscriptionError, ValidationError

app = FastAPI()
logger = logging.getLogger("api")


def _cors_origins() -> list[str]:
    raw = os.getenv("CORS_ORIGINS", "*")
    return [o.strip() for o in raw.split(",") if o.strip()] or ["*"]


app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins(),
    allow_methods=["*"],
    allow_headers=["*"],
)


def _error(status_code: int, error: str, message: str, details=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": error, "message": message, "details": details},
    )


async def _form_fields(request: Request) -> dict[str, str]:
    """Option fields from the multipart form (excluding the file)."""
    form = await request.form()
    fields = {}
    for k, v in form.items():
        if k == "audio":
            continue
        if isinstance(v, str):
            fields[k] = v
    return fields


async def _result_from_body(request: Request) -> transcription.TranscriptionResult:
    try:
        body = await request.json()
    except ValueError:
        raise ValidationError("Request body must be JSON")
    return transcription.result_from_dict(body)


@app.post("/transcribe")
async def transcribe(request: Request, audio: UploadFile | None = File(None)):
    if audio is None:
        return _error(400, "No file uploaded", "No file uploaded")

    options = transcription.normalize_options(await _form_fields(request))
    logger.debug("Transcription options: %s", options)

    try:
        uploads.validate_media_type(audio.content_type)
        client = transcription.get_client()
        async with uploads.stored_upload(audio) as path:
            audio_bytes = await uploads.read_upload(path)
            result = await client.transcribe(audio_bytes, audio.content_type, options)
    except ValidationError as e:
        logger.warning("Rejected upload %s: %s", audio.filename, e.message)
        return _error(400, "Invalid upload", e.message)
    except TranscriptionError as e:
        logger.error("Transcription error: %s", e.message)
        return _error(500, "Transcription failed", e.message, e.details)
    except Exception as e:
        logger.exception("Unexpected error during transcription")
        return _error(500, "Transcription failed", str(e))

    return {"success": True, "result": transcription.result_to_dict(result)}


@app.post("/render", response_class=HTMLResponse)
async def render(request: Request):
    try:
        result = await _result_from_body(request)
    except ValidationError as e:
        return _error(400, "Invalid result", e.message)
    return HTMLResponse(rendering.render_html(result))


@app.post("/export")
async def export(request: Request):
    try:
        result = await _result_from_body(request)
    except ValidationError as e:
        return _error(400, "Invalid result", e.message)
    export_file = rendering.export_file(result)
    return Response(
        content=export_file.content,
        media_type=export_file.media_type,
        headers={"Content-Disposition": f'attachment; filename="{export_file.filename}"'},
    )


@app.get("/health")
async def health():
    timestamp = datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
    return {"status": "ok", "timestamp": timestamp}


# Static UI; registered last so the API routes above take precedence
STATIC_DIR = os.getenv("STATIC_DIR") or os.path.join(os.path.dirname(os.path.abspath(__file__)), "public")
if os.path.isdir(STATIC_DIR):
    app.mount("/", StaticFiles(directory=STATIC_DIR, html=True), name="static")
else:
    logger.warning("Static directory %s not found; UI will not be served", STATIC_DIR)
