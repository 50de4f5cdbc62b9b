"""FastAPI app exposing the converter over HTTP.

Routes:
- GET  /health   liveness probe
- POST /convert  JSON body {"csv_data": "...", "options": {...}}
- POST /upload   multipart file upload with options as form fields

Both conversion routes answer with the envelope
{"success": true, "data": ...} or {"success": false, "error": "..."}.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, File, Form, Request, UploadFile
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from .converter import convert_csv_to_json, summarize
from .errors import ConversionError
from .io_utils import decode_csv_bytes
from .options import ConversionOptions
from .settings import Settings, get_settings

logger = logging.getLogger(__name__)


class ConvertRequest(BaseModel):
    csv_data: str
    options: Optional[Dict[str, Any]] = None


def success_envelope(data: Any) -> Dict[str, Any]:
    return {"success": True, "data": data}


def error_envelope(message: str) -> Dict[str, Any]:
    return {"success": False, "error": message}


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=error_envelope(message))


def create_app(settings: Settings | None = None, mount_ui: bool = True) -> FastAPI:
    """Create the FastAPI application.

    Args:
        settings: Runtime settings (loaded from the environment if None)
        mount_ui: Mount the gradio UI at `settings.ui_path`

    Returns:
        FastAPI application instance
    """
    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title="CSV to JSON API",
        description="Convert delimited text to JSON",
        version="1.0.0",
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    @app.exception_handler(ConversionError)
    async def conversion_error_handler(request: Request, exc: ConversionError) -> JSONResponse:
        logger.warning("Conversion failed on %s: %s", request.url.path, exc)
        return _error_response(400, f"Conversion failed: {exc}")

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return _error_response(400, f"Invalid request format: {exc.errors()}")

    @app.get("/health")
    def health() -> Dict[str, str]:
        return {"status": "healthy", "service": "csv2json-api"}

    @app.post("/convert")
    def convert(request: ConvertRequest):
        if len(request.csv_data.encode("utf-8")) > settings.max_upload_bytes:
            return _error_response(413, f"CSV data exceeds {settings.max_upload_bytes} bytes.")

        options = ConversionOptions.from_mapping(request.options)
        data = convert_csv_to_json(request.csv_data, options)
        logger.info("POST /convert: %s", summarize(data).describe())
        return success_envelope(data)

    @app.post("/upload")
    def upload(
        file: UploadFile = File(...),
        delimiter: Optional[str] = Form(None),
        has_header: Optional[str] = Form(None),
        output_format: Optional[str] = Form(None),
        pretty_print: Optional[str] = Form(None),
        infer_types: Optional[str] = Form(None),
    ):
        content = file.file.read(settings.max_upload_bytes + 1)
        if len(content) > settings.max_upload_bytes:
            return _error_response(413, f"Uploaded file exceeds {settings.max_upload_bytes} bytes.")

        try:
            text = decode_csv_bytes(content)
        except UnicodeDecodeError:
            return _error_response(400, "Uploaded file is not valid UTF-8 text.")

        options = ConversionOptions.from_mapping({
            "delimiter": delimiter,
            "has_header": has_header,
            "output_format": output_format,
            "pretty_print": pretty_print,
            "infer_types": infer_types,
        })
        data = convert_csv_to_json(text, options)
        logger.info("POST /upload %s: %s", file.filename, summarize(data).describe())
        return success_envelope(data)

    if mount_ui:
        import gradio as gr

        from .ui import build_demo

        app = gr.mount_gradio_app(app, build_demo(), path=settings.ui_path)

    return app
