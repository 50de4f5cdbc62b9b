from __future__ import annotations

import logging
import os
import tempfile
from typing import Any, List, Optional

import gradio as gr

from .converter import convert_csv_to_json, summarize, to_json_text
from .errors import ConversionError
from .io_utils import read_csv_content
from .options import ConversionOptions

logger = logging.getLogger(__name__)

SAMPLE_CSV = """name,age,city,active
John Doe,30,New York,true
Jane Smith,25,Los Angeles,false
Bob Johnson,35,Chicago,true"""

PREVIEW_LIMIT = 3


def build_options(delimiter, has_header, output_format, pretty_print, infer_types) -> ConversionOptions:
    return ConversionOptions.from_mapping({
        'delimiter': delimiter,
        'has_header': has_header,
        'output_format': output_format,
        'pretty_print': pretty_print,
        'infer_types': infer_types,
    })


def build_preview(value: Any, limit: int = PREVIEW_LIMIT) -> Optional[Any]:
    """First few records of either layout, for the gr.JSON preview."""
    limit = max(1, int(limit))
    if isinstance(value, list):
        return value[:limit] or None
    if isinstance(value, dict):
        return {name: column[:limit] for name, column in value.items()} or None
    return None


def load_csv_file(file_obj):
    if file_obj is None:
        return gr.update(), "No file uploaded."

    try:
        text = read_csv_content(file_obj)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Failed to read uploaded CSV: %s", e)
        return gr.update(), f"Error reading file: {str(e)}"

    line_count = text.count('\n') + (0 if text.endswith('\n') or not text else 1)
    return text, f"Loaded {line_count} line(s)."


def load_sample_data():
    return SAMPLE_CSV, "Sample data loaded."


def convert_handler(csv_text, delimiter, has_header, output_format, pretty_print, infer_types):
    """Convert the textarea contents; returns (json_text, preview, status)."""
    if not csv_text:
        return "", None, "No CSV data provided."

    try:
        options = build_options(delimiter, has_header, output_format, pretty_print, infer_types)
        value = convert_csv_to_json(csv_text, options)
    except ConversionError as e:
        logger.warning("Conversion failed: %s", e)
        return "", None, f"Error: {e}"

    summary = summarize(value)
    return to_json_text(value, options.pretty_print), build_preview(value), summary.describe()


def resolve_output_path(file_name: Optional[str]) -> str:
    file_name = os.path.basename((file_name or '').strip()) or "converted"
    if not file_name.lower().endswith('.json'):
        file_name += '.json'
    # One directory per export so concurrent sessions never share a file.
    return os.path.join(tempfile.mkdtemp(prefix='csv2json_'), file_name)


def export_json_handler(csv_text, delimiter, has_header, output_format, pretty_print, infer_types, file_name):
    """Convert and write the result to a temp file; returns (path, status)."""
    json_text, _, status = convert_handler(
        csv_text, delimiter, has_header, output_format, pretty_print, infer_types
    )
    if not json_text:
        return None, status

    path = resolve_output_path(file_name)
    try:
        with open(path, 'w', encoding='utf-8') as f:
            f.write(json_text)
    except OSError as e:
        logger.warning("Failed to write %s: %s", path, e)
        return None, f"Error during export: {str(e)}"

    return path, f"Export successful! Saved to {path}"


def clear_outputs() -> List[Any]:
    return ["", "", None, "", None]
