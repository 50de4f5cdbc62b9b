from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def decode_csv_bytes(content: bytes) -> str:
    """Decode uploaded bytes as UTF-8, dropping a leading byte-order mark."""
    return content.decode('utf-8-sig')


def read_csv_content(file_obj) -> str:
    """Read CSV text from an uploaded file or file path."""
    if file_obj is None:
        raise ValueError("No file uploaded.")

    if hasattr(file_obj, 'read'):
        if hasattr(file_obj, 'seek'):
            file_obj.seek(0)
        content = file_obj.read()
        if isinstance(content, bytes):
            content = decode_csv_bytes(content)
        return content

    path = file_obj.name if hasattr(file_obj, 'name') else file_obj
    logger.debug("Reading CSV from %s", path)
    with open(path, 'r', encoding='utf-8-sig', newline='') as f:
        return f.read()
