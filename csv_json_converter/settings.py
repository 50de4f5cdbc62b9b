"""Runtime settings for the HTTP server, loaded from the environment."""
from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass
class Settings:
    host: str = "127.0.0.1"
    port: int = 8080

    # Largest request body / upload accepted by the API (10 MB)
    max_upload_bytes: int = 10 * 1024 * 1024

    log_level: str = "INFO"

    # Where the gradio UI is mounted on the API app
    ui_path: str = "/ui"

    @classmethod
    def from_env(cls) -> Settings:
        cfg = cls()
        cfg.host = os.environ.get("CSV2JSON_HOST", cfg.host)

        port = os.environ.get("CSV2JSON_PORT")
        if port and port.isdigit():
            cfg.port = int(port)

        max_bytes = os.environ.get("CSV2JSON_MAX_UPLOAD_BYTES")
        if max_bytes and max_bytes.isdigit():
            cfg.max_upload_bytes = int(max_bytes)

        level = os.environ.get("CSV2JSON_LOG_LEVEL")
        if level:
            cfg.log_level = level.upper()

        ui_path = os.environ.get("CSV2JSON_UI_PATH")
        if ui_path:
            cfg.ui_path = ui_path if ui_path.startswith("/") else f"/{ui_path}"

        return cfg


def get_settings() -> Settings:
    return Settings.from_env()
