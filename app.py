import logging

from csv_json_converter.settings import get_settings
from csv_json_converter.ui import build_demo

# --- UI Definition ---
demo = build_demo()

if __name__ == "__main__":
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    demo.launch(server_name=settings.host)
