from __future__ import annotations

import logging
from contextlib import closing
from pathlib import Path
from typing import Any, Mapping, Optional

from dotenv import load_dotenv
from flask import Flask
from flask_cors import CORS

from .config import get_settings_module, load_settings
from .container import build_container
from .database.bootstrap import apply_schema
from .messenger.client import MessengerClient
from .messenger.controller import register as register_messenger
from .records.controller import register as register_records

logger = logging.getLogger(__name__)

SETTINGS_KEYS = (
    "PORT",
    "DB_PATH",
    "PAGE_TOKEN",
    "VERIFY_TOKEN",
    "GRAPH_API_URL",
    "SEND_TIMEOUT",
    "DEBUG",
    "TESTING",
    "LOG_LEVEL",
    "AUTO_INIT_DB",
)

PUBLIC_DIR = Path(__file__).resolve().parent / "public"


def create_app(
    overrides: Optional[Mapping[str, Any]] = None,
    *,
    messenger_client: Optional[MessengerClient] = None,
) -> Flask:
    """Build the Flask app from the APP_ENV settings module.

    Environment variables are re-read on every call; ``overrides`` is applied
    last and wins over them.
    """
    load_dotenv(override=False)
    app = Flask(__name__, static_folder=str(PUBLIC_DIR), static_url_path="")
    CORS(app)

    settings_module = get_settings_module()
    settings = load_settings(settings_module)
    for key in SETTINGS_KEYS:
        app.config[key] = getattr(settings, key, app.config.get(key))
    if overrides:
        app.config.update(overrides)

    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger.debug("settings=%s db=%s", settings_module, app.config["DB_PATH"])

    container = build_container(
        db_path=app.config["DB_PATH"],
        page_token=app.config["PAGE_TOKEN"],
        graph_api_url=app.config["GRAPH_API_URL"],
        send_timeout=app.config["SEND_TIMEOUT"],
        messenger_client=messenger_client,
    )
    if app.config["AUTO_INIT_DB"]:
        apply_schema(container.conn)
    app.extensions["timekeeping"] = container

    register_records(app, container)
    register_messenger(app, container)

    return app


def run() -> None:
    app = create_app()
    with closing(app.extensions["timekeeping"]):
        logger.info("Timekeeping System running on port %s", app.config["PORT"])
        app.run(host="0.0.0.0", port=int(app.config["PORT"]), debug=bool(app.config["DEBUG"]), use_reloader=False)


if __name__ == "__main__":
    run()
