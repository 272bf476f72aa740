import os

from ..core.constants import DEFAULT_DB_PATH, DEFAULT_GRAPH_API_URL, DEFAULT_PORT, DEFAULT_VERIFY_TOKEN

PORT = int(os.getenv("PORT", str(DEFAULT_PORT)))
DB_PATH = os.getenv("DB_PATH", DEFAULT_DB_PATH)

PAGE_TOKEN = os.getenv("PAGE_TOKEN", "")
VERIFY_TOKEN = os.getenv("VERIFY_TOKEN", DEFAULT_VERIFY_TOKEN)
GRAPH_API_URL = os.getenv("GRAPH_API_URL", DEFAULT_GRAPH_API_URL)
SEND_TIMEOUT = float(os.environ["SEND_TIMEOUT"]) if os.getenv("SEND_TIMEOUT") else None

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
