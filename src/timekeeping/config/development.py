import os

from ..core.constants import DEFAULT_DB_PATH, DEFAULT_GRAPH_API_URL, DEFAULT_PORT, DEFAULT_VERIFY_TOKEN

PORT = int(os.getenv("PORT", str(DEFAULT_PORT)))
DB_PATH = os.getenv("DB_PATH", DEFAULT_DB_PATH)

# Messenger page token; an empty value makes Send API calls fail at the platform.
PAGE_TOKEN = os.getenv("PAGE_TOKEN", "")
VERIFY_TOKEN = os.getenv("VERIFY_TOKEN", DEFAULT_VERIFY_TOKEN)
GRAPH_API_URL = os.getenv("GRAPH_API_URL", DEFAULT_GRAPH_API_URL)
SEND_TIMEOUT = None

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Apply schema.sql on startup (idempotent: CREATE TABLE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
