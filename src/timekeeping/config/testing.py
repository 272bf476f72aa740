from ..core.constants import DEFAULT_GRAPH_API_URL, DEFAULT_VERIFY_TOKEN

PORT = 3000
DB_PATH = ":memory:"

PAGE_TOKEN = "test-page-token"
VERIFY_TOKEN = DEFAULT_VERIFY_TOKEN
GRAPH_API_URL = DEFAULT_GRAPH_API_URL
SEND_TIMEOUT = None

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = True
