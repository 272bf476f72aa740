"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_PORT = 3000
DEFAULT_DB_PATH = "timekeeping.db"
DEFAULT_VERIFY_TOKEN = "timekeeping_verify"
DEFAULT_GRAPH_API_URL = "https://graph.facebook.com/v18.0/me/messages"

WEEK_REPORT_DAYS = 7

EXPORT_FILENAME = "timekeeping.csv"
EXPORT_HEADER = ("Name", "Time In", "Time Out", "Hours", "Date")
