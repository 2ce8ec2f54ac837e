"""Table presenter configuration constants."""

from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent
DATA_DIR = ROOT_DIR / "data"

SAMPLE_RECORDS_FILE = DATA_DIR / "sample_records.csv"

DEFAULT_PAGE_SIZE = 20
PAGINATION_RADIUS = 2
ELLIPSIS = "..."

SORT_ASC = "asc"
SORT_DESC = "desc"
SORT_DIRECTIONS = (SORT_ASC, SORT_DESC)
SORT_INDICATORS = {SORT_ASC: "▲", SORT_DESC: "▼", "": ""}

SEARCH_PLACEHOLDER = "Search..."
EMPTY_MESSAGE = "No Entries Found"
PREVIOUS_LABEL = "<"
NEXT_LABEL = ">"

SAMPLE_COLUMNS = [
    {"key": "name", "label": "Name"},
    {"key": "team", "label": "Team"},
    {"key": "role", "label": "Role"},
    {"key": "score", "label": "Score"},
    {"key": "email", "label": "Email", "ignoreFiltering": True},
]
