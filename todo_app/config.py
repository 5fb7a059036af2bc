import os

# Default to local SQLite for dev/tests; override via env for a shared Postgres
DATABASE_URL = os.environ.get("DATABASE_URL", "sqlite:///./todo_app.db")

# Optional credentials applied on top of DATABASE_URL (kept out of the URL itself)
DATABASE_USER = os.environ.get("DATABASE_USER")
DATABASE_PASSWORD = os.environ.get("DATABASE_PASSWORD")

LOG_LEVEL = os.environ.get("TODO_LOG_LEVEL", "WARNING")
# Empty means no log file
LOG_FILE = os.environ.get("TODO_LOG_FILE", "")

# Lookup rows every database needs: (name, display label)
DEFAULT_STATUSES = [
    ("ready_to_pick", "Ready to Pick"),
    ("in_progress", "In Progress"),
    ("blocked", "Blocked"),
    ("completed", "Completed"),
    ("deleted", "Deleted"),
]
DEFAULT_CATEGORIES = [
    ("work", "Work"),
    ("leisure", "Leisure"),
]
