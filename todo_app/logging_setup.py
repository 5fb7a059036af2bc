import logging
import sys
from pathlib import Path


class _ConsoleNoiseFilter(logging.Filter):
    """Keep the interactive menu readable.

    Application loggers pass at the handler level; SQLAlchemy and any other
    third party only get through from WARNING up.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith("todo_app."):
            return True
        return record.levelno >= logging.WARNING


def setup_logging(level="WARNING", log_file=""):
    """Configure the root logger once, before the first menu is shown.

    - stderr handler at `level`, filtered for interactive use
    - optional file handler capturing everything at DEBUG
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # avoid duplicate handlers when called twice (tests, re-entry)
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(level)
    ch.setFormatter(fmt)
    ch.addFilter(_ConsoleNoiseFilter())
    root.addHandler(ch)

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(path), encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(fmt)
        root.addHandler(fh)

    logging.captureWarnings(True)
