from datetime import datetime, UTC


def utcnow():
    """Naive UTC timestamp; the DateTime columns carry no timezone."""
    return datetime.now(UTC).replace(tzinfo=None)
