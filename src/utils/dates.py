from datetime import datetime, timezone


def to_iso_string(value: datetime) -> str:
    """Format a datetime as ISO-8601 UTC with milliseconds, e.g. 2025-01-13T12:34:56.789Z.

    Naive datetimes are taken to be UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def utc_now_iso() -> str:
    return to_iso_string(datetime.now(timezone.utc))
