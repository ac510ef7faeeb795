from datetime import datetime, timezone

def utcnow():
    # millisecond precision so a stored timestamp round-trips unchanged
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)

def isoformat(dt):
    """UTC ISO-8601 with milliseconds and a Z suffix, e.g. 2024-05-01T12:00:00.123Z"""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
