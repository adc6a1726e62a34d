from datetime import datetime, timezone


def utcnow() -> datetime:
    # stored naive, always UTC
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_utc_naive(dt):
    if dt is None:
        return None
    # naive input is taken as UTC already
    if getattr(dt, "tzinfo", None) is None:
        return dt
    return dt.astimezone(timezone.utc).replace(tzinfo=None)


def to_utc(dt):
    """Attach UTC to a stored (naive) timestamp for serialization."""
    if dt is None:
        return None
    if getattr(dt, "tzinfo", None) is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)
