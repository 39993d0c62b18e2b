from datetime import datetime, timezone

# ISO 8601-like, second precision: YYYY-MM-DDTHH:MM:SSZ
UTC_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def get_utc_formatter() -> str:
    """Return the strftime format used for UTC timestamps."""
    return UTC_FORMAT


def format_utc(moment: datetime) -> str:
    """Format ``moment`` in UTC. Naive datetimes are taken to already be UTC."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    else:
        moment = moment.astimezone(timezone.utc)
    # %Y is not zero padded below year 1000 on every platform
    return f"{moment.year:04d}-{moment:%m-%dT%H:%M:%S}Z"


def get_utc_timestamp() -> str:
    """Return the current UTC time, e.g. ``2023-10-27T10:00:00Z``."""
    return format_utc(datetime.now(timezone.utc))
