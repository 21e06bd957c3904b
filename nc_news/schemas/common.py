from datetime import datetime, timezone


def format_timestamp(value: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision, e.g. 2020-07-09T20:11:00.000Z.

    Naive datetimes (SQLite drops tzinfo) are taken to be UTC already.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"
