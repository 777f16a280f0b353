from datetime import date, datetime, time, timezone
from typing import Optional, Union

DateLike = Union[date, datetime, str]


def from_iso_string(value: str) -> datetime:
    dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def to_utc_datetime(value: Optional[DateLike]) -> Optional[datetime]:
    if value is None or value == "":
        return None
    if isinstance(value, str):
        return from_iso_string(value)
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
    return datetime.combine(value, time.min, tzinfo=timezone.utc)

