import math
from typing import Optional

from hotel_client.utils.datetime_normaliser import DateLike, to_utc_datetime

SECONDS_PER_DAY = 24 * 60 * 60


def nights_between(check_in: Optional[DateLike], check_out: Optional[DateLike]) -> int:
    """Whole nights between two dates, rounded up.

    Returns 0 if either date is missing. The difference is absolute, so a
    reversed range still yields a positive count; callers validate ordering.
    """
    start = to_utc_datetime(check_in)
    end = to_utc_datetime(check_out)
    if start is None or end is None:
        return 0
    diff = abs((end - start).total_seconds())
    return math.ceil(diff / SECONDS_PER_DAY)


def total_price(base_price: float, nights: int) -> float:
    return base_price * nights
