import datetime

import pytz

from .constants import DATE_FMT, RANKING_PUBLISH_HOUR, TOKYO_TZ


_tokyo = pytz.timezone(TOKYO_TZ)


def parse_date(value):
    """
    Parse a date in form of YYYY-M-D, zero padding is optional.

    Raises:
        ValueError
            Not a valid calendar date in the expected form.
    """
    try:
        return datetime.datetime.strptime(value, DATE_FMT).date()
    except (TypeError, ValueError) as exc:
        raise ValueError(
            f"Invalid date or format given: {value!r}"
        ) from exc

def format_date(date):
    """Render a date as YYYY-M-D without zero padding."""
    return f"{date.year}-{date.month}-{date.day}"

def latest_ranking_date(now=None):
    """
    Date of the most recent published ranking.

    Args:
        now         datetime.datetime
            Reference time, defaults to current time. Naive values are
            taken as UTC.

    Returns:
        string in form of YYYY-M-D.
    """
    if now is None:
        now = datetime.datetime.now(pytz.utc)
    elif now.tzinfo is None:
        now = pytz.utc.localize(now)
    tokyo_now = now.astimezone(_tokyo)
    delta = 1 if tokyo_now.hour >= RANKING_PUBLISH_HOUR else 2
    return format_date(tokyo_now.date() - datetime.timedelta(days=delta))
