from datetime import datetime, timezone, tzinfo
from typing import Optional

DAY_LABEL_FORMAT = "%A, %B {day}, %Y"


def as_utc(dt: datetime) -> datetime:
    """Return an aware UTC datetime; naive values are taken to be UTC already"""
    if dt.tzinfo is None or dt.tzinfo.utcoffset(dt) is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def day_label(dt: datetime, tz: Optional[tzinfo] = None) -> str:
    """Human readable calendar day, e.g. 'Monday, October 19, 2026'.

    The day is taken in ``tz``, or in the local time zone when ``tz`` is None.
    """
    local = as_utc(dt).astimezone(tz)
    # %-d is not portable, so the unpadded day is filled in by hand
    return local.strftime(DAY_LABEL_FORMAT.format(day=local.day))


def extract_domain(url: str) -> str:
    """Host part of a URL: scheme stripped, cut at the first '/'"""
    domain = url
    for prefix in ("http://", "https://"):
        if domain.startswith(prefix):
            domain = domain[len(prefix):]
            break
    slash = domain.find('/')
    if slash > 0:
        domain = domain[:slash]
    return domain


def serialize_day_buckets(buckets):
    """Turn a day -> urls mapping into an ordered list for JSON clients"""
    return [{"day": day, "urls": urls} for day, urls in buckets.items()]
