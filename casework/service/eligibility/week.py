"""
Payment week boundaries.

The program week runs Sunday through Saturday in the program's local
time. This is a business rule and deliberately differs from ISO 8601
weeks, which start on Monday.
"""

import os
from datetime import datetime, time, timedelta, tzinfo
from pathlib import Path
from typing import Optional, Tuple
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

# The end bound is inclusive at millisecond resolution
END_OF_WEEK_OFFSET = timedelta(days=7) - timedelta(milliseconds=1)

LOCALTIME_PATH = Path("/etc/localtime")


def resolve_timezone(name: Optional[str]) -> tzinfo:
    """
    Resolve an IANA zone name, falling back to the host's local zone.

    The result is always a full zone with its transition rules, never a
    fixed UTC offset, so it stays correct across daylight-saving changes
    for the life of the process.

    Raises:
        ZoneInfoNotFoundError: If the name is not a known zone
    """
    if name:
        return ZoneInfo(name)
    return host_timezone()


def _zone_from_key(key: str) -> Optional[ZoneInfo]:
    try:
        return ZoneInfo(key)
    except (ZoneInfoNotFoundError, ValueError):
        return None


def host_timezone(localtime: Path = LOCALTIME_PATH) -> ZoneInfo:
    """
    Find the host's zone: ``TZ`` first, then ``/etc/localtime``, then UTC.

    ``TZ`` values that are not IANA keys (POSIX rule strings) fall through
    to the system zone file.
    """
    env_key = os.environ.get("TZ", "").strip().lstrip(":")
    if env_key:
        zone = _zone_from_key(env_key)
        if zone is not None:
            return zone

    if localtime.is_symlink():
        target = str(localtime.resolve())
        if "zoneinfo/" in target:
            zone = _zone_from_key(target.split("zoneinfo/", 1)[1])
            if zone is not None:
                return zone

    if localtime.is_file():
        with localtime.open("rb") as f:
            return ZoneInfo.from_file(f, key="localtime")

    return ZoneInfo("UTC")


def get_start_of_week(now: datetime) -> datetime:
    """
    Most recent Sunday at 00:00:00.000 in ``now``'s timezone.

    A ``now`` that is itself a Sunday maps to midnight of that day.
    """
    # weekday(): Monday=0 ... Sunday=6
    days_since_sunday = (now.weekday() + 1) % 7
    sunday = now.date() - timedelta(days=days_since_sunday)
    return datetime.combine(sunday, time.min, tzinfo=now.tzinfo)


def get_end_of_week(now: datetime) -> datetime:
    """Following Saturday at 23:59:59.999 in ``now``'s timezone."""
    return get_start_of_week(now) + END_OF_WEEK_OFFSET


def get_week_bounds(now: datetime) -> Tuple[datetime, datetime]:
    """Inclusive (start, end) of the payment week containing ``now``."""
    return get_start_of_week(now), get_end_of_week(now)


def is_within_week(moment: datetime, week_start: datetime, week_end: datetime) -> bool:
    """
    Check whether ``moment`` falls inside an inclusive week window.

    Naive datetimes are treated as UTC, which is how they are stored.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=ZoneInfo("UTC"))
    local = moment.astimezone(week_start.tzinfo)
    return week_start <= local <= week_end
