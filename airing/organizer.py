"""Groups decoded airing records by the UTC day they aired."""

from datetime import datetime, timezone

from airing.errors import DecodeError
from airing.models import ShowInfo


def resolve_title(record):
    """Prefer the English title, fall back to romaji."""
    return record.english_title or record.romaji_title


def airing_time(record):
    try:
        return datetime.fromtimestamp(record.airing_at, tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as e:
        raise DecodeError(f"airingAt out of range: {record.airing_at}") from e


def to_show_info(record):
    return ShowInfo(
        title=resolve_title(record),
        episode=record.episode,
        average_score=record.average_score,
        airing_time=airing_time(record),
    )


def organize_by_day(records):
    """
    Returns {date: [ShowInfo, ...]} keyed by UTC calendar date.
    Shows keep the order they arrived in; buckets are not re-sorted.
    """
    shows_by_day = {}
    for record in records:
        show = to_show_info(record)
        shows_by_day.setdefault(show.airing_time.date(), []).append(show)
    return shows_by_day
