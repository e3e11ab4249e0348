"""Plain data records passed between pipeline stages."""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Dict, List, Tuple


@dataclass(frozen=True)
class AiringRecord:
    """One `airingSchedules` entry as decoded from AniList."""

    episode: int = 0
    airing_at: int = 0
    romaji_title: str = ""
    english_title: str = ""
    average_score: int = 0


@dataclass(frozen=True)
class AiringPage:
    records: Tuple[AiringRecord, ...] = ()
    has_next_page: bool = False


@dataclass(frozen=True)
class ShowInfo:
    """Normalized view of a record, ready for display."""

    title: str
    episode: int
    average_score: int
    airing_time: datetime


DayBuckets = Dict[date, List[ShowInfo]]


@dataclass(frozen=True)
class WeeklyReport:
    buckets: DayBuckets = field(default_factory=dict)
    truncated: bool = False
