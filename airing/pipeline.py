"""
Module: pipeline.py
Description:
    Runs query -> request -> decode -> organize for the past week.

Usage:
    Imported by `cli.py`; not intended to be executed directly.

Notes:
    Functions here never print. Failures propagate as `AiringError`.
"""

from airing.client import build_payload, post_query
from airing.config import ANILIST_API_URL, REQUEST_TIMEOUT
from airing.decoder import decode_response
from airing.models import WeeklyReport
from airing.organizer import organize_by_day
from airing.query import build_query


def fetch_weekly_schedule(now=None, url=ANILIST_API_URL, timeout=REQUEST_TIMEOUT, session=None):
    query = build_query(now)
    payload = build_payload(query)
    raw = post_query(payload, url=url, timeout=timeout, session=session)
    return decode_response(raw)


def weekly_report(now=None, url=ANILIST_API_URL, timeout=REQUEST_TIMEOUT, session=None):
    page = fetch_weekly_schedule(now, url=url, timeout=timeout, session=session)
    return WeeklyReport(
        buckets=organize_by_day(page.records),
        truncated=page.has_next_page,
    )
