"""
Module: query.py
Description:
    Builds the AniList GraphQL query for episodes aired in the last week.

Usage:
    Imported by other modules; not intended to be executed directly.
"""

from datetime import datetime, timedelta, timezone

from airing.config import PER_PAGE, WINDOW_DAYS

AIRING_QUERY = """
{
  Page(perPage: %(per_page)d) {
    pageInfo {
      hasNextPage
    }
    airingSchedules(airingAt_greater: %(start)d, airingAt_lesser: %(end)d, sort: TIME_DESC) {
      episode
      airingAt
      media {
        title {
          romaji
          english
        }
        averageScore
      }
    }
  }
}
"""


def airing_window(now=None, days=WINDOW_DAYS):
    """
    Returns the (start, end) epoch seconds of the window ending at `now`.
    `now` must be timezone-aware; it defaults to the current UTC instant.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        raise ValueError("now must be timezone-aware")

    now = now.astimezone(timezone.utc)
    start = now - timedelta(days=days)
    return int(start.timestamp()), int(now.timestamp())


def build_query(now=None, per_page=PER_PAGE):
    start, end = airing_window(now)
    return AIRING_QUERY % {"per_page": per_page, "start": start, "end": end}
