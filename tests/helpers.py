"""Shared fixtures for building AniList-shaped payloads."""
import json

from airing.models import AiringRecord

# 2024-05-01T00:00:00Z
MAY_1 = 1714521600
HOUR = 3600
DAY = 24 * HOUR


def schedule_entry(airing_at, episode=1, english="", romaji="Romaji", score=0):
    return {
        "episode": episode,
        "airingAt": airing_at,
        "media": {
            "title": {"romaji": romaji, "english": english},
            "averageScore": score,
        },
    }


def envelope(entries, has_next_page=False):
    return json.dumps({
        "data": {
            "Page": {
                "pageInfo": {"hasNextPage": has_next_page},
                "airingSchedules": entries,
            }
        }
    }).encode("utf-8")


def record(airing_at, episode=1, english="", romaji="Romaji", score=0):
    return AiringRecord(
        episode=episode,
        airing_at=airing_at,
        romaji_title=romaji,
        english_title=english,
        average_score=score,
    )
