"""
Module: decoder.py
Description:
    Turns the raw AniList response body into `AiringRecord` values.

Usage:
    Imported by other modules; not intended to be executed directly.
"""

import json
import math

from airing.errors import DecodeError
from airing.models import AiringPage, AiringRecord

# 0001-01-01T00:00:00Z .. 9999-12-31T23:59:59Z, the span a datetime can hold
MIN_AIRING_AT = -62135596800
MAX_AIRING_AT = 253402300799


def _int(value, name):
    # null, missing and non-numeric values all collapse to zero
    if isinstance(value, bool):
        return 0
    if isinstance(value, float) and not math.isfinite(value):
        raise DecodeError(f"{name} is not a finite number: {value}")
    if isinstance(value, (int, float)):
        return int(value)
    return 0


def _str(value):
    return value if isinstance(value, str) else ""


def _object(value, name):
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise DecodeError(f"expected an object for {name}, got {type(value).__name__}")
    return value


def _graphql_errors(envelope):
    errors = envelope.get("errors")
    if not isinstance(errors, list):
        errors = []
    messages = [e.get("message") for e in errors if isinstance(e, dict)]
    return "; ".join(m for m in messages if isinstance(m, str) and m)


def decode_record(entry):
    if not isinstance(entry, dict):
        raise DecodeError(f"expected an object in airingSchedules, got {type(entry).__name__}")

    media = _object(entry.get("media"), "media")
    title = _object(media.get("title"), "media.title")

    airing_at = _int(entry.get("airingAt"), "airingAt")
    if not MIN_AIRING_AT <= airing_at <= MAX_AIRING_AT:
        raise DecodeError(f"airingAt out of range: {airing_at}")

    return AiringRecord(
        episode=_int(entry.get("episode"), "episode"),
        airing_at=airing_at,
        romaji_title=_str(title.get("romaji")),
        english_title=_str(title.get("english")),
        average_score=_int(media.get("averageScore"), "averageScore"),
    )


def decode_response(raw):
    """
    Parses `{"data": {"Page": {"airingSchedules": [...]}}}`.
    Any other top-level shape raises DecodeError.
    """
    try:
        envelope = json.loads(raw)
    except (TypeError, ValueError) as e:
        raise DecodeError(e) from e

    if not isinstance(envelope, dict):
        raise DecodeError("response is not a JSON object")

    data = envelope.get("data")
    page = data.get("Page") if isinstance(data, dict) else None
    schedules = page.get("airingSchedules") if isinstance(page, dict) else None
    if not isinstance(schedules, list):
        detail = _graphql_errors(envelope)
        raise DecodeError(detail or "missing data.Page.airingSchedules")

    page_info = page.get("pageInfo")
    if not isinstance(page_info, dict):
        page_info = {}
    return AiringPage(
        records=tuple(decode_record(entry) for entry in schedules),
        has_next_page=bool(page_info.get("hasNextPage", False)),
    )
