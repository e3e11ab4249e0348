"""
Module: renderer.py
Description:
    Rich renderables for the weekly airing report.

Usage:
    Imported by other modules; not intended to be executed directly.

Notes:
    All colors and markers live in `ReportStyle`, passed explicitly so the
    output can be checked as plain text without a terminal.
"""

from dataclasses import dataclass

from rich import box
from rich.panel import Panel
from rich.text import Text

STRONG_SCORE = 75


@dataclass(frozen=True)
class ReportStyle:
    """Neon palette; swap fields to restyle the report."""

    title: str = "bold #FF5FEF"
    episode: str = "bold #00F8D4"
    time: str = "#A0A0A0"
    separator: str = "#A0A0A0"
    score: str = "#FFB86C"
    no_score: str = "italic #A0A0A0"
    day_header: str = "bold underline #BD93FF"
    divider: str = "#444444"
    border: str = "#BD93FF"
    text: str = "#E0E0E0"
    error: str = "bold #FF6B6B"
    note: str = "dim italic"

    strong_marker: str = "🌟"
    pending_marker: str = "📡"
    default_marker: str = "✨"
    day_marker: str = "📺"
    clock_marker: str = "🕒"
    score_marker: str = "★"
    divider_line: str = "╌" * 27


DEFAULT_STYLE = ReportStyle()

EMPTY_MESSAGE = "✨ No new episodes aired in the past week ✨"
TRUNCATED_NOTE = "Only the most recent 100 episodes are shown."

WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def score_marker(score, style=DEFAULT_STYLE):
    if score > STRONG_SCORE:
        return style.strong_marker
    if score == 0:
        return style.pending_marker
    return style.default_marker


def format_score(score, style=DEFAULT_STYLE):
    if score > 0:
        return f"{style.score_marker} {score}/100"
    return f"{style.score_marker} No rating"


def format_clock(moment):
    """12-hour clock without a leading zero, e.g. `3:04 PM`."""
    hour = moment.hour % 12 or 12
    return f"{hour}:{moment:%M} {'AM' if moment.hour < 12 else 'PM'}"


def format_day(day):
    """English weekday and month regardless of LC_TIME, e.g. `Monday (Jan 02)`."""
    return f"{WEEKDAYS[day.weekday()]} ({MONTHS[day.month - 1]} {day.day:02d})"


def show_line(show, style=DEFAULT_STYLE):
    line = Text("  ")
    line.append(f"{score_marker(show.average_score, style)} ")
    line.append(show.title, style=style.title)
    line.append(" • ", style=style.separator)
    line.append(f"Ep {show.episode}", style=style.episode)
    line.append(f"  {style.clock_marker} {format_clock(show.airing_time)}", style=style.time)
    line.append(
        f"  {format_score(show.average_score, style)}",
        style=style.score if show.average_score > 0 else style.no_score,
    )
    return line


def build_report(shows_by_day, style=DEFAULT_STYLE):
    """
    Lays out every day, most recent first, one line per show.
    Day keys are sorted here; shows keep their bucket order.
    """
    output = Text()
    days = sorted(shows_by_day, reverse=True)

    for i, day in enumerate(days):
        output.append(f"{style.day_marker} {format_day(day)}", style=style.day_header)
        output.append("\n")
        output.append(style.divider_line, style=style.divider)
        output.append("\n")

        for show in shows_by_day[day]:
            output.append_text(show_line(show, style))
            output.append("\n")

        if i < len(days) - 1:
            output.append("\n")

    output.rstrip()
    return output


def render_report(shows_by_day, style=DEFAULT_STYLE, truncated=False):
    body = build_report(shows_by_day, style)
    if truncated:
        body.append("\n\n")
        body.append(TRUNCATED_NOTE, style=style.note)
    return _container(body, style)


def render_empty(style=DEFAULT_STYLE):
    return _container(Text(EMPTY_MESSAGE), style)


def render_error(error, style=DEFAULT_STYLE):
    return Text(str(error), style=style.error)


def _container(body, style):
    return Panel.fit(
        body,
        box=box.ROUNDED,
        border_style=style.border,
        style=style.text,
        padding=(1, 2),
    )
