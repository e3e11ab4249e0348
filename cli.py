"""
Module: cli.py
Description:
    Typer-based command-line entry point printing the anime episodes that aired in the past week.

Usage:
    python cli.py [--no-color]

Notes:
    Reads configuration from `.env`.
    - Required/used env vars:
        * None required; ANILIST_API_URL and REQUEST_TIMEOUT are optional overrides.
    - Exits with status 1 when the request, read or decode step fails.
"""

import typer
from rich.console import Console

from airing.errors import AiringError
from airing.pipeline import weekly_report
from airing.renderer import DEFAULT_STYLE, render_empty, render_error, render_report

console = Console()

app = typer.Typer(help="Weekly Airing – anime episodes aired in the past 7 days, from AniList.")


@app.command()
def weekly(
    no_color: bool = typer.Option(False, "--no-color", help="Print without colors or text styles."),
):
    """
    Fetch the past week's airing schedule and print it grouped by UTC day.
    """
    out = Console(no_color=True, highlight=False) if no_color else console

    try:
        with out.status("[dim]Fetching airing schedule from AniList...[/dim]"):
            report = weekly_report()
    except AiringError as e:
        out.print(render_error(e, DEFAULT_STYLE))
        raise typer.Exit(code=1)

    if not report.buckets:
        out.print(render_empty(DEFAULT_STYLE))
        return

    out.print(render_report(report.buckets, DEFAULT_STYLE, truncated=report.truncated))


# === ENTRY POINT ===
if __name__ == "__main__":
    app()
