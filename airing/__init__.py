"""
Module: __init__.py
Description:
    Weekly AniList airing report: query, fetch, decode, organize and render.

Usage:
    Imported by `cli.py`; not intended to be executed directly.

Notes:
    Reads configuration from `.env`.
    - Required/used env vars:
        * None required (see `airing/config.py` for optional overrides)
"""
