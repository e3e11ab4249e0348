"""
Module: config.py
Description:
    Runtime settings for the weekly airing report.

Usage:
    Imported by other modules; not intended to be executed directly.

Notes:
    Reads configuration from `.env`.
    - Required/used env vars:
        * ANILIST_API_URL
        * REQUEST_TIMEOUT
"""

import os

from utils.env import get_float_env, load_env

# === Load .env ===
load_env()

ANILIST_API_URL = os.getenv("ANILIST_API_URL", "https://graphql.anilist.co")
REQUEST_TIMEOUT = get_float_env("REQUEST_TIMEOUT", 10)

WINDOW_DAYS = 7
PER_PAGE = 100
