"""
Module: client.py
Description:
    Single-shot HTTP transport for the AniList GraphQL endpoint.

Usage:
    Imported by other modules; not intended to be executed directly.

Notes:
    No retries and no auth headers. The connection is always released
    before returning or raising.
"""

import json

import requests

from airing.config import ANILIST_API_URL, REQUEST_TIMEOUT
from airing.errors import RequestBuildError, ResponseReadError, TransportError

HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


def build_payload(query):
    """Wrap the query in the standard GraphQL envelope and encode it."""
    try:
        return json.dumps({"query": query}).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise RequestBuildError(e) from e


def post_query(payload, url=ANILIST_API_URL, timeout=REQUEST_TIMEOUT, session=None):
    """
    POSTs `payload` and returns the raw response body.
    Raises TransportError or ResponseReadError.
    """
    http = session or requests
    try:
        response = http.post(url, data=payload, headers=HEADERS, timeout=timeout, stream=True)
    except requests.RequestException as e:
        raise TransportError(e) from e

    with response:
        try:
            response.raise_for_status()
        except requests.HTTPError as e:
            raise TransportError(e) from e

        try:
            return response.content
        except (requests.RequestException, OSError) as e:
            raise ResponseReadError(e) from e
