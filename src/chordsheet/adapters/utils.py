"""HTTP and URL helpers shared by the site adapters."""

import logging
from urllib.parse import parse_qs, urlsplit

import httpx

from ..exceptions import FetchError

logger = logging.getLogger(__name__)

# Some sites return 403 without browser-like headers.
BROWSER_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/120.0.0.0 Safari/537.36"
    ),
    "Accept-Language": "en-US,en;q=0.9",
    "Accept": (
        "text/html,application/xhtml+xml,application/xml;q=0.9,"
        "image/webp,*/*;q=0.8"
    ),
}


def fetch_text(url: str, headers: dict[str, str] | None = None) -> str:
    """GET *url* and return the decoded body.

    Raises FetchError for transport errors (status 0) and non-200 responses.
    """
    logger.debug("Fetching %s", url)
    try:
        resp = httpx.get(
            url,
            headers=headers or BROWSER_HEADERS,
            follow_redirects=True,
            timeout=15,
        )
    except httpx.RequestError as exc:
        raise FetchError(url, 0) from exc
    if resp.status_code != 200:
        raise FetchError(url, resp.status_code)
    return resp.text


def query_param(url: str, name: str) -> str | None:
    """Return the first value of query parameter *name* in *url*, if any."""
    values = parse_qs(urlsplit(url).query).get(name)
    return values[0] if values else None
