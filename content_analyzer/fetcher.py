"""
Page fetching for the Web Content Analyzer.

Requests carry a desktop-browser header set so that sites doing trivial
User-Agent filtering still serve the page.
"""

import logging

import requests

from .errors import FetchError

logger = logging.getLogger(__name__)

USER_AGENT = 'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36'

BROWSER_HEADERS = {
    'User-Agent': USER_AGENT,
    'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8',
    'Accept-Language': 'en-US,en;q=0.5',
    'Accept-Encoding': 'gzip, deflate',
    'Connection': 'keep-alive',
    'Cache-Control': 'max-age=0',
}

DEFAULT_TIMEOUT = 30.0


def fetch_webpage(url: str, timeout: float = DEFAULT_TIMEOUT) -> str:
    """
    Fetch a webpage and return its body as text.

    Args:
        url: Page to fetch
        timeout: Seconds to wait for connect and for each read

    Returns:
        The full response body, uncapped

    Raises:
        FetchError: on transport failure or a status outside 2xx/3xx
    """
    try:
        response = requests.get(url, headers=BROWSER_HEADERS, timeout=timeout, allow_redirects=True)
    except requests.exceptions.Timeout as e:
        raise FetchError('Request timed out', cause=e) from e
    except requests.exceptions.RequestException as e:
        raise FetchError(f'Request failed: {e}', cause=e) from e

    # requests' ok is False for any status >= 400
    if not response.ok:
        raise FetchError(f'HTTP error! status: {response.status_code}', upstream_status=response.status_code)

    # Without a declared charset requests assumes ISO-8859-1 for text/*
    if 'charset' not in response.headers.get('Content-Type', '').lower():
        response.encoding = 'utf-8'

    logger.debug("Fetched %s (%d bytes)", url, len(response.content))
    return response.text
