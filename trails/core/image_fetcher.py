"""Fetches artwork bytes over HTTP(S).

Deliberately simple: one GET per call, no retries, no deduplication and no
disk cache. Callers that want the bytes twice fetch them twice.
"""

from __future__ import annotations

import logging
from urllib.parse import urlparse

import requests

from trails.utils.i18n import t
from trails.version import __app_name__, __version__

__all__ = ["fetch_image", "is_fetchable_url"]

logger = logging.getLogger("trails.image_fetcher")

_HEADERS = {"User-Agent": f"{__app_name__}/{__version__}"}
_USE_CONFIG_TIMEOUT = object()


def is_fetchable_url(url: str | None) -> bool:
    """Check whether a URL is worth a network attempt.

    Args:
        url: Candidate image URL.

    Returns:
        True for non-empty http(s) URLs with a host.
    """
    if not url:
        return False
    try:
        parsed = urlparse(url)
    except ValueError:
        return False
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def fetch_image(
    url: str | None,
    session: requests.Session | None = None,
    timeout=_USE_CONFIG_TIMEOUT,
) -> bytes | None:
    """Download an image.

    Args:
        url: The image URL.
        session: Optional session to reuse connections.
        timeout: Request timeout in seconds. Defaults to the configured
            IMAGE_TIMEOUT, where None means the transport default.

    Returns:
        The response body, or None when the URL is invalid or the request
        failed. Invalid URLs never touch the network.
    """
    if not is_fetchable_url(url):
        logger.debug(t("logs.image.invalid_url", url=url or ""))
        return None

    if timeout is _USE_CONFIG_TIMEOUT:
        from trails.config import config

        timeout = config.IMAGE_TIMEOUT

    getter = session.get if session is not None else requests.get
    try:
        response = getter(url, headers=_HEADERS, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        logger.warning(t("logs.image.fetch_failed", url=url, error=e))
        return None

    return response.content
