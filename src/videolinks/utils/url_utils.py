"""Generic URL shape helpers shared by the platform validators."""

import re
from typing import Optional
from urllib.parse import urlparse

_SCHEME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*:\S+$")
_HTTP_RE = re.compile(r"^https?://[^\s/?#]+\S*$", re.IGNORECASE)


def has_http_scheme(url: str) -> bool:
    """
    Check if a string is an absolute http(s) URL with a host and no whitespace.

    Parameters
    ----------
    url : str
        The candidate URL.

    Returns
    -------
    bool
        True for ``http://host...`` or ``https://host...``.
    """
    if not url or not isinstance(url, str):
        return False
    return _HTTP_RE.match(url.strip()) is not None


def is_url_shaped(url: str) -> bool:
    """Check if a string looks like ``scheme:rest`` with no embedded whitespace."""
    if not url or not isinstance(url, str):
        return False
    return _SCHEME_RE.match(url.strip()) is not None


def host_of(url: str) -> Optional[str]:
    """
    Return the lower-cased host of a URL, tolerating a missing scheme.

    Parameters
    ----------
    url : str
        The URL to inspect, e.g. ``www.youtube.com/watch?v=...``.

    Returns
    -------
    Optional[str]
        The host without port, or None if there is none.
    """
    if not url or not isinstance(url, str):
        return None

    candidate = url.strip()
    if "://" not in candidate:
        candidate = "https://" + candidate

    try:
        host = urlparse(candidate).hostname
    except ValueError:
        return None
    return host.lower() if host else None
