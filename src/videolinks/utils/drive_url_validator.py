"""Google Drive share-link validation and file ID extraction.

Drive links reach the application in several shapes. The patterns below are
tried in a fixed precedence so that a URL which could satisfy more than one
shape always yields the same ID:

1. ``/file/d/<id>`` path
2. ``open?id=<id>``
3. ``uc?id=<id>`` and ``uc?export=download&id=<id>``
4. ``folderview?id=<id>``
"""

import re
from typing import List, Optional, Pattern

from .url_utils import host_of

_HOST = r"(?:https?://)?(?:drive|docs)\.google\.com"
_ID_CAPTURE = r"([a-zA-Z0-9_-]+)"

DRIVE_HOSTS = ("drive.google.com", "docs.google.com")


class GoogleDriveURLValidator:
    """Centralized validator for Google Drive file links."""

    URL_PATTERNS: List[Pattern[str]] = [
        re.compile(_HOST + r"/(?:u/\d+/)?file/d/" + _ID_CAPTURE, re.IGNORECASE),
        re.compile(_HOST + r"/open\?(?:[^#]*&)?id=" + _ID_CAPTURE, re.IGNORECASE),
        re.compile(_HOST + r"/uc\?(?:[^#]*&)?id=" + _ID_CAPTURE, re.IGNORECASE),
        re.compile(_HOST + r"/folderview\?(?:[^#]*&)?id=" + _ID_CAPTURE, re.IGNORECASE),
    ]

    @classmethod
    def extract_file_id(cls, url: str) -> Optional[str]:
        """
        Extract the file ID from a Google Drive link.

        Parameters
        ----------
        url : str
            The Drive URL.

        Returns
        -------
        Optional[str]
            The file ID of the highest-precedence matching shape, or None.
        """
        if not url or not isinstance(url, str):
            return None

        candidate = url.strip()
        for pattern in cls.URL_PATTERNS:
            match = pattern.match(candidate)
            if match:
                return match.group(1)
        return None

    @classmethod
    def is_drive_host(cls, url: str) -> bool:
        """Check whether the URL points at a Google Drive domain at all."""
        return host_of(url) in DRIVE_HOSTS

    @classmethod
    def is_valid_drive_url(cls, url: str) -> bool:
        """Check if the URL is a Drive link with an extractable file ID."""
        return cls.extract_file_id(url) is not None

    @classmethod
    def view_url(cls, file_id: str) -> str:
        """Canonical share URL for a file ID."""
        return f"https://drive.google.com/file/d/{file_id}/view"

    @classmethod
    def preview_url(cls, file_id: str) -> str:
        """Embeddable player URL for a file ID."""
        # Drive ignores player query parameters, the suffix is fixed.
        return f"https://drive.google.com/file/d/{file_id}/preview"


def extract_drive_file_id(url: str) -> Optional[str]:
    """Extract Drive file ID. Convenience wrapper around GoogleDriveURLValidator."""
    return GoogleDriveURLValidator.extract_file_id(url)


def is_valid_drive_url(url: str) -> bool:
    """Check if URL is a Drive file link. Convenience wrapper around GoogleDriveURLValidator."""
    return GoogleDriveURLValidator.is_valid_drive_url(url)
