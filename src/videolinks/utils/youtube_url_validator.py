"""Centralized YouTube URL validation, ID extraction and embed URL building.

Every YouTube pattern the application recognizes lives in this module, so
classification, player pages and API responses agree on what counts as a
YouTube link.
"""

import re
from typing import List, Optional, Pattern
from urllib.parse import urlencode

from .url_utils import host_of

_ID_CAPTURE = r"([^&\n?#/]+)"
_HOST = r"(?:https?://)?(?:www\.|m\.|music\.)?youtube(?:-nocookie)?\.com"

YOUTUBE_HOSTS = (
    "youtube.com",
    "www.youtube.com",
    "m.youtube.com",
    "music.youtube.com",
    "youtube-nocookie.com",
    "www.youtube-nocookie.com",
    "youtu.be",
)


class YouTubeURLValidator:
    """Centralized validator for YouTube URLs with ordered pattern support."""

    # Order matters: the first pattern that matches wins.
    URL_PATTERNS: List[Pattern[str]] = [
        # Standard watch URLs, the first v parameter wins
        re.compile(_HOST + r"/watch\?(?:[^#]*?&)??v=" + _ID_CAPTURE, re.IGNORECASE),
        # Shortened URLs
        re.compile(r"(?:https?://)?(?:www\.)?youtu\.be/" + _ID_CAPTURE, re.IGNORECASE),
        # Embed URLs
        re.compile(_HOST + r"/embed/" + _ID_CAPTURE, re.IGNORECASE),
        # Direct video URLs
        re.compile(_HOST + r"/v/" + _ID_CAPTURE, re.IGNORECASE),
        # Shorts
        re.compile(_HOST + r"/shorts/" + _ID_CAPTURE, re.IGNORECASE),
    ]

    VIDEO_ID_RE: Pattern[str] = re.compile(r"^[a-zA-Z0-9_-]{11}$")

    EMBED_BASE = "https://www.youtube.com/embed/"
    NOCOOKIE_EMBED_BASE = "https://www.youtube-nocookie.com/embed/"
    THUMBNAIL_BASE = "https://img.youtube.com/vi/"
    THUMBNAIL_QUALITIES = ("maxresdefault", "hqdefault", "mqdefault")

    @classmethod
    def extract_video_id(cls, url: str) -> Optional[str]:
        """
        Extract video ID from the supported YouTube URL formats.

        Patterns are tried in order and the first match wins. The captured
        text stops at the first ``&``, newline, ``?``, ``#`` or ``/`` and
        must then be a well-formed 11-character ID.

        Parameters
        ----------
        url : str
            The YouTube URL to extract video ID from.

        Returns
        -------
        Optional[str]
            The 11-character video ID if found, None otherwise.
        """
        if not url or not isinstance(url, str):
            return None

        candidate = url.strip()
        for pattern in cls.URL_PATTERNS:
            match = pattern.match(candidate)
            if match:
                video_id = match.group(1)
                if cls._is_valid_video_id(video_id):
                    return video_id
                return None

        return None

    @classmethod
    def is_youtube_host(cls, url: str) -> bool:
        """Check whether the URL points at a YouTube domain at all."""
        return host_of(url) in YOUTUBE_HOSTS

    @classmethod
    def is_valid_youtube_url(cls, url: str) -> bool:
        """
        Check if a URL is a valid YouTube URL.

        Parameters
        ----------
        url : str
            The URL to validate.

        Returns
        -------
        bool
            True if valid YouTube URL with extractable video ID, False otherwise.
        """
        return cls.extract_video_id(url) is not None

    @classmethod
    def watch_url(cls, video_id: str) -> str:
        """Canonical watch URL for a video ID."""
        return f"https://www.youtube.com/watch?v={video_id}"

    @classmethod
    def embed_url(
        cls,
        video_id: str,
        autoplay: bool = False,
        controls: bool = True,
        no_cookie: bool = True,
    ) -> str:
        """
        Build the iframe embed URL for a video ID.

        Query parameters are emitted in a fixed order so that identical
        arguments always produce an identical string.

        Parameters
        ----------
        video_id : str
            The 11-character video ID.
        autoplay : bool
            Append ``autoplay=1``.
        controls : bool
            When False, append ``controls=0``.
        no_cookie : bool
            Use the youtube-nocookie.com domain.

        Returns
        -------
        str
            The embed URL.
        """
        base = cls.NOCOOKIE_EMBED_BASE if no_cookie else cls.EMBED_BASE
        params = [("rel", "0"), ("modestbranding", "1")]
        if autoplay:
            params.append(("autoplay", "1"))
        if not controls:
            params.append(("controls", "0"))
        return f"{base}{video_id}?{urlencode(params)}"

    @classmethod
    def thumbnail_url(cls, video_id: str, quality: str = "hqdefault") -> str:
        """
        Build the still image URL YouTube serves for a video.

        Parameters
        ----------
        video_id : str
            The 11-character video ID.
        quality : str
            One of ``THUMBNAIL_QUALITIES``. ``maxresdefault`` is missing for
            some uploads, ``hqdefault`` always exists.

        Returns
        -------
        str
            The thumbnail URL.
        """
        if quality not in cls.THUMBNAIL_QUALITIES:
            raise ValueError(f"Unknown thumbnail quality: {quality}")
        return f"{cls.THUMBNAIL_BASE}{video_id}/{quality}.jpg"

    @classmethod
    def thumbnail_urls(cls, video_id: str) -> List[str]:
        """Thumbnail URLs from best to smallest, for image fallback chains."""
        return [cls.thumbnail_url(video_id, quality) for quality in cls.THUMBNAIL_QUALITIES]

    @classmethod
    def normalize_youtube_url(cls, url: str) -> Optional[str]:
        """
        Normalize a YouTube URL to standard format.

        Parameters
        ----------
        url : str
            The YouTube URL to normalize.

        Returns
        -------
        Optional[str]
            Normalized YouTube URL (https://www.youtube.com/watch?v=VIDEO_ID)
            or None if invalid.
        """
        video_id = cls.extract_video_id(url)
        if video_id:
            return cls.watch_url(video_id)
        return None

    @classmethod
    def _is_valid_video_id(cls, video_id: str) -> bool:
        # Exactly 11 characters from [A-Za-z0-9_-]
        if not video_id or not isinstance(video_id, str):
            return False
        return cls.VIDEO_ID_RE.match(video_id) is not None


def extract_video_id(url: str) -> Optional[str]:
    """Extract video ID from YouTube URL. Convenience wrapper around YouTubeURLValidator."""
    return YouTubeURLValidator.extract_video_id(url)


def is_valid_youtube_url(url: str) -> bool:
    """Check if URL is valid YouTube URL. Convenience wrapper around YouTubeURLValidator."""
    return YouTubeURLValidator.is_valid_youtube_url(url)


def normalize_youtube_url(url: str) -> Optional[str]:
    """Normalize YouTube URL. Convenience wrapper around YouTubeURLValidator."""
    return YouTubeURLValidator.normalize_youtube_url(url)
