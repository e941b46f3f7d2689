"""Classify raw video links and extract their platform identifiers.

This is the single place where a stored link string is turned into a
:class:`VideoReference`. Malformed input is routine user data, so nothing here
raises for string input: problems are reported on the returned reference.
"""

from typing import Optional

from .schemas.video_schema import ErrorKind, VideoKind, VideoReference
from .utils.drive_url_validator import GoogleDriveURLValidator
from .utils.storage_uri import is_storage_uri, parse_storage_uri
from .utils.url_utils import has_http_scheme, is_url_shaped
from .utils.youtube_url_validator import YouTubeURLValidator

EMPTY_INPUT = "empty input"
NOT_A_URL = "not a URL"
MALFORMED_STORAGE_URI = "malformed storage URI"
UNRECOGNIZED_YOUTUBE_URL = "unrecognized YouTube URL"
UNRECOGNIZED_DRIVE_URL = "unrecognized Google Drive URL"
UNSUPPORTED_SCHEME = "unsupported URL scheme"


def extract_id(raw_url: str, kind: VideoKind) -> Optional[str]:
    """
    Pull the platform-specific identifier out of a link.

    Parameters
    ----------
    raw_url : str
        The link as stored.
    kind : VideoKind
        Which platform's patterns to apply.

    Returns
    -------
    Optional[str]
        The YouTube video ID, the Drive file ID, or ``bucket/key`` for object
        storage. None when nothing matches or the kind carries no identifier.
    """
    if kind == VideoKind.YOUTUBE:
        return YouTubeURLValidator.extract_video_id(raw_url)
    if kind == VideoKind.GOOGLE_DRIVE:
        return GoogleDriveURLValidator.extract_file_id(raw_url)
    if kind == VideoKind.OBJECT_STORAGE:
        parsed = parse_storage_uri(raw_url)
        if parsed:
            return "/".join(parsed)
    return None


def classify(raw_url: str) -> VideoReference:
    """
    Classify a raw link.

    Parameters
    ----------
    raw_url : str
        Arbitrary user-supplied text; may be empty or malformed.

    Returns
    -------
    VideoReference
        The classified reference. ``kind`` is ``UNKNOWN`` and ``is_valid`` is
        False when the input cannot be played, with ``error`` explaining why.
    """
    if raw_url is None or not isinstance(raw_url, str):
        raw_url = ""

    url = raw_url.strip()
    if not url:
        return _unknown(raw_url, EMPTY_INPUT, ErrorKind.INVALID_INPUT)

    if is_storage_uri(url):
        resource_id = extract_id(url, VideoKind.OBJECT_STORAGE)
        if resource_id is None:
            return _unknown(raw_url, MALFORMED_STORAGE_URI, ErrorKind.MALFORMED_STORAGE_URI)
        return VideoReference(raw_url=raw_url, kind=VideoKind.OBJECT_STORAGE, resource_id=resource_id)

    for kind in (VideoKind.YOUTUBE, VideoKind.GOOGLE_DRIVE):
        resource_id = extract_id(url, kind)
        if resource_id:
            return VideoReference(raw_url=raw_url, kind=kind, resource_id=resource_id)

    web_like = has_http_scheme(url) or "://" not in url

    # Platform hosts whose path carries no playable ID (channels, folders)
    if web_like and YouTubeURLValidator.is_youtube_host(url):
        return _unknown(raw_url, UNRECOGNIZED_YOUTUBE_URL, ErrorKind.UNRECOGNIZED_FORMAT)
    if web_like and GoogleDriveURLValidator.is_drive_host(url):
        return _unknown(raw_url, UNRECOGNIZED_DRIVE_URL, ErrorKind.UNRECOGNIZED_FORMAT)

    if has_http_scheme(url):
        return VideoReference(raw_url=raw_url, kind=VideoKind.DIRECT)

    # http(s) prefix without a usable host, or with embedded whitespace
    if url.lower().startswith(("http://", "https://")):
        return _unknown(raw_url, NOT_A_URL, ErrorKind.INVALID_INPUT)

    if is_url_shaped(url) and ("://" in url or url.lower().startswith("data:")):
        return _unknown(raw_url, UNSUPPORTED_SCHEME, ErrorKind.UNRECOGNIZED_FORMAT)

    return _unknown(raw_url, NOT_A_URL, ErrorKind.INVALID_INPUT)


def _unknown(raw_url: str, error: str, error_kind: ErrorKind) -> VideoReference:
    return VideoReference(
        raw_url=raw_url,
        kind=VideoKind.UNKNOWN,
        is_valid=False,
        error=error,
        error_kind=error_kind,
    )
