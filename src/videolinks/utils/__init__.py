"""Utilities package for video link processing."""

from .drive_url_validator import GoogleDriveURLValidator, extract_drive_file_id
from .storage_uri import normalize_storage_uri, presign_storage_uri
from .url_utils import has_http_scheme, is_url_shaped
from .youtube_url_validator import YouTubeURLValidator, extract_video_id

__all__ = [
    "GoogleDriveURLValidator",
    "YouTubeURLValidator",
    "extract_drive_file_id",
    "extract_video_id",
    "has_http_scheme",
    "is_url_shaped",
    "normalize_storage_uri",
    "presign_storage_uri",
]
