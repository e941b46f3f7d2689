"""Schema definitions for video link classification and embedding."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

MAX_URL_LENGTH: int = 2048


class VideoKind(str, Enum):
    """Platform a raw video link belongs to."""

    YOUTUBE = "youtube"
    GOOGLE_DRIVE = "google_drive"
    DIRECT = "direct"
    OBJECT_STORAGE = "object_storage"
    UNKNOWN = "unknown"


class PlaybackStrategy(str, Enum):
    """How a rendering layer should present a resolved link."""

    IFRAME = "iframe"
    NATIVE_VIDEO = "native_video"
    UNPLAYABLE = "unplayable"


class ErrorKind(str, Enum):
    """Why a link could not be classified."""

    INVALID_INPUT = "invalid_input"
    UNRECOGNIZED_FORMAT = "unrecognized_format"
    MALFORMED_STORAGE_URI = "malformed_storage_uri"


class PlayerState(str, Enum):
    """States of the video player facade."""

    UNRESOLVED = "unresolved"
    EMBEDDABLE = "embeddable"
    NATIVE_PLAYABLE = "native_playable"
    UNPLAYABLE = "unplayable"


class VideoReference(BaseModel):
    """Schema for a classified video link.

    Always re-derived from the stored raw string, never persisted.
    """

    model_config = ConfigDict(frozen=True)

    raw_url: str
    kind: VideoKind
    resource_id: Optional[str] = None
    is_valid: bool = True
    error: Optional[str] = None
    error_kind: Optional[ErrorKind] = None


class EmbedOptions(BaseModel):
    """Player options applied when building an embed URL."""

    model_config = ConfigDict(frozen=True)

    autoplay: bool = False
    controls: bool = True
    no_cookie: bool = True


class EmbedDescriptor(BaseModel):
    """Schema for what the rendering layer needs to show a video."""

    model_config = ConfigDict(frozen=True)

    display_url: str
    embed_url: Optional[str] = None
    thumbnail_url: Optional[str] = None
    playback_strategy: PlaybackStrategy


class PlayerResolution(BaseModel):
    """Terminal outcome of resolving a link through the player facade."""

    model_config = ConfigDict(frozen=True)

    state: PlayerState
    reference: VideoReference
    descriptor: Optional[EmbedDescriptor] = None
    error: Optional[str] = None
    fallback_url: Optional[str] = None


class VideoQuery(BaseModel):
    """Schema for video resolution request parameters."""

    url: str
    autoplay: bool = False
    controls: bool = True
    no_cookie: bool = True
    sign: bool = False

    @field_validator("url")
    @classmethod
    def validate_url_length(cls, v: str) -> str:
        """Strip the URL and reject oversized input."""
        v = v.strip()
        if len(v) > MAX_URL_LENGTH:
            raise ValueError(f"URL must be at most {MAX_URL_LENGTH} characters")
        return v

    def embed_options(self) -> EmbedOptions:
        """Build the embed options carried by this query."""
        return EmbedOptions(
            autoplay=self.autoplay,
            controls=self.controls,
            no_cookie=self.no_cookie,
        )
