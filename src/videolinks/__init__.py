"""Video link classification, embedding and storage-URI normalization."""

from .classifier import classify, extract_id
from .embed_builder import build_embed, embed_for_reference
from .resolution_cache import ResolutionCache
from .schemas import (
    EmbedDescriptor,
    EmbedOptions,
    ErrorKind,
    PlaybackStrategy,
    PlayerResolution,
    PlayerState,
    VideoKind,
    VideoReference,
)
from .utils.storage_uri import normalize_storage_uri
from .video_player import VideoPlayer, resolve_video

__all__ = [
    "EmbedDescriptor",
    "EmbedOptions",
    "ErrorKind",
    "PlaybackStrategy",
    "PlayerResolution",
    "PlayerState",
    "ResolutionCache",
    "VideoKind",
    "VideoPlayer",
    "VideoReference",
    "build_embed",
    "classify",
    "embed_for_reference",
    "extract_id",
    "normalize_storage_uri",
    "resolve_video",
]
