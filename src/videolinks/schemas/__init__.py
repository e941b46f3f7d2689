"""Schemas package for data validation and models."""

from .video_schema import (
    EmbedDescriptor,
    EmbedOptions,
    ErrorKind,
    PlaybackStrategy,
    PlayerResolution,
    PlayerState,
    VideoKind,
    VideoQuery,
    VideoReference,
)

__all__ = [
    "EmbedDescriptor",
    "EmbedOptions",
    "ErrorKind",
    "PlaybackStrategy",
    "PlayerResolution",
    "PlayerState",
    "VideoKind",
    "VideoQuery",
    "VideoReference",
]
