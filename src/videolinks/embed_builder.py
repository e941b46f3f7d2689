"""Build embed descriptors for classified video links."""

from typing import Dict, Optional

from .schemas.video_schema import (
    EmbedDescriptor,
    EmbedOptions,
    PlaybackStrategy,
    VideoKind,
    VideoReference,
)
from .utils.drive_url_validator import GoogleDriveURLValidator
from .utils.storage_uri import normalize_storage_uri
from .utils.youtube_url_validator import YouTubeURLValidator

IFRAME_ALLOW = "accelerometer; autoplay; clipboard-write; encrypted-media; gyroscope; picture-in-picture"

DEFAULT_OPTIONS = EmbedOptions()


def build_embed(
    kind: VideoKind,
    resource_id: Optional[str],
    options: Optional[EmbedOptions] = None,
    raw_url: Optional[str] = None,
    region: Optional[str] = None,
) -> EmbedDescriptor:
    """
    Build the embed descriptor for a platform identifier.

    The output depends only on the arguments, so repeated calls with the same
    input return equal descriptors.

    Parameters
    ----------
    kind : VideoKind
        Platform of the link.
    resource_id : Optional[str]
        Video ID, Drive file ID, or ``bucket/key``. Direct links may pass the
        URL itself here instead of ``raw_url``.
    options : Optional[EmbedOptions]
        Player options. Only YouTube honours them.
    raw_url : Optional[str]
        The link as stored, used for direct and storage links.
    region : Optional[str]
        Bucket region for object-storage links.

    Returns
    -------
    EmbedDescriptor
        The display URL, the iframe URL and thumbnail if any, and the
        playback strategy.
    """
    opts = options or DEFAULT_OPTIONS
    source = (raw_url or "").strip()

    if kind == VideoKind.YOUTUBE and resource_id:
        return EmbedDescriptor(
            display_url=YouTubeURLValidator.watch_url(resource_id),
            embed_url=YouTubeURLValidator.embed_url(
                resource_id,
                autoplay=opts.autoplay,
                controls=opts.controls,
                no_cookie=opts.no_cookie,
            ),
            thumbnail_url=YouTubeURLValidator.thumbnail_url(resource_id),
            playback_strategy=PlaybackStrategy.IFRAME,
        )

    if kind == VideoKind.GOOGLE_DRIVE and resource_id:
        return EmbedDescriptor(
            display_url=GoogleDriveURLValidator.view_url(resource_id),
            embed_url=GoogleDriveURLValidator.preview_url(resource_id),
            playback_strategy=PlaybackStrategy.IFRAME,
        )

    if kind == VideoKind.DIRECT and (source or resource_id):
        return EmbedDescriptor(
            display_url=source or resource_id.strip(),
            playback_strategy=PlaybackStrategy.NATIVE_VIDEO,
        )

    if kind == VideoKind.OBJECT_STORAGE and (source or resource_id):
        uri = source or f"s3://{resource_id}"
        return EmbedDescriptor(
            display_url=normalize_storage_uri(uri, region),
            playback_strategy=PlaybackStrategy.NATIVE_VIDEO,
        )

    return EmbedDescriptor(
        display_url=source,
        playback_strategy=PlaybackStrategy.UNPLAYABLE,
    )


def embed_for_reference(
    reference: VideoReference,
    options: Optional[EmbedOptions] = None,
    region: Optional[str] = None,
) -> EmbedDescriptor:
    """Build the descriptor for an already classified reference."""
    return build_embed(
        reference.kind,
        reference.resource_id,
        options=options,
        raw_url=reference.raw_url,
        region=region,
    )


def player_attributes(descriptor: EmbedDescriptor) -> Dict[str, str]:
    """HTML attributes the rendering layer should set on the player element."""
    if descriptor.playback_strategy == PlaybackStrategy.IFRAME:
        return {
            "src": descriptor.embed_url or "",
            "allow": IFRAME_ALLOW,
            "allowfullscreen": "true",
            "frameborder": "0",
        }
    if descriptor.playback_strategy == PlaybackStrategy.NATIVE_VIDEO:
        # iOS Safari goes fullscreen without playsinline
        return {
            "src": descriptor.display_url,
            "controls": "true",
            "playsinline": "true",
            "preload": "metadata",
        }
    return {}
