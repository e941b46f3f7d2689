"""Video player facade: pick a rendering strategy for a stored link.

A player starts ``UNRESOLVED`` and moves to exactly one terminal state on
:meth:`VideoPlayer.resolve`. Classification is deterministic, so an
``UNPLAYABLE`` outcome is final and is never retried.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from .classifier import classify
from .embed_builder import embed_for_reference
from .schemas.video_schema import (
    EmbedDescriptor,
    EmbedOptions,
    PlaybackStrategy,
    PlayerResolution,
    PlayerState,
    VideoKind,
)
from .utils.url_utils import has_http_scheme

logger = logging.getLogger(__name__)

Signer = Callable[[str], str]

_STATE_FOR_STRATEGY = {
    PlaybackStrategy.IFRAME: PlayerState.EMBEDDABLE,
    PlaybackStrategy.NATIVE_VIDEO: PlayerState.NATIVE_PLAYABLE,
    PlaybackStrategy.UNPLAYABLE: PlayerState.UNPLAYABLE,
}


class VideoPlayer:
    """Resolve one raw link into a terminal player state."""

    def __init__(
        self,
        raw_url: str,
        options: Optional[EmbedOptions] = None,
        region: Optional[str] = None,
        signer: Optional[Signer] = None,
    ):
        self.raw_url = raw_url
        self.options = options
        self.region = region
        self.signer = signer
        self.state = PlayerState.UNRESOLVED
        self._resolution: Optional[PlayerResolution] = None

    @property
    def resolved(self) -> bool:
        return self.state != PlayerState.UNRESOLVED

    def resolve(self) -> PlayerResolution:
        """
        Classify the link and build its descriptor.

        Returns
        -------
        PlayerResolution
            The terminal resolution. Later calls return the same object.
        """
        if self._resolution is not None:
            return self._resolution

        reference = classify(self.raw_url)
        descriptor = embed_for_reference(reference, self.options, self.region)

        if reference.kind == VideoKind.OBJECT_STORAGE and self.signer is not None:
            descriptor = EmbedDescriptor(
                display_url=self.signer(reference.raw_url.strip()),
                playback_strategy=descriptor.playback_strategy,
            )

        state = _STATE_FOR_STRATEGY[descriptor.playback_strategy]
        if state == PlayerState.UNPLAYABLE:
            stripped = (self.raw_url or "").strip()
            logger.debug("Unplayable video link %r: %s", stripped[:80], reference.error)
            self._resolution = PlayerResolution(
                state=state,
                reference=reference,
                descriptor=descriptor,
                error=reference.error,
                fallback_url=stripped if has_http_scheme(stripped) else None,
            )
        else:
            self._resolution = PlayerResolution(
                state=state,
                reference=reference,
                descriptor=descriptor,
            )

        self.state = state
        return self._resolution


def resolve_video(
    raw_url: str,
    options: Optional[EmbedOptions] = None,
    region: Optional[str] = None,
    signer: Optional[Signer] = None,
) -> PlayerResolution:
    """Resolve a raw link in one call. See :class:`VideoPlayer`."""
    return VideoPlayer(raw_url, options=options, region=region, signer=signer).resolve()
