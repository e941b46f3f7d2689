"""Process a query by resolving a video link into a player description."""

from functools import partial
from itertools import product
from typing import Dict, Hashable, List, Optional

from fastapi import Request
from starlette.templating import _TemplateResponse

from videolinks.embed_builder import player_attributes
from videolinks.resolution_cache import ResolutionCache
from videolinks.schemas.video_schema import PlayerResolution, PlayerState, VideoQuery
from videolinks.utils.storage_uri import presign_storage_uri
from videolinks.video_player import resolve_video

from .server_config import EXAMPLE_VIDEOS, SIGNED_URL_EXPIRY, STORAGE_REGION, VIDEO_BUCKET, templates
from .server_utils import Colors


def cache_key(query: VideoQuery) -> Hashable:
    """Key a query by everything that influences its resolution."""
    return (query.url, query.autoplay, query.controls, query.no_cookie, query.sign)


def cache_keys_for_url(url: str) -> List[Hashable]:
    """Every cache key a link can be stored under, one per option combination."""
    stripped = url.strip()
    return [
        (stripped, autoplay, controls, no_cookie, sign)
        for autoplay, controls, no_cookie, sign in product((False, True), repeat=4)
    ]


def resolve_query(
    query: VideoQuery,
    cache: Optional[ResolutionCache] = None,
) -> PlayerResolution:
    """
    Resolve a validated query, going through the cache when one is given.

    Parameters
    ----------
    query : VideoQuery
        The validated request.
    cache : Optional[ResolutionCache]
        Cache owned by the caller. Signed URLs expire, so its TTL must stay
        below ``SIGNED_URL_EXPIRY``.

    Returns
    -------
    PlayerResolution
        The terminal player resolution.
    """
    signer = (
        partial(
            presign_storage_uri,
            expires_in=SIGNED_URL_EXPIRY,
            region=STORAGE_REGION,
            bucket=VIDEO_BUCKET or None,
        )
        if query.sign
        else None
    )

    def _resolve() -> PlayerResolution:
        return resolve_video(
            query.url,
            options=query.embed_options(),
            region=STORAGE_REGION,
            signer=signer,
        )

    if cache is None:
        resolution = _resolve()
        cached = False
    else:
        resolution, cached = cache.get_or_resolve(cache_key(query), _resolve)

    if resolution.state == PlayerState.UNPLAYABLE:
        _print_error(query.url, resolution.error or "unplayable")
    else:
        _print_success(query.url, resolution, cached)
    return resolution


async def process_query(
    request: Request,
    input_text: str,
    cache: Optional[ResolutionCache] = None,
    autoplay: bool = False,
    controls: bool = True,
) -> _TemplateResponse:
    """
    Resolve a link submitted through the HTML form and render the player page.

    Parameters
    ----------
    request : Request
        The HTTP request object.
    input_text : str
        Text provided by the user, typically a video URL.
    cache : Optional[ResolutionCache]
        The app's resolution cache.
    autoplay : bool
        Start playback automatically.
    controls : bool
        Show player controls.

    Returns
    -------
    _TemplateResponse
        Rendered ``index.jinja`` with the player or an error message.
    """
    template_response = partial(templates.TemplateResponse, request=request, name="index.jinja")

    context: Dict = {
        "video_url": input_text,
        "examples": EXAMPLE_VIDEOS,
        "autoplay": autoplay,
        "controls": controls,
        "resolution": None,
        "player": None,
        "error_message": None,
        "result": False,
    }

    try:
        query = VideoQuery(url=input_text, autoplay=autoplay, controls=controls)
    except ValueError as exc:
        _print_error(input_text, exc)
        context["error_message"] = f"Invalid input: {exc}"
        return template_response(context=context)

    resolution = resolve_query(query, cache)
    context["resolution"] = resolution
    context["result"] = True
    if resolution.descriptor is not None:
        context["player"] = player_attributes(resolution.descriptor)
    if resolution.state == PlayerState.UNPLAYABLE:
        context["error_message"] = f"This link cannot be played here: {resolution.error}"

    return template_response(context=context)


def _print_success(url: str, resolution: PlayerResolution, cached: bool) -> None:
    """Print success message with resolution details."""
    print(f"{Colors.GREEN}INFO{Colors.END}: {Colors.GREEN}<-  {Colors.END}", end="")
    print(f"{Colors.WHITE}{url[:50]:<50}{Colors.END}", end="")
    print(f" | {Colors.PURPLE}Kind: {resolution.reference.kind.value}{Colors.END}", end="")
    print(f" | {Colors.YELLOW}State: {resolution.state.value}{Colors.END}", end="")
    print(f" | {Colors.CYAN}{'cached' if cached else 'resolved'}{Colors.END}")


def _print_error(url: str, error) -> None:
    """Print error message with video URL."""
    print(f"{Colors.BROWN}WARN{Colors.END}: {Colors.RED}<-  {Colors.END}", end="")
    print(f"{Colors.WHITE}{url[:50]:<50}{Colors.END}", end="")
    print(f" | {Colors.RED}{error}{Colors.END}")
