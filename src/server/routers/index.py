"""This module defines the FastAPI router for the home page of the video link application."""

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse

from videolinks.resolution_cache import ResolutionCache

from ..query_processor import process_query
from ..server_config import EXAMPLE_VIDEOS, FORM_RATE_LIMIT, templates
from ..server_utils import get_resolution_cache, limiter

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def home(request: Request) -> HTMLResponse:
    """
    Render the home page with example video links.

    Parameters
    ----------
    request : Request
        The incoming request object, which provides context for rendering the response.

    Returns
    -------
    HTMLResponse
        An HTML response containing the rendered home page template.
    """
    return templates.TemplateResponse(
        request=request,
        name="index.jinja",
        context={
            "examples": EXAMPLE_VIDEOS,
            "video_url": "",
            "autoplay": False,
            "controls": True,
            "result": False,
        },
    )


@router.post("/", response_class=HTMLResponse)
@limiter.limit(FORM_RATE_LIMIT)
async def index_post(
    request: Request,
    input_text: str = Form(""),
    autoplay: bool = Form(False),
    controls: bool = Form(True),
    cache: ResolutionCache = Depends(get_resolution_cache),
) -> HTMLResponse:
    """
    Resolve the submitted link and render the matching player.

    Parameters
    ----------
    request : Request
        The incoming request object.
    input_text : str
        The video link provided by the user.
    autoplay : bool
        Whether playback should start automatically.
    controls : bool
        Whether player controls are shown.
    cache : ResolutionCache
        The app's resolution cache.

    Returns
    -------
    HTMLResponse
        The home page with an iframe, a video element, or a fallback link.
    """
    return await process_query(
        request,
        input_text,
        cache=cache,
        autoplay=autoplay,
        controls=controls,
    )
