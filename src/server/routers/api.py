"""This module defines the JSON API for classifying and resolving video links."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request

from videolinks.classifier import classify
from videolinks.resolution_cache import ResolutionCache
from videolinks.schemas.video_schema import PlayerResolution, VideoQuery, VideoReference
from videolinks.utils.storage_uri import normalize_storage_uri, parse_storage_url, presign_storage_uri

from ..query_processor import cache_keys_for_url, resolve_query
from ..server_config import RESOLVE_RATE_LIMIT, SIGNED_URL_EXPIRY, STORAGE_REGION, VIDEO_BUCKET
from ..server_utils import get_resolution_cache, limiter

router = APIRouter(prefix="/api")


@router.get("/videos/classify", response_model=VideoReference)
async def classify_video(
    url: str = Query("", description="Raw video link as stored"),
) -> VideoReference:
    """Classify a link without building an embed."""
    return classify(url)


@router.post("/videos/resolve", response_model=PlayerResolution)
@limiter.limit(RESOLVE_RATE_LIMIT)
async def resolve_video_link(
    request: Request,
    query: VideoQuery,
    cache: ResolutionCache = Depends(get_resolution_cache),
) -> PlayerResolution:
    """
    Resolve a link into the player state and embed descriptor.

    Parameters
    ----------
    request : Request
        The incoming request object, required by the rate limiter.
    query : VideoQuery
        The link and player options.
    cache : ResolutionCache
        The app's resolution cache.

    Returns
    -------
    PlayerResolution
        Terminal player state. Unplayable links are a normal 200 response
        carrying the error and, when possible, a fallback URL.
    """
    return resolve_query(query, cache)


@router.get("/storage/normalize")
async def normalize_storage(
    uri: str = Query(..., description="s3:// URI or stored video URL"),
    sign: bool = Query(False, description="Return a time-limited signed URL"),
    region: Optional[str] = Query(None, description="Bucket region override"),
) -> dict:
    """Translate an object-storage locator into a URL a browser can fetch."""
    bucket_region = region or STORAGE_REGION
    if sign and parse_storage_url(uri) is not None:
        return {
            "url": presign_storage_uri(
                uri,
                expires_in=SIGNED_URL_EXPIRY,
                region=bucket_region,
                bucket=VIDEO_BUCKET or None,
            ),
            "signed": True,
        }
    return {"url": normalize_storage_uri(uri, bucket_region), "signed": False}


@router.delete("/cache")
async def invalidate_cache(
    url: Optional[str] = Query(None, description="Only drop entries for this link"),
    cache: ResolutionCache = Depends(get_resolution_cache),
) -> dict:
    """Drop cached resolutions, all of them or those for one link."""
    if url is None:
        return {"invalidated": cache.invalidate()}
    return {"invalidated": sum(cache.invalidate(key) for key in cache_keys_for_url(url))}
