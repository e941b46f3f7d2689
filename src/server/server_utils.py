"""Server utilities for the video link application."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import Request
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.util import get_remote_address

from videolinks.resolution_cache import ResolutionCache

from .server_config import RESOLUTION_CACHE_MAX_ENTRIES, RESOLUTION_CACHE_TTL


class Colors:
    """ANSI color codes for console output."""
    RED = '\033[91m'
    GREEN = '\033[92m'
    YELLOW = '\033[93m'
    PURPLE = '\033[95m'
    CYAN = '\033[96m'
    WHITE = '\033[97m'
    BROWN = '\033[38;5;130m'
    END = '\033[0m'


def get_client_ip(request: Request) -> str:
    """
    Get the client IP address from the request.

    Parameters
    ----------
    request : Request
        The incoming HTTP request.

    Returns
    -------
    str
        The client IP address.
    """
    return get_remote_address(request)


# Initialize the rate limiter
limiter = Limiter(key_func=get_client_ip)


async def rate_limit_exception_handler(request: Request, exc):
    """
    Handle rate limit exceeded exceptions.

    Parameters
    ----------
    request : Request
        The incoming HTTP request.
    exc : Exception
        The rate limit exception.

    Returns
    -------
    Response
        A response indicating the rate limit was exceeded.
    """
    return _rate_limit_exceeded_handler(request, exc)


def get_resolution_cache(request: Request) -> ResolutionCache:
    """FastAPI dependency returning the cache owned by the running app."""
    return request.app.state.resolution_cache


@asynccontextmanager
async def lifespan(app) -> AsyncGenerator:
    """
    Application lifespan manager.

    Creates the resolution cache on startup and drops it on shutdown.

    Parameters
    ----------
    app : FastAPI
        The FastAPI application instance.

    Yields
    ------
    None
        Yields control during application lifetime.
    """
    app.state.resolution_cache = ResolutionCache(
        ttl_seconds=RESOLUTION_CACHE_TTL,
        max_entries=RESOLUTION_CACHE_MAX_ENTRIES,
    )
    print(f"{Colors.GREEN}Video link server starting up...{Colors.END}")

    yield

    app.state.resolution_cache.invalidate()
    print(f"{Colors.RED}Video link server shutting down...{Colors.END}")
