"""Main module for the video link FastAPI application."""

import logging

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded

from .routers.api import router as api
from .routers.index import router as index
from .server_utils import lifespan, limiter, rate_limit_exception_handler

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

app = FastAPI(title="ClassCast video links", lifespan=lifespan)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, rate_limit_exception_handler)


@app.get("/health")
async def health_check() -> JSONResponse:
    """Liveness probe."""
    return JSONResponse(content={"status": "healthy"})


app.include_router(index)
app.include_router(api)
