"""Configuration for the video link server."""

import os
from pathlib import Path
from typing import Dict, List

from dotenv import load_dotenv
from fastapi.templating import Jinja2Templates

load_dotenv()

STORAGE_REGION: str = (
    os.getenv("VIDEO_STORAGE_REGION") or os.getenv("AWS_REGION") or "us-east-1"
).strip()
VIDEO_BUCKET: str = os.getenv("VIDEO_BUCKET", "")
SIGNED_URL_EXPIRY: int = int(os.getenv("SIGNED_URL_EXPIRY", "3600"))  # In seconds
RESOLUTION_CACHE_TTL: int = int(os.getenv("RESOLUTION_CACHE_TTL", "300"))  # In seconds
RESOLUTION_CACHE_MAX_ENTRIES: int = int(os.getenv("RESOLUTION_CACHE_MAX_ENTRIES", "1024"))
RESOLVE_RATE_LIMIT: str = os.getenv("RESOLVE_RATE_LIMIT", "60/minute")
FORM_RATE_LIMIT: str = os.getenv("FORM_RATE_LIMIT", "10/minute")

EXAMPLE_VIDEOS: List[Dict[str, str]] = [
    {"name": "YouTube watch link", "url": "https://www.youtube.com/watch?v=dQw4w9WgXcQ&feature=share"},
    {"name": "YouTube short link", "url": "https://youtu.be/dQw4w9WgXcQ?t=42"},
    {"name": "Google Drive share", "url": "https://drive.google.com/file/d/1ABC123xyz/view?usp=sharing"},
    {"name": "Legacy storage URI", "url": "s3://my-bucket/video-submissions/user1/clip.webm"},
]

# Get the absolute path to templates directory
BASE_DIR = Path(__file__).parent
TEMPLATES_DIR = BASE_DIR / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
