"""Object-storage URI handling for stored video links.

Older submissions were saved as ``s3://bucket/key`` locators, which a browser
cannot fetch. These helpers translate them to HTTPS, recover object keys from
either form, and build time-limited GET URLs for private buckets.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple
from urllib.parse import unquote, urlparse

import boto3
from botocore.exceptions import BotoCoreError, ClientError


logger = logging.getLogger(__name__)

DEFAULT_REGION = "us-east-1"
DEFAULT_SIGNED_URL_EXPIRY = 3600  # In seconds
STORAGE_SCHEME = "s3://"


def is_storage_uri(uri: str) -> bool:
    """Return True if the string uses the ``s3://`` scheme, well-formed or not."""
    if not uri or not isinstance(uri, str):
        return False
    return uri.strip().lower().startswith(STORAGE_SCHEME)


def parse_storage_uri(uri: str) -> Optional[Tuple[str, str]]:
    """Extract ``(bucket, key)`` from an ``s3://`` URI.

    Parameters
    ----------
    uri : str
        e.g. ``s3://my-bucket/path/to/object.mp4``

    Returns
    -------
    Optional[Tuple[str, str]]
        ``(bucket, key)``, or None if the URI is not ``s3://`` or lacks a
        bucket or key segment.
    """
    if not is_storage_uri(uri):
        return None

    remainder = uri.strip()[len(STORAGE_SCHEME):]
    bucket, _, key = remainder.partition("/")
    if not bucket or not key:
        return None
    return bucket, key


def normalize_storage_uri(uri: str, region: Optional[str] = None) -> str:
    """Rewrite an ``s3://bucket/key`` URI to a fetchable HTTPS URL.

    Anything that is not an ``s3://`` URI, including HTTPS, YouTube, Drive and
    data URIs, is returned unchanged. A malformed ``s3://`` URI is also
    returned unchanged with a logged warning, since callers sit on display
    paths where showing the raw string beats failing. Applying the function
    to its own output is a no-op.

    Parameters
    ----------
    uri : str
        The stored locator.
    region : Optional[str]
        Bucket region; ``us-east-1`` when not known.

    Returns
    -------
    str
        ``https://<bucket>.s3.<region>.amazonaws.com/<key>`` or the input.
    """
    if not is_storage_uri(uri):
        return uri

    parsed = parse_storage_uri(uri)
    if parsed is None:
        logger.warning("Malformed storage URI left unchanged: %r", uri)
        return uri

    bucket, key = parsed
    bucket_region = (region or DEFAULT_REGION).strip() or DEFAULT_REGION
    return f"https://{bucket}.s3.{bucket_region}.amazonaws.com/{key}"


def parse_storage_url(url: str) -> Optional[Tuple[str, str]]:
    """Extract ``(bucket, key)`` from an ``s3://`` URI or an HTTPS S3 URL.

    Both virtual-hosted (``bucket.s3.region.amazonaws.com/key``) and
    path-style (``s3.amazonaws.com/bucket/key``) HTTPS forms are accepted.
    """
    parsed_uri = parse_storage_uri(url)
    if parsed_uri is not None:
        return parsed_uri
    if not url or not isinstance(url, str):
        return None

    try:
        parsed = urlparse(url.strip())
    except ValueError:
        return None

    host = (parsed.hostname or "").lower()
    if parsed.scheme not in ("http", "https") or not host.endswith(".amazonaws.com"):
        return None

    path = unquote(parsed.path.lstrip("/"))
    labels = host.split(".")
    if labels[0] == "s3" or labels[0].startswith("s3-"):
        bucket, _, key = path.partition("/")
    elif ".s3." in host or ".s3-" in host:
        bucket = host.split(".s3", 1)[0]
        key = path
    else:
        return None

    if not bucket or not key:
        return None
    return bucket, key


def extract_storage_key(url: str, bucket: Optional[str] = None) -> Optional[str]:
    """Recover the object key a stored video URL points at.

    Parameters
    ----------
    url : str
        An ``s3://`` URI or an HTTPS S3 URL.
    bucket : Optional[str]
        Expected bucket. When given, a key that still starts with the bucket
        name (path-style URLs saved with a doubled prefix) has it stripped.

    Returns
    -------
    Optional[str]
        The key, or None if the URL is not an object-storage URL.
    """
    parsed = parse_storage_url(url)
    if parsed is None:
        return None

    _, key = parsed
    if bucket and key.startswith(f"{bucket}/"):
        key = key[len(bucket) + 1:]
    return key or None


def presign_storage_uri(
    uri: str,
    expires_in: int = DEFAULT_SIGNED_URL_EXPIRY,
    s3_client=None,
    region: Optional[str] = None,
    bucket: Optional[str] = None,
) -> str:
    """Build a time-limited GET URL for a stored object.

    Parameters
    ----------
    uri : str
        An ``s3://`` URI or an HTTPS S3 URL.
    expires_in : int
        Lifetime of the signature in seconds.
    s3_client : optional
        A boto3 S3 client. One is created for ``region`` when omitted.
    region : Optional[str]
        Region used for the client and for the unsigned fallback.
    bucket : Optional[str]
        The video bucket. When given, the object is signed in this bucket and
        a key saved with a doubled bucket prefix is repaired first.

    Returns
    -------
    str
        The presigned URL. If the URI is not an object-storage locator, or
        signing fails, the normalized unsigned URL is returned instead.
    """
    parsed = parse_storage_url(uri)
    if parsed is None:
        return normalize_storage_uri(uri, region)

    if bucket:
        key = extract_storage_key(uri, bucket)
        if key is None:
            return normalize_storage_uri(uri, region)
    else:
        bucket, key = parsed
    bucket_region = (region or DEFAULT_REGION).strip() or DEFAULT_REGION

    try:
        client = s3_client or boto3.client("s3", region_name=bucket_region)
        return client.generate_presigned_url(
            "get_object",
            Params={"Bucket": bucket, "Key": key},
            ExpiresIn=expires_in,
        )
    except (BotoCoreError, ClientError) as exc:
        logger.warning("Could not presign %s/%s, serving unsigned URL: %s", bucket, key, exc)
        return normalize_storage_uri(uri, bucket_region)
