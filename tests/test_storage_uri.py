"""Tests for storage_uri module."""

import logging
from unittest.mock import MagicMock

import boto3
import pytest
from botocore.exceptions import ClientError

from videolinks.utils.storage_uri import (
    extract_storage_key,
    normalize_storage_uri,
    parse_storage_uri,
    parse_storage_url,
    presign_storage_uri,
)

CLIP_URI = "s3://my-bucket/video-submissions/user1/clip.webm"
CLIP_URL = "https://my-bucket.s3.us-east-1.amazonaws.com/video-submissions/user1/clip.webm"


class TestNormalizeStorageUri:
    def test_rewrites_to_default_region(self):
        assert normalize_storage_uri(CLIP_URI) == CLIP_URL

    def test_explicit_region(self):
        assert normalize_storage_uri("s3://b/k.mp4", region="eu-west-1") == (
            "https://b.s3.eu-west-1.amazonaws.com/k.mp4"
        )

    @pytest.mark.parametrize(
        "value",
        [
            CLIP_URL,
            "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
            "https://drive.google.com/file/d/1ABC123xyz/view",
            "data:video/mp4;base64,AAAA",
            "",
            "not a url",
        ],
    )
    def test_pass_through(self, value):
        assert normalize_storage_uri(value) == value

    @pytest.mark.parametrize("value", ["s3://", "s3://bucket-only", "s3://bucket/", "s3:///key.mp4"])
    def test_malformed_returned_unchanged_with_warning(self, value, caplog):
        with caplog.at_level(logging.WARNING, logger="videolinks.utils.storage_uri"):
            assert normalize_storage_uri(value) == value
        assert "Malformed storage URI" in caplog.text

    @pytest.mark.parametrize("value", [CLIP_URI, CLIP_URL, "s3://bucket", "anything"])
    def test_idempotent(self, value):
        once = normalize_storage_uri(value)
        assert normalize_storage_uri(once) == once


class TestParsing:
    def test_parse_storage_uri(self):
        assert parse_storage_uri(CLIP_URI) == ("my-bucket", "video-submissions/user1/clip.webm")
        assert parse_storage_uri("s3://bucket") is None
        assert parse_storage_uri(CLIP_URL) is None

    def test_parse_virtual_hosted_url(self):
        assert parse_storage_url(CLIP_URL) == ("my-bucket", "video-submissions/user1/clip.webm")
        assert parse_storage_url("https://thumbs.s3.amazonaws.com/t/1.jpg") == ("thumbs", "t/1.jpg")

    def test_parse_path_style_url(self):
        url = "https://s3.amazonaws.com/classcast-videos/submissions/submission_001.mp4"
        assert parse_storage_url(url) == ("classcast-videos", "submissions/submission_001.mp4")

    def test_parse_non_storage(self):
        assert parse_storage_url("https://abc.execute-api.us-east-1.amazonaws.com/prod") is None
        assert parse_storage_url("https://example.com/video.mp4") is None

    def test_extract_storage_key_strips_bucket_prefix(self):
        url = "https://my-bucket.s3.amazonaws.com/my-bucket/videos/a.mp4"
        assert extract_storage_key(url, bucket="my-bucket") == "videos/a.mp4"
        assert extract_storage_key(url) == "my-bucket/videos/a.mp4"

    def test_extract_storage_key_decodes(self):
        assert extract_storage_key("https://b.s3.amazonaws.com/my%20clip.mp4") == "my clip.mp4"
        assert extract_storage_key("https://youtu.be/dQw4w9WgXcQ") is None


class TestPresign:
    def test_presigned_url_points_at_object(self):
        client = boto3.client(
            "s3",
            region_name="us-east-1",
            aws_access_key_id="testing",
            aws_secret_access_key="testing",
        )
        url = presign_storage_uri(CLIP_URI, expires_in=60, s3_client=client)
        assert "my-bucket" in url
        assert "video-submissions/user1/clip.webm" in url
        assert "?" in url

    def test_signing_failure_falls_back_to_unsigned(self, caplog):
        client = MagicMock()
        client.generate_presigned_url.side_effect = ClientError(
            {"Error": {"Code": "AccessDenied", "Message": "denied"}}, "GeneratePresignedUrl"
        )
        with caplog.at_level(logging.WARNING, logger="videolinks.utils.storage_uri"):
            assert presign_storage_uri(CLIP_URI, s3_client=client) == CLIP_URL
        assert "Could not presign" in caplog.text

    def test_non_storage_input_is_not_signed(self):
        client = MagicMock()
        assert presign_storage_uri("https://example.com/a.mp4", s3_client=client) == "https://example.com/a.mp4"
        client.generate_presigned_url.assert_not_called()

    def test_configured_bucket_repairs_doubled_prefix(self):
        client = MagicMock()
        client.generate_presigned_url.return_value = "https://signed.example/a.mp4"
        url = "https://my-bucket.s3.amazonaws.com/my-bucket/videos/a.mp4"
        assert presign_storage_uri(url, expires_in=60, s3_client=client, bucket="my-bucket") == (
            "https://signed.example/a.mp4"
        )
        client.generate_presigned_url.assert_called_once_with(
            "get_object",
            Params={"Bucket": "my-bucket", "Key": "videos/a.mp4"},
            ExpiresIn=60,
        )
