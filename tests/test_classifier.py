"""Tests for classifier module."""

import pytest

from videolinks.classifier import classify, extract_id
from videolinks.schemas.video_schema import ErrorKind, VideoKind

VIDEO_ID = "dQw4w9WgXcQ"


class TestClassifyKinds:
    """Test kind tagging."""

    @pytest.mark.parametrize(
        "url",
        [
            f"https://www.youtube.com/watch?v={VIDEO_ID}&feature=share",
            f"https://youtu.be/{VIDEO_ID}",
            f"https://www.youtube.com/embed/{VIDEO_ID}",
            f"https://www.youtube.com/v/{VIDEO_ID}",
        ],
    )
    def test_youtube(self, url):
        reference = classify(url)
        assert reference.kind == VideoKind.YOUTUBE
        assert reference.resource_id == VIDEO_ID
        assert reference.is_valid
        assert reference.error is None

    def test_google_drive(self):
        reference = classify("https://drive.google.com/file/d/1ABC123xyz/view?usp=sharing")
        assert reference.kind == VideoKind.GOOGLE_DRIVE
        assert reference.resource_id == "1ABC123xyz"

    def test_object_storage(self):
        reference = classify("s3://my-bucket/video-submissions/user1/clip.webm")
        assert reference.kind == VideoKind.OBJECT_STORAGE
        assert reference.resource_id == "my-bucket/video-submissions/user1/clip.webm"

    def test_direct(self):
        url = "https://cdn.example.com/videos/lecture.mp4"
        reference = classify(url)
        assert reference.kind == VideoKind.DIRECT
        assert reference.resource_id is None
        assert reference.raw_url == url

    def test_https_s3_url_is_direct(self):
        reference = classify("https://my-bucket.s3.us-east-1.amazonaws.com/clip.webm")
        assert reference.kind == VideoKind.DIRECT


class TestClassifyErrors:
    """Malformed input is reported as data, never raised."""

    def test_empty_input(self):
        reference = classify("")
        assert reference.kind == VideoKind.UNKNOWN
        assert not reference.is_valid
        assert reference.error == "empty input"
        assert reference.error_kind == ErrorKind.INVALID_INPUT

    def test_whitespace_and_none(self):
        assert classify("   ").error == "empty input"
        assert classify(None).error == "empty input"

    def test_not_a_url(self):
        reference = classify("not a url at all")
        assert reference.kind == VideoKind.UNKNOWN
        assert reference.error == "not a URL"
        assert reference.error_kind == ErrorKind.INVALID_INPUT

    def test_http_without_host(self):
        assert classify("https://").error == "not a URL"
        assert classify("https://exa mple.com/a.mp4").error == "not a URL"

    def test_malformed_storage_uri(self):
        reference = classify("s3://bucket-only")
        assert reference.kind == VideoKind.UNKNOWN
        assert reference.error_kind == ErrorKind.MALFORMED_STORAGE_URI

    def test_youtube_page_without_video(self):
        reference = classify("https://www.youtube.com/channel/UC38IQsAvIsxxjztdMZQtwHA")
        assert reference.kind == VideoKind.UNKNOWN
        assert reference.error == "unrecognized YouTube URL"
        assert reference.error_kind == ErrorKind.UNRECOGNIZED_FORMAT

    def test_drive_folder_listing(self):
        reference = classify("https://drive.google.com/drive/folders/1ABC123xyz")
        assert reference.error == "unrecognized Google Drive URL"
        assert reference.error_kind == ErrorKind.UNRECOGNIZED_FORMAT

    def test_unsupported_scheme(self):
        for url in ("ftp://files.example.com/a.mp4", "data:video/mp4;base64,AAAA"):
            reference = classify(url)
            assert reference.kind == VideoKind.UNKNOWN
            assert reference.error_kind == ErrorKind.UNRECOGNIZED_FORMAT


class TestClassifyIsPure:
    def test_same_input_same_output(self):
        url = f"https://youtu.be/{VIDEO_ID}?t=3"
        assert classify(url) == classify(url)

    def test_reference_is_frozen(self):
        reference = classify(f"https://youtu.be/{VIDEO_ID}")
        with pytest.raises(Exception):
            reference.kind = VideoKind.DIRECT


class TestExtractId:
    def test_by_kind(self):
        assert extract_id(f"https://youtu.be/{VIDEO_ID}", VideoKind.YOUTUBE) == VIDEO_ID
        assert extract_id("https://drive.google.com/open?id=abc_123", VideoKind.GOOGLE_DRIVE) == "abc_123"
        assert extract_id("s3://b/k.mp4", VideoKind.OBJECT_STORAGE) == "b/k.mp4"

    def test_no_match_returns_none(self):
        assert extract_id("https://example.com/x.mp4", VideoKind.YOUTUBE) is None
        assert extract_id("https://example.com/x.mp4", VideoKind.DIRECT) is None
        assert extract_id("s3://b", VideoKind.OBJECT_STORAGE) is None
