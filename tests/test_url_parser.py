"""Tests for url_parser module."""

import pytest

from video_catalog.url_parser import is_valid_url, parse_video_url


class TestYouTubeHandler:
    """Test YouTube URL parsing."""

    def test_watch_url(self):
        url = "https://www.youtube.com/watch?v=dQw4w9WgXcQ"
        result = parse_video_url(url)
        assert result is not None
        assert result.platform == "youtube"
        assert result.video_id == "dQw4w9WgXcQ"
        assert result.original_url == url

    def test_youtu_be_short(self):
        result = parse_video_url("https://youtu.be/S15e-qC1S0I")
        assert result is not None
        assert result.platform == "youtube"
        assert result.video_id == "S15e-qC1S0I"

    def test_youtu_be_with_timestamp(self):
        result = parse_video_url("https://youtu.be/S15e-qC1S0I?t=42")
        assert result is not None
        assert result.video_id == "S15e-qC1S0I"

    def test_embed_url(self):
        result = parse_video_url("https://www.youtube.com/embed/dQw4w9WgXcQ")
        assert result is not None
        assert result.video_id == "dQw4w9WgXcQ"

    def test_embed_url_with_params(self):
        result = parse_video_url("https://www.youtube.com/embed/dQw4w9WgXcQ?autoplay=1")
        assert result is not None
        assert result.video_id == "dQw4w9WgXcQ"

    def test_mobile_url(self):
        result = parse_video_url("https://m.youtube.com/watch?v=dQw4w9WgXcQ")
        assert result is not None
        assert result.video_id == "dQw4w9WgXcQ"

    def test_watch_with_extra_params(self):
        result = parse_video_url("https://www.youtube.com/watch?list=PL123&v=7s0CpR_FNA4&t=10s")
        assert result is not None
        assert result.video_id == "7s0CpR_FNA4"

    def test_host_is_case_insensitive(self):
        result = parse_video_url("https://WWW.YouTube.com/watch?v=dQw4w9WgXcQ")
        assert result is not None
        assert result.video_id == "dQw4w9WgXcQ"

    def test_id_length_not_enforced(self):
        result = parse_video_url("https://youtu.be/short")
        assert result is not None
        assert result.video_id == "short"

    @pytest.mark.parametrize(
        "url",
        [
            "https://youtu.be/",
            "https://www.youtube.com/watch",
            "https://www.youtube.com/watch?v=",
            "https://www.youtube.com/embed/",
            "https://www.youtube.com/watch/other?v=dQw4w9WgXcQ",
            "https://www.youtube.com/channel/UC123",
        ],
    )
    def test_missing_id(self, url):
        assert is_valid_url(url)
        assert parse_video_url(url) is None

    def test_non_youtube_url(self):
        assert parse_video_url("https://vimeo.com/123456789") is None

    def test_youtu_be_lookalike_host(self):
        assert parse_video_url("https://notyoutu.be/dQw4w9WgXcQ") is None


class TestInvalidInput:
    """Malformed input never raises."""

    @pytest.mark.parametrize("value", ["", "not a url", "youtube.com/watch?v=abc", "http://[::1", None, 42])
    def test_invalid_url(self, value):
        assert is_valid_url(value) is False
        assert parse_video_url(value) is None

    def test_valid_non_video_url(self):
        assert is_valid_url("https://example.com") is True
        assert parse_video_url("https://example.com") is None
