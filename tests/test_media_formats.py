"""Tests for the advisory media format checker."""

import logging

from skills.media_formats import check_media_format


class TestCheckMediaFormat:
    def test_known_extension_passes_quietly(self, caplog):
        with caplog.at_level(logging.WARNING, logger="MediaFormats"):
            assert check_media_format("https://cdn.example.com/cat.JPEG", "image") is True
        assert caplog.records == []

    def test_mismatch_warns(self, caplog):
        with caplog.at_level(logging.WARNING, logger="MediaFormats"):
            assert check_media_format("https://cdn.example.com/clip.mp3", "video") is False
        assert "mp4, ogg, avi, mov, webm" in caplog.text

    def test_query_string_still_warns(self, caplog):
        with caplog.at_level(logging.WARNING, logger="MediaFormats"):
            assert check_media_format("https://cdn.example.com/a.png?sig=abc", "image") is False
        assert len(caplog.records) == 1

    def test_mp4_is_valid_audio(self):
        assert check_media_format("https://cdn.example.com/voice.mp4", "audio") is True

    def test_unknown_media_type_is_not_checked(self):
        assert check_media_format("https://cdn.example.com/file", "sticker") is True
