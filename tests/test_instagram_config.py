"""Tests for environment-driven configuration."""

import logging

from skills.instagram_config import (
    DEFAULT_API_VERSION,
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    load_config,
    log_config,
)


class TestLoadConfig:
    def test_defaults_without_credentials(self):
        config = load_config({})
        assert config.user_id == ""
        assert config.access_token == ""
        assert config.api_version == DEFAULT_API_VERSION
        assert config.base_url == DEFAULT_BASE_URL
        assert config.timeout == DEFAULT_TIMEOUT
        assert config.is_live is False

    def test_live_when_both_credentials_present(self):
        config = load_config({
            "INSTAGRAM_USER_ID": "1784",
            "INSTAGRAM_ACCESS_TOKEN": "token",
            "API_VERSION": "v21.0",
            "BASE_URL": "https://graph.example.com/",
        })
        assert config.is_live is True
        assert config.messages_url == "https://graph.example.com/v21.0/1784/messages"

    def test_token_alone_is_simulation(self):
        config = load_config({"INSTAGRAM_ACCESS_TOKEN": "token"})
        assert config.is_live is False

    def test_invalid_timeout_falls_back(self):
        config = load_config({"INSTAGRAM_HTTP_TIMEOUT": "soon"})
        assert config.timeout == DEFAULT_TIMEOUT

    def test_timeout_parsed(self):
        assert load_config({"INSTAGRAM_HTTP_TIMEOUT": "12.5"}).timeout == 12.5


class TestLogConfig:
    def test_secrets_are_masked(self, caplog, live_config):
        caplog.set_level(logging.INFO, logger="InstagramConfig")
        log_config(live_config)
        assert "***1234" in caplog.text
        assert live_config.access_token not in caplog.text

    def test_reports_simulation_mode(self, caplog, simulated_config):
        caplog.set_level(logging.INFO, logger="InstagramConfig")
        log_config(simulated_config)
        assert "not set" in caplog.text
        assert "simulation mode" in caplog.text
