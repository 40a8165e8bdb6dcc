"""Tests for the command-line entry point."""

import json
import logging
from unittest.mock import patch

import pytest

import main


@pytest.fixture(autouse=True)
def no_credentials(monkeypatch):
    monkeypatch.delenv("INSTAGRAM_USER_ID", raising=False)
    monkeypatch.delenv("INSTAGRAM_ACCESS_TOKEN", raising=False)
    with patch.object(main, "load_dotenv"):
        yield


def test_list_tools_prints_definitions(capsys):
    main.main(["--list-tools"])
    tools = json.loads(capsys.readouterr().out)["tools"]
    assert [t["name"] for t in tools] == ["send_dm", "send_image", "send_media", "send_sticker", "share_post"]


def test_check_config_reports_mode(caplog):
    with caplog.at_level(logging.INFO, logger="InstagramTools"):
        main.main(["--check-config"])
    assert "Mode: simulation" in caplog.text
