import importlib
import os
from unittest.mock import patch

import streamlit.runtime.secrets as st_secrets

with patch.object(st_secrets.Secrets, "_parse", return_value={}):
    from utils import config


def _reload(secrets: dict | None = None) -> None:
    with patch.object(st_secrets.Secrets, "_parse", return_value=secrets or {}):
        importlib.reload(config)


def test_defaults() -> None:
    with patch.dict(os.environ, {}, clear=False):
        for key in ("WORDS_PER_MINUTE", "ACK_DURATION_MS", "DOWNLOAD_FILE_NAME", "CLIPBOARD_MODE"):
            os.environ.pop(key, None)
        _reload()
        assert config.WORDS_PER_MINUTE == 200
        assert config.ACK_DURATION_MS == 2000
        assert config.ACK_DURATION_SECONDS == 2.0
        assert config.DOWNLOAD_FILE_NAME == "cleaned_text.txt"
        assert config.CLIPBOARD_MODE == "browser"
    _reload()


def test_environment_overrides() -> None:
    env = {"WORDS_PER_MINUTE": "250", "DOWNLOAD_FILE_NAME": "out.txt"}
    with patch.dict(os.environ, env):
        _reload()
        assert config.WORDS_PER_MINUTE == 250
        assert config.DOWNLOAD_FILE_NAME == "out.txt"
    _reload()


def test_invalid_number_falls_back() -> None:
    with patch.dict(os.environ, {"WORDS_PER_MINUTE": "fast", "ACK_DURATION_MS": "-5"}):
        _reload()
        assert config.WORDS_PER_MINUTE == 200
        assert config.ACK_DURATION_MS == 2000
    _reload()


def test_secrets_override_environment() -> None:
    with patch.dict(os.environ, {"WORDS_PER_MINUTE": "250"}):
        _reload({"cleaner": {"WORDS_PER_MINUTE": 150, "ACK_DURATION_MS": 500}})
        assert config.WORDS_PER_MINUTE == 150
        assert config.ACK_DURATION_SECONDS == 0.5
    _reload()


def test_clipboard_mode_setting() -> None:
    with patch.dict(os.environ, {"CLIPBOARD_MODE": " Server "}):
        _reload()
        assert config.CLIPBOARD_MODE == "server"
    with patch.dict(os.environ, {"CLIPBOARD_MODE": "telepathy"}):
        _reload()
        assert config.CLIPBOARD_MODE == "browser"
    with patch.dict(os.environ, {"CLIPBOARD_MODE": "browser"}):
        _reload({"cleaner": {"CLIPBOARD_MODE": "server"}})
        assert config.CLIPBOARD_MODE == "server"
    _reload()
