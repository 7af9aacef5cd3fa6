"""Unit tests for settings and logging setup."""

import json
import logging
import os
import subprocess
import sys
from pathlib import Path

import pytest
from pydantic import ValidationError

import featspace
from featspace.config import Settings, get_settings
from featspace.logging_config import JsonFormatter, configure_logging

# sha256(b"")
EMPTY_HASH = "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"


def test_defaults():
    config = Settings()
    assert config.log_level == "INFO"
    assert config.log_format == "console"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("FEATSPACE_LOG_LEVEL", "debug")
    monkeypatch.setenv("FEATSPACE_LOG_FORMAT", "JSON")

    config = get_settings()
    assert config.log_level == "DEBUG"
    assert config.log_format == "json"


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_invalid_log_level():
    with pytest.raises(ValidationError):
        Settings(log_level="LOUD")


def test_invalid_log_format():
    with pytest.raises(ValidationError):
        Settings(log_format="xml")


def test_configure_logging_sets_level():
    root = logging.getLogger()
    previous_level = root.level
    previous_handlers = list(root.handlers)
    try:
        configure_logging(Settings(log_level="WARNING", log_format="json"))
        assert root.level == logging.WARNING
        assert isinstance(root.handlers[0].formatter, JsonFormatter)
    finally:
        root.handlers = previous_handlers
        root.setLevel(previous_level)


def test_json_formatter_output():
    record = logging.LogRecord(
        name="featspace.colset",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="Formed %d colsets",
        args=(3,),
        exc_info=None,
    )
    payload = json.loads(JsonFormatter().format(record))
    assert payload["logger"] == "featspace.colset"
    assert payload["level"] == "INFO"
    assert payload["message"] == "Formed 3 colsets"


def test_import_ignores_invalid_logging_env(tmp_path):
    """
    Bad logging settings do not stop the package from importing.

    Settings are only validated when configure_logging() reads them.
    """
    src_dir = Path(featspace.__file__).resolve().parents[1]
    env = dict(os.environ)
    env["FEATSPACE_LOG_LEVEL"] = "verbose"
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(src_dir), env.get("PYTHONPATH")]))

    result = subprocess.run(
        [sys.executable, "-c", "import featspace; print(featspace.hash_colset([]))"],
        cwd=tmp_path,
        env=env,
        capture_output=True,
        text=True,
    )

    assert result.returncode == 0, result.stderr
    assert result.stdout.strip() == EMPTY_HASH


def test_configure_logging_rejects_invalid_env(monkeypatch):
    monkeypatch.setenv("FEATSPACE_LOG_LEVEL", "verbose")
    with pytest.raises(ValidationError):
        configure_logging()
