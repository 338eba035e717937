import io
import logging
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from file_access import cli  # noqa: E402
from file_access.config import Settings  # noqa: E402
from file_access.errors import ConfigurationError  # noqa: E402


def test_settings_require_allowed_directory() -> None:
    with pytest.raises(ConfigurationError):
        Settings.from_env({})
    with pytest.raises(ConfigurationError):
        Settings.from_env({"ALLOWED_DIRECTORY": "   "})


def test_settings_from_env() -> None:
    settings = Settings.from_env(
        {
            "ALLOWED_DIRECTORY": "/srv/files",
            "LOG_LEVEL": "DEBUG",
            "FILE_ACCESS_RESOLVE_SYMLINKS": "yes",
            "FILE_ACCESS_DIAGNOSTICS": "0",
            "PORT": "9000",
        }
    )
    assert settings.allowed_directory == "/srv/files"
    assert settings.log_level == "debug"
    assert settings.resolve_symlinks is True
    assert settings.diagnostics is False
    assert settings.port == 9000
    assert settings.host == "127.0.0.1"


def test_settings_reject_bad_port() -> None:
    with pytest.raises(ConfigurationError):
        Settings.from_env({"ALLOWED_DIRECTORY": "/srv/files", "PORT": "http"})


def test_cli_fails_fast_without_allowed_directory(monkeypatch, caplog) -> None:
    monkeypatch.setattr(cli, "load_dotenv", lambda: False)
    monkeypatch.delenv("ALLOWED_DIRECTORY", raising=False)

    with caplog.at_level(logging.ERROR, logger="file_access"):
        assert cli.main(["stdio"]) == 1
    assert "ALLOWED_DIRECTORY environment variable is required" in caplog.text


def test_cli_serve_fails_fast_without_allowed_directory(monkeypatch) -> None:
    monkeypatch.setattr(cli, "load_dotenv", lambda: False)
    monkeypatch.delenv("ALLOWED_DIRECTORY", raising=False)
    assert cli.main(["serve"]) == 1


def test_cli_stdio_serves_until_stdin_closes(monkeypatch, tmp_path, capsys) -> None:
    monkeypatch.setattr(cli, "load_dotenv", lambda: False)
    monkeypatch.setenv("ALLOWED_DIRECTORY", str(tmp_path))
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))

    assert cli.main([]) == 0
    assert capsys.readouterr().out == ""
