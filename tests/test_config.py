"""Tests for LoggerConfig and environment loading."""

import os
from pathlib import Path
from unittest.mock import patch

from pydantic import ValidationError
import pytest

from linelog.config import LoggerConfig, load_logger_config


class TestLoggerConfig:
    """Test suite for the LoggerConfig model."""

    def test_defaults(self) -> None:
        config = LoggerConfig()
        assert config.name is None
        assert config.path == "."
        assert config.stream is None
        assert config.locale is None
        assert config.ansi_enabled is False
        assert config.line_separator is None
        assert config.encoding == "utf-8"

    @pytest.mark.parametrize(
        "value, expected",
        [("lf", "\n"), ("CRLF", "\r\n"), ("cr", "\r"), ("\r\n", "\r\n")],
    )
    def test_line_separator_aliases(self, value: str, expected: str) -> None:
        assert LoggerConfig(line_separator=value).line_separator == expected

    def test_invalid_line_separator(self) -> None:
        with pytest.raises(ValidationError):
            LoggerConfig(line_separator=";")

    def test_invalid_encoding(self) -> None:
        with pytest.raises(ValidationError):
            LoggerConfig(encoding="no-such-codec")

    def test_invalid_stream(self) -> None:
        with pytest.raises(ValidationError):
            LoggerConfig(stream="stdin")

    def test_name_and_stream_conflict(self) -> None:
        with pytest.raises(ValidationError):
            LoggerConfig(name="app", stream="stdout")

    def test_unknown_keys_ignored(self) -> None:
        config = LoggerConfig(name="app", rotation="daily")
        assert not hasattr(config, "rotation")


class TestLoadLoggerConfig:
    """Test suite for load_logger_config()."""

    def test_reads_environment(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        env = {
            "LINELOG_NAME": " service ",
            "LINELOG_PATH": str(tmp_path),
            "LINELOG_ANSI": "true",
            "LINELOG_LINE_SEPARATOR": "crlf",
            "LINELOG_ENCODING": "latin-1",
        }
        with patch.dict(os.environ, env):
            config = load_logger_config()

        assert config.name == "service"
        assert config.path == str(tmp_path)
        assert config.ansi_enabled is True
        assert config.line_separator == "\r\n"
        assert config.encoding == "latin-1"

    def test_empty_values_ignored(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        with patch.dict(os.environ, {"LINELOG_PATH": "  ", "LINELOG_STREAM": "STDOUT"}):
            config = load_logger_config()
        assert config.path == "."
        assert config.stream == "stdout"

    def test_env_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        env_file = tmp_path / "linelog.env"
        env_file.write_text("LINELOG_NAME=from_file\nLINELOG_ANSI=1\n", encoding="utf-8")

        config = load_logger_config(env_file)

        assert config.name == "from_file"
        assert config.ansi_enabled is True

    def test_environment_overrides_env_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".env").write_text("LINELOG_NAME=from_file\n", encoding="utf-8")
        with patch.dict(os.environ, {"LINELOG_NAME": "from_env"}):
            config = load_logger_config()
        assert config.name == "from_env"

    def test_missing_env_file_is_fine(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        assert load_logger_config(tmp_path / "absent.env") == LoggerConfig()

    def test_invalid_value(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        with patch.dict(os.environ, {"LINELOG_ANSI": "maybe"}):
            with pytest.raises(ValidationError):
                load_logger_config()
