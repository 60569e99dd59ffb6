"""
Logger Configuration
====================

LoggerConfig describes one logger's destination and presentation. It can be
built directly or from environment variables (optionally seeded from a .env
file):

    LINELOG_NAME            log file name without extension
    LINELOG_PATH            directory of the log file (default: ".")
    LINELOG_STREAM          "stdout" or "stderr" instead of a file
    LINELOG_LOCALE          locale of the header timestamp
    LINELOG_ANSI            enable colored output (true/false)
    LINELOG_LINE_SEPARATOR  "lf", "crlf" or "cr"
    LINELOG_ENCODING        output encoding (default: utf-8)
"""

import codecs
import os
from pathlib import Path
from typing import Any, Literal

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator, model_validator

ENV_PREFIX = "LINELOG_"

LINE_SEPARATORS = {
    "lf": "\n",
    "crlf": "\r\n",
    "cr": "\r",
}


class LoggerConfig(BaseModel):
    """Construction options for a Logger."""

    name: str | None = None
    path: str = "."
    stream: Literal["stdout", "stderr"] | None = None
    locale: str | None = None
    ansi_enabled: bool = False
    line_separator: str | None = None
    encoding: str = "utf-8"
    model_config = ConfigDict(extra="ignore")

    @field_validator("line_separator", mode="before")
    @classmethod
    def resolve_line_separator(cls, v: Any) -> Any:
        if isinstance(v, str) and v.lower() in LINE_SEPARATORS:
            return LINE_SEPARATORS[v.lower()]
        return v

    @field_validator("line_separator")
    @classmethod
    def check_line_separator(cls, v: str | None) -> str | None:
        if v is not None and v not in LINE_SEPARATORS.values():
            raise ValueError("line_separator must be one of '\\n', '\\r\\n', '\\r'")
        return v

    @field_validator("encoding")
    @classmethod
    def check_encoding(cls, v: str) -> str:
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"unknown encoding: {v}") from None
        return v

    @model_validator(mode="after")
    def check_destination(self) -> "LoggerConfig":
        if self.name and self.stream:
            raise ValueError("configure either a log file name or a stream, not both")
        return self


def _strip_value(val: str | None) -> str | None:
    """Strip whitespace; treat empty values as unset."""
    if val is None:
        return None
    val = val.strip()
    return val or None


def load_logger_config(env_file: str | Path | None = None) -> LoggerConfig:
    """
    Build a LoggerConfig from LINELOG_* environment variables.

    Args:
        env_file: .env file to load first (default: ".env" in the working
            directory, if present). Variables already set in the environment
            take precedence over the file.

    Raises:
        pydantic.ValidationError: If a value is invalid
    """
    load_dotenv(Path(env_file) if env_file is not None else Path(".env"), override=False)

    fields = {
        "name": "NAME",
        "path": "PATH",
        "stream": "STREAM",
        "locale": "LOCALE",
        "ansi_enabled": "ANSI",
        "line_separator": "LINE_SEPARATOR",
        "encoding": "ENCODING",
    }
    values: dict[str, Any] = {}
    for field, suffix in fields.items():
        value = _strip_value(os.getenv(f"{ENV_PREFIX}{suffix}"))
        if value is not None:
            values[field] = value
    if "stream" in values:
        values["stream"] = values["stream"].lower()
    return LoggerConfig(**values)
