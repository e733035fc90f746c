"""
Configuration for the tagshell command line.

Settings come from `TAGSHELL_*` environment variables; command line flags
override them.
"""

import logging
import os
from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from tagshell.exceptions.core import ConfigurationError

ENV_PREFIX = "TAGSHELL_"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


class TagShellConfig(BaseModel):
    """
    Runtime settings for parsing and running documents.

    Params:
        log_level: Name of the logging level (DEBUG, INFO, WARNING, ...)
        output_format: How `commands` prints its result, "text" or "json"
        dry_run: Log commands instead of running them
        stop_on_error: Stop running at the first failing command
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    log_level: str = "WARNING"
    output_format: Literal["text", "json"] = "text"
    dry_run: bool = False
    stop_on_error: bool = True

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value}")
        return level

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "TagShellConfig":
        """
        Build a config from `TAGSHELL_*` variables.

        Params:
            environ: Mapping to read instead of os.environ

        Raises:
            ConfigurationError: If a variable holds an invalid value
        """
        environ = os.environ if environ is None else environ
        values: dict[str, Any] = {}
        for name in cls.model_fields:
            raw = environ.get(ENV_PREFIX + name.upper())
            if raw is None:
                continue
            if cls.model_fields[name].annotation is bool:
                values[name] = _parse_bool(name, raw)
            else:
                values[name] = raw.strip()
        return cls.build(**values)

    @classmethod
    def build(cls, **values: Any) -> "TagShellConfig":
        """Validate `values`, raising ConfigurationError instead of ValidationError."""
        try:
            return cls(**values)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

    def override(self, **values: Any) -> "TagShellConfig":
        """Return a copy with every non-None value in `values` applied."""
        updates = {key: value for key, value in values.items() if value is not None}
        return self.build(**{**self.model_dump(), **updates})


def _parse_bool(name: str, raw: str) -> bool:
    lowered = raw.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"Invalid boolean for {ENV_PREFIX}{name.upper()}: {raw!r}")
