"""Configuration exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from structcheck.domain.exceptions.base import StructCheckError

if TYPE_CHECKING:
    from pathlib import Path


class ConfigError(StructCheckError):
    """Rule configuration cannot be used.

    Fatal: never retried, surfaced immediately.
    """


class ConfigNotFoundError(ConfigError):
    """Rule configuration file does not exist.

    Attributes:
        path: Path that was looked up
    """

    def __init__(self, path: Path) -> None:
        if path is None:
            raise TypeError("path must not be None")

        self.path = path
        super().__init__(f"Could not find config file: {path}")


class ConfigParseError(ConfigError):
    """Rule configuration has invalid structure.

    Covers YAML syntax errors, missing `packages`/`rules` keys and
    malformed rule entries.

    Attributes:
        path: Config file, None when rules were given in memory
        reason: Why configuration is invalid (must not be empty)
    """

    def __init__(self, reason: str, path: Path | None = None) -> None:
        if not reason:
            raise ValueError("reason must not be empty")

        self.path = path
        self.reason = reason
        location = f" {path}" if path is not None else ""
        super().__init__(f"Could not parse config file{location}: {reason}")
