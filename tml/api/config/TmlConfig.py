"""Top-level tml configuration."""

import json
import logging
import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

_LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class TmlConfig(BaseModel):
    """Defaults for link creation and logging.

    Command line flags only ever tighten or loosen these defaults in one
    direction: ``-n`` disables verification and ``-f`` enables force.
    """

    model_config = ConfigDict(extra="forbid")

    verify: bool = True
    force: bool = False
    log_level: str = "WARNING"
    log_file: str | None = None

    @field_validator("log_level")
    @classmethod
    def _check_level(cls, v: str) -> str:
        level = v.upper()
        if level not in _LEVEL_NAMES:
            raise ValueError(f"log_level must be one of {', '.join(_LEVEL_NAMES)}, got {v!r}")
        return level

    @property
    def level(self) -> int:
        """Numeric logging level."""
        return getattr(logging, self.log_level)

    @property
    def log_path(self) -> Path | None:
        """Log file path with ``~`` expanded, or None."""
        if self.log_file is None:
            return None
        return Path(self.log_file).expanduser()

    @classmethod
    def get_home_dir(cls) -> Path:
        """Get tml home directory based on TML_HOME or default to ~/.tml."""
        tml_home_env = os.environ.get("TML_HOME")
        if tml_home_env:
            return Path(tml_home_env).expanduser().resolve()
        return Path.home() / ".tml"

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file based on TML_HOME or default to ~/.tml."""
        return cls.get_home_dir() / "config.json"

    @classmethod
    def load(cls) -> "TmlConfig":
        """Load and validate config from file.

        A missing config file means every setting takes its default.

        Raises:
            ValueError: If the config file has invalid JSON or fails validation
        """
        path = cls.get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Config file {path} must contain a JSON object")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error in {path}: {detail}") from e
