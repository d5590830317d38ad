import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, field_validator

from .models import DEFAULT_FILE_NAME

PIDFILE_ENV: str = "PIDFILE"
PIDFILE_EXIT_ENV: str = "PIDFILE_EXIT_IF_EXISTS"


class PidFileConfig(BaseModel):
    """
    Where the PID file goes and whether an existing one is fatal.
    Relative paths are resolved against the working directory at construction.
    """
    model_config = ConfigDict(frozen=True, validate_default=True)
    path: Path = Path(DEFAULT_FILE_NAME)
    exit_if_exists: bool = True

    @field_validator("path")
    @classmethod
    def _absolute(cls, value: Path) -> Path:
        return Path(os.path.abspath(value))

    @staticmethod
    def load(path: Path) -> "PidFileConfig":
        data: dict[str, Any] = yaml.safe_load(path.read_text()) or {}
        return PidFileConfig(
            path=data.get("path", DEFAULT_FILE_NAME),
            exit_if_exists=data.get("exit_if_exists", True),
        )

    def with_overrides(self, values: dict[str, Any]) -> "PidFileConfig":
        # PIDFILE beats whatever the host configured.
        return PidFileConfig(
            path=str(values.get(PIDFILE_ENV, self.path)),
            exit_if_exists=values.get(PIDFILE_EXIT_ENV, self.exit_if_exists),
        )
