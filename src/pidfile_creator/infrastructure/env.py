import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv
from returns.result import safe

EnvValue = str | bool | int | float


@dataclass(frozen=True)
class Env:
    vars: dict[str, EnvValue] = field(default_factory=dict)
    raw: dict[str, str] = field(default_factory=dict)

    @safe
    def load(self, path_to_dotenv: str | Path = ".env") -> "Env":
        # Real environment wins over the .env file.
        load_dotenv(dotenv_path=path_to_dotenv, override=False)
        loaded = {k: v for k, v in os.environ.items() if v}
        return Env(
            vars={k: self._parse_value(v) for k, v in loaded.items()},
            raw=loaded,
        )

    def select(self, *keys: str) -> dict[str, EnvValue]:
        return {k: self.vars[k] for k in keys if k in self.vars}

    def select_raw(self, *keys: str) -> dict[str, str]:
        """Unparsed values, for keys such as paths where "007" must stay "007"."""
        return {k: self.raw[k] for k in keys if k in self.raw}

    @staticmethod
    def _parse_value(value: str) -> EnvValue:
        if value.lower() in {"true", "false"}:
            return value.lower() == "true"
        try:
            if "." in value:
                return float(value)
            return int(value)
        except ValueError:
            return value
