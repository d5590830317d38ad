"""Shared fixtures for the PID file creator tests."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

import pytest
from returns.result import Failure, Result, Success

from pidfile_creator.application.pid_file_creator import PidFileCreator
from pidfile_creator.domain.pid_file_config import PidFileConfig
from pidfile_creator.infrastructure.pid_provider import (
    RuntimeIdentityPidProvider,
    StartupPropertyPidProvider,
)


@dataclass
class FakeFileSystem:
    """In-memory filesystem double with switchable failures."""

    existing: set[Path] = field(default_factory=set)
    traversable: bool = True
    dirs_error: Exception | None = None
    write_error: Exception | None = None
    written: dict[Path, str] = field(default_factory=dict)
    created_dirs: list[Path] = field(default_factory=list)

    def exists(self, path: Path) -> bool:
        return path in self.existing or path in self.written

    def is_traversable(self, folder: Path) -> bool:
        return self.traversable

    def make_dirs(self, folder: Path) -> Result[None, Exception]:
        if self.dirs_error is not None:
            return Failure(self.dirs_error)
        self.created_dirs.append(folder)
        return Success(None)

    def write_text(self, path: Path, text: str) -> Result[None, Exception]:
        if self.write_error is not None:
            return Failure(self.write_error)
        self.written[path] = text
        return Success(None)

    def remove(self, path: Path) -> Result[None, Exception]:
        self.written.pop(path, None)
        return Success(None)


@pytest.fixture
def logger() -> logging.Logger:
    """Propagating logger so caplog sees the records."""
    return logging.getLogger("pidfile_creator.tests")


@pytest.fixture
def cleanups() -> list[Callable[[], None]]:
    """Stands in for atexit.register."""
    return []


@pytest.fixture
def make_creator(logger, cleanups):
    """Build a PidFileCreator with controllable PID sources."""

    def _make(
        path: Path,
        exit_if_exists: bool = True,
        properties: dict[str, str] | None = None,
        identity: str | Callable[[], str] = "4242@testhost",
        **kwargs,
    ) -> PidFileCreator:
        return PidFileCreator(
            config=PidFileConfig(path=path, exit_if_exists=exit_if_exists),
            logger=logger,
            pid_provider=StartupPropertyPidProvider(
                properties={"PID": "12345"} if properties is None else properties
            ),
            fallback_pid_provider=RuntimeIdentityPidProvider(
                identity=identity if callable(identity) else (lambda: identity)
            ),
            register_cleanup=cleanups.append,
            **kwargs,
        )

    return _make


@pytest.fixture
def fake_fs() -> FakeFileSystem:
    return FakeFileSystem()
