# src/pidfile_creator/application/pid_file_creator.py
import os
import sys
import atexit
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, NoReturn

from returns.result import Failure, Result, Success

from ..domain.models import EXIT_ON_ERROR_STATUS, CreatorState
from ..domain.pid_file_config import PidFileConfig
from ..infrastructure.fs import FileSystem, IFileSystem
from ..infrastructure.pid_provider import PidProvider, RuntimeIdentityPidProvider

CleanupRegistrar = Callable[[Callable[[], None]], Any]


@dataclass
class PidFileCreator:
    """
    Startup hook that writes the PID file, refusing to start when one is
    already there (unless ``exit_if_exists`` is off, then it only warns and
    overwrites).

    The existence check and the write are separate filesystem operations, so
    two processes starting at the same moment can both pass the check.
    """
    config: PidFileConfig
    logger: logging.Logger
    pid_provider: PidProvider
    fallback_pid_provider: PidProvider = field(default_factory=RuntimeIdentityPidProvider)
    fs: IFileSystem = field(default_factory=FileSystem)
    register_cleanup: CleanupRegistrar = atexit.register
    state: CreatorState = field(default=CreatorState.NOT_STARTED, init=False)

    def run(self) -> None:
        self._check_pid_file()
        self._write_pid_file()
        self.state = CreatorState.DONE

    def _check_pid_file(self) -> None:
        path = self.config.path
        if self.fs.exists(path):
            self.logger.warning(
                "The PID file %s already has been created. path %s",
                path.name,
                path,
            )
            if self.config.exit_if_exists:
                self._exit_on_error()

    def _resolve_pid(self) -> str:
        def _fallback(error: Exception) -> Result[str, Exception]:
            self.logger.warning(
                "Cannot retrieve PID from startup properties (%s), "
                "deriving it from the runtime identity",
                error,
            )
            return self.fallback_pid_provider.get_pid()

        match self.pid_provider.get_pid().lash(_fallback):
            case Success(pid):
                return pid
            case Failure(e):
                self.logger.warning("Cannot determine the process id: %s", e)
                self._exit_on_error()

    def _write_pid_file(self) -> None:
        pid = self._resolve_pid()
        path = self.config.path
        folder = path.parent

        if not self.fs.is_traversable(folder):
            self.fs.make_dirs(folder).alt(
                lambda e: self.logger.error(
                    "Cannot create directories for PID file %s: %s", path, e
                )
            )

        match self.fs.write_text(path, pid):
            case Success(_):
                pass
            case Failure(e):
                self.logger.warning(
                    "Cannot create PID file '%s', PID is %s (%s)", path, pid, e
                )
                self._exit_on_error()

        self.register_cleanup(self._cleanup_callback(os.getpid()))
        self.logger.info("PID file has been created: %s", path)
        self.logger.info("Process id is %s", pid)

    def _cleanup_callback(self, owner_pid: int) -> Callable[[], None]:
        path = self.config.path

        def _remove() -> None:
            # A forked child inherits exit callbacks; only the writer removes.
            if os.getpid() != owner_pid:
                return
            self.fs.remove(path).alt(
                lambda e: self.logger.debug(
                    "PID file %s was not removed: %s", path, e
                )
            )

        return _remove

    def _exit_on_error(self) -> NoReturn:
        self.logger.warning("Exit on error")
        sys.exit(EXIT_ON_ERROR_STATUS)
