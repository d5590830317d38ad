import atexit
from pathlib import Path
from dependency_injector import containers, providers

from ..domain.pid_file_config import PIDFILE_ENV, PIDFILE_EXIT_ENV, PidFileConfig
from ..infrastructure.env import Env
from ..infrastructure.fs import FileSystem, IFileSystem
from ..infrastructure.logging import create_logger, logging_system_properties
from ..infrastructure.pid_provider import (
    RuntimeIdentityPidProvider,
    StartupPropertyPidProvider,
)
from ..application.pid_file_creator import PidFileCreator
from .startup import StartupSequencer

# ------------------------ Factory / Provider functions ------


def env_provider_func(path: str | Path) -> Env:
    return Env().load(path).unwrap()


def pid_file_config_func(
    env: Env,
    settings_path: Path | None,
    pid_file: str | Path,
    exit_if_exists: bool,
) -> PidFileConfig:
    if settings_path is not None and Path(settings_path).exists():
        base = PidFileConfig.load(Path(settings_path))
    else:
        base = PidFileConfig(path=pid_file, exit_if_exists=exit_if_exists)
    return base.with_overrides({
        **env.select(PIDFILE_EXIT_ENV),
        **env.select_raw(PIDFILE_ENV),
    })


# ------------------------ Dependency Container ------------------------


class Container(containers.DeclarativeContainer):
    config = providers.Configuration()

    # -------------------- Infrastructure --------------------

    env: providers.Singleton[Env] = providers.Singleton(
        env_provider_func,
        path=config.dotenv_path,
    )

    fs: providers.Singleton[IFileSystem] = providers.Singleton(FileSystem)

    logger = providers.Singleton(
        create_logger,
        name="pidfile",
        log_dir=config.log_dir,
        logfile_size_limit_mb=config.logfile_size_limit_MB,
    )

    # Published by the logging setup, read by the primary PID provider.
    startup_properties = providers.Singleton(logging_system_properties)

    register_cleanup = providers.Object(atexit.register)

    # -------------------- Domain --------------------

    pid_file_config: providers.Singleton[PidFileConfig] = providers.Singleton(
        pid_file_config_func,
        env=env,
        settings_path=config.settings_path,
        pid_file=config.pid_file,
        exit_if_exists=config.exit_if_exists,
    )

    # -------------------- Application --------------------

    pid_file_creator: providers.Factory[PidFileCreator] = providers.Factory(
        PidFileCreator,
        config=pid_file_config,
        logger=logger,
        pid_provider=providers.Factory(
            StartupPropertyPidProvider,
            properties=startup_properties,
        ),
        fallback_pid_provider=providers.Factory(RuntimeIdentityPidProvider),
        fs=fs,
        register_cleanup=register_cleanup,
    )

    # -------------------- Control --------------------

    startup_sequencer: providers.Singleton[StartupSequencer] = providers.Singleton(
        StartupSequencer,
        hooks=providers.List(pid_file_creator),
        logger=logger,
    )
