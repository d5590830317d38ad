# src/pidfile_creator/control/main.py
from typing import Any
from pathlib import Path
from returns.result import Result, safe

from .dependency_container import Container
from .startup import StartupSequencer

DEFAULT_CONFIG: dict[str, Any] = {
    "pid_file": "application.pid",
    "exit_if_exists": True,
    "settings_path": Path("pidfile.yaml"),
    "dotenv_path": Path(".env"),
    "log_dir": None,
    "logfile_size_limit_MB": 10,
}


def main() -> None:
    run_app(DEFAULT_CONFIG).alt(
        lambda err: print(f"Application failed: {err}")
    )


def run_app(
    config: dict[str, Any],
    container: Container | None = None,
) -> Result[None, Exception]:
    if container is None:
        container = Container()
    container.config.from_dict({**DEFAULT_CONFIG, **config})

    return _assemble(container).map(execute_lifecycle)


@safe
def _assemble(container: Container) -> StartupSequencer:
    # Config errors (bad PIDFILE etc.) surface here, before any hook runs.
    return container.startup_sequencer()


def execute_lifecycle(sequencer: StartupSequencer) -> None:
    sequencer.start()
    sequencer.logger.info("Startup complete")


if __name__ == "__main__":
    main()
