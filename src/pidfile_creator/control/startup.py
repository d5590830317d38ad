import logging
from dataclasses import dataclass, field
from typing import Protocol


class StartupHook(Protocol):
    def run(self) -> None:
        ...


@dataclass
class StartupSequencer:
    """Runs each startup hook once, in registration order."""
    hooks: list[StartupHook]
    logger: logging.Logger
    _started: bool = field(default=False, init=False)

    def start(self) -> None:
        if self._started:
            self.logger.warning("Startup sequence already ran, ignoring")
            return
        self._started = True

        for hook in self.hooks:
            self.logger.debug("Running startup hook %s", type(hook).__name__)
            hook.run()
