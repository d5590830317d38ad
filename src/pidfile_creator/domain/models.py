from enum import Enum
from typing import Final

DEFAULT_FILE_NAME: Final[str] = "application.pid"
PID_PROPERTY: Final[str] = "PID"
EXIT_ON_ERROR_STATUS: Final[int] = -1


class CreatorState(Enum):
    NOT_STARTED = "not_started"
    DONE = "done"


class PidFileError(RuntimeError):
    pass


class PidUnavailableError(PidFileError):
    pass
