from .application.pid_file_creator import PidFileCreator
from .domain.models import DEFAULT_FILE_NAME, CreatorState
from .domain.pid_file_config import PidFileConfig
from .infrastructure.pid_provider import (
    PidProvider,
    RuntimeIdentityPidProvider,
    StartupPropertyPidProvider,
)

__all__ = [
    "DEFAULT_FILE_NAME",
    "CreatorState",
    "PidFileConfig",
    "PidFileCreator",
    "PidProvider",
    "RuntimeIdentityPidProvider",
    "StartupPropertyPidProvider",
]
