import os
import socket
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Protocol

from returns.result import Failure, Result, Success, safe

from ..domain.models import PID_PROPERTY, PidUnavailableError


# ---- PidProvider Protocol ----
class PidProvider(Protocol):
    def get_pid(self) -> Result[str, Exception]:
        ...


def runtime_identity() -> str:
    return f"{os.getpid()}@{socket.gethostname()}"


# ---- Host startup properties ----
@dataclass(frozen=True)
class StartupPropertyPidProvider:
    properties: Mapping[str, str]
    key: str = PID_PROPERTY

    def get_pid(self) -> Result[str, Exception]:
        pid = self.properties.get(self.key)
        if pid is None:
            return Failure(PidUnavailableError(
                f"Startup property {self.key!r} is not set"))
        return Success(str(pid))


# ---- "pid@hostname" runtime identity ----
@dataclass(frozen=True)
class RuntimeIdentityPidProvider:
    identity: Callable[[], str] = runtime_identity

    @safe
    def get_pid(self) -> str:
        return self.identity().split("@")[0]
