import os
import sys
import logging
from dataclasses import dataclass
from pathlib import Path

from ..domain.models import PID_PROPERTY

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(process)d | %(name)s | %(message)s"


@dataclass(eq=False)  # handlers must stay hashable
class TruncatingFileHandler(logging.FileHandler):
    filename: Path
    max_bytes: int
    mode: str = "a"
    encoding: str | None = None
    delay: bool = False

    def __post_init__(self) -> None:
        self.filename.parent.mkdir(parents=True, exist_ok=True)
        super().__init__(
            filename=self.filename,
            mode=self.mode,
            encoding=self.encoding,
            delay=self.delay,
        )

    def emit(self, record: logging.LogRecord) -> None:
        try:
            if self.stream and self.stream.tell() >= self.max_bytes:
                self.stream.seek(0)
                self.stream.truncate()
            super().emit(record)
        except Exception:
            self.handleError(record)


def create_logger(
    *,
    name: str,
    log_dir: Path | None,
    logfile_size_limit_mb: int,
) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(logging.INFO)
    logger.propagate = False

    if logger.handlers:
        return logger  # singleton safety

    handler: logging.Handler
    if log_dir is None:
        handler = logging.StreamHandler(sys.stderr)
    else:
        handler = TruncatingFileHandler(
            filename=Path(log_dir) / "app.log",
            max_bytes=logfile_size_limit_mb * 1024 * 1024,
        )
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger.addHandler(handler)
    return logger


def logging_system_properties() -> dict[str, str]:
    """
    Process-wide properties published once the logging system is up.
    Startup hooks read the PID from here instead of asking the OS again.
    """
    return {PID_PROPERTY: str(os.getpid())}
