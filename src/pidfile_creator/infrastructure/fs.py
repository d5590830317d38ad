import os
from pathlib import Path
from typing import Protocol

from returns.result import Result, safe


class IFileSystem(Protocol):
    """Filesystem operations the PID file writer needs."""

    def exists(self, path: Path) -> bool:
        ...

    def is_traversable(self, folder: Path) -> bool:
        ...

    def make_dirs(self, folder: Path) -> Result[None, Exception]:
        ...

    def write_text(self, path: Path, text: str) -> Result[None, Exception]:
        """Truncate path and write text to it, no newline appended."""
        ...

    def remove(self, path: Path) -> Result[None, Exception]:
        ...


class FileSystem:
    """Concrete FS helper."""

    def exists(self, path: Path) -> bool:
        return path.exists()

    def is_traversable(self, folder: Path) -> bool:
        return os.access(folder, os.X_OK)

    @safe
    def make_dirs(self, folder: Path) -> None:
        # An existing but untraversable folder counts as a failure.
        folder.mkdir(parents=True, exist_ok=False)

    @safe
    def write_text(self, path: Path, text: str) -> None:
        with open(path, "w", encoding="utf-8") as out:
            out.write(text)

    @safe
    def remove(self, path: Path) -> None:
        path.unlink()
