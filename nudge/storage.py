"""File access used by the installer, behind a small injectable interface."""

from pathlib import Path
from typing import Protocol

from nudge.util import StorageError


class Storage(Protocol):
    """What the installer needs from the filesystem."""

    def read(self, path: Path) -> str: ...

    def write(self, path: Path, text: str) -> None: ...

    def exists(self, path: Path) -> bool: ...

    def remove(self, path: Path) -> None: ...

    def ensure_dir(self, path: Path) -> None: ...


class FileStorage:
    """UTF-8 text files on the local disk."""

    def read(self, path: Path) -> str:
        """Read a file. Raises FileNotFoundError if it does not exist."""
        try:
            return Path(path).read_text(encoding="utf-8")
        except FileNotFoundError:
            raise
        except OSError as e:
            raise StorageError(f"cannot read file: {e}")

    def write(self, path: Path, text: str) -> None:
        try:
            Path(path).write_text(text, encoding="utf-8")
        except OSError as e:
            raise StorageError(f"cannot write file: {e}")

    def exists(self, path: Path) -> bool:
        return Path(path).is_file()

    def remove(self, path: Path) -> None:
        try:
            Path(path).unlink()
        except OSError as e:
            raise StorageError(f"cannot remove file: {e}")

    def ensure_dir(self, path: Path) -> None:
        try:
            Path(path).mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(f"cannot create directory: {e}")
