from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, Field, ConfigDict


T = TypeVar("T")


class FileKind(str, Enum):
    """Type of a filesystem node."""

    FILE = "file"
    DIRECTORY = "directory"


class ErrorKind(str, Enum):
    """
    Classification of a failed operation.

    Lets callers tell "nothing there" apart from "could not read/write" and
    "not allowed", which a plain boolean result collapses.
    """

    NOT_FOUND = "not_found"
    IO_ERROR = "io_error"
    PERMISSION_DENIED = "permission_denied"
    ALREADY_EXISTS = "already_exists"


class FileNode(BaseModel):
    """
    A file or directory on disk, read by reference.

    Never created or removed by the services; it only describes what the
    caller handed in at the time it was inspected.
    """

    model_config = ConfigDict(frozen=True)

    path: Path = Field(..., description="Absolute path of the node")
    kind: FileKind = Field(..., description="File or directory")
    last_modified: datetime = Field(..., description="Last modification time")
    size: int = Field(default=0, ge=0, description="Size in bytes (0 for directories)")

    @classmethod
    def from_path(cls, path: Path) -> "FileNode":
        """Stat ``path`` and build a node. Raises FileNotFoundError if absent."""
        path = Path(path).absolute()
        stat_result = path.stat()
        is_dir = path.is_dir()
        return cls(
            path=path,
            kind=FileKind.DIRECTORY if is_dir else FileKind.FILE,
            last_modified=datetime.fromtimestamp(stat_result.st_mtime),
            size=0 if is_dir else stat_result.st_size,
        )

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def is_directory(self) -> bool:
        return self.kind == FileKind.DIRECTORY


@dataclass(frozen=True)
class ArchiveEntry:
    """One record inside a packed archive."""

    path: str
    is_directory: bool
    last_modified: datetime
    payload: bytes = b""

    @property
    def size(self) -> int:
        return len(self.payload)


@dataclass
class OperationResult(Generic[T]):
    """
    Outcome of a public file, folder or archive operation.

    Truthiness follows ``success`` so existing boolean checks keep working.
    """

    success: bool
    value: Optional[T] = None
    path: Optional[Path] = None
    error_kind: Optional[ErrorKind] = None
    error_message: Optional[str] = None

    def __bool__(self) -> bool:
        return self.success

    @classmethod
    def ok(cls, value: Optional[T] = None, path: Optional[Path] = None) -> "OperationResult[T]":
        return cls(success=True, value=value, path=path)

    @classmethod
    def fail(
        cls,
        error_kind: ErrorKind,
        error_message: str,
        path: Optional[Path] = None,
    ) -> "OperationResult[T]":
        return cls(
            success=False,
            path=path,
            error_kind=error_kind,
            error_message=error_message,
        )

    def get_summary(self) -> str:
        """Get a human-readable summary of the operation."""
        target = self.path.name if self.path else "<unknown>"
        if self.success:
            return f"Operation successful: {target}"
        return (
            f"Operation failed: {target} - "
            f"{self.error_kind.value if self.error_kind else 'unknown'}: "
            f"{self.error_message or 'Unknown error'}"
        )
