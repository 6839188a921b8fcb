# platform_utils/core/exceptions.py
from pathlib import Path
from typing import Optional, Union


class FileOperationError(Exception):
    """Base exception for file, folder and archive operation failures."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        self.path = Path(path) if path is not None else None
        super().__init__(message)


class SourceNotFoundError(FileOperationError):
    """Raised when the source file or folder does not exist."""

    def __init__(self, path: Union[str, Path]):
        super().__init__(f"Source does not exist: {path}", path)


class FileOperationIOError(FileOperationError):
    """Raised for general I/O errors while reading, writing or archiving."""
    pass


class DestinationPermissionError(FileOperationError):
    """Raised when the destination cannot be written to."""
    pass


class DestinationExistsError(FileOperationError):
    """Raised when an operation would replace an existing entry."""

    def __init__(self, path: Union[str, Path]):
        super().__init__(f"Destination already exists: {path}", path)
