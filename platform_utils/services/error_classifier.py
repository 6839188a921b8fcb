"""
Operation Error Classifier for platform-utils.

Maps exceptions raised inside file, folder and archive operations onto an
ErrorKind so the public boundary can report a failed OperationResult
instead of raising.
"""

import errno
import logging
import zipfile
from pathlib import Path
from typing import Optional, Union

from platform_utils.core.exceptions import (
    DestinationExistsError,
    DestinationPermissionError,
    FileOperationError,
    SourceNotFoundError,
)
from platform_utils.models import ErrorKind, OperationResult

_PERMISSION_ERRNOS = (errno.EACCES, errno.EPERM, errno.EROFS)

# Errors the public boundary of each operation converts into failed results
HANDLED_ERRORS = (OSError, FileOperationError, zipfile.BadZipFile)


class OperationErrorClassifier:
    """Classifies operation errors and turns them into failed results."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger("platform_utils.error_classifier")

    def classify_error(self, error: Exception) -> ErrorKind:
        if isinstance(error, (SourceNotFoundError, FileNotFoundError)):
            return ErrorKind.NOT_FOUND

        if isinstance(error, (DestinationExistsError, FileExistsError)):
            return ErrorKind.ALREADY_EXISTS

        if isinstance(error, (DestinationPermissionError, PermissionError)):
            return ErrorKind.PERMISSION_DENIED

        if isinstance(error, OSError) and getattr(error, "errno", None) in _PERMISSION_ERRNOS:
            return ErrorKind.PERMISSION_DENIED

        return ErrorKind.IO_ERROR

    def to_result(
        self,
        error: Exception,
        operation: str,
        path: Optional[Union[str, Path]] = None,
    ) -> OperationResult:
        """Classify ``error``, log it and wrap it in a failed OperationResult."""
        error_kind = self.classify_error(error)
        if path is None and isinstance(error, FileOperationError):
            path = error.path
        result_path = Path(path) if path is not None else None

        self._logger.warning(
            f"{operation} failed: {error.__class__.__name__}: {error}",
            extra={
                "operation": operation,
                "file_path": str(result_path) if result_path else None,
                "error_kind": error_kind.value,
                "error_class": error.__class__.__name__,
            },
        )
        return OperationResult.fail(error_kind, str(error), result_path)

