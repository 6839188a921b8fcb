"""Tests for OperationErrorClassifier."""

import errno
import logging
import zipfile
from pathlib import Path

import pytest

from platform_utils.core.exceptions import (
    DestinationExistsError,
    DestinationPermissionError,
    FileOperationIOError,
    SourceNotFoundError,
)
from platform_utils.models import ErrorKind
from platform_utils.services.error_classifier import OperationErrorClassifier


@pytest.fixture
def classifier(test_logger):
    return OperationErrorClassifier(test_logger)


class TestClassifyError:
    """Test classification of exceptions into ErrorKind."""

    @pytest.mark.parametrize(
        "error,expected",
        [
            (SourceNotFoundError("/x"), ErrorKind.NOT_FOUND),
            (FileNotFoundError(errno.ENOENT, "No such file"), ErrorKind.NOT_FOUND),
            (DestinationExistsError("/x"), ErrorKind.ALREADY_EXISTS),
            (FileExistsError(errno.EEXIST, "exists"), ErrorKind.ALREADY_EXISTS),
            (PermissionError(errno.EACCES, "denied"), ErrorKind.PERMISSION_DENIED),
            (DestinationPermissionError("read-only"), ErrorKind.PERMISSION_DENIED),
            (OSError(errno.EROFS, "Read-only file system"), ErrorKind.PERMISSION_DENIED),
            (OSError(errno.EIO, "Input/output error"), ErrorKind.IO_ERROR),
            (FileOperationIOError("broken"), ErrorKind.IO_ERROR),
            (zipfile.BadZipFile("bad"), ErrorKind.IO_ERROR),
        ],
    )
    def test_classification(self, classifier, error, expected):
        assert classifier.classify_error(error) == expected


class TestToResult:
    """Test conversion into failed results."""

    def test_result_fields(self, classifier):
        result = classifier.to_result(FileNotFoundError("gone"), "copy", "/data/a.txt")

        assert result.success is False
        assert result.error_kind == ErrorKind.NOT_FOUND
        assert result.error_message == "gone"
        assert result.path == Path("/data/a.txt")

    def test_path_taken_from_error(self, classifier):
        result = classifier.to_result(SourceNotFoundError("/data/b.txt"), "delete")

        assert result.path == Path("/data/b.txt")

    def test_failure_is_logged(self, classifier, caplog):
        with caplog.at_level(logging.WARNING, logger="platform_utils.tests"):
            classifier.to_result(OSError(errno.EIO, "disk"), "build_archive", "/x")

        assert "build_archive failed" in caplog.text
        assert caplog.records[-1].error_kind == "io_error"
