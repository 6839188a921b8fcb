from .archive_builder import ArchiveBuilder
from .error_classifier import OperationErrorClassifier
from .file_service import FileService
from .font_verifier import FontVerifier

__all__ = [
    "ArchiveBuilder",
    "FileService",
    "FontVerifier",
    "OperationErrorClassifier",
]
