import logging
import shutil
from pathlib import Path
from typing import BinaryIO, Optional, Union

from platform_utils.config import Settings
from platform_utils.core.exceptions import (
    DestinationExistsError,
    FileOperationIOError,
    SourceNotFoundError,
)
from platform_utils.models import FileNode, OperationResult
from platform_utils.services.error_classifier import (
    HANDLED_ERRORS,
    OperationErrorClassifier,
)
from platform_utils.utils.file_operations import (
    format_size,
    generate_conflict_free_path,
    get_file_extension,
    get_file_name_without_extension,
    resolve_destination_with_conflicts,
)

PathLike = Union[str, Path]


class FileService:
    """
    Copy, move, delete, rename, read and write files and folders.

    Every public operation returns an OperationResult. Filesystem errors are
    classified and logged at the boundary and never raised to the caller.
    """

    def __init__(self, settings: Settings, logger: Optional[logging.Logger] = None):
        self.settings = settings
        self._logger = logger or logging.getLogger("platform_utils.file_service")
        self._errors = OperationErrorClassifier(self._logger)
        self.chunk_size = settings.copy_chunk_size

        self._logger.info(
            f"FileService initialiseret med chunk size {settings.copy_chunk_size_kb} KB"
        )

    def read_file(self, path: PathLike) -> OperationResult[bytes]:
        path = Path(path)
        try:
            self._require_file(path)
            data = path.read_bytes()
        except HANDLED_ERRORS as e:
            return self._errors.to_result(e, "read_file", path)

        self._logger.debug(f"Read {len(data)} bytes from {path.name}")
        return OperationResult.ok(data, path)

    def read_text(self, path: PathLike, encoding: str = "utf-8") -> OperationResult[str]:
        result = self.read_file(path)
        if not result:
            return result

        try:
            text = result.value.decode(encoding)
        except UnicodeDecodeError as e:
            return self._errors.to_result(
                FileOperationIOError(f"Cannot decode as {encoding}: {e}", path),
                "read_text",
            )
        return OperationResult.ok(text, result.path)

    def read_stream(self, stream: BinaryIO) -> OperationResult[bytes]:
        """Read a binary stream to the end and close it."""
        try:
            with stream:
                data = stream.read()
        except HANDLED_ERRORS as e:
            return self._errors.to_result(e, "read_stream")
        return OperationResult.ok(data)

    def copy(self, source: PathLike, destination: PathLike) -> OperationResult[Path]:
        """
        Copy a file or folder without overwriting anything.

        Files: a ``destination`` that is an existing folder, or a new path
        whose name differs from the source name, is treated as a folder and
        the copy lands inside it. Otherwise ``destination`` names the copy.

        Folders: a fresh ``destination/<name>`` folder is created and the
        tree is copied into it.

        Colliding names get a ``(n)`` suffix. An aborted folder copy can
        leave a partially populated destination.
        """
        source = Path(source)
        destination = Path(destination)
        try:
            if not source.exists():
                raise SourceNotFoundError(source)

            if not source.is_file() and not source.is_dir():
                raise FileOperationIOError(f"Not a regular file or folder: {source}", source)

            if source.is_dir():
                if destination.resolve().is_relative_to(source.resolve()):
                    raise FileOperationIOError(
                        f"Cannot copy a folder into itself: {destination}", source
                    )
                copied = self._copy_directory(source, destination)
            else:
                copied = self._copy_file(source, destination)
        except HANDLED_ERRORS as e:
            return self._errors.to_result(e, "copy", source)

        self._logger.debug(f"Copied {source} -> {copied}")
        return OperationResult.ok(copied, copied)

    def _copy_file(self, source: Path, destination: Path) -> Path:
        treat_as_directory = destination.is_dir() or (
            not destination.exists() and destination.name != source.name
        )

        if treat_as_directory:
            destination.mkdir(parents=True, exist_ok=True)
            target = resolve_destination_with_conflicts(source, destination)
        else:
            destination.parent.mkdir(parents=True, exist_ok=True)
            target = generate_conflict_free_path(destination)

        with open(source, "rb") as src, open(target, "xb") as dst:
            shutil.copyfileobj(src, dst, self.chunk_size)
        shutil.copystat(source, target)
        return target

    def _copy_directory(self, source: Path, destination: Path) -> Path:
        destination.mkdir(parents=True, exist_ok=True)
        target = resolve_destination_with_conflicts(source, destination)
        target.mkdir()

        for child in sorted(source.iterdir()):
            if child.is_dir():
                self._copy_directory(child, target)
            elif child.is_file():
                self._copy_file(child, target)
            else:
                # Pipes, sockets, devices and dangling links
                self._logger.debug(f"Skipping special or dangling entry: {child}")
        return target

    def move(self, source: PathLike, destination: PathLike) -> OperationResult[Path]:
        """Copy ``source`` to ``destination``, then delete the source."""
        copied = self.copy(source, destination)
        if not copied:
            return copied

        deleted = self.delete(source)
        if not deleted:
            return deleted

        self._logger.debug(f"Moved {source} -> {copied.value}")
        return copied

    def delete(self, path: PathLike) -> OperationResult[Path]:
        path = Path(path)
        try:
            if path.is_dir() and not path.is_symlink():
                shutil.rmtree(path)
            elif path.exists() or path.is_symlink():
                path.unlink()
            else:
                raise SourceNotFoundError(path)
        except HANDLED_ERRORS as e:
            return self._errors.to_result(e, "delete", path)

        self._logger.debug(f"Deleted {path}")
        return OperationResult.ok(path, path)

    def rename(self, path: PathLike, new_name: str) -> OperationResult[Path]:
        """Rename within the same folder. Never replaces an existing sibling."""
        path = Path(path)
        target = path.parent / new_name
        try:
            if not path.exists():
                raise SourceNotFoundError(path)
            if target.exists():
                raise DestinationExistsError(target)
            path.rename(target)
        except HANDLED_ERRORS as e:
            return self._errors.to_result(e, "rename", path)

        self._logger.debug(f"Renamed {path.name} -> {new_name}")
        return OperationResult.ok(target, target)

    def write_to_file(
        self,
        path: PathLike,
        content: Union[bytes, str],
        overwrite: bool,
    ) -> OperationResult[Path]:
        """
        Write to an existing file.

        ``overwrite=False`` appends the bytes to the current content.
        """
        path = Path(path)
        try:
            data = self._to_bytes(content, path)
            self._require_file(path)
            with open(path, "wb" if overwrite else "ab") as f:
                f.write(data)
        except HANDLED_ERRORS as e:
            return self._errors.to_result(e, "write_to_file", path)

        self._logger.debug(
            f"Wrote {len(data)} bytes to {path.name} ({'overwrite' if overwrite else 'append'})"
        )
        return OperationResult.ok(path, path)

    def stat(self, path: PathLike) -> OperationResult[FileNode]:
        path = Path(path)
        try:
            node = FileNode.from_path(path)
        except HANDLED_ERRORS as e:
            return self._errors.to_result(e, "stat", path)
        return OperationResult.ok(node, node.path)

    def get_file_extension(self, path: PathLike) -> Optional[str]:
        return get_file_extension(Path(path))

    def get_file_name_without_extension(self, path: PathLike) -> Optional[str]:
        return get_file_name_without_extension(Path(path))

    def filesize_to_readable_format(self, path: PathLike) -> str:
        result = self.stat(path)
        if not result:
            return ""
        return format_size(result.value.size)

    @staticmethod
    def _require_file(path: Path) -> None:
        if not path.exists():
            raise SourceNotFoundError(path)
        if path.is_dir():
            raise FileOperationIOError(f"Path is a directory: {path}", path)
        if not path.is_file():
            raise FileOperationIOError(f"Not a regular file: {path}", path)

    @staticmethod
    def _to_bytes(content: Union[bytes, str], path: Path) -> bytes:
        if isinstance(content, str):
            return content.encode("utf-8")
        if isinstance(content, (bytes, bytearray, memoryview)):
            return bytes(content)
        raise FileOperationIOError(
            f"Content must be bytes or str, got {type(content).__name__}", path
        )
