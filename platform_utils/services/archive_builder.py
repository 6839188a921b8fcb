"""
Archive Builder for platform-utils.

Packs a file or a folder tree into a JAR (ZIP container with a
``META-INF/MANIFEST.MF`` entry). Entry paths are relative to the parent of
the archived root, so the root's own name is the first path component.
A folder's children are written before the folder's own entry.
"""

import logging
import shutil
import zipfile
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Union

from platform_utils.config import Settings
from platform_utils.core.exceptions import SourceNotFoundError
from platform_utils.models import ArchiveEntry, FileNode, OperationResult
from platform_utils.services.error_classifier import (
    HANDLED_ERRORS,
    OperationErrorClassifier,
)
from platform_utils.utils.file_operations import calculate_relative_path

MANIFEST_PATH = "META-INF/MANIFEST.MF"

PathLike = Union[str, Path]


class ArchiveBuilder:
    """
    Writes archives from files and folders, and reads them back.

    Single-threaded and blocking. The source tree is assumed not to change
    while it is being archived.
    """

    def __init__(self, settings: Settings, logger: Optional[logging.Logger] = None):
        self.settings = settings
        self._logger = logger or logging.getLogger("platform_utils.archive_builder")
        self._errors = OperationErrorClassifier(self._logger)
        self.chunk_size = settings.archive_chunk_size

        self._logger.info(
            f"ArchiveBuilder initialiseret (extension={settings.archive_extension}, "
            f"sorted={settings.sort_archive_entries})"
        )

    def build(
        self,
        root_path: PathLike,
        output_directory: PathLike,
        output_name: Optional[str] = None,
    ) -> OperationResult[Path]:
        """
        Archive ``root_path`` into ``output_directory``.

        Args:
            root_path: File or folder to archive; must exist
            output_directory: Folder for the archive, created if missing
            output_name: Archive file name; defaults to the root name. The
                archive extension is appended when missing.

        Returns:
            OperationResult whose value is the archive path
        """
        root = Path(root_path).absolute()
        output_directory = Path(output_directory)

        try:
            if not root.exists():
                raise SourceNotFoundError(root)

            output_directory.mkdir(parents=True, exist_ok=True)
            output = output_directory / self.resolve_output_name(root, output_name)

            with zipfile.ZipFile(output, "w", compression=zipfile.ZIP_DEFLATED) as archive:
                self._write_manifest(archive)
                entry_count = self._write_node(archive, root, root.parent, output.resolve())
        except HANDLED_ERRORS as e:
            return self._errors.to_result(e, "build_archive", root)

        self._logger.info(f"Archive created: {output.name} ({entry_count} entries from {root.name})")
        return OperationResult.ok(output, output)

    def resolve_output_name(self, root: Path, output_name: Optional[str] = None) -> str:
        extension = self.settings.archive_extension
        name = output_name or root.name
        if output_name is None or not name.endswith(extension):
            name += extension
        return name

    def _write_manifest(self, archive: zipfile.ZipFile) -> None:
        manifest = f"Manifest-Version: {self.settings.manifest_version}\r\n\r\n"
        archive.writestr(MANIFEST_PATH, manifest.encode("utf-8"))

    def _write_node(
        self,
        archive: zipfile.ZipFile,
        path: Path,
        base: Path,
        output: Path,
    ) -> int:
        """Write ``path`` and everything below it. Returns the number of entries."""
        if path.resolve() == output:
            return 0

        # Pipes, sockets, devices and dangling links
        if not path.is_file() and not path.is_dir():
            self._logger.debug(f"Skipping special or dangling entry: {path}")
            return 0

        node = FileNode.from_path(path)
        entry_path = calculate_relative_path(node.path, base).as_posix()

        if not node.is_directory:
            self._write_file_entry(archive, node, entry_path)
            return 1

        written = 0
        for child in self._list_children(path):
            written += self._write_node(archive, child, base, output)

        if entry_path and entry_path != ".":
            self._write_directory_entry(archive, node, entry_path)
            written += 1
        return written

    def _list_children(self, path: Path) -> List[Path]:
        children = list(path.iterdir())
        if self.settings.sort_archive_entries:
            children.sort(key=lambda child: child.name)
        return children

    def _write_directory_entry(
        self, archive: zipfile.ZipFile, node: FileNode, entry_path: str
    ) -> None:
        info = zipfile.ZipInfo.from_file(node.path, entry_path, strict_timestamps=False)
        if not info.filename.endswith("/"):
            info.filename += "/"
        archive.writestr(info, b"")

    def _write_file_entry(
        self, archive: zipfile.ZipFile, node: FileNode, entry_path: str
    ) -> None:
        info = zipfile.ZipInfo.from_file(node.path, entry_path, strict_timestamps=False)
        info.compress_type = zipfile.ZIP_DEFLATED

        with open(node.path, "rb") as src, archive.open(info, "w") as dst:
            shutil.copyfileobj(src, dst, self.chunk_size)

    def read_entries(self, archive_path: PathLike) -> OperationResult[List[ArchiveEntry]]:
        """List the entries of an archive in archive order, manifest excluded."""
        archive_path = Path(archive_path)
        entries: List[ArchiveEntry] = []
        try:
            with zipfile.ZipFile(archive_path) as archive:
                for info in archive.infolist():
                    if info.filename == MANIFEST_PATH:
                        continue
                    is_directory = info.is_dir()
                    entries.append(
                        ArchiveEntry(
                            path=info.filename,
                            is_directory=is_directory,
                            last_modified=datetime(*info.date_time),
                            payload=b"" if is_directory else archive.read(info),
                        )
                    )
        except HANDLED_ERRORS as e:
            return self._errors.to_result(e, "read_entries", archive_path)

        return OperationResult.ok(entries, archive_path)

    def extract(self, archive_path: PathLike, destination: PathLike) -> OperationResult[Path]:
        """Unpack every entry except the manifest into ``destination``."""
        archive_path = Path(archive_path)
        destination = Path(destination)
        try:
            destination.mkdir(parents=True, exist_ok=True)
            with zipfile.ZipFile(archive_path) as archive:
                members = [name for name in archive.namelist() if name != MANIFEST_PATH]
                archive.extractall(destination, members=members)
        except HANDLED_ERRORS as e:
            return self._errors.to_result(e, "extract_archive", archive_path)

        self._logger.debug(f"Extracted {archive_path.name} -> {destination}")
        return OperationResult.ok(destination, destination)
