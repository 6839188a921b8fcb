import logging
from pathlib import Path
from typing import Optional, Union

from platform_utils.services.error_classifier import HANDLED_ERRORS

TTF_MAGIC = bytes([0x00, 0x01, 0x00, 0x00, 0x00])
OTF_MAGIC = bytes([0x4F, 0x54, 0x54, 0x4F, 0x00])


def matches_magic(data: bytes, magic: bytes) -> bool:
    """
    True if each leading byte of ``data`` occurs somewhere in ``magic``.

    This is a loose check: ``01 00 01 00 00`` passes for TrueType. Data
    shorter than the magic never matches.
    """
    if len(data) < len(magic):
        return False

    allowed = set(magic)
    return all(byte in allowed for byte in data[: len(magic)])


class FontVerifier:
    """Best-effort font sniffing from the file name and its first bytes."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger("platform_utils.font_verifier")

    def is_real_ttf(self, path: Union[str, Path]) -> bool:
        return self._verify(Path(path), "ttf", TTF_MAGIC)

    def is_real_otf(self, path: Union[str, Path]) -> bool:
        return self._verify(Path(path), "otf", OTF_MAGIC)

    def _verify(self, path: Path, extension: str, magic: bytes) -> bool:
        if not path.name.lower().endswith(extension):
            return False

        if not path.is_file():
            self._logger.debug(f"Not a regular file: {path}")
            return False

        try:
            with open(path, "rb") as f:
                header = f.read(len(magic))
        except HANDLED_ERRORS as e:
            self._logger.warning(f"Could not read font header from {path}: {e}")
            return False

        real = matches_magic(header, magic)
        self._logger.debug(f"{path.name}: {extension} magic {'ok' if real else 'mismatch'}")
        return real
