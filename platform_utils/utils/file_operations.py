import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

_SUFFIX_PATTERN = re.compile(r"^(?P<base>.*)\((?P<index>\d+)\)$")

_SIZE_UNITS = ("B", "KB", "MB", "GB", "TB")


@dataclass(frozen=True)
class CollisionSuffix:
    """Parsed ``(n)`` suffix of a stem. ``index`` is -1 when there is none."""

    base: str
    index: int = -1

    @property
    def next_index(self) -> int:
        return self.index + 1


def calculate_relative_path(source_path: Path, source_base: Path) -> Path:
    try:
        return source_path.relative_to(source_base)
    except ValueError:
        # Source is not under base directory - use just the name
        return Path(source_path.name)


def split_name(path: Path) -> Tuple[str, str]:
    """
    Split a name into stem and extension.

    The extension runs from the last dot (inclusive). Directories and names
    without a dot have an empty extension.
    """
    name = path.name
    if path.is_dir() or "." not in name:
        return name, ""

    dot = name.rindex(".")
    return name[:dot], name[dot:]


def parse_collision_suffix(stem: str) -> CollisionSuffix:
    match = _SUFFIX_PATTERN.match(stem)
    if match is None:
        return CollisionSuffix(base=stem)
    return CollisionSuffix(base=match.group("base"), index=int(match.group("index")))


def generate_conflict_free_path(dest_path: Path) -> Path:
    """
    Return ``dest_path`` or the first ``stem(n).ext`` sibling that is free.

    An existing ``(k)`` suffix on the stem is continued with ``(k+1)``
    instead of stacking a second suffix.
    """
    candidate = Path(dest_path)
    parent = candidate.parent

    while candidate.exists():
        stem, extension = split_name(candidate)
        suffix = parse_collision_suffix(stem)
        candidate = parent / f"{suffix.base}({suffix.next_index}){extension}"

    return candidate


def resolve_name(dest_path: Path) -> str:
    return generate_conflict_free_path(dest_path).name


def resolve_destination_with_conflicts(source_path: Path, dest_dir: Path) -> Path:
    return generate_conflict_free_path(dest_dir / source_path.name)


def get_file_extension(path: Path) -> Optional[str]:
    """Extension including the dot, or None for missing paths, folders and dotless names."""
    path = Path(path)
    if not path.is_file():
        return None

    _, extension = split_name(path)
    return extension or None


def get_file_name_without_extension(path: Path) -> Optional[str]:
    path = Path(path)
    if not path.is_file():
        return None

    stem, _ = split_name(path)
    return stem


def format_size(size_bytes: int) -> str:
    """
    Format a byte count with 1024 steps and at most two decimals.

    Trailing zeros are dropped: 1024 -> "1KB", 1536 -> "1.5KB".
    """
    if size_bytes <= 0:
        return "0B"

    value = float(size_bytes)
    unit_index = 0
    while value >= 1024 and unit_index < len(_SIZE_UNITS) - 1:
        value /= 1024
        unit_index += 1

    formatted = f"{value:.2f}".rstrip("0").rstrip(".")
    return f"{formatted}{_SIZE_UNITS[unit_index]}"
