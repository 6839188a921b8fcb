"""
Utilities package for platform-utils.

Pure functions for naming, sizes and relative times that support the
services without side effects.
"""

from .file_operations import (
    CollisionSuffix,
    calculate_relative_path,
    generate_conflict_free_path,
    resolve_name,
    get_file_extension,
    get_file_name_without_extension,
    format_size,
)

from .time_utils import (
    to_relative_time,
    compute_past_relative_time,
    compute_future_relative_time,
    to_plural_form,
)

__all__ = [
    # File operations
    "CollisionSuffix",
    "calculate_relative_path",
    "generate_conflict_free_path",
    "resolve_name",
    "get_file_extension",
    "get_file_name_without_extension",
    "format_size",
    # Time utilities
    "to_relative_time",
    "compute_past_relative_time",
    "compute_future_relative_time",
    "to_plural_form",
]
