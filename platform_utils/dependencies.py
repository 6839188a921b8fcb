from functools import lru_cache
from typing import Dict, Any

from .config import Settings
from .services.archive_builder import ArchiveBuilder
from .services.file_service import FileService
from .services.font_verifier import FontVerifier

# Global singleton instances
_singletons: Dict[str, Any] = {}


@lru_cache
def get_settings() -> Settings:
    """Hent Settings singleton instance."""
    return Settings()


def get_file_service() -> FileService:
    if "file_service" not in _singletons:
        _singletons["file_service"] = FileService(get_settings())
    return _singletons["file_service"]


def get_archive_builder() -> ArchiveBuilder:
    if "archive_builder" not in _singletons:
        _singletons["archive_builder"] = ArchiveBuilder(get_settings())
    return _singletons["archive_builder"]


def get_font_verifier() -> FontVerifier:
    if "font_verifier" not in _singletons:
        _singletons["font_verifier"] = FontVerifier()
    return _singletons["font_verifier"]


def reset_singletons() -> None:
    """Reset all singletons and the cached settings (used by tests)."""
    _singletons.clear()
    get_settings.cache_clear()
