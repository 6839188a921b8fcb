from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Logging konfiguration
    log_level: str = "INFO"
    log_file_path: str = "logs/platform_utils.log"
    log_retention_days: int = 30

    # Filkopiering
    copy_chunk_size_kb: int = 1024

    # Arkiver
    archive_chunk_size_kb: int = 64  # Buffer when streaming file bytes into an entry
    archive_extension: str = ".jar"
    manifest_version: str = "1.0"
    sort_archive_entries: bool = True  # Listing order is not stable across filesystems

    model_config = SettingsConfigDict(env_file="settings.env", extra="ignore")

    @property
    def log_directory(self) -> Path:
        """Returnerer log directory som Path objekt"""
        return Path(self.log_file_path).parent

    @property
    def copy_chunk_size(self) -> int:
        return self.copy_chunk_size_kb * 1024

    @property
    def archive_chunk_size(self) -> int:
        return self.archive_chunk_size_kb * 1024
