"""Configuration settings for fontgroups."""

from pathlib import Path

from pydantic import BaseModel, Field


class StorageConfig(BaseModel):
    """Where the database and the uploaded font files live.

    All locations are resolved relative to ``home``.
    """

    home: Path = Field(
        default=Path("."),
        description="Root directory holding the data and uploads directories",
    )
    data_dir_name: str = Field(
        default="data",
        description="Directory (under home) holding the JSON database and its backups",
    )
    database_filename: str = Field(
        default="database.json",
        description="Filename of the JSON database",
    )
    uploads_dir_name: str = Field(
        default="uploads",
        description="Directory (under home) holding uploaded font binaries",
    )
    public_prefix: str = Field(
        default="/uploads",
        description="Public path prefix recorded for each stored font",
    )
    recover_corrupt_database: bool = Field(
        default=True,
        description="Treat an unparseable database as empty instead of raising",
    )

    @property
    def data_dir(self) -> Path:
        """Directory holding the database file."""
        return self.home / self.data_dir_name

    @property
    def database_path(self) -> Path:
        """Full path of the JSON database."""
        return self.data_dir / self.database_filename

    @property
    def uploads_dir(self) -> Path:
        """Directory holding uploaded font binaries."""
        return self.home / self.uploads_dir_name


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class FontGroupsSettings(BaseModel):
    """Main application settings."""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> FontGroupsSettings:
    """Get default application settings."""
    return FontGroupsSettings()
