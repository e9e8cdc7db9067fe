"""Exception hierarchy for fontgroups."""


class FontGroupsError(Exception):
    """Base exception for all fontgroups errors."""

    pass


class StorageError(FontGroupsError):
    """Errors related to the JSON database file."""

    pass


class StorageReadError(StorageError):
    """The database file exists but could not be read or parsed."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read database '{path}': {reason}")


class StorageWriteError(StorageError):
    """The database file could not be written."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save data to database '{path}': {reason}")


class RestoreError(StorageError):
    """A backup file could not be restored."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to restore backup '{path}': {reason}")


class AssetError(FontGroupsError):
    """Errors related to stored font binaries."""

    pass


class AssetWriteError(AssetError):
    """An uploaded font binary could not be written to disk."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to store font file '{path}': {reason}")


class InvalidFontFileError(FontGroupsError):
    """An upload was rejected before reaching the service."""

    def __init__(self, filename: str, reason: str) -> None:
        self.filename = filename
        self.reason = reason
        super().__init__(f"Invalid font file '{filename}': {reason}")
