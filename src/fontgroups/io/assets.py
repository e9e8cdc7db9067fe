"""Storage for uploaded font binaries.

Uploaded bytes are written unchanged to ``<uploads_dir>/<filename>`` and
are published under ``<public_prefix>/<filename>``.
"""

from pathlib import Path

from fontgroups.exceptions import AssetWriteError
from fontgroups.utils.logging import get_logger

logger = get_logger("assets")


class FontAssetStore:
    """Writes and removes font binaries in the uploads directory.

    Example:
        assets = FontAssetStore(Path("uploads"))
        assets.write("1234.ttf", data)
        assets.public_path("1234.ttf")  # "/uploads/1234.ttf"
    """

    def __init__(self, uploads_dir: Path, public_prefix: str = "/uploads") -> None:
        """Initialize the asset store.

        Args:
            uploads_dir: Directory holding the binaries
            public_prefix: Public path prefix for stored files
        """
        self._uploads_dir = Path(uploads_dir)
        self._public_prefix = public_prefix.rstrip("/")

    @property
    def uploads_dir(self) -> Path:
        return self._uploads_dir

    def file_path(self, filename: str) -> Path:
        """Location on disk of a stored binary."""
        return self._uploads_dir / filename

    def public_path(self, filename: str) -> str:
        """Public relative path of a stored binary."""
        return f"{self._public_prefix}/{filename}"

    def write(self, filename: str, content: bytes) -> Path:
        """Store a binary, creating the uploads directory if needed.

        Args:
            filename: Storage filename
            content: Raw font bytes, written unchanged

        Returns:
            Path of the written file

        Raises:
            AssetWriteError: If the file could not be written
        """
        target = self.file_path(filename)
        try:
            self._uploads_dir.mkdir(parents=True, exist_ok=True)
            target.write_bytes(content)
        except OSError as e:
            raise AssetWriteError(str(target), str(e)) from e

        logger.debug("Font file stored", path=str(target), size=len(content))
        return target

    def remove(self, filename: str) -> bool:
        """Remove a stored binary, best-effort.

        Failures are logged, never raised.

        Returns:
            True if the file was removed, False if removal failed
        """
        target = self.file_path(filename)
        try:
            target.unlink()
        except OSError as e:
            logger.warning(
                "Could not remove font file",
                path=str(target),
                error=str(e),
                error_type=type(e).__name__,
            )
            return False
        return True
