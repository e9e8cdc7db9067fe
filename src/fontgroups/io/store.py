"""Flat-file JSON database for fonts and font groups.

This module provides the JsonStore class. Every operation reads the whole
document from disk, changes it in memory and writes the whole document
back. There is no indexing; lookups are linear scans.
"""

import json
import os
import tempfile
import threading
from collections.abc import Callable
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, TypeVar

from fontgroups.domain import Font, FontGroup, StoreDocument
from fontgroups.exceptions import RestoreError, StorageReadError, StorageWriteError
from fontgroups.utils.logging import get_logger

T = TypeVar("T")

BACKUP_PREFIX = "database-backup-"

logger = get_logger("store")


def _dump(data: dict[str, Any]) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


class JsonStore:
    """Whole-document JSON persistence for fonts and font groups.

    One instance owns one database file. Read-modify-write cycles on the
    same instance are serialized by a lock; separate processes writing the
    same file are not coordinated and the last write wins.

    Example:
        store = JsonStore(Path("data/database.json"))
        store.add_font(font)
        fonts = store.get_all_fonts()
    """

    def __init__(self, db_path: Path, recover_corrupt: bool = True) -> None:
        """Initialize the store.

        Args:
            db_path: Path of the JSON database file
            recover_corrupt: Return an empty document when the file cannot
                be parsed instead of raising StorageReadError
        """
        self._db_path = Path(db_path)
        self._recover_corrupt = recover_corrupt
        self._lock = threading.RLock()

    @property
    def path(self) -> Path:
        """Path of the JSON database file."""
        return self._db_path

    @property
    def data_dir(self) -> Path:
        """Directory holding the database file and its backups."""
        return self._db_path.parent

    # -------------------- document --------------------

    def _ensure_database(self) -> None:
        """Create the data directory and an empty database if missing."""
        if self._db_path.exists():
            return
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            self._db_path.write_text(_dump(StoreDocument.empty().to_dict()), encoding="utf-8")
        except OSError as e:
            raise StorageWriteError(str(self._db_path), str(e)) from e
        logger.info("Initialized empty database", path=str(self._db_path))

    def read(self) -> StoreDocument:
        """Read the full database document.

        Returns:
            The persisted document, or an empty one if the file is corrupt
            and recovery is enabled

        Raises:
            StorageReadError: If the file is corrupt and recovery is disabled
            StorageWriteError: If the missing file could not be created
        """
        with self._lock:
            self._ensure_database()
            try:
                raw = json.loads(self._db_path.read_text(encoding="utf-8"))
                return StoreDocument.from_dict(raw)
            except (OSError, ValueError, TypeError, KeyError, RecursionError) as e:
                if not self._recover_corrupt:
                    raise StorageReadError(str(self._db_path), str(e)) from e
                logger.warning(
                    "Database unreadable, continuing with empty document",
                    path=str(self._db_path),
                    error=str(e),
                    error_type=type(e).__name__,
                )
                return StoreDocument.empty()

    def write(self, document: StoreDocument) -> None:
        """Persist the full document, replacing the previous content.

        Args:
            document: Document to write

        Raises:
            StorageWriteError: If the file could not be written
        """
        self._write_raw(document.to_dict())

    def _write_raw(self, data: Any) -> None:
        """Atomically replace the database file with ``data`` as JSON."""
        with self._lock:
            self._ensure_database()
            tmp_name: str | None = None
            try:
                fd, tmp_name = tempfile.mkstemp(
                    prefix=f".{self._db_path.name}.", suffix=".tmp", dir=self.data_dir
                )
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    fh.write(_dump(data))
                os.replace(tmp_name, self._db_path)
                tmp_name = None
            except (OSError, TypeError, ValueError) as e:
                raise StorageWriteError(str(self._db_path), str(e)) from e
            finally:
                if tmp_name is not None:
                    Path(tmp_name).unlink(missing_ok=True)

    def _modify(self, change: Callable[[StoreDocument], T]) -> T:
        """Run one read-modify-write cycle.

        ``change`` mutates the document in place and returns a result. The
        document is written back only when the result is truthy or None.
        """
        with self._lock:
            document = self.read()
            result = change(document)
            if result is None or result:
                self.write(document)
            return result

    # -------------------- fonts --------------------

    def get_all_fonts(self) -> list[Font]:
        return self.read().fonts

    def add_font(self, font: Font) -> None:
        def change(document: StoreDocument) -> None:
            document.fonts.append(font)

        self._modify(change)

    def get_font_by_id(self, font_id: str) -> Font | None:
        return next((font for font in self.read().fonts if font.id == font_id), None)

    def delete_font(self, font_id: str) -> bool:
        """Delete a font and prune it from every font group.

        Args:
            font_id: ID of the font to delete

        Returns:
            True if the font existed
        """

        def change(document: StoreDocument) -> bool:
            remaining = [font for font in document.fonts if font.id != font_id]
            if len(remaining) == len(document.fonts):
                return False
            document.fonts = remaining
            document.font_groups = [group.without_font(font_id) for group in document.font_groups]
            return True

        return self._modify(change)

    # -------------------- font groups --------------------

    def get_all_font_groups(self) -> list[FontGroup]:
        return self.read().font_groups

    def add_font_group(self, group: FontGroup) -> None:
        def change(document: StoreDocument) -> None:
            document.font_groups.append(group)

        self._modify(change)

    def get_font_group_by_id(self, group_id: str) -> FontGroup | None:
        return next(
            (group for group in self.read().font_groups if group.id == group_id), None
        )

    def update_font_group(self, group: FontGroup) -> bool:
        """Replace the stored group that has the same ID.

        Returns:
            True if a group with that ID existed
        """

        def change(document: StoreDocument) -> bool:
            for index, existing in enumerate(document.font_groups):
                if existing.id == group.id:
                    document.font_groups[index] = group
                    return True
            return False

        return self._modify(change)

    def delete_font_group(self, group_id: str) -> bool:
        """Delete a font group.

        Returns:
            True if the group existed
        """

        def change(document: StoreDocument) -> bool:
            remaining = [group for group in document.font_groups if group.id != group_id]
            if len(remaining) == len(document.font_groups):
                return False
            document.font_groups = remaining
            return True

        return self._modify(change)

    # -------------------- backup / restore --------------------

    def backup(self) -> Path:
        """Write a timestamped copy of the current document next to the database.

        Returns:
            Path of the backup file

        Raises:
            StorageWriteError: If the backup could not be written
        """
        with self._lock:
            document = self.read()
            stamp = datetime.now(timezone.utc).isoformat(timespec="milliseconds")
            stamp = stamp.replace("+00:00", "Z").replace(":", "-").replace(".", "-")
            backup_path = self.data_dir / f"{BACKUP_PREFIX}{stamp}.json"
            try:
                backup_path.write_text(_dump(document.to_dict()), encoding="utf-8")
            except OSError as e:
                raise StorageWriteError(str(backup_path), str(e)) from e

        logger.info("Database backed up", path=str(backup_path))
        return backup_path

    def restore(self, backup_path: Path) -> None:
        """Overwrite the database with the contents of a backup file.

        The backup's JSON is written verbatim; its shape is not validated.

        Args:
            backup_path: Backup file to restore from

        Raises:
            RestoreError: If the backup is missing or is not valid JSON
            StorageWriteError: If the database could not be written
        """
        backup_path = Path(backup_path)
        try:
            data = json.loads(backup_path.read_text(encoding="utf-8"))
        except (OSError, ValueError, RecursionError) as e:
            raise RestoreError(str(backup_path), str(e)) from e

        self._write_raw(data)
        logger.info("Database restored", source=str(backup_path), path=str(self._db_path))
