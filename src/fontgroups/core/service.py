"""Font and font group operations.

FontService validates requests, writes and removes uploaded binaries, and
delegates every structured change to the JSON store.
"""

import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar

from fontgroups.config import FontGroupsSettings
from fontgroups.domain import Font, FontGroup, display_name, utc_now
from fontgroups.exceptions import StorageError
from fontgroups.io import FontAssetStore, JsonStore
from fontgroups.utils.logging import get_logger

logger = get_logger("service")


@dataclass(frozen=True)
class FontDeletion:
    """Outcome of deleting a font.

    Attributes:
        found: Whether the font existed (and its metadata was removed)
        binary_removed: Whether the stored file was removed as well
    """

    found: bool
    binary_removed: bool = False

    def __bool__(self) -> bool:
        return self.found


class FontService:
    """Orchestrates font uploads and font group management.

    Example:
        store = JsonStore(Path("data/database.json"))
        assets = FontAssetStore(Path("uploads"))
        service = FontService(store, assets)
        arial = service.save_font(data, "Arial.ttf")
    """

    # A group always holds at least this many fonts
    MIN_GROUP_FONTS: ClassVar[int] = 2

    def __init__(self, store: JsonStore, assets: FontAssetStore) -> None:
        """Initialize the service.

        Args:
            store: Database holding font and group records
            assets: Storage for uploaded font binaries
        """
        self.store = store
        self.assets = assets

    @classmethod
    def from_settings(cls, settings: FontGroupsSettings) -> "FontService":
        """Build a service wired to the locations in ``settings``."""
        storage = settings.storage
        return cls(
            store=JsonStore(
                storage.database_path,
                recover_corrupt=storage.recover_corrupt_database,
            ),
            assets=FontAssetStore(storage.uploads_dir, storage.public_prefix),
        )

    # -------------------- fonts --------------------

    def save_font(self, content: bytes, original_name: str) -> Font:
        """Store an uploaded font and record it.

        Args:
            content: Raw TTF bytes, stored unchanged
            original_name: Filename as uploaded

        Returns:
            The new font record

        Raises:
            AssetWriteError: If the binary could not be written
            StorageWriteError: If the record could not be persisted
        """
        font_id = str(uuid.uuid4())
        filename = f"{font_id}.ttf"

        self.assets.write(filename, content)

        font = Font(
            id=font_id,
            name=display_name(original_name),
            filename=filename,
            original_name=original_name,
            path=self.assets.public_path(filename),
            uploaded_at=utc_now(),
        )
        try:
            self.store.add_font(font)
        except StorageError:
            self.assets.remove(filename)
            raise

        logger.info("Font uploaded", font_id=font.id, name=font.name, size=len(content))
        return font

    def get_all_fonts(self) -> list[Font]:
        return self.store.get_all_fonts()

    def get_font(self, font_id: str) -> Font | None:
        return self.store.get_font_by_id(font_id)

    def font_file_path(self, font: Font) -> Path:
        """Location on disk of a font's stored binary."""
        return self.assets.file_path(font.filename)

    def delete_font(self, font_id: str) -> FontDeletion:
        """Delete a font's binary and its record.

        Removing the binary is best-effort: if it fails, the record is
        deleted anyway and the failure is reported in the result. The font
        is also removed from every group that contains it.

        Args:
            font_id: ID of the font to delete

        Returns:
            FontDeletion describing what was removed
        """
        font = self.store.get_font_by_id(font_id)
        if font is None:
            logger.info("Font not found", font_id=font_id)
            return FontDeletion(found=False)

        binary_removed = self.assets.remove(font.filename)
        found = self.store.delete_font(font_id)

        if binary_removed:
            logger.info("Font deleted", font_id=font_id)
        else:
            logger.warning("Font deleted, stored file left behind", font_id=font_id)
        return FontDeletion(found=found, binary_removed=binary_removed)

    # -------------------- font groups --------------------

    def _resolve_fonts(self, font_ids: list[str]) -> list[Font] | None:
        """Look up fonts in request order.

        Returns:
            The fonts, or None if any ID is unknown
        """
        by_id = {font.id: font for font in self.store.get_all_fonts()}
        missing = [font_id for font_id in font_ids if font_id not in by_id]
        if missing:
            logger.info("Font group rejected", reason="unknown_font_ids", font_ids=missing)
            return None
        return [by_id[font_id] for font_id in font_ids]

    def _has_enough_fonts(self, font_ids: list[str]) -> bool:
        # Counts IDs as given; a repeated ID counts once per occurrence
        if len(font_ids) < self.MIN_GROUP_FONTS:
            logger.info(
                "Font group rejected",
                reason="too_few_fonts",
                count=len(font_ids),
                minimum=self.MIN_GROUP_FONTS,
            )
            return False
        return True

    def create_font_group(self, name: str, font_ids: list[str]) -> FontGroup | None:
        """Create a group from at least two existing fonts.

        Args:
            name: Group label
            font_ids: IDs of the member fonts, in display order

        Returns:
            The new group, or None if fewer than two IDs were given or any
            ID does not match a stored font
        """
        if not self._has_enough_fonts(font_ids):
            return None

        fonts = self._resolve_fonts(font_ids)
        if fonts is None:
            return None

        now = utc_now()
        group = FontGroup(
            id=str(uuid.uuid4()),
            name=name,
            fonts=fonts,
            created_at=now,
            updated_at=now,
        )
        self.store.add_font_group(group)

        logger.info("Font group created", group_id=group.id, name=name, fonts=len(fonts))
        return group

    def get_all_font_groups(self) -> list[FontGroup]:
        return self.store.get_all_font_groups()

    def get_font_group(self, group_id: str) -> FontGroup | None:
        return self.store.get_font_group_by_id(group_id)

    def update_font_group(
        self, group_id: str, name: str, font_ids: list[str]
    ) -> FontGroup | None:
        """Replace a group's name and members.

        The member snapshots are taken fresh from the current fonts.
        ``created_at`` is kept and ``updated_at`` moves forward.

        Args:
            group_id: ID of the group to update
            name: New label
            font_ids: IDs of the new member fonts, in display order

        Returns:
            The updated group, or None if the group does not exist, fewer
            than two IDs were given, or any ID does not match a stored font
        """
        existing = self.store.get_font_group_by_id(group_id)
        if existing is None:
            logger.info("Font group rejected", reason="group_not_found", group_id=group_id)
            return None

        if not self._has_enough_fonts(font_ids):
            return None

        fonts = self._resolve_fonts(font_ids)
        if fonts is None:
            return None

        updated_at = utc_now()
        if existing.updated_at is not None and existing.updated_at > updated_at:
            updated_at = existing.updated_at

        updated = FontGroup(
            id=existing.id,
            name=name,
            fonts=fonts,
            created_at=existing.created_at,
            updated_at=updated_at,
        )
        if not self.store.update_font_group(updated):
            return None

        logger.info("Font group updated", group_id=group_id, name=name, fonts=len(fonts))
        return updated

    def delete_font_group(self, group_id: str) -> bool:
        """Delete a group.

        Returns:
            True if the group existed
        """
        deleted = self.store.delete_font_group(group_id)
        if deleted:
            logger.info("Font group deleted", group_id=group_id)
        else:
            logger.info("Font group not found", group_id=group_id)
        return deleted
