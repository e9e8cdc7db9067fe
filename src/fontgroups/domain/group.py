"""Font group representation.

A font group embeds full copies of its member fonts rather than holding
references to them. The copies reflect the fonts as they were when the
group was last created or updated.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from fontgroups.domain.font import Font
from fontgroups.domain.timestamps import format_timestamp, parse_timestamp


@dataclass
class FontGroup:
    """A named collection of font snapshots.

    Attributes:
        id: Unique identifier generated at creation
        name: User-supplied label
        fonts: Ordered snapshots of the member fonts
        created_at: Creation timestamp, never changed afterwards
        updated_at: Timestamp of the last successful create/update
    """

    id: str
    name: str
    fonts: list[Font] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def font_ids(self) -> list[str]:
        """IDs of the embedded font snapshots, in order."""
        return [font.id for font in self.fonts]

    def without_font(self, font_id: str) -> "FontGroup":
        """Return a copy with every snapshot of ``font_id`` removed.

        Timestamps are left untouched; pruning a deleted font is not an
        update of the group.
        """
        return FontGroup(
            id=self.id,
            name=self.name,
            fonts=[font for font in self.fonts if font.id != font_id],
            created_at=self.created_at,
            updated_at=self.updated_at,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the persisted JSON shape."""
        data: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "fonts": [font.to_dict() for font in self.fonts],
        }
        if self.created_at is not None:
            data["createdAt"] = format_timestamp(self.created_at)
        if self.updated_at is not None:
            data["updatedAt"] = format_timestamp(self.updated_at)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FontGroup":
        """Deserialize from the persisted JSON shape.

        Raises:
            KeyError: If a required key is missing
            TypeError: If the record or its font list has the wrong type
            ValueError: If a timestamp cannot be parsed
        """
        if not isinstance(data, dict):
            raise TypeError(f"Expected a font group object, got {type(data).__name__}")
        fonts = data.get("fonts", [])
        if not isinstance(fonts, list):
            raise TypeError("'fonts' must be an array")
        created = data.get("createdAt")
        updated = data.get("updatedAt")
        return cls(
            id=data["id"],
            name=data["name"],
            fonts=[Font.from_dict(font) for font in fonts],
            created_at=parse_timestamp(created) if created is not None else None,
            updated_at=parse_timestamp(updated) if updated is not None else None,
        )
