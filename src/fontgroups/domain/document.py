"""The whole persisted database document."""

from dataclasses import dataclass, field
from typing import Any

from fontgroups.domain.font import Font
from fontgroups.domain.group import FontGroup


@dataclass
class StoreDocument:
    """All fonts and font groups, as held in the JSON database file.

    Attributes:
        fonts: Every uploaded font, in upload order
        font_groups: Every font group, in creation order
    """

    fonts: list[Font] = field(default_factory=list)
    font_groups: list[FontGroup] = field(default_factory=list)

    @classmethod
    def empty(cls) -> "StoreDocument":
        """Create a document with no fonts and no groups."""
        return cls()

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the persisted JSON shape."""
        return {
            "fonts": [font.to_dict() for font in self.fonts],
            "fontGroups": [group.to_dict() for group in self.font_groups],
        }

    @classmethod
    def from_dict(cls, data: Any) -> "StoreDocument":
        """Deserialize from parsed JSON.

        Missing top-level arrays are treated as empty.

        Raises:
            TypeError: If the top level or a collection has the wrong type
            KeyError: If a record is missing a required key
            ValueError: If a record holds an unparseable timestamp
        """
        if not isinstance(data, dict):
            raise TypeError(f"Expected a JSON object, got {type(data).__name__}")

        fonts = data.get("fonts", [])
        groups = data.get("fontGroups", [])
        if not isinstance(fonts, list) or not isinstance(groups, list):
            raise TypeError("'fonts' and 'fontGroups' must be arrays")

        return cls(
            fonts=[Font.from_dict(font) for font in fonts],
            font_groups=[FontGroup.from_dict(group) for group in groups],
        )
