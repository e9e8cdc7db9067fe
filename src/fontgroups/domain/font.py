"""Font record.

This module defines the metadata record kept for every uploaded TTF file.
"""

import re
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from fontgroups.domain.timestamps import format_timestamp, parse_timestamp

_TTF_SUFFIX = re.compile(r"\.ttf$", re.IGNORECASE)


def display_name(original_name: str) -> str:
    """Derive a font's display name from its uploaded filename.

    "Arial.ttf" → "Arial". Only a trailing ``.ttf`` is stripped
    (case-insensitive); any other extension is kept.
    """
    return _TTF_SUFFIX.sub("", original_name)


@dataclass(frozen=True)
class Font:
    """Metadata for one uploaded font binary.

    Attributes:
        id: Unique identifier generated at upload
        name: Display name derived from the uploaded filename
        filename: Storage filename on disk (``<id>.ttf``)
        original_name: Filename as uploaded
        path: Public relative path to the stored binary
        uploaded_at: Upload timestamp (UTC)
    """

    id: str
    name: str
    filename: str
    original_name: str
    path: str
    uploaded_at: datetime

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the persisted JSON shape.

        Returns:
            Dictionary with camelCase keys
        """
        return {
            "id": self.id,
            "name": self.name,
            "filename": self.filename,
            "originalName": self.original_name,
            "path": self.path,
            "uploadedAt": format_timestamp(self.uploaded_at),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Font":
        """Deserialize from the persisted JSON shape.

        Args:
            data: Dictionary with camelCase keys

        Returns:
            Font instance

        Raises:
            KeyError: If a required key is missing
            TypeError: If the record is not a JSON object
            ValueError: If the timestamp cannot be parsed
        """
        if not isinstance(data, dict):
            raise TypeError(f"Expected a font object, got {type(data).__name__}")
        return cls(
            id=data["id"],
            name=data["name"],
            filename=data["filename"],
            original_name=data["originalName"],
            path=data["path"],
            uploaded_at=parse_timestamp(data["uploadedAt"]),
        )
