"""Font reader for previewing stored fonts.

This module provides the FontReader class, which opens a stored TTF with
fonttools and reports the details shown when previewing a font. The file
is only read; stored bytes are never modified.
"""

from pathlib import Path

from fontTools.ttLib import TTFont

# Name table IDs we read
NAME_ID_FAMILY = 1
NAME_ID_TYPOGRAPHIC_FAMILY = 16


class FontReader:
    """Loads a TTF font and exposes summary information.

    Example:
        with FontReader(Path("uploads/1234.ttf")) as reader:
            print(reader.family_name, reader.glyph_count)
    """

    def __init__(self, font_path: Path) -> None:
        """Initialize the font reader.

        Args:
            font_path: Path to the TTF font file
        """
        self._font_path = font_path
        self._font: TTFont | None = None

    def load(self) -> None:
        """Load the font file.

        Raises:
            FileNotFoundError: If font file does not exist
            Exception: If font file is invalid or cannot be loaded
        """
        if not self._font_path.exists():
            raise FileNotFoundError(f"Font file not found: {self._font_path}")

        self._font = TTFont(str(self._font_path), lazy=True)

    def _loaded(self) -> TTFont:
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")
        return self._font

    @property
    def format(self) -> str:
        """Return font format.

        Returns:
            'TrueType' for glyf-based fonts, 'OpenType' for CFF-based fonts
        """
        font = self._loaded()
        if "CFF " in font or "CFF2" in font:
            return "OpenType"
        return "TrueType"

    @property
    def units_per_em(self) -> int:
        """Return font's units per em."""
        return self._loaded()["head"].unitsPerEm  # type: ignore[attr-defined]

    @property
    def glyph_count(self) -> int:
        """Return total number of glyphs in the font."""
        return self._loaded()["maxp"].numGlyphs  # type: ignore[attr-defined]

    @property
    def family_name(self) -> str | None:
        """Return the family name from the name table.

        Prefers the typographic family (ID 16) over the legacy family (ID 1).

        Returns:
            Family name, or None if the font has no usable name records
        """
        font = self._loaded()
        if "name" not in font:
            return None

        name_table = font["name"]
        for name_id in (NAME_ID_TYPOGRAPHIC_FAMILY, NAME_ID_FAMILY):
            record = name_table.getDebugName(name_id)  # type: ignore[attr-defined]
            if record:
                return record
        return None

    def close(self) -> None:
        """Close the font file and free resources."""
        if self._font is not None:
            self._font.close()
            self._font = None

    def __enter__(self) -> "FontReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
