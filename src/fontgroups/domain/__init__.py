"""Domain models for fontgroups.

This module contains the records persisted in the JSON database. All models
serialize to the camelCase JSON shape used on disk and are independent of
how that file is read or written.

Key classes:
- Font: Metadata for one uploaded TTF file
- FontGroup: A named collection of font snapshots
- StoreDocument: The whole database (all fonts and all groups)
"""

from fontgroups.domain.document import StoreDocument
from fontgroups.domain.font import Font, display_name
from fontgroups.domain.group import FontGroup
from fontgroups.domain.timestamps import format_timestamp, parse_timestamp, utc_now

__all__: list[str] = [
    # Core types
    "Font",
    "FontGroup",
    "StoreDocument",
    # Helpers
    "display_name",
    "format_timestamp",
    "parse_timestamp",
    "utc_now",
]
