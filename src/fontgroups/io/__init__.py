"""Storage layer for fontgroups.

This module handles everything that touches the filesystem.

Key responsibilities:
- Persist all fonts and font groups as a single JSON document
- Back up and restore that document
- Store and remove uploaded font binaries
- Read stored fonts with fonttools for previews

Key classes:
- JsonStore: Whole-document JSON database
- FontAssetStore: Uploaded font binaries
- FontReader: Load a stored font and report its details
"""

from fontgroups.io.assets import FontAssetStore
from fontgroups.io.reader import FontReader
from fontgroups.io.store import JsonStore

__all__ = [
    "FontAssetStore",
    "FontReader",
    "JsonStore",
]
