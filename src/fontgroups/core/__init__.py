"""Core operations for fontgroups.

This module contains the service layer that enforces the font group rules
and coordinates the database with the uploaded font files:

- Uploads are validated by name, stored unchanged and recorded
- Groups must hold at least two existing fonts at every create/update
- Deleting a font removes it from every group

Key classes:
- FontService: Font and font group operations
- FontDeletion: Outcome of deleting a font

Key functions:
- validate_upload: Reject non-TTF uploads before they reach the service
"""

from fontgroups.core.service import FontDeletion, FontService
from fontgroups.core.uploads import validate_upload

__all__ = [
    "FontDeletion",
    "FontService",
    "validate_upload",
]
