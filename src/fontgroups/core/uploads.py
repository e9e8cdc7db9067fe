"""Upload validation applied before a file reaches the service."""

from pathlib import Path

from fontgroups.exceptions import InvalidFontFileError

ALLOWED_SUFFIX = ".ttf"


def validate_upload(path: Path) -> bytes:
    """Check an upload candidate and return its bytes.

    Only files whose name ends in ``.ttf`` (any case) are accepted. The
    content itself is not inspected.

    Args:
        path: File to upload

    Returns:
        Raw file content

    Raises:
        InvalidFontFileError: If the file is missing, unreadable or not a .ttf
    """
    if not path.name.lower().endswith(ALLOWED_SUFFIX):
        raise InvalidFontFileError(path.name, "Only TTF files are allowed")

    if not path.is_file():
        raise InvalidFontFileError(path.name, "No file uploaded")

    try:
        return path.read_bytes()
    except OSError as e:
        raise InvalidFontFileError(path.name, str(e)) from e
