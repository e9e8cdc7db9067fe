"""Unit tests for font binary storage, font reading and upload validation."""

from pathlib import Path
from unittest.mock import MagicMock, Mock, patch

import pytest

from fontgroups.core import validate_upload
from fontgroups.exceptions import AssetWriteError, InvalidFontFileError
from fontgroups.io import FontAssetStore, FontReader


class TestFontAssetStore:
    """Tests for FontAssetStore class."""

    def test_public_path(self, tmp_path: Path):
        """Test public paths use the configured prefix."""
        assert FontAssetStore(tmp_path).public_path("x.ttf") == "/uploads/x.ttf"
        assert FontAssetStore(tmp_path, "/static/fonts/").public_path("x.ttf") == "/static/fonts/x.ttf"

    def test_write_creates_directory(self, tmp_path: Path):
        """Test the uploads directory is created on first write."""
        uploads = tmp_path / "nested" / "uploads"
        assets = FontAssetStore(uploads)

        path = assets.write("a.ttf", b"\x00\x01\x00\x00")

        assert path == uploads / "a.ttf"
        assert path.read_bytes() == b"\x00\x01\x00\x00"

    def test_write_failure(self, tmp_path: Path):
        """Test write errors are raised as AssetWriteError."""
        blocker = tmp_path / "uploads"
        blocker.write_text("not a directory")

        with pytest.raises(AssetWriteError):
            FontAssetStore(blocker).write("a.ttf", b"data")

    def test_remove(self, assets: FontAssetStore):
        """Test removing an existing file."""
        path = assets.write("a.ttf", b"data")
        assert assets.remove("a.ttf") is True
        assert not path.exists()

    def test_remove_missing_is_reported_not_raised(self, assets: FontAssetStore):
        """Test removing a missing file returns False."""
        assert assets.remove("missing.ttf") is False


class TestFontReader:
    """Tests for FontReader class."""

    def test_load_nonexistent_file(self):
        """Test loading a nonexistent file raises FileNotFoundError."""
        reader = FontReader(Path("nonexistent.ttf"))
        with pytest.raises(FileNotFoundError):
            reader.load()

    @pytest.mark.parametrize("attribute", ["format", "units_per_em", "glyph_count", "family_name"])
    def test_property_before_load(self, attribute: str):
        """Test accessing properties before loading raises RuntimeError."""
        reader = FontReader(Path("test.ttf"))
        with pytest.raises(RuntimeError, match="Font not loaded"):
            getattr(reader, attribute)

    def test_reads_real_font(self, tmp_path: Path, make_ttf):
        """Test reading details from a generated TrueType font."""
        path = tmp_path / "font.ttf"
        path.write_bytes(make_ttf("Preview Sans"))

        with FontReader(path) as reader:
            assert reader.format == "TrueType"
            assert reader.units_per_em == 1000
            assert reader.glyph_count == 2
            assert reader.family_name == "Preview Sans"

    def test_reading_does_not_modify_file(self, tmp_path: Path, ttf_bytes: bytes):
        """Test previewing a stored font leaves its bytes untouched."""
        path = tmp_path / "font.ttf"
        path.write_bytes(ttf_bytes)

        with FontReader(path) as reader:
            _ = reader.family_name

        assert path.read_bytes() == ttf_bytes

    @patch("fontgroups.io.reader.TTFont")
    @patch.object(Path, "exists", return_value=True)
    def test_format_opentype(self, _mock_exists, mock_ttfont):  # noqa: ARG002
        """Test format property for CFF-based fonts."""
        mock_font = MagicMock()
        mock_font.__contains__ = Mock(side_effect=lambda x: x == "CFF ")
        mock_ttfont.return_value = mock_font

        reader = FontReader(Path("test.otf"))
        reader.load()

        assert reader.format == "OpenType"

    @patch("fontgroups.io.reader.TTFont")
    @patch.object(Path, "exists", return_value=True)
    def test_family_name_missing_name_table(self, _mock_exists, mock_ttfont):  # noqa: ARG002
        """Test family_name is None without a name table."""
        mock_font = MagicMock()
        mock_font.__contains__ = Mock(return_value=False)
        mock_ttfont.return_value = mock_font

        reader = FontReader(Path("test.ttf"))
        reader.load()

        assert reader.family_name is None

    @patch("fontgroups.io.reader.TTFont")
    @patch.object(Path, "exists", return_value=True)
    def test_context_manager(self, _mock_exists, mock_ttfont):  # noqa: ARG002
        """Test FontReader as context manager."""
        mock_font = MagicMock()
        mock_ttfont.return_value = mock_font

        with FontReader(Path("test.ttf")) as reader:
            assert reader._font is not None

        mock_font.close.assert_called_once()


class TestValidateUpload:
    """Tests for upload validation."""

    def test_accepts_ttf(self, tmp_path: Path, ttf_bytes: bytes):
        """Test a .ttf file is accepted and its bytes returned."""
        path = tmp_path / "Arial.ttf"
        path.write_bytes(ttf_bytes)
        assert validate_upload(path) == ttf_bytes

    def test_accepts_uppercase_extension(self, tmp_path: Path):
        """Test the extension check ignores case."""
        path = tmp_path / "ARIAL.TTF"
        path.write_bytes(b"data")
        assert validate_upload(path) == b"data"

    @pytest.mark.parametrize("filename", ["Roboto.otf", "font.woff2", "ttf", "Arial.ttf.zip"])
    def test_rejects_other_extensions(self, tmp_path: Path, filename: str):
        """Test non-TTF names are rejected before reading."""
        path = tmp_path / filename
        path.write_bytes(b"data")

        with pytest.raises(InvalidFontFileError, match="Only TTF files are allowed"):
            validate_upload(path)

    def test_rejects_missing_file(self, tmp_path: Path):
        """Test a missing file is rejected."""
        with pytest.raises(InvalidFontFileError, match="No file uploaded"):
            validate_upload(tmp_path / "Ghost.ttf")

    def test_content_is_not_inspected(self, tmp_path: Path):
        """Test any bytes pass as long as the name ends in .ttf."""
        path = tmp_path / "Fake.ttf"
        path.write_bytes(b"not really a font")
        assert validate_upload(path) == b"not really a font"
