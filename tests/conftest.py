"""Shared fixtures for fontgroups tests."""

import io
from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen

from fontgroups.core import FontService
from fontgroups.io import FontAssetStore, JsonStore


def build_ttf(family_name: str = "Test Sans") -> bytes:
    """Build a minimal but valid TrueType font in memory."""
    builder = FontBuilder(1000, isTTF=True)
    builder.setupGlyphOrder([".notdef", "A"])
    builder.setupCharacterMap({ord("A"): "A"})

    pen = TTGlyphPen(None)
    pen.moveTo((100, 0))
    pen.lineTo((100, 700))
    pen.lineTo((500, 700))
    pen.lineTo((500, 0))
    pen.closePath()

    builder.setupGlyf({".notdef": TTGlyphPen(None).glyph(), "A": pen.glyph()})
    builder.setupHorizontalMetrics({".notdef": (500, 0), "A": (600, 100)})
    builder.setupHorizontalHeader(ascent=800, descent=-200)
    builder.setupNameTable({"familyName": family_name, "styleName": "Regular"})
    builder.setupOS2()
    builder.setupPost()

    buffer = io.BytesIO()
    builder.save(buffer)
    return buffer.getvalue()


@pytest.fixture
def ttf_bytes() -> bytes:
    return build_ttf()


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "data" / "database.json"


@pytest.fixture
def store(db_path: Path) -> JsonStore:
    return JsonStore(db_path)


@pytest.fixture
def assets(tmp_path: Path) -> FontAssetStore:
    return FontAssetStore(tmp_path / "uploads")


@pytest.fixture
def service(store: JsonStore, assets: FontAssetStore) -> FontService:
    return FontService(store, assets)


@pytest.fixture
def make_ttf():
    """Factory for in-memory TTF files with a given family name."""
    return build_ttf
