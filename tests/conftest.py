"""Pytest fixtures for tests."""

import random
from pathlib import Path
from tempfile import TemporaryDirectory

import pytest
from PIL import Image

from palette_engine.naming import NameDatabase


@pytest.fixture
def rng():
    """Seeded random generator so generated colors are reproducible."""
    return random.Random(1234)


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def data_dir(temp_dir, monkeypatch):
    """Point saved palettes and sessions at a temporary directory."""
    path = temp_dir / "data"
    monkeypatch.setenv("PALETTE_ENGINE_DATA_DIR", str(path))
    return path


@pytest.fixture
def small_names():
    """A handful of named colors, with a duplicate hex to exercise ties."""
    return NameDatabase(
        [
            ("Fire Engine", "#ff0000"),
            ("Also Red", "#ff0000"),
            ("Grass", "#00ff00"),
            ("Ocean", "#0000ff"),
            ("Snow", "#ffffff"),
            ("Ink", "#000000"),
        ]
    )


@pytest.fixture
def small_css():
    """CSS subset used alongside small_names."""
    return NameDatabase([("red", "#ff0000"), ("white", "#ffffff"), ("black", "#000000")])


@pytest.fixture
def two_color_image():
    """60x40 image: left two thirds red, right third blue."""
    image = Image.new("RGB", (60, 40), (0, 0, 255))
    image.paste((255, 0, 0), (0, 0, 40, 40))
    return image


@pytest.fixture
def two_color_image_file(temp_dir, two_color_image):
    """two_color_image saved as PNG."""
    path = temp_dir / "two_colors.png"
    two_color_image.save(path)
    return path
