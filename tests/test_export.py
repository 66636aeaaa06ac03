"""Tests for palette export formats."""

import io
import json
import struct
import zipfile

import pytest

from palette_engine.errors import UnknownFormatError
from palette_engine.export import (
    ART_FORMATS,
    CODE_FORMATS,
    EXPORT_FORMATS,
    export_json,
    export_palette,
    get_format,
)
from palette_engine.export.formats import export_gpl
from palette_engine.export.swatches import export_aco, export_ase, export_procreate
from palette_engine.palette import load_palette_from_json

COLORS = ["#ff0000", "#00ff00"]


class TestFormatCatalog:
    """Test export format metadata."""

    @pytest.mark.unit
    def test_categories(self):
        """Test the nine formats split into code and art."""
        assert len(EXPORT_FORMATS) == 9
        assert [f.value for f in CODE_FORMATS] == ["css", "json", "tailwind", "scss"]
        assert {f.value for f in ART_FORMATS} == {"ase", "aco", "procreate", "gpl", "paintnet"}

    @pytest.mark.unit
    def test_get_format(self):
        """Test lookup by value."""
        assert get_format("procreate").extension == "swatches"
        with pytest.raises(UnknownFormatError):
            get_format("pdf")


class TestTextFormats:
    """Test text exports."""

    @pytest.mark.unit
    def test_css(self):
        """Test CSS custom properties."""
        assert export_palette(COLORS, "css") == (
            ":root {\n  --color-1: #ff0000;\n  --color-2: #00ff00;\n}"
        )

    @pytest.mark.unit
    def test_json(self):
        """Test the plain JSON export."""
        assert json.loads(export_palette(COLORS, "json")) == {"colors": COLORS}

    @pytest.mark.unit
    def test_tailwind(self):
        """Test the Tailwind config uses single quotes."""
        output = export_palette(COLORS, "tailwind")
        assert output.startswith("// tailwind.config.js\nmodule.exports = {")
        assert "'color-1': '#ff0000'" in output
        assert '"' not in output

    @pytest.mark.unit
    def test_scss(self):
        """Test SCSS variables."""
        assert export_palette(COLORS, "scss") == "$color-1: #ff0000;\n$color-2: #00ff00;"

    @pytest.mark.unit
    def test_gpl(self):
        """Test the GIMP palette layout."""
        assert export_gpl(["#ff0000"], name="Test") == (
            "GIMP Palette\nName: Test\nColumns: 0\n#\n255   0   0\t#ff0000"
        )

    @pytest.mark.unit
    def test_paintnet(self):
        """Test Paint.NET AARRGGBB lines."""
        assert export_palette(["#ff8000"], "paintnet").splitlines() == [
            "; Paint.NET Palette",
            "; Exported from Color Palette",
            "FFFF8000",
        ]

    @pytest.mark.unit
    def test_unknown_format(self):
        """Test unknown formats raise an error that is also a ValueError."""
        with pytest.raises(ValueError):
            export_palette(COLORS, "pdf")


class TestBinaryFormats:
    """Test art application swatch files."""

    @pytest.mark.unit
    def test_binary_formats_return_bytes(self):
        """Test the dispatcher returns bytes for binary formats."""
        for fmt in ("ase", "aco", "procreate"):
            assert isinstance(export_palette(COLORS, fmt), bytes)

    @pytest.mark.unit
    def test_aco(self):
        """Test both ACO sections with 16-bit channels."""
        data = export_aco(["#ff0000"])
        assert struct.unpack(">HH", data[:4]) == (1, 1)
        assert struct.unpack(">5H", data[4:14]) == (0, 65535, 0, 0, 0)
        assert struct.unpack(">HH", data[14:18]) == (2, 1)
        assert struct.unpack(">5H", data[18:28]) == (0, 65535, 0, 0, 0)
        assert struct.unpack(">I", data[28:32]) == (len("Color 1") + 1,)
        assert data[32:].decode("utf-16-be") == "Color 1\0"

    @pytest.mark.unit
    def test_ase(self):
        """Test the ASE header and one RGB color block."""
        data = export_ase(["#ff0000"])
        assert data[:4] == b"ASEF"
        assert struct.unpack(">HHI", data[4:12]) == (1, 0, 1)
        block_type, block_length = struct.unpack(">HI", data[12:18])
        assert block_type == 0x0001
        assert len(data) == 18 + block_length
        assert b"RGB " in data
        r, g, b = struct.unpack(">3f", data[-14:-2])
        assert (r, g, b) == (1.0, 0.0, 0.0)

    @pytest.mark.unit
    def test_procreate(self):
        """Test the ZIP archive holds HSB swatches."""
        data = export_procreate(["#ff0000", "#0000ff"], name="Mine")
        with zipfile.ZipFile(io.BytesIO(data)) as archive:
            payload = json.loads(archive.read("Swatches.json"))
        assert payload[0]["name"] == "Mine"
        red, blue = payload[0]["swatches"]
        assert (red["hue"], red["saturation"], red["brightness"]) == (0, 1, 1)
        assert blue["hue"] == pytest.approx(2 / 3)


class TestPaletteJson:
    """Test the palette JSON file with metadata."""

    @pytest.mark.integration
    def test_export_and_reload(self, temp_dir):
        """Test metadata keys are written and skipped on import."""
        path = temp_dir / "palette.json"
        export_json(["#777777", "#aaaaaa"], path, name="Grays")

        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        assert data["colors"] == ["#777777", "#aaaaaa"]
        assert data["_name"] == "Grays"
        assert data["_preset"] == "monochrome"
        assert len(data["_names"]) == 2
        assert set(data["_contrast"]) == {"#777777", "#aaaaaa"}

        colors, metadata = load_palette_from_json(path)
        assert colors == ["#777777", "#aaaaaa"]
        assert metadata["name"] == "Grays"

    @pytest.mark.unit
    def test_without_names(self, temp_dir):
        """Test name lookup can be skipped."""
        path = temp_dir / "palette.json"
        export_json(["#ff0000"], path, include_names=False)
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        assert "_names" not in data
        assert "_name" not in data


class TestLoadPalette:
    """Test reading palettes back in."""

    @pytest.mark.unit
    def test_flat_mapping(self, temp_dir):
        """Test role -> hex mappings and bare lists load."""
        path = temp_dir / "roles.json"
        path.write_text(json.dumps({"primary": "#FF0000", "accent": "#0f0", "_theme": "dark", "size": 3}))
        colors, metadata = load_palette_from_json(path)
        assert colors == ["#ff0000", "#00ff00"]
        assert metadata == {"theme": "dark"}

        path.write_text(json.dumps(["#123456", "oops", "#abc"]))
        colors, _ = load_palette_from_json(path)
        assert colors == ["#123456", "#aabbcc"]
