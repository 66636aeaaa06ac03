class PaletteEngineError(Exception):
    """Base class for errors raised at the palette engine's boundaries."""


class InvalidColorError(PaletteEngineError, ValueError):
    """User input is not a hex color."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"not a hex color: {value!r}")


class UnknownPresetError(PaletteEngineError, KeyError):
    """No preset with the requested id."""

    def __init__(self, preset_id):
        self.preset_id = preset_id
        super().__init__(preset_id)

    def __str__(self):
        return f"unknown preset: {self.preset_id!r}"


class UnknownFormatError(PaletteEngineError, ValueError):
    """Export format not supported."""

    def __init__(self, fmt):
        self.format = fmt
        super().__init__(f"unknown export format: {fmt!r}")


class CorpusError(PaletteEngineError):
    """A color name corpus file could not be parsed."""
