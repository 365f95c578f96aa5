class PaletteError(Exception):
    """Base class for palette generation errors."""


class InvalidHexError(PaletteError, ValueError):
    """Raised when a color string is not a 6-digit hex value."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Invalid hex color: {value!r}")


class MissingScaleEntryError(PaletteError, KeyError):
    """Raised when a token references a weight that is absent from its scale."""

    def __init__(self, family, weight):
        self.family = family
        self.weight = weight
        super().__init__(f"{family} scale has no weight {weight}")

    def __str__(self):
        return self.args[0]
