import colorsys
import re

from .errors import InvalidHexError

HEX_RE = re.compile(r"^#?([0-9a-fA-F]{6})$")

WHITE = "#ffffff"
BLACK = "#000000"


def is_valid_hex(value):
    return isinstance(value, str) and HEX_RE.match(value) is not None


def normalize_hex(value):
    """Return ``value`` with a leading '#', keeping the caller's digit case.

    Raises InvalidHexError for anything other than 6 hex digits.
    """
    if not isinstance(value, str):
        raise InvalidHexError(value)
    match = HEX_RE.match(value)
    if not match:
        raise InvalidHexError(value)
    return f"#{match.group(1)}"


def rgb_to_hex(r, g, b):
    r, g, b = (max(0, min(255, int(round(c)))) for c in (r, g, b))
    return f"#{r:02x}{g:02x}{b:02x}"


def hex_to_rgb(hex_color):
    """Parse ``#rrggbb`` (or ``rrggbb``) into an (r, g, b) tuple, or None if malformed."""
    if not isinstance(hex_color, str):
        return None
    match = HEX_RE.match(hex_color)
    if not match:
        return None
    digits = match.group(1)
    return tuple(int(digits[i : i + 2], 16) for i in (0, 2, 4))


def hex_to_rgba(hex_color, alpha=1.0):
    """Render a hex color as a CSS ``rgba()`` string.

    Malformed input is returned unchanged.
    """
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        return hex_color
    r, g, b = rgb
    return f"rgba({r}, {g}, {b}, {alpha:g})"


def rgb_to_hsl(r, g, b):
    r, g, b = r / 255, g / 255, b / 255
    h, l, s = colorsys.rgb_to_hls(r, g, b)
    return (h * 360, s * 100, l * 100)


def hsl_to_rgb(h, s, l):
    h, s, l = (h % 360) / 360, s / 100, l / 100
    r, g, b = colorsys.hls_to_rgb(h, l, s)
    return (int(round(r * 255)), int(round(g * 255)), int(round(b * 255)))


def rgb_distance(rgb1, rgb2):
    """Euclidean distance between two 0-255 RGB triples."""
    return sum((a - b) ** 2 for a, b in zip(rgb1, rgb2)) ** 0.5


def format_color(value, fmt="hex"):
    """Render a token or scale value as hex, ``rgb()`` or ``hsl()``.

    Values that are not plain hex (e.g. ``rgba(...)`` alpha tokens) pass through.
    """
    rgb = hex_to_rgb(value)
    if rgb is None:
        return value
    if fmt == "rgb":
        return "rgb({}, {}, {})".format(*rgb)
    if fmt == "hsl":
        h, s, l = rgb_to_hsl(*rgb)
        return f"hsl({round(h) % 360}, {round(s)}%, {round(l)}%)"
    return value
