"""Colour helpers over :class:`utilbelt.core.data_models.Color`.

Brightness uses the WCAG 2 relative-luminance formula on 8-bit quantised
sRGB channels. Hue, saturation and lightness adjustments go through
:class:`utilbelt.core.data_models.HSLColor` and clamp the adjusted channel to
its valid range before converting back.

Examples:
    >>> from utilbelt.core import Color
    >>> from utilbelt.functional import colors
    >>> colors.to_hex(Color.from_rgb(255, 0, 0))
    '#FF0000'
    >>> colors.is_light(Color.from_rgb(255, 255, 255))
    True
"""

import typing as tp

from utilbelt.core.config import settings
from utilbelt.core.data_models import Color, HSLColor

__all__ = [
    # Brightness
    "luminance",
    "is_light",
    "is_dark",
    "contrast_color",
    "contrast_ratio",
    # HSL
    "lighten",
    "darken",
    "with_hue",
    "with_saturation",
    "with_lightness",
    # Mixing and palettes
    "mix",
    "complementary",
    "grayscale",
    "analogous",
    "triadic",
    "tetradic",
    # Conversion
    "to_hex",
    "to_argb",
    "to_material_color",
]

BLACK = Color(r=0.0, g=0.0, b=0.0)
WHITE = Color(r=1.0, g=1.0, b=1.0)

# Swatch key -> lightness delta, lighter shades first.
_MATERIAL_STEPS = (
    (50, 0.40),
    (100, 0.32),
    (200, 0.24),
    (300, 0.16),
    (400, 0.08),
    (500, 0.0),
    (600, -0.08),
    (700, -0.16),
    (800, -0.24),
    (900, -0.32),
)


def _clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return max(low, min(high, value))


def _linearize(byte: int) -> float:
    channel = byte / 255.0
    if channel <= 0.03928:
        return channel / 12.92
    return ((channel + 0.055) / 1.055) ** 2.4


def _rotate(color: Color, degrees: float) -> Color:
    hsl = HSLColor.from_color(color)
    return hsl.with_hue((hsl.hue + degrees) % 360.0).to_color()


# --- Brightness ------------------------------------------------------------


def luminance(color: Color) -> float:
    """WCAG relative luminance in ``[0, 1]``."""
    return (
        0.2126 * _linearize(color.red)
        + 0.7152 * _linearize(color.green)
        + 0.0722 * _linearize(color.blue)
    )


def is_light(color: Color, threshold: tp.Optional[float] = None) -> bool:
    """True if luminance exceeds ``threshold`` (``settings.LIGHT_LUMINANCE_THRESHOLD``)."""
    if threshold is None:
        threshold = settings.LIGHT_LUMINANCE_THRESHOLD
    return luminance(color) > threshold


def is_dark(color: Color, threshold: tp.Optional[float] = None) -> bool:
    return not is_light(color, threshold)


def contrast_color(color: Color, threshold: tp.Optional[float] = None) -> Color:
    """Black for light colours, white for dark ones."""
    return BLACK if is_light(color, threshold) else WHITE


def contrast_ratio(color: Color, other: Color) -> float:
    """WCAG contrast ratio, from 1 (identical) to 21 (black on white)."""
    lighter, darker = sorted((luminance(color), luminance(other)), reverse=True)
    return (lighter + 0.05) / (darker + 0.05)


# --- HSL -------------------------------------------------------------------


def lighten(color: Color, amount: float) -> Color:
    """Raise HSL lightness by ``amount`` (``0..1``), capped at 1."""
    hsl = HSLColor.from_color(color)
    return hsl.with_lightness(_clamp(hsl.lightness + amount)).to_color()


def darken(color: Color, amount: float) -> Color:
    """Lower HSL lightness by ``amount`` (``0..1``), floored at 0."""
    hsl = HSLColor.from_color(color)
    return hsl.with_lightness(_clamp(hsl.lightness - amount)).to_color()


def with_hue(color: Color, hue: float) -> Color:
    return HSLColor.from_color(color).with_hue(_clamp(hue, 0.0, 360.0)).to_color()


def with_saturation(color: Color, saturation: float) -> Color:
    return HSLColor.from_color(color).with_saturation(_clamp(saturation)).to_color()


def with_lightness(color: Color, lightness: float) -> Color:
    return HSLColor.from_color(color).with_lightness(_clamp(lightness)).to_color()


# --- Mixing and palettes ---------------------------------------------------


def mix(color: Color, other: Color, t: float) -> Color:
    """Linear interpolation of every channel (alpha included) by ``t``.

    ``t`` is clamped to ``[0, 1]``; 0 gives ``color`` and 1 gives ``other``.
    """
    t = _clamp(t)
    return Color(
        r=_clamp(color.r + (other.r - color.r) * t),
        g=_clamp(color.g + (other.g - color.g) * t),
        b=_clamp(color.b + (other.b - color.b) * t),
        a=_clamp(color.a + (other.a - color.a) * t),
    )


def complementary(color: Color) -> Color:
    return _rotate(color, 180.0)


def grayscale(color: Color) -> Color:
    """Gray of the same luminance, keeping alpha."""
    gray = round(luminance(color) * 255)
    return Color.from_rgb(gray, gray, gray, color.alpha)


def analogous(color: Color, count: int = 3, angle: float = 30.0) -> tp.List[Color]:
    """``count`` colours ``angle`` degrees apart, centred on ``color``'s hue.

    Example:
        With the defaults the result is the hues ``h - 30``, ``h`` and
        ``h + 30``.
    """
    half = count // 2
    return [_rotate(color, angle * (i - half)) for i in range(count)]


def triadic(color: Color) -> tp.List[Color]:
    """``color`` followed by its 120 and 240 degree rotations."""
    return [color, _rotate(color, 120.0), _rotate(color, 240.0)]


def tetradic(color: Color) -> tp.List[Color]:
    """``color`` followed by its 90, 180 and 270 degree rotations."""
    return [color, _rotate(color, 90.0), _rotate(color, 180.0), _rotate(color, 270.0)]


# --- Conversion ------------------------------------------------------------


def to_hex(color: Color, include_alpha: bool = False, upper_case: bool = True) -> str:
    """``#RRGGBB``, or ``#AARRGGBB`` when ``include_alpha`` is set."""
    digits = f"{color.red:02x}{color.green:02x}{color.blue:02x}"
    if include_alpha:
        digits = f"{color.alpha:02x}{digits}"
    hex_string = f"#{digits}"
    return hex_string.upper() if upper_case else hex_string


def to_argb(color: Color) -> int:
    return color.to_argb()


def to_material_color(color: Color) -> tp.Dict[int, Color]:
    """Ten-shade swatch keyed ``50, 100, ..., 900`` with ``500`` as ``color``.

    Shades 50-400 are lightened by 0.40 down to 0.08 and 600-900 darkened by
    0.08 up to 0.32, in HSL lightness.
    """
    swatch: tp.Dict[int, Color] = {}
    for key, delta in _MATERIAL_STEPS:
        if delta > 0:
            swatch[key] = lighten(color, delta)
        elif delta < 0:
            swatch[key] = darken(color, -delta)
        else:
            swatch[key] = color
    return swatch
