"""Colour value models.

This module provides the two colour representations the colour helpers in
:mod:`utilbelt.functional.colors` operate on:

    - :class:`Color`: an RGBA value whose channels are stored as floats in
      ``[0, 1]``. Constructors accept 8-bit channels, hex strings and packed
      ARGB integers, so callers can work in whichever numeric representation
      they hold.
    - :class:`HSLColor`: the hue/saturation/lightness view of a colour used for
      perceptual adjustments (lighten, darken, hue rotation).

Both models are frozen. Every transformation returns a new instance.
"""

import colorsys

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from .types import Byte, HexColorString, Hue, UnitFloat

__all__ = [
    "Color",
    "HSLColor",
]

_HEX_ADAPTER = TypeAdapter(HexColorString)
_BYTE_ADAPTER = TypeAdapter(Byte)


def _clamp(channel: float) -> float:
    return max(0.0, min(1.0, channel))


def _to_byte(channel: float) -> int:
    return max(0, min(255, round(channel * 255.0)))


class Color(BaseModel):
    """RGBA colour with float channels in ``[0, 1]``.

    Attributes:
        r: Red channel.
        g: Green channel.
        b: Blue channel.
        a: Alpha channel (1.0 is fully opaque).
    """

    model_config = ConfigDict(frozen=True)

    r: UnitFloat = Field(..., description="Red channel in [0, 1].")
    g: UnitFloat = Field(..., description="Green channel in [0, 1].")
    b: UnitFloat = Field(..., description="Blue channel in [0, 1].")
    a: UnitFloat = Field(1.0, description="Alpha channel in [0, 1].")

    @classmethod
    def from_rgb(cls, red: int, green: int, blue: int, alpha: int = 255) -> "Color":
        """Build a colour from 8-bit channel values.

        Raises:
            ValueError: If a channel is outside ``0..255``.
        """
        channels = [_BYTE_ADAPTER.validate_python(c) for c in (red, green, blue, alpha)]
        r, g, b, a = (c / 255.0 for c in channels)
        return cls(r=r, g=g, b=b, a=a)

    @classmethod
    def from_argb(cls, value: int) -> "Color":
        """Build a colour from a packed ``0xAARRGGBB`` integer."""
        if not 0 <= value <= 0xFFFFFFFF:
            raise ValueError(f"ARGB value {value:#x} does not fit in 32 bits.")
        return cls.from_rgb(
            (value >> 16) & 0xFF,
            (value >> 8) & 0xFF,
            value & 0xFF,
            (value >> 24) & 0xFF,
        )

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """Build a colour from ``#RGB``, ``#RRGGBB`` or ``#AARRGGBB``.

        The leading ``#`` is optional. Alpha defaults to fully opaque.

        Raises:
            ValueError: If ``value`` is not a valid hex colour.
        """
        digits = _HEX_ADAPTER.validate_python(value)
        return cls.from_argb(int(digits, 16))

    @property
    def red(self) -> int:
        """Red channel as an 8-bit integer."""
        return _to_byte(self.r)

    @property
    def green(self) -> int:
        """Green channel as an 8-bit integer."""
        return _to_byte(self.g)

    @property
    def blue(self) -> int:
        """Blue channel as an 8-bit integer."""
        return _to_byte(self.b)

    @property
    def alpha(self) -> int:
        """Alpha channel as an 8-bit integer."""
        return _to_byte(self.a)

    def to_argb(self) -> int:
        """Pack the colour into a ``0xAARRGGBB`` integer."""
        return (self.alpha << 24) | (self.red << 16) | (self.green << 8) | self.blue


class HSLColor(BaseModel):
    """Hue/saturation/lightness view of a colour.

    Attributes:
        hue: Hue angle in degrees, ``0..360``.
        saturation: Saturation in ``[0, 1]``.
        lightness: Lightness in ``[0, 1]``.
        alpha: Alpha channel in ``[0, 1]``.
    """

    model_config = ConfigDict(frozen=True)

    hue: Hue
    saturation: UnitFloat
    lightness: UnitFloat
    alpha: UnitFloat = 1.0

    @classmethod
    def from_color(cls, color: Color) -> "HSLColor":
        h, l, s = colorsys.rgb_to_hls(color.r, color.g, color.b)
        return cls(hue=h * 360.0, saturation=s, lightness=l, alpha=color.a)

    def to_color(self) -> Color:
        r, g, b = colorsys.hls_to_rgb(
            (self.hue % 360.0) / 360.0, self.lightness, self.saturation
        )
        return Color(r=_clamp(r), g=_clamp(g), b=_clamp(b), a=self.alpha)

    def with_hue(self, hue: float) -> "HSLColor":
        return self.model_copy(update={"hue": hue})

    def with_saturation(self, saturation: float) -> "HSLColor":
        return self.model_copy(update={"saturation": saturation})

    def with_lightness(self, lightness: float) -> "HSLColor":
        return self.model_copy(update={"lightness": lightness})
