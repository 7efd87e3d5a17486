"""Reusable type definitions for the utilbelt core models.

This module provides constrained types that can be used across different parts
of the package for type safety and validation.

Type Aliases:
    UnitFloat: A float in the closed interval [0, 1] (colour channels,
        saturation, lightness, alpha).
    Hue: A hue angle in degrees in the closed interval [0, 360].
    Byte: An integer in the closed interval [0, 255].
    HexColorString: A ``#RGB``, ``#RRGGBB`` or ``#AARRGGBB`` string, the
        leading ``#`` optional.
"""

import re
from typing import Annotated

import annotated_types as at
from pydantic.functional_validators import AfterValidator

__all__ = [
    "UnitFloat",
    "Hue",
    "Byte",
    "HexColorString",
]

# A float channel value between 0 and 1 inclusive
UnitFloat = Annotated[float, at.Ge(0.0), at.Le(1.0)]

# A hue angle in degrees
Hue = Annotated[float, at.Ge(0.0), at.Le(360.0)]

# An 8-bit channel value
Byte = Annotated[int, at.Ge(0), at.Le(255)]

_HEX_DIGITS = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


def validate_hex_color(value: str) -> str:
    """Validator to normalise a hex colour string to 8 upper-case ARGB digits.

    Args:
        value: Hex string in ``RGB``, ``RRGGBB`` or ``AARRGGBB`` form,
            optionally prefixed with ``#``.

    Returns:
        The colour as ``AARRGGBB`` (alpha defaults to ``FF``).

    Raises:
        ValueError: If the string is not a valid hex colour.
    """
    match = _HEX_DIGITS.match(value.strip())
    if match is None:
        raise ValueError(f"'{value}' is not a valid hex color.")

    digits = match.group(1).upper()
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    if len(digits) == 6:
        digits = "FF" + digits
    return digits


# A hex colour string normalised to AARRGGBB
HexColorString = Annotated[str, AfterValidator(validate_hex_color)]
