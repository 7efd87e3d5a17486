"""Number helpers: predicates, arithmetic, formatting and radix conversion.

Functions accept ``int`` or ``float`` unless noted. Integer-only operations
(digits, Roman numerals, radix strings, ordinals) truncate a float argument
toward zero first; ``factorial`` rejects a fractional argument instead.

Examples:
    >>> from utilbelt.functional import numbers
    >>> numbers.to_currency_string(1234567.89)
    '1,234,567.89'
    >>> numbers.to_currency_string(1000, symbol="$")
    '$1,000'
    >>> numbers.to_roman(2024)
    'MMXXIV'
"""

import math
import typing as tp
from decimal import ROUND_HALF_UP, Decimal, localcontext

import numpy as np

from utilbelt.core.config import settings

__all__ = [
    # Predicates
    "is_positive",
    "is_negative",
    "is_zero",
    "is_integer",
    "is_double",
    "is_prime",
    "is_in_range",
    # Arithmetic
    "swap_sign",
    "lerp",
    "normalize",
    "factorial",
    "sum_of_digits",
    "digit_count",
    "reverse_digits",
    "to_radians",
    "to_degrees",
    # Formatting
    "to_precision",
    "to_currency_string",
    "percentage",
    "pad",
    "to_ordinal",
    "to_roman",
    "to_binary",
    "to_hex",
    "to_octal",
    "round_to",
    # Random
    "random_list",
]

Number = tp.Union[int, float]

_ROMAN_NUMERALS = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)


# --- Predicates ------------------------------------------------------------


def is_positive(value: Number) -> bool:
    return value > 0


def is_negative(value: Number) -> bool:
    return value < 0


def is_zero(value: Number) -> bool:
    return value == 0


def is_integer(value: Number) -> bool:
    """True if the value has no fractional part (``2.0`` counts)."""
    return value == math.trunc(value)


def is_double(value: Number) -> bool:
    """True if the value has a fractional part."""
    return value != math.trunc(value)


def is_prime(value: Number) -> bool:
    """Trial division up to the square root; ``False`` below 2."""
    n = int(value)
    if n < 2:
        return False
    if n == 2:
        return True
    if n % 2 == 0:
        return False
    i = 3
    while i * i <= n:
        if n % i == 0:
            return False
        i += 2
    return True


def is_in_range(value: Number, min: Number, max: Number) -> bool:
    """Inclusive on both ends."""
    return min <= value <= max


# --- Arithmetic ------------------------------------------------------------


def swap_sign(value: Number) -> Number:
    return -value


def lerp(value: Number, to: Number, t: float) -> float:
    """Linear interpolation from ``value`` to ``to`` by factor ``t``.

    Example:
        >>> lerp(0, 100, 0.5)
        50.0
    """
    return value + (to - value) * t


def normalize(value: Number, min: Number, max: Number) -> float:
    """Position of ``value`` within ``[min, max]`` as a fraction.

    Returns:
        ``(value - min) / (max - min)``, or ``0`` when ``min == max``.
    """
    if max == min:
        return 0
    return (value - min) / (max - min)


def factorial(value: Number) -> int:
    """Factorial of a non-negative integer.

    Integral floats such as ``5.0`` are accepted.

    Raises:
        ValueError: If ``value`` is negative or has a fractional part.
    """
    if value < 0 or value != math.trunc(value):
        raise ValueError(f"factorial requires a non-negative integer, got {value}")
    return math.factorial(int(value))


def sum_of_digits(value: Number) -> int:
    """Sum of the decimal digits of the integer part, ignoring sign."""
    return sum(int(d) for d in str(abs(int(value))))


def digit_count(value: Number) -> int:
    return len(str(abs(int(value))))


def reverse_digits(value: Number) -> int:
    """Reverse the decimal digits, keeping the sign (``-123`` -> ``-321``)."""
    n = int(value)
    reversed_abs = int(str(abs(n))[::-1])
    return -reversed_abs if n < 0 else reversed_abs


def to_radians(value: Number) -> float:
    return math.radians(value)


def to_degrees(value: Number) -> float:
    return math.degrees(value)


# --- Formatting ------------------------------------------------------------


def to_precision(value: Number, precision: int = 2) -> str:
    """Fixed-point string with trailing zeros stripped.

    Example:
        >>> to_precision(1.50)
        '1.5'
        >>> to_precision(1.0)
        '1'
    """
    fixed = f"{value:.{precision}f}"
    if "." not in fixed:
        return fixed
    return fixed.rstrip("0").rstrip(".")


def to_currency_string(
    value: Number,
    delimiter: tp.Optional[str] = None,
    precision: tp.Optional[int] = None,
    symbol: str = "",
    strip_zero_decimal: tp.Optional[bool] = None,
) -> str:
    """Format as a currency amount with thousands delimiters.

    Args:
        value: The amount.
        delimiter: Thousands separator. Defaults to ``settings.CURRENCY_DELIMITER``.
        precision: Number of decimal places. Defaults to
            ``settings.CURRENCY_PRECISION``.
        symbol: Currency symbol placed before the digits (after any sign).
        strip_zero_decimal: Omit the decimal part when it is all zeros.
            Defaults to ``settings.CURRENCY_STRIP_ZERO_DECIMAL``.

    Returns:
        The formatted amount, e.g. ``"-$1,234.50"``.
    """
    delimiter = delimiter if delimiter is not None else settings.CURRENCY_DELIMITER
    precision = precision if precision is not None else settings.CURRENCY_PRECISION
    if strip_zero_decimal is None:
        strip_zero_decimal = settings.CURRENCY_STRIP_ZERO_DECIMAL

    fixed = f"{abs(value):.{precision}f}"
    integer, _, decimal = fixed.partition(".")
    negative = value < 0 and fixed.strip("0.") != ""

    groups = []
    while len(integer) > 3:
        groups.insert(0, integer[-3:])
        integer = integer[:-3]
    groups.insert(0, integer)
    amount = delimiter.join(groups)

    if decimal and not (strip_zero_decimal and decimal.strip("0") == ""):
        amount = f"{amount}.{decimal}"
    sign = "-" if negative else ""
    return f"{sign}{symbol}{amount}"


def percentage(value: Number, total: Number, precision: int = 1) -> str:
    """``value`` as a percentage of ``total``; ``"0%"`` when ``total`` is 0.

    Example:
        >>> percentage(25, 200)
        '12.5%'
    """
    if total == 0:
        return "0%"
    return f"{value / total * 100:.{precision}f}%"


def pad(value: Number, width: int, pad_char: str = "0") -> str:
    """Left-pad the string form of ``value`` to ``width`` (``7`` -> ``"007"``)."""
    return str(value).rjust(width, pad_char)


def to_ordinal(value: Number) -> str:
    """English ordinal: ``1st``, ``2nd``, ``3rd``, ``11th``, ``22nd``, ``113th``."""
    n = int(value)
    if 11 <= abs(n) % 100 <= 13:
        return f"{n}th"
    suffix = {1: "st", 2: "nd", 3: "rd"}.get(abs(n) % 10, "th")
    return f"{n}{suffix}"


def to_roman(value: Number) -> str:
    """Roman numeral for 1..3999.

    Raises:
        ValueError: If ``value`` is outside ``1..3999``.
    """
    remaining = int(value)
    if not 1 <= remaining <= 3999:
        raise ValueError(f"Roman numerals support 1..3999, got {value}")
    parts = []
    for amount, symbol in _ROMAN_NUMERALS:
        while remaining >= amount:
            parts.append(symbol)
            remaining -= amount
    return "".join(parts)


def _radix(value: Number, code: str) -> str:
    n = int(value)
    digits = format(abs(n), code)
    return f"-{digits}" if n < 0 else digits


def to_binary(value: Number) -> str:
    """Binary digits, ``-`` prefixed for negatives (``10`` -> ``"1010"``)."""
    return _radix(value, "b")


def to_hex(value: Number, upper_case: bool = False) -> str:
    """Hexadecimal digits, ``-`` prefixed for negatives (``255`` -> ``"ff"``)."""
    return _radix(value, "X" if upper_case else "x")


def to_octal(value: Number) -> str:
    return _radix(value, "o")


def round_to(value: Number, decimals: int) -> float:
    """Round to ``decimals`` places, halves away from zero.

    Rounding is done on the shortest decimal representation of ``value``, so
    ``round_to(1.545, 2)`` gives ``1.55`` even though the nearest binary float
    to 1.545 lies just below it.
    """
    number = Decimal(str(value))
    if not number.is_finite():
        return float(value)
    quantum = Decimal(1).scaleb(-decimals)
    with localcontext() as context:
        # quantize needs room for every digit left of the quantum
        context.prec = max(context.prec, number.adjusted() + decimals + 2)
        return float(number.quantize(quantum, rounding=ROUND_HALF_UP))


# --- Random ----------------------------------------------------------------


def random_list(
    count: int, min: int = 0, max: int = 100, seed: tp.Optional[int] = None
) -> tp.List[int]:
    """``count`` uniform random integers in ``[min, max)``.

    Raises:
        ValueError: If ``count`` is negative or ``max <= min``.
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    if max <= min:
        raise ValueError(f"max ({max}) must be greater than min ({min})")
    rng = np.random.default_rng(seed)
    return [int(n) for n in rng.integers(min, max, size=count)]
