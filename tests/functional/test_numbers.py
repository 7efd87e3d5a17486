import math

import pytest

from utilbelt.functional import numbers


def test_sign_predicates():
    assert numbers.is_positive(1) and not numbers.is_positive(0)
    assert numbers.is_negative(-0.5) and not numbers.is_negative(0)
    assert numbers.is_zero(0.0) and not numbers.is_zero(1e-9)


def test_integer_and_double():
    assert numbers.is_integer(2)
    assert numbers.is_integer(2.0)
    assert not numbers.is_integer(2.5)
    assert numbers.is_double(2.5)
    assert not numbers.is_double(2.0)


@pytest.mark.parametrize("value, expected", [(2, True), (3, True), (97, True), (0, False), (1, False), (4, False), (91, False), (-7, False)])
def test_is_prime(value, expected):
    assert numbers.is_prime(value) is expected


def test_is_in_range_is_inclusive():
    assert numbers.is_in_range(1, 1, 5)
    assert numbers.is_in_range(5, 1, 5)
    assert not numbers.is_in_range(5.1, 1, 5)


def test_arithmetic():
    assert numbers.swap_sign(3) == -3
    assert numbers.lerp(0, 100, 0.5) == 50.0
    assert numbers.normalize(50, 0, 100) == 0.5
    assert numbers.normalize(5, 3, 3) == 0
    assert numbers.to_radians(180) == pytest.approx(math.pi)
    assert numbers.to_degrees(math.pi) == pytest.approx(180.0)


def test_factorial():
    assert numbers.factorial(5) == 120
    assert numbers.factorial(0) == 1
    assert numbers.factorial(5.0) == 120
    with pytest.raises(ValueError):
        numbers.factorial(-1)


@pytest.mark.parametrize("value", [2.5, -0.5, 0.1])
def test_factorial_rejects_fractions(value):
    with pytest.raises(ValueError):
        numbers.factorial(value)


def test_digits():
    assert numbers.sum_of_digits(123) == 6
    assert numbers.sum_of_digits(-123) == 6
    assert numbers.digit_count(-12345) == 5
    assert numbers.digit_count(0) == 1
    assert numbers.reverse_digits(1234) == 4321
    assert numbers.reverse_digits(-120) == -21


@pytest.mark.parametrize(
    "value, precision, expected",
    [(1.0, 2, "1"), (1.5, 2, "1.5"), (3.14159, 3, "3.142"), (10, 0, "10"), (100.0, 2, "100")],
)
def test_to_precision(value, precision, expected):
    assert numbers.to_precision(value, precision) == expected


def test_to_currency_string():
    assert numbers.to_currency_string(1234567.89) == "1,234,567.89"
    assert numbers.to_currency_string(1000, symbol="$") == "$1,000"
    assert numbers.to_currency_string(1000.0) == "1,000"
    assert numbers.to_currency_string(-1234.5, symbol="$") == "-$1,234.50"
    assert numbers.to_currency_string(999) == "999"
    assert numbers.to_currency_string(1234567.5, delimiter=" ") == "1 234 567.50"


def test_to_currency_string_zero_decimal_is_configurable():
    assert numbers.to_currency_string(1000, strip_zero_decimal=False) == "1,000.00"
    assert numbers.to_currency_string(1000, precision=3, strip_zero_decimal=False) == "1,000.000"


def test_to_currency_string_does_not_sign_rounded_zero():
    assert numbers.to_currency_string(-0.001) == "0"


def test_percentage():
    assert numbers.percentage(25, 200) == "12.5%"
    assert numbers.percentage(1, 3, precision=2) == "33.33%"
    assert numbers.percentage(25, 0) == "0%"


def test_pad():
    assert numbers.pad(7, 3) == "007"
    assert numbers.pad(7, 3, pad_char="x") == "xx7"
    assert numbers.pad(1234, 3) == "1234"


@pytest.mark.parametrize(
    "value, expected",
    [(1, "1st"), (2, "2nd"), (3, "3rd"), (4, "4th"), (11, "11th"), (12, "12th"), (13, "13th"),
     (21, "21st"), (22, "22nd"), (101, "101st"), (111, "111th"), (112, "112th"), (113, "113th")],
)
def test_to_ordinal(value, expected):
    assert numbers.to_ordinal(value) == expected


@pytest.mark.parametrize("value, expected", [(1, "I"), (4, "IV"), (9, "IX"), (2024, "MMXXIV"), (3999, "MMMCMXCIX")])
def test_to_roman(value, expected):
    assert numbers.to_roman(value) == expected


@pytest.mark.parametrize("value", [0, -5, 4000])
def test_to_roman_out_of_range(value):
    with pytest.raises(ValueError):
        numbers.to_roman(value)


def test_radix_conversion():
    assert numbers.to_binary(10) == "1010"
    assert numbers.to_binary(-5) == "-101"
    assert numbers.to_hex(255) == "ff"
    assert numbers.to_hex(255, upper_case=True) == "FF"
    assert numbers.to_hex(-255) == "-ff"
    assert numbers.to_octal(8) == "10"


@pytest.mark.parametrize(
    "value, decimals, expected",
    [(3.14159, 2, 3.14), (3.7, 0, 4.0), (1.545, 2, 1.55), (2.5, 0, 3.0), (-2.5, 0, -3.0)],
)
def test_round_to(value, decimals, expected):
    assert numbers.round_to(value, decimals) == expected


@pytest.mark.parametrize(
    "value, decimals, expected",
    [
        (1e20, 10, 1e20),
        (1.2345678901234568e29, 5, 1.2345678901234568e29),
        (1e300, 2, 1e300),
        (-1e20, 3, -1e20),
    ],
)
def test_round_to_large_values(value, decimals, expected):
    assert numbers.round_to(value, decimals) == expected


def test_round_to_non_finite():
    assert numbers.round_to(float("inf"), 2) == float("inf")
    assert math.isnan(numbers.round_to(float("nan"), 2))


def test_random_list():
    values = numbers.random_list(50, 0, 10, seed=1)
    assert len(values) == 50
    assert all(0 <= v < 10 for v in values)
    assert values == numbers.random_list(50, 0, 10, seed=1)
    assert numbers.random_list(0) == []
    with pytest.raises(ValueError):
        numbers.random_list(3, 5, 5)
