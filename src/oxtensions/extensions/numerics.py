"""Numeric helpers shared by int, float and Decimal.

Helpers return the same numeric type they receive where that makes sense
(`clamp`, `round_to`, `to_nearest`). Float sign checks treat NaN and the
infinities as neither positive nor negative.
"""

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from numbers import Real
from typing import List, TypeVar, Union

Number = Union[int, float, Decimal]
N = TypeVar("N", int, float, Decimal)

_ROMAN_NUMERALS = (
    (1000, "M"), (900, "CM"), (500, "D"), (400, "CD"),
    (100, "C"), (90, "XC"), (50, "L"), (40, "XL"),
    (10, "X"), (9, "IX"), (5, "V"), (4, "IV"), (1, "I"),
)


def is_positive(value: Number) -> bool:
    if isinstance(value, float):
        return value > 0 and math.isfinite(value)
    return value > 0


def is_negative(value: Number) -> bool:
    if isinstance(value, float):
        return value < 0 and math.isfinite(value)
    return value < 0


def is_zero(value: Number) -> bool:
    return value == 0


def is_even(value: int) -> bool:
    return value & 1 == 0


def is_odd(value: int) -> bool:
    return value & 1 == 1


def clamp(value: N, minimum: N, maximum: N) -> N:
    if minimum > maximum:
        raise ValueError("minimum must be less than or equal to maximum")
    return max(minimum, min(value, maximum))


def is_between(value: Number, minimum: Number, maximum: Number) -> bool:
    """Inclusive on both ends."""
    return minimum <= value <= maximum


def is_prime(value: int) -> bool:
    if value < 2:
        return False
    if value == 2:
        return True
    if value & 1 == 0:
        return False
    for divisor in range(3, math.isqrt(value) + 1, 2):
        if value % divisor == 0:
            return False
    return True


def factorial(value: int) -> int:
    if value < 0:
        raise ValueError("value must be non-negative")
    return math.factorial(value)


def digit_count(value: int) -> int:
    return len(str(abs(value)))


def to_digits(value: int) -> List[int]:
    """Decimal digits of |value|, most significant first."""
    return [int(d) for d in str(abs(value))]


def to_ordinal(value: int) -> str:
    """1 -> "1st", 12 -> "12th", 23 -> "23rd"."""
    magnitude = abs(value)
    if magnitude % 100 in (11, 12, 13):
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(magnitude % 10, "th")
    return f"{value}{suffix}"


def to_roman(value: int) -> str:
    if not 1 <= value <= 3999:
        raise ValueError("value must be between 1 and 3999")
    parts: List[str] = []
    for number, symbol in _ROMAN_NUMERALS:
        while value >= number:
            parts.append(symbol)
            value -= number
    return "".join(parts)


def is_multiple_of(value: int, divisor: int) -> bool:
    return divisor != 0 and value % divisor == 0


def power(value: int, exponent: int) -> int:
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    return value ** exponent


def round_to(value: N, decimals: int = 0) -> N:
    """Round half away from zero: round_to(2.5) == 3.0, round_to(-2.5) == -3.0.

    Floats are rounded through their shortest decimal representation, so
    round_to(2.675, 2) gives 2.68 rather than the binary-float 2.67.
    Infinities, NaN and values with no digits past `decimals` come back
    unchanged.
    """
    if isinstance(value, int):
        return value
    exact = value if isinstance(value, Decimal) else Decimal(str(value))
    if not exact.is_finite() or exact.as_tuple().exponent >= -decimals:
        return value
    quantum = Decimal(1).scaleb(-decimals)
    with localcontext() as ctx:
        # quantize fails once the result needs more digits than the context holds
        ctx.prec = max(ctx.prec, exact.adjusted() + decimals + 2)
        rounded = exact.quantize(quantum, rounding=ROUND_HALF_UP)
    if isinstance(value, Decimal):
        return rounded
    return float(rounded)


def percentage(value: Number, total: Number) -> Number:
    """`value` as a percentage of `total`; a zero total yields 0."""
    if total == 0:
        return type(value)(0)
    return value / total * 100


def to_currency_string(value: Number, symbol: str = "$", decimals: int = 2) -> str:
    """Format with thousands separators: 1234.5 -> "$1,234.50", -3 -> "-$3.00"."""
    amount = round_to(Decimal(str(value)), decimals)
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):,.{decimals}f}"


def to_nearest(value: N, step: N) -> N:
    """Round to the closest multiple of `step`, halves away from zero."""
    if step <= 0:
        raise ValueError("step must be positive")
    if isinstance(value, Decimal) or isinstance(step, Decimal):
        quotient = (Decimal(value) / Decimal(step)).quantize(Decimal(1), rounding=ROUND_HALF_UP)
        return quotient * Decimal(step)
    quotient = round_to(float(value) / float(step))
    result = quotient * step
    if isinstance(value, int) and isinstance(step, int):
        return int(result)
    return result


def is_nan(value: Real) -> bool:
    return math.isnan(value)


def is_infinity(value: Real) -> bool:
    return math.isinf(value)


def is_finite(value: Real) -> bool:
    return math.isfinite(value)


def lerp(t: float, a: float, b: float) -> float:
    """Linear interpolation from `a` (t=0) to `b` (t=1); `t` is not clamped."""
    return a + (b - a) * t


def normalize(value: float, minimum: float, maximum: float) -> float:
    if maximum == minimum:
        return 0.0
    return (value - minimum) / (maximum - minimum)


def to_radians(degrees: float) -> float:
    return math.radians(degrees)


def to_degrees(radians: float) -> float:
    return math.degrees(radians)
