"""Elementary math functions built from Taylor series and Newton iteration.

Domain errors yield ``NAN`` rather than raising, and results carry the
limited precision of the series used (terms are summed until they drop
below ``1e-10``).
"""

from __future__ import annotations

__all__ = [
    "PI",
    "E",
    "SQRT2",
    "LN2",
    "LN10",
    "INFINITY",
    "NAN",
    "sin",
    "cos",
    "tan",
    "asin",
    "acos",
    "atan",
    "atan2",
    "exp",
    "log",
    "log10",
    "pow",
    "sqrt",
    "ceil",
    "floor",
    "fabs",
    "fmod",
]

PI = 3.14159265358979323846
E = 2.71828182845904523536
SQRT2 = 1.41421356237309504880
LN2 = 0.69314718055994530942
LN10 = 2.30258509299404568402
INFINITY = float("inf")
NAN = float("nan")

_EPSILON = 1e-10
_NEWTON_STEPS = 20


def _normalize_angle(x: float) -> float:
    """Bring *x* into the range [-PI, PI]."""
    while x > PI:
        x -= 2.0 * PI
    while x < -PI:
        x += 2.0 * PI
    return x


def fabs(x: float) -> float:
    """Return the absolute value of *x*."""
    return -x if x < 0 else x


def sin(x: float) -> float:
    """Sine of *x* radians."""
    x = _normalize_angle(x)
    result = term = x
    n = 1
    while fabs(term) > _EPSILON:
        term *= -x * x / ((2 * n) * (2 * n + 1))
        result += term
        n += 1
    return result


def cos(x: float) -> float:
    """Cosine of *x* radians."""
    x = _normalize_angle(x)
    result = term = 1.0
    n = 1
    while fabs(term) > _EPSILON:
        term *= -x * x / ((2 * n - 1) * (2 * n))
        result += term
        n += 1
    return result


def tan(x: float) -> float:
    """Tangent of *x* radians; ``NAN`` where the cosine is (nearly) zero."""
    cos_x = cos(x)
    if fabs(cos_x) < _EPSILON:
        return NAN
    return sin(x) / cos_x


def asin(x: float) -> float:
    """Arc sine of *x*; ``NAN`` outside [-1, 1]."""
    if x < -1.0 or x > 1.0:
        return NAN
    result = term = x
    n = 1
    while fabs(term) > _EPSILON:
        term *= (x * x * (2 * n - 1) * (2 * n - 1)) / (2 * n * (2 * n + 1))
        result += term
        n += 1
    return result


def acos(x: float) -> float:
    """Arc cosine of *x*; ``NAN`` outside [-1, 1]."""
    if x < -1.0 or x > 1.0:
        return NAN
    return PI / 2.0 - asin(x)


def atan(x: float) -> float:
    """Arc tangent of *x*.

    Outside [-1, 1] the result is clamped to ``PI / 2`` with the sign of *x*.
    """
    if x < -1.0 or x > 1.0:
        return PI / 2.0 if x > 0 else -PI / 2.0
    result = term = x
    n = 1
    while fabs(term) > _EPSILON:
        term *= -x * x * (2 * n - 1) / (2 * n + 1)
        result += term
        n += 1
    return result


def atan2(y: float, x: float) -> float:
    """Angle of the point (*x*, *y*), taking the quadrant into account.

    Returns ``NAN`` for the origin.
    """
    if x > 0:
        return atan(y / x)
    if x < 0 and y >= 0:
        return atan(y / x) + PI
    if x < 0 and y < 0:
        return atan(y / x) - PI
    if x == 0 and y > 0:
        return PI / 2.0
    if x == 0 and y < 0:
        return -PI / 2.0
    return NAN


def exp(x: float) -> float:
    """e raised to the power *x*."""
    result = term = 1.0
    n = 1
    while fabs(term) > _EPSILON:
        term *= x / n
        result += term
        n += 1
    return result


def log(x: float) -> float:
    """Natural logarithm of *x* by Newton iteration; ``NAN`` for ``x <= 0``."""
    if x <= 0:
        return NAN
    if x == 1.0:
        return 0.0
    guess = 1.0
    for _ in range(_NEWTON_STEPS):
        guess -= (exp(guess) - x) / exp(guess)
    return guess


def log10(x: float) -> float:
    """Base-10 logarithm of *x*."""
    return log(x) / LN10


def pow(x: float, y: float) -> float:  # noqa: A001
    """*x* raised to the power *y*, computed as ``exp(y * log(x))``.

    ``NAN`` for a negative base with a fractional exponent and for a zero
    base with a non-positive exponent.
    """
    if x < 0 and not float(y).is_integer():
        return NAN
    if x == 0 and y <= 0:
        return NAN
    return exp(y * log(x))


def sqrt(x: float) -> float:
    """Square root of *x* by Newton iteration; ``NAN`` for negative *x*."""
    if x < 0:
        return NAN
    if x == 0:
        return 0.0
    guess = x
    for _ in range(_NEWTON_STEPS):
        guess = 0.5 * (guess + x / guess)
    return guess


def ceil(x: float) -> float:
    """Smallest integral value not less than *x*."""
    i = int(x)
    return float(i + 1) if x > i else float(i)


def floor(x: float) -> float:
    """*x* with its fractional part dropped (rounds toward zero)."""
    return float(int(x))


def fmod(x: float, y: float) -> float:
    """Remainder of *x* / *y* with the quotient truncated; ``NAN`` for ``y == 0``."""
    if y == 0:
        return NAN
    quotient = int(x / y)
    return x - quotient * y