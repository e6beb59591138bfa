"""Trigonometric functions and their inverses built from power series."""

import math

from .basic import EPS, PI, fabs, fmod
from .powers import sqrt

_ATAN_INNER_TERMS = 5000
_ATAN_OUTER_TERMS = 10000


def _divide(numerator, denominator):
    """Divide following IEEE rules, so a zero denominator gives a signed infinity."""
    if denominator == 0.0:
        if numerator == 0.0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def sin(x):
    """Return the sine of ``x`` from its Taylor series.

    The argument is first reduced modulo 2*PI; the series stops once a term
    is no larger than EPS. NaN and infinities give NaN.
    """
    x = float(x)
    if x != PI and x != 0.0:
        x = fmod(x, 2.0 * PI)
    result = x
    term = x
    step = 1
    while fabs(term) > EPS:
        term *= -x * x / (2 * step * (2 * step + 1))
        if not math.isfinite(term):
            return math.nan
        result += term
        step += 1
    return result


def cos(x):
    """Return the cosine of ``x`` as the sine shifted by a quarter turn."""
    return sin(float(x) + PI / 2.0)


def tan(x):
    """Return the tangent of ``x`` as sine over cosine; zero gives 0.0."""
    x = float(x)
    if x == 0.0:
        return 0.0
    return _divide(sin(x), cos(x))


def atan(x):
    """Return the arctangent of ``x`` in radians.

    Inside (-1, 1) the Maclaurin series is summed directly; outside it the
    series in 1/x is subtracted from +-PI/2.
    """
    x = float(x)
    if math.isnan(x):
        return math.nan
    if x == math.inf:
        return PI / 2.0
    if x == -math.inf:
        return -PI / 2.0

    if -1.0 < x < 1.0:
        square = x * x
        term = x
        result = term
        sign = 1
        for i in range(1, _ATAN_INNER_TERMS):
            sign = -sign
            term *= square
            if term == 0.0:
                break
            result += sign * term / (1.0 + 2.0 * i)
        return result

    if x == 1.0:
        return PI / 4.0
    if x == -1.0:
        return -PI / 4.0

    square = x * x
    term = 1.0 / x
    result = term
    sign = 1
    for i in range(1, _ATAN_OUTER_TERMS):
        sign = -sign
        term /= square
        if term == 0.0:
            break
        result += sign * term / (1.0 + 2.0 * i)
    return math.copysign(PI / 2.0, x) - result


def asin(x):
    """Return the arcsine of ``x``; arguments outside [-1, 1] and NaN give NaN."""
    x = float(x)
    if x < -1.0 or x > 1.0 or math.isnan(x):
        return math.nan
    return atan(_divide(x, sqrt(1.0 - x * x)))


def acos(x):
    """Return the arccosine of ``x``; arguments outside [-1, 1] and NaN give NaN."""
    x = float(x)
    if x < -1.0 or x > 1.0 or math.isnan(x):
        return math.nan
    if 0.0 <= x < 1.0:
        return atan(_divide(sqrt(1.0 - x * x), x))
    if -1.0 < x < 0.0:
        return PI + atan(_divide(sqrt(1.0 - x * x), x))
    if x == 1.0:
        return 0.0
    return PI