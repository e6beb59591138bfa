"""Exponential, natural logarithm, powers and square root."""

import math

from .basic import E, EPS

_EXP_TERMS = 5000
_EXP_UNDERFLOW = -14.0
_LOG_ITERATIONS = 100
_LONG_MIN = -(2**63)
_LONG_LIMIT = 2**63


def exp(x):
    """Return e raised to ``x`` from its Taylor series.

    Arguments below -14 give 0.0.
    """
    x = float(x)
    if math.isnan(x):
        return math.nan
    if x < _EXP_UNDERFLOW:
        return 0.0
    if math.isinf(x):
        return math.inf
    result = 1.0 + x
    term = x
    for i in range(2, _EXP_TERMS):
        term *= x / i
        result += term
        if term == 0.0 or math.isinf(result):
            break
    return result


def log(x):
    """Return the natural logarithm of ``x``.

    Negative arguments and NaN give NaN, zero gives -inf.
    """
    x = float(x)
    if x < 0.0:
        return math.nan
    if x == 0.0:
        return -math.inf
    if math.isnan(x):
        return math.nan
    if math.isinf(x):
        return math.inf

    arg = x
    whole = 0
    while arg >= E:
        arg /= E
        whole += 1

    estimate = 0.0
    for _ in range(_LOG_ITERATIONS):
        current = exp(estimate)
        following = estimate + 2.0 * (arg - current) / (arg + current)
        if following == estimate:
            break
        estimate = following
    return estimate + whole


def _whole_exponent(exponent):
    """Return the exponent as an int if it is a whole number in signed 64-bit range."""
    if not math.isfinite(exponent):
        return None
    if not _LONG_MIN <= exponent < _LONG_LIMIT:
        return None
    whole = math.trunc(exponent)
    return whole if whole == exponent else None


def _integer_power(base, count):
    """Raise ``base`` to a whole ``count`` by repeated multiplication or division."""
    if count == 0:
        return 1.0
    step = abs(base)
    if count > 0:
        magnitude = step
        steps = count - 1

        def advance(value):
            return value * step

    else:
        magnitude = 1.0 / step
        steps = -count - 1

        def advance(value):
            return value / step

    for _ in range(steps):
        following = advance(magnitude)
        if following == magnitude or math.isnan(following):
            magnitude = following
            break
        magnitude = following
    negative = base < 0.0 and count % 2 == 1
    return -magnitude if negative else magnitude


def power(base, exponent):
    """Return ``base`` raised to ``exponent``.

    Zero to any non-zero power is 0.0; a negative base with a fractional
    exponent gives NaN.
    """
    base = float(base)
    exponent = float(exponent)
    whole = _whole_exponent(exponent)
    if base < 0.0:
        if whole is not None:
            return _integer_power(base, whole)
        if math.isinf(exponent):
            magnitude = -base
            if magnitude < 1.0:
                return 0.0
            if magnitude == 1.0:
                return 1.0
            return 0.0 if exponent < 0.0 else math.inf
        return math.nan
    if base == 0.0:
        return 1.0 if exponent == 0.0 else 0.0
    if base == 1.0:
        return 1.0
    if whole is not None:
        return _integer_power(base, whole)
    return exp(exponent * log(base))


def sqrt(x):
    """Return the square root of ``x`` found by bisection to within EPS."""
    x = float(x)
    if x < 0.0 or math.isnan(x):
        return math.nan
    left = 0.0
    right = x if x > 1.0 else 1.0
    mid = (left + right) / 2.0
    while mid - left > EPS:
        if mid * mid > x:
            if mid == right:
                break
            right = mid
        else:
            left = mid
        mid = (left + right) / 2.0
    return mid