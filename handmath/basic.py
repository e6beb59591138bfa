"""Absolute values, rounding to integers and the floating-point remainder."""

import math

PI = 3.1415926535897932
E = 2.7182818284590452354
LN2 = 0.69314718055994530942
EPS = 1e-07
INF = math.inf
NAN = math.nan


def iabs(x):
    """Return the absolute value of ``x`` truncated to an integer.

    Raises ValueError for NaN and OverflowError for infinities, as ``int``
    does.
    """
    value = int(x)
    return -value if value < 0 else value


def fabs(x):
    """Return the absolute value of a floating-point number.

    NaN stays NaN, both zeros give +0.0 and both infinities give +inf.
    """
    x = float(x)
    if math.isnan(x):
        return math.nan
    if x == 0.0:
        return 0.0
    if math.isinf(x):
        return math.inf
    return x if x > 0.0 else -x


def ceil(x):
    """Return the smallest whole number not less than ``x``, as a float.

    NaN and infinities are returned unchanged.
    """
    x = float(x)
    if not math.isfinite(x):
        return x
    result = float(math.trunc(x))
    if x > 0.0 and x != result:
        result += 1.0
    return result


def floor(x):
    """Return the largest whole number not greater than ``x``, as a float.

    NaN and infinities are returned unchanged.
    """
    x = float(x)
    if not math.isfinite(x):
        return x
    result = float(math.trunc(x))
    if x < 0.0 and x != result:
        result -= 1.0
    return result


def fmod(x, y):
    """Return ``x - y * q`` where ``q`` is ``x / y`` truncated toward zero.

    A zero divisor or an infinite dividend gives NaN; an infinite divisor
    gives ``x`` back.
    """
    x = float(x)
    y = float(y)
    if y == 0.0 or math.isinf(x):
        return math.nan
    if math.isinf(y):
        return x
    quotient = x / y
    if not math.isfinite(quotient):
        return math.nan
    return x - y * math.trunc(quotient)