import math

import pytest

from handmath.trig import acos, asin, atan, cos, sin, tan

EPS = 1e-07
PI = 3.1415926535897932
INF = math.inf
NINF = -math.inf
NAN = math.nan


def _nan_text(value):
    return str(float(value))


@pytest.mark.parametrize("x", [0.0, PI, -1.0, 3 * PI])
def test_sin_matches_reference(x):
    assert sin(x) == pytest.approx(math.sin(x), abs=EPS)


@pytest.mark.parametrize("x", [NAN, INF, NINF])
def test_sin_of_non_finite_is_nan(x):
    result = sin(x)
    assert _nan_text(result) == "nan"


def test_sin_of_zero_is_zero():
    assert sin(0.0) == 0.0


@pytest.mark.parametrize("x", [0.5, 1.0, 2.5, -4.0, 10.0, 100.0])
def test_sin_and_cos_satisfy_pythagorean_identity(x):
    assert sin(x) ** 2 + cos(x) ** 2 == pytest.approx(1.0, abs=1e-6)


@pytest.mark.parametrize("x", [0.0, PI, -1.0])
def test_cos_matches_reference(x):
    assert cos(x) == pytest.approx(math.cos(x), abs=EPS)


@pytest.mark.parametrize("x", [NAN, INF, NINF])
def test_cos_of_non_finite_is_nan(x):
    result = cos(x)
    assert _nan_text(result) == "nan"


@pytest.mark.parametrize("x", [0.0, -1.0, 3 * PI])
def test_tan_matches_reference(x):
    assert tan(x) == pytest.approx(math.tan(x), abs=EPS)


def test_tan_of_zero_is_exactly_zero():
    assert tan(0.0) == 0.0


@pytest.mark.parametrize("x", [NAN, INF, NINF])
def test_tan_of_non_finite_is_nan(x):
    result = tan(x)
    assert _nan_text(result) == "nan"


@pytest.mark.parametrize(
    "x",
    [
        0.0,
        PI,
        -PI,
        PI * 5,
        -PI * 7,
        1.0,
        -1.0,
        0.000002,
        -0.000003,
        0.987654,
        -0.987654,
        9999999999.999999,
        -9999999999.999999,
        9999999999999999.0,
        1234567890.567329,
        INF,
        NINF,
    ],
)
def test_atan_matches_reference(x):
    assert atan(x) == pytest.approx(math.atan(x), abs=EPS)


def test_atan_of_nan_is_nan():
    result = atan(float("nan"))
    assert _nan_text(result) == "nan"


def test_atan_of_infinities_is_half_pi():
    assert atan(INF) == PI / 2
    assert atan(NINF) == -PI / 2


@pytest.mark.parametrize("x", [0.3, 0.9, 2.0, 50.0])
def test_atan_is_odd(x):
    assert atan(-x) == pytest.approx(-atan(x), abs=1e-12)


@pytest.mark.parametrize("x", [0.0, 1.0, -1.0, 0.000002, 0.875438, -0.999999])
def test_asin_matches_reference(x):
    assert asin(x) == pytest.approx(math.asin(x), abs=EPS)


@pytest.mark.parametrize(
    "x", [2.0, -2.0, 9999999999.999999, -9999999999999999.0, NAN, INF, NINF]
)
def test_asin_outside_domain_is_nan(x):
    result = asin(x)
    assert _nan_text(result) == "nan"


@pytest.mark.parametrize("x", [0.0, 1.0, -1.0, 0.000002, 0.875438, -0.999999])
def test_acos_matches_reference(x):
    assert acos(x) == pytest.approx(math.acos(x), abs=EPS)


@pytest.mark.parametrize(
    "x", [2.0, -2.0, 9999999999.999999, -9999999999999999.0, NAN, INF, NINF]
)
def test_acos_outside_domain_is_nan(x):
    result = acos(x)
    assert _nan_text(result) == "nan"


def test_acos_endpoints_are_exact():
    assert acos(1.0) == 0.0
    assert acos(-1.0) == PI


@pytest.mark.parametrize("x", [-0.7, -0.2, 0.1, 0.5, 0.95])
def test_asin_and_acos_sum_to_half_pi(x):
    assert asin(x) + acos(x) == pytest.approx(PI / 2, abs=2e-7)