# handmath

Elementary math functions worked out by hand: Taylor series, an iterative
logarithm and bisection. The standard `math` module is used only for
classifying and splitting floats (NaN and infinity checks, truncation, sign
copying), never for the transcendental functions themselves. Every function
takes a number and returns a `float`, except `iabs`, which returns an `int`.

## Installation

```
pip install .
```

## Modules

### `handmath.basic`

- `iabs(x)`: absolute value of `x` truncated to an integer. Raises
  `ValueError` for NaN and `OverflowError` for infinities, as `int()` does.
- `fabs(x)`: absolute value of a float. NaN stays NaN; both zeros give `0.0`
  and both infinities give `inf`.
- `ceil(x)`, `floor(x)`: nearest whole number not below / not above `x`,
  returned as a float. NaN and infinities are returned unchanged.
- `fmod(x, y)`: `x - y * q` with `q` the quotient truncated toward zero.
  A zero divisor or an infinite dividend gives NaN; an infinite divisor
  gives `x` back.

The module also defines the constants `PI`, `E`, `LN2`, `EPS` (`1e-07`),
`INF` and `NAN`.

### `handmath.powers`

- `exp(x)`: exponential by Taylor series. Arguments below `-14` give `0.0`;
  `inf` gives `inf`, NaN gives NaN.
- `log(x)`: natural logarithm by iteration on `exp`, after dividing out
  whole powers of `E`. Negative arguments and NaN give NaN, `0.0` gives
  `-inf`, `inf` gives `inf`.
- `power(base, exponent)`: whole exponents by repeated multiplication or
  division, other exponents through `exp(exponent * log(base))`. A zero base
  gives `1.0` for a zero exponent and `0.0` for any other; a base of `1.0`
  always gives `1.0`; a negative base with a fractional exponent gives NaN.
- `sqrt(x)`: square root by bisection to within `EPS`. Negative arguments
  and NaN give NaN.

### `handmath.trig`

- `sin(x)`: Taylor series after reducing `x` modulo `2 * PI`; the sum stops
  once a term is no larger than `EPS`. NaN and infinities give NaN.
- `cos(x)`: `sin(x + PI / 2)`.
- `tan(x)`: `sin(x) / cos(x)`, with `0.0` for a zero argument.
- `atan(x)`: Maclaurin series inside `(-1, 1)`, a series in `1 / x` outside
  it; `±inf` give `±PI / 2`.
- `asin(x)`, `acos(x)`: built on `atan` and `sqrt`. Arguments outside
  `[-1, 1]` and NaN give NaN.

## Example

```python
from handmath.basic import fmod
from handmath.powers import exp, power, sqrt
from handmath.trig import sin, atan

sqrt(81.0)        # about 9.0
exp(1.0)          # about 2.718281828
power(-2, -3)     # -0.125
fmod(3.92, 2.0)   # about 1.92
sin(-1.0)         # about -0.841470985
atan(1.0)         # PI / 4
```

For ordinary arguments the results agree with the standard library to within
about `1e-7`. Arguments outside a function's domain, such as `sqrt(-9.0)` or
`acos(2.0)`, give NaN rather than raising.

## What it does not do

This is a library of functions only: there is no command-line tool, and no
support for complex numbers, `decimal` or arbitrary-precision arithmetic.

## Running the tests

```
pip install .[test]
pytest
```