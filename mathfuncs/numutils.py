r"""@package mathfuncs.numutils

Miscellaneous numerical utilities and helpers.


@b Examples

```
    >>> ieee(np.log, 0.0)
    -inf
    >>> normalize_around_zero(3*np.pi/2)
    -1.5707963267948966
```
"""

import math

import numpy as np


__all__ = [
    "isclose",
    "ieee",
    "is_integer_value",
    "normalize_around_pi",
    "normalize_around_zero",
    "NumericalError",
]


class NumericalError(Exception):
    r"""Exception raised for problems with numerical evaluation.

    For example, an evaluator may raise this if a sampled value is not finite
    and non-finite results were not allowed.
    """
    pass


def isclose(a, b, rel_tol=None, abs_tol=None):
    r"""Test if two numbers agree within an absolute/relative tolerance.

    The default relative tolerance is `1e-9` and the absolute one `0.0`.
    """
    if rel_tol is None:
        rel_tol = 1e-9
    if abs_tol is None:
        abs_tol = 0.0
    return abs(a-b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)


def ieee(func, *args):
    r"""Call a NumPy ufunc on scalars and return a float.

    Floating point problems (division by zero, overflow, invalid arguments)
    are ignored, so the result follows IEEE semantics: poles give infinities
    and arguments outside the domain of `func` give NaN. No exception or
    warning is produced.
    """
    with np.errstate(all='ignore'):
        return float(func(*args))


def is_integer_value(value):
    r"""Return whether a float represents an integer."""
    return math.isfinite(value) and value == math.floor(value)


def normalize_around_pi(angle):
    r"""Map an angle to the interval `[0, 2pi)`."""
    result = angle - 2*math.pi * math.floor(angle / (2*math.pi))
    if result >= 2*math.pi:
        # rounding of the floor division above
        result = 0.0
    return result


def normalize_around_zero(angle):
    r"""Map an angle to the interval `(-pi, pi]`."""
    result = normalize_around_pi(angle)
    if result > math.pi:
        result -= 2*math.pi
    return result
