r"""@package mathfuncs.functions.basics

The leaves of the function algebra: constants and the undefined function.

`Constant.ZERO`, `Constant.ONE` and `Nan.NAN` are canonical instances.
Simplification always returns exactly these objects for functions which are
identically 0, 1 or undefined, so that code can test e.g.
``f.simplify() is Constant.ZERO``.
"""

import math

import numpy as np
import sympy as sp

from ..numutils import ieee
from .common import _cmp, _check_same_type, _sympy_number
from .knots import KnotReport
from .mathfunction import MathFunction
from .printing import print_value


__all__ = [
    "Constant",
    "Nan",
]


def _canonical(name):
    r"""Return one of the canonical leaf instances by name (for unpickling)."""
    if name == "NAN":
        return Nan.NAN
    return getattr(Constant, name)


class Constant(MathFunction):
    r"""Function with the same value everywhere.

    Use Constant.ZERO and Constant.ONE for the values 0 and 1, or call
    simplify() on a newly created constant to obtain them.
    """
    ## Canonical zero function (set below the class definition).
    ZERO = None
    ## Canonical constant one function (set below the class definition).
    ONE = None

    def __init__(self, value):
        r"""Create a constant function.

        @param value
            The value of the function. Must be a real number.
        """
        self._value = float(value)

    @property
    def value(self):
        r"""Value of this constant."""
        return self._value

    def evaluate(self, x):
        return self._value

    def derivative(self):
        return Constant.ZERO

    def scale_by(self, factor):
        if factor == 0.0:
            return Constant.ZERO
        if factor == 1.0:
            return self
        return Constant(self._value * factor).simplify()

    def simplify(self):
        if self._value == 0.0:
            return Constant.ZERO
        if self._value == 1.0:
            return Constant.ONE
        if math.isnan(self._value):
            return Nan.NAN
        return self

    def get_scale(self):
        return self._value

    def with_scale(self, scale):
        if scale == self._value:
            return self
        return Constant(scale).simplify()

    def sort_priority(self):
        return 0

    def compare_within_sub_type(self, other):
        _check_same_type(self, other)
        return _cmp(self._value, other.value)

    def merge_add(self, other):
        if isinstance(other, Constant):
            return Constant(self._value + other.value)
        return None

    def merge_multiply(self, other):
        if isinstance(other, Constant):
            return Constant(self._value * other.value)
        return None

    def merge_divide(self, other):
        if isinstance(other, Constant):
            return Constant(ieee(np.divide, self._value, other.value))
        return None

    def _knot_report(self, interval):
        return KnotReport.NONE

    def _sympy(self, x):
        return _sympy_number(self._value)

    def __reduce__(self):
        if self is Constant.ZERO:
            return (_canonical, ("ZERO",))
        if self is Constant.ONE:
            return (_canonical, ("ONE",))
        return (Constant, (self._value,))

    def __eq__(self, other):
        if not isinstance(other, Constant):
            return NotImplemented
        return self._value == other.value

    def __hash__(self):
        return hash((Constant, self._value))

    def __str__(self):
        return print_value(self._value)


Constant.ZERO = Constant(0.0)
Constant.ONE = Constant(1.0)


class Nan(MathFunction):
    r"""The function which is undefined everywhere.

    There is exactly one instance, Nan.NAN. It absorbs all operations: its
    derivative, any scaled version and any sum or product containing it are
    this instance again.
    """
    ## The one instance (set below the class definition).
    NAN = None

    def __new__(cls):
        if cls.NAN is not None:
            return cls.NAN
        return super().__new__(cls)

    def evaluate(self, x):
        return math.nan

    def derivative(self):
        return self

    def scale_by(self, factor):
        return self

    def sort_priority(self):
        return 3

    def compare_within_sub_type(self, other):
        _check_same_type(self, other)
        return 0

    def merge_add(self, other):
        return self

    def merge_multiply(self, other):
        return self

    def merge_divide(self, other):
        return self

    def _knot_report(self, interval):
        if interval.is_single_point():
            return KnotReport.KNOWN_FINITE
        return KnotReport.KNOWN_INFINITE

    def _knots(self, interval):
        return [interval.low]

    def _sympy(self, x):
        return sp.nan

    def __reduce__(self):
        return (_canonical, ("NAN",))

    def __eq__(self, other):
        if not isinstance(other, Nan):
            return NotImplemented
        return True

    def __hash__(self):
        return hash(Nan)

    def __str__(self):
        return "NaN"


Nan.NAN = Nan()
