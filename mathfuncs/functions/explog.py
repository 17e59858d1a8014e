r"""@package mathfuncs.functions.explog

Exponential and logarithm functions.

Logarithms to any base are stored as scaled natural logarithms, i.e.
\f$ \log_b(x) = \ln(x)/\ln(b) \f$. This way logarithms to different bases
of the same chain can be added by adding their scales.
"""

import math

import numpy as np
import sympy as sp

from ..numutils import ieee
from .common import _sympy_number
from .composite import Quotient
from .knots import KnotReport, _undefined_knot_info
from .power import Power
from .printing import print_coefficient, superscript
from .unary import UnaryFunction, _split_chain, _fill_params


__all__ = [
    "Exponential",
    "Logarithm",
]


class Exponential(UnaryFunction):
    r"""Exponential function \f$ a\, e^{c(x)} \f$."""
    _priority = 7

    def __init__(self, *args, chain=None):
        r"""Create an exponential function.

        The only positional number is the leading ``factor=1``, optionally
        preceded by the chain function.
        """
        chain, args = _split_chain(args, chain)
        factor, = _fill_params(Exponential, args, (1.0,))
        super().__init__(chain, factor)

    @property
    def factor(self):
        return self._scale

    def _params(self):
        return ()

    def _rebuild(self, chain, scale):
        return Exponential(chain, scale)

    def _apply(self, y):
        return self._scale * ieee(np.exp, y)

    def _outer_derivative(self):
        return self

    def _sympy_outer(self, y):
        return _sympy_number(self._scale) * sp.exp(y)

    def __str__(self):
        if self._scale == 0.0:
            return "0"
        if self._chain is None:
            return print_coefficient(self._scale) + "e" + superscript("x")
        return "%sexp(%s)" % (print_coefficient(self._scale),
                              self._chain_str(parens=False))


def _log_scale(base):
    r"""Scale of the natural logarithm giving the logarithm to `base`."""
    base = float(base)
    if math.isnan(base) or base <= 0.0 or base == 1.0:
        raise ValueError("Invalid logarithm base: %r" % base)
    if base == math.e:
        return 1.0
    if math.isinf(base):
        return 0.0
    return 1.0 / math.log(base)


class Logarithm(UnaryFunction):
    r"""Logarithm function \f$ s \ln(c(x)) \f$ to some base."""
    _priority = 6

    def __init__(self, *args, chain=None):
        r"""Create a logarithm to the given base.

        The only positional number is the ``base=e``, optionally preceded by
        the chain function. A `ValueError` is raised for bases which are not
        positive or equal to one.
        """
        chain, args = _split_chain(args, chain)
        base, = _fill_params(Logarithm, args, (math.e,))
        super().__init__(chain, _log_scale(base))

    @classmethod
    def from_scale(cls, scale, chain=None):
        r"""Create the function `scale*ln(chain)` directly from the scale."""
        obj = cls.__new__(cls)
        UnaryFunction.__init__(obj, chain, scale)
        return obj

    @property
    def base(self):
        r"""Base of the logarithm (`inf` for zero scale)."""
        if self._scale == 0.0:
            return math.inf
        return math.exp(1.0 / self._scale)

    def _params(self):
        return ()

    def _rebuild(self, chain, scale):
        return Logarithm.from_scale(scale, chain)

    def _apply(self, y):
        return self._scale * ieee(np.log, y)

    def _outer_derivative(self):
        return Power(self._chain, self._scale, -1.0)

    def derivative(self):
        r"""Derivative `s/x` or `s*c'/c` for a chain function `c`."""
        if self._scale == 0.0 or self._chain is None:
            return super().derivative()
        top = self._chain.derivative().scale_by(self._scale)
        return Quotient(top, self._chain).simplify()

    def _own_knot_info(self, interval):
        if interval.low < 0.0:
            return _undefined_knot_info(interval)
        if interval.covers(0.0):
            return KnotReport.KNOWN_FINITE, [0.0]
        return KnotReport.NONE, []

    def _chained_knot_report(self, interval):
        # sign of a general chain is not known
        return KnotReport.UNKNOWN

    def _sympy_outer(self, y):
        return _sympy_number(self._scale) * sp.log(y)

    def __str__(self):
        if self._scale == 0.0:
            return "0"
        return "%sln(%s)" % (print_coefficient(self._scale),
                             self._chain_str(parens=False))
