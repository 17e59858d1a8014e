r"""@package mathfuncs.functions.trig

Sine (and cosine) as well as the inverse functions arcsine and arctangent.

Cosines are represented as sines with the phase shifted by \f$ \pi/2 \f$.
When printed, sines with a phase of a multiple of \f$ \pi/2 \f$ are shown as
`sin` or `cos` with the appropriate sign.


@b Examples

```
    f = Sine(2, 3, 1)           # 2sin(3x+1)
    g = Sine.cosine()           # cos(x)
    g.derivative()              # -sin(x)
    h = ArcSine(Power(2, 1))    # asin(2x)
```
"""

import math

import numpy as np
import sympy as sp

from ..numutils import ieee, normalize_around_pi, normalize_around_zero
from .basics import Constant
from .common import _sympy_number
from .composite import Sum, Quotient
from .knots import KnotReport, _undefined_knot_info
from .power import Power
from .printing import print_coefficient, print_shift
from .unary import UnaryFunction, _split_chain, _fill_params


__all__ = [
    "Sine",
    "ArcSine",
    "ArcTangent",
]


_QUARTER = math.pi / 2
_QUARTER_TOL = 10 * math.ulp(math.pi)


def _quarter_turns(shift):
    r"""Number (0 to 3) of quarter turns in `shift` or `None` if not exact."""
    angle = normalize_around_pi(shift)
    turns = round(angle / _QUARTER)
    if abs(angle - turns * _QUARTER) > _QUARTER_TOL:
        return None
    return turns % 4


class Sine(UnaryFunction):
    r"""Sine function \f$ a \sin(\omega c(x) + \varphi) \f$."""
    _priority = 4

    def __init__(self, *args, chain=None):
        r"""Create a sine function.

        Positional arguments are ``amplitude=1, omega=1, shift=0``,
        optionally preceded by the chain function.
        """
        chain, args = _split_chain(args, chain)
        amplitude, omega, shift = _fill_params(Sine, args, (1.0, 1.0, 0.0))
        super().__init__(chain, amplitude)
        self._omega = float(omega)
        self._shift = float(shift)

    @classmethod
    def cosine(cls, amplitude=1.0, omega=1.0, shift=0.0, chain=None):
        r"""Create \f$ a \cos(\omega c(x) + \varphi) \f$ as a shifted sine."""
        return cls(chain, amplitude, omega,
                   normalize_around_zero(shift + _QUARTER))

    @property
    def amplitude(self):
        return self._scale

    @property
    def omega(self):
        return self._omega

    @property
    def shift(self):
        return self._shift

    def _params(self):
        return (self._omega, self._shift)

    def _rebuild(self, chain, scale):
        return Sine(chain, scale, self._omega, self._shift)

    def _apply(self, y):
        return self._scale * ieee(np.sin, self._omega * y + self._shift)

    def _outer_derivative(self):
        return Sine(self._chain, self._scale * self._omega, self._omega,
                    normalize_around_zero(self._shift + _QUARTER))

    def _simplify_local(self):
        if self._omega == 0.0:
            return Constant(self._scale * math.sin(self._shift)).simplify()
        return self

    def _sympy_outer(self, y):
        return _sympy_number(self._scale) * sp.sin(
            _sympy_number(self._omega) * y + _sympy_number(self._shift)
        )

    def __str__(self):
        if self._scale == 0.0:
            return "0"
        amplitude = self._scale
        name = "sin"
        shift = print_shift(self._shift)
        turns = _quarter_turns(self._shift)
        if turns is not None:
            name = "cos" if turns % 2 else "sin"
            if turns >= 2:
                amplitude = -amplitude
            shift = ""
        inner = self._chain_str(parens=self._omega != 1.0)
        return "%s%s(%s%s%s)" % (print_coefficient(amplitude), name,
                                 print_coefficient(self._omega), inner, shift)


class _ArcFunction(UnaryFunction):
    r"""Common parts of ArcSine and ArcTangent.

    These evaluate to \f$ \omega (k(c(x)) + \varphi) \f$, where `omega` is
    the scale and the shift is added to the angle before scaling.
    """
    ## NumPy ufunc of the inverse function.
    _ufunc = None
    ## Name used when printing.
    _name = None

    def __init__(self, *args, chain=None):
        chain, args = _split_chain(args, chain)
        omega, shift = _fill_params(type(self), args, (1.0, 0.0))
        super().__init__(chain, omega)
        self._shift = float(shift)

    @property
    def omega(self):
        return self._scale

    @property
    def shift(self):
        return self._shift

    def _params(self):
        return (self._shift,)

    def _rebuild(self, chain, scale):
        return type(self)(chain, scale, self._shift)

    def _apply(self, y):
        return self._scale * (ieee(self._ufunc, y) + self._shift)

    def _sympy_outer(self, y):
        func = getattr(sp, self._name)
        return _sympy_number(self._scale) * (func(y) + _sympy_number(self._shift))

    def __str__(self):
        if self._scale == 0.0:
            return "0"
        return "%s%s(%s%s)" % (print_coefficient(self._scale), self._name,
                               self._chain_str(parens=False),
                               print_shift(self._shift))


class ArcSine(_ArcFunction):
    r"""Arcsine function \f$ \omega (\arcsin(c(x)) + \varphi) \f$."""
    _priority = 5
    _ufunc = np.arcsin
    _name = "asin"

    @classmethod
    def arc_cosine(cls, omega=1.0, chain=None):
        r"""Create \f$ \omega \arccos(c(x)) \f$.

        This uses \f$ \arccos(y) = -(\arcsin(y) - \pi/2) \f$.
        """
        return cls(chain, -omega, -_QUARTER)

    def _outer_derivative(self):
        return Power(Sum(Constant.ONE, Power(self._chain, -1.0, 2.0)),
                     self._scale, -0.5)

    def _own_knot_info(self, interval):
        if interval.low < -1.0 or interval.high > 1.0:
            return _undefined_knot_info(interval)
        return KnotReport.NONE, []

    def _chained_knot_report(self, interval):
        # range of a general chain is not known
        return KnotReport.UNKNOWN


class ArcTangent(_ArcFunction):
    r"""Arctangent function \f$ \omega (\arctan(c(x)) + \varphi) \f$."""
    _priority = 8
    _ufunc = np.arctan
    _name = "atan"

    def _outer_derivative(self):
        return Quotient(Constant(self._scale),
                        Sum(Power(self._chain, 1.0, 2.0), Constant.ONE))
