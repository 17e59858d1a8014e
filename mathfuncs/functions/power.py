r"""@package mathfuncs.functions.power

Powers \f$ w\, c(x)^p \f$ of the variable or of a chain function.

With the default weight and exponent, `Power()` is the identity function
\f$ x \f$. Polynomials are built as Sum objects of Power terms.


@b Examples

```
    f = Power(2, 3)                 # 2x³
    g = Power(Sine(), 1, 2)         # (sin(x))²
    f.derivative()                  # 6x²
    Product(f, Power(4, -1)).simplify()   # 8x²
```
"""

import numpy as np

from ..numutils import ieee, is_integer_value
from .basics import Constant
from .common import _sympy_number
from .composite import Product
from .knots import KnotReport, _undefined_knot_info
from .mathfunction import sort_functions
from .printing import print_coefficient, print_value, superscript
from .unary import UnaryFunction, _split_chain


__all__ = [
    "Power",
]


class Power(UnaryFunction):
    r"""Power function \f$ w\, c(x)^p \f$ with weight `w` and exponent `p`."""
    _priority = 9

    def __init__(self, *args, chain=None):
        r"""Create a power function.

        The accepted positional forms are
        ``Power()``, ``Power(exponent)``, ``Power(weight, exponent)`` and
        the same with a leading chain function, e.g.
        ``Power(chain, weight, exponent)``.

        @param chain
            Inner function (`None` for the identity). Can also be given as
            first positional argument.

        @b Notes

        A power with weight zero is stored with exponent `1`.
        """
        chain, args = _split_chain(args, chain)
        if len(args) == 0:
            weight, exponent = 1.0, 1.0
        elif len(args) == 1:
            weight, exponent = 1.0, args[0]
        elif len(args) == 2:
            weight, exponent = args
        else:
            raise TypeError("Power takes at most a weight and an exponent "
                            "(%d numbers given)." % len(args))
        super().__init__(chain, weight)
        self._exponent = 1.0 if self._scale == 0.0 else float(exponent)

    @property
    def weight(self):
        r"""Leading coefficient."""
        return self._scale

    @property
    def exponent(self):
        r"""Exponent of the chain (or variable)."""
        return self._exponent

    def _params(self):
        return (self._exponent,)

    def _rebuild(self, chain, scale):
        return Power(chain, scale, self._exponent)

    def _is_identity(self):
        return (self._chain is None and self._scale == 1.0
                and self._exponent == 1.0)

    def _apply(self, y):
        if self._exponent == 0.0:
            return self._scale
        if self._exponent == 1.0:
            return self._scale * y
        return self._scale * ieee(np.power, y, self._exponent)

    def _outer_derivative(self):
        if self._exponent == 0.0:
            return Constant.ZERO
        if self._exponent == 1.0:
            return Constant(self._scale)
        return Power(self._chain, self._scale * self._exponent,
                     self._exponent - 1.0)

    def _simplify_local(self):
        if self._exponent == 0.0:
            return Constant(self._scale).simplify()
        if self._exponent == 1.0 and self._chain is not None:
            return self._chain.scale_by(self._scale).simplify()
        return self

    def merge_multiply(self, other):
        r"""Multiply two powers.

        Equal chains lead to added exponents. Different chains with the same
        exponent are combined into a power of the product of the chains.
        """
        if not isinstance(other, Power):
            return None
        if self._chain == other.chain:
            return Power(self._chain, self._scale * other.weight,
                         self._exponent + other.exponent)
        if self._exponent == other.exponent:
            chains = [Power() if c is None else c
                      for c in (self._chain, other.chain)]
            return Power(Product(*sort_functions(chains)),
                         self._scale * other.weight, self._exponent)
        return None

    def merge_divide(self, other):
        r"""Divide two powers of the same chain by subtracting exponents."""
        if not isinstance(other, Power) or other.weight == 0.0:
            return None
        if self._chain != other.chain:
            return None
        return Power(self._chain, self._scale / other.weight,
                     self._exponent - other.exponent)

    def _own_knot_info(self, interval):
        p = self._exponent
        if is_integer_value(p) and p >= 0:
            return KnotReport.NONE, []
        if not is_integer_value(p) and interval.low < 0:
            return _undefined_knot_info(interval)
        if p < 0 and interval.covers(0.0):
            return KnotReport.KNOWN_FINITE, [0.0]
        return KnotReport.NONE, []

    def _chained_knot_report(self, interval):
        p = self._exponent
        if is_integer_value(p) and p >= 0:
            return self._chain.get_knot_report(interval)
        return KnotReport.UNKNOWN

    def _sympy_outer(self, y):
        return _sympy_number(self._scale) * y**_sympy_number(self._exponent)

    def __str__(self):
        if self._scale == 0.0:
            return "0"
        if self._exponent == 0.0:
            return print_value(self._scale)
        text = print_coefficient(self._scale) + self._chain_str()
        if self._exponent != 1.0:
            text += superscript(print_value(self._exponent))
        return text
