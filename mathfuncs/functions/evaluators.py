r"""@package mathfuncs.functions.evaluators

Evaluators computing values and derivatives of MathFunction objects.

An evaluator is a light-weight callable object created for one function. It
builds the derivative trees of the function lazily when they are first
requested and keeps them for later calls, so that repeatedly evaluating e.g.
the second derivative does not repeat the symbolic differentiation.
"""

import logging
import math

import numpy as np

from ..numutils import NumericalError
from .basics import Constant


__all__ = [
    "FunctionEvaluator",
]


logger = logging.getLogger(__name__)


class FunctionEvaluator():
    r"""Evaluator for a function and its derivatives.

    Evaluators are callable, which evaluates the function itself. The n'th
    derivative at a point `x` is computed by `diff(x, n)`, and `function(n)`
    returns the (simplified) n'th derivative as a function object.

    @b Examples

    ```
        ev = Sine().evaluator()
        ev(0.0)             # 0.0
        ev.diff(0.0)        # 1.0
        ev.diff(0.0, n=2)   # -0.0
        ev.function(3)      # <Sine(-cos(x))>
    ```
    """

    def __init__(self, function, allow_nonfinite=True):
        r"""Create an evaluator for a function.

        @param function
            The MathFunction to evaluate.
        @param allow_nonfinite
            If `False`, a NumericalError is raised whenever a computed value
            is NaN or infinite. Default is `True`.
        """
        ## Whether to accept NaN and infinite results.
        self.allow_nonfinite = allow_nonfinite
        self._derivs = [function]

    @property
    def domain(self):
        r"""Domain of the function (see MathFunction.domain)."""
        return self._derivs[0].domain

    def function(self, n=0):
        r"""Return the n'th derivative as a function object."""
        if n < 0:
            raise ValueError("Invalid derivative order: %s" % n)
        while len(self._derivs) <= n:
            deriv = self._derivs[-1].derivative().simplify()
            logger.debug("Derivative %d: %s", len(self._derivs), deriv)
            self._derivs.append(deriv)
        return self._derivs[n]

    def is_zero_function(self, n=0):
        r"""Return whether the n'th derivative is identically zero."""
        return self.function(n) is Constant.ZERO

    def __call__(self, x):
        r"""Evaluate the function at a point x."""
        return self.diff(x, n=0)

    def diff(self, x, n=1):
        r"""Evaluate the n'th derivative of the function at a point x."""
        return self._check(self.function(n).evaluate(x), x, n)

    def sample(self, xs, n=0):
        r"""Evaluate the n'th derivative at each point of a sequence.

        @return NumPy array of the values.
        """
        f = self.function(n)
        values = np.array([f.evaluate(float(x)) for x in xs], dtype=float)
        if not self.allow_nonfinite and not np.all(np.isfinite(values)):
            bad = np.asarray(xs, dtype=float)[~np.isfinite(values)]
            raise NumericalError("Non-finite values of derivative %d at: %s"
                                 % (n, bad))
        return values

    def _check(self, value, x, n):
        if not self.allow_nonfinite and not math.isfinite(value):
            raise NumericalError("Derivative %d is not finite at x=%r: %r"
                                 % (n, x, value))
        return value
