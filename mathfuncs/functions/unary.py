r"""@package mathfuncs.functions.unary

Base class of the scaled standard functions with an optional inner function.

Each such function has the form \f$ s\, k(c(x)) \f$, where \f$ s \f$ is the
leading scale, \f$ k \f$ is a standard function with a few parameters (the
exponent of a power, the frequency and phase of a sine, ...) and \f$ c \f$ is
the optional 'chain' function. A missing chain stands for the identity
\f$ c(x) = x \f$.

Most of the algebra (scaling, simplification of the chain, merging of like
terms, ordering and the chain rule) is the same for all of these kinds and
is implemented here. Subclasses provide the base function, its derivative,
its parameters and its knots.
"""

from abc import abstractmethod

from .basics import Constant, Nan
from .common import _cmp, _cmp_sequences, _compare_chains, _check_same_type
from .composite import Product
from .knots import KnotReport
from .mathfunction import MathFunction


__all__ = [
    "UnaryFunction",
]


def _split_chain(args, chain):
    r"""Separate an optional leading chain function from numeric arguments.

    @return A pair ``(chain, args)`` with the remaining numeric arguments.
    """
    if args and (args[0] is None or isinstance(args[0], MathFunction)):
        if chain is not None:
            raise TypeError("The chain function was given twice.")
        return args[0], args[1:]
    return chain, args


def _fill_params(cls, args, defaults):
    r"""Complete positional numeric arguments with their defaults."""
    if len(args) > len(defaults):
        raise TypeError("%s takes at most %d numbers (%d given)."
                        % (cls.__name__, len(defaults), len(args)))
    return tuple(args) + tuple(defaults[len(args):])


class UnaryFunction(MathFunction):
    r"""Scaled standard function of an optional chain function.

    The methods a child has to override are:
        * _params() returning the kind specific parameters as a tuple
        * _rebuild() creating a function with other chain/scale but the same
          parameters
        * _apply() evaluating the function for a given chain value
        * _outer_derivative() returning \f$ s\, k'(c(x)) \f$
        * _sympy_outer() converting to SymPy given the chain expression
        * __str__()
    """

    def __init__(self, chain, scale):
        r"""Base class init for scaled standard functions.

        @param chain
            Inner function or `None` for the identity.
        @param scale
            Leading coefficient.
        """
        if chain is not None and not isinstance(chain, MathFunction):
            raise TypeError("Chain must be a function, got %r." % (chain,))
        self._chain = chain
        self._scale = float(scale)

    @property
    def chain(self):
        r"""Inner function (`None` for the identity)."""
        return self._chain

    def get_scale(self):
        return self._scale

    def with_scale(self, scale):
        if scale == self._scale:
            return self
        return self._rebuild(self._chain, scale)

    @abstractmethod
    def _params(self):
        pass

    @abstractmethod
    def _rebuild(self, chain, scale):
        pass

    @abstractmethod
    def _apply(self, y):
        pass

    @abstractmethod
    def _outer_derivative(self):
        pass

    @abstractmethod
    def _sympy_outer(self, y):
        pass

    def evaluate(self, x):
        if self._scale == 0.0:
            return 0.0
        y = x if self._chain is None else self._chain.evaluate(x)
        return self._apply(y)

    def derivative(self):
        r"""Apply the chain rule to the outer derivative."""
        if self._scale == 0.0:
            return Constant.ZERO
        outer = self._outer_derivative()
        if self._chain is None:
            return outer.simplify()
        return Product(outer, self._chain.derivative()).simplify()

    def scale_by(self, factor):
        if factor == 0.0:
            return Constant.ZERO
        if factor == 1.0:
            return self
        return self._rebuild(self._chain, self._scale * factor)

    def simplify(self):
        r"""Simplify the chain and apply the rules common to all kinds.

        A zero scale gives `Constant.ZERO`, a constant chain gives the
        resulting constant and an identity chain is dropped. Kind specific
        rules are implemented in _simplify_local().
        """
        if self._scale == 0.0:
            return Constant.ZERO
        chain = self._chain
        if chain is not None:
            chain = chain.simplify()
            if chain is Nan.NAN:
                return Nan.NAN
            if isinstance(chain, Constant):
                return Constant(self._apply(chain.value)).simplify()
            if chain._is_identity():
                chain = None
        result = self if chain is self._chain else self._rebuild(chain, self._scale)
        return result._simplify_local()

    def _simplify_local(self):
        r"""Kind specific simplification after the common rules."""
        return self

    def sort_priority(self):
        return self._priority

    def compare_within_sub_type(self, other):
        r"""Compare chains, then parameters, then scales."""
        _check_same_type(self, other)
        c = _compare_chains(self._chain, other.chain)
        if c:
            return c
        c = _cmp_sequences(self._params(), other._params())
        if c:
            return c
        return _cmp(self._scale, other.get_scale())

    def merge_add(self, other):
        r"""Add the scales of two functions differing only in their scale."""
        if type(other) is not type(self):
            return None
        if self._params() != other._params() or self._chain != other.chain:
            return None
        return self._rebuild(self._chain, self._scale + other.get_scale())

    def _knot_report(self, interval):
        if self._scale == 0.0:
            return KnotReport.NONE
        if self._chain is None:
            return self._own_knot_info(interval)[0]
        return self._chained_knot_report(interval)

    def _knots(self, interval):
        if self._scale == 0.0:
            return []
        if self._chain is None:
            return self._own_knot_info(interval)[1]
        return self._chain._reported_knots(interval)

    def _own_knot_info(self, interval):
        r"""Knot report and positions of the function without chain."""
        # pylint: disable=unused-argument
        return KnotReport.NONE, []

    def _chained_knot_report(self, interval):
        r"""Knot report with chain; by default the chain's report."""
        return self._chain.get_knot_report(interval)

    def _sympy(self, x):
        y = x if self._chain is None else self._chain._sympy(x)
        return self._sympy_outer(y)

    def _sub_functions(self):
        if self._chain is None:
            return []
        return [("chain", self._chain)]

    def _chain_str(self, parens=True):
        r"""Text of the chain, `x` for the identity."""
        if self._chain is None:
            return "x"
        if parens:
            return "(%s)" % self._chain
        return str(self._chain)

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return (self._scale == other._scale
                and self._params() == other._params()
                and self._chain == other._chain)

    def __hash__(self):
        return hash((type(self), self._scale, self._params(), self._chain))
