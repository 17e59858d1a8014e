r"""@package mathfuncs.functions.composite

Sums, products and quotients of functions.

Sum and Product take any number of children, Quotient exactly two. Creating
them does not change the children in any way. Only simplify() brings them
into canonical form:

    1. all children are simplified and nested sums/products are flattened
    2. identity elements are dropped (`0` in sums, `1` in products)
    3. absorbing elements short-circuit (`0` in products, NaN everywhere)
    4. children are sorted by the global total order of functions
    5. neighbouring children are merged (like terms are collected), until
       nothing can be merged any more
    6. a single remaining child is returned directly

Products furthermore collect all constant factors and the scales of all
factors into one coefficient, which is applied to the first factor.
"""

import logging
import math
import warnings

import numpy as np
import sympy as sp

from ..numutils import ieee
from .basics import Constant, Nan
from .common import _cmp, _check_same_type
from .knots import KnotReport, _undefined_knot_info
from .mathfunction import MathFunction, ExpressionWarning
from .mathfunction import _ensure_function, sort_functions


__all__ = [
    "Sum",
    "Product",
    "Quotient",
]


logger = logging.getLogger(__name__)


def _merge_adjacent(items, merge):
    r"""Sort the items and merge neighbours until nothing merges any more.

    @param items
        List of functions.
    @param merge
        Callable taking two functions and returning their merged function or
        `None`. Merged results are simplified before being put back.
    """
    items = sort_functions(items)
    changed = True
    while changed:
        changed = False
        i = 0
        while i < len(items) - 1:
            merged = merge(items[i], items[i+1])
            if merged is None:
                i += 1
                continue
            logger.debug("Merged %s and %s into %s", items[i], items[i+1], merged)
            items[i:i+2] = [merged.simplify()]
            changed = True
        if changed:
            items = sort_functions(items)
    return items


def _unit(func):
    r"""Return the function with scale one (unless its scale is zero)."""
    if func.get_scale() in (0.0, 1.0):
        return func
    return func.with_scale(1.0)


def _same_children(a, b):
    r"""Whether two sequences contain the same (or equal) functions."""
    return len(a) == len(b) and all(x is y or x == y for x, y in zip(a, b))


class Sum(MathFunction):
    r"""Sum of any (positive) number of terms."""

    def __init__(self, *terms):
        r"""Create a sum of the given terms.

        Numbers are converted to Constant terms. At least one term is needed,
        otherwise a `ValueError` is raised.
        """
        if not terms:
            raise ValueError("A sum needs at least one term (no terms given).")
        self._terms = tuple(_ensure_function(t, "term") for t in terms)

    @property
    def terms(self):
        r"""Tuple of the terms in their current order."""
        return self._terms

    def evaluate(self, x):
        result = 0.0
        for term in self._terms:
            result += term.evaluate(x)
        return result

    def derivative(self):
        return Sum(*[t.derivative() for t in self._terms]).simplify()

    def scale_by(self, factor):
        if factor == 0.0:
            return Constant.ZERO
        if factor == 1.0:
            return self
        return Sum(*[t.scale_by(factor) for t in self._terms])

    def simplify(self):
        terms = []
        for term in self._terms:
            term = term.simplify()
            if isinstance(term, Sum):
                terms.extend(term.terms)
            else:
                terms.append(term)
        if Nan.NAN in terms:
            return Nan.NAN
        terms = [t for t in terms if t is not Constant.ZERO]
        terms = _merge_adjacent(terms, lambda a, b: a.merge_add(b))
        if Nan.NAN in terms:
            return Nan.NAN
        terms = [t for t in terms if t is not Constant.ZERO]
        if not terms:
            return Constant.ZERO
        if len(terms) == 1:
            return terms[0]
        if _same_children(terms, self._terms):
            return self
        return Sum(*terms)

    def sort_priority(self):
        return 101

    def compare_within_sub_type(self, other):
        r"""Shorter sums first, then term by term."""
        _check_same_type(self, other)
        c = _cmp(len(self._terms), len(other.terms))
        if c:
            return c
        for a, b in zip(self._terms, other.terms):
            c = a.compare_to(b)
            if c:
                return c
        return 0

    def _knot_report(self, interval):
        return KnotReport.combine(t.get_knot_report(interval) for t in self._terms)

    def _knots(self, interval):
        for term in self._terms:
            yield from term._reported_knots(interval)

    def _sympy(self, x):
        return sp.Add(*[t._sympy(x) for t in self._terms])

    def _sub_functions(self):
        return [("term%d" % i, t) for i, t in enumerate(self._terms)]

    def __eq__(self, other):
        if not isinstance(other, Sum):
            return NotImplemented
        return self._terms == other.terms

    def __hash__(self):
        return hash((Sum, self._terms))

    def __str__(self):
        return "Σ(%s)" % ", ".join(str(t) for t in self._terms)


class Product(MathFunction):
    r"""Product of any (positive) number of factors."""

    def __init__(self, *factors):
        r"""Create a product of the given factors.

        Numbers are converted to Constant factors. At least one factor is
        needed, otherwise a `ValueError` is raised.
        """
        if not factors:
            raise ValueError("A product needs at least one factor (no terms given).")
        self._factors = tuple(_ensure_function(f, "factor") for f in factors)

    @property
    def factors(self):
        r"""Tuple of the factors in their current order."""
        return self._factors

    def evaluate(self, x):
        result = 1.0
        for factor in self._factors:
            result *= factor.evaluate(x)
        return result

    def derivative(self):
        r"""Generalized product rule."""
        terms = []
        for i, factor in enumerate(self._factors):
            df = factor.derivative()
            if df is Constant.ZERO:
                continue
            terms.append(Product(*(self._factors[:i] + (df,) + self._factors[i+1:])))
        if not terms:
            return Constant.ZERO
        return Sum(*terms).simplify()

    def scale_by(self, factor):
        if factor == 0.0:
            return Constant.ZERO
        if factor == 1.0:
            return self
        return Product(self._factors[0].scale_by(factor), *self._factors[1:])

    def simplify(self):
        factors = []
        for factor in self._factors:
            factor = factor.simplify()
            if isinstance(factor, Product):
                factors.extend(factor.factors)
            else:
                factors.append(factor)
        if Constant.ZERO in factors:
            if Nan.NAN in factors or not all(math.isfinite(f.get_scale()) for f in factors):
                warnings.warn(
                    "Zero factor in %s absorbs non-finite factors." % self,
                    ExpressionWarning
                )
            return Constant.ZERO
        if Nan.NAN in factors:
            return Nan.NAN
        coefficient, factors = self._split_coefficient(factors)
        factors = _merge_adjacent(factors, lambda a, b: a.merge_multiply(b))
        more, factors = self._split_coefficient(factors)
        coefficient *= more
        if coefficient == 0.0:
            return Constant.ZERO
        if math.isnan(coefficient) or Nan.NAN in factors:
            return Nan.NAN
        if not factors:
            return Constant(coefficient).simplify()
        if coefficient != 1.0:
            factors[0] = factors[0].scale_by(coefficient)
        if len(factors) == 1:
            return factors[0]
        if _same_children(factors, self._factors):
            return self
        return Product(*factors)

    @staticmethod
    def _split_coefficient(factors):
        r"""Separate constants and scales from the factors.

        @return A pair ``(coefficient, unit_factors)`` where `unit_factors` is
            a list of the non-constant factors, each with scale `1`.
        """
        coefficient = 1.0
        rest = []
        for factor in factors:
            if isinstance(factor, Constant):
                coefficient *= factor.value
                continue
            scale = factor.get_scale()
            if scale != 1.0:
                coefficient *= scale
                if scale != 0.0:
                    factor = factor.with_scale(1.0)
            rest.append(factor)
        return coefficient, rest

    def merge_add(self, other):
        r"""Add two products differing only in the scale of their first factor."""
        if not isinstance(other, Product) or len(other.factors) != len(self._factors):
            return None
        a, b = self._factors[0], other.factors[0]
        if self._factors[1:] != other.factors[1:] or _unit(a) != _unit(b):
            return None
        return Product(a.with_scale(a.get_scale() + b.get_scale()),
                       *self._factors[1:])

    def sort_priority(self):
        return 100

    def compare_within_sub_type(self, other):
        r"""Shorter products first, then the factors ignoring and then
        including their scales."""
        _check_same_type(self, other)
        c = _cmp(len(self._factors), len(other.factors))
        if c:
            return c
        for a, b in zip(self._factors, other.factors):
            c = _unit(a).compare_to(_unit(b))
            if c:
                return c
        for a, b in zip(self._factors, other.factors):
            c = _cmp(a.get_scale(), b.get_scale())
            if c:
                return c
        return 0

    def _knot_report(self, interval):
        return KnotReport.combine(f.get_knot_report(interval) for f in self._factors)

    def _knots(self, interval):
        for factor in self._factors:
            yield from factor._reported_knots(interval)

    def _sympy(self, x):
        return sp.Mul(*[f._sympy(x) for f in self._factors])

    def _sub_functions(self):
        return [("factor%d" % i, f) for i, f in enumerate(self._factors)]

    def __eq__(self, other):
        if not isinstance(other, Product):
            return NotImplemented
        return self._factors == other.factors

    def __hash__(self):
        return hash((Product, self._factors))

    def __str__(self):
        return "Π(%s)" % ", ".join(str(f) for f in self._factors)


class Quotient(MathFunction):
    r"""Quotient of two functions."""

    def __init__(self, numerator, denominator):
        r"""Create the quotient `numerator/denominator`.

        Numbers are converted to Constant objects. `None` raises a
        `TypeError`.
        """
        self._numerator = _ensure_function(numerator, "numerator")
        self._denominator = _ensure_function(denominator, "denominator")

    @property
    def numerator(self):
        r"""Function above the fraction bar."""
        return self._numerator

    @property
    def denominator(self):
        r"""Function below the fraction bar."""
        return self._denominator

    def evaluate(self, x):
        return ieee(np.divide, self._numerator.evaluate(x),
                    self._denominator.evaluate(x))

    def derivative(self):
        r"""Quotient rule \f$ (n'd - nd')/d^2 \f$."""
        n, d = self._numerator, self._denominator
        top = Sum(
            Product(n.derivative(), d),
            Product(n, d.derivative()).scale_by(-1.0),
        ).simplify()
        if top is Constant.ZERO:
            return Constant.ZERO
        bottom = Product(d, d).simplify()
        if bottom is Constant.ONE:
            return top
        return Quotient(top, bottom).simplify()

    def scale_by(self, factor):
        if factor == 0.0:
            return Constant.ZERO
        if factor == 1.0:
            return self
        return Quotient(self._numerator.scale_by(factor), self._denominator)

    def simplify(self):
        r"""Simplify both sides and try to divide them.

        Two constants or two powers of the same chain are divided. A zero
        numerator over a non-constant denominator gives `Constant.ZERO`. Any
        other quotient keeps its (simplified) numerator and denominator.
        """
        n = self._numerator.simplify()
        d = self._denominator.simplify()
        if n is Nan.NAN or d is Nan.NAN:
            return Nan.NAN
        merged = n.merge_divide(d)
        if merged is not None:
            return merged.simplify()
        if n is Constant.ZERO:
            return Constant.ZERO
        if n is self._numerator and d is self._denominator:
            return self
        return Quotient(n, d)

    def get_scale(self):
        return self._numerator.get_scale()

    def with_scale(self, scale):
        if scale == self.get_scale():
            return self
        return Quotient(self._numerator.with_scale(scale), self._denominator)

    def merge_add(self, other):
        r"""Add two quotients with equal denominators."""
        if not isinstance(other, Quotient) or self._denominator != other.denominator:
            return None
        return Quotient(Sum(self._numerator, other.numerator).simplify(),
                        self._denominator)

    def sort_priority(self):
        return 102

    def compare_within_sub_type(self, other):
        r"""Compare denominators, then numerators."""
        _check_same_type(self, other)
        c = self._denominator.compare_to(other.denominator)
        if c:
            return c
        return self._numerator.compare_to(other.numerator)

    def _knot_report(self, interval):
        if isinstance(self._denominator, Constant):
            if self._denominator.value == 0.0:
                return _undefined_knot_info(interval)[0]
            return self._numerator.get_knot_report(interval)
        # zeros of a general denominator cannot be located
        return KnotReport.UNKNOWN

    def _knots(self, interval):
        if self._denominator.value == 0.0:
            return _undefined_knot_info(interval)[1]
        return self._numerator._reported_knots(interval)

    def _sympy(self, x):
        return self._numerator._sympy(x) / self._denominator._sympy(x)

    def _sub_functions(self):
        return [("numerator", self._numerator),
                ("denominator", self._denominator)]

    def __eq__(self, other):
        if not isinstance(other, Quotient):
            return NotImplemented
        return (self._numerator == other.numerator
                and self._denominator == other.denominator)

    def __hash__(self):
        return hash((Quotient, self._numerator, self._denominator))

    def __str__(self):
        return "(%s)/(%s)" % (self._numerator, self._denominator)
