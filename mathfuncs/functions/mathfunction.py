r"""@package mathfuncs.functions.mathfunction

Base of the function algebra.

The idea is to have a notion of a real function of one variable which is
'self aware': it knows how to evaluate itself, how to produce its exact
derivative as another function object, how to simplify itself, and where it
is not smooth. Composite functions are built out of more basic ones and
delegate every query to their children.

All function objects are immutable. Operations like derivative(), scale_by()
and simplify() produce new objects (or return existing ones unchanged) and
share unchanged sub-functions with their input.

As a simple example, let's create \f$ f(x) = 2 x^3 + \sin(x) \f$ and
differentiate it:

~~~.py
f = Sum(Power(2, 3), Sine())
df = f.derivative()
print(df)           # Σ(cos(x), 6x²)
print(df(0.5))      # 2.377...
~~~

Something similar could be achieved using SymPy symbolic expressions, but
here we have full control over the rewrite rules used during
simplification, which keeps the canonical form of a function predictable.
The method MathFunction.to_sympy() converts a function to SymPy for cross
checks.
"""

from abc import ABCMeta, abstractmethod
import functools
import logging
import numbers
import os
import os.path as op

import numpy as np
import sympy as sp

from .common import _cmp, UnsupportedOperationError
from .interval import Interval
from .knots import KnotReport


__all__ = [
    "MathFunction",
    "ExpressionWarning",
    "compare_functions",
    "sort_functions",
    "save_to_file",
    "load_from_file",
]


logger = logging.getLogger(__name__)


def _npy_filename(filename):
    r"""Expand `~` and append the ``'.npy'`` extension if missing."""
    filename = op.expanduser(filename)
    if not filename.endswith('.npy'):
        filename += '.npy'
    return filename


def save_to_file(filename, function, overwrite=False, verbose=True):
    r"""Store a function tree in a NumPy ``.npy`` file.

    The tree is pickled as the only element of an object array. Missing
    parent directories are created. Canonical instances (`Constant.ZERO`,
    `Constant.ONE`, `Nan.NAN`) are stored by name, so that load_from_file()
    restores them as the very same objects.

    @param filename
        The file name to store the function in. An extension ``'.npy'`` will
        be added if not already there.
    @param function
        The MathFunction to store. Any other object raises a `TypeError`.
    @param overwrite
        Whether to overwrite an existing file with the same name. If `False`
        (default) and such a file exists, a `RuntimeError` is raised.
    @param verbose
        Whether to log (at INFO level) when the file was written. Default is
        `True`.
    """
    if not isinstance(function, MathFunction):
        raise TypeError("Only functions can be saved, got %r." % (function,))
    filename = _npy_filename(filename)
    os.makedirs(op.normpath(op.dirname(filename)), exist_ok=True)
    if op.exists(filename) and not overwrite:
        raise RuntimeError("File already exists: %s" % filename)
    container = np.empty(1, dtype=object)
    container[0] = function
    np.save(filename, container)
    if verbose:
        logger.info("%s [%s] saved to: %s", function, type(function).__name__,
                    filename)


def load_from_file(filename):
    r"""Load a function tree stored by save_to_file().

    A `TypeError` is raised if the file does not contain exactly one
    MathFunction.
    """
    filename = op.expanduser(filename)
    container = np.load(filename, allow_pickle=True)
    if container.shape != (1,) or not isinstance(container[0], MathFunction):
        raise TypeError("File %s does not contain a function." % filename)
    function = container[0]
    logger.debug("Loaded %s [%s] from: %s", function, type(function).__name__,
                 filename)
    return function


class ExpressionWarning(UserWarning):
    """Warning issued when functions might not evaluate as expected."""
    pass


def compare_functions(a, b):
    r"""Three-way comparison of two functions in the global total order."""
    return a.compare_to(b)


def sort_functions(functions):
    r"""Return a list of the functions sorted by the global total order."""
    return sorted(functions, key=functools.cmp_to_key(compare_functions))


def _as_interval(interval):
    r"""Convert a ``(low, high)`` pair to a closed Interval if necessary."""
    if isinstance(interval, Interval):
        return interval
    low, high = interval
    return Interval(low, True, high, True)


def _ensure_function(obj, what="argument"):
    r"""Ensure an object is a function, converting numbers if necessary.

    Numbers are converted to Constant objects. `None` and any other objects
    raise a `TypeError`.
    """
    if obj is None:
        raise TypeError("The %s must not be None." % what)
    if isinstance(obj, MathFunction):
        return obj
    if isinstance(obj, numbers.Real):
        from .basics import Constant
        return Constant(obj)
    raise TypeError("Cannot use %r as %s (not a function)." % (obj, what))


@functools.total_ordering
class MathFunction(metaclass=ABCMeta):
    """Parent class for all functions of the algebra.

    Function objects are immutable. Instances can be evaluated by calling
    them (or using evaluate()), and support building their derivative,
    simplification, scaling, merging with other functions of the same kind,
    ordering, and analysis of their knots.

    The methods a child has to override are:
        * evaluate()
        * derivative()
        * scale_by()
        * sort_priority() and compare_within_sub_type()
        * _knot_report() (and _knots() if there can be knots)
        * _sympy()
        * __str__(), __eq__() and __hash__()

    Children may additionally implement simplify(), the merge_*() methods,
    get_scale()/with_scale() and _sub_functions().
    """

    def __call__(self, x):
        r"""Evaluate the function at a point x."""
        return self.evaluate(x)

    @abstractmethod
    def evaluate(self, x):
        r"""Evaluate the function at a point x, returning a float."""
        pass

    @abstractmethod
    def derivative(self):
        r"""Return the derivative as a new function object."""
        pass

    @abstractmethod
    def scale_by(self, factor):
        r"""Return this function multiplied by a number.

        Scaling by `0` returns `Constant.ZERO` and scaling by `1` returns this
        object itself.
        """
        pass

    def simplify(self):
        r"""Return an equivalent function that is not more complex.

        The default implementation returns this object itself.
        """
        return self

    def get_scale(self):
        r"""Leading coefficient of this function (`1` if there is none)."""
        return 1.0

    def with_scale(self, scale):
        r"""Return this function with its leading coefficient replaced."""
        current = self.get_scale()
        if current == scale:
            return self
        if current == 0.0:
            raise ValueError("Cannot rescale a function with zero scale.")
        return self.scale_by(scale / current)

    @abstractmethod
    def sort_priority(self):
        r"""Integer rank of this kind of function in the global total order."""
        pass

    @abstractmethod
    def compare_within_sub_type(self, other):
        r"""Three-way comparison with a function of the same kind.

        Returns -1, 0 or 1. Raises a `TypeMismatchError` if `other` is of a
        different kind.
        """
        pass

    def compare_to(self, other):
        r"""Three-way comparison in the global total order of all functions."""
        c = _cmp(self.sort_priority(), other.sort_priority())
        if c:
            return c
        return self.compare_within_sub_type(other)

    def __lt__(self, other):
        if not isinstance(other, MathFunction):
            return NotImplemented
        return self.compare_to(other) < 0

    def merge_add(self, other):
        r"""Try to represent the sum of this and `other` as one function.

        Returns `None` if there is no such representation.
        """
        # pylint: disable=unused-argument
        return None

    def merge_multiply(self, other):
        r"""Try to represent the product of this and `other` as one function.

        Returns `None` if there is no such representation.
        """
        # pylint: disable=unused-argument
        return None

    def merge_divide(self, other):
        r"""Try to represent this function divided by `other` as one function.

        Returns `None` if there is no such representation.
        """
        # pylint: disable=unused-argument
        return None

    def get_knot_report(self, interval):
        r"""Classify the knots of this function on an interval.

        @param interval
            Interval to analyze. A pair ``(low, high)`` is interpreted as the
            closed interval ``[low, high]``.

        @return A KnotReport value.
        """
        return self._knot_report(_as_interval(interval))

    def get_knots(self, interval):
        r"""Return the sorted positions of the knots on an interval.

        Raises an UnsupportedOperationError if the knots are not known or
        there are infinitely many of them.
        """
        interval = _as_interval(interval)
        report = self._knot_report(interval)
        if not report.is_finite():
            raise UnsupportedOperationError(
                "Cannot list the knots of %s on %s (%s)."
                % (self, interval.bounds_str(), report.name)
            )
        if report is KnotReport.NONE:
            return ()
        return tuple(sorted(set(self._knots(interval))))

    @abstractmethod
    def _knot_report(self, interval):
        r"""Implement get_knot_report() for an Interval argument."""
        pass

    def _knots(self, interval):
        r"""Generate the knot positions if _knot_report() is finite."""
        # pylint: disable=unused-argument
        return ()

    def _reported_knots(self, interval):
        r"""Knot positions, or nothing if the report on `interval` is NONE.

        Composite functions collect the knots of their children through this
        method, so that a child without knots never contributes any.
        """
        if self._knot_report(interval) is KnotReport.NONE:
            return ()
        return self._knots(interval)

    def to_sympy(self, x=None):
        r"""Convert this function to a SymPy expression.

        @param x
            SymPy symbol to use as variable. By default, a new symbol ``x`` is
            created.
        """
        if x is None:
            x = sp.Symbol('x')
        return self._sympy(x)

    @abstractmethod
    def _sympy(self, x):
        r"""Implement to_sympy() for a given symbol."""
        pass

    @property
    def domain(self):
        r"""Pair ``(low, high)`` outside of which the function is undefined.

        This is `None` for functions defined on the whole real line (which
        may still be NaN at some points).
        """
        return None

    def evaluator(self):
        r"""Return a FunctionEvaluator caching the derivatives of this function."""
        from .evaluators import FunctionEvaluator
        return FunctionEvaluator(self)

    def _is_identity(self):
        r"""Whether this is the plain identity function `x`."""
        return False

    def _sub_functions(self):
        r"""List of ``(key, function)`` pairs of direct sub-functions."""
        return []

    def traverse_tree(self, include_root=False, parents=None):
        r"""Generator that walks through a complete function tree.

        In each iteration, the returned values represent the current node's
        parents (as a list from root to immediate parent), its key under which
        it is stored in its parent, and the node itself.

        Args:
            include_root: Whether to include the root as first item. Default
                is `False`.
            parents: Optional list of parents of the root. Normally only used
                internally for the recursion.

        @b Examples
        \code
            for parents, name, func in root_func.traverse_tree():
                print("-"*len(parents), name)
        \endcode

        """
        if parents is None:
            parents = []
        if include_root:
            yield parents, "", self
        parents = parents + [self]
        for name, func in self._sub_functions():
            yield parents, name, func
            for node in func.traverse_tree(include_root=False, parents=parents):
                yield node

    def print_tree(self, root_name='root'):
        r"""Print the whole function tree.

        Each function's key under which it is stored in its parent will be
        shown as well as its text and the class name.
        """
        def _p(func, name, parents=()):
            print("%s%s: %s <%s>" % (
                ". " * len(parents), name, func, type(func).__name__
            ))
        _p(self, root_name)
        for parents, name, func in self.traverse_tree():
            _p(func, name, parents)

    def save(self, filename, overwrite=False, verbose=True):
        r"""Save the function object to disk.

        Args:
            filename: The file name to store the data in. An extension
                ``'.npy'`` will be added if not already there.
            overwrite: Whether to overwrite an existing file with the same
                name. If `False` (default) and such a file exists, a
                `RuntimeError` is raised.
            verbose: Whether to log when the file was written. Default is
                `True`.
        """
        save_to_file(filename, self, overwrite=overwrite, verbose=verbose)

    @classmethod
    def load(cls, filename):
        r"""Load a function saved by save().

        Called on a subclass, a `TypeError` is raised if the stored function
        is of a different kind.
        """
        function = load_from_file(filename)
        if not isinstance(function, cls):
            raise TypeError("Stored function %s is not a %s."
                            % (function, cls.__name__))
        return function

    @abstractmethod
    def __str__(self):
        pass

    def __repr__(self):
        r"""Return a string representing the whole function tree."""
        cls = self.__class__.__name__
        return "<%s(%s)>" % (cls, self)
