r"""@package mathfuncs.functions.common

Utils used by multiple modules in mathfuncs.functions.
"""

import sympy as sp

from ..numutils import is_integer_value


__all__ = [
    "TypeMismatchError",
    "UnsupportedOperationError",
]


class TypeMismatchError(TypeError):
    r"""Raised when two functions of different kinds are compared directly.

    Functions of different kinds are ordered by their sort priority. Only
    functions of the same kind can be compared by their parameters.
    """
    pass


class UnsupportedOperationError(Exception):
    r"""Raised when an operation has no meaningful result for the arguments.

    For example, the knots of a function on an interval can only be listed if
    there are finitely many of them and they are known.
    """
    pass


def _cmp(a, b):
    r"""Three-way comparison of two numbers returning -1, 0 or 1."""
    return (a > b) - (a < b)


def _cmp_sequences(a, b):
    r"""Lexicographic three-way comparison of two number sequences."""
    for x, y in zip(a, b):
        c = _cmp(x, y)
        if c:
            return c
    return _cmp(len(a), len(b))


def _compare_chains(a, b):
    r"""Compare two (optional) chain functions.

    A missing chain represents the identity `x` and sorts before any actual
    chain function.
    """
    if a is None:
        return 0 if b is None else -1
    if b is None:
        return 1
    return a.compare_to(b)


def _check_same_type(obj, other):
    r"""Raise a TypeMismatchError unless both objects are of the same class."""
    if type(obj) is not type(other):
        raise TypeMismatchError(
            "Cannot compare %s with %s."
            % (type(obj).__name__, type(other).__name__)
        )


def _sympy_number(value):
    r"""Convert a float to a SymPy number, keeping integral values exact."""
    if is_integer_value(value):
        return sp.Integer(int(value))
    return sp.Float(value)
