r"""@package testutils

Utilities to add more features to `unittest` classes.

This module provides DpkTestCase, a subclass of `unittest.TestCase` that
obeys the global configuration settings in TestSettings (set by the tests.py
runner script) and adds assertions for comparing lists of numbers and for
checking symbolic derivatives of function objects against finite
differences.

The decorator slowtest marks tests which are skipped on normal runs. The
runner must set `TestSettings.skipslow` to `False` for them to be run.
"""

import sys
import functools
import math
import unittest
import time


__all__ = [
    "DpkTestCase",
    "TestSettings",
    "slowtest",
]


def slowtest(func):
    """Decorator for skipping a test if TestSettings.skipslow is true."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        if TestSettings.skipslow:
            raise unittest.SkipTest("skipping slow tests")
        return func(*args, **kwargs)
    return wrapper


class DpkTestCase(unittest.TestCase):
    """Tweaked baseclass for unit tests.

    By deriving from this class, you:
        * Get timed individual tests (needs `verbosity=2`) if
          TestSettings.timing is true.
        * Can implement a hook (failureHook()) called after a test has failed
          (or errored) and after tearDown() has run.
        * Get the assertions assertIsType(), assertListAlmostEqual() and
          assertDerivativeMatches().
    """

    def run(self, result=None):
        self.__result = result
        self.__counts = self.__problem_counts()
        return super().run(result)

    def __problem_counts(self):
        r"""Number of errors, failures and skips recorded so far."""
        # results of other runners (e.g. pytest) may lack these lists
        return tuple(len(getattr(self.__result, name, ()))
                     for name in ("errors", "failures", "skipped"))

    def __lastTestOK(self):
        errors, failures, _ = self.__problem_counts()
        return (errors, failures) == self.__counts[:2]

    def __shouldPrintTiming(self):
        if not TestSettings.timing or not self.__lastTestOK():
            return False
        if self.__problem_counts()[2] > self.__counts[2]:
            return False
        result = self.__result
        return not getattr(result, "dots", False) and getattr(result, "showAll", True)

    def setUp(self):
        self.startTime = time.perf_counter()
        self.addCleanup(self.__afterTest)

    def __afterTest(self):
        if not self.__lastTestOK():
            self.failureHook(self.__result)
        if self.__shouldPrintTiming():
            duration = time.perf_counter() - self.startTime
            print("(%.4f seconds) ... " % duration, file=sys.stderr, end='')

    def failureHook(self, result):
        r"""Custom function called just after a fail/error occurred.

        Subclasses may implement this function to e.g. print the function
        trees involved in the failing test.
        """
        pass

    def assertIsType(self, obj, cls):
        r"""Assert that an object is exactly of a certain type."""
        self.assertIs(type(obj), cls)

    def assertListAlmostEqual(self, a, b, places=None, delta=None):
        r"""Assert that two iterables contain (almost) the same values."""
        if places is not None and delta is not None:
            raise TypeError("Cannot use delta and places at the same time")
        if places is None and delta is None:
            places = 7
        a, b = list(a), list(b)
        if len(a) != len(b):
            raise self.failureException(
                "Lists have different lengths (%d != %d)" % (len(a), len(b))
            )
        fails = []
        for i, (x, y) in enumerate(zip(a, b)):
            if x == y:
                continue
            if delta is not None:
                if abs(x-y) > delta:
                    fails.append(i)
            elif round(abs(x-y), places) != 0:
                fails.append(i)
        if fails:
            maxN = 9
            msg = "%d elements differ.\n" % len(fails)
            if len(fails) <= maxN:
                msg += "Differing elements:\n"
            else:
                msg += "First few differing elements:\n"
            msg += "\n".join(
                "  [{i}] {a} != {b}    (difference: {d})".format(
                    i=i, a=a[i], b=b[i], d=b[i]-a[i]
                )
                for i in fails[:maxN]
            )
            raise self.failureException(msg)

    def assertDerivativeMatches(self, func, points, h=1e-6, rel_tol=1e-5,
                                abs_tol=1e-6):
        r"""Compare a function's derivative with central finite differences.

        @param func
            MathFunction object to test.
        @param points
            Points at which to compare. They should lie inside the domain of
            `func` at a distance larger than `h` from any knot.
        @param h
            Step size of the finite difference.
        @param rel_tol,abs_tol
            Tolerances of the comparison.
        """
        deriv = func.derivative()
        for x in points:
            expected = (func(x+h) - func(x-h)) / (2*h)
            actual = deriv(x)
            if not math.isclose(actual, expected, rel_tol=rel_tol, abs_tol=abs_tol):
                raise self.failureException(
                    "Derivative %s of %s at x=%r is %r, finite difference "
                    "gives %r" % (deriv, func, x, actual, expected)
                )


class TestSettings():
    """Global settings for tests."""
    ## Stop test run on first fail/error.
    failfast = False
    ## Whether output is buffered.\ Just information, cannot be used to toggle output buffering.
    buffering = False
    ## Whether the timing for each test case should be printed.
    timing = False
    ## Control whether tests marked as slowtest should be skipped.
    skipslow = True
