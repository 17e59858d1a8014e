#!/usr/bin/env python3
r"""@package mathfuncs.functions.test_concatenation

Tests of piecewise defined functions.
"""

import unittest
import sys
import math

from testutils import DpkTestCase
from .basics import Constant, Nan
from .common import UnsupportedOperationError
from .concatenation import Concatenation
from .interval import Interval
from .knots import KnotReport, Discontinuity
from .power import Power
from .trig import Sine


class TestConcatenation(DpkTestCase):
    def setUp(self):
        super().setUp()
        self.g1 = Power(2)
        self.g2 = Sine(3)
        self.f = Concatenation(
            Interval(3, True, 5, True, self.g2),
            Interval(1, True, 2, True, self.g1),
        )

    def test_construction(self):
        f = self.f
        self.assertEqual(len(f.segments), 3)
        self.assertIs(f.segments[0].payload, self.g1)
        self.assertIs(f.segments[1].payload, Nan.NAN)
        self.assertEqual(f.segments[1], Interval(2, False, 3, False, Nan.NAN))
        self.assertIs(f.segments[2].payload, self.g2)
        self.assertEqual(f.domain, (1.0, 5.0))
        self.assertEqual(f.get_domain_low(), 1.0)
        self.assertEqual(f.get_domain_high(), 5.0)
        self.assertEqual(Concatenation([Interval(0, True, 1, True, Sine())]).segments,
                         (Interval(0, True, 1, True, Sine()),))

    def test_invalid(self):
        with self.assertRaises(ValueError):
            Concatenation()
        with self.assertRaises(ValueError):
            Concatenation([])
        with self.assertRaises(ValueError):
            Concatenation(Interval(0, True, 2, True, Sine()),
                          Interval(1, True, 3, True, Sine()))
        with self.assertRaises(ValueError):
            Concatenation(Interval(0, True, 1, True, Sine()),
                          Interval(1, True, 3, True, Sine()))
        with self.assertRaises(TypeError):
            Concatenation(Interval(0, True, 1, True, 5))
        with self.assertRaises(TypeError):
            Concatenation(Interval(0, True, 1, True, Sine()), "abc")

    def test_evaluate(self):
        f = self.f
        self.assertEqual(f(1.5), self.g1(1.5))
        self.assertEqual(f(4.0), self.g2(4.0))
        self.assertEqual(f(2.0), 4.0)
        self.assertTrue(math.isnan(f(2.5)))
        self.assertTrue(math.isnan(f(math.nan)))
        with self.assertRaises(ValueError):
            f(0.5)
        with self.assertRaises(ValueError):
            f(6.0)

    def test_single_point_gap(self):
        f = Concatenation(Interval(0, True, 1, False, Constant(1)),
                          Interval(1, False, 2, True, Constant(2)))
        self.assertEqual(len(f.segments), 3)
        self.assertTrue(f.segments[1].is_single_point())
        self.assertTrue(math.isnan(f(1.0)))
        self.assertEqual(f(0.999), 1.0)
        self.assertEqual(f(1.001), 2.0)

    def test_excluded_domain_end(self):
        f = Concatenation(Interval(0, False, 1, True, Constant(1)))
        self.assertTrue(math.isnan(f(0.0)))
        self.assertEqual(f(1.0), 1.0)

    def test_derivative(self):
        df = self.f.derivative()
        self.assertIsType(df, Concatenation)
        self.assertEqual(df(1.5), 3.0)
        self.assertAlmostEqual(df(4.0), 3*math.cos(4.0))
        self.assertTrue(math.isnan(df(2.5)))
        self.assertEqual([s.compare_to(t) for s, t in zip(df.segments, self.f.segments)],
                         [0, 0, 0])

    def test_simplify(self):
        f = self.f
        self.assertIs(f.simplify(), f)
        g = Concatenation(Interval(0, True, 1, True, Power(Power(), 1, 2)))
        self.assertEqual(g.simplify().segments[0].payload, Power(2))

    def test_scale(self):
        f = self.f
        self.assertIs(f.scale_by(1), f)
        self.assertIs(f.scale_by(0), Constant.ZERO)
        self.assertEqual(f.scale_by(2)(1.5), 4.5)
        self.assertTrue(math.isnan(f.scale_by(2)(2.5)))

    def test_compare(self):
        a = Concatenation(Interval(0, True, 1, True, Sine()))
        b = Concatenation(Interval(0, True, 1, True, Power()))
        c = Concatenation(Interval(0, True, 2, True, Sine()))
        self.assertEqual(a.compare_to(b), -1)
        self.assertEqual(a.compare_to(c), -1)
        self.assertEqual(a.compare_to(self.f), -1)
        self.assertEqual(a.compare_to(Concatenation(Interval(0, True, 1, True, Sine()))), 0)
        self.assertEqual(a.compare_to(Power()), 1)

    def test_knots(self):
        f = Concatenation(Interval(0, True, 1, True, Power(2)),
                          Interval(1, False, 2, True, Power(-1)))
        self.assertIs(f.get_knot_report((0.2, 0.8)), KnotReport.NONE)
        self.assertIs(f.get_knot_report((0.5, 1.5)), KnotReport.KNOWN_FINITE)
        self.assertEqual(f.get_knots((0.5, 1.5)), (1.0,))
        self.assertEqual(f.get_knots((0, 2)), (0.0, 1.0, 2.0))
        self.assertIs(f.get_knot_report((-1, 1)), KnotReport.KNOWN_INFINITE)
        self.assertIs(self.f.get_knot_report((1.5, 2.5)), KnotReport.KNOWN_INFINITE)
        with self.assertRaises(UnsupportedOperationError):
            self.f.get_knots((1.5, 2.5))
        g = Concatenation(Interval(-1, True, 1, True, Power(-1)))
        self.assertEqual(g.get_knots((-0.5, 0.5)), (0.0,))

    def test_discontinuities(self):
        f = Concatenation(
            Interval(0, True, 1, True, Power(1, 2)),
            Interval(1, False, 2, True, Power(2, 1)),
            Interval(2, False, 3, True, Constant(4)),
            Interval(4, True, 5, True, Constant(1)),
        )
        found = list(f.discontinuities())
        self.assertEqual(found, [
            Interval(1, True, 1, True, Discontinuity.DISCONTINUOUS),
            Interval(2, True, 2, True, Discontinuity.KNOT),
            Interval(3, False, 4, False, Discontinuity.GAP),
        ])
        self.assertEqual(list(f.discontinuities((1.5, 3.5))), [
            Interval(2, True, 2, True, Discontinuity.KNOT),
            Interval(3, False, 3.5, True, Discontinuity.GAP),
        ])

    def test_str(self):
        f = Concatenation(Interval(0, True, 1, True, Power()),
                          Interval(1, False, 2, True, Constant(2)))
        self.assertEqual(str(f), "IntervalSet([0, 1]: x, (1, 2]: 2)")
        self.assertEqual(str(self.f), "IntervalSet([1, 2]: x², (2, 3): NaN, [3, 5]: 3sin(x))")

    def test_sympy(self):
        import sympy as sp
        x = sp.Symbol('x')
        expr = self.f.to_sympy(x)
        self.assertIsInstance(expr, sp.Piecewise)
        self.assertEqual(expr.subs(x, 1.5), 2.25)


class TestPiecewiseLinear(DpkTestCase):
    def test_exact_samples(self):
        f = Concatenation.continuous_piecewise_linear(0.0, 2.0, 0.2, 2.1, 0.5, 1.5, 1.0, 5.5)
        self.assertEqual(f(0.0), 2.0)
        self.assertEqual(f(0.2), 2.1)
        self.assertEqual(f(0.5), 1.5)
        self.assertEqual(f(1.0), 5.5)
        self.assertAlmostEqual(f(0.1), 2.05)
        df = f.derivative()
        self.assertAlmostEqual(df(0.1), 0.5)
        self.assertAlmostEqual(df(0.3), -2.0)
        self.assertAlmostEqual(df(0.9), 8.0)

    def test_segments(self):
        f = Concatenation.continuous_piecewise_linear(0, 1, 1, 3, 2, 0)
        self.assertEqual([s.bounds_str() for s in f.segments], ["[0, 1]", "(1, 2]"])
        self.assertEqual(f(0.5), 2.0)
        self.assertEqual(f(1.5), 1.5)
        found = list(f.discontinuities())
        self.assertEqual(found, [Interval(1, True, 1, True, Discontinuity.KNOT)])

    def test_unsorted_and_duplicates(self):
        f = Concatenation.continuous_piecewise_linear([2, 0, 0, 1, 1, 3, 1, 3])
        self.assertEqual(len(f.segments), 2)
        self.assertEqual(f(1.0), 3.0)
        self.assertEqual(f(2.0), 0.0)

    def test_from_points(self):
        f = Concatenation.from_points({0.0: 1.0, 2.0: 5.0})
        self.assertEqual(f(0.0), 1.0)
        self.assertEqual(f(2.0), 5.0)
        self.assertAlmostEqual(f(0.5), 2.0)
        self.assertAlmostEqual(f.derivative()(1.0), 2.0)

    def test_invalid(self):
        with self.assertRaises(ValueError):
            Concatenation.continuous_piecewise_linear(0, 1, 2)
        with self.assertRaises(ValueError):
            Concatenation.continuous_piecewise_linear(0, 1)
        with self.assertRaises(ValueError):
            Concatenation.continuous_piecewise_linear(0, 1, 0, 2)
        with self.assertRaises(ValueError):
            Concatenation.continuous_piecewise_linear(0, 1, 0, 1)
        with self.assertRaises(ValueError):
            Concatenation.continuous_piecewise_linear(0, 1, 1, math.inf)
        with self.assertRaises(ValueError):
            Concatenation.from_points({1.0: 2.0})


def run_tests():
    suite = unittest.TestLoader().loadTestsFromModule(sys.modules[__name__])
    return len(unittest.TextTestRunner(verbosity=2).run(suite).failures)


if __name__ == '__main__':
    unittest.main()
