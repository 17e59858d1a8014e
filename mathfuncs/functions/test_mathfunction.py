#!/usr/bin/env python3
r"""@package mathfuncs.functions.test_mathfunction

Tests of properties common to all kinds of functions.
"""

import unittest
import sys
import contextlib
import io
import math
import os.path as op
import tempfile

import numpy as np
import sympy as sp

from testutils import DpkTestCase, slowtest
from .basics import Constant, Nan
from .composite import Sum, Product, Quotient
from .concatenation import Concatenation
from .explog import Exponential, Logarithm
from .interval import Interval
from .mathfunction import MathFunction, compare_functions, sort_functions
from .mathfunction import load_from_file, save_to_file
from .power import Power
from .printing import print_value, superscript
from .trig import Sine, ArcSine, ArcTangent


def _samples():
    r"""Functions of all kinds with points inside their domains."""
    return [
        (Power(2, 3), [-1.5, 0.3, 2.0]),
        (Power(Sine(), 3, 2), [-1.0, 0.4]),
        (Power(Sum(Power(2), Constant(2)), 1, -1.5), [-1.2, 0.0, 0.8]),
        (Sine(2, 3, 1), [-1.0, 0.5]),
        (Sine(Exponential(), 1, 0.5), [-1.0, 0.5]),
        (Logarithm(10), [0.5, 3.0]),
        (Logarithm(Sum(Power(2), Constant(1))), [-2.0, 0.5]),
        (Exponential(ArcTangent(), 2), [-3.0, 1.0]),
        (ArcSine(2, 0.5), [-0.4, 0.6]),
        (ArcSine(Sine(0.5)), [-1.0, 2.0]),
        (ArcTangent(Power(2), 1, 1), [-1.0, 0.7]),
        (Sum(Sine(), Power(2), Constant(3)), [-1.0, 2.5]),
        (Product(Sine(), Exponential(), Power(-1)), [-1.0, 0.7]),
        (Quotient(Logarithm(), Sum(Power(2), Constant(1))), [0.5, 2.0]),
    ]


class TestContract(DpkTestCase):
    def test_derivatives(self):
        for f, points in _samples():
            with self.subTest(f=str(f)):
                self.assertDerivativeMatches(f, points)

    def test_second_derivatives(self):
        for f, points in _samples():
            with self.subTest(f=str(f)):
                self.assertDerivativeMatches(f.derivative(), points, h=1e-5,
                                             rel_tol=1e-4, abs_tol=1e-5)

    def test_sympy_cross_check(self):
        x = sp.Symbol('x')
        for f, points in _samples():
            with self.subTest(f=str(f)):
                expr = f.to_sympy(x)
                dexpr = sp.diff(expr, x)
                mine = f.derivative()
                for p in points:
                    self.assertAlmostEqual(float(expr.subs(x, p)), f(p), delta=1e-10)
                    self.assertAlmostEqual(float(dexpr.subs(x, p)), mine(p), delta=1e-8)

    def test_simplify_idempotent(self):
        for f, points in _samples():
            with self.subTest(f=str(f)):
                s = f.simplify()
                self.assertIs(s.simplify(), s)
                d = f.derivative()
                self.assertEqual(d.simplify(), d)
                for p in points:
                    self.assertAlmostEqual(s(p), f(p), delta=1e-12)

    def test_scale_identities(self):
        for f, _ in _samples():
            self.assertIs(f.scale_by(1.0), f)
            self.assertIs(f.scale_by(0.0), Constant.ZERO)
        self.assertIs(Constant.ZERO.scale_by(5), Constant.ZERO)

    def test_with_scale(self):
        f = Sum(Sine(), Power())
        self.assertIs(f.with_scale(1.0), f)
        g = f.with_scale(3.0)
        self.assertAlmostEqual(g(0.5), 3*f(0.5))
        self.assertEqual(Power(0, 1).with_scale(2), Power(2, 1))

    def test_total_order(self):
        funcs = [Quotient(Sine(), Power()), Sum(Sine(), Power()), Product(Sine(), Power()),
                 Power(), ArcTangent(), Exponential(), Logarithm(), ArcSine(),
                 Sine(), Nan.NAN, Constant(2),
                 Concatenation(Interval(0, True, 1, True, Sine()))]
        ordered = sort_functions(funcs)
        self.assertEqual([type(f).__name__ for f in ordered], [
            "Constant", "Nan", "Sine", "ArcSine", "Logarithm", "Exponential",
            "ArcTangent", "Power", "Product", "Sum", "Quotient", "Concatenation",
        ])
        self.assertEqual([f.sort_priority() for f in ordered],
                         [0, 3, 4, 5, 6, 7, 8, 9, 100, 101, 102, 110])
        self.assertEqual(sorted(funcs), ordered)
        self.assertEqual(compare_functions(Sine(), Power()), -1)
        self.assertTrue(Sine() < Power())
        self.assertTrue(Power() > Sine())

    def test_immutable_sharing(self):
        inner = Sum(Sine(), Power(2))
        f = Product(Power(3), inner)
        s = f.simplify()
        self.assertIs(s.factors[1], inner)
        self.assertEqual(f.factors, (Power(3), inner))

    def test_equality_and_hash(self):
        a = Sum(Sine(), Power(2))
        b = Sum(Sine(), Power(2))
        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))
        self.assertNotEqual(a, Sum(Power(2), Sine()))
        self.assertNotEqual(a, Product(Sine(), Power(2)))
        self.assertEqual(len({a, b, Sine(), Sine()}), 2)

    def test_repr(self):
        self.assertEqual(repr(Power(2, 3)), "<Power(2x³)>")
        self.assertEqual(repr(Sum(1, Power())), "<Sum(Σ(1, x))>")

    def test_abstract(self):
        with self.assertRaises(TypeError):
            MathFunction()


class TestTree(DpkTestCase):
    def test_traverse(self):
        f = Sum(Product(Sine(Power(2)), Constant(2)), Logarithm())
        nodes = [(len(parents), name, func) for parents, name, func
                 in f.traverse_tree(include_root=True)]
        self.assertEqual([(depth, name) for depth, name, _ in nodes], [
            (0, ""), (1, "term0"), (2, "factor0"), (3, "chain"), (2, "factor1"),
            (1, "term1"),
        ])
        self.assertIs(nodes[0][2], f)
        self.assertEqual(nodes[3][2], Power(2))

    def test_print_tree(self):
        f = Quotient(Sine(), Power(2))
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            f.print_tree()
        self.assertEqual(out.getvalue().splitlines(), [
            "root: (sin(x))/(x²) <Quotient>",
            ". numerator: sin(x) <Sine>",
            ". denominator: x² <Power>",
        ])


class TestPersistence(DpkTestCase):
    def test_save_load(self):
        f = Sum(Product(Sine(2), Exponential()), Constant.ONE, Logarithm(10),
                Concatenation(Interval(0, True, 1, True, Constant.ZERO),
                              Interval(2, True, 3, True, Power())))
        with tempfile.TemporaryDirectory() as tmp:
            fname = op.join(tmp, "sub", "func")
            f.save(fname, verbose=False)
            self.assertTrue(op.isfile(fname + ".npy"))
            with self.assertRaises(RuntimeError):
                f.save(fname, verbose=False)
            f.save(fname, overwrite=True, verbose=False)
            g = MathFunction.load(fname + ".npy")
            self.assertEqual(g, f)
            self.assertIs(g.terms[1], Constant.ONE)
            self.assertIs(g.terms[3].segments[0].payload, Constant.ZERO)
            self.assertIs(g.terms[3].segments[1].payload, Nan.NAN)
            self.assertIs(load_from_file(fname + ".npy").terms[1], Constant.ONE)

    def test_canonical_roots(self):
        with tempfile.TemporaryDirectory() as tmp:
            for name, func in [("zero", Constant.ZERO), ("one", Constant.ONE),
                               ("nan", Nan.NAN)]:
                fname = op.join(tmp, name)
                func.save(fname, verbose=False)
                self.assertIs(MathFunction.load(fname + ".npy"), func)
            Constant(2).save(op.join(tmp, "two"), verbose=False)
            two = Constant.load(op.join(tmp, "two.npy"))
            self.assertEqual(two, Constant(2))
            self.assertIsNot(two, Constant.ONE)

    def test_load_checks_type(self):
        with tempfile.TemporaryDirectory() as tmp:
            fname = op.join(tmp, "f.npy")
            Sum(Sine(), Power()).save(fname, verbose=False)
            self.assertIsType(Sum.load(fname), Sum)
            with self.assertRaises(TypeError):
                Sine.load(fname)
            other = op.join(tmp, "array.npy")
            np.save(other, np.arange(3.0))
            with self.assertRaises(TypeError):
                load_from_file(other)
            with self.assertRaises(TypeError):
                save_to_file(op.join(tmp, "g"), [1, 2], verbose=False)
            self.assertFalse(op.exists(op.join(tmp, "g.npy")))

    def test_save_logs(self):
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertLogs("mathfuncs.functions.mathfunction", level="INFO") as cm:
                Sine().save(op.join(tmp, "f.npy"))
            self.assertIn("f.npy", cm.output[0])


class TestPrinting(DpkTestCase):
    def test_print_value(self):
        self.assertEqual(print_value(2.0), "2")
        self.assertEqual(print_value(-3.0), "-3")
        self.assertEqual(print_value(2.5), "2.5")
        self.assertEqual(print_value(1e15), "1000000000000000")
        self.assertEqual(print_value(1e20), "1e+20")
        self.assertEqual(print_value(1e300), "1e+300")
        self.assertEqual(print_value(math.inf), "inf")
        self.assertEqual(print_value(math.nan), "nan")

    def test_superscript(self):
        self.assertEqual(superscript("-12"), "⁻¹²")
        self.assertEqual(superscript("1.5"), "¹·⁵")


class TestStress(DpkTestCase):
    @slowtest
    def test_repeated_derivatives(self):
        f = Product(Sine(Power(2)), Exponential(Sine()))
        ev = f.evaluator()
        for n in range(1, 5):
            self.assertDerivativeMatches(ev.function(n-1), [0.3, 1.1],
                                         h=1e-4, rel_tol=1e-4, abs_tol=1e-4)


def run_tests():
    suite = unittest.TestLoader().loadTestsFromModule(sys.modules[__name__])
    return len(unittest.TextTestRunner(verbosity=2).run(suite).failures)


if __name__ == '__main__':
    unittest.main()
