#!/usr/bin/env python3

import unittest
import sys
import itertools

from testutils import DpkTestCase
from .interval import Interval
from .knots import KnotReport, _undefined_knot_info


class TestKnotReport(DpkTestCase):
    def test_identity_and_absorbing(self):
        for r in KnotReport:
            self.assertIs(KnotReport.NONE.combine_with(r), r)
            self.assertIs(r.combine_with(KnotReport.NONE), r)
            self.assertIs(KnotReport.UNKNOWN.combine_with(r), KnotReport.UNKNOWN)
            self.assertIs(r.combine_with(KnotReport.UNKNOWN), KnotReport.UNKNOWN)

    def test_infinite(self):
        inf = KnotReport.KNOWN_INFINITE
        self.assertIs(inf.combine_with(KnotReport.KNOWN_FINITE), inf)
        self.assertIs(KnotReport.KNOWN_FINITE.combine_with(inf), inf)
        self.assertIs(KnotReport.KNOWN_FINITE.combine_with(KnotReport.KNOWN_FINITE),
                      KnotReport.KNOWN_FINITE)

    def test_commutative_associative(self):
        for a, b in itertools.product(KnotReport, repeat=2):
            self.assertIs(a.combine_with(b), b.combine_with(a))
        for a, b, c in itertools.product(KnotReport, repeat=3):
            self.assertIs(a.combine_with(b).combine_with(c),
                          a.combine_with(b.combine_with(c)))

    def test_is_finite(self):
        self.assertTrue(KnotReport.NONE.is_finite())
        self.assertTrue(KnotReport.KNOWN_FINITE.is_finite())
        self.assertFalse(KnotReport.KNOWN_INFINITE.is_finite())
        self.assertFalse(KnotReport.UNKNOWN.is_finite())

    def test_combine(self):
        self.assertIs(KnotReport.combine([]), KnotReport.NONE)
        self.assertIs(KnotReport.combine([KnotReport.NONE, KnotReport.KNOWN_FINITE]),
                      KnotReport.KNOWN_FINITE)
        self.assertIs(KnotReport.combine(iter([KnotReport.KNOWN_INFINITE,
                                               KnotReport.KNOWN_FINITE])),
                      KnotReport.KNOWN_INFINITE)

    def test_undefined_info(self):
        self.assertEqual(_undefined_knot_info(Interval(2, True, 2, True)),
                         (KnotReport.KNOWN_FINITE, [2.0]))
        self.assertEqual(_undefined_knot_info(Interval(0, True, 2, True)),
                         (KnotReport.KNOWN_INFINITE, []))


def run_tests():
    suite = unittest.TestLoader().loadTestsFromModule(sys.modules[__name__])
    return len(unittest.TextTestRunner(verbosity=2).run(suite).failures)


if __name__ == '__main__':
    unittest.main()
