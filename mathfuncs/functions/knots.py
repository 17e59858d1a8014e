r"""@package mathfuncs.functions.knots

Classification of the non-smooth points of a function.

A knot is a point where a function or its derivative is not continuous. The
KnotReport values form a small lattice: combining the reports of the parts
of a composite function with KnotReport.combine_with() yields the report of
the whole.
"""

from enum import Enum


__all__ = [
    "KnotReport",
    "Discontinuity",
]


class KnotReport(Enum):
    r"""Summary of the knots of a function on an interval.

    The members are ordered by how much they say about the knots, so that
    combining two reports simply takes the weaker statement.
    """
    ## No knots on the interval.
    NONE = 0
    ## A finite, enumerable set of knots.
    KNOWN_FINITE = 1
    ## Infinitely many knots (e.g. the function is undefined on a part of
    ## the interval with positive width).
    KNOWN_INFINITE = 2
    ## Nothing is known about the knots.
    UNKNOWN = 3

    def combine_with(self, other):
        r"""Return the report of a function combining two parts.

        This operation is commutative and associative. `NONE` is the identity
        and `UNKNOWN` absorbs everything.
        """
        return self if self.value >= other.value else other

    def is_finite(self):
        r"""Whether the knots can be enumerated, i.e. there are finitely many."""
        return self in (KnotReport.NONE, KnotReport.KNOWN_FINITE)

    @classmethod
    def combine(cls, reports):
        r"""Combine any number of reports, starting from `NONE`."""
        result = cls.NONE
        for report in reports:
            result = result.combine_with(report)
        return result


class Discontinuity(Enum):
    r"""Kind of irregularity of a piecewise defined function."""
    ## The function is continuous but the definition changes.
    KNOT = 1
    ## The function jumps.
    DISCONTINUOUS = 2
    ## The function is undefined.
    GAP = 3


def _undefined_knot_info(interval):
    r"""Knot report and positions of a function undefined on the interval.

    On an interval of positive width there are infinitely many problematic
    points. A single point interval has exactly one knot.
    """
    if interval.is_single_point():
        return KnotReport.KNOWN_FINITE, [interval.low]
    return KnotReport.KNOWN_INFINITE, []
