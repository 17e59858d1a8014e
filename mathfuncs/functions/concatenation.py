r"""@package mathfuncs.functions.concatenation

Piecewise defined functions.

A Concatenation is made up of segments, i.e. Interval objects whose payloads
are the functions valid on these intervals. The segments must not overlap.
Any gaps between them are filled with segments of the undefined function
Nan.NAN, so that the segments cover the domain without holes.


@b Examples

```
    f = Concatenation(
        Interval(0, True, 1, True, Power(1, 2)),
        Interval(1, False, 2, True, Power(2, 1)),
    )
    f(0.5)                              # 0.25
    list(f.discontinuities())           # [<Interval [1, 1]: Discontinuity.DISCONTINUOUS>]

    g = Concatenation.continuous_piecewise_linear(0, 1, 1, 3, 2, 0)
    g(0.5)                              # 2.0
```
"""

import bisect
import logging
import math

import sympy as sp

from ..numutils import isclose
from ..utils import get_chunks, unpack_args
from .basics import Constant, Nan
from .common import _cmp, _check_same_type
from .composite import Sum, Quotient
from .interval import Interval
from .knots import KnotReport, Discontinuity
from .mathfunction import MathFunction
from .power import Power


__all__ = [
    "Concatenation",
]


logger = logging.getLogger(__name__)


def _gap_between(left, right):
    r"""Return the Nan.NAN segment between two disjoint segments or `None`."""
    if left.high < right.low:
        return Interval(left.high, not left.high_inclusive,
                        right.low, not right.low_inclusive, Nan.NAN)
    if left.high == right.low and not (left.high_inclusive or right.low_inclusive):
        return Interval(left.high, True, right.low, True, Nan.NAN)
    return None


def _affine(x0, y0, x1, y1):
    r"""Affine function through ``(x0, y0)`` and ``(x1, y1)``.

    The function is written as a weighted average of the two end values,
    \f$ y_0 (x_1 - x)/d + y_1 (x - x_0)/d \f$ with \f$ d = x_1 - x_0 \f$,
    so that it evaluates exactly to `y0` and `y1` at the ends.
    """
    d = Constant(x1 - x0)
    rising = Quotient(Sum(Power(1.0, 1.0), Constant(-x0)), d)
    falling = Quotient(Sum(Power(-1.0, 1.0), Constant(x1)), d)
    return Sum(Power(falling, y0, 1.0), Power(rising, y1, 1.0))


def _unique_points(points):
    r"""Sort ``(x, y)`` pairs by `x`, dropping exact duplicates."""
    values = dict()
    for x, y in points:
        x, y = float(x), float(y)
        if not (math.isfinite(x) and math.isfinite(y)):
            raise ValueError("Non-finite point (%r, %r)." % (x, y))
        if x in values and values[x] != y:
            raise ValueError("Contradicting values %r and %r at x=%r."
                             % (values[x], y, x))
        values[x] = y
    if len(values) < 2:
        raise ValueError("At least two distinct x values are needed.")
    return sorted(values.items())


class Concatenation(MathFunction):
    r"""Function defined piecewise on non-overlapping intervals."""

    def __init__(self, *segments):
        r"""Create a piecewise function from Interval segments.

        The segments may be given as separate arguments or as one iterable.
        Their payloads must be MathFunction objects. A `ValueError` is raised
        if no segments are given or if any two of them overlap.
        """
        segments = unpack_args(segments, scalar_types=(Interval,))
        if not segments:
            raise ValueError("A concatenation needs at least one segment.")
        for seg in segments:
            if not isinstance(seg, Interval):
                raise TypeError("Segment %r is not an Interval." % (seg,))
            if not isinstance(seg.payload, MathFunction):
                raise TypeError("Payload of segment %s is not a function."
                                % seg.bounds_str())
        segments = sorted(segments)
        result = [segments[0]]
        for seg in segments[1:]:
            prev = result[-1]
            if not prev.disjoint(seg):
                raise ValueError("Segments %s and %s overlap."
                                 % (prev.bounds_str(), seg.bounds_str()))
            gap = _gap_between(prev, seg)
            if gap is not None:
                logger.debug("Filling gap %s with NaN.", gap.bounds_str())
                result.append(gap)
            result.append(seg)
        self._segments = tuple(result)
        self._lows = [seg.low for seg in self._segments]

    @classmethod
    def continuous_piecewise_linear(cls, *values):
        r"""Create a continuous piecewise linear function from samples.

        @param *values
            Flat sequence ``x0, y0, x1, y1, ...`` of the sample points (or a
            single iterable of these numbers). The points are sorted by their
            x values.

        The first segment is ``[x0, x1]``, the following ones ``(x1, x2]``,
        etc., so each sample point belongs to exactly one segment.
        """
        values = unpack_args(values)
        if len(values) % 2:
            raise ValueError("Expected pairs of x and y values, got %d numbers."
                             % len(values))
        if len(values) < 4:
            raise ValueError("At least two points are needed.")
        return cls._from_pairs(get_chunks(values, 2))

    @classmethod
    def from_points(cls, points):
        r"""Create a continuous piecewise linear function from a dict.

        @param points
            Mapping from x values to y values.
        """
        return cls._from_pairs(points.items())

    @classmethod
    def _from_pairs(cls, pairs):
        points = _unique_points(pairs)
        segments = []
        for i, ((x0, y0), (x1, y1)) in enumerate(zip(points[:-1], points[1:])):
            segments.append(Interval(x0, i == 0, x1, True, _affine(x0, y0, x1, y1)))
        return cls(segments)

    @property
    def segments(self):
        r"""Tuple of all segments (including Nan.NAN filled gaps)."""
        return self._segments

    @property
    def domain(self):
        return (self.get_domain_low(), self.get_domain_high())

    def get_domain_low(self):
        return self._segments[0].low

    def get_domain_high(self):
        return self._segments[-1].high

    def _segment_at(self, x):
        r"""Return the segment covering `x` or `None`."""
        i = bisect.bisect_right(self._lows, x) - 1
        for seg in self._segments[max(0, i-1):i+1]:
            if seg.covers(x):
                return seg
        return None

    def evaluate(self, x):
        r"""Evaluate the function covering `x`.

        Raises a `ValueError` if `x` is outside of the domain. Points inside
        the domain not covered by any segment evaluate to NaN.
        """
        if math.isnan(x):
            return math.nan
        if x < self.get_domain_low() or x > self.get_domain_high():
            raise ValueError("%r is outside the domain [%s, %s]." % (
                x, self.get_domain_low(), self.get_domain_high()
            ))
        seg = self._segment_at(x)
        if seg is None:
            return math.nan
        return seg.payload.evaluate(x)

    def _map_payloads(self, func):
        r"""Apply `func` to all payloads, returning `self` if nothing changes."""
        payloads = [func(seg.payload) for seg in self._segments]
        if all(p is seg.payload for p, seg in zip(payloads, self._segments)):
            return self
        return Concatenation(*[seg.with_payload(p)
                               for p, seg in zip(payloads, self._segments)])

    def derivative(self):
        return self._map_payloads(lambda f: f.derivative())

    def simplify(self):
        return self._map_payloads(lambda f: f.simplify())

    def scale_by(self, factor):
        if factor == 0.0:
            return Constant.ZERO
        if factor == 1.0:
            return self
        return self._map_payloads(lambda f: f.scale_by(factor))

    def sort_priority(self):
        return 110

    def compare_within_sub_type(self, other):
        r"""Compare segment counts, then the segments one by one."""
        _check_same_type(self, other)
        c = _cmp(len(self._segments), len(other.segments))
        if c:
            return c
        for a, b in zip(self._segments, other.segments):
            c = a.compare_to(b)
            if c:
                return c
            c = a.payload.compare_to(b.payload)
            if c:
                return c
        return 0

    def _pieces(self, interval):
        r"""Generate the parts of the segments inside `interval`."""
        for seg in self._segments:
            part = seg.intersection(interval)
            if part is not None:
                yield part

    def _domain_interval(self):
        return Interval(self.get_domain_low(), True, self.get_domain_high(), True)

    def _boundaries(self):
        r"""Sorted list of all segment bounds."""
        bounds = set()
        for seg in self._segments:
            bounds.add(seg.low)
            bounds.add(seg.high)
        return sorted(bounds)

    def _knot_report(self, interval):
        if not self._domain_interval().covers(interval):
            return KnotReport.KNOWN_INFINITE
        report = KnotReport.NONE
        if any(interval.covers(x) for x in self._boundaries()):
            report = KnotReport.KNOWN_FINITE
        for part in self._pieces(interval):
            report = report.combine_with(part.payload.get_knot_report(part))
        return report

    def _knots(self, interval):
        for x in self._boundaries():
            if interval.covers(x):
                yield x
        for part in self._pieces(interval):
            yield from part.payload._reported_knots(part)

    def discontinuities(self, interval=None, tolerance=1e-9):
        r"""Iterate over the irregular parts of the function.

        @param interval
            Optional Interval (or ``(low, high)`` pair) to restrict the search
            to. Default is the whole domain.
        @param tolerance
            Absolute tolerance for deciding whether the two functions meeting
            at a segment boundary agree there.

        @return Generator of Interval objects with a Discontinuity payload.
            Gaps are reported as Discontinuity.GAP, boundaries between two
            defined segments as Discontinuity.KNOT if both sides agree and
            Discontinuity.DISCONTINUOUS otherwise.
        """
        if interval is None:
            interval = self._domain_interval()
        elif not isinstance(interval, Interval):
            interval = Interval(interval[0], True, interval[1], True)
        segments = self._segments
        for i, seg in enumerate(segments):
            if seg.payload is Nan.NAN:
                part = seg.intersection(interval)
                if part is not None:
                    yield part.with_payload(Discontinuity.GAP)
                continue
            if i + 1 == len(segments) or segments[i+1].payload is Nan.NAN:
                continue
            x = seg.high
            if not interval.covers(x):
                continue
            a = seg.payload.evaluate(x)
            b = segments[i+1].payload.evaluate(x)
            if isclose(a, b, rel_tol=0.0, abs_tol=tolerance):
                kind = Discontinuity.KNOT
            else:
                kind = Discontinuity.DISCONTINUOUS
            yield Interval(x, True, x, True, kind)

    def _sympy(self, x):
        pieces = []
        for seg in self._segments:
            lower = (x >= seg.low) if seg.low_inclusive else (x > seg.low)
            upper = (x <= seg.high) if seg.high_inclusive else (x < seg.high)
            pieces.append((seg.payload._sympy(x), sp.And(lower, upper)))
        pieces.append((sp.nan, True))
        return sp.Piecewise(*pieces)

    def _sub_functions(self):
        return [("segment%d" % i, seg.payload)
                for i, seg in enumerate(self._segments)]

    def __eq__(self, other):
        if not isinstance(other, Concatenation):
            return NotImplemented
        return self._segments == other.segments

    def __hash__(self):
        return hash((Concatenation, self._segments))

    def __str__(self):
        return "IntervalSet(%s)" % ", ".join(
            "%s: %s" % (seg.bounds_str(), seg.payload) for seg in self._segments
        )
