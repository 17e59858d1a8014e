r"""@package mathfuncs.functions.interval

Bounded intervals of the real line carrying an arbitrary payload.

Each bound may independently be inclusive or exclusive. Intervals are used
to describe the segments of a piecewise defined function (where the payload
is the function on that segment) and the ranges on which knots of functions
are analyzed (where the payload is usually `None`).


@b Examples

```
    a = Interval(0, True, 1, False)   # [0, 1)
    b = Interval(1, True, 2, True)    # [1, 2]
    a.disjoint(b)                     # True
    a.covers(0.5)                     # True
    0.5 in a                          # True
```
"""

import functools
import math

from .common import _cmp
from .printing import print_value


__all__ = [
    "Interval",
]


@functools.total_ordering
class Interval():
    r"""Immutable interval with inclusive or exclusive bounds and a payload.

    Intervals are ordered by their lower bound (inclusive first) and then by
    their upper bound (exclusive first). The payload does not take part in
    this order but does take part in equality.
    """
    __slots__ = ("_low", "_low_inclusive", "_high", "_high_inclusive",
                 "_payload")

    def __init__(self, low, low_inclusive, high, high_inclusive, payload=None):
        r"""Create an interval.

        @param low
            Lower bound.
        @param low_inclusive
            Whether `low` belongs to the interval.
        @param high
            Upper bound. Must not be smaller than `low`.
        @param high_inclusive
            Whether `high` belongs to the interval.
        @param payload
            Arbitrary object attached to the interval. Default is `None`.

        @b Notes

        An interval consisting of a single point must include both bounds.
        A `ValueError` is raised for NaN bounds, for ``low > high`` and for
        empty single-point intervals.
        """
        low = float(low)
        high = float(high)
        if math.isnan(low) or math.isnan(high):
            raise ValueError("Interval bounds must not be NaN.")
        if low > high:
            raise ValueError("Lower bound %r exceeds upper bound %r." % (low, high))
        if low == high and not (low_inclusive and high_inclusive):
            raise ValueError("Single point interval at %r must include both "
                             "bounds." % low)
        self._low = low
        self._low_inclusive = bool(low_inclusive)
        self._high = high
        self._high_inclusive = bool(high_inclusive)
        self._payload = payload

    @property
    def low(self):
        r"""Lower bound."""
        return self._low

    @property
    def low_inclusive(self):
        r"""Whether the lower bound belongs to the interval."""
        return self._low_inclusive

    @property
    def high(self):
        r"""Upper bound."""
        return self._high

    @property
    def high_inclusive(self):
        r"""Whether the upper bound belongs to the interval."""
        return self._high_inclusive

    @property
    def payload(self):
        r"""Object attached to this interval."""
        return self._payload

    @property
    def width(self):
        r"""Length `high - low` of the interval."""
        return self._high - self._low

    def is_single_point(self):
        r"""Whether the interval consists of exactly one point."""
        return self._low == self._high

    def covers(self, other):
        r"""Check whether a point or a whole interval lies inside this one.

        @param other
            Either a number or an Interval. An interval is covered if every
            one of its points is covered.
        """
        if isinstance(other, Interval):
            if other.low < self._low or other.high > self._high:
                return False
            if other.low == self._low and other.low_inclusive and not self._low_inclusive:
                return False
            if other.high == self._high and other.high_inclusive and not self._high_inclusive:
                return False
            return True
        x = other
        if x < self._low or x > self._high:
            return False
        if x == self._low and not self._low_inclusive:
            return False
        if x == self._high and not self._high_inclusive:
            return False
        return True

    def __contains__(self, x):
        return self.covers(x)

    def disjoint(self, other):
        r"""Return whether the two intervals have no point in common.

        Intervals sharing a bound value are only overlapping if both include
        that value.
        """
        if self._high < other.low or self._low > other.high:
            return True
        if self._high == other.low:
            return not (self._high_inclusive and other.low_inclusive)
        if self._low == other.high:
            return not (self._low_inclusive and other.high_inclusive)
        return False

    def intersection(self, other):
        r"""Return the common part of two intervals or `None` if disjoint.

        The resulting interval carries the payload of this interval.
        """
        if self.disjoint(other):
            return None
        if self._low > other.low:
            low, low_inclusive = self._low, self._low_inclusive
        elif self._low < other.low:
            low, low_inclusive = other.low, other.low_inclusive
        else:
            low = self._low
            low_inclusive = self._low_inclusive and other.low_inclusive
        if self._high < other.high:
            high, high_inclusive = self._high, self._high_inclusive
        elif self._high > other.high:
            high, high_inclusive = other.high, other.high_inclusive
        else:
            high = self._high
            high_inclusive = self._high_inclusive and other.high_inclusive
        return Interval(low, low_inclusive, high, high_inclusive, self._payload)

    def with_payload(self, payload):
        r"""Return an interval with the same bounds and a different payload."""
        return Interval(self._low, self._low_inclusive, self._high,
                        self._high_inclusive, payload)

    def compare_to(self, other):
        r"""Three-way comparison of the bounds of two intervals.

        Returns -1, 0 or 1. Lower bounds are compared first, where an
        inclusive lower bound sorts before an exclusive one at the same value.
        Then the upper bounds are compared, where an exclusive upper bound
        sorts before an inclusive one at the same value.
        """
        c = _cmp(self._low, other.low)
        if c:
            return c
        if self._low_inclusive != other.low_inclusive:
            return -1 if self._low_inclusive else 1
        c = _cmp(self._high, other.high)
        if c:
            return c
        if self._high_inclusive != other.high_inclusive:
            return 1 if self._high_inclusive else -1
        return 0

    def __lt__(self, other):
        if not isinstance(other, Interval):
            return NotImplemented
        return self.compare_to(other) < 0

    def __eq__(self, other):
        if not isinstance(other, Interval):
            return NotImplemented
        return (self._low == other.low
                and self._low_inclusive == other.low_inclusive
                and self._high == other.high
                and self._high_inclusive == other.high_inclusive
                and self._payload == other.payload)

    def __hash__(self):
        return hash((self._low, self._low_inclusive, self._high,
                     self._high_inclusive, self._payload))

    def bounds_str(self):
        r"""Return the bounds in mathematical notation, e.g. ``[0, 1)``."""
        return "%s%s, %s%s" % (
            "[" if self._low_inclusive else "(", print_value(self._low),
            print_value(self._high), "]" if self._high_inclusive else ")",
        )

    def __str__(self):
        if self._payload is None:
            return "Interval %s" % self.bounds_str()
        return "Interval %s: %s" % (self.bounds_str(), self._payload)

    def __repr__(self):
        return "<%s>" % self
