"""Building blocks of a RangedSet: one value, or a closed run of values."""
from dataclasses import dataclass
from typing import Any, Optional, Tuple, Union

from step import Step


class InvariantViolation(Exception):
    """Raised when an element operation is called outside its preconditions"""
    pass


@dataclass(frozen=True)
class ClosedRange:
    start: Any
    end: Any


class _Bounded:
    """Operations shared by Single and Range, written against start/end."""

    start: Any
    end: Any

    def adjacent_to(self, value, domain: Step) -> bool:
        """True if value is one step below start or one step above end."""
        below = domain.prev(self.start)
        if below is not None and value == below:
            return True
        above = domain.next(self.end)
        return above is not None and value == above

    def merge(self, other, domain: Step) -> 'Range':
        """Join with a value, Single or Range that touches exactly one side.

        The bounds of both operands cover the four Single/Range pairings:
        other sits either immediately below self.start or immediately above
        self.end, and the result spans from the lower start to the upper end.
        """
        if not isinstance(other, (Single, Range)):
            other = Single(other)

        below = domain.prev(self.start)
        above = domain.next(self.end)
        joins_below = below is not None and below == other.end
        joins_above = above is not None and above == other.start

        if joins_below and joins_above:
            raise InvariantViolation(f"{other!r} touches both sides of {self!r}")
        if joins_below:
            return Range(ClosedRange(other.start, self.end))
        if joins_above:
            return Range(ClosedRange(self.start, other.end))
        raise InvariantViolation(f"{other!r} is not adjacent to {self!r}")


@dataclass(frozen=True, repr=False)
class Single(_Bounded):
    value: Any

    @property
    def start(self):
        return self.value

    @property
    def end(self):
        return self.value

    def split(self, value, domain: Step):
        raise InvariantViolation(f"cannot split {self!r}")

    def __repr__(self) -> str:
        return f"Single({self.value!r})"


@dataclass(frozen=True, repr=False)
class Range(_Bounded):
    """Two or more contiguous values, start and end included."""

    bounds: ClosedRange

    @classmethod
    def of(cls, start, end) -> 'Range':
        return cls(ClosedRange(start, end))

    @property
    def start(self):
        return self.bounds.start

    @property
    def end(self):
        return self.bounds.end

    def split(self, value, domain: Step) -> Tuple[Optional['Element'], Any, Optional['Element']]:
        """Cut the range around value.

        Returns (left, value, right) where left covers [start, prev(value)]
        and right covers [next(value), end]. Either side is None when value
        sits on that bound.
        """
        if value < self.start or self.end < value:
            raise InvariantViolation(f"{value!r} is outside {self!r}")

        left = None
        if value != self.start:
            below = domain.prev(value)
            if below is None:
                raise InvariantViolation(f"{value!r} has no predecessor inside {self!r}")
            left = span(self.start, below)

        right = None
        if value != self.end:
            above = domain.next(value)
            if above is None:
                raise InvariantViolation(f"{value!r} has no successor inside {self!r}")
            right = span(above, self.end)

        return left, value, right

    def __repr__(self) -> str:
        return f"Range({self.start!r}, {self.end!r})"


Element = Union[Single, Range]


def span(start, end) -> Element:
    """The element covering [start, end]: a Single when start == end."""
    if start == end:
        return Single(start)
    return Range(ClosedRange(start, end))
