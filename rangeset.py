from typing import Iterable, Iterator, Optional

from element import Element, Range, Single, span
from step import INTEGERS, Step


class RangedSet:
    """Memory-efficient set that stores runs of consecutive values as ranges.

    Elements are kept sorted, non-overlapping and never touching, so every
    run is stored exactly once and membership is a binary search.
    """
    def __init__(self, values: Iterable = (), domain: Step = INTEGERS):
        self.domain = domain
        self.ranges: list[Element] = []
        for value in values:
            self.insert(value)

    @classmethod
    def from_values(cls, values: Iterable, domain: Step = INTEGERS) -> 'RangedSet':
        """Create RangedSet from values efficiently, in one sorted pass."""
        rs = cls(domain=domain)
        sorted_values = sorted(values)
        if not sorted_values:
            return rs

        start = end = sorted_values[0]
        for val in sorted_values[1:]:
            if val == end:
                continue
            if val == domain.next(end):
                end = val
            else:
                rs.ranges.append(span(start, end))
                start = end = val

        rs.ranges.append(span(start, end))
        return rs

    @property
    def elements(self) -> tuple[Element, ...]:
        return tuple(self.ranges)

    def find_index_for(self, value) -> tuple[bool, int]:
        """Binary search for value.

        Returns (True, index of the element holding value) or
        (False, index where value would be inserted).
        """
        left, right = 0, len(self.ranges)
        while left < right:
            mid = (left + right) // 2
            element = self.ranges[mid]
            if element.end < value:
                left = mid + 1
            elif value < element.start:
                right = mid
            else:
                return True, mid
        return False, left

    def contains(self, value) -> bool:
        found, _ = self.find_index_for(value)
        return found

    def insert(self, value) -> bool:
        """Add value. Returns False if it was already present."""
        found, index = self.find_index_for(value)
        if found:
            return False

        before = index > 0 and self.ranges[index - 1].adjacent_to(value, self.domain)
        after = index < len(self.ranges) and self.ranges[index].adjacent_to(value, self.domain)

        if before and after:
            # value closes the gap between two runs
            merged = self.ranges[index - 1].merge(value, self.domain)
            self.ranges[index - 1:index + 1] = [merged.merge(self.ranges[index], self.domain)]
        elif before:
            self.ranges[index - 1] = self.ranges[index - 1].merge(value, self.domain)
        elif after:
            self.ranges[index] = self.ranges[index].merge(value, self.domain)
        else:
            self.ranges.insert(index, Single(value))
        return True

    def take(self, value) -> Optional[object]:
        """Remove value and return it, or return None if it is absent."""
        found, index = self.find_index_for(value)
        if not found:
            return None

        element = self.ranges[index]
        if isinstance(element, Single):
            self.ranges.pop(index)
            return element.value

        left, taken, right = element.split(value, self.domain)
        self.ranges[index:index + 1] = [piece for piece in (left, right) if piece is not None]
        return taken

    def remove(self, value) -> bool:
        return self.take(value) is not None

    def add(self, value):
        self.insert(value)

    def discard(self, value):
        self.take(value)

    def __contains__(self, value) -> bool:
        return self.contains(value)

    def __iter__(self) -> Iterator:
        for element in self.ranges:
            current = element.start
            yield current
            while current != element.end:
                current = self.domain.next(current)
                yield current

    def __len__(self) -> int:
        return sum(self.domain.count(element.start, element.end) for element in self.ranges)

    def __bool__(self) -> bool:
        return bool(self.ranges)

    def __eq__(self, other):
        if not isinstance(other, RangedSet):
            return NotImplemented
        return self.domain == other.domain and self.ranges == other.ranges

    def __repr__(self) -> str:
        return f"RangedSet({self.ranges!r}, domain={self.domain!r})"

    def __or__(self, other):
        """Union operation, returns new RangedSet."""
        result = RangedSet(domain=self.domain)

        if isinstance(other, RangedSet):
            if other.domain != self.domain:
                raise ValueError(f"cannot union sets over {self.domain!r} and {other.domain!r}")
            # Merge two sorted lists of elements
            i, j = 0, 0
            while i < len(self.ranges) or j < len(other.ranges):
                if i >= len(self.ranges):
                    result._add_element(other.ranges[j])
                    j += 1
                elif j >= len(other.ranges):
                    result._add_element(self.ranges[i])
                    i += 1
                elif not other.ranges[j].start < self.ranges[i].start:
                    result._add_element(self.ranges[i])
                    i += 1
                else:
                    result._add_element(other.ranges[j])
                    j += 1
        else:
            # Union with regular iterable
            result.ranges = list(self.ranges)
            for val in other:
                result.insert(val)

        return result

    def _add_element(self, element: Element):
        """Append an element, coalescing with the last one if they touch or overlap."""
        if not self.ranges:
            self.ranges.append(element)
            return

        last = self.ranges[-1]
        after_last = self.domain.next(last.end)

        # No successor means last already reaches the top of the domain
        if after_last is None or not after_last < element.start:
            end = element.end if last.end < element.end else last.end
            self.ranges[-1] = span(last.start, end)
        else:
            self.ranges.append(element)
