"""Stepping capability for values stored in a RangedSet.

A domain knows the predecessor and successor of each of its values and
returns None instead of stepping past its edges.
"""
from typing import Any, Optional, Protocol


class Step(Protocol):
    def prev(self, value: Any) -> Optional[Any]: ...

    def next(self, value: Any) -> Optional[Any]: ...

    def count(self, start: Any, end: Any) -> int: ...


class IntegerDomain:
    """Integers, optionally bounded on either side (bounds inclusive)."""

    def __init__(self, minimum: Optional[int] = None, maximum: Optional[int] = None, name: str = ""):
        if minimum is not None and maximum is not None and minimum > maximum:
            raise ValueError(f"minimum {minimum} is greater than maximum {maximum}")
        self.minimum = minimum
        self.maximum = maximum
        self.name = name

    def prev(self, value: int) -> Optional[int]:
        if self.minimum is not None and value <= self.minimum:
            return None
        return value - 1

    def next(self, value: int) -> Optional[int]:
        if self.maximum is not None and value >= self.maximum:
            return None
        return value + 1

    def count(self, start: int, end: int) -> int:
        return end - start + 1

    def __eq__(self, other):
        if not isinstance(other, IntegerDomain):
            return NotImplemented
        return (self.minimum, self.maximum) == (other.minimum, other.maximum)

    def __hash__(self):
        return hash((IntegerDomain, self.minimum, self.maximum))

    def __repr__(self) -> str:
        if self.name:
            return self.name
        return f"IntegerDomain(minimum={self.minimum!r}, maximum={self.maximum!r})"


def unsigned(bits: int) -> IntegerDomain:
    return IntegerDomain(0, 2 ** bits - 1, name=f"U{bits}")


def signed(bits: int) -> IntegerDomain:
    return IntegerDomain(-(2 ** (bits - 1)), 2 ** (bits - 1) - 1, name=f"I{bits}")


INTEGERS = IntegerDomain(name="INTEGERS")
U8, U16, U32, U64 = unsigned(8), unsigned(16), unsigned(32), unsigned(64)
I8, I16, I32, I64 = signed(8), signed(16), signed(32), signed(64)


class CodePointDomain:
    """Single-character strings ordered by Unicode code point."""

    MAX_CODE_POINT = 0x10FFFF

    def prev(self, value: str) -> Optional[str]:
        code = ord(value)
        if code == 0:
            return None
        return chr(code - 1)

    def next(self, value: str) -> Optional[str]:
        code = ord(value)
        if code == self.MAX_CODE_POINT:
            return None
        return chr(code + 1)

    def count(self, start: str, end: str) -> int:
        return ord(end) - ord(start) + 1

    def __eq__(self, other):
        return isinstance(other, CodePointDomain)

    def __hash__(self):
        return hash(CodePointDomain)

    def __repr__(self) -> str:
        return "CHARACTERS"


CHARACTERS = CodePointDomain()


class MethodDomain:
    """Delegates to the values' own prev() and next() methods.

    For user types that know their own neighbours. Both methods must return
    None at the edges of the type's domain.
    """

    def prev(self, value):
        return value.prev()

    def next(self, value):
        return value.next()

    def count(self, start, end) -> int:
        # O(n) in the run length
        total = 1
        current = start
        while current != end:
            current = current.next()
            if current is None:
                raise ValueError(f"{end!r} is not reachable from {start!r}")
            total += 1
        return total

    def __repr__(self) -> str:
        return "METHODS"


METHODS = MethodDomain()
