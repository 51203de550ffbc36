import pytest

from step import (CHARACTERS, I8, I64, INTEGERS, METHODS, U8, U16, U32, U64,
                  CodePointDomain, IntegerDomain)


def test_unbounded_integers_always_step():
    assert INTEGERS.prev(-10 ** 30) == -10 ** 30 - 1
    assert INTEGERS.next(10 ** 30) == 10 ** 30 + 1


@pytest.mark.parametrize("domain, minimum, maximum", [
    (U8, 0, 255),
    (U16, 0, 65535),
    (U32, 0, 2 ** 32 - 1),
    (U64, 0, 2 ** 64 - 1),
    (I8, -128, 127),
    (I64, -2 ** 63, 2 ** 63 - 1),
])
def test_fixed_width_edges(domain, minimum, maximum):
    assert domain.prev(minimum) is None
    assert domain.next(maximum) is None
    assert domain.next(minimum) == minimum + 1
    assert domain.prev(maximum) == maximum - 1


def test_integer_count():
    assert U8.count(0, 255) == 256
    assert U8.count(7, 7) == 1


def test_integer_domain_rejects_inverted_bounds():
    with pytest.raises(ValueError):
        IntegerDomain(5, 4)


def test_integer_domains_compare_by_bounds():
    assert IntegerDomain(0, 255) == U8
    assert hash(IntegerDomain(0, 255)) == hash(U8)
    assert U8 != I8
    assert U8 != CHARACTERS


def test_code_points():
    assert CHARACTERS.next("a") == "b"
    assert CHARACTERS.prev("b") == "a"
    assert CHARACTERS.prev("\x00") is None
    assert CHARACTERS.next("\U0010ffff") is None
    assert CHARACTERS.count("a", "z") == 26
    assert CodePointDomain() == CHARACTERS


class Weekday:
    NAMES = ["mon", "tue", "wed", "thu", "fri", "sat", "sun"]

    def __init__(self, index):
        self.index = index

    def prev(self):
        return Weekday(self.index - 1) if self.index > 0 else None

    def next(self):
        return Weekday(self.index + 1) if self.index < 6 else None

    def __eq__(self, other):
        return isinstance(other, Weekday) and self.index == other.index

    def __lt__(self, other):
        return self.index < other.index

    def __repr__(self):
        return self.NAMES[self.index]


def test_method_domain_delegates_to_values():
    assert METHODS.next(Weekday(0)) == Weekday(1)
    assert METHODS.prev(Weekday(0)) is None
    assert METHODS.next(Weekday(6)) is None
    assert METHODS.count(Weekday(1), Weekday(4)) == 4


def test_method_domain_count_needs_reachable_end():
    with pytest.raises(ValueError):
        METHODS.count(Weekday(4), Weekday(1))
