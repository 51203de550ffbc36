import sys

import pytest

import collatz
from collatz import Config, DomainOverflow, run
from step import IntegerDomain


def test_collatz_step():
    assert collatz.collatz(6) == 3
    assert collatz.collatz(3) == 10


def test_every_start_value_below_limit_is_cached():
    cache = run(Config(limit=256))
    for i in range(1, 256):
        assert i in cache
    assert cache.ranges[0].start == 1
    assert cache.ranges[0].end >= 255


def test_verbose_prints_each_sequence(capsys):
    run(Config(limit=4, verbose=True))
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "1 (converges)"
    assert out[1] == "2 -> 1 (converges)"
    assert out[2] == "3 -> 10 -> 5 -> 16 -> 8 -> 4 -> 2 (converges)"


def test_overflow_outside_domain(monkeypatch):
    monkeypatch.setitem(collatz.DOMAINS, 'tiny', IntegerDomain(0, 20))
    with pytest.raises(DomainOverflow):
        run(Config(limit=10, domain='tiny'))


def test_main_prints_summary(monkeypatch, capsys):
    monkeypatch.setattr(sys, 'argv', ['collatz', '--limit', '100', '--domain', 'int'])
    collatz.main()
    out = capsys.readouterr().out
    assert out.startswith("Cached ")
    assert "Largest cached run: Range(1, " in out
