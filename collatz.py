#!/usr/bin/env python3
"""Collatz convergence cache backed by a RangedSet.

Every start value below --limit is followed until it reaches a value already
known to converge; the whole path is then cached. Almost every small integer
ends up cached, so the set stays a handful of ranges.
"""
import argparse
import sys
import time
from dataclasses import dataclass

from rangeset import RangedSet
from step import INTEGERS, U32, U64, IntegerDomain


DOMAINS = {
    'u32': U32,
    'u64': U64,
    'int': INTEGERS,
}


class DomainOverflow(Exception):
    """Exception raised when a sequence leaves the configured integer domain"""
    pass


@dataclass
class Config:
    limit: int = 256
    domain: str = 'u64'
    verbose: bool = False


def collatz(number: int) -> int:
    if number % 2 == 0:
        return number // 2
    return 3 * number + 1


def check_in_domain(value: int, domain: IntegerDomain):
    if domain.maximum is not None and value > domain.maximum:
        raise DomainOverflow(f"{value} does not fit in {domain!r}")


def run(config: Config) -> RangedSet:
    domain = DOMAINS[config.domain]
    cache = RangedSet([1], domain=domain)

    for i in range(1, config.limit):
        check_in_domain(i, domain)
        path = []
        current = i
        while current not in cache:
            path.append(current)
            current = collatz(current)
            check_in_domain(current, domain)

        if config.verbose:
            print(" -> ".join(str(v) for v in path + [current]) + " (converges)")

        for value in path:
            cache.insert(value)

    return cache


def main():
    parser = argparse.ArgumentParser(description="Collatz convergence cache")
    parser.add_argument('--limit', type=int, default=256, help='Check start values below this')
    parser.add_argument('--domain', choices=sorted(DOMAINS), default='u64', help='Integer domain of the cache')
    parser.add_argument('--verbose', action='store_true', help='Print every sequence')

    args = parser.parse_args()
    config = Config(limit=args.limit, domain=args.domain, verbose=args.verbose)

    started = time.time()
    try:
        cache = run(config)
    except DomainOverflow as e:
        print(f"Error: {e}")
        sys.exit(1)
    elapsed = time.time() - started

    print(f"Cached {len(cache)} values in {len(cache.elements)} runs ({elapsed:.2f}s)")
    if cache:
        print(f"Largest cached run: {max(cache.elements, key=lambda e: cache.domain.count(e.start, e.end))}")


if __name__ == '__main__':
    main()
