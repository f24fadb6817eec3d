"""Prime numbers: a lazy chained-filter sieve and a trial-division test."""

from __future__ import annotations

from itertools import count
from typing import Iterable, Iterator


def generate() -> Iterator[int]:
    """Yield 2, 3, 4, ... without end."""
    yield from count(2)


def prime_filter(source: Iterable[int], prime: int) -> Iterator[int]:
    """Yield the numbers of ``source`` that ``prime`` does not divide."""
    for number in source:
        if number % prime != 0:
            yield number


def sieve() -> Iterator[int]:
    """Yield the primes in order; each prime adds a filter to the stream."""
    numbers = generate()
    while True:
        prime = next(numbers)
        numbers = prime_filter(numbers, prime)
        yield prime


def is_prime(value: int) -> bool:
    """Return True when ``value`` is prime, testing divisors of the form 6k +/- 1."""
    if value <= 3:
        return value >= 2
    if value % 2 == 0 or value % 3 == 0:
        return False
    divisor = 5
    while divisor * divisor <= value:
        if value % divisor == 0 or value % (divisor + 2) == 0:
            return False
        divisor += 6
    return True