from itertools import islice

import pytest

from algoworks.primes import generate, is_prime, prime_filter, sieve


def test_concurrency_prime():
    primes = sieve()
    assert [next(primes), next(primes)] == [2, 3]


def test_prime():
    assert is_prime(11) is True
    assert is_prime(47) is True


@pytest.mark.parametrize("value", [-7, 0, 1, 4, 9, 25, 49, 121])
def test_not_prime(value):
    assert is_prime(value) is False


def test_sieve_agrees_with_is_prime():
    expected = [n for n in range(500) if is_prime(n)]
    assert list(islice(sieve(), len(expected))) == expected


def test_generate_starts_at_two():
    assert list(islice(generate(), 4)) == [2, 3, 4, 5]


def test_prime_filter_drops_multiples():
    kept = list(prime_filter(range(2, 20), 3))
    assert all(n % 3 != 0 for n in kept)
    assert kept == [n for n in range(2, 20) if n % 3]


def test_sieve_values_are_increasing_and_prime():
    primes = list(islice(sieve(), 50))
    assert primes == sorted(set(primes))
    assert all(is_prime(p) for p in primes)