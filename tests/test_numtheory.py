import pytest

from algobox.numtheory import atkin_primes, binomial, catalan, fibonacci


def test_atkin_primes_below_thirty():
    assert atkin_primes(30) == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]


def test_atkin_prime_count_below_hundred():
    assert len(atkin_primes(100)) == 25


@pytest.mark.parametrize("limit", [0, 1, 2])
def test_atkin_primes_tiny_limits(limit):
    assert atkin_primes(limit) == []


def test_atkin_primes_small_limits_include_only_smaller():
    assert atkin_primes(3) == [2]
    assert atkin_primes(4) == [2, 3]
    assert atkin_primes(6) == [2, 3, 5]


def test_atkin_primes_are_prime_and_complete():
    limit = 2000
    primes = atkin_primes(limit)
    assert primes == sorted(set(primes))
    assert all(p < limit for p in primes)
    prime_set = set(primes)
    for candidate in range(2, limit):
        has_divisor = any(candidate % p == 0 for p in primes if p * p <= candidate)
        assert (candidate in prime_set) == (not has_divisor)


def test_atkin_default_limit_upper_bound():
    primes = atkin_primes()
    assert primes[-1] < 100000
    assert primes[:3] == [2, 3, 5]


def test_binomial_edges():
    for n in range(10):
        assert binomial(n, 0) == 1
        assert binomial(n, n) == 1


def test_binomial_symmetry_and_pascal():
    for n in range(1, 25):
        for k in range(1, n):
            assert binomial(n, k) == binomial(n, n - k)
            assert binomial(n, k) == binomial(n - 1, k - 1) + binomial(n - 1, k)


def test_binomial_row_sums_to_power_of_two():
    for n in range(20):
        assert sum(binomial(n, k) for k in range(n + 1)) == 2**n


@pytest.mark.parametrize("n,k", [(3, 4), (-1, 0), (5, -1)])
def test_binomial_rejects_invalid(n, k):
    with pytest.raises(ValueError):
        binomial(n, k)


def test_catalan_base_case():
    assert catalan(0) == 1


def test_catalan_recurrence():
    for n in range(15):
        expected = sum(catalan(i) * catalan(n - i) for i in range(n + 1))
        assert catalan(n + 1) == expected


def test_catalan_rejects_negative():
    with pytest.raises(ValueError):
        catalan(-1)


def test_fibonacci_source_example():
    assert fibonacci(9) == 34


def test_fibonacci_base_cases():
    assert fibonacci(0) == 0
    assert fibonacci(1) == 1


def test_fibonacci_recurrence():
    for n in range(2, 60):
        assert fibonacci(n) == fibonacci(n - 1) + fibonacci(n - 2)


def test_fibonacci_rejects_negative():
    with pytest.raises(ValueError):
        fibonacci(-3)