import pytest

from numdrills.divisors import (
    Divisibility,
    divisibility_by_5_and_11,
    factors,
    hcf,
    is_perfect,
    is_prime,
    lcm,
    perfect_numbers,
    prime_factors,
    prime_sum,
    primes_up_to,
    sum_of_divisors,
)


@pytest.mark.parametrize("n", [1, 6, 12, 36, 97, 100])
def test_factors_all_divide_and_are_sorted(n):
    result = factors(n)
    assert all(n % f == 0 for f in result)
    assert result == sorted(result)
    assert result[0] == 1
    assert result[-1] == n


def test_factors_of_prime():
    assert factors(13) == [1, 13]


def test_factors_of_non_positive_is_empty():
    assert factors(0) == []
    assert factors(-6) == []


@pytest.mark.parametrize("a,b", [(12, 18), (7, 5), (100, 75), (9, 9)])
def test_hcf_divides_both(a, b):
    h = hcf(a, b)
    assert a % h == 0 and b % h == 0


@pytest.mark.parametrize("a,b,k", [(12, 18, 3), (7, 5, 4), (8, 20, 6)])
def test_hcf_scales(a, b, k):
    assert hcf(a * k, b * k) == k * hcf(a, b)


def test_hcf_defaults_to_one_for_non_positive():
    assert hcf(0, 5) == 1
    assert hcf(-4, 8) == 1


@pytest.mark.parametrize("a,b", [(4, 6), (7, 5), (12, 18), (9, 9), (1, 10)])
def test_lcm_times_hcf_is_product(a, b):
    assert lcm(a, b) * hcf(a, b) == a * b
    assert lcm(a, b) % a == 0 and lcm(a, b) % b == 0


def test_lcm_symmetric():
    assert lcm(21, 6) == lcm(6, 21)


def test_lcm_rejects_zero():
    with pytest.raises(ValueError):
        lcm(0, 5)


def test_perfect_numbers_are_perfect():
    found = perfect_numbers(500)
    assert found
    assert all(is_perfect(n) for n in found)


@pytest.mark.parametrize("n", range(1, 60))
def test_is_perfect_matches_factor_sum(n):
    assert is_perfect(n) == (sum(factors(n)) == 2 * n)


def test_non_positive_not_perfect():
    assert is_perfect(0) is False
    assert is_perfect(-6) is False


def test_primes_agree_with_is_prime():
    assert primes_up_to(200) == [n for n in range(201) if is_prime(n)]


def test_one_is_not_prime():
    assert is_prime(1) is False
    assert is_prime(0) is False


def test_prime_factors_of_prime():
    for p in primes_up_to(50):
        assert prime_factors(p) == [p]


@pytest.mark.parametrize("n", [12, 60, 97, 360, 1001])
def test_prime_factors_are_prime_divisors(n):
    result = prime_factors(n)
    assert all(is_prime(p) and n % p == 0 for p in result)
    assert all(p in result for p in range(2, n + 1) if n % p == 0 and is_prime(p))


@pytest.mark.parametrize("limit", [0, 1, 2, 10, 100])
def test_prime_sum_is_sum_of_primes(limit):
    assert prime_sum(limit) == sum(primes_up_to(limit))


@pytest.mark.parametrize("n", [1, 4, 10, 25])
def test_sum_of_divisors_accumulates_factor_sums(n):
    assert sum_of_divisors(n) == sum(sum(factors(k)) for k in range(1, n + 1))


def test_sum_of_divisors_non_positive():
    assert sum_of_divisors(0) == 0


def test_divisibility_classes():
    assert divisibility_by_5_and_11(5 * 11) is Divisibility.BOTH
    assert divisibility_by_5_and_11(5 * 2) is Divisibility.ONLY_5
    assert divisibility_by_5_and_11(11 * 2) is Divisibility.ONLY_11
    assert divisibility_by_5_and_11(7) is Divisibility.NEITHER


def test_zero_divisible_by_both():
    assert divisibility_by_5_and_11(0) is Divisibility.BOTH