import pytest

from exgrade.primes import find_max_prime_factor, goldbach_conjecture, is_prime


def test_goldbach_conjecture():
    assert goldbach_conjecture() == "5777,5993"


@pytest.mark.parametrize(
    "number, expected",
    [
        (10000071, 370373),
        (600851475143, 6857),
        (1600851475143, 16807369),
        (76008514751430, 2163013),
        (96008514751430, 223275615701),
        (99999999951437, 5218879),
        (1199999999951437, 3945019577),
        (9999999999999951437, 387792298444951),
        (97993999919999958437, 203729729563409477),
        (199999999999999951437, 9523809523809521497),
    ],
)
def test_find_max_prime_factor(number, expected):
    assert find_max_prime_factor(number) == expected


def test_find_max_prime_factor_example():
    assert find_max_prime_factor(100) == 5


@pytest.mark.parametrize("prime", [2, 3, 7919, 1000000007])
def test_find_max_prime_factor_of_prime_is_itself(prime):
    assert find_max_prime_factor(prime) == prime


def test_find_max_prime_factor_of_square_of_large_prime():
    assert find_max_prime_factor(1000000007 * 1000000007) == 1000000007


@pytest.mark.parametrize("number", [0, 1, -10])
def test_find_max_prime_factor_rejects_small(number):
    with pytest.raises(ValueError):
        find_max_prime_factor(number)


@pytest.mark.parametrize(
    "n, expected",
    [
        (0, False),
        (1, False),
        (2, True),
        (3, True),
        (4, False),
        (97, True),
        (561, False),
        (7919, True),
        (5777, False),
        (1000000007, True),
    ],
)
def test_is_prime(n, expected):
    assert is_prime(n) is expected


def test_is_prime_matches_small_sieve():
    primes = [n for n in range(100) if is_prime(n)]
    assert primes == [
        2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47,
        53, 59, 61, 67, 71, 73, 79, 83, 89, 97,
    ]