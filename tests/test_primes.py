import pytest
from hypothesis import given, strategies as st

from profanutils.primes import count_primes, is_prime, main


@pytest.mark.parametrize("p", [2, 3, 5, 7, 11, 13, 97, 7919])
def test_known_primes(p):
    assert is_prime(p) is True


@pytest.mark.parametrize("n", [-5, 0, 1, 4, 9, 25, 49, 91])
def test_non_primes(n):
    assert is_prime(n) is False


@given(st.integers(min_value=2, max_value=500), st.integers(min_value=2, max_value=500))
def test_products_are_composite(a, b):
    assert not is_prime(a * b)


def test_count_below_ten():
    assert count_primes(10) == 4


def test_count_below_hundred():
    assert count_primes(100) == 25


def test_count_is_monotonic():
    counts = [count_primes(n) for n in range(0, 60)]
    assert counts == sorted(counts)
    assert all(
        counts[n + 1] - counts[n] == int(is_prime(n)) for n in range(len(counts) - 1)
    )


def test_main_reports_count(capsys):
    assert main(["100"]) == 0
    out = capsys.readouterr().out
    assert "Starting the performance test..." in out
    assert "Find 25 prime numbers in" in out