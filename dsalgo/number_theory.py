"""Integer powers, primality, divisors, prime sieves and prime factors."""

from __future__ import annotations

from math import isqrt


def power(x, y: int):
    """Return ``x`` raised to the non-negative integer ``y`` by repeated squaring."""
    if y < 0:
        raise ValueError("exponent must not be negative")
    result = 1
    base = x
    while y:
        if y & 1:
            result *= base
        base *= base
        y >>= 1
    return result


def is_prime(n: int) -> bool:
    """Whether ``n`` is prime, by trial division up to its square root."""
    if n < 2:
        return False
    return all(n % divisor for divisor in range(2, isqrt(n) + 1))


def divisors(n: int) -> list[int]:
    """All positive divisors of ``n`` in ascending order; empty for ``n < 1``."""
    if n < 1:
        return []
    small: list[int] = []
    large: list[int] = []
    for candidate in range(1, isqrt(n) + 1):
        if n % candidate == 0:
            small.append(candidate)
            partner = n // candidate
            if partner != candidate:
                large.append(partner)
    return small + large[::-1]


def primes_up_to(n: int) -> list[int]:
    """All primes ``<= n`` by the sieve of Eratosthenes."""
    if n < 2:
        return []
    sieve = bytearray([1]) * (n + 1)
    sieve[0] = sieve[1] = 0
    for candidate in range(2, isqrt(n) + 1):
        if sieve[candidate]:
            multiples = range(candidate * candidate, n + 1, candidate)
            sieve[candidate * candidate :: candidate] = bytes(len(multiples))
    return [number for number, flag in enumerate(sieve) if flag]


def prime_factors(n: int) -> list[int]:
    """The distinct prime factors of ``n`` in ascending order."""
    factors: list[int] = []
    candidate = 2
    while candidate * candidate <= n:
        if n % candidate == 0:
            factors.append(candidate)
            while n % candidate == 0:
                n //= candidate
        candidate += 1
    if n > 1:
        factors.append(n)
    return factors