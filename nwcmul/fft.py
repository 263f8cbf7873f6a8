"""Radix-2 number theoretic transform over R = Z[x]/(x^{2m} + 1)."""

from __future__ import annotations

from collections.abc import Sequence

from .polyring import (
    monomial_from_exponent,
    poly_add,
    poly_div_scalar,
    poly_mul,
    poly_pow,
    poly_sub,
)


def _check_power_of_two(n: int, who: str) -> None:
    if n == 0:
        raise ValueError(f"{who}: Given `f` is empty")
    if n & (n - 1):
        raise ValueError(f"{who}: Given `n` is not a power of 2")


def fft(f: Sequence[Sequence[int]], w: Sequence[int], m: int) -> list[list[int]]:
    """Evaluate ``f`` at 1, w, ..., w^{n-1}, where ``w`` is an n-th principal root of unity in R.

    ``f`` holds n elements of R (each 2m coefficients), n a power of two.
    """
    coeffs = list(f)
    n = len(coeffs)
    if n == 1:
        return [list(coeffs[0])]
    _check_power_of_two(n, "FFT")

    w_squared = poly_mul(w, w, m)
    values_even = fft(coeffs[0::2], w_squared, m)
    values_odd = fft(coeffs[1::2], w_squared, m)

    lower: list[list[int]] = []
    upper: list[list[int]] = []
    pow_w = monomial_from_exponent(0, 2 * m)
    for even, odd in zip(values_even, values_odd):
        prod = poly_mul(pow_w, odd, m)
        lower.append(poly_add(even, prod))
        upper.append(poly_sub(even, prod))
        pow_w = poly_mul(pow_w, w, m)

    return lower + upper


def ifft(f: Sequence[Sequence[int]], w: Sequence[int], m: int) -> list[list[int]]:
    """Invert :func:`fft` for the same root of unity ``w``."""
    n = len(f)
    _check_power_of_two(n, "IFFT")

    inv_w = poly_pow(w, n - 1, m)
    return [poly_div_scalar(value, n) for value in fft(f, inv_w, m)]