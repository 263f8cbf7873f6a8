"""Positively and negatively wrapped convolutions and fast integer-vector products.

For vectors f, g of n elements:

    h+(x) = f(x) g(x) mod (x^n - 1)
    h-(x) = f(x) g(x) mod (x^n + 1)

The PROU-based functions work with entries in the ring Z[x]/(x^{2m} + 1).
"""

from __future__ import annotations

from collections.abc import Sequence

from .fft import fft, ifft
from .polyring import monomial_from_exponent, poly_mul_by_x_power

_NAIVE_THRESHOLD = 64


def _pad(p: Sequence[int], length: int) -> list[int]:
    padded = list(p[:length])
    padded.extend([0] * (length - len(padded)))
    return padded


def pwc_with_prou(
    f: Sequence[Sequence[int]], g: Sequence[Sequence[int]], w: Sequence[int], m: int
) -> list[list[int]]:
    """Positively wrapped convolution of ``f`` and ``g``; ``w`` must be an n-PROU in R."""
    if len(f) != len(g):
        raise ValueError("PWC_with_PROU: Given `f` and `g` have different sizes")

    a = fft(f, w, m)
    b = fft(g, w, m)
    c = [fast_nwc(_pad(x, 2 * m), _pad(y, 2 * m)) for x, y in zip(a, b)]
    return ifft(c, w, m)


def nwc_with_prou(
    f: Sequence[Sequence[int]], g: Sequence[Sequence[int]], w: Sequence[int], m: int
) -> list[list[int]]:
    """Negatively wrapped convolution of ``f`` and ``g``; ``w`` must be a 2n-PROU in R.

    The number of entries n must equal m or 2m.
    """
    if len(f) != len(g):
        raise ValueError("NWC_with_PROU: Given `f` and `g` have different sizes")
    n = len(f)

    if n == m:
        e = 2
    elif n == 2 * m:
        e = 1
    else:
        raise ValueError("NWC_with_PROU: Invalid size relationship between n and m")

    f_prime = [poly_mul_by_x_power(p, i * e, m) for i, p in enumerate(f)]
    g_prime = [poly_mul_by_x_power(p, i * e, m) for i, p in enumerate(g)]

    w_squared = poly_mul_by_x_power(w, e, m)
    h_prime = pwc_with_prou(f_prime, g_prime, w_squared, m)
    return [
        poly_mul_by_x_power(p, (2 * n - 1) * i * e, m) for i, p in enumerate(h_prime)
    ]


def naive_nwc(f: Sequence[int], g: Sequence[int]) -> list[int]:
    """Schoolbook negatively wrapped convolution of two integer vectors."""
    if len(f) != len(g):
        raise ValueError("naive_NWC: Given `f` and `g` have different sizes")
    n = len(f)
    result = [0] * n
    for i, a in enumerate(f):
        if a == 0:
            continue
        for j, b in enumerate(g):
            k = i + j
            if k < n:
                result[k] += a * b
            else:
                result[k - n] -= a * b
    return result


def fast_nwc(f: Sequence[int], g: Sequence[int]) -> list[int]:
    """Negatively wrapped convolution of integer vectors whose length is a power of two."""
    if len(f) != len(g):
        raise ValueError("fast_NWC: Given `f` and `g` have different sizes")
    n = len(f)
    if n & (n - 1):
        raise ValueError("fast_NWC: Given `n` is not a power of 2")

    if n <= _NAIVE_THRESHOLD:
        return naive_nwc(f, g)

    l = n.bit_length() - 1
    m = 1 << (l // 2)
    k = 1 << ((l + 1) // 2)

    f_tilde = [list(f[i * m:(i + 1) * m]) + [0] * m for i in range(k)]
    g_tilde = [list(g[i * m:(i + 1) * m]) + [0] * m for i in range(k)]

    # l even: k = m and w = x^2; l odd: k = 2m and w = x.
    w = monomial_from_exponent(2 if l % 2 == 0 else 1, 2 * m)

    h_tilde = nwc_with_prou(f_tilde, g_tilde, w, m)

    h = [0] * n
    for i, poly in enumerate(h_tilde):
        for j, coeff in enumerate(poly):
            if coeff == 0:
                continue
            wraps, position = divmod(i * m + j, n)
            h[position] += -coeff if wraps % 2 else coeff
    return h


def full_product(f: Sequence[int], g: Sequence[int]) -> list[int]:
    """Full (non-wrapped) product of two integer vectors of equal power-of-two length."""
    n = len(f)
    if len(g) != n:
        raise ValueError("full_product: Given `f` and `g` have different sizes")
    if n == 0:
        return []
    f_padded = list(f) + [0] * n
    g_padded = list(g) + [0] * n
    return fast_nwc(f_padded, g_padded)[: 2 * n - 1]