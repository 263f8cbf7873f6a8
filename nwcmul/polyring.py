"""Arithmetic in R = Z[x]/(x^{2m} + 1) and helpers for big-number word vectors."""

from __future__ import annotations

from collections.abc import Sequence
from os import PathLike

HEX_DIGITS_PER_WORD = 4
NIBBLE_SHIFT = 4
BITS_PER_PART = HEX_DIGITS_PER_WORD * NIBBLE_SHIFT

_HEX_DIGITS = "0123456789abcdef"


def hexval(c: str) -> int:
    """Return the value of a single hexadecimal digit."""
    if len(c) == 1:
        index = _HEX_DIGITS.find(c.lower())
        if index >= 0:
            return index
    raise ValueError(f"Invalid hex digit: {c!r}")


def hex_to_words(text: str) -> list[int]:
    """Split a hexadecimal string into 16-bit words, least significant first."""
    remainder = len(text) % HEX_DIGITS_PER_WORD
    if remainder:
        text = "0" * (HEX_DIGITS_PER_WORD - remainder) + text

    words = []
    for start in range(0, len(text), HEX_DIGITS_PER_WORD):
        value = 0
        for digit in text[start:start + HEX_DIGITS_PER_WORD]:
            value = (value << NIBBLE_SHIFT) | hexval(digit)
        words.append(value)
    words.reverse()
    return words


def read_line(path: str | PathLike, line_index: int) -> str:
    """Return the line at ``line_index`` (zero based) of a text file, without its newline."""
    with open(path, encoding="utf-8", newline="") as handle:
        for counter, line in enumerate(handle):
            if counter == line_index:
                return line[:-1] if line.endswith("\n") else line
    raise OSError(f"I/O error while reading file: no line {line_index} in {path}")


def poly_add(f: Sequence[int], g: Sequence[int]) -> list[int]:
    """Coefficient-wise sum of two polynomials of equal length."""
    if len(f) != len(g):
        raise ValueError("poly_add: Given `f` and `g` have different sizes")
    return [a + b for a, b in zip(f, g)]


def poly_sub(f: Sequence[int], g: Sequence[int]) -> list[int]:
    """Coefficient-wise difference of two polynomials of equal length."""
    if len(f) != len(g):
        raise ValueError("poly_sub: Given `f` and `g` have different sizes")
    return [a - b for a, b in zip(f, g)]


def _reduce(p: Sequence[int], phi_deg: int) -> list[int]:
    """Reduce a polynomial of any length modulo x^phi_deg + 1."""
    result = [0] * phi_deg
    for i, coeff in enumerate(p):
        q, r = divmod(i, phi_deg)
        result[r] += -coeff if q % 2 else coeff
    return result


def poly_mul(f: Sequence[int], g: Sequence[int], m: int) -> list[int]:
    """Product of ``f`` and ``g`` in Z[x]/(x^{2m} + 1), as 2m coefficients."""
    phi_deg = 2 * m
    if phi_deg <= 0:
        raise ValueError("poly_mul: `m` must be positive")
    if not f or not g:
        return [0] * phi_deg
    prod = [0] * (len(f) + len(g) - 1)
    for i, a in enumerate(f):
        if a == 0:
            continue
        for j, b in enumerate(g):
            prod[i + j] += a * b
    return _reduce(prod, phi_deg)


def poly_pow(base: Sequence[int], exp: int, m: int) -> list[int]:
    """Raise ``base`` to the non-negative power ``exp`` in Z[x]/(x^{2m} + 1)."""
    if exp < 0:
        raise ValueError("poly_pow: exponent must be non-negative")
    phi_deg = 2 * m
    if phi_deg <= 0:
        raise ValueError("poly_pow: `m` must be positive")
    cur = _reduce(base, phi_deg)
    result = [0] * phi_deg
    result[0] = 1
    while exp:
        if exp & 1:
            result = poly_mul(result, cur, m)
        exp >>= 1
        if exp:
            cur = poly_mul(cur, cur, m)
    return result


def poly_div_scalar(f: Sequence[int], scalar: int) -> list[int]:
    """Divide every coefficient by ``scalar``; the division must be exact."""
    if scalar == 0:
        raise ValueError("poly_div_scalar: Division by zero in poly_div_scalar")
    result = []
    for coeff in f:
        quotient, remainder = divmod(coeff, scalar)
        if remainder:
            raise ValueError(
                "poly_div_scalar: Non-exact division when computing IFFT "
                "(coeff not divisible by n)"
            )
        result.append(quotient)
    return result


def poly_mul_by_x_power(p: Sequence[int], power: int, m: int) -> list[int]:
    """Multiply a padded polynomial of length 2m by x**power in Z[x]/(x^{2m} + 1)."""
    phi_deg = 2 * m
    if len(p) != phi_deg:
        raise ValueError("mul_by_x_power: Input `p` must be padded to size 2*m")
    wraps, shift = divmod(power, phi_deg)
    overall_sign = 1 if wraps % 2 == 0 else -1
    result = [0] * phi_deg
    for j, coeff in enumerate(p):
        if coeff == 0:
            continue
        position = j + shift
        sign = overall_sign
        if position >= phi_deg:
            position -= phi_deg
            sign = -sign
        result[position] += sign * coeff
    return result


def monomial_from_exponent(exp: int, phi_deg: int) -> list[int]:
    """Return x**exp reduced modulo x^phi_deg + 1, as phi_deg coefficients."""
    if phi_deg <= 0:
        raise ValueError("monomial_from_exponent: `phi_deg` must be positive")
    wraps, reduced = divmod(exp, phi_deg)
    poly = [0] * phi_deg
    poly[reduced] = 1 if wraps % 2 == 0 else -1
    return poly


def propagate_carries(h: Sequence[int], base: int) -> list[int]:
    """Normalise a word vector so every word lies in [0, base), dropping leading zeros."""
    words = list(h)
    words.append(0)

    for i in range(len(words) - 1):
        carry, words[i] = divmod(words[i], base)
        words[i + 1] += carry

    while words and words[-1] >= base:
        carry, words[-1] = divmod(words[-1], base)
        words.append(carry)

    while words and words[-1] == 0:
        words.pop()

    return words