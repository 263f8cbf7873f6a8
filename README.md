# nwcmul

This package multiplies polynomials and large integers exactly, using
negatively wrapped convolutions (NWC). The arithmetic takes place in the ring
`R = Z[x]/(x^{2m} + 1)`. In that ring the monomial `x` is a principal root of
unity, so the transforms need no floating point and no prime modulus. Python
integers do not overflow, so every coefficient is exact.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `nwcmul.polyring`

This module does arithmetic in `R`. An element of `R` is a list of `2m`
integer coefficients, with the lowest degree first.

- `poly_add(f, g)` and `poly_sub(f, g)` add or subtract coefficient by
  coefficient. The two lengths must be equal.
- `poly_mul(f, g, m)` multiplies and reduces modulo `x^{2m} + 1`. The result
  always has `2m` coefficients.
- `poly_pow(base, exp, m)` raises `base` to a non-negative power by repeated
  squaring.
- `poly_div_scalar(f, scalar)` divides every coefficient by `scalar`. The
  division must be exact.
- `poly_mul_by_x_power(p, power, m)` multiplies by `x**power`. The input `p`
  must have exactly `2m` coefficients.
- `monomial_from_exponent(exp, phi_deg)` returns `x**exp` reduced modulo
  `x^phi_deg + 1`.

The module also has helpers for big numbers that are stored as 16-bit words:

- `hexval(c)` returns the value of one hexadecimal digit.
- `hex_to_words(text)` splits a hexadecimal string into 16-bit words, with the
  least significant word first.
- `read_line(path, line_index)` returns one line of a text file, counted from
  zero, without its newline.
- `propagate_carries(h, base)` normalises a vector of words so that every word
  lies in `[0, base)`, and drops leading zero words.

The constants are `HEX_DIGITS_PER_WORD = 4`, `NIBBLE_SHIFT = 4` and
`BITS_PER_PART = 16`.

### `nwcmul.fft`

- `fft(f, w, m)` evaluates a list of `n` ring elements at
  `1, w, ..., w^{n-1}`. Here `n` is a power of two and `w` is an n-th principal
  root of unity in `R`.
- `ifft(f, w, m)` inverts `fft` for the same `w`.

### `nwcmul.product`

- `naive_nwc(f, g)` is the schoolbook negatively wrapped convolution
  `f(x) g(x) mod (x^n + 1)`.
- `fast_nwc(f, g)` computes the same result for lengths that are a power of
  two. It works recursively over `R` and uses `naive_nwc` for lengths up to 64.
- `pwc_with_prou(f, g, w, m)` computes the positively wrapped convolution of
  two lists of ring elements. Here `w` is an n-th principal root of unity.
- `nwc_with_prou(f, g, w, m)` computes the negatively wrapped convolution of
  two lists of ring elements. Here `w` is a 2n-th principal root of unity, and
  `n` must equal `m` or `2m`.
- `full_product(f, g)` returns the ordinary product, of length `2n - 1`, of two
  vectors of the same length `n`. The length `n` must be a power of two.

Each function returns a new list and does not change its arguments. Invalid
input raises `ValueError`. Examples are mismatched lengths, a length that is not
a power of two, a division that is not exact, and a character that is not a hex
digit. `read_line` raises `OSError` when the file has no such line.

## Example: multiplying big hexadecimal numbers

```python
from nwcmul.polyring import BITS_PER_PART, hex_to_words, propagate_carries
from nwcmul.product import full_product

a = hex_to_words("ffffffffffffffff")   # 4 words, least significant first
b = hex_to_words("123456789abcdef0")
words = propagate_carries(full_product(a, b), 1 << BITS_PER_PART)
```

`words` holds the product in 16-bit words, with the least significant word
first. `full_product` needs a word count that is a power of two. Pad the
shorter number with zero words if you need to.

## Example: negatively wrapped convolution

```python
from nwcmul.product import naive_nwc, fast_nwc

naive_nwc([1, 2, 3], [4, 5, 6])        # [-23, -5, 28]
fast_nwc([1, 2, 3, 4], [5, 6, 7, 8])   # same as naive_nwc([1, 2, 3, 4], [5, 6, 7, 8])
```

## What this package does not do

This package is a library only. It has no command-line program and no timing
harness. To multiply numbers stored in a file, call `read_line`,
`hex_to_words`, `full_product` and `propagate_carries` yourself.