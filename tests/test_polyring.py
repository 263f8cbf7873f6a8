import pytest

from nwcmul.polyring import (
    BITS_PER_PART,
    hex_to_words,
    hexval,
    monomial_from_exponent,
    poly_add,
    poly_div_scalar,
    poly_mul,
    poly_mul_by_x_power,
    poly_pow,
    poly_sub,
    propagate_carries,
    read_line,
)


def test_poly_add_basic():
    assert poly_add([1, 2, 3], [4, 5, 6]) == [5, 7, 9]


def test_poly_add_cancels():
    assert poly_add([-5, 0, 10], [5, 0, -10]) == [0, 0, 0]


def test_poly_add_size_mismatch():
    with pytest.raises(ValueError):
        poly_add([1, 2], [1, 2, 3])


def test_poly_sub_basic():
    assert poly_sub([5, 7, 9], [1, 2, 3]) == [4, 5, 6]


def test_poly_sub_negative():
    assert poly_sub([0, 0, 0], [1, -2, 3]) == [-1, 2, -3]


def test_poly_sub_size_mismatch():
    with pytest.raises(ValueError):
        poly_sub([1], [1, 2])


def test_poly_add_sub_round_trip():
    f = [3, -8, 12, 0, 7]
    g = [-1, 4, 4, 9, -2]
    assert poly_sub(poly_add(f, g), g) == f


def test_poly_mul_basic():
    assert poly_mul([1, 2], [3, 4], 3) == [3, 10, 8, 0, 0, 0]


def test_poly_mul_wrap():
    assert poly_mul([1, 0, 0, 1], [1, 0, 1], 2) == [1, -1, 1, 1]


def test_poly_mul_constant():
    expect = [0] * 10
    expect[0] = 35
    assert poly_mul([5], [7], 5) == expect


def test_poly_mul_commutative():
    f = [1, -2, 3, 4]
    g = [5, 0, -1, 2]
    assert poly_mul(f, g, 2) == poly_mul(g, f, 2)


def test_poly_pow_constant():
    expect = [0] * 8
    expect[0] = 1024
    assert poly_pow([2], 10, 4) == expect


def test_poly_pow_binomial():
    expect = [0] * 20
    expect[0:4] = [1, 3, 3, 1]
    assert poly_pow([1, 1], 3, 10) == expect


def test_poly_pow_matches_repeated_multiplication():
    base = [1, 2, 0, -1]
    m = 2
    acc = [1, 0, 0, 0]
    for _ in range(5):
        acc = poly_mul(acc, base, m)
    assert poly_pow(base, 5, m) == acc


def test_poly_pow_zero_exponent_is_one():
    assert poly_pow([4, 5, 6, 7], 0, 2) == [1, 0, 0, 0]


def test_poly_div_scalar_exact():
    assert poly_div_scalar([4, 8, 12], 4) == [1, 2, 3]


def test_poly_div_scalar_non_exact():
    with pytest.raises(ValueError):
        poly_div_scalar([3, 2], 2)


def test_poly_div_scalar_by_zero():
    with pytest.raises(ValueError):
        poly_div_scalar([0], 0)


def test_poly_div_scalar_negative_round_trip():
    f = [-6, 9, -12, 0]
    assert poly_div_scalar([c * -3 for c in f], -3) == f


def test_monomial_small_exponent():
    expect = [0] * 6
    expect[2] = 1
    assert monomial_from_exponent(2, 6) == expect


def test_monomial_wraps_negative():
    expect = [0] * 6
    expect[1] = -1
    assert monomial_from_exponent(7, 6) == expect


def test_monomial_wraps_positive():
    expect = [0] * 6
    expect[0] = 1
    assert monomial_from_exponent(12, 6) == expect


def test_mul_by_x_power_matches_poly_mul():
    m = 3
    p = [1, -2, 3, 0, 5, -6]
    for power in range(0, 15):
        monomial = monomial_from_exponent(power, 2 * m)
        assert poly_mul_by_x_power(p, power, m) == poly_mul(p, monomial, m)


def test_mul_by_x_power_full_turn_negates():
    p = [1, 2, 3, 4]
    assert poly_mul_by_x_power(p, 4, 2) == [-1, -2, -3, -4]


def test_mul_by_x_power_requires_padding():
    with pytest.raises(ValueError):
        poly_mul_by_x_power([1, 2, 3], 1, 2)


def test_propagate_carries_positive():
    assert propagate_carries([15, 9], 10) == [5, 0, 1]


def test_propagate_carries_negative_borrow():
    assert propagate_carries([25, -7], 10) == [5, 5, -1]


def test_propagate_carries_noop():
    assert propagate_carries([3, 4, 5], 10) == [3, 4, 5]


def test_propagate_carries_preserves_value():
    base = 1 << BITS_PER_PART
    h = [70000, 123456, 5, 99999]
    value = sum(c * base**i for i, c in enumerate(h))
    out = propagate_carries(h, base)
    assert sum(c * base**i for i, c in enumerate(out)) == value
    assert all(0 <= c < base for c in out)


def test_propagate_carries_does_not_mutate_input():
    h = [15, 9]
    propagate_carries(h, 10)
    assert h == [15, 9]


def test_hexval_digits():
    assert [hexval(c) for c in "09afAF"] == [0, 9, 10, 15, 10, 15]


def test_hexval_invalid():
    with pytest.raises(ValueError):
        hexval("g")


def test_hex_to_words_orders_least_significant_first():
    assert hex_to_words("00010002") == [2, 1]


def test_hex_to_words_pads_on_the_left():
    text = "abcde"
    words = hex_to_words(text)
    assert len(words) == 2
    assert sum(w << (BITS_PER_PART * i) for i, w in enumerate(words)) == int(text, 16)


def test_hex_to_words_invalid_digit():
    with pytest.raises(ValueError):
        hex_to_words("12z4")


def test_read_line_returns_requested_line(tmp_path):
    path = tmp_path / "numbers.txt"
    path.write_text("first\nsecond\nthird\n", encoding="utf-8")
    assert read_line(path, 0) == "first"
    assert read_line(path, 2) == "third"


def test_read_line_missing_line(tmp_path):
    path = tmp_path / "numbers.txt"
    path.write_text("only\n", encoding="utf-8")
    with pytest.raises(OSError):
        read_line(path, 3)


def test_read_line_missing_file(tmp_path):
    with pytest.raises(OSError):
        read_line(tmp_path / "absent.txt", 0)