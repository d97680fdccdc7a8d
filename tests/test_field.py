import pytest

from rscodec.field import (
    Field,
    find_primitive_polynomials,
    format_polynomial,
    main,
    try_poly,
)

POLYS = find_primitive_polynomials()
FIELD = Field(POLYS[0])
NONZERO = range(1, 256)


def test_every_found_polynomial_passes_try_poly():
    assert POLYS
    assert all(try_poly(p) for p in POLYS)
    assert all(256 <= p < 512 for p in POLYS)
    assert POLYS == sorted(POLYS)


def test_degenerate_polynomial_is_rejected():
    assert try_poly(256) is False
    with pytest.raises(ValueError):
        Field(256)


def test_format_polynomial():
    assert format_polynomial(0x11D) == "x^8 + x^4 + x^3 + x^2 + 1"


def test_format_polynomial_starts_with_leading_term():
    for poly in POLYS:
        text = format_polynomial(poly)
        assert text.startswith("x^8")
        assert text.endswith("1")


def test_exp_log_consistency():
    assert FIELD.log[1] == 255
    assert FIELD.log[0] == 0
    for x in NONZERO:
        assert FIELD.exp[FIELD.log[x]] == x
    assert sorted(FIELD.exp[1:256]) == list(NONZERO)


def test_add_and_sub_are_xor():
    assert FIELD.add(7, 7) == 0
    assert FIELD.sub(FIELD.add(13, 200), 200) == 13


def test_mul_div_roundtrip():
    for a in (1, 2, 3, 77, 255):
        for b in NONZERO:
            product = FIELD.mul(a, b)
            assert FIELD.div(product, b) == a
            assert FIELD.mul(b, a) == product


def test_mul_by_zero_and_one():
    for a in NONZERO:
        assert FIELD.mul(a, 0) == 0
        assert FIELD.mul(a, 1) == a
        assert FIELD.div(0, a) == 0


def test_div_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        FIELD.div(5, 0)


def test_distributive():
    for a, b, c in ((3, 5, 7), (100, 200, 50), (255, 1, 128)):
        left = FIELD.mul(a, FIELD.add(b, c))
        right = FIELD.add(FIELD.mul(a, b), FIELD.mul(a, c))
        assert left == right


def test_pow():
    for a in NONZERO:
        assert FIELD.pow(a, 255) == 1
        assert FIELD.pow(a, 3) == FIELD.mul(a, FIELD.mul(a, a))
        assert FIELD.pow(a, 0) == 1
    assert FIELD.pow(0, 4) == 0


def test_sum():
    assert FIELD.sum(99, 1) == 99
    assert FIELD.sum(99, 2) == 0
    assert FIELD.sum(99, 5) == 99


def test_log_domain_operations():
    for a in (1, 2, 90, 255):
        for b in (1, 3, 17, 254):
            la, lb = FIELD.log[a], FIELD.log[b]
            assert FIELD.mul_log_element(la, lb) == FIELD.mul(a, b)
            prod_log = FIELD.mul_log(la, lb)
            assert 1 <= prod_log <= 255
            assert FIELD.exp[prod_log] == FIELD.mul(a, b)
            quot_log = FIELD.div_log(la, lb)
            assert 1 <= quot_log <= 255
            assert FIELD.exp[quot_log] == FIELD.div(a, b)


def test_main_lists_each_polynomial(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == len(POLYS)
    assert lines[0] == f"0x{POLYS[0]:x} valid: {format_polynomial(POLYS[0])}"