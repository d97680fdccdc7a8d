"""Polynomials over GF(2^8), stored lowest order coefficient first."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

from rscodec.field import Field


@dataclass
class Polynomial:
    """A polynomial whose coefficient ``coeffs[i]`` multiplies ``x^i``."""

    coeffs: list[int]

    def __init__(self, coeffs: Iterable[int]) -> None:
        self.coeffs = list(coeffs)
        if not self.coeffs:
            raise ValueError("a polynomial needs at least one coefficient")

    @property
    def order(self) -> int:
        return len(self.coeffs) - 1

    @classmethod
    def zeros(cls, order: int) -> Polynomial:
        if order < 0:
            raise ValueError("order must not be negative")
        return cls([0] * (order + 1))

    def __len__(self) -> int:
        return len(self.coeffs)

    def __getitem__(self, index: int) -> int:
        return self.coeffs[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self.coeffs)


def mul(
    field: Field, left: Polynomial, right: Polynomial, order: int | None = None
) -> Polynomial:
    """Multiply two polynomials, keeping terms up to ``order`` (mod x^(order+1))."""
    if order is None:
        order = left.order + right.order
    res = [0] * (order + 1)
    for i, lc in enumerate(left.coeffs[: order + 1]):
        if lc == 0:
            continue
        for j, rc in enumerate(right.coeffs[: order + 1 - i]):
            res[i + j] ^= field.mul(lc, rc)
    return Polynomial(res)


def mod(field: Field, dividend: Polynomial, divisor: Polynomial) -> Polynomial:
    """Return the remainder of long division, with the dividend's length."""
    lead = divisor.coeffs[-1]
    if lead == 0:
        raise ValueError("divisor must have a nonzero leading coefficient")
    lead_log = field.log[lead]
    rem = list(dividend.coeffs)
    for i in range(dividend.order, 0, -1):
        if i < divisor.order:
            break
        if rem[i] == 0:
            continue
        q_order = i - divisor.order
        q_log = field.div_log(field.log[rem[i]], lead_log)
        for j, c in enumerate(divisor.coeffs):
            if c:
                rem[j + q_order] ^= field.mul_log_element(field.log[c], q_log)
    return Polynomial(rem)


def formal_derivative(field: Field, poly: Polynomial) -> Polynomial:
    """Return the formal derivative, where n*a means a added to itself n times."""
    if poly.order == 0:
        return Polynomial([0])
    return Polynomial(
        field.sum(c, power) for power, c in enumerate(poly.coeffs[1:], start=1)
    )


def evaluate(field: Field, poly: Polynomial, val: int) -> int:
    """Evaluate ``poly`` at the field element ``val``."""
    if val == 0:
        return poly.coeffs[0]
    res = 0
    val_exponentiated = field.log[1]
    val_log = field.log[val]
    for c in poly:
        if c:
            res ^= field.mul_log_element(field.log[c], val_exponentiated)
        val_exponentiated = field.mul_log(val_exponentiated, val_log)
    return res


def _check_lut(poly: Polynomial, val_exp: Sequence[int]) -> None:
    if len(val_exp) < len(poly):
        raise ValueError("lookup table is shorter than the polynomial")


def eval_lut(field: Field, poly: Polynomial, val_exp: Sequence[int]) -> int:
    """Evaluate ``poly`` using precomputed logarithms of successive powers of a value."""
    _check_lut(poly, val_exp)
    if val_exp[0] == 0:
        return poly.coeffs[0]
    res = 0
    for c, e in zip(poly.coeffs, val_exp):
        if c:
            res ^= field.mul_log_element(field.log[c], e)
    return res


def eval_log_lut(field: Field, poly_log: Polynomial, val_exp: Sequence[int]) -> int:
    """Evaluate a polynomial whose coefficients are logarithms (0 meaning a zero term)."""
    _check_lut(poly_log, val_exp)
    if val_exp[0] == 0:
        first = poly_log.coeffs[0]
        return field.exp[first] if first else 0
    res = 0
    for c, e in zip(poly_log.coeffs, val_exp):
        if c:
            res ^= field.mul_log_element(c, e)
    return res


def build_exp_lut(field: Field, val: int, order: int) -> list[int]:
    """Logarithms of val^0 .. val^order, or all zeros when ``val`` is zero."""
    if val == 0:
        return [0] * (order + 1)
    table = []
    val_exponentiated = field.log[1]
    val_log = field.log[val]
    for _ in range(order + 1):
        table.append(val_exponentiated)
        val_exponentiated = field.mul_log(val_exponentiated, val_log)
    return table


def from_roots(field: Field, roots: Iterable[int]) -> Polynomial:
    """Expand the product of (x + root) over all roots."""
    poly = Polynomial([1])
    for root in roots:
        poly = mul(field, Polynomial([root, 1]), poly)
    return poly