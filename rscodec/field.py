"""Arithmetic in GF(2^8) and a search for primitive polynomials of degree 8."""

from __future__ import annotations

import argparse

BLOCK_SIZE = 255
POWER_MAX = 8


def try_poly(poly: int) -> bool:
    """Return True if ``poly`` generates every nonzero element of GF(2^8)."""
    log = [0] * (BLOCK_SIZE + 1)
    element = 1
    for i in range(1, BLOCK_SIZE + 1):
        element *= 2
        if element > BLOCK_SIZE:
            element ^= poly
        if log[element] != 0:
            return False
        log[element] = i
    return True


def find_primitive_polynomials() -> list[int]:
    """Return every primitive polynomial of degree 8, in ascending order."""
    return [
        poly
        for poly in range(BLOCK_SIZE + 1, (BLOCK_SIZE + 1) << 1)
        if try_poly(poly)
    ]


def _term(power: int) -> str:
    if power > 1:
        return f"x^{power}"
    if power == 1:
        return "x"
    return "1"


def format_polynomial(poly: int) -> str:
    """Render a degree-8 polynomial bit mask as e.g. ``x^8 + x^4 + 1``."""
    return " + ".join(
        _term(power) for power in range(POWER_MAX, -1, -1) if poly & (1 << power)
    )


class Field:
    """GF(2^8) built from a primitive polynomial, with exp/log tables.

    ``log[0]`` is the sentinel 0 and ``log[1]`` is 255, so every nonzero
    element has a logarithm in 1..255. ``exp`` covers indices 0..511 so that
    sums of two logarithms can be looked up without reduction.
    """

    def __init__(self, primitive_polynomial: int) -> None:
        if not try_poly(primitive_polynomial):
            raise ValueError(
                f"0x{primitive_polynomial:x} is not a primitive polynomial"
            )
        self.primitive_polynomial = primitive_polynomial
        exp = [1]
        element = 1
        for _ in range(1, 2 * (BLOCK_SIZE + 1)):
            element <<= 1
            if element > BLOCK_SIZE:
                element ^= primitive_polynomial
            exp.append(element)
        log = [0] * (BLOCK_SIZE + 1)
        for i in range(1, BLOCK_SIZE + 1):
            log[exp[i]] = i
        self.exp: tuple[int, ...] = tuple(exp)
        self.log: tuple[int, ...] = tuple(log)

    def __repr__(self) -> str:
        return f"Field(0x{self.primitive_polynomial:x})"

    @staticmethod
    def add(a: int, b: int) -> int:
        return a ^ b

    @staticmethod
    def sub(a: int, b: int) -> int:
        return a ^ b

    def mul(self, a: int, b: int) -> int:
        if a == 0 or b == 0:
            return 0
        return self.exp[self.log[a] + self.log[b]]

    def div(self, a: int, b: int) -> int:
        if b == 0:
            raise ZeroDivisionError("division by zero in GF(2^8)")
        if a == 0:
            return 0
        return self.exp[self.log[a] + BLOCK_SIZE - self.log[b]]

    def pow(self, element: int, power: int) -> int:
        if power == 0:
            return 1
        if element == 0:
            return 0
        return self.exp[(self.log[element] * power) % BLOCK_SIZE]

    @staticmethod
    def sum(element: int, n: int) -> int:
        """Add ``element`` to itself ``n`` times."""
        return element if n % 2 else 0

    @staticmethod
    def mul_log(a_log: int, b_log: int) -> int:
        """Multiply two elements given as logarithms; result is a logarithm in 1..255."""
        res = a_log + b_log
        return res - BLOCK_SIZE if res > BLOCK_SIZE else res

    @staticmethod
    def div_log(a_log: int, b_log: int) -> int:
        """Divide two elements given as logarithms; result is a logarithm in 1..255."""
        res = a_log - b_log
        return res + BLOCK_SIZE if res <= 0 else res

    def mul_log_element(self, a_log: int, b_log: int) -> int:
        """Multiply two elements given as logarithms; result is an element."""
        return self.exp[a_log + b_log]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="List the primitive polynomials of degree 8."
    )
    parser.parse_args(argv)
    for poly in find_primitive_polynomials():
        print(f"0x{poly:x} valid: {format_polynomial(poly)}")
    return 0