"""Reed-Solomon encoding and decoding over GF(2^8) with 255-byte blocks."""

from __future__ import annotations

from collections.abc import Iterable
from functools import cached_property

from rscodec.decoding import (
    error_roots_from_locations,
    factorize_error_locator,
    find_error_locations,
    find_error_locator,
    find_error_values,
    find_modified_syndromes,
    find_syndromes,
)
from rscodec.field import BLOCK_SIZE, Field
from rscodec.polynomial import Polynomial, build_exp_lut, from_roots, mod, mul

PRIMITIVE_POLYNOMIAL_CCSDS = 0x187
PRIMITIVE_POLYNOMIAL_8_4_3_2_0 = 0x11D

BLOCK_LENGTH = BLOCK_SIZE
_FIELD_SIZE = BLOCK_SIZE + 1


class DecodeError(ValueError):
    """Raised when a block holds more errors than the code can correct."""


class ReedSolomon:
    """A Reed-Solomon code with ``num_roots`` parity bytes per 255-byte block.

    Shortened blocks are supported: a message shorter than
    ``message_length`` is treated as if padded with leading zeros.
    """

    def __init__(
        self,
        primitive_polynomial: int,
        first_consecutive_root: int,
        generator_root_gap: int,
        num_roots: int,
    ) -> None:
        if not 0 < num_roots < BLOCK_LENGTH:
            raise ValueError(f"num_roots must lie between 1 and {BLOCK_LENGTH - 1}")
        self.field = Field(primitive_polynomial)
        self.block_length = BLOCK_LENGTH
        self.min_distance = num_roots
        self.message_length = self.block_length - self.min_distance
        self.first_consecutive_root = first_consecutive_root
        self.generator_root_gap = generator_root_gap
        self.generator_roots: tuple[int, ...] = tuple(
            self.field.exp[(generator_root_gap * (i + first_consecutive_root)) % BLOCK_SIZE]
            for i in range(num_roots)
        )
        self.generator: Polynomial = from_roots(self.field, self.generator_roots)

    def __repr__(self) -> str:
        return (
            f"ReedSolomon(0x{self.field.primitive_polynomial:x}, "
            f"{self.first_consecutive_root}, {self.generator_root_gap}, "
            f"{self.min_distance})"
        )

    @cached_property
    def _generator_root_exp(self) -> list[list[int]]:
        return [
            build_exp_lut(self.field, root, self.block_length - 1)
            for root in self.generator_roots
        ]

    @cached_property
    def _element_exp(self) -> list[list[int]]:
        # Long enough for any locator (and its product with the erasure locator)
        # that the Berlekamp-Massey step can produce.
        order = 3 * (self.min_distance + 1)
        return [build_exp_lut(self.field, element, order) for element in range(_FIELD_SIZE)]

    def encode(self, msg: bytes) -> bytes:
        """Return ``msg`` followed by its ``min_distance`` parity bytes."""
        msg = bytes(msg)
        if len(msg) > self.message_length:
            raise ValueError(
                f"message of {len(msg)} bytes exceeds {self.message_length} bytes"
            )
        pad_length = self.message_length - len(msg)
        coeffs = [0] * self.min_distance + list(reversed(msg)) + [0] * pad_length
        remainder = mod(self.field, Polynomial(coeffs), self.generator)
        parity = bytes(reversed(remainder.coeffs[: self.min_distance]))
        return msg + parity

    def decode(self, encoded: bytes, erasure_locations: Iterable[int] = ()) -> bytes:
        """Correct errors and erasures in a block and return its message part.

        ``erasure_locations`` are byte indices into ``encoded`` known to be bad.
        Raises DecodeError when the block cannot be corrected.
        """
        encoded = bytes(encoded)
        erasures = list(erasure_locations)
        n = len(encoded)
        if n > self.block_length:
            raise ValueError(f"block of {n} bytes exceeds {self.block_length} bytes")
        if n < self.min_distance:
            raise ValueError(f"block of {n} bytes is shorter than the parity")
        if len(erasures) > self.min_distance:
            raise ValueError(
                f"{len(erasures)} erasures exceed the {self.min_distance} parity bytes"
            )
        for location in erasures:
            if not 0 <= location < n:
                raise ValueError(f"erasure location {location} is outside the block")

        field = self.field
        msg_length = n - self.min_distance
        received = list(reversed(encoded)) + [0] * (self.block_length - n)

        erasure_roots = error_roots_from_locations(
            field, self.generator_root_gap, [n - 1 - location for location in erasures]
        )
        erasure_locator = from_roots(field, erasure_roots)

        syndromes = find_syndromes(field, Polynomial(received), self._generator_root_exp)
        if not any(syndromes):
            return encoded[:msg_length]

        if erasures:
            modified = find_modified_syndromes(
                field, syndromes, erasure_locator, self.min_distance
            )
            search_syndromes = modified[len(erasures):]
        else:
            search_syndromes = syndromes

        locator = find_error_locator(
            field, search_syndromes, self.min_distance, len(erasures)
        )
        locator_log = Polynomial(field.log[c] for c in locator)
        roots = factorize_error_locator(
            field, len(erasures), locator_log, self._element_exp
        )
        if roots is None:
            raise DecodeError("too many errors to correct")

        all_roots = erasure_roots + roots
        full_locator = mul(field, erasure_locator, locator)
        locations = find_error_locations(field, self.generator_root_gap, all_roots)
        values = find_error_values(
            field,
            full_locator,
            all_roots,
            syndromes,
            self.first_consecutive_root,
            self._element_exp,
        )
        for location, value in zip(locations, values):
            if location is None:
                raise DecodeError("error root has no location in the block")
            received[location] ^= value

        return bytes(received[n - 1 - i] for i in range(msg_length))

    def describe(self) -> str:
        """Render the field tables, generator roots and generator polynomial."""
        field = self.field
        lines = [
            f"{i:3d}  {field.exp[i]:3d}    {i:3d}  {field.log[i]:3d}"
            for i in range(_FIELD_SIZE)
        ]
        lines.append("")
        lines.append("roots: " + ", ".join(str(root) for root in self.generator_roots))
        lines.append("")
        lines.append(
            "generator: "
            + " + ".join(f"{c}*x^{i}" for i, c in enumerate(self.generator.coeffs))
        )
        lines.append("")
        lines.append(
            "generator (alpha format): "
            + " + ".join(
                f"alpha^{field.log[c]}*x^{i}"
                for i, c in reversed(list(enumerate(self.generator.coeffs)))
            )
        )
        return "\n".join(lines) + "\n"