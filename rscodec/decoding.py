"""The steps of Reed-Solomon decoding.

The steps are computing syndromes, finding the error locator (Berlekamp-Massey),
finding its roots (Chien search), computing error values (Forney), and mapping
between roots and byte locations for erasures.
"""

from __future__ import annotations

from collections.abc import Sequence

from rscodec.field import BLOCK_SIZE, Field
from rscodec.polynomial import (
    Polynomial,
    eval_log_lut,
    eval_lut,
    formal_derivative,
    mul,
)

FIELD_SIZE = BLOCK_SIZE + 1


def find_syndromes(
    field: Field, received: Polynomial, generator_root_exp: Sequence[Sequence[int]]
) -> list[int]:
    """Evaluate the received polynomial at each generator root.

    ``generator_root_exp`` holds, for every generator root, the logarithms of
    its successive powers. All syndromes are zero when no error is detected.
    """
    return [eval_lut(field, received, root_exp) for root_exp in generator_root_exp]


def find_error_locator(
    field: Field, syndromes: Sequence[int], min_distance: int, num_erasures: int = 0
) -> Polynomial:
    """Find the shortest LFSR describing the syndromes (Berlekamp-Massey).

    Only the first ``min_distance - num_erasures`` syndromes are used. The
    order of the returned polynomial is the number of errors found.
    """
    if num_erasures < 0 or num_erasures > min_distance:
        raise ValueError("number of erasures must lie between 0 and min_distance")
    steps = min_distance - num_erasures
    if len(syndromes) < steps:
        raise ValueError(f"need at least {steps} syndromes, got {len(syndromes)}")

    size = 2 * (min_distance + 1)
    locator = [0] * size
    locator[0] = 1
    locator_order = 0
    last = list(locator)
    last_order = 0

    num_errors = 0
    last_discrepancy = 1
    delay = 1

    for i in range(steps):
        discrepancy = syndromes[i]
        for j in range(1, num_errors + 1):
            discrepancy ^= field.mul(locator[j], syndromes[i - j])

        if not discrepancy:
            delay += 1
            continue

        if 2 * num_errors <= i:
            # Lengthen the LFSR; the old locator becomes the new "last" one.
            for j in range(last_order, -1, -1):
                last[j + delay] = field.div(
                    field.mul(last[j], discrepancy), last_discrepancy
                )
            for j in range(delay - 1, -1, -1):
                last[j] = 0
            for j in range(last_order + delay + 1):
                previous = locator[j]
                locator[j] ^= last[j]
                last[j] = previous
            locator_order, last_order = last_order + delay, locator_order
            num_errors = i + 1 - num_errors
            last_discrepancy = discrepancy
            delay = 1
            continue

        for j in range(last_order, -1, -1):
            locator[j + delay] ^= field.div(
                field.mul(last[j], discrepancy), last_discrepancy
            )
        locator_order = max(locator_order, last_order + delay)
        delay += 1

    return Polynomial(locator[: locator_order + 1])


def factorize_error_locator(
    field: Field,
    num_skip: int,
    locator_log: Polynomial,
    element_exp: Sequence[Sequence[int]],
) -> list[int] | None:
    """Search every field element for roots of the locator (Chien search).

    ``locator_log`` holds the logarithms of the locator's coefficients, with 0
    marking a zero coefficient. ``num_skip`` is the number of roots the caller
    already holds (erasure roots); those are not part of this locator. Returns
    the roots found in ascending order, or None when their number differs from
    the locator's order, which means there were too many errors to correct.
    """
    if num_skip < 0:
        raise ValueError("num_skip must not be negative")
    if len(element_exp) < FIELD_SIZE:
        raise ValueError("element_exp must cover every field element")
    roots = [
        element
        for element in range(FIELD_SIZE)
        if not eval_log_lut(field, locator_log, element_exp[element])
    ]
    if len(roots) != locator_log.order:
        return None
    return roots


def find_error_evaluator(
    field: Field, locator: Polynomial, syndromes: Sequence[int], order: int
) -> Polynomial:
    """Return S(x) * Lambda(x) mod x^(order + 1), the error evaluator."""
    return mul(field, locator, Polynomial(syndromes), order)


def find_error_values(
    field: Field,
    locator: Polynomial,
    error_roots: Sequence[int],
    syndromes: Sequence[int],
    first_consecutive_root: int,
    element_exp: Sequence[Sequence[int]],
) -> list[int]:
    """Compute the error magnitude at each root of the locator (Forney).

    One value is returned for each of the first ``locator.order`` roots; a
    zero root yields a zero value.
    """
    num_errors = locator.order
    if len(error_roots) < num_errors:
        raise ValueError("fewer error roots than the locator's order")
    evaluator = find_error_evaluator(field, locator, syndromes, len(syndromes) - 1)
    derivative = formal_derivative(field, locator)
    values = []
    for root in error_roots[:num_errors]:
        if root == 0:
            values.append(0)
            continue
        root_exp = element_exp[root]
        ratio = field.div(
            eval_lut(field, evaluator, root_exp),
            eval_lut(field, derivative, root_exp),
        )
        values.append(field.mul(field.pow(root, first_consecutive_root - 1), ratio))
    return values


def find_error_locations(
    field: Field, generator_root_gap: int, error_roots: Sequence[int]
) -> list[int | None]:
    """Turn locator roots into coefficient indices of the received polynomial.

    A zero root, or one with no matching location, gives None.
    """
    element_by_power: dict[int, int] = {}
    for element in range(FIELD_SIZE):
        element_by_power.setdefault(field.pow(element, generator_root_gap), element)

    locations: list[int | None] = []
    for root in error_roots:
        if root == 0:
            locations.append(None)
            continue
        element = element_by_power.get(field.div(1, root))
        # log(1) is stored as 255; as an index it wraps back to 0.
        locations.append(None if element is None else field.log[element] % BLOCK_SIZE)
    return locations


def error_roots_from_locations(
    field: Field, generator_root_gap: int, error_locations: Sequence[int]
) -> list[int]:
    """Turn known coefficient indices (erasures) into locator roots."""
    return [
        field.div(1, field.pow(field.exp[location], generator_root_gap))
        for location in error_locations
    ]


def find_modified_syndromes(
    field: Field,
    syndromes: Sequence[int],
    erasure_locator: Polynomial,
    min_distance: int,
) -> list[int]:
    """Return the first ``min_distance`` coefficients of Gamma(x) * S(x)."""
    if len(syndromes) < min_distance:
        raise ValueError(f"need {min_distance} syndromes, got {len(syndromes)}")
    syndrome_poly = Polynomial(syndromes[:min_distance])
    return mul(field, erasure_locator, syndrome_poly, min_distance - 1).coeffs