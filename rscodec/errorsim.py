"""BPSK channel simulation with additive white noise for testing codes."""

from __future__ import annotations

import math
import random
import sys
from collections.abc import Callable, Iterator, Sequence

_SQRT_2 = math.sqrt(2.0)


def distance(a: bytes, b: bytes) -> int:
    """Number of differing bits between two equally long byte strings."""
    if len(a) != len(b):
        raise ValueError("inputs must have the same length")
    return sum((x ^ y).bit_count() for x, y in zip(a, b))


def gaussian(n: int, sigma: float, rng: random.Random | None = None) -> list[float]:
    """Draw ``n`` samples with the polar Box-Muller method from uniform [0, 1] pairs."""
    rng = random.Random() if rng is None else rng
    res: list[float] = []
    while len(res) < n:
        while True:
            u = rng.random()
            v = rng.random()
            s = u * u + v * v
            if sys.float_info.epsilon < s < 1:
                break
        base = math.sqrt((-2.0 * math.log(s)) / s)
        res.append(u * base * sigma)
        if len(res) < n:
            res.append(v * base * sigma)
    return res


def _bits(data: bytes, n_bits: int) -> Iterator[bool]:
    if n_bits > 8 * len(data):
        raise ValueError("not enough bytes for the requested number of bits")
    for i in range(n_bits):
        yield bool(data[i // 8] & (0x80 >> (i % 8)))


def encode_bpsk(data: bytes, n_syms: int, bpsk_voltage: float) -> list[float]:
    """Map each bit, most significant first, to +voltage or -voltage."""
    return [bpsk_voltage if bit else -bpsk_voltage for bit in _bits(data, n_syms)]


def byte2bit(data: bytes, n_bits: int) -> bytes:
    """Expand bits to one soft byte each: 255 for a one, 0 for a zero."""
    return bytes(255 if bit else 0 for bit in _bits(data, n_bits))


def decode_bpsk(soft: bytes, n_syms: int) -> bytes:
    """Pack hard decisions (soft value above 127) back into bytes."""
    out = bytearray((n_syms + 7) // 8)
    for i, value in enumerate(soft[:n_syms]):
        if value > 127:
            out[i // 8] |= 0x80 >> (i % 8)
    return bytes(out)


def _soft_value(voltage: float, bpsk_voltage: float) -> int:
    rel = voltage / bpsk_voltage
    if rel > 1:
        return 255
    if rel < -1:
        return 0
    return int(127.5 + 127.5 * rel)


def decode_bpsk_soft(voltages: Sequence[float], bpsk_voltage: float) -> bytes:
    """Convert received voltages to soft bytes, 0 meaning a sure zero and 255 a sure one."""
    return bytes(_soft_value(v, bpsk_voltage) for v in voltages)


def log2amp(level: float) -> float:
    """Convert decibels to an amplitude ratio."""
    return math.pow(10.0, level / 10.0)


def amp2log(amplitude: float) -> float:
    """Convert an amplitude ratio to decibels."""
    return 10.0 * math.log10(amplitude)


def sigma_for_eb_n0(eb_n0: float, bpsk_bit_energy: float) -> float:
    """Noise standard deviation for a given Eb/N0 in dB."""
    return math.sqrt(bpsk_bit_energy / (2.0 * log2amp(eb_n0)))


def build_white_noise(
    n_syms: int,
    eb_n0: float,
    bpsk_bit_energy: float,
    rng: random.Random | None = None,
) -> list[float]:
    """Noise samples scaled for the given Eb/N0."""
    return gaussian(n_syms, sigma_for_eb_n0(eb_n0, bpsk_bit_energy), rng)


def add_white_noise(signal: Sequence[float], noise: Sequence[float]) -> list[float]:
    """Add the real part of complex noise of the given magnitude to the signal."""
    return [s + n / _SQRT_2 for s, n in zip(signal, noise, strict=True)]


def test_conv_noise(
    encode: Callable[[bytes], bytes],
    decode: Callable[[bytes], bytes],
    msg: bytes,
    noise: Sequence[float],
    bpsk_voltage: float,
) -> int:
    """Send ``msg`` through encode, a noisy BPSK channel and decode; return bit errors.

    The number of transmitted symbols is the length of ``noise``.
    """
    encoded = encode(msg)
    n_syms = len(noise)
    voltages = encode_bpsk(encoded, n_syms, bpsk_voltage)
    corrupted = add_white_noise(voltages, noise)
    soft = decode_bpsk_soft(corrupted, bpsk_voltage)
    decoded = decode(soft)
    if len(decoded) != len(msg):
        raise ValueError(
            f"expected to decode {len(msg)} bytes, decoded {len(decoded)} bytes instead"
        )
    return distance(msg, decoded)


test_conv_noise.__test__ = False  # type: ignore[attr-defined]