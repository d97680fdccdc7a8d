import random

import pytest

from rscodec.polynomial import evaluate
from rscodec.reedsolomon import (
    PRIMITIVE_POLYNOMIAL_CCSDS,
    DecodeError,
    ReedSolomon,
)

BLOCK_LENGTH = 255
ITERATIONS = 8

_codecs: dict[int, ReedSolomon] = {}


def codec(min_distance: int) -> ReedSolomon:
    if min_distance not in _codecs:
        _codecs[min_distance] = ReedSolomon(PRIMITIVE_POLYNOMIAL_CCSDS, 1, 1, min_distance)
    return _codecs[min_distance]


def run_errors(rs, rng, msg_length, num_errors, num_erasures):
    msg = bytes(rng.randrange(256) for _ in range(msg_length))
    encoded = rs.encode(msg)
    corrupted = bytearray(encoded)
    indices = rng.sample(range(len(encoded)), len(encoded))
    erasures = []
    for index in indices[:num_erasures]:
        corrupted[index] ^= rng.randrange(255) + 1
        erasures.append(index)
    for index in indices[num_erasures:num_erasures + num_errors]:
        corrupted[index] ^= rng.randrange(255) + 1
    return msg, rs.decode(bytes(corrupted), erasures)


def _cases():
    for min_distance in (32, 16, 8, 4):
        message_length = BLOCK_LENGTH - min_distance
        for length in (message_length // 2, message_length):
            for errors, erasures in (
                (0, 0),
                (min_distance // 2, 0),
                (0, min_distance),
                (min_distance // 4, min_distance // 2),
            ):
                yield min_distance, length, errors, erasures


@pytest.mark.parametrize("min_distance,msg_length,num_errors,num_erasures", list(_cases()))
def test_recovers_message(min_distance, msg_length, num_errors, num_erasures):
    rs = codec(min_distance)
    rng = random.Random(min_distance * 1000 + msg_length * 10 + num_errors + num_erasures)
    for _ in range(ITERATIONS):
        msg, decoded = run_errors(rs, rng, msg_length, num_errors, num_erasures)
        assert decoded == msg


def test_encode_is_systematic_with_parity_length():
    rs = codec(16)
    msg = bytes(range(100))
    encoded = rs.encode(msg)
    assert len(encoded) == 116
    assert encoded[:100] == msg


def test_encode_empty_message_has_zero_parity():
    rs = codec(8)
    assert rs.encode(b"") == bytes(8)


def test_encode_is_linear():
    rs = codec(16)
    rng = random.Random(5)
    a = bytes(rng.randrange(256) for _ in range(50))
    b = bytes(rng.randrange(256) for _ in range(50))
    xored = bytes(x ^ y for x, y in zip(a, b))
    expected = bytes(x ^ y for x, y in zip(rs.encode(a), rs.encode(b)))
    assert rs.encode(xored) == expected


def test_generator_vanishes_at_its_roots():
    rs = codec(32)
    assert rs.generator.order == 32
    assert rs.generator.coeffs[-1] == 1
    assert [evaluate(rs.field, rs.generator, root) for root in rs.generator_roots] == [0] * 32


def test_clean_block_decodes_unchanged():
    rs = codec(4)
    msg = b"hello reed solomon"
    assert rs.decode(rs.encode(msg)) == msg


def test_message_too_long_raises():
    rs = codec(32)
    with pytest.raises(ValueError):
        rs.encode(bytes(224))


def test_block_too_long_raises():
    rs = codec(32)
    with pytest.raises(ValueError):
        rs.decode(bytes(256))


def test_block_shorter_than_parity_raises():
    rs = codec(32)
    with pytest.raises(ValueError):
        rs.decode(bytes(10))


def test_too_many_erasures_raises():
    rs = codec(4)
    encoded = rs.encode(b"abcdef")
    with pytest.raises(ValueError):
        rs.decode(encoded, [0, 1, 2, 3, 4])


def test_erasure_outside_block_raises():
    rs = codec(4)
    encoded = rs.encode(b"abcdef")
    with pytest.raises(ValueError):
        rs.decode(encoded, [len(encoded)])


def test_too_many_errors_raises_decode_error():
    rs = codec(32)
    rng = random.Random(1234)
    msg = bytes(rng.randrange(256) for _ in range(200))
    corrupted = bytearray(rs.encode(msg))
    for index in rng.sample(range(len(corrupted)), 40):
        corrupted[index] ^= rng.randrange(255) + 1
    with pytest.raises(DecodeError):
        rs.decode(bytes(corrupted))


def test_invalid_num_roots_raises():
    with pytest.raises(ValueError):
        ReedSolomon(PRIMITIVE_POLYNOMIAL_CCSDS, 1, 1, 0)


def test_describe_lists_tables_and_generator():
    rs = ReedSolomon(PRIMITIVE_POLYNOMIAL_CCSDS, 1, 1, 4)
    lines = rs.describe().splitlines()
    assert lines[0] == "  0    1      0    0"
    assert lines[1] == "  1    2      1  255"
    assert "roots: 2, 4, 8, 16" in lines
    generator_line = next(line for line in lines if line.startswith("generator: "))
    assert generator_line.endswith("1*x^4")
    alpha_line = next(line for line in lines if line.startswith("generator (alpha format): "))
    assert alpha_line.startswith("generator (alpha format): alpha^255*x^4")