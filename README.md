# rscodec

Reed-Solomon forward error correction over GF(2^8), in pure Python with no
third-party dependencies.

The package contains:

- `rscodec.reedsolomon.ReedSolomon`: a systematic Reed-Solomon encoder and
  decoder with a 255-byte block length. It corrects errors, erasures, or a
  mix of the two, and accepts shortened blocks.
- `rscodec.decoding`: the individual decoding steps (syndromes,
  Berlekamp-Massey, Chien search, Forney error values, erasure handling).
- `rscodec.field.Field`: arithmetic in GF(256) for a given primitive
  polynomial.
- `rscodec.polynomial`: polynomial arithmetic over that field.
- `rscodec.errorsim`: helpers for simulating a noisy BPSK channel. They
  map bits to voltages, add white Gaussian noise for a given Eb/N0 and
  count bit errors.

## Installation

```
pip install .
```

To install with the test requirements and run the tests:

```
pip install .[test]
pytest
```

## Encoding and decoding

```python
from rscodec.reedsolomon import ReedSolomon, DecodeError

# Primitive polynomial x^8 + x^7 + x^2 + x + 1, first consecutive root 1,
# root gap 1, 32 parity symbols: an RS(255, 223) code.
rs = ReedSolomon(0x187, 1, 1, 32)

message = b"hello, reed-solomon"
block = rs.encode(message)        # message bytes followed by 32 parity bytes

damaged = bytearray(block)
damaged[0] ^= 0xFF
damaged[5] ^= 0x10

assert rs.decode(bytes(damaged)) == message
```

A code with `num_roots` parity symbols can correct up to `num_roots // 2`
unknown errors. When the unreliable byte positions are known, pass them as
erasures. Up to `num_roots` erasures can be recovered, and each erasure costs
half as much as an unknown error:

```python
damaged = bytearray(block)
for position in (1, 2, 3):
    damaged[position] = 0

assert rs.decode(bytes(damaged), [1, 2, 3]) == message
```

If a block has more damage than the code can correct, `decode` raises
`DecodeError` (a subclass of `ValueError`). Blocks longer than 255 bytes or
shorter than the parity, more erasures than parity bytes, erasure positions
outside the block, and messages longer than the code's message length all
raise `ValueError`.

`rs.describe()` returns a text dump of the code's setup: the field's exp and
log tables, the generator roots, and the generator polynomial in element and
in alpha form. It is meant for debugging.

## Field arithmetic

```python
from rscodec.field import Field

gf = Field(0x187)
product = gf.mul(0x53, 0xCA)
assert gf.div(product, 0xCA) == 0x53
assert gf.add(7, 7) == 0
```

`Field` raises `ValueError` when given a polynomial that is not primitive.

## Finding primitive polynomials

The `rscodec-primitive-polys` command lists every degree-8 polynomial that
generates all 255 non-zero elements of GF(256), printing each in hexadecimal
and in algebraic form:

```
rscodec-primitive-polys
```

The same search is available from Python through
`rscodec.field.find_primitive_polynomials()`, `rscodec.field.try_poly()` and
`rscodec.field.format_polynomial()`.

## Channel simulation

`rscodec.errorsim` contains the pieces needed to measure a code's bit error
rate over an additive white Gaussian noise channel. `sigma_for_eb_n0` and
`build_white_noise` produce noise for a given Eb/N0 in dB. `encode_bpsk`,
`add_white_noise` and `decode_bpsk_soft` model the channel itself, and
`distance` counts the bits that differ between two byte strings.
`test_conv_noise` chains these steps for any encode/decode pair of callables
and returns the number of bit errors.

## What is not included

The package has no convolutional encoder or Viterbi decoder. The channel
simulation helpers work with any encode and decode functions you supply, but
no such soft-decision code ships with the package.