"""Reed-Solomon coding over GF(2^8), with field arithmetic and noise simulation."""

__version__ = "0.1.0"
__all__ = ["decoding", "errorsim", "field", "polynomial", "reedsolomon"]