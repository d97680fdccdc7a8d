[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "rscodec"
version = "0.1.0"
description = "Reed-Solomon error correction over GF(2^8), with GF(256) arithmetic and channel-noise simulation helpers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "reed-solomon",
    "error-correction",
    "fec",
    "galois-field",
    "gf256",
    "erasures",
    "bpsk",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Telecommunications Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rscodec-primitive-polys = "rscodec.field:main"

[tool.setuptools.packages.find]
include = ["rscodec*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
