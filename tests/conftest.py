from __future__ import annotations

import bz2
import gzip
import io

import pytest
import zstandard

from helpers import HalfReader, OneByteReader


LOREM = (
    b"Lorem ipsum dolor sit amet, consectetur adipiscing elit, sed do eiusmod\n"
    b"tempor incididunt ut labore et dolore magna aliqua. Ut enim ad minim\n"
    b"veniam, quis nostrud exercitation ullamco laboris nisi ut aliquip ex ea\n"
    b"commodo consequat. Duis aute irure dolor in reprehenderit in voluptate\n"
    b"velit esse cillum dolore eu fugiat nulla pariatur. Excepteur sint occaecat\n"
    b"cupidatat non proident, sunt in culpa qui officia deserunt mollit anim id\n"
    b"est laborum.\n"
) * 200


SOURCES = {
    "bytes": io.BytesIO,
    "halfreader": HalfReader,
    "onebytereader": OneByteReader,
}


@pytest.fixture(params=sorted(SOURCES))
def make_source(request):
    return SOURCES[request.param]


# ---------- payloads ----------

@pytest.fixture
def lorem() -> bytes:
    return LOREM


@pytest.fixture
def lorem_gzip() -> bytes:
    return gzip.compress(LOREM)


@pytest.fixture
def lorem_zstd() -> bytes:
    return zstandard.ZstdCompressor(level=3).compress(LOREM)


@pytest.fixture
def lorem_bzip2() -> bytes:
    return bz2.compress(LOREM)
