"""
Compression format detection from magic numbers.

Only the stream prefix is inspected. A stream matching a signature is
not guaranteed to be well-formed for that format; the decoder finds out.
"""
from __future__ import annotations

from enum import Enum
from typing import Callable, List, Tuple


class Format(str, Enum):
    NONE = "none"
    GZIP = "gzip"
    ZSTD = "zstd"
    BZIP2 = "bzip2"


GZIP_MAGIC = b"\x1f\x8b"
ZSTD_MAGIC = b"\x28\xb5\x2f\xfd"
BZIP2_MAGIC = b"BZh"

# Longest magic number in the table; this is how many bytes get sniffed.
MIN_BYTES = 4


def _is_gzip(header: bytes) -> bool:
    return header[:2] == GZIP_MAGIC


def _is_zstd(header: bytes) -> bool:
    return header[:4] == ZSTD_MAGIC


def _is_bzip2(header: bytes) -> bool:
    # 4th byte is the block size level, '1' to '9'
    return (
        len(header) >= 4
        and header[:3] == BZIP2_MAGIC
        and 0x31 <= header[3] <= 0x39
    )


# Checked in order, first match wins.
SIGNATURES: List[Tuple[Format, Callable[[bytes], bool]]] = [
    (Format.GZIP, _is_gzip),
    (Format.ZSTD, _is_zstd),
    (Format.BZIP2, _is_bzip2),
]


def detect_format(header: bytes) -> Format:
    """Identify the compression format from the leading bytes of a stream."""
    header = bytes(header[:MIN_BYTES])
    for fmt, matches in SIGNATURES:
        if matches(header):
            return fmt
    return Format.NONE
