"""zt: transparent decoding of compressed byte streams.

Sniffs the first 4 bytes of a stream and decodes it when it is gzip,
zstd or bzip2 compressed. Anything else is forwarded unchanged, so
callers never need to know in advance how the stream was produced.

The source is read once and never rewound: the bytes used for detection
are replayed to whichever decoder (or pass-through) gets the stream.
"""
from zt.closer import CloseAction, DecodingReader
from zt.config import Config, ZstdConfig
from zt.exceptions import CloseError, DecoderError, ReaderError, ZTError
from zt.peek import Header, read_header
from zt.reader import copy_stream, decompress, new_reader
from zt.replay import ReplayReader, ReplayState
from zt.sniff import MIN_BYTES, SIGNATURES, Format, detect_format

__all__ = [
    "new_reader", "decompress", "copy_stream",
    "detect_format", "Format", "SIGNATURES", "MIN_BYTES",
    "read_header", "Header",
    "ReplayReader", "ReplayState",
    "DecodingReader", "CloseAction",
    "Config", "ZstdConfig",
    "ZTError", "ReaderError", "DecoderError", "CloseError",
]
