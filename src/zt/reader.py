"""
Transparent decoding of possibly-compressed byte streams.

Usage:
    with new_reader(sock.makefile("rb")) as r:
        data = r.read()

The first 4 bytes of the source pick the decoder (gzip, zstd, bzip2).
Anything else, including inputs shorter than 4 bytes, is forwarded as-is.

Detection is best effort: a plain stream that happens to start with a
known magic number will be handed to that decoder and fail there.
"""
from __future__ import annotations

import bz2
import gzip
import io
import logging
import zlib
from typing import BinaryIO, Optional

import zstandard as zstd

from zt.closer import CloseAction, DecodingReader
from zt.config import Config
from zt.exceptions import DecoderError
from zt.peek import read_header
from zt.replay import ReplayReader
from zt.sniff import MIN_BYTES, Format, detect_format

logger = logging.getLogger(__name__)


def new_reader(source: BinaryIO, config: Optional[Config] = None) -> DecodingReader:
    """
    Return a reader over ``source`` that decodes it if it is compressed
    with a supported algorithm, or forwards it unchanged otherwise.

    Up to 4 bytes are consumed from ``source`` before this returns.

    Raises:
        ReaderError: the source failed while the header was read
        DecoderError: the detected decoder rejected the stream
    """
    config = config or Config()
    header = read_header(source, MIN_BYTES)
    if header.eof:
        # Whole content is already in hand; the source is not read again.
        logger.debug(f"Short input ({len(header)} bytes), passing through")
        return DecodingReader(ReplayReader(source, header.data, source_eof=True))

    fmt = detect_format(header.data)
    logger.debug(f"Detected {fmt.value} stream")
    return _open_decoder(fmt, ReplayReader(source, header.data), config)


def _open_decoder(fmt: Format, replay: ReplayReader, config: Config) -> DecodingReader:
    if fmt is Format.GZIP:
        return DecodingReader(_open_gzip(replay), CloseAction.DELEGATE, fmt)
    if fmt is Format.ZSTD:
        return DecodingReader(_open_zstd(replay, config), CloseAction.RELEASE, fmt)
    if fmt is Format.BZIP2:
        # BZ2File holds no resource beyond the replay reader.
        return DecodingReader(bz2.BZ2File(replay, mode="rb"), CloseAction.NONE, fmt)
    return DecodingReader(replay)


def _open_gzip(replay: ReplayReader) -> gzip.GzipFile:
    gz = gzip.GzipFile(fileobj=replay, mode="rb")
    try:
        # GzipFile parses lazily; peek forces the member header through
        # the decoder now. Peeked bytes stay buffered for the first read.
        gz.peek(1)
    except (OSError, EOFError, zlib.error) as exc:
        gz.close()
        logger.error(f"gzip decoder rejected stream: {exc}")
        raise DecoderError(f"error from underlying gzip reader: {exc}", Format.GZIP.value) from exc
    return gz


def _open_zstd(replay: ReplayReader, config: Config) -> zstd.ZstdDecompressionReader:
    try:
        dctx = zstd.ZstdDecompressor(max_window_size=config.zstd.max_window_size)
        return dctx.stream_reader(
            replay,
            read_size=config.zstd.read_size,
            read_across_frames=config.zstd.read_across_frames,
            closefd=False,
        )
    except zstd.ZstdError as exc:
        logger.error(f"zstd decoder rejected stream: {exc}")
        raise DecoderError(f"error from underlying zstd reader: {exc}", Format.ZSTD.value) from exc


def decompress(data: bytes, config: Optional[Config] = None) -> bytes:
    """Decode ``data`` in one shot, or return it unchanged if uncompressed."""
    with new_reader(io.BytesIO(data), config) as r:
        return r.read()


def copy_stream(source: BinaryIO, dest: BinaryIO, config: Optional[Config] = None) -> int:
    """
    Write the decoded content of ``source`` to ``dest``.

    Returns the number of bytes written. Neither stream is closed.
    """
    config = config or Config()
    total = 0
    with new_reader(source, config) as r:
        while True:
            chunk = r.read(config.chunk_size)
            if not chunk:
                break
            dest.write(chunk)
            total += len(chunk)
    logger.debug(f"Copied {total} decoded bytes")
    return total
