"""Header capture from one-pass byte sources."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import BinaryIO

from zt.exceptions import ReaderError
from zt.sniff import MIN_BYTES

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Header:
    """Bytes consumed from the source to detect its format.

    ``eof`` is set when the source reported end-of-stream before the
    header was complete; ``data`` is then the whole content of the source.
    """
    data: bytes
    eof: bool = False

    def __len__(self) -> int:
        return len(self.data)

    @property
    def complete(self) -> bool:
        return not self.eof


def read_header(source: BinaryIO, size: int = MIN_BYTES) -> Header:
    """
    Read ``size`` bytes from ``source``, retrying on short reads.

    An empty read is end-of-stream and ends the capture early, which is
    not an error. Any OSError raised by the source is wrapped into a
    ReaderError, and so is a None read from a non-blocking source.
    """
    buf = bytearray()
    while len(buf) < size:
        try:
            chunk = source.read(size - len(buf))
        except OSError as exc:
            logger.error(f"Header read failed after {len(buf)} bytes: {exc}")
            raise ReaderError(f"error from underlying reader: {exc}") from exc
        if chunk is None:
            logger.error(f"Header read got no data from non-blocking source after {len(buf)} bytes")
            raise ReaderError("error from underlying reader: non-blocking source has no data ready")
        if not chunk:
            return Header(bytes(buf), eof=True)
        buf += chunk
    return Header(bytes(buf))
