"""
Replay of consumed header bytes in front of a one-pass source.

Detecting the format means reading bytes the source cannot give back.
ReplayReader hands them out again before forwarding to the source, so
whatever consumes it sees the stream from its first byte.
"""
from __future__ import annotations

import io
import logging
from enum import Enum
from typing import BinaryIO, Optional

from zt.exceptions import ReaderError

logger = logging.getLogger(__name__)


class ReplayState(str, Enum):
    BUFFERING = "buffering"
    FORWARDING = "forwarding"
    DRAINED = "drained"


class ReplayReader(io.RawIOBase):
    """Raw reader yielding ``header`` and then the rest of ``source``.

    States only move forward:
        BUFFERING -> FORWARDING   header replayed, source still live
        BUFFERING -> DRAINED      header replayed, source already at EOF
        FORWARDING -> DRAINED     source reported EOF

    ``source_eof`` tells the reader the source has already reported
    end-of-stream, so it is never read again. Closing the reader leaves
    the source open. Bytes a source returns beyond the size requested are
    held back and served by the next read. Only blocking sources are
    supported: a read returning None raises ReaderError.
    """

    def __init__(self, source: BinaryIO, header: bytes, source_eof: bool = False) -> None:
        super().__init__()
        self._source = source
        self._source_eof = source_eof
        self._header: Optional[bytes] = bytes(header)
        self._offset = 0
        self._pending = b""
        self._state = ReplayState.BUFFERING
        if not self._header:
            self._finish_replay()

    @property
    def state(self) -> ReplayState:
        return self._state

    def readable(self) -> bool:
        return True

    def readinto(self, b) -> int:
        if self.closed:
            raise ValueError("I/O operation on closed file")
        if self._state is ReplayState.BUFFERING:
            return self._replay_into(b)
        if self._state is ReplayState.DRAINED:
            return 0
        return self._forward_into(b)

    def _replay_into(self, b) -> int:
        view = memoryview(b).cast("B")
        chunk = self._header[self._offset:self._offset + len(view)]
        n = len(chunk)
        view[:n] = chunk
        self._offset += n
        if self._offset == len(self._header):
            self._finish_replay()
        return n

    def _forward_into(self, b) -> int:
        view = memoryview(b).cast("B")
        if not view:
            return 0
        if self._pending:
            data, self._pending = self._pending, b""
        else:
            data = self._source.read(len(view))
            if data is None:
                raise ReaderError("error from underlying reader: non-blocking source has no data ready")
            if not data:
                self._state = ReplayState.DRAINED
                logger.debug("Source exhausted, now drained")
                return 0
        n = min(len(data), len(view))
        view[:n] = data[:n]
        # Keep anything the source returned beyond the request.
        self._pending = bytes(data[n:])
        return n

    def _finish_replay(self) -> None:
        self._header = None
        if self._source_eof:
            self._state = ReplayState.DRAINED
        else:
            self._state = ReplayState.FORWARDING
        logger.debug(f"Header replayed ({self._offset} bytes), now {self._state.value}")
