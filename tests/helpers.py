"""Byte sources with awkward read behaviour, for exercising readers."""
from __future__ import annotations

import io


class OneByteReader:
    """Returns at most one byte per read."""

    def __init__(self, data: bytes) -> None:
        self._buf = io.BytesIO(data)

    def read(self, n: int = -1) -> bytes:
        if n == 0:
            return b""
        return self._buf.read(1)


class HalfReader:
    """Returns half of the requested bytes, rounded up."""

    def __init__(self, data: bytes) -> None:
        self._buf = io.BytesIO(data)

    def read(self, n: int = -1) -> bytes:
        if n is None or n < 0:
            return self._buf.read()
        return self._buf.read((n + 1) // 2)


class StrictReader:
    """Fails on any read after it has reported end-of-stream."""

    def __init__(self, data: bytes) -> None:
        self._buf = io.BytesIO(data)
        self.reads = 0
        self.eof_seen = False

    def read(self, n: int = -1) -> bytes:
        if self.eof_seen:
            raise AssertionError("read after end-of-stream")
        self.reads += 1
        data = self._buf.read(n)
        if not data:
            self.eof_seen = True
        return data


class FailingReader:
    """Yields ``data`` and then raises ``exc``."""

    def __init__(self, data: bytes, exc: Exception) -> None:
        self._buf = io.BytesIO(data)
        self._exc = exc

    def read(self, n: int = -1) -> bytes:
        data = self._buf.read(n)
        if not data:
            raise self._exc
        return data



class GreedyReader:
    """Returns ``size`` bytes per read whatever was asked for."""

    def __init__(self, data: bytes, size: int = 8) -> None:
        self._buf = io.BytesIO(data)
        self._size = size

    def read(self, n: int = -1) -> bytes:
        return self._buf.read(self._size)


class ScriptedReader:
    """Returns the given results in order, then end-of-stream."""

    def __init__(self, *results) -> None:
        self._results = list(results)

    def read(self, n: int = -1):
        if not self._results:
            return b""
        return self._results.pop(0)
