"""
Uniform closeable stream over heterogeneous decoders.

Decoders disagree on what closing means: some can fail, some only free
working memory, some hold nothing at all. CloseAction names those cases
and DecodingReader applies the right one.
"""
from __future__ import annotations

import io
from enum import Enum
from typing import BinaryIO

from zt.exceptions import CloseError
from zt.sniff import Format


class CloseAction(str, Enum):
    NONE = "none"          # nothing to release
    DELEGATE = "delegate"  # inner close may fail; failures become CloseError
    RELEASE = "release"    # inner close frees decoder memory and cannot fail


class DecodingReader(io.RawIOBase):
    """Readable stream returned by :func:`zt.new_reader`.

    Reads go straight to ``inner``. The first call to ``close`` runs the
    close action; later calls do nothing. The source the stream was built
    from is never closed here.
    """

    def __init__(
        self,
        inner: BinaryIO,
        action: CloseAction = CloseAction.NONE,
        fmt: Format = Format.NONE,
    ) -> None:
        super().__init__()
        self._inner = inner
        self._action = action
        self._format = fmt

    @property
    def format(self) -> Format:
        return self._format

    @property
    def close_action(self) -> CloseAction:
        return self._action

    def readable(self) -> bool:
        return True

    def readinto(self, b) -> int:
        if self.closed:
            raise ValueError("I/O operation on closed file")
        return self._inner.readinto(b)

    def close(self) -> None:
        if self.closed:
            return
        try:
            self._release()
        finally:
            super().close()

    def _release(self) -> None:
        if self._action is CloseAction.NONE:
            return
        if self._action is CloseAction.RELEASE:
            self._inner.close()
            return
        try:
            self._inner.close()
        except Exception as exc:
            raise CloseError(f"error closing: {exc}") from exc

    def __repr__(self) -> str:
        return f"DecodingReader(format={self._format.value!r}, action={self._action.value!r})"
