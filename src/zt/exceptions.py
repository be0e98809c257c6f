"""zt exceptions."""


class ZTError(Exception):
    """Base exception."""


class ReaderError(ZTError):
    """Reading the stream header from the underlying source failed."""


class DecoderError(ZTError):
    """A decoder rejected the stream while it was being constructed."""

    def __init__(self, message: str, fmt: str = "") -> None:
        super().__init__(message)
        self.format = fmt


class CloseError(ZTError):
    """Releasing a decoder failed."""
