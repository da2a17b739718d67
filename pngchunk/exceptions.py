"""
Every error raised by the chunk codec is a subclass of PngChunkException,
so callers can catch the whole family at once or branch on the exact kind.

The codec never recovers from these internally: malformed bytes stay
malformed, and it is up to the caller to decide whether e.g. a missing
chunk on removal is a problem.
"""


class PngChunkException(Exception):
    """
    Base class for all exceptions thrown by pngchunk.
    """

    def __init__(self, message=None):
        super().__init__(message)


class InvalidByte(PngChunkException):
    """A chunk type byte is not an ASCII letter."""

    def __init__(self, value: int, message: str | None = None):
        self.value = value
        super().__init__(message or f"invalid chunk type byte: {value:#04x}")


class ReservedBitError(InvalidByte):
    """Strict validation rejected a chunk type with a lowercase third letter."""

    def __init__(self, value: int):
        super().__init__(
            value,
            f"reserved bit set in chunk type byte {value:#04x} ({chr(value)!r})",
        )


class InvalidLength(PngChunkException):
    """A chunk type code is not exactly four bytes long."""

    def __init__(self, length: int):
        self.length = length
        super().__init__(f"chunk type must be 4 bytes, got {length}")


class BadSignature(PngChunkException):
    def __init__(self, found: bytes):
        self.found = found
        super().__init__(f"not a PNG file: unexpected signature {found.hex(' ')}")


class MalformedRecord(PngChunkException):
    """A chunk record is truncated or its length field disagrees with its size."""


class ChecksumMismatch(PngChunkException):
    def __init__(self, found: int, expected: int):
        self.found = found
        self.expected = expected
        super().__init__(f"invalid crc: {found}, should be: {expected}")


class NonAsciiByte(PngChunkException):
    def __init__(self, value: int, position: int):
        self.value = value
        self.position = position
        super().__init__(f"non-ASCII byte {value:#04x} at position {position}")


class ChunkNotFound(PngChunkException):
    def __init__(self, chunk_type: str):
        self.chunk_type = chunk_type
        super().__init__(f"no chunk of type {chunk_type!r}")


class OptionsError(PngChunkException):
    pass


class CommandError(PngChunkException):
    pass
