from __future__ import annotations

import logging
import struct
from dataclasses import dataclass
from dataclasses import field
from typing import ClassVar

from pngchunk import exceptions
from pngchunk.chunk_type import ChunkType
from pngchunk.utils import crc

logger = logging.getLogger(__name__)

MAX_LENGTH = 2**31 - 1
"""PNG limits chunk data to 2^31-1 bytes, even though the length field is a u32."""


def calculate_crc(chunk_type: ChunkType, data: bytes) -> int:
    """The chunk checksum covers the type code and the data, but not the length."""
    return crc.crc32(data, crc.crc32(chunk_type.raw))


def _check_length(length: int) -> None:
    if length > MAX_LENGTH:
        raise exceptions.MalformedRecord(
            f"chunk length field says {length} bytes, which exceeds the maximum of {MAX_LENGTH}"
        )


@dataclass(frozen=True)
class Chunk:
    """
    A single PNG chunk record:

        length (u32) | chunk type (4 bytes) | data (length bytes) | crc (u32)

    All integers are big-endian. Chunks are immutable and their crc always
    matches their type and data: it is either computed on construction or,
    if supplied, verified against the computed value.
    """

    HEADER: ClassVar[struct.Struct] = struct.Struct("!I4s")
    CRC: ClassVar[struct.Struct] = struct.Struct("!I")
    OVERHEAD: ClassVar[int] = HEADER.size + CRC.size

    chunk_type: ChunkType
    data: bytes = b""
    crc: int = field(default=None, compare=False)  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if len(self.data) > MAX_LENGTH:
            raise ValueError(
                f"chunk data of {len(self.data)} bytes exceeds the maximum of {MAX_LENGTH} bytes."
            )
        expected = calculate_crc(self.chunk_type, self.data)
        if self.crc is None:
            object.__setattr__(self, "crc", expected)
        elif self.crc != expected:
            raise exceptions.ChecksumMismatch(self.crc, expected)

    @classmethod
    def new(cls, chunk_type: str, data: bytes | str) -> Chunk:
        """
        Create a chunk from a type string such as "tEXt" and bytes or text.
        Text is stored as UTF-8, use `text` to read it back as strict ASCII.
        """
        if isinstance(data, str):
            data = data.encode("utf-8")
        return cls(ChunkType.from_str(chunk_type), data)

    @property
    def length(self) -> int:
        return len(self.data)

    @property
    def text(self) -> str:
        """
        The chunk data as text. Raises NonAsciiByte if the data is not plain ASCII.
        """
        for i, b in enumerate(self.data):
            if b > 0x7F:
                raise exceptions.NonAsciiByte(b, i)
        return self.data.decode("ascii")

    def __str__(self) -> str:
        return f"{self.chunk_type} ({self.length} bytes, crc {self.crc:#010x})"

    def __bytes__(self) -> bytes:
        return self.packed

    @property
    def packed(self) -> bytes:
        """Converts the chunk into its on-disk representation."""
        return b"".join(
            (
                self.HEADER.pack(self.length, self.chunk_type.raw),
                self.data,
                self.CRC.pack(self.crc),
            )
        )

    @classmethod
    def unpack(cls, buffer: bytes, *, strict: bool = False) -> Chunk:
        """
        Converts exactly one chunk record into a Chunk.

        The embedded length field must agree with the size of the buffer,
        trailing or missing bytes raise MalformedRecord. The checksum is
        verified over the raw type and data bytes before the type code is
        interpreted, so any corruption of those bytes raises ChecksumMismatch.
        """
        if len(buffer) < cls.OVERHEAD:
            raise exceptions.MalformedRecord(
                f"chunk record requires at least {cls.OVERHEAD} bytes, got {len(buffer)}"
            )
        length, raw_type = cls.HEADER.unpack_from(buffer, 0)
        _check_length(length)
        data_length = len(buffer) - cls.OVERHEAD
        if length != data_length:
            raise exceptions.MalformedRecord(
                f"chunk length field says {length} bytes, but record holds {data_length} bytes of data"
            )
        end = cls.HEADER.size + length
        (found,) = cls.CRC.unpack_from(buffer, end)
        # the checksum covers the type and data, everything after the length field
        expected = crc.crc32(bytes(buffer[4:end]))
        if found != expected:
            raise exceptions.ChecksumMismatch(found, expected)
        chunk_type = ChunkType.from_bytes(raw_type, strict=strict)
        return cls(chunk_type, bytes(buffer[cls.HEADER.size : end]), found)

    @classmethod
    def unpack_from(
        cls, buffer: bytes, offset: int, *, strict: bool = False
    ) -> tuple[int, Chunk]:
        """
        Converts the chunk record starting at offset into a Chunk and also
        returns the size of the record. The record's end is taken from its
        length field.
        """
        if len(buffer) - offset < cls.HEADER.size:
            raise exceptions.MalformedRecord(
                f"chunk header requires {cls.HEADER.size} bytes, got {len(buffer) - offset}"
            )
        length, _ = cls.HEADER.unpack_from(buffer, offset)
        _check_length(length)
        size = cls.OVERHEAD + length
        if len(buffer) - offset < size:
            raise exceptions.MalformedRecord(
                f"chunk record requires {size} bytes, got {len(buffer) - offset}"
            )
        chunk = cls.unpack(buffer[offset : offset + size], strict=strict)
        logger.debug(f"Unpacked {chunk} at offset {offset}.")
        return size, chunk
