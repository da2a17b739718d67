from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar

from pngchunk import exceptions

logger = logging.getLogger(__name__)

# The case of each letter encodes a property of the chunk, see
# https://www.w3.org/TR/png/#5Chunk-naming-conventions
_PROPERTY_BIT = 1 << 5


def _is_letter(b: int) -> bool:
    return 0x41 <= b <= 0x5A or 0x61 <= b <= 0x7A


@dataclass(frozen=True)
class ChunkType:
    """
    The four byte type code of a PNG chunk.

    Type codes are restricted to ASCII letters. Decoders should treat them as
    binary values rather than text: only bit 5 of each byte (its case) carries
    meaning for the file format itself.
    """

    SIZE: ClassVar[int] = 4

    raw: bytes

    def __post_init__(self) -> None:
        if len(self.raw) != self.SIZE:
            raise exceptions.InvalidLength(len(self.raw))
        for b in self.raw:
            if not _is_letter(b):
                raise exceptions.InvalidByte(b)

    @classmethod
    def from_bytes(cls, raw: bytes, *, strict: bool = False) -> ChunkType:
        """
        Create a chunk type from four raw bytes.

        A lowercase third byte violates the naming conventions but is only
        logged, unless strict is set, in which case ReservedBitError is raised.
        """
        inst = cls(bytes(raw))
        if not inst.is_reserved_bit_valid:
            if strict:
                raise exceptions.ReservedBitError(inst.raw[2])
            logger.warning(f"Chunk type {inst} has its reserved bit set.")
        return inst

    @classmethod
    def from_str(cls, s: str, *, strict: bool = False) -> ChunkType:
        raw = s.encode("utf-8")
        if len(raw) != cls.SIZE:
            raise exceptions.InvalidLength(len(raw))
        return cls.from_bytes(raw, strict=strict)

    def __bytes__(self) -> bytes:
        return self.raw

    def __str__(self) -> str:
        return self.raw.decode("utf-8", "replace")

    def __repr__(self) -> str:
        return f"ChunkType({str(self)!r})"

    @property
    def is_critical(self) -> bool:
        """Critical chunks (uppercase first letter) must be understood by decoders."""
        return not self.raw[0] & _PROPERTY_BIT

    @property
    def is_public(self) -> bool:
        """Public chunks (uppercase second letter) are part of the PNG standard or registered."""
        return not self.raw[1] & _PROPERTY_BIT

    @property
    def is_reserved_bit_valid(self) -> bool:
        """The third letter is reserved and must currently be uppercase."""
        return not self.raw[2] & _PROPERTY_BIT

    @property
    def is_safe_to_copy(self) -> bool:
        """
        Safe-to-copy chunks (lowercase fourth letter) may be carried over by
        editors that modified critical chunks without understanding this one.
        """
        return bool(self.raw[3] & _PROPERTY_BIT)

    @property
    def is_valid(self) -> bool:
        """
        Same as is_reserved_bit_valid.

        This does not mean the type code is fully standard conforming. The
        letters-only requirement is already enforced on construction, so the
        reserved bit is the only thing left to check here.
        """
        return self.is_reserved_bit_valid


IEND = ChunkType(b"IEND")
