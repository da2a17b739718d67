from __future__ import annotations

import logging
from collections.abc import Iterable
from collections.abc import Iterator
from dataclasses import dataclass
from dataclasses import field
from typing import ClassVar

from pngchunk import exceptions
from pngchunk.chunk import Chunk

logger = logging.getLogger(__name__)


@dataclass
class Png:
    """
    A PNG file as an ordered list of chunks.

    By convention the last chunk is a single, empty IEND chunk. This is not
    enforced: appending after IEND produces a file that most decoders will
    silently truncate.
    """

    SIGNATURE: ClassVar[bytes] = b"\x89PNG\r\n\x1a\n"

    chunks: list[Chunk] = field(default_factory=list)

    @classmethod
    def from_chunks(cls, chunks: Iterable[Chunk]) -> Png:
        return cls(list(chunks))

    @property
    def header(self) -> bytes:
        return self.SIGNATURE

    def __len__(self) -> int:
        return len(self.chunks)

    def __iter__(self) -> Iterator[Chunk]:
        return iter(self.chunks)

    def __str__(self) -> str:
        return "\n".join(str(c) for c in self.chunks)

    def append_chunk(self, chunk: Chunk) -> None:
        self.chunks.append(chunk)

    def chunk_by_type(self, chunk_type: str) -> Chunk | None:
        """Returns the first chunk of the given type, if any."""
        for chunk in self.chunks:
            if str(chunk.chunk_type) == chunk_type:
                return chunk
        return None

    def remove_chunk(self, chunk_type: str) -> Chunk:
        """
        Removes and returns the first chunk of the given type.

        Raises ChunkNotFound if there is no such chunk.
        """
        for i, chunk in enumerate(self.chunks):
            if str(chunk.chunk_type) == chunk_type:
                return self.chunks.pop(i)
        raise exceptions.ChunkNotFound(chunk_type)

    @property
    def packed(self) -> bytes:
        """Converts the image into its on-disk representation."""
        return b"".join([self.SIGNATURE, *(c.packed for c in self.chunks)])

    def __bytes__(self) -> bytes:
        return self.packed

    @classmethod
    def unpack(cls, buffer: bytes, *, strict: bool = False) -> Png:
        """
        Converts the entire buffer into a Png.

        Parsing is all-or-nothing: the first invalid chunk aborts it.
        """
        signature = bytes(buffer[: len(cls.SIGNATURE)])
        if signature != cls.SIGNATURE:
            raise exceptions.BadSignature(signature)

        png = cls()
        offset = len(cls.SIGNATURE)
        while offset < len(buffer):
            try:
                size, chunk = Chunk.unpack_from(buffer, offset, strict=strict)
            except exceptions.PngChunkException as e:
                e.add_note(f"while unpacking chunk #{len(png.chunks)} at offset {offset}")
                raise
            png.chunks.append(chunk)
            offset += size
        logger.debug(f"Unpacked {len(png.chunks)} chunks from {len(buffer)} bytes.")
        return png
