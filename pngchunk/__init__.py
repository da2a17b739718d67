from pngchunk.chunk import Chunk
from pngchunk.chunk_type import ChunkType
from pngchunk.png import Png

__all__ = ["Chunk", "ChunkType", "Png"]
