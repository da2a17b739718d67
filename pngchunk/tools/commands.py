"""
Implementations of the pngchunk subcommands.

Every command takes the parsed arguments and the effective options. Output
goes to `out` and confirmation prompts are read through `ask`, so that the
commands can be driven from tests.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable
from pathlib import Path
from typing import TextIO

from pngchunk import exceptions
from pngchunk.chunk import Chunk
from pngchunk.chunk_type import ChunkType
from pngchunk.chunk_type import IEND
from pngchunk.options import Options
from pngchunk.png import Png
from pngchunk.utils import human
from pngchunk.utils import strutils

logger = logging.getLogger(__name__)

Ask = Callable[[str], str]


def read_png(path: Path | str, strict: bool = False) -> Png:
    logger.info(f"Reading {path}")
    with open(path, "rb") as f:
        return Png.unpack(f.read(), strict=strict)


def write_png(path: Path | str, png: Png) -> None:
    data = png.packed
    with open(path, "wb") as f:
        f.write(data)
    logger.info(f"Wrote {human.pretty_size(len(data))} to {path}")


def _chunk_type(args: argparse.Namespace, opts: Options) -> ChunkType:
    return ChunkType.from_str(args.chunk or opts.default_chunk_type, strict=opts.strict)


def confirm(question: str, ask: Ask) -> bool:
    answer = ask(f"{question} [y/n]: ")
    return answer.strip().lower() in ("y", "yes")


def encode(
    args: argparse.Namespace,
    opts: Options,
    out: TextIO = sys.stdout,
    ask: Ask = input,
) -> None:
    chunk_type = _chunk_type(args, opts)
    if chunk_type == IEND:
        raise exceptions.CommandError("IEND marks the end of the image and cannot hold a message")
    try:
        chunk = Chunk(chunk_type, args.msg.encode("ascii"))
    except UnicodeEncodeError as e:
        raise exceptions.CommandError(f"message must be ASCII: {e}") from e
    if not opts.assume_yes and not confirm(
        f"This will replace any existing message in a {chunk_type} chunk, continue?",
        ask,
    ):
        raise exceptions.CommandError("aborted by user")

    png = read_png(args.file, opts.strict)
    # Chunks can only be appended, so IEND is taken off and put back last.
    for t in (str(IEND), str(chunk_type)):
        try:
            png.remove_chunk(t)
        except exceptions.ChunkNotFound:
            pass
    png.append_chunk(chunk)
    png.append_chunk(Chunk(IEND))
    write_png(args.output or args.file, png)


def decode(
    args: argparse.Namespace,
    opts: Options,
    out: TextIO = sys.stdout,
    ask: Ask = input,
) -> None:
    chunk_type = _chunk_type(args, opts)
    png = read_png(args.file, opts.strict)
    chunk = png.chunk_by_type(str(chunk_type))
    if chunk is None:
        raise exceptions.CommandError(f"no message in a {chunk_type} chunk")
    logger.debug(f"Raw message bytes: {strutils.bytes_to_escaped_str(chunk.data)}")
    print(chunk.text, file=out)


def remove(
    args: argparse.Namespace,
    opts: Options,
    out: TextIO = sys.stdout,
    ask: Ask = input,
) -> None:
    chunk_type = _chunk_type(args, opts)
    png = read_png(args.file, opts.strict)
    chunk = png.remove_chunk(str(chunk_type))
    write_png(args.file, png)
    print(f"Removed {chunk}", file=out)


def print_chunks(
    args: argparse.Namespace,
    opts: Options,
    out: TextIO = sys.stdout,
    ask: Ask = input,
) -> None:
    png = read_png(args.file, opts.strict)
    for i, chunk in enumerate(png):
        t = chunk.chunk_type
        flags = human.format_flags(t.is_critical, t.is_public, t.is_safe_to_copy)
        print(
            f"{i:>3} {t} {flags} {human.pretty_size(chunk.length):>6} "
            f"crc={chunk.crc:08x} {strutils.preview(chunk.data)}",
            file=out,
        )
        if args.hexdump:
            for offset, hexa, s in strutils.hexdump(chunk.data):
                print(f"    {offset}: {hexa} {s}", file=out)


COMMANDS: dict[str, Callable[..., None]] = {
    "encode": encode,
    "decode": decode,
    "remove": remove,
    "print": print_chunks,
}
