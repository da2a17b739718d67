import argparse

from pngchunk import options


def common_options(parser):
    parser.add_argument(
        "--version",
        action="store_true",
        help="show version number and exit",
        dest="version",
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true", dest="quiet", help="Quiet."
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_const",
        dest="verbose",
        const="debug",
        help="Increase log verbosity.",
    )
    parser.add_argument(
        "--strict",
        action="store_const",
        const=True,
        dest="strict",
        help="Reject chunk types whose reserved (third) letter is lowercase.",
    )
    parser.add_argument(
        "--confdir",
        type=str,
        dest="confdir",
        default=options.CONF_DIR,
        metavar="PATH",
        help="Location of the configuration directory.",
    )


def _file_argument(parser):
    parser.add_argument(
        "-f", "--file", required=True, metavar="FILE", help="Path to the PNG file."
    )


def _chunk_argument(parser):
    parser.add_argument(
        "-c",
        "--chunk",
        metavar="CHUNK",
        help="The chunk type, four ASCII letters. Defaults to the default_chunk_type option.",
    )


def pngchunk() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pngchunk",
        description="Hide, read and remove messages in PNG chunks.",
    )
    common_options(parser)
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    encode = subparsers.add_parser(
        "encode", aliases=["e"], help="Encode a message into the PNG."
    )
    _file_argument(encode)
    _chunk_argument(encode)
    encode.add_argument("-m", "--msg", required=True, help="The message.")
    encode.add_argument(
        "-o", "--output", metavar="FILE", help="The output file. Defaults to --file."
    )
    encode.add_argument(
        "-y",
        "--yes",
        action="store_const",
        const=True,
        dest="assume_yes",
        help="Replace an existing message without asking.",
    )
    encode.set_defaults(command="encode")

    decode = subparsers.add_parser(
        "decode", aliases=["d"], help="Decode a message from the PNG."
    )
    _file_argument(decode)
    _chunk_argument(decode)
    decode.set_defaults(command="decode")

    remove = subparsers.add_parser(
        "remove", aliases=["r"], help="Remove a message from the PNG."
    )
    _file_argument(remove)
    _chunk_argument(remove)
    remove.set_defaults(command="remove")

    print_ = subparsers.add_parser(
        "print", aliases=["p"], help="List all chunks of the PNG."
    )
    _file_argument(print_)
    print_.add_argument(
        "--hexdump", action="store_true", help="Dump the data of every chunk."
    )
    print_.set_defaults(command="print")

    return parser
