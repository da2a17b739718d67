from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import TextIO

from pngchunk import exceptions
from pngchunk import log
from pngchunk import options
from pngchunk import version
from pngchunk.tools import cmdline
from pngchunk.tools import commands


def process_options(args: argparse.Namespace, opts: options.Options) -> None:
    if args.quiet:
        args.termlog_verbosity = "error"
    if args.verbose:
        args.termlog_verbosity = args.verbose

    adict = {
        key: val
        for key, val in vars(args).items()
        if key in opts.keys() and val is not None
    }
    opts.update(**adict)


def run(
    arguments: Sequence[str] | None = None,
    out: TextIO = sys.stdout,
    ask: commands.Ask = input,
) -> int:
    """
    Parse the arguments, load the configuration and run a single command.
    Returns the process exit status.
    """
    parser = cmdline.pngchunk()
    args = parser.parse_args(arguments)

    if args.version:
        print(version.PNGCHUNK, file=out)
        return 0
    if not args.command:
        parser.print_usage(sys.stderr)
        return 2

    opts = options.Options()
    try:
        options.load_paths(opts, *options.config_paths(args.confdir))
        process_options(args, opts)
    except exceptions.OptionsError as e:
        print(f"{parser.prog}: {e}", file=sys.stderr)
        return 1

    log.setup_logging(opts.termlog_verbosity)
    logging.getLogger(__name__).debug(f"Running {args.command} with {opts}")

    try:
        commands.COMMANDS[args.command](args, opts, out=out, ask=ask)
    except (exceptions.PngChunkException, OSError) as e:
        print(f"{parser.prog}: {e}", file=sys.stderr)
        for note in getattr(e, "__notes__", ()):
            print(f"{parser.prog}: {note}", file=sys.stderr)
        return 1
    return 0


def pngchunk(args=None) -> int:  # pragma: no cover
    return run(args)


if __name__ == "__main__":  # pragma: no cover
    sys.exit(pngchunk())
