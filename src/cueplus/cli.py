#!/bin/env python
from __future__ import annotations

import argparse
import logging
import pathlib
import sys
from collections.abc import Sequence
from typing import cast

from cueplus.consts import DEFAULT_ENCODING, VERSION
from cueplus.cue import CueError
from cueplus.cuefile import CueFile
from cueplus.models import CommandParserArgs

logger = logging.getLogger("cueplus")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cueplus",
        description="Read, list and rewrite CUE sheets",
    )
    _ = parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {VERSION}",
    )
    _ = parser.add_argument("cuefile", help="CUE sheet to read.")
    _ = parser.add_argument(
        "-o",
        "--output",
        help="Write the parsed sheet back out as canonical CUE text to this path. May be the input path.",
    )
    _ = parser.add_argument(
        "-l",
        "--list",
        action="store_true",
        help="Print every parsed track and its attributes. This is the default when -o is not given.",
    )
    _ = parser.add_argument(
        "-e",
        "--encoding",
        default=DEFAULT_ENCODING,
        help=f"Text encoding used to read and write CUE sheets. Defaults to {DEFAULT_ENCODING}.",
    )
    logging_opts = parser.add_mutually_exclusive_group()
    _ = logging_opts.add_argument(
        "-q", "--quiet", help="Only log errors", action="store_true"
    )
    _ = logging_opts.add_argument(
        "-V",
        "--verbose",
        help="Log which files are read and written",
        action="store_true",
    )
    _ = logging_opts.add_argument(
        "-d",
        "--debug",
        help="Trace every parser match and writer step",
        action="store_true",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    args = cast(CommandParserArgs, build_parser().parse_args(argv))
    logger.setLevel(logging.WARNING)
    if args.quiet:
        logger.setLevel(logging.ERROR)
    if args.verbose:
        logger.setLevel(logging.INFO)
    if args.debug:
        logger.setLevel(logging.DEBUG)
    cue_path = pathlib.Path(args.cuefile).expanduser().resolve()
    cuefile = CueFile(encoding=args.encoding, debug=args.debug)
    try:
        _ = cuefile.load(cue_path)
        if args.list or not args.output:
            print(cuefile.list_tracks())
        if args.output:
            output_file = cuefile.write(
                pathlib.Path(args.output).expanduser().resolve()
            )
            logger.warning(f"Wrote {output_file}")
    except CueError as e:
        logger.error(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
