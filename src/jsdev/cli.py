"""Command-line front end for JSDev.

Usage:
    jsdev [-i INPUT] [-o OUTPUT] [-v] [-comment TEXT]... NAME[:TARGET]...

Reads a program from stdin (or INPUT) and writes the transformed program to
stdout (or OUTPUT). Each NAME activates ``/*NAME ...*/`` comments; a
``:TARGET`` makes them expand into calls of TARGET. Each ``-comment TEXT``
is written as ``// TEXT`` at the top of the output.

Example:
    jsdev debug log:console.log alarm:alert -comment "Devel Edition"

Diagnostics go to stderr as ``<line>. <message>`` (or
``bad command line <word>``) and the exit status is 1.
Bytes that are not valid UTF-8 pass through unchanged.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Sequence
from contextlib import ExitStack, contextmanager, suppress
from typing import TextIO

from jsdev import __version__, transform_stream
from jsdev.errors import JSDevError, OutputError
from jsdev.macros import build_macro_table
from jsdev.utils.logger import configure_logging, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="jsdev",
        description="Activate macro comments in JavaScript source.",
    )
    parser.add_argument(
        "macros",
        nargs="*",
        metavar="NAME[:TARGET]",
        help="Macro to activate, optionally bound to a call target",
    )
    parser.add_argument(
        "-comment",
        "--comment",
        dest="comments",
        action="append",
        default=[],
        metavar="TEXT",
        help="Prepend '// TEXT' to the output (repeatable)",
    )
    parser.add_argument("-i", "--input", help="Read from this file instead of stdin")
    parser.add_argument("-o", "--output", help="Write to this file instead of stdout")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log expansions to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


# Program text is not guaranteed to be UTF-8. Undecodable bytes ride through
# as surrogates and are written back unchanged.
ENCODING = "utf-8"
ERRORS = "surrogateescape"


def _std_stream(stream: TextIO) -> TextIO:
    # Keep CR and CRLF untouched on both ends
    if hasattr(stream, "reconfigure"):
        stream.reconfigure(newline="", errors=ERRORS)
    return stream


@contextmanager
def _open_output(path: str | None) -> Iterator[TextIO]:
    """Yield the output sink, closing a named file on the way out.

    Opening failures propagate as OSError. A failure while closing is a
    write failure and becomes OutputError.
    """
    if not path:
        yield _std_stream(sys.stdout)
        return
    writer = open(path, "w", encoding=ENCODING, errors=ERRORS, newline="")
    try:
        yield writer
    except BaseException:
        # The first failure is the one reported
        with suppress(OSError):
            writer.close()
        raise
    try:
        writer.close()
    except OSError as e:
        raise OutputError("write error.", source_file=path) from e


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI.

    Args:
        argv: Arguments without the program name (default: sys.argv[1:])

    Returns:
        Process exit status
    """
    args = build_parser().parse_intermixed_args(argv)
    configure_logging(args.verbose)

    try:
        table = build_macro_table(args.macros)
        with ExitStack() as stack:
            if args.input:
                reader = stack.enter_context(
                    open(args.input, encoding=ENCODING, errors=ERRORS, newline="")
                )
            else:
                reader = _std_stream(sys.stdin)
            writer = stack.enter_context(_open_output(args.output))
            logger.debug("Active macros: %s", ", ".join(str(m) for m in table) or "(none)")
            transform_stream(
                reader,
                writer,
                table,
                comments=args.comments,
                source_file=args.input,
            )
    except JSDevError as e:
        logger.debug("Transform failed", exc_info=True)
        print(e, file=sys.stderr)
        return 1
    except OSError as e:
        print(f"bad command line {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
