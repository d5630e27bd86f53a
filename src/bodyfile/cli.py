"""Command-line interface for bodyfile.

- reads a bodyfile from a path or stdin
- validates every line
- writes the canonical form of each record to stdout

Input is read with '\\n' as the only line terminator: a bare '\\r' may
occur inside a name and must not split the record.
"""

from __future__ import annotations
import argparse
import io
import logging
import sys
from typing import TextIO

from .errors import BodyfileError
from .log import configure_logging, get_logger
from .stream import normalize_lines

log = get_logger(__name__)


def _open_input(path: str) -> TextIO:
    if path == "-":
        return io.TextIOWrapper(sys.stdin.buffer, encoding="utf-8", newline="\n")
    return open(path, "r", encoding="utf-8", newline="\n")


def _close_input(fh: TextIO, path: str) -> None:
    if path == "-":
        # leave the process's stdin open
        fh.detach()
    else:
        fh.close()


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="bodyfile", description="Validate and canonicalize a bodyfile (TSK 3.x format).")
    p.add_argument("path", nargs="?", default="-", help="Input file path or '-' for stdin")
    p.add_argument("--skip-invalid", action="store_true", help="Warn about malformed lines and skip them")
    verbosity = p.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Log debug output")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log errors")
    args = p.parse_args(argv)

    try:
        if args.verbose:
            configure_logging(logging.DEBUG)
        elif args.quiet:
            configure_logging(logging.ERROR)
        else:
            configure_logging()
    except ValueError as ex:
        sys.stderr.write(f"error: {ex}\n")
        return 2

    log.debug("reading %s", args.path)
    try:
        fh = _open_input(args.path)
        try:
            out = normalize_lines(fh, skip_invalid=args.skip_invalid)
        finally:
            _close_input(fh, args.path)
    except (BodyfileError, OSError, UnicodeDecodeError) as ex:
        sys.stderr.write(f"error: {ex}\n")
        return 2

    log.debug("%d records", len(out))
    for line in out:
        sys.stdout.write(line + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
