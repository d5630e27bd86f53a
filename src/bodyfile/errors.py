"""Errors raised while reading bodyfile lines.

Every line-level rejection is a ``ParseError`` subclass named after the
failed check, so callers can react per field:

    try:
        rec = parse_line(line)
    except IllegalSize:
        ...

``str(err)`` is the bare variant name. The offending text is not kept;
callers that want diagnostics still hold the line.
"""

from __future__ import annotations


class BodyfileError(Exception):
    """Base error for this package."""


class ParseError(BodyfileError):
    """Raised when a line cannot be parsed into a bodyfile record."""

    def __str__(self) -> str:
        return type(self).__name__


class WrongNumberOfColumns(ParseError):
    """The line has fewer than eleven '|'-separated columns."""


class IllegalUid(ParseError):
    """The uid column is not an unsigned 64-bit integer."""


class IllegalGid(ParseError):
    """The gid column is not an unsigned 64-bit integer."""


class IllegalSize(ParseError):
    """The size column is not an unsigned 64-bit integer."""


class IllegalATime(ParseError):
    """The atime column is not a timestamp or -1."""


class IllegalMTime(ParseError):
    """The mtime column is not a timestamp or -1."""


class IllegalCTime(ParseError):
    """The ctime column is not a timestamp or -1."""


class IllegalCRTime(ParseError):
    """The crtime column is not a timestamp or -1."""


class InvalidLineError(BodyfileError):
    """Raised by the line-stream helpers when one line of many is rejected."""

    def __init__(self, lineno: int, line: str, reason: ParseError):
        super().__init__(lineno, line, reason)
        self.lineno = lineno
        self.line = line
        self.reason = reason

    def __str__(self) -> str:
        return f"line {self.lineno}: {self.reason}"
