"""Line-stream helpers.

Pipeline shape:
- strip line terminators
- parse lines -> records
- render records -> lines

Malformed lines either stop the run (the default) or are logged and
skipped, depending on ``skip_invalid``.
"""

from __future__ import annotations
from typing import Iterable, Iterator

from .errors import InvalidLineError, ParseError
from .log import get_logger
from .records import Bodyfile3Line, parse_line, render_line

log = get_logger(__name__)


def iter_records(lines: Iterable[str], skip_invalid: bool = False) -> Iterator[Bodyfile3Line]:
    """Parse bodyfile lines lazily.

    Raises:
        InvalidLineError: on the first bad line, unless ``skip_invalid``.
    """
    for lineno, line in enumerate(lines, start=1):
        raw = line.rstrip("\r\n")
        try:
            yield parse_line(raw)
        except ParseError as ex:
            if not skip_invalid:
                raise InvalidLineError(lineno, raw, ex) from ex
            log.warning("skipping line %d: %s", lineno, ex)


def render_records(records: Iterable[Bodyfile3Line]) -> Iterator[str]:
    for rec in records:
        yield render_line(rec)


def normalize_lines(lines: Iterable[str], skip_invalid: bool = False) -> list[str]:
    """Parse and re-render lines into canonical bodyfile form.

    Raises:
        InvalidLineError
    """
    return list(render_records(iter_records(lines, skip_invalid=skip_invalid)))
