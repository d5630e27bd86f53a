"""Bodyfile v3 line parsing.

A bodyfile line (as written by TSK 3.x) has eleven '|'-separated fields:
    md5|name|inode|mode|uid|gid|size|atime|mtime|ctime|crtime

Example:
    0|/etc/passwd|1234-128-1|r/rrw-r--r--|0|0|2048|1645178371|1645178000|1645178000|-1

Design notes:
- There is no escaping. The name field may itself contain '|' (command
  lines, JSON blobs), so the name is whatever is left between md5 and the
  last nine columns.
- A '|' inside any other field cannot be detected and shifts the columns.
- Timestamps are epoch seconds; -1 means "unknown", not 1970.
"""

from __future__ import annotations
from dataclasses import dataclass
import re

from .errors import (
    IllegalATime,
    IllegalCRTime,
    IllegalCTime,
    IllegalGid,
    IllegalMTime,
    IllegalSize,
    IllegalUid,
    ParseError,
    WrongNumberOfColumns,
)

SEPARATOR = "|"

# Columns that are exactly one segment wide: md5 plus the nine after name.
FIXED_COLUMNS = 10

U64_MAX = 2**64 - 1
I64_MIN = -(2**63)
I64_MAX = 2**63 - 1

_UNSIGNED_RE = re.compile(r"\+?[0-9]+")
_SIGNED_RE = re.compile(r"[+-]?[0-9]+")


@dataclass
class Bodyfile3Line:
    """One bodyfile v3 record.

    Setters return the record itself, so a record can be built fluently:

        Bodyfile3Line().with_name("sample.txt").with_size(126378)

    They do not validate anything; only ``parse_line`` checks its input.
    """
    md5: str = "0"
    name: str = ""
    inode: str = "0"
    mode: str = ""
    uid: int = 0
    gid: int = 0
    size: int = 0
    atime: int = -1
    mtime: int = -1
    ctime: int = -1
    crtime: int = -1

    def with_md5(self, md5: str) -> Bodyfile3Line:
        self.md5 = md5
        return self

    def with_name(self, name: str) -> Bodyfile3Line:
        self.name = name
        return self

    def with_inode(self, inode: str) -> Bodyfile3Line:
        self.inode = inode
        return self

    def with_mode(self, mode: str) -> Bodyfile3Line:
        self.mode = mode
        return self

    def with_uid(self, uid: int) -> Bodyfile3Line:
        self.uid = uid
        return self

    def with_gid(self, gid: int) -> Bodyfile3Line:
        self.gid = gid
        return self

    def with_size(self, size: int) -> Bodyfile3Line:
        self.size = size
        return self

    def with_atime(self, atime: int) -> Bodyfile3Line:
        self.atime = atime
        return self

    def with_mtime(self, mtime: int) -> Bodyfile3Line:
        self.mtime = mtime
        return self

    def with_ctime(self, ctime: int) -> Bodyfile3Line:
        self.ctime = ctime
        return self

    def with_crtime(self, crtime: int) -> Bodyfile3Line:
        self.crtime = crtime
        return self

    @classmethod
    def from_line(cls, line: str) -> Bodyfile3Line:
        return parse_line(line)

    def __str__(self) -> str:
        return render_line(self)


def _parse_unsigned(text: str, error: type[ParseError]) -> int:
    if _UNSIGNED_RE.fullmatch(text) is None:
        raise error()
    value = int(text)
    if value > U64_MAX:
        raise error()
    return value


def _parse_timestamp(text: str, error: type[ParseError]) -> int:
    if _SIGNED_RE.fullmatch(text) is None:
        raise error()
    value = int(text)
    if not I64_MIN <= value <= I64_MAX:
        raise error()
    # -1 is the "unknown" sentinel; anything lower is not a timestamp
    if value < -1:
        raise error()
    return value


def parse_line(line: str) -> Bodyfile3Line:
    """Parse one bodyfile line (without line terminator).

    Fields are checked in order uid, gid, size, atime, mtime, ctime, crtime
    and the first bad one is reported.

    Raises:
        ParseError: one of its subclasses, naming the failed check.
    """
    parts = line.split(SEPARATOR)
    if len(parts) < FIXED_COLUMNS + 1:
        raise WrongNumberOfColumns()

    name_chunks = len(parts) - FIXED_COLUMNS
    md5 = parts[0]
    name = SEPARATOR.join(parts[1 : name_chunks + 1])
    inode, mode, uid, gid, size, atime, mtime, ctime, crtime = parts[name_chunks + 1 :]

    return Bodyfile3Line(
        md5=md5,
        name=name,
        inode=inode,
        mode=mode,
        uid=_parse_unsigned(uid, IllegalUid),
        gid=_parse_unsigned(gid, IllegalGid),
        size=_parse_unsigned(size, IllegalSize),
        atime=_parse_timestamp(atime, IllegalATime),
        mtime=_parse_timestamp(mtime, IllegalMTime),
        ctime=_parse_timestamp(ctime, IllegalCTime),
        crtime=_parse_timestamp(crtime, IllegalCRTime),
    )


def render_line(r: Bodyfile3Line) -> str:
    """Render a record back to its line form, as consumed by e.g. mactime."""
    return SEPARATOR.join(
        (
            r.md5,
            r.name,
            r.inode,
            r.mode,
            str(r.uid),
            str(r.gid),
            str(r.size),
            str(r.atime),
            str(r.mtime),
            str(r.ctime),
            str(r.crtime),
        )
    )
