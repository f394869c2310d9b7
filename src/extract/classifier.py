"""Line classification for `git log` output.

Each physical line of log output is one of a handful of shapes. Which shapes
are possible depends on how the log was requested:

- name-only: ``HASH|AUTHOR|EPOCH|SUBJECT`` headers followed by bare paths
- numstat: the same headers followed by ``INS<TAB>DELS<TAB>PATH`` lines and an
  optional ``N files changed, I insertions(+), D deletions(-)`` summary

The shapes overlap. A subject may contain ``|`` or a tab, and a path may
contain ``|``. A line is only a header when its epoch field is an integer;
anything else falls through to the content rules of the active mode.
"""

import re
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum

from common.constants import RESERVED_LINE_PREFIXES


class ParseMode(str, Enum):
    """Which `git log` invocation produced the text."""

    NAME_ONLY = "name-only"
    NUMSTAT = "numstat"


class LineKind(Enum):
    """Kinds of line found in log output."""

    BLANK = "blank"
    HEADER = "header"
    FILE_STAT = "file_stat"  # numstat per-file line
    SUMMARY = "summary"  # shortstat line
    FILE_PATH = "file_path"  # name-only path line
    NOISE = "noise"


# HASH|AUTHOR|EPOCH|MESSAGE; the message keeps any further separators
_HEADER = re.compile(
    r"^(?P<hash>[^|\t]+)\|(?P<author>[^|]*)\|(?P<epoch>[+-]?[0-9]+)\|(?P<message>.*)$"
)

# INS<TAB>DELS[<TAB>PATH]; "-" is git's placeholder for binary files
_FILE_STAT = re.compile(
    r"^(?P<insertions>[0-9]+|-)\t(?P<deletions>[0-9]+|-)(?:\t(?P<path>.*))?$"
)

_INTEGER = re.compile(r"^[0-9]+$")

BINARY_PLACEHOLDER = "-"


@dataclass(frozen=True)
class ClassifiedLine:
    """A line's kind plus whatever fields were extracted from it."""

    kind: LineKind
    text: str = ""
    hash: str | None = None
    author: str | None = None
    timestamp: datetime | None = None
    message: str | None = None
    insertions: int | None = None
    deletions: int | None = None
    path: str | None = None
    file_count: int | None = None


def _to_int(value: str) -> int | None:
    return int(value) if _INTEGER.match(value) else None


def match_header(line: str) -> ClassifiedLine | None:
    """Match a commit header line.

    Args:
        line: Stripped line of log output

    Returns:
        HEADER classification, or None when the line is not a header (too few
        separators, a non-integer epoch field, or an epoch that cannot be
        represented as a datetime)
    """
    match = _HEADER.match(line)
    if match is None:
        return None

    try:
        timestamp = datetime.fromtimestamp(int(match["epoch"]), tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return None

    return ClassifiedLine(
        kind=LineKind.HEADER,
        text=line,
        hash=match["hash"],
        author=match["author"],
        timestamp=timestamp,
        message=match["message"],
    )


def match_file_stat(line: str) -> ClassifiedLine | None:
    """Match a numstat per-file line.

    Binary files report ``-`` for both counts; those come back as None so the
    caller can count the file without touching the line totals.
    """
    match = _FILE_STAT.match(line)
    if match is None:
        return None

    return ClassifiedLine(
        kind=LineKind.FILE_STAT,
        text=line,
        insertions=_to_int(match["insertions"]),
        deletions=_to_int(match["deletions"]),
        path=(match["path"] or "").strip(),
    )


def match_summary(line: str) -> ClassifiedLine | None:
    """Match a shortstat summary such as ``2 files changed, 5 insertions(+)``.

    Any line mentioning "changed" is a summary. The file count is the first
    word before " changed" when that word is an integer, otherwise None.
    """
    if "changed" not in line:
        return None

    words = line.split(" changed", 1)[0].split()
    file_count = _to_int(words[0]) if words else None
    return ClassifiedLine(kind=LineKind.SUMMARY, text=line, file_count=file_count)


def classify_line(line: str, mode: ParseMode) -> ClassifiedLine:
    """Classify one line of log output.

    Pure function of (line, mode). Surrounding whitespace is ignored.

    Args:
        line: One physical line of log output
        mode: Format the log was requested in

    Returns:
        The line's classification with any extracted fields
    """
    mode = ParseMode(mode)
    line = line.strip()
    if not line:
        return ClassifiedLine(kind=LineKind.BLANK)

    if mode is ParseMode.NUMSTAT:
        # Per-file lines first: a path containing "|" must never become a header
        return (
            match_file_stat(line)
            or match_header(line)
            or match_summary(line)
            or ClassifiedLine(kind=LineKind.NOISE, text=line)
        )

    header = match_header(line)
    if header is not None:
        return header
    if line.startswith(RESERVED_LINE_PREFIXES):
        return ClassifiedLine(kind=LineKind.NOISE, text=line)
    return ClassifiedLine(kind=LineKind.FILE_PATH, text=line, path=line)
