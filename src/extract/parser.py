"""Turn captured `git log` output into CommitRecords.

One linear pass over the text. Lines are classified by
:func:`extract.classifier.classify_line` and fed to a
:class:`CommitAccumulator`, which holds at most one commit under construction
and hands it over once the next header (or the end of input) is reached.

Malformed data never raises. Unparseable counts are skipped and unrecognized
lines are ignored, so a best-effort history is always produced.
"""

from collections.abc import Iterable, Iterator

from common.logger import get_logger

from .classifier import ClassifiedLine, LineKind, ParseMode, classify_line
from .models import CommitRecord

logger = get_logger(__name__)


class CommitAccumulator:
    """Builds CommitRecords from classified lines.

    The accumulator is either empty or building exactly one record. A record
    is returned to the caller when it is finished and never touched again.

    Example:
        >>> acc = CommitAccumulator(ParseMode.NAME_ONLY)
        >>> acc.feed("abc123|Jane Doe|1700000000|Fix bug")
        >>> acc.feed("src/a.go")
        >>> acc.finish().files
        ['src/a.go']
    """

    def __init__(self, mode: ParseMode):
        self.mode = ParseMode(mode)
        self._current: CommitRecord | None = None

    @property
    def building(self) -> bool:
        """True while a commit is under construction."""
        return self._current is not None

    def feed(self, line: str) -> CommitRecord | None:
        """Consume one line of log output.

        Args:
            line: One physical line, with or without surrounding whitespace

        Returns:
            The previous commit when this line starts a new one, else None
        """
        return self.apply(classify_line(line, self.mode))

    def apply(self, classified: ClassifiedLine) -> CommitRecord | None:
        """Apply an already classified line. See :meth:`feed`."""
        if classified.kind is LineKind.HEADER:
            finished = self._current
            self._current = CommitRecord(
                hash=classified.hash,
                author=classified.author,
                timestamp=classified.timestamp,
                message=classified.message,
            )
            return finished

        current = self._current
        if current is None:
            if classified.kind not in (LineKind.BLANK, LineKind.NOISE):
                logger.debug(f"Ignoring line before first commit header: {classified.text!r}")
            return None

        if classified.kind is LineKind.FILE_STAT:
            if classified.insertions is not None and classified.deletions is not None:
                current.insertions += classified.insertions
                current.deletions += classified.deletions
            else:
                logger.debug(f"No line counts for {classified.path!r} in {current.hash}")
            current.files_changed += 1
            if classified.path:
                current.files.append(classified.path)

        elif classified.kind is LineKind.FILE_PATH:
            current.files.append(classified.path)
            current.files_changed += 1

        elif classified.kind is LineKind.SUMMARY:
            # Fallback only: a counted file line always wins over the summary
            if current.files_changed == 0 and classified.file_count is not None:
                current.files_changed = classified.file_count

        return None

    def finish(self) -> CommitRecord | None:
        """Signal end of input and return the commit still under construction."""
        finished = self._current
        self._current = None
        return finished


def iter_commits(lines: Iterable[str], mode: ParseMode) -> Iterator[CommitRecord]:
    """Yield commits as soon as each one is complete.

    Args:
        lines: Lines of log output, in order
        mode: Format the log was requested in

    Yields:
        CommitRecords in input order
    """
    accumulator = CommitAccumulator(mode)
    for line in lines:
        finished = accumulator.feed(line)
        if finished is not None:
            yield finished

    last = accumulator.finish()
    if last is not None:
        yield last


def parse_commit_log(output: str, mode: ParseMode) -> list[CommitRecord]:
    """Parse the full text of one `git log` invocation.

    Args:
        output: Captured stdout of the log command
        mode: Format the log was requested in (the text is never sniffed)

    Returns:
        Commits in input order; empty for empty input
    """
    commits = list(iter_commits(output.split("\n"), mode))
    logger.debug(f"Parsed {len(commits)} commits ({ParseMode(mode).value} mode)")
    return commits
