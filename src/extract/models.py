"""Data models for parsed commit history."""

from dataclasses import dataclass, field
from datetime import datetime, timezone

ISO_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def format_timestamp(timestamp: datetime) -> str:
    """Render a timestamp as an ISO-8601 UTC string with a Z suffix."""
    return timestamp.astimezone(timezone.utc).strftime(ISO_FORMAT)


def parse_timestamp(value: str) -> datetime:
    """Parse a string produced by format_timestamp back into a UTC datetime."""
    return datetime.strptime(value, ISO_FORMAT).replace(tzinfo=timezone.utc)


@dataclass
class CommitRecord:
    """One parsed commit."""

    hash: str
    author: str
    timestamp: datetime
    message: str
    files_changed: int = 0
    insertions: int = 0
    deletions: int = 0
    files: list[str] = field(default_factory=list)

    @property
    def date(self) -> str:
        """ISO-8601 UTC form of the commit timestamp."""
        return format_timestamp(self.timestamp)

    def to_dict(self) -> dict:
        """Convert to the JSON shape used in commits-data.json."""
        return {
            "hash": self.hash,
            "author": self.author,
            "date": self.date,
            "message": self.message,
            "filesChanged": self.files_changed,
            "insertions": self.insertions,
            "deletions": self.deletions,
            "files": list(self.files),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CommitRecord":
        """Create a CommitRecord from its JSON shape."""
        return cls(
            hash=data["hash"],
            author=data["author"],
            timestamp=parse_timestamp(data["date"]),
            message=data["message"],
            files_changed=data["filesChanged"],
            insertions=data["insertions"],
            deletions=data["deletions"],
            files=list(data["files"]),
        )


@dataclass
class RepositorySnapshot:
    """Ordered commit history plus the metadata derived from it."""

    commits: list[CommitRecord] = field(default_factory=list)

    @property
    def total_commits(self) -> int:
        return len(self.commits)

    @property
    def authors(self) -> list[str]:
        """Unique author names in order of first appearance."""
        return list(dict.fromkeys(commit.author for commit in self.commits))

    @property
    def first_commit_date(self) -> datetime | None:
        return self.commits[0].timestamp if self.commits else None

    @property
    def last_commit_date(self) -> datetime | None:
        return self.commits[-1].timestamp if self.commits else None

    @property
    def duration_days(self) -> int:
        """Whole days between the first and last commit."""
        if self.first_commit_date is None or self.last_commit_date is None:
            return 0
        return (self.last_commit_date - self.first_commit_date).days
