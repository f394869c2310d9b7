"""commits-data.json I/O utilities."""

import json
from pathlib import Path

from .models import CommitRecord, RepositorySnapshot, format_timestamp


def build_document(snapshot: RepositorySnapshot) -> dict:
    """
    Build the commits-data.json structure.

    Key names and nesting are read by the browser page and must not change.

    Args:
        snapshot: Parsed repository history

    Returns:
        Dict with a ``commits`` list and a ``metadata`` object
    """
    first = snapshot.first_commit_date
    last = snapshot.last_commit_date
    return {
        "commits": [commit.to_dict() for commit in snapshot.commits],
        "metadata": {
            "totalCommits": snapshot.total_commits,
            "authors": snapshot.authors,
            "firstCommitDate": format_timestamp(first) if first else None,
            "lastCommitDate": format_timestamp(last) if last else None,
        },
    }


def write_commits_data(file_path: Path, snapshot: RepositorySnapshot) -> None:
    """
    Write the commit data document with pretty formatting.

    Args:
        file_path: Path to write the file
        snapshot: Parsed repository history
    """
    file_path = Path(file_path)
    file_path.parent.mkdir(parents=True, exist_ok=True)

    with open(file_path, "w", encoding="utf-8") as f:
        json.dump(build_document(snapshot), f, indent=2, ensure_ascii=False)


def read_commits_data(file_path: Path) -> RepositorySnapshot:
    """
    Read a commit data document back into a snapshot.

    Only the commits are read; metadata is derived from them again.

    Args:
        file_path: Path to the document

    Returns:
        RepositorySnapshot with commits in file order

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If file format is invalid
    """
    file_path = Path(file_path)
    if not file_path.exists():
        raise FileNotFoundError(f"Commit data not found: {file_path}")

    try:
        with open(file_path, encoding="utf-8") as f:
            data = json.load(f)
        commits = [CommitRecord.from_dict(item) for item in data["commits"]]
    except (KeyError, TypeError, ValueError) as e:
        raise ValueError(f"Invalid commit data in {file_path}: {e}") from e

    return RepositorySnapshot(commits=commits)
