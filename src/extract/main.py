"""
Read a repository's commit history into a RepositorySnapshot.

Counts commits first so that very large repositories can be read with the
cheaper name-only log, then captures the log and parses it in one pass.
"""

from pathlib import Path

from common.env import env
from common.logger import get_logger

from .classifier import ParseMode
from .export import write_commits_data
from .git_utils import (
    NotARepositoryError,
    count_commits,
    get_commit_log,
    is_valid_repo,
    select_mode,
)
from .models import RepositorySnapshot
from .parser import parse_commit_log

logger = get_logger(__name__)


def load_history(repo_path: Path, threshold: int | None = None) -> RepositorySnapshot:
    """
    Load the full commit history of a repository.

    Args:
        repo_path: Path inside a git work tree
        threshold: Commit count above which name-only mode is used
                   (default: RUSH_LARGE_REPO_THRESHOLD)

    Returns:
        RepositorySnapshot with commits oldest first

    Raises:
        NotARepositoryError: If repo_path is not a git repository
        GitError: If a git command fails
    """
    repo_path = Path(repo_path)
    if not is_valid_repo(repo_path):
        raise NotARepositoryError(f"Not a valid git repository: {repo_path}")

    if threshold is None:
        threshold = env.large_repo_threshold()
    timeout = env.git_timeout()

    commit_count = count_commits(repo_path, timeout=timeout)
    if commit_count == 0:
        return RepositorySnapshot()

    mode = select_mode(commit_count, threshold)
    if mode is ParseMode.NAME_ONLY:
        logger.info(
            f"Large repository detected ({commit_count} commits), "
            "reading file names only"
        )

    output = get_commit_log(repo_path, mode, timeout=timeout)
    commits = parse_commit_log(output, mode)

    if len(commits) != commit_count:
        logger.debug(f"git reported {commit_count} commits, parsed {len(commits)}")

    return RepositorySnapshot(commits=commits)


def generate_data(repo_path: Path, output_path: Path | None = None) -> RepositorySnapshot:
    """
    Load history and write it to the commit data document.

    Args:
        repo_path: Path inside a git work tree
        output_path: Where to write (default: RUSH_OUTPUT_PATH)

    Returns:
        The snapshot that was written
    """
    if output_path is None:
        output_path = env.output_path()

    snapshot = load_history(repo_path)
    write_commits_data(output_path, snapshot)
    logger.debug(f"Wrote {snapshot.total_commits} commits to {output_path}")
    return snapshot
