"""Thin wrappers around the git commands rush needs."""

import subprocess
from pathlib import Path

from common.constants import DEFAULT_GIT_TIMEOUT, LARGE_REPO_THRESHOLD, LOG_HEADER_FORMAT
from common.logger import get_logger

from .classifier import ParseMode

logger = get_logger(__name__)


class GitError(RuntimeError):
    """Raised when a git command fails."""


class NotARepositoryError(GitError):
    """Raised when a path is not inside a git work tree."""


class GitNotFoundError(GitError):
    """Raised when the git executable cannot be found."""


def _run_git(args: list[str], cwd: Path, timeout: float | None = None) -> str:
    """
    Run a git sub-command and return its stdout.

    Args:
        args: Arguments after ``git``
        cwd: Directory to run in
        timeout: Seconds before the command is abandoned (None waits forever)

    Returns:
        Captured stdout, decoded as UTF-8

    Raises:
        NotARepositoryError: If cwd is missing or not a repository
        GitNotFoundError: If git is not installed
        GitError: If the command fails or times out
    """
    if not Path(cwd).is_dir():
        raise NotARepositoryError(f"Not a directory: {cwd}")

    try:
        completed = subprocess.run(
            ["git", "-c", "core.quotePath=false", *args],
            cwd=cwd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout,
        )
    except FileNotFoundError as e:
        raise GitNotFoundError("git is not installed or not found in PATH") from e
    except subprocess.TimeoutExpired as e:
        raise GitError(f"git {' '.join(args)} timed out after {timeout}s") from e

    if completed.returncode != 0:
        stderr = completed.stderr.strip()
        if "not a git repository" in stderr.lower():
            raise NotARepositoryError(f"Not a git repository: {cwd}")
        raise GitError(stderr or f"git {' '.join(args)} failed")

    return completed.stdout


def is_valid_repo(repo_root: Path) -> bool:
    """Check whether repo_root is inside a git work tree."""
    try:
        output = _run_git(["rev-parse", "--is-inside-work-tree"], cwd=repo_root)
    except GitError:
        return False
    return output.strip() == "true"


def count_commits(repo_root: Path, timeout: float | None = DEFAULT_GIT_TIMEOUT) -> int:
    """
    Count commits reachable from any ref.

    Uses: git rev-list --count --all

    Raises:
        GitError: If git fails or prints something other than a number
    """
    output = _run_git(["rev-list", "--count", "--all"], cwd=repo_root, timeout=timeout).strip()
    try:
        return int(output)
    except ValueError as e:
        raise GitError(f"Unexpected commit count from git: {output!r}") from e


def select_mode(commit_count: int, threshold: int = LARGE_REPO_THRESHOLD) -> ParseMode:
    """Pick name-only output for repositories above the threshold."""
    if commit_count > threshold:
        return ParseMode.NAME_ONLY
    return ParseMode.NUMSTAT


def log_arguments(mode: ParseMode) -> list[str]:
    """Arguments for the `git log` invocation that produces a given mode."""
    args = ["log", "--all", f"--format={LOG_HEADER_FORMAT}"]
    if ParseMode(mode) is ParseMode.NAME_ONLY:
        return [*args, "--name-only", "--reverse"]
    return [*args, "--shortstat", "--reverse", "--numstat"]


def get_commit_log(
    repo_root: Path,
    mode: ParseMode,
    timeout: float | None = DEFAULT_GIT_TIMEOUT,
) -> str:
    """
    Capture the full history of repo_root, oldest commit first.

    Args:
        repo_root: Path to git repository
        mode: Output shape to request
        timeout: Seconds before git is abandoned

    Returns:
        Raw log text for :func:`extract.parser.parse_commit_log`

    Raises:
        GitError: If git fails
    """
    args = log_arguments(mode)
    logger.debug(f"Running git {' '.join(args)}")
    return _run_git(args, cwd=repo_root, timeout=timeout)


def repo_name(repo_root: Path) -> str:
    """Last component of the repository path, or "repository"."""
    return Path(repo_root).name or "repository"
