#!/usr/bin/env python3
"""CLI interface for rush."""

import argparse
import threading
import webbrowser
from pathlib import Path

from rich.markup import escape

from common.env import env
from common.logger import console, error, progress, setup_logging, success

from .git_utils import GitError
from .main import generate_data
from .models import RepositorySnapshot

BROWSER_DELAY_SECONDS = 0.2


def print_summary(snapshot: RepositorySnapshot) -> None:
    """Print aggregate statistics for a loaded history."""
    first = snapshot.first_commit_date
    last = snapshot.last_commit_date

    progress(f"Total Commits: {snapshot.total_commits}")
    progress(f"Contributors: {len(snapshot.authors)}")
    if first is not None:
        progress(f"First Commit: {first:%Y-%m-%d}")
    if last is not None:
        progress(f"Last Commit: {last:%Y-%m-%d}")
    progress(f"Duration: {snapshot.duration_days} days\n")


def _extract(args) -> RepositorySnapshot | None:
    """Load history for args.repo and write args.output; None on failure."""
    repo_path = args.repo.resolve()
    progress(f"[red]Repository:[/red] {escape(str(repo_path))}\n")

    try:
        snapshot = generate_data(repo_path, args.output)
    except GitError as e:
        error(f"Error reading commits: {escape(str(e))}")
        return None

    if snapshot.total_commits == 0:
        error("No commits found in repository")
        return None

    print_summary(snapshot)
    return snapshot


def cmd_extract(args):
    """Write commits-data.json for a repository.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    if _extract(args) is None:
        return 1
    success(f"Commit data saved to {escape(str(args.output))}")
    return 0


def cmd_serve(args):
    """Write commits-data.json, then serve it with the browser page.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    from api.main import serve

    console.clear()
    if _extract(args) is None:
        return 1

    url = f"http://{args.host}:{args.port}"
    success(f"Server running at [bold]{url}[/bold]\n")

    if args.open_browser:
        timer = threading.Timer(BROWSER_DELAY_SECONDS, webbrowser.open, args=(url,))
        timer.daemon = True
        timer.start()

    try:
        serve(args.output, host=args.host, port=args.port)
    except KeyboardInterrupt:
        pass
    progress("Bye")
    return 0


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "repo",
        type=Path,
        nargs="?",
        default=Path("."),
        help="Path to the git repository (default: current directory)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=env.output_path(),
        help="Where to write the commit data (default: ./commits-data.json)",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="rush", description="Extract and explore a repository's commit history"
    )
    parser.add_argument("--log-level", default="INFO", help="Logging level (default: INFO)")

    subparsers = parser.add_subparsers(dest="command", required=True)

    extract_parser = subparsers.add_parser("extract", help="Write commit history as JSON")
    _add_common_arguments(extract_parser)
    extract_parser.set_defaults(func=cmd_extract)

    serve_parser = subparsers.add_parser(
        "serve", help="Write commit history as JSON and serve it to a browser"
    )
    _add_common_arguments(serve_parser)
    serve_parser.add_argument("--host", default=env.host(), help="Interface to bind")
    serve_parser.add_argument("--port", type=int, default=env.port(), help="Port to bind")
    serve_parser.add_argument(
        "--no-browser",
        dest="open_browser",
        action="store_false",
        default=env.open_browser(),
        help="Do not open a browser window",
    )
    serve_parser.set_defaults(func=cmd_serve)

    return parser


def main(argv: list[str] | None = None):
    """Main entry point for the CLI."""
    args = build_parser().parse_args(argv)
    setup_logging(level=args.log_level)
    return args.func(args)


if __name__ == "__main__":
    exit(main())
