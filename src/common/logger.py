"""Logging utilities with rich console output for the rush CLI.

Every module gets its logger from here so that the parser, the git layer and
the server all share one console and one formatting style. Module loggers
carry no handlers of their own; records propagate to a single rich handler on
the root logger, which is also where pytest's caplog listens.

Usage:
    from common.logger import get_logger

    logger = get_logger(__name__)
    logger.info("Reading history...")
    logger.debug("Skipping line that looked like a header")
"""

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

# Global console instances for consistent output
console = Console()
error_console = Console(stderr=True)


def _rich_handler() -> RichHandler:
    handler = RichHandler(
        console=console,
        show_time=False,
        show_path=False,
        rich_tracebacks=True,
        markup=False,
    )
    handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
    return handler


def _ensure_console_handler() -> None:
    root_logger = logging.getLogger()
    if not any(isinstance(h, RichHandler) for h in root_logger.handlers):
        root_logger.addHandler(_rich_handler())


def get_logger(name: str, level: str | None = None) -> logging.Logger:
    """Get a logger that writes through the shared rich console.

    Args:
        name: Logger name (typically __name__ of the module)
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               If None, uses environment variable LOG_LEVEL when set and
               otherwise inherits the root logger's level.

    Returns:
        Configured logger instance

    Example:
        >>> logger = get_logger(__name__, level="DEBUG")
        >>> logger.debug("Detailed info")
        DEBUG    Detailed info
    """
    _ensure_console_handler()

    logger = logging.getLogger(name)
    if level is None:
        level = os.getenv("LOG_LEVEL")
    if level:
        logger.setLevel(level.upper())
    return logger


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure the root logger once at the CLI entry point.

    Args:
        level: Default logging level for all modules
        log_file: Optional file path to also log to a file

    Example:
        from common.logger import setup_logging

        def main():
            setup_logging(level="INFO")
    """
    level = os.getenv("LOG_LEVEL", level).upper()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    root_logger.addHandler(_rich_handler())

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root_logger.addHandler(file_handler)


def progress(message: str) -> None:
    """Print a plain progress line.

    Example:
        >>> progress("Total Commits: 42")
        Total Commits: 42
    """
    console.print(message)


def success(message: str) -> None:
    """Print a success line with a green checkmark."""
    console.print(f"[green]✓[/green] {message}")


def warning(message: str) -> None:
    """Print a warning line with a yellow warning icon."""
    console.print(f"[yellow]⚠[/yellow] {message}")


def error(message: str) -> None:
    """Print an error line with a red X icon on stderr."""
    error_console.print(f"[red]✗[/red] {message}")
