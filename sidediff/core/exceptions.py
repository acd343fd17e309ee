# -----------------------------------------------------------------------------
# sidediff - Dual Licensed Software
# Copyright (c) 2025 Adem Can
#
# This file is part of sidediff.
#
# sidediff is available under a dual-license:
#   1. AGPLv3 (Affero General Public License v3)
#      - See LICENSE.txt and LICENSE-AGPL.txt
#      - Online: https://www.gnu.org/licenses/agpl-3.0.html
#
#   2. Commercial License
#      - For proprietary or revenue-generating use,
#        including SaaS, embedding in closed-source software,
#        or avoiding AGPL obligations.
#      - See LICENSE.txt and COMMERCIAL-LICENSE.txt
#      - Contact: ademfcan@gmail.com
#
# By using this file, you agree to the terms of one of the two licenses above.
# -----------------------------------------------------------------------------


"""
Exception hierarchy for sidediff.

The alignment engine itself never raises on well-formed input; these errors
come from the layers around it: resolving refs, reading blobs and files,
and loading configuration.
"""

import functools

import typer
from loguru import logger


class sidediffError(Exception):
    """
    Base exception for all sidediff errors.

    All sidediff-specific exceptions inherit from this class so the CLI can
    report them uniformly.
    """

    def __init__(self, message: str, details: str | None = None):
        """
        Initialize a sidediffError.

        Args:
            message: Main error message for the user
            details: Additional technical details for logging
        """
        self.message = message
        self.details = details
        super().__init__(message)


class GitError(sidediffError):
    """
    Errors related to git operations.

    Raised when git is unavailable, the path is not a repository, or a git
    command fails in a way the caller cannot recover from.
    """

    pass


class InvalidRefError(GitError):
    """Raised when a ref, branch, tag or SHA does not resolve to a commit."""

    pass


class ValidationError(sidediffError):
    """
    Input validation errors.

    Raised when user input fails validation checks, such as a path that
    exists on neither side of a diff.
    """

    pass


class NotFoundError(ValidationError):
    """Raised when a requested file exists on neither side of a diff."""

    pass


class ConfigurationError(sidediffError):
    """
    Configuration-related errors.

    Raised when configuration files are invalid or contain incompatible
    settings.
    """

    pass


class FileSystemError(sidediffError):
    """
    File system operation errors.

    Raised when reading a file from the working tree or disk fails.
    """

    pass


# Convenience functions for creating common errors
def git_not_found() -> GitError:
    """Create a GitError for when git is not available."""
    return GitError(
        "Git is not installed or not in PATH",
        "Please install git and ensure it's available in your PATH environment variable",
    )


def not_git_repository(path: str = ".") -> GitError:
    """Create a GitError for when not in a git repository."""
    return GitError(
        f"Not a git repository: {path}",
        "Run 'git init' to initialize a git repository or navigate to an existing repository",
    )


def invalid_ref(ref: str) -> InvalidRefError:
    """Create an InvalidRefError for a ref that does not resolve."""
    return InvalidRefError(
        f"Cannot resolve '{ref}'",
        "Use a branch, tag, commit SHA, HEAD~N, or '@' for the working tree",
    )


def path_not_found(path: str, before: str | None = None, after: str | None = None) -> NotFoundError:
    """Create a NotFoundError for a path missing from both sides."""
    if before is not None and after is not None:
        return NotFoundError(
            f"File '{path}' not found in either {before} or {after}",
            "Please check the path is relative to the repository root",
        )
    return NotFoundError(
        f"Path not found: {path}",
        "Please check that the path exists and is accessible",
    )


def file_read_failed(path: str, reason: str) -> FileSystemError:
    """Create a FileSystemError for a file that could not be read."""
    return FileSystemError(f"Cannot read file: {path}", reason)


def handle_sidediff_exception(func):
    """
    Decorator for CLI entry points: report sidediff errors and exit with 1.

    typer.Exit and anything that is not a sidediffError pass through.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except sidediffError as e:
            logger.error(f"[red]Error:[/red] {e.message}")
            if e.details:
                logger.debug(f"Details: {e.details}")
            raise typer.Exit(1) from e

    return wrapper
