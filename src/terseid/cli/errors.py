"""
Standardized error handling and exit codes for the terseid CLI.

This module provides consistent error messaging with actionable guidance
and standardized exit codes across all CLI commands.
"""

from enum import IntEnum

from rich.console import Console
from rich.markup import escape

console = Console(stderr=True)


class ExitCode(IntEnum):
    """Standard exit codes for terseid CLI operations."""

    SUCCESS = 0
    """Operation completed successfully."""

    GENERAL_ERROR = 1
    """Generic error, including IDs that could not be found."""

    USER_ERROR = 2
    """Malformed or ambiguous input (actionable by user)."""


def print_error(
    problem: str,
    *,
    reason: str | None = None,
    solution: str | None = None,
) -> None:
    """
    Print a standardized error message with actionable guidance.

    Args:
        problem: Brief description of what went wrong
        reason: Optional explanation of why it happened
        solution: Optional command or action to fix it

    Example:
        >>> print_error(
        ...     "Invalid ID: bd-test",
        ...     reason="Hashes of 4 or more characters must contain a digit",
        ...     solution="terseid parse bd-tes3",
        ... )
    """
    console.print(f"[red]Error:[/red] {escape(problem)}")

    if reason:
        console.print(f"[dim]{escape(reason)}[/dim]")

    if solution:
        console.print(f"[cyan]→ Try:[/cyan] {escape(solution)}")


def print_invalid_id_error(id_str: str) -> None:
    """Print error when a string does not satisfy the ID grammar."""
    print_error(
        f"Invalid ID format: {id_str}",
        reason=(
            "IDs look like prefix-hash[.n...]; the hash is base36 and "
            "needs a digit once it is 4 or more characters long"
        ),
    )


def print_id_not_found_error(id_str: str) -> None:
    """Print error when resolution found nothing."""
    print_error(
        f"ID not found: {id_str}",
        reason="No exact, prefixed, or partial-hash match exists in the ID store",
        solution="terseid list  # to see issued IDs",
    )


def print_ambiguous_id_error(partial: str, matches: list[str]) -> None:
    """Print error when a partial ID matches several IDs."""
    print_error(
        f"Ambiguous ID '{partial}' matches {len(matches)} IDs",
        reason="Candidates: " + ", ".join(matches),
        solution="Type more characters of the hash",
    )


__all__ = [
    "ExitCode",
    "print_error",
    "print_invalid_id_error",
    "print_id_not_found_error",
    "print_ambiguous_id_error",
]
