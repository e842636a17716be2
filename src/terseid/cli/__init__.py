"""
Terseid CLI - Main application entry point.

This module sets up the Typer CLI application with all subcommands.
"""

import logging
import sys

import typer
from rich.console import Console
from rich.markup import escape

from terseid import __version__
from terseid.cli import ids

# Help panel names for command grouping
PANEL_IDS = "Work with IDs"
PANEL_STORE = "Inspect the ID Store"
PANEL_INSTALL = "About terseid"

# Create the main Typer app
app = typer.Typer(
    name="terseid",
    help="Short, typeable, collision-resistant IDs",
    no_args_is_help=True,
    add_completion=False,
    context_settings={"help_option_names": ["--help", "-h"]},
)

console = Console()


def setup_logging(debug: bool = False) -> None:
    """
    Configure logging for terseid commands.

    Args:
        debug: If True, enable DEBUG level logging
    """
    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


@app.callback()
def main(
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug output with detailed logging",
    ),
) -> None:
    """
    Terseid - short, typeable, collision-resistant IDs.

    IDs look like bd-a7x: a prefix, a base36 hash that grows with the
    number of issued IDs, and optional child numbers (bd-a7x.1.3).

    Common Workflows:
        terseid generate "Fix login bug"   # Issue a new ID
        terseid resolve a7x                # Find an ID from partial input
        terseid parse bd-a7x.1.3           # Inspect an ID
        terseid child bd-a7x 1             # Derive a child ID
    """
    setup_logging(debug)


# =============================================================================
# Work with IDs
# =============================================================================

app.command(name="generate", rich_help_panel=PANEL_IDS)(ids.generate)
app.command(name="resolve", rich_help_panel=PANEL_IDS)(ids.resolve)
app.command(name="parse", rich_help_panel=PANEL_IDS)(ids.parse)
app.command(name="child", rich_help_panel=PANEL_IDS)(ids.child)
app.command(name="hash", rich_help_panel=PANEL_IDS)(ids.hash_cmd)


# =============================================================================
# Inspect the ID Store
# =============================================================================

app.command(name="list", rich_help_panel=PANEL_STORE)(ids.list_ids)


# =============================================================================
# About terseid
# =============================================================================


@app.command(rich_help_panel=PANEL_INSTALL)
def version() -> None:
    """Show terseid version and exit."""
    console.print(f"terseid version {escape(__version__)}")
    raise typer.Exit(0)


def cli_main() -> None:
    """Main CLI entry point."""
    app()


__all__ = ["app", "cli_main"]
