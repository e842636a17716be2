"""
Terseid CLI - ID commands.

Generate, inspect and resolve IDs against the project's ID store
(a newline-delimited file, `.terseid/ids.txt` by default).
"""

import json
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from terseid.cli.errors import (
    ExitCode,
    print_ambiguous_id_error,
    print_id_not_found_error,
    print_invalid_id_error,
)
from terseid.core.config import TerseidConfig, load_config
from terseid.core.ids import (
    AmbiguousIdError,
    FileIdRepository,
    IdGenerator,
    IdNotFoundError,
    IdResolver,
    InvalidIdError,
    base36_hash,
    child_id,
    id_depth,
    parse_id,
)

console = Console()


def _open_store(config: TerseidConfig, ids_file: Path | None) -> FileIdRepository:
    return FileIdRepository(ids_file if ids_file is not None else config.store.ids_file)


def hash_cmd(
    seed: str = typer.Argument(..., help="Seed text to hash"),
    length: int = typer.Option(8, "--length", "-l", min=1, help="Hash length"),
) -> None:
    """
    Print the base36 hash of a seed.

    Examples:
        terseid hash "Fix login bug"
        terseid hash "Fix login bug" --length 12
    """
    console.print(base36_hash(seed.encode(), length), soft_wrap=True)


def parse(
    id_str: str = typer.Argument(..., metavar="ID", help="ID to parse"),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output as JSON",
    ),
) -> None:
    """
    Parse an ID and show its parts.

    Examples:
        terseid parse bd-a7x.1.3
        terseid parse MY-PROJ-A7X3Q9 --json
    """
    try:
        parsed = parse_id(id_str)
    except InvalidIdError:
        print_invalid_id_error(id_str)
        raise typer.Exit(ExitCode.USER_ERROR)

    if json_output:
        data = parsed.model_dump(mode="json")
        data["id"] = parsed.to_id_string()
        data["depth"] = parsed.depth()
        data["parent"] = parsed.parent()
        console.print_json(json.dumps(data))
        return

    console.print(f"[bold cyan]{escape(str(parsed))}[/bold cyan]", soft_wrap=True)
    console.print(f"[dim]Prefix:[/dim] {escape(parsed.prefix)}")
    console.print(f"[dim]Hash:[/dim] {parsed.hash}")
    if parsed.child_path:
        console.print(f"[dim]Child path:[/dim] {'.'.join(str(n) for n in parsed.child_path)}")
    console.print(f"[dim]Depth:[/dim] {parsed.depth()}")
    if parent := parsed.parent():
        console.print(f"[dim]Parent:[/dim] {escape(parent)}")


def generate(
    description: str = typer.Argument(..., help="Text the ID is seeded from"),
    prefix: str | None = typer.Option(
        None,
        "--prefix",
        "-p",
        help="Prefix to use instead of the configured one",
    ),
    ids_file: Path | None = typer.Option(
        None,
        "--ids-file",
        help="ID store to check against (default: configured store)",
    ),
    no_save: bool = typer.Option(
        False,
        "--no-save",
        help="Print the ID without recording it in the store",
    ),
) -> None:
    """
    Generate a new ID that does not collide with the store.

    Examples:
        terseid generate "Fix login bug"
        terseid generate "Nightly export" --prefix job --no-save
    """
    config = load_config()
    id_config = config.ids
    if prefix:
        id_config = id_config.model_copy(update={"prefix": prefix.lower()})

    store = _open_store(config, ids_file)
    new_id = IdGenerator(id_config).generate_for(description, store)

    if not no_save:
        store.add(new_id)

    console.print(escape(new_id), soft_wrap=True)


def resolve(
    input: str = typer.Argument(..., metavar="INPUT", help="Full or partial ID"),
    ids_file: Path | None = typer.Option(
        None,
        "--ids-file",
        help="ID store to resolve against (default: configured store)",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output as JSON",
    ),
) -> None:
    """
    Resolve a full, unprefixed or partial ID to one stored ID.

    Examples:
        terseid resolve bd-a7x
        terseid resolve A7X
        terseid resolve a7 --json
    """
    config = load_config()
    store = _open_store(config, ids_file)
    resolver = IdResolver(config.resolver_config())

    try:
        resolved = resolver.resolve(input, store)
    except AmbiguousIdError as e:
        print_ambiguous_id_error(e.partial, e.matches)
        raise typer.Exit(ExitCode.USER_ERROR)
    except IdNotFoundError as e:
        print_id_not_found_error(e.id)
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    if json_output:
        console.print_json(json.dumps(resolved.model_dump(mode="json")))
        return

    console.print(
        f"[bold cyan]{escape(resolved.id)}[/bold cyan] [dim]({resolved.match_type.value})[/dim]",
        soft_wrap=True,
    )


def child(
    parent: str = typer.Argument(..., help="Parent ID"),
    number: int = typer.Argument(..., min=0, max=2**32 - 1, help="Child number"),
) -> None:
    """
    Print the child ID `PARENT.NUMBER`.

    Examples:
        terseid child bd-a7x 1
        terseid child bd-a7x.1 3
    """
    try:
        parent_id = parse_id(parent).to_id_string()
    except InvalidIdError:
        print_invalid_id_error(parent)
        raise typer.Exit(ExitCode.USER_ERROR)

    console.print(escape(child_id(parent_id, number)), soft_wrap=True)


def list_ids(
    ids_file: Path | None = typer.Option(
        None,
        "--ids-file",
        help="ID store to list (default: configured store)",
    ),
) -> None:
    """
    List stored IDs.

    Examples:
        terseid list
        terseid list --ids-file other/ids.txt
    """
    config = load_config()
    store = _open_store(config, ids_file)

    ids = list(store)
    if not ids:
        console.print("[yellow]No IDs stored[/yellow]")
        return

    table = Table(title=f"IDs in {store.path}", border_style="cyan")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Depth", justify="right")

    for id_str in ids:
        table.add_row(escape(id_str), str(id_depth(id_str)))

    console.print(table)
