"""CLI for snapshot-tree."""

import json
import logging
import os
from pathlib import Path
from typing import NoReturn, Optional

import typer
from pydantic import TypeAdapter, ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree as RichTree

from .classify import get_git_mode, get_git_type
from .config import load_hierarchy_config
from .errors import SnapshotTreeError
from .hierarchy import build_hierarchy
from .models import FlatTree, SnapshotTree, SummaryObject, SummaryTree
from .tree_entries import convert_summary_tree_to_tree


app = typer.Typer(help="""\
Inspect document snapshots stored as git trees. Rebuild the hierarchy of a
flat tree listing, classify summary objects, convert summaries to storage
trees.""")

console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


def _fail(message: str, exc: Optional[BaseException] = None) -> NoReturn:
    """Print an error and exit with status 1."""
    if exc is not None and os.environ.get("DEBUG"):
        console.print_exception()
    console.print(f"[red]✗[/red] {escape(message)}")
    raise typer.Exit(1)


def _read_json(path: Path):
    try:
        return json.loads(path.read_text())
    except FileNotFoundError as e:
        _fail(f"File not found: {path}", e)
    except json.JSONDecodeError as e:
        _fail(f"Invalid JSON in {path}: {e}", e)
    except OSError as e:
        _fail(f"Cannot read {path}: {e.strerror or e}", e)


def _render_snapshot(snapshot: SnapshotTree, label: str) -> RichTree:
    """Render a snapshot as a rich tree: dirs bold, commits dim."""
    node = RichTree(f"[bold]{escape(label)}[/bold] [dim]{snapshot.id or ''}[/dim]")
    for name, subtree in snapshot.trees.items():
        node.add(_render_snapshot(subtree, f"{name}/"))
    for name, sha in snapshot.blobs.items():
        node.add(f"{escape(name)} [dim]{sha}[/dim]")
    for name, sha in snapshot.commits.items():
        node.add(f"[magenta]{escape(name)}[/magenta] [dim]commit {sha}[/dim]")
    return node


@app.command()
def build(
    listing: Path = typer.Argument(..., help="JSON file with a flat tree listing"),
    strip_app_prefix: Optional[bool] = typer.Option(
        None,
        "--strip-app-prefix/--no-strip-app-prefix",
        help="Remove a leading .app/ from entry paths (default from config)",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the hierarchy as JSON"),
    show_index: bool = typer.Option(False, "--index", help="Also print the blob sha -> path index"),
):
    """Rebuild the hierarchy of a flat, breadth-first tree listing.

    Examples:
        snapshot-tree build listing.json
        snapshot-tree build listing.json --strip-app-prefix --index
    """
    if strip_app_prefix is None:
        try:
            strip_app_prefix = load_hierarchy_config(Path.cwd()).remove_app_tree_prefix
        except SnapshotTreeError as e:
            _fail(str(e), e)

    data = _read_json(listing)
    blob_paths = {}
    try:
        flat_tree = FlatTree.model_validate(data)
        snapshot = build_hierarchy(flat_tree, blob_paths, remove_app_tree_prefix=strip_app_prefix)
    except ValidationError as e:
        _fail(f"Invalid tree listing in {listing}:\n{e}", e)
    except SnapshotTreeError as e:
        _fail(str(e), e)

    if as_json:
        console.print_json(snapshot.model_dump_json())
    else:
        console.print(_render_snapshot(snapshot, "/"))

    if show_index:
        table = Table(title="Blob index")
        table.add_column("SHA", style="cyan")
        table.add_column("Path")
        for sha, path in blob_paths.items():
            table.add_row(sha, path)
        console.print(table)


@app.command()
def classify(
    summary: Path = typer.Argument(..., help="JSON file with a summary object"),
):
    """Show the git mode and type of each entry of a summary tree."""
    data = _read_json(summary)
    try:
        value = TypeAdapter(SummaryObject).validate_python(data)
    except ValidationError as e:
        _fail(f"Invalid summary object in {summary}:\n{e}", e)

    items = value.tree.items() if isinstance(value, SummaryTree) else [(summary.name, value)]
    table = Table()
    table.add_column("Name", style="cyan")
    table.add_column("Summary type")
    table.add_column("Mode")
    table.add_column("Type")
    try:
        for name, obj in items:
            table.add_row(escape(name), obj.type.name, get_git_mode(obj).value, get_git_type(obj))
    except SnapshotTreeError as e:
        _fail(str(e), e)
    console.print(table)


@app.command()
def convert(
    summary: Path = typer.Argument(..., help="JSON file with a summary tree"),
):
    """Convert a summary tree to the storage tree JSON."""
    data = _read_json(summary)
    try:
        summary_tree = SummaryTree.model_validate(data)
        tree = convert_summary_tree_to_tree(summary_tree)
    except ValidationError as e:
        _fail(f"Invalid summary tree in {summary}:\n{e}", e)
    except SnapshotTreeError as e:
        _fail(str(e), e)

    console.print_json(tree.model_dump_json(exclude_none=True))


if __name__ == "__main__":
    app()
