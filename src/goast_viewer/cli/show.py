from typing import Annotated

import typer
from rich.console import Console

from goast_viewer.cli.render import build_tree, print_rows
from goast_viewer.core.ast import parse_source, read_source_blob
from goast_viewer.core.treelist import collapse_all, flatten, to_rows, toggle
from goast_viewer.core.viewer import SAMPLE_SOURCE
from goast_viewer.models import DisplayNode

console = Console()

PathArgument = Annotated[
    str | None,
    typer.Argument(help="txtar archive or single Go file. Uses a built-in sample when omitted."),
]
SuffixOption = Annotated[str | None, typer.Option(help="Source-file suffix to parse (default: .go).")]


def load_blob(path: str | None, suffix: str | None) -> str:
    if path is None:
        return SAMPLE_SOURCE
    try:
        return read_source_blob(path, suffix)
    except (FileNotFoundError, ValueError) as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(1) from None


def build_forest(blob: str, suffix: str | None) -> list[DisplayNode]:
    try:
        return parse_source(blob, suffix)
    except ValueError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(1) from None


def show(
    path: PathArgument = None,
    suffix: SuffixOption = None,
    toggles: Annotated[
        list[int] | None,
        typer.Option("--toggle", "-t", help="Row index to toggle; repeat to apply several in order."),
    ] = None,
    collapsed: Annotated[bool, typer.Option("--collapsed", help="Start with every node collapsed.")] = False,
    json_output: Annotated[bool, typer.Option("--json", help="Print rows as JSON.")] = False,
) -> None:
    """Print the flattened AST rows of a txtar archive."""
    forest = build_forest(load_blob(path, suffix), suffix)
    if collapsed:
        collapse_all(forest)
    for index in toggles or []:
        toggle(forest, index)

    rows = to_rows(flatten(forest))
    if json_output:
        console.print_json(data=[row.model_dump() for row in rows])
    else:
        print_rows(console, rows)


def tree(
    path: PathArgument = None,
    suffix: SuffixOption = None,
) -> None:
    """Print the AST of a txtar archive as a tree."""
    forest = build_forest(load_blob(path, suffix), suffix)
    console.print(build_tree("AST Tree:", forest))
