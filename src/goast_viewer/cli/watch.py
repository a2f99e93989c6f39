import asyncio
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from goast_viewer.cli.render import print_rows
from goast_viewer.core.ast import read_source_blob
from goast_viewer.core.ports.watcher import SourceWatcherPort
from goast_viewer.core.viewer import TreeViewer
from goast_viewer.watcher.watchfiles_adapter import WatchfilesWatcher

console = Console()


def _render(viewer: TreeViewer, path: Path) -> None:
    console.clear()
    console.rule(str(path))
    error = viewer.error_text()
    if error is not None:
        console.print(f"[red]{error}[/red]")
        return
    print_rows(console, viewer.rows())


def watch(
    path: Annotated[str, typer.Argument(help="txtar archive or single Go file to watch.")],
    suffix: Annotated[str | None, typer.Option(help="Source-file suffix to parse (default: .go).")] = None,
) -> None:
    """Re-render the AST rows every time the file changes."""
    file_path = Path(path)
    if not file_path.is_file():
        console.print(f"[red]Error:[/red] File not found: {path}")
        raise typer.Exit(1)

    viewer = TreeViewer(suffix)

    def _reload() -> None:
        try:
            viewer.set_source(read_source_blob(file_path, suffix))
        except FileNotFoundError:
            # Editors that save by rename remove the file briefly.
            return
        _render(viewer, file_path)

    async def _on_change(_changed: Path) -> None:
        _reload()

    async def _run() -> None:
        watcher: SourceWatcherPort = WatchfilesWatcher(file_path, _on_change)
        await watcher.start()
        try:
            await watcher.wait()
        finally:
            await watcher.stop()

    _reload()
    try:
        asyncio.run(_run())
    except KeyboardInterrupt:
        console.print("[yellow]Stopped watching.[/yellow]")
