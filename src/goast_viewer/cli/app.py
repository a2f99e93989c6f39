import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from goast_viewer.cli.serve import serve
from goast_viewer.cli.show import show, tree
from goast_viewer.cli.watch import watch

app = typer.Typer(
    name="goast-viewer",
    help="Go AST viewer: render txtar archives of Go code as collapsible trees.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback()
def configure(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log parsing details to stderr.")] = False,
) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )


app.command("show")(show)
app.command("tree")(tree)
app.command("watch")(watch)
app.command("serve")(serve)


def main() -> None:
    app()
