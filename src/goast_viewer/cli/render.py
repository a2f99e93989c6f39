from collections.abc import Sequence

from rich.console import Console
from rich.text import Text
from rich.tree import Tree

from goast_viewer.models import DisplayNode, DisplayRow

_INDENT = "  "


def print_rows(console: Console, rows: Sequence[DisplayRow]) -> None:
    for row in rows:
        line = Text(f"{row.value:>4}  ", style="dim")
        line.append(_INDENT * row.indent + row.text)
        console.print(line, soft_wrap=True)


def _add_branch(parent: Tree, node: DisplayNode) -> None:
    if node.children and node.collapsed:
        parent.add(Text(f"[+] {node.label}"))
        return
    branch = parent.add(Text(node.label))
    for child in node.children or []:
        _add_branch(branch, child)


def build_tree(title: str, forest: Sequence[DisplayNode]) -> Tree:
    tree = Tree(Text(title, style="bold"))
    for root in forest:
        _add_branch(tree, root)
    return tree
