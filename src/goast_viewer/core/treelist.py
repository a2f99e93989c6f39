"""Flattening and collapse handling for display forests.

Rows are addressed by their index in a fresh ``flatten`` of the forest.
"""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from goast_viewer.models import DisplayNode, DisplayRow

_COLLAPSED_MARKER = "[+] "
_EXPANDED_MARKER = "[-] "
_LEAF_PADDING = "    "


@dataclass(frozen=True)
class FlatEntry:
    node: DisplayNode
    indent: int


def _walk(node: DisplayNode) -> Iterator[DisplayNode]:
    yield node
    if not node.collapsed:
        for child in node.children or []:
            yield from _walk(child)


def flatten(forest: Sequence[DisplayNode]) -> list[FlatEntry]:
    """Visible nodes in depth-first pre-order; a collapsed node hides its subtree."""
    return [FlatEntry(node=node, indent=node.indent_level) for root in forest for node in _walk(root)]


def _node_at(forest: Sequence[DisplayNode], index: int) -> DisplayNode | None:
    if index < 0:
        return None
    entries = flatten(forest)
    if index >= len(entries):
        return None
    return entries[index].node


def toggle(forest: Sequence[DisplayNode], index: int) -> None:
    """Invert the collapse flag of the row at ``index``; leaves and bad indices are ignored."""
    node = _node_at(forest, index)
    if node is not None and node.has_children:
        node.collapsed = not node.collapsed


def set_expanded(forest: Sequence[DisplayNode], index: int, expanded: bool) -> None:
    node = _node_at(forest, index)
    if node is not None and node.has_children:
        node.collapsed = not expanded


def _set_all(nodes: Sequence[DisplayNode], collapsed: bool) -> None:
    for node in nodes:
        if node.children:
            node.collapsed = collapsed
            _set_all(node.children, collapsed)


def expand_all(forest: Sequence[DisplayNode]) -> None:
    _set_all(forest, False)


def collapse_all(forest: Sequence[DisplayNode]) -> None:
    _set_all(forest, True)


def row_text(node: DisplayNode) -> str:
    if not node.has_children:
        return _LEAF_PADDING + node.label
    marker = _COLLAPSED_MARKER if node.collapsed else _EXPANDED_MARKER
    return marker + node.label


def to_rows(entries: Sequence[FlatEntry]) -> list[DisplayRow]:
    return [
        DisplayRow(text=row_text(entry.node), indent=entry.indent, collapsed=entry.node.collapsed, value=index)
        for index, entry in enumerate(entries)
    ]
