"""Parsing Go source with tree-sitter.

tree-sitter recovers from every syntax error, so this module turns a tree
that contains ``ERROR`` or missing nodes back into a single failure, the way
a compiler front end would report it.
"""

from tree_sitter import Node
from tree_sitter_language_pack import get_parser

COMMENT = "comment"

_DECLARATION_TYPES = frozenset(
    {
        "import_declaration",
        "function_declaration",
        "method_declaration",
        "type_declaration",
        "const_declaration",
        "var_declaration",
    }
)


class GoSyntaxError(ValueError):
    """A Go file could not be parsed."""


def node_text(node: Node | None) -> str:
    if node is None or node.text is None:
        return ""
    return node.text.decode("utf-8", errors="replace")


def named_children(node: Node) -> list[Node]:
    """Named children of ``node`` without comments."""
    return [child for child in node.named_children if child.type != COMMENT]


def _position(file_name: str, node: Node) -> str:
    row, column = node.start_point[0], node.start_point[1]
    return f"{file_name}:{row + 1}:{column + 1}"


def _token(node: Node) -> str:
    """Describe the first token covered by ``node``."""
    while node.child_count > 0:
        node = node.children[0]
    text = node_text(node)
    if not text:
        return "EOF"
    return repr(text.splitlines()[0]) if text.strip() else "newline"


def _first_error(node: Node) -> Node | None:
    if node.is_error or node.is_missing:
        return node
    for child in node.children:
        if child.has_error or child.is_missing:
            found = _first_error(child)
            if found is not None:
                return found
    return None


def _describe_error(file_name: str, node: Node) -> str:
    if node.is_missing:
        return f"{_position(file_name, node)}: expected {node.type!r}"
    return f"{_position(file_name, node)}: syntax error: unexpected {_token(node)}"


def _check_structure(file_name: str, root: Node) -> None:
    children = named_children(root)
    if not children or children[0].type != "package_clause":
        found = children[0] if children else None
        where = _position(file_name, found) if found is not None else f"{file_name}:1:1"
        token = _token(found) if found is not None else "EOF"
        raise GoSyntaxError(f"{where}: expected 'package', found {token}")
    for child in children[1:]:
        if child.type not in _DECLARATION_TYPES:
            raise GoSyntaxError(f"{_position(file_name, child)}: expected declaration, found {_token(child)}")


def parse_go(file_name: str, contents: bytes) -> Node:
    """Parse one Go file and return its ``source_file`` node.

    Raises ``GoSyntaxError`` when the file is not valid Go.
    """
    tree = get_parser("go").parse(contents)
    root = tree.root_node
    if root.has_error:
        error_node = _first_error(root)
        if error_node is None:
            raise GoSyntaxError(f"{file_name}:1:1: syntax error")
        raise GoSyntaxError(_describe_error(file_name, error_node))
    _check_structure(file_name, root)
    return root
