"""Shared fixtures for tests."""

from collections.abc import Callable

import pytest
from tree_sitter import Node, Parser
from tree_sitter_language_pack import get_parser

from goast_viewer.core.archive import wrap_single_file
from goast_viewer.core.ast import parse_source
from goast_viewer.core.golang import named_children
from goast_viewer.models import DisplayNode
from tree_helpers import find

# ---------------------------------------------------------------------------
# Auto-marker: every test here is a unit test
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Shared unit-test fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def go_parser() -> Parser:
    """Return a tree-sitter parser for Go."""
    return get_parser("go")


@pytest.fixture
def parse_file() -> Callable[[str], list[DisplayNode]]:
    """Parse one Go file and return the children of its ``File:`` node."""

    def _parse(source: str) -> list[DisplayNode]:
        forest = parse_source(wrap_single_file("main.go", source))
        assert len(forest) == 1
        return forest[0].children or []

    return _parse


@pytest.fixture
def parse_body(parse_file: Callable[[str], list[DisplayNode]]) -> Callable[[str], DisplayNode]:
    """Parse statements placed inside ``func f()`` and return its ``BlockStmt``."""

    def _parse(body: str) -> DisplayNode:
        nodes = parse_file(f"package main\n\nfunc f() {{\n{body}\n}}\n")
        func = find(nodes, "Func: f")
        assert func.children is not None
        return func.children[-1]

    return _parse


@pytest.fixture
def parse_expr(go_parser: Parser) -> Callable[[str], Node]:
    """Return the syntax node of ``var _ = <expr>``."""

    def _parse(expr: str) -> Node:
        tree = go_parser.parse(f"package main\n\nvar _ = {expr}\n".encode())
        assert not tree.root_node.has_error
        declaration = named_children(tree.root_node)[-1]
        spec = named_children(declaration)[0]
        value = spec.child_by_field_name("value")
        assert value is not None
        return named_children(value)[0]

    return _parse


@pytest.fixture
def parse_type(go_parser: Parser) -> Callable[[str], Node]:
    """Return the syntax node of the type in ``type T <type>``."""

    def _parse(type_text: str) -> Node:
        tree = go_parser.parse(f"package main\n\ntype T {type_text}\n".encode())
        assert not tree.root_node.has_error
        declaration = named_children(tree.root_node)[-1]
        spec = named_children(declaration)[0]
        type_node = spec.child_by_field_name("type")
        assert type_node is not None
        return type_node

    return _parse


@pytest.fixture
def sample_archive() -> str:
    return (
        "Two files and a readme.\n"
        "-- README.md --\n"
        "# notes\n"
        "-- broken.go --\n"
        "package main\n"
        "func {\n"
        "-- main.go --\n"
        "package main\n"
        "\n"
        "func main() {}\n"
    )
