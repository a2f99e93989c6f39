"""Unit tests for flattening, toggling and row building."""

import pytest

from goast_viewer.core.treelist import collapse_all, expand_all, flatten, set_expanded, to_rows, toggle
from goast_viewer.models import DisplayNode


def _forest() -> list[DisplayNode]:
    """Two roots:

    a
      b
        c
      d
    e
    """
    c = DisplayNode(label="c", indent_level=3)
    b = DisplayNode(label="b", indent_level=2, children=[c])
    d = DisplayNode(label="d", indent_level=2)
    a = DisplayNode(label="a", indent_level=1, children=[b, d])
    e = DisplayNode(label="e", indent_level=1)
    return [a, e]


def _labels(forest: list[DisplayNode]) -> list[str]:
    return [entry.node.label for entry in flatten(forest)]


class TestFlatten:
    def test_pre_order(self) -> None:
        assert _labels(_forest()) == ["a", "b", "c", "d", "e"]

    def test_indent_comes_from_node(self) -> None:
        assert [entry.indent for entry in flatten(_forest())] == [1, 2, 3, 2, 1]

    def test_collapsed_node_is_kept_but_subtree_hidden(self) -> None:
        forest = _forest()
        forest[0].collapsed = True
        assert _labels(forest) == ["a", "e"]

    def test_nested_collapse(self) -> None:
        forest = _forest()
        (forest[0].children or [])[0].collapsed = True
        assert _labels(forest) == ["a", "b", "d", "e"]

    def test_empty_forest(self) -> None:
        assert flatten([]) == []

    def test_repeatable(self) -> None:
        forest = _forest()
        assert flatten(forest) == flatten(forest)


class TestToggle:
    def test_collapses_then_restores(self) -> None:
        forest = _forest()
        before = _labels(forest)
        toggle(forest, 1)
        assert _labels(forest) == ["a", "b", "d", "e"]
        toggle(forest, 1)
        assert _labels(forest) == before
        assert (forest[0].children or [])[0].collapsed is False

    def test_leaf_is_noop(self) -> None:
        forest = _forest()
        toggle(forest, 2)
        assert all(not entry.node.collapsed for entry in flatten(forest))

    def test_leaf_with_flag_set_stays_untouched(self) -> None:
        forest = _forest()
        forest[1].collapsed = True
        toggle(forest, 4)
        assert forest[1].collapsed is True

    @pytest.mark.parametrize("index", [-1, 5, 100])
    def test_out_of_range_is_noop(self, index: int) -> None:
        forest = _forest()
        toggle(forest, index)
        assert _labels(forest) == ["a", "b", "c", "d", "e"]

    def test_index_refers_to_visible_rows(self) -> None:
        forest = _forest()
        toggle(forest, 0)
        # "e" is now row 1; it is a leaf so nothing changes.
        toggle(forest, 1)
        assert _labels(forest) == ["a", "e"]


class TestSetExpanded:
    def test_collapse_and_expand(self) -> None:
        forest = _forest()
        set_expanded(forest, 0, False)
        assert forest[0].collapsed is True
        set_expanded(forest, 0, False)
        assert forest[0].collapsed is True
        set_expanded(forest, 0, True)
        assert forest[0].collapsed is False

    def test_out_of_range_is_noop(self) -> None:
        forest = _forest()
        set_expanded(forest, 9, False)
        assert _labels(forest) == ["a", "b", "c", "d", "e"]


class TestCollapseAll:
    def test_collapse_and_expand_all(self) -> None:
        forest = _forest()
        collapse_all(forest)
        assert _labels(forest) == ["a", "e"]
        assert forest[1].collapsed is False
        expand_all(forest)
        assert _labels(forest) == ["a", "b", "c", "d", "e"]


class TestToRows:
    def test_markers_and_padding(self) -> None:
        forest = _forest()
        (forest[0].children or [])[0].collapsed = True
        rows = to_rows(flatten(forest))
        assert [row.text for row in rows] == ["[-] a", "[+] b", "    d", "    e"]

    def test_values_indents_and_flags(self) -> None:
        forest = _forest()
        forest[0].collapsed = True
        rows = to_rows(flatten(forest))
        assert [(row.value, row.indent, row.collapsed) for row in rows] == [(0, 1, True), (1, 1, False)]
