"""Unit tests for the viewer session."""

from goast_viewer.core.viewer import SAMPLE_SOURCE, TreeViewer


class TestTreeViewer:
    def test_starts_empty(self) -> None:
        viewer = TreeViewer()
        assert viewer.forest is None
        assert viewer.rows() == []
        assert viewer.error_text() is None

    def test_set_source_builds_rows(self) -> None:
        viewer = TreeViewer()
        viewer.set_source(SAMPLE_SOURCE)
        rows = viewer.rows()
        assert rows[0].text == "[-] File: main.go"
        assert rows[1].text == "    Package: main"
        assert [row.value for row in rows] == list(range(len(rows)))

    def test_toggle_collapses_root(self) -> None:
        viewer = TreeViewer()
        viewer.set_source(SAMPLE_SOURCE)
        viewer.toggle(0)
        rows = viewer.rows()
        assert len(rows) == 1
        assert rows[0].text == "[+] File: main.go"
        assert rows[0].collapsed is True

    def test_set_expanded(self) -> None:
        viewer = TreeViewer()
        viewer.set_source(SAMPLE_SOURCE)
        viewer.set_expanded(0, False)
        assert len(viewer.rows()) == 1
        viewer.set_expanded(0, True)
        assert len(viewer.rows()) > 1

    def test_reparse_resets_collapse_state(self) -> None:
        viewer = TreeViewer()
        viewer.set_source(SAMPLE_SOURCE)
        viewer.toggle(0)
        viewer.set_source(SAMPLE_SOURCE)
        assert viewer.rows()[0].collapsed is False

    def test_archive_error(self) -> None:
        viewer = TreeViewer()
        viewer.set_source("-- notes.txt --\nhello\n")
        assert viewer.forest is None
        assert viewer.rows() == []
        assert viewer.error_text() == "Error: no .go files found in txtar content"

    def test_error_cleared_by_valid_source(self) -> None:
        viewer = TreeViewer()
        viewer.set_source("nothing here")
        viewer.set_source(SAMPLE_SOURCE)
        assert viewer.error is None
        assert viewer.forest is not None

    def test_empty_source_clears_everything(self) -> None:
        viewer = TreeViewer()
        viewer.set_source(SAMPLE_SOURCE)
        viewer.set_source("")
        assert viewer.forest is None
        assert viewer.error is None

    def test_toggle_without_forest_is_noop(self) -> None:
        viewer = TreeViewer()
        viewer.toggle(0)
        viewer.set_expanded(0, True)
        assert viewer.rows() == []

    def test_custom_suffix(self) -> None:
        viewer = TreeViewer(".gox")
        viewer.set_source("-- a.gox --\npackage a\n")
        assert viewer.rows()[0].text == "[-] File: a.gox"
