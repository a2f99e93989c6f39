from goast_viewer.core.ast import NoSourceFilesError, parse_source
from goast_viewer.core.golang import GoSyntaxError
from goast_viewer.core.treelist import FlatEntry, flatten, set_expanded, to_rows, toggle
from goast_viewer.core.viewer import TreeViewer

__all__ = [
    "FlatEntry",
    "GoSyntaxError",
    "NoSourceFilesError",
    "TreeViewer",
    "flatten",
    "parse_source",
    "set_expanded",
    "to_rows",
    "toggle",
]
