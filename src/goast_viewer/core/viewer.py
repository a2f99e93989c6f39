from goast_viewer.core.ast import NoSourceFilesError, parse_source
from goast_viewer.core.treelist import flatten, set_expanded, to_rows, toggle
from goast_viewer.models import DisplayNode, DisplayRow

SAMPLE_SOURCE = """-- main.go --
package main

import "fmt"

// Person represents a person with name and age.
type Person struct {
\tName string
\tAge  int
}

// Greet returns a greeting message.
func (p *Person) Greet() string {
\treturn fmt.Sprintf("Hello, I'm %s", p.Name)
}

func main() {
\tp := &Person{
\t\tName: "Alice",
\t\tAge:  30,
\t}
\tfmt.Println(p.Greet())
}
"""


class TreeViewer:
    """The current source blob together with its display forest.

    Every ``set_source`` call reparses from scratch, so collapse state does not
    survive an edit.
    """

    def __init__(self, suffix: str | None = None) -> None:
        self._suffix = suffix
        self.source = ""
        self.forest: list[DisplayNode] | None = None
        self.error: NoSourceFilesError | None = None

    def set_source(self, source: str) -> None:
        self.source = source
        if not source:
            self.forest = None
            self.error = None
            return
        try:
            self.forest = parse_source(source, self._suffix)
            self.error = None
        except NoSourceFilesError as exc:
            self.forest = None
            self.error = exc

    def error_text(self) -> str | None:
        if self.error is None:
            return None
        return f"Error: {self.error}"

    def rows(self) -> list[DisplayRow]:
        if self.forest is None:
            return []
        return to_rows(flatten(self.forest))

    def toggle(self, index: int) -> None:
        if self.forest is not None:
            toggle(self.forest, index)

    def set_expanded(self, index: int, expanded: bool) -> None:
        if self.forest is not None:
            set_expanded(self.forest, index, expanded)
