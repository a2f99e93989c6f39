from pydantic import BaseModel


class DisplayNode(BaseModel):
    label: str
    indent_level: int = 0
    collapsed: bool = False
    children: list["DisplayNode"] | None = None

    @property
    def has_children(self) -> bool:
        return bool(self.children)


DisplayNode.model_rebuild()  # necessary for recursive types


class DisplayRow(BaseModel):
    text: str
    indent: int
    collapsed: bool
    value: int


class ArchiveFile(BaseModel):
    name: str
    data: str


class Archive(BaseModel):
    comment: str = ""
    files: list[ArchiveFile] = []
