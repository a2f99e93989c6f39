import logging
from pathlib import Path

from goast_viewer.core.archive import parse_archive, wrap_single_file
from goast_viewer.core.builder import file_to_nodes
from goast_viewer.core.config import resolve_source_suffix
from goast_viewer.core.golang import GoSyntaxError, parse_go
from goast_viewer.models import DisplayNode

logger = logging.getLogger(__name__)

FILE_LEVEL = 1


class NoSourceFilesError(ValueError):
    """The archive holds no file with the recognised source suffix."""


def parse_source(blob: str, suffix: str | None = None) -> list[DisplayNode]:
    """Build a display forest with one root per source file in a txtar blob.

    Files that fail to parse become error leaves; only an archive without any
    source file raises ``NoSourceFilesError``.
    """
    resolved_suffix = resolve_source_suffix(suffix)
    archive = parse_archive(blob)
    forest: list[DisplayNode] = []

    for file in archive.files:
        if not file.name.endswith(resolved_suffix):
            logger.debug("Skipping archive entry %s", file.name)
            continue

        try:
            root = parse_go(file.name, file.data.encode("utf-8"))
        except GoSyntaxError as exc:
            logger.warning("Failed to parse %s: %s", file.name, exc)
            forest.append(DisplayNode(label=f"{file.name} (error: {exc})", indent_level=FILE_LEVEL))
            continue

        forest.append(
            DisplayNode(
                label=f"File: {file.name}",
                indent_level=FILE_LEVEL,
                children=file_to_nodes(root, FILE_LEVEL + 1) or None,
            )
        )

    if not forest:
        raise NoSourceFilesError(f"no {resolved_suffix} files found in txtar content")

    return forest


def read_source_blob(path: str | Path, suffix: str | None = None) -> str:
    """Read an input file, wrapping a plain source file into a one-file archive."""
    file_path = Path(path)
    try:
        text = file_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise FileNotFoundError(f"File not found: {path}") from None

    if file_path.name.endswith(resolve_source_suffix(suffix)):
        return wrap_single_file(file_path.name, text)
    return text
