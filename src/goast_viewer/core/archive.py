"""Reading and writing txtar archives.

A txtar archive is a free-text comment followed by files, each introduced by
a marker line of the form ``-- name --``::

    optional comment
    -- main.go --
    package main
    -- util/strings.go --
    package util
"""

from goast_viewer.models import Archive, ArchiveFile

_MARKER_PREFIX = "-- "
_MARKER_SUFFIX = " --"


def _marker_name(line: str) -> str | None:
    """Return the file name if ``line`` is a file marker, else None."""
    line = line.rstrip("\r\n")
    if not line.startswith(_MARKER_PREFIX) or not line.endswith(_MARKER_SUFFIX):
        return None
    if len(line) < len(_MARKER_PREFIX) + len(_MARKER_SUFFIX):
        return None
    return line[len(_MARKER_PREFIX) : len(line) - len(_MARKER_SUFFIX)].strip() or None


def parse_archive(text: str) -> Archive:
    """Split ``text`` into its comment and named files, in order of appearance."""
    comment: list[str] = []
    files: list[ArchiveFile] = []
    current_name: str | None = None
    current: list[str] = []

    for line in text.splitlines(keepends=True):
        name = _marker_name(line)
        if name is None:
            current.append(line)
            continue
        if current_name is None:
            comment = current
        else:
            files.append(ArchiveFile(name=current_name, data="".join(current)))
        current_name = name
        current = []

    if current_name is None:
        comment = current
    else:
        files.append(ArchiveFile(name=current_name, data="".join(current)))

    return Archive(comment="".join(comment), files=files)


def _fix_newline(data: str) -> str:
    if not data or data.endswith("\n"):
        return data
    return data + "\n"


def format_archive(archive: Archive) -> str:
    parts = [_fix_newline(archive.comment)]
    for file in archive.files:
        parts.append(f"{_MARKER_PREFIX}{file.name}{_MARKER_SUFFIX}\n")
        parts.append(_fix_newline(file.data))
    return "".join(parts)


def wrap_single_file(name: str, data: str) -> str:
    """Wrap one source file into a one-entry archive."""
    return format_archive(Archive(files=[ArchiveFile(name=name, data=data)]))
