from __future__ import annotations

from pydantic import BaseModel

from goast_viewer.models import DisplayRow


class HealthResponse(BaseModel):
    status: str = "ok"


class ParseRequest(BaseModel):
    """POST /parse: a txtar blob plus row indices to toggle in order."""

    source: str
    suffix: str | None = None
    toggle: list[int] = []


class ParseResponse(BaseModel):
    rows: list[DisplayRow] = []
    error: str | None = None
