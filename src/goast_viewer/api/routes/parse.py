from fastapi import APIRouter, HTTPException

from goast_viewer.api.schemas import ParseRequest, ParseResponse
from goast_viewer.core.ast import NoSourceFilesError, parse_source
from goast_viewer.core.config import normalize_suffix
from goast_viewer.core.treelist import flatten, to_rows, toggle

router = APIRouter(prefix="/parse", tags=["parse"])


@router.post("", response_model=ParseResponse)
def parse(body: ParseRequest) -> ParseResponse:
    if body.suffix is not None:
        try:
            normalize_suffix(body.suffix)
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from None

    try:
        forest = parse_source(body.source, body.suffix)
    except NoSourceFilesError as exc:
        return ParseResponse(error=str(exc))

    for index in body.toggle:
        toggle(forest, index)
    return ParseResponse(rows=to_rows(flatten(forest)))
