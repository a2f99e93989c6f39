from __future__ import annotations

from fastapi import FastAPI

from goast_viewer.api.routes.health import router as health_router
from goast_viewer.api.routes.parse import router as parse_router


def create_app() -> FastAPI:
    app = FastAPI(
        title="Go AST Viewer API",
        description="Render txtar archives of Go code as collapsible AST rows.",
        version="0.1.0",
    )
    app.include_router(health_router, include_in_schema=False)
    app.include_router(parse_router)
    return app
