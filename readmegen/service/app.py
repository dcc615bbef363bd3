"""FastAPI application entrypoint for readmegen service mode."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, Dict, List, Optional

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel

from ..config import ReadmegenConfig
from ..errors import InvalidRepositoryReference, NotFoundError, UpstreamError
from ..orchestrator import README_FILENAME, AnalysisBundle, Orchestrator
from ..synthesis.rendering import TemplateError

MARKDOWN_MEDIA_TYPE = "text/markdown; charset=utf-8"


class AnalyzeRequest(BaseModel):
    url: str


class AnalyzeResponse(BaseModel):
    metadata: Dict[str, Any]
    listing: List[Dict[str, Any]]
    profile: Dict[str, Any]
    document: str


class HealthResponse(BaseModel):
    status: str


def create_app(
    orchestrator_factory: Optional[Callable[[], Orchestrator]] = None,
    *,
    config: ReadmegenConfig | None = None,
) -> FastAPI:
    """Create the FastAPI application exposing readmegen operations."""

    def _default_orchestrator() -> Orchestrator:
        return Orchestrator(config=config)

    factory = orchestrator_factory or _default_orchestrator
    app = FastAPI(title="readmegen", version="1.0.0")

    async def get_orchestrator() -> Orchestrator:
        return factory()

    async def _analyze(orchestrator: Orchestrator, url: str) -> AnalysisBundle:
        # Fetching blocks on network I/O; keep it off the event loop.
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, orchestrator.analyze, url)

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/analyze", response_model=AnalyzeResponse)
    async def analyze(
        payload: AnalyzeRequest,
        orchestrator: Orchestrator = Depends(get_orchestrator),
    ) -> AnalyzeResponse:
        bundle = await _analyze(orchestrator, payload.url)
        return AnalyzeResponse(**bundle.to_dict())

    @app.post("/readme")
    async def readme(
        payload: AnalyzeRequest,
        orchestrator: Orchestrator = Depends(get_orchestrator),
    ) -> Response:
        bundle = await _analyze(orchestrator, payload.url)
        return Response(
            content=bundle.document.encode("utf-8"),
            media_type=MARKDOWN_MEDIA_TYPE,
            headers={"Content-Disposition": f'attachment; filename="{README_FILENAME}"'},
        )

    @app.exception_handler(InvalidRepositoryReference)
    async def invalid_reference_handler(_: Any, exc: InvalidRepositoryReference) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={"detail": "Please enter a valid GitHub repository URL"},
        )

    @app.exception_handler(NotFoundError)
    async def not_found_handler(_: Any, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": f"Analysis failed: {exc}"})

    @app.exception_handler(UpstreamError)
    async def upstream_error_handler(_: Any, exc: UpstreamError) -> JSONResponse:
        return JSONResponse(status_code=502, content={"detail": f"Analysis failed: {exc}"})

    @app.exception_handler(TemplateError)
    async def template_error_handler(_: Any, exc: TemplateError) -> JSONResponse:
        return JSONResponse(status_code=500, content={"detail": str(exc)})

    return app


def run_service(
    host: str = "127.0.0.1", port: int = 8000, *, config: ReadmegenConfig | None = None
) -> None:  # pragma: no cover - integration path
    import uvicorn

    uvicorn.run(create_app(config=config), host=host, port=port)
