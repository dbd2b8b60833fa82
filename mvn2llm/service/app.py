"""FastAPI application entrypoint for mvn2llm service mode."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, List

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..maven import ArtifactNotFoundError
from ..models import DocRecord
from ..orchestrator import ExtractionResult, Orchestrator


class ExtractRequest(BaseModel):
    coordinate: str


class ScanRequest(BaseModel):
    source: str
    origin: str = "source"


class RecordModel(BaseModel):
    origin: str
    documentation: str
    signature: str


class ExtractResponse(BaseModel):
    coordinate: str
    count: int
    records: List[RecordModel]


class ScanResponse(BaseModel):
    count: int
    records: List[RecordModel]


class HealthResponse(BaseModel):
    status: str


def _default_orchestrator() -> Orchestrator:
    return Orchestrator()


def _to_models(records: List[DocRecord]) -> List[RecordModel]:
    return [RecordModel(**record.to_dict()) for record in records]


def create_app(
    orchestrator_factory: Callable[[], Orchestrator] = _default_orchestrator,
) -> FastAPI:
    """Create the FastAPI application exposing mvn2llm operations."""

    app = FastAPI(title="mvn2llm Service", version="0.1.0")

    async def get_orchestrator() -> Orchestrator:
        # Lazy-instantiate per request to keep state predictable.
        return orchestrator_factory()

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/extract", response_model=ExtractResponse)
    async def extract(
        payload: ExtractRequest,
        orchestrator: Orchestrator = Depends(get_orchestrator),
    ) -> ExtractResponse:
        def _run_extract() -> ExtractionResult:
            return orchestrator.run_extract(payload.coordinate)

        loop = asyncio.get_running_loop()
        result = await loop.run_in_executor(None, _run_extract)
        return ExtractResponse(
            coordinate=payload.coordinate,
            count=len(result.records),
            records=_to_models(result.records),
        )

    @app.post("/scan", response_model=ScanResponse)
    async def scan(
        payload: ScanRequest,
        orchestrator: Orchestrator = Depends(get_orchestrator),
    ) -> ScanResponse:
        def _scan_source() -> List[DocRecord]:
            return orchestrator.scan_source(payload.origin, payload.source)

        loop = asyncio.get_running_loop()
        records = await loop.run_in_executor(None, _scan_source)
        return ScanResponse(count=len(records), records=_to_models(records))

    @app.exception_handler(ArtifactNotFoundError)
    async def not_found_handler(_: Any, exc: ArtifactNotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(ValueError)
    async def value_error_handler(_: Any, exc: ValueError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(RuntimeError)
    async def runtime_error_handler(_: Any, exc: RuntimeError) -> JSONResponse:
        return JSONResponse(status_code=502, content={"detail": str(exc)})

    return app


def run_service(
    host: str = "127.0.0.1", port: int = 8000
) -> None:  # pragma: no cover - integration path
    import uvicorn

    app = create_app()
    uvicorn.run(app, host=host, port=port)


__all__ = ["create_app", "run_service"]
