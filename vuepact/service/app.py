"""FastAPI application serving a read-only view over a scan manifest."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..models import ComponentContract
from ..stores.manifest import Manifest, ManifestError, contract_to_dict, load_manifest

DEFAULT_MANIFEST_PATH = Path("vuepact.manifest.json")


class HealthResponse(BaseModel):
    status: str


class ManifestInfo(BaseModel):
    version: str
    scanned_at: Optional[str] = None
    components: int


class ComponentSummary(BaseModel):
    name: str
    file: str
    props: int
    emits: int
    slots: int
    warnings: int
    cohesion: float


def _summary(contract: ComponentContract) -> ComponentSummary:
    return ComponentSummary(
        name=contract.name,
        file=contract.file,
        props=len(contract.props),
        emits=len(contract.emits),
        slots=len(contract.slots),
        warnings=len(contract.warnings),
        cohesion=contract.metrics.cohesion,
    )


def filter_components(components: List[ComponentContract], query: str | None) -> List[ComponentContract]:
    """Case-insensitive substring filter over component name and file path."""
    if not query:
        return list(components)
    needle = query.lower()
    return [c for c in components if needle in c.name.lower() or needle in c.file.lower()]


def create_app(
    manifest_loader: Callable[[], Manifest] | None = None,
    *,
    manifest_path: Path = DEFAULT_MANIFEST_PATH,
) -> FastAPI:
    """Create the viewer application.

    The manifest is re-read on each request so a fresh scan shows up without
    restarting the service.
    """
    loader = manifest_loader or (lambda: load_manifest(manifest_path))
    app = FastAPI(title="Vue Pact Viewer", version="0.1.0")

    # sync so the manifest read runs in the threadpool, not on the event loop
    def get_manifest() -> Manifest:
        return loader()

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.get("/manifest", response_model=ManifestInfo)
    async def manifest_info(manifest: Manifest = Depends(get_manifest)) -> ManifestInfo:
        return ManifestInfo(
            version=manifest.version,
            scanned_at=manifest.scanned_at,
            components=len(manifest.components),
        )

    @app.get("/components", response_model=List[ComponentSummary])
    async def list_components(
        q: Optional[str] = Query(default=None, description="Substring of name or path"),
        manifest: Manifest = Depends(get_manifest),
    ) -> List[ComponentSummary]:
        return [_summary(contract) for contract in filter_components(manifest.components, q)]

    @app.get("/components/detail")
    async def component_detail(
        file: str = Query(..., description="Component file path as recorded in the manifest"),
        manifest: Manifest = Depends(get_manifest),
    ) -> Dict[str, Any]:
        for contract in manifest.components:
            if contract.file == file:
                return contract_to_dict(contract)
        raise HTTPException(status_code=404, detail=f"Component not found: {file}")

    @app.exception_handler(ManifestError)
    async def manifest_error_handler(_: Any, exc: ManifestError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    return app


def run_service(
    manifest_path: Path = DEFAULT_MANIFEST_PATH,
    host: str = "127.0.0.1",
    port: int = 8000,
) -> None:  # pragma: no cover - integration path
    import uvicorn

    app = create_app(manifest_path=manifest_path)
    uvicorn.run(app, host=host, port=port)


__all__ = ["create_app", "filter_components", "run_service"]
