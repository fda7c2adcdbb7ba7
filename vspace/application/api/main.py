from fastapi import FastAPI, Depends, Query, Request, Response, HTTPException
from pydantic import BaseModel
from typing import List

from vspace.application.settings import get_settings, Settings
from vspace.application.log_setup import setup_logging
from vspace.application.services.search_service import SearchService, DocumentTooLarge
from loguru import logger
import uvicorn


class SearchResponse(BaseModel):
    elapsed: float
    results: List[str]


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings)

    app = FastAPI(title=settings.app_name)
    # one index per process, owned by the app rather than a module global
    app.state.settings = settings
    app.state.search_service = SearchService.build(settings)

    # --- Dependencies ---
    def settings_dep(request: Request) -> Settings:
        return request.app.state.settings

    def search_service_dep(request: Request) -> SearchService:
        return request.app.state.search_service

    async def text_body(request: Request) -> str:
        raw = await request.body()
        return raw.decode("utf-8", errors="replace")

    # --- Endpoints ---
    @app.get("/", tags=["meta"])
    def root(
        settings: Settings = Depends(settings_dep),
        svc: SearchService = Depends(search_service_dep),
    ):
        return {
            "ok": True,
            "app_name": settings.app_name,
            "environment": settings.app_env,
            "debug": settings.debug,
            "documents": len(svc.index),
        }

    @app.post("/documents", status_code=204, tags=["index"])
    def add_document(
        body: str = Depends(text_body),
        svc: SearchService = Depends(search_service_dep),
    ):
        """Body is the raw document text."""
        try:
            svc.add(body)
        except DocumentTooLarge as e:
            raise HTTPException(status_code=413, detail=str(e))
        return Response(status_code=204)

    @app.post("/search", response_model=SearchResponse, tags=["index"])
    def search(
        body: str = Depends(text_body),
        svc: SearchService = Depends(search_service_dep),
    ):
        """Body is the raw query text."""
        return svc.search(body).to_dict()

    @app.get("/search", response_model=SearchResponse, tags=["index"])
    def search_get(
        q: str = Query("", description="Query text"),
        svc: SearchService = Depends(search_service_dep),
    ):
        return svc.search(q).to_dict()

    logger.info("{} ready ({})", settings.app_name, settings.app_env)
    return app


def run() -> None:
    settings = get_settings()
    app = create_app(settings)
    logger.info("Listening on {}:{}", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
