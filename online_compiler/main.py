from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Final

import httpx
from fastapi import FastAPI
from fastapi.responses import HTMLResponse

from online_compiler.api.routes import router as api_router
from online_compiler.core.config import Settings, get_settings
from online_compiler.services.session import CompilerSession


_PAGE_PATH: Final[Path] = Path(__file__).parent / "static" / "index.html"


def create_app(
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """Build the application.

    ``transport`` replaces the network for outbound calls; tests pass an
    ``httpx.MockTransport`` here.
    """
    settings = settings if settings is not None else get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    app = FastAPI(
        title="Online Compiler",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )
    app.state.settings = settings
    app.state.transport = transport
    app.state.session = CompilerSession()

    @app.get("/healthz")
    def healthz() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/", response_class=HTMLResponse)
    def index() -> HTMLResponse:
        return HTMLResponse(_PAGE_PATH.read_text(encoding="utf-8"))

    app.include_router(api_router, prefix="/v1")
    return app


app: Final[FastAPI] = create_app()


def run() -> None:
    """Run the page and API using Uvicorn.

    This is for local/dev usage; the session state is per process, so run a
    single worker.
    """
    import uvicorn

    host: str = os.environ.get("HOST", "127.0.0.1")
    port_str: str | None = os.environ.get("PORT")
    port: int = int(port_str) if port_str else 8000
    uvicorn.run("online_compiler.main:app", host=host, port=port, log_level="info")
