from __future__ import annotations

import logging
from typing import Dict, Optional

from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response
from starlette.types import Scope

from ... import __version__
from ...config import Settings
from .error import (
    exception_handler,
    http_exception_handler,
    request_validation_exception_handler,
)
from .logging_middleware import RequestIDLoggingMiddleware


logger = logging.getLogger(__name__)

SERVICE_NAME = "chess-ai"


def _is_api_path(path: str) -> bool:
    return path.lstrip("/").split("/", 1)[0] == "api"


class SPAStaticFiles(StaticFiles):
    """Static files with a fallback to ``index.html`` for client-side routes.

    Paths under ``api/`` never fall back, so unknown API routes stay 404.
    """

    async def get_response(self, path: str, scope: Scope) -> Response:
        try:
            return await super().get_response(path, scope)
        except StarletteHTTPException as exc:
            if exc.status_code != 404 or _is_api_path(path):
                raise
        try:
            return await super().get_response("index.html", scope)
        except StarletteHTTPException as exc:
            if exc.status_code != 404:
                raise
            return PlainTextResponse("Not found", status_code=404)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings.from_env()
    app = FastAPI(title="Chess Ai", version=__version__)
    app.state.settings = settings

    logging.basicConfig(level=settings.log_level)

    app.add_middleware(RequestIDLoggingMiddleware)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(Exception, exception_handler)

    @app.get("/api/health")
    async def health() -> Dict[str, str]:
        return {"status": "ok", "service": SERVICE_NAME}

    # Static assets go last: mounts match every path not claimed above.
    static_dir = settings.static_dir
    if static_dir.is_dir():
        app.mount("/", SPAStaticFiles(directory=static_dir, html=True), name="static")
    else:
        logger.warning("static directory %s not found; serving API only", static_dir)

        @app.get("/{path:path}", include_in_schema=False)
        async def not_found(path: str) -> Response:
            if _is_api_path(path):
                raise HTTPException(status_code=404, detail="Not Found")
            return PlainTextResponse("Not found", status_code=404)

    return app
