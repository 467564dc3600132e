# =============================================================================
# tools/http_server.py  —  HTTP Side-Channel (liveness only)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   The MCP protocol runs over stdio, which a load balancer or container
#   orchestrator can't probe.  This tiny FastAPI app gives them something
#   to hit:
#
#     GET /healthz  →  {"status": "healthy", ...}
#     GET /         →  service banner + the list of registered tool names
#     anything else →  404 JSON
#
#   It does NOT expose the tools over HTTP.  Tool calls go through MCP.
#
# THREADING:
#   start_http_server() runs uvicorn in a daemon thread so the stdio MCP
#   loop keeps the main thread.  When the MCP session ends, the process
#   exits and takes the HTTP thread with it.
# =============================================================================

import logging
import threading
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import uvicorn

from core.config import AppConfig
from core.formatting import now_utc
from core.registry import ToolRegistry

logger = logging.getLogger("logistics.http")


def create_http_app(registry: ToolRegistry) -> FastAPI:
    app = FastAPI(title=AppConfig.DISPLAY_NAME, version=AppConfig.VERSION)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            body = {"error": "Not Found", "path": request.url.path, "timestamp": now_utc()}
        else:
            body = {"error": exc.detail, "path": request.url.path, "timestamp": now_utc()}
        return JSONResponse(body, status_code=exc.status_code)

    @app.get("/healthz")
    async def healthz():
        return {
            "status": "healthy",
            "timestamp": now_utc(),
            "service": AppConfig.SERVER_NAME,
            "version": AppConfig.VERSION,
        }

    @app.get("/")
    async def root():
        return {
            "service": AppConfig.DISPLAY_NAME,
            "version": AppConfig.VERSION,
            "status": "running",
            "timestamp": now_utc(),
            "endpoints": {
                "health": "/healthz",
                "mcp": "stdio transport only",
            },
            "tools": registry.names(),
        }

    return app


def start_http_server(
    app: FastAPI,
    host: Optional[str] = None,
    port: Optional[int] = None,
) -> threading.Thread:
    """Serve `app` with uvicorn on a daemon thread and return the thread."""
    host = host or AppConfig.HTTP_HOST
    port = port or AppConfig.HTTP_PORT
    server = uvicorn.Server(uvicorn.Config(app, host=host, port=port, log_level="warning"))

    thread = threading.Thread(target=server.run, name="http-side-channel", daemon=True)
    thread.start()
    logger.info(f"HTTP listening on port {port}")
    return thread
