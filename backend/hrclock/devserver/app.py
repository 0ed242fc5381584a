"""
Development server application.

Writes lifecycle and request lines to the daily dev log file and forwards
requests under the proxy prefix (``/api`` by default) to the backend.
Nothing here is shared with the DTO layer.
"""
import logging
import os
import time
from typing import Optional

import httpx
from fastapi import FastAPI, Request

from .log import DevLog
from .proxy import ApiProxy

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Configuration
DEV_LOG_DIR = os.getenv("DEV_LOG_DIR", "logs")
DEV_LOG_PREFIX = os.getenv("DEV_LOG_PREFIX", "vite")
DEV_MODE = os.getenv("DEV_MODE", "development")
API_PROXY_TARGET = os.getenv("API_PROXY_TARGET", "http://localhost:8080")
API_PROXY_PREFIX = os.getenv("API_PROXY_PREFIX", "/api")

PROXY_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]


# PUBLIC_INTERFACE
def create_dev_app(
    log_dir: str = DEV_LOG_DIR,
    mode: str = DEV_MODE,
    target: str = API_PROXY_TARGET,
    log_prefix: str = DEV_LOG_PREFIX,
    proxy_prefix: str = API_PROXY_PREFIX,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    """
    Build the development server.

    Args:
        log_dir: Directory of the daily log file
        mode: Mode name written to the startup line
        target: Backend origin for proxied requests
        log_prefix: File name prefix of the daily log file
        proxy_prefix: Path prefix forwarded to the backend
        transport: Optional httpx transport for the proxy client

    Returns:
        FastAPI: Application with request logging and the API proxy
    """
    dev_log = DevLog(log_dir, prefix=log_prefix)
    dev_log.info(f"Dev server starting in {mode} mode")

    proxy = ApiProxy(target, prefix=proxy_prefix, transport=transport)

    app = FastAPI(
        title="HR Clock Dev Server",
        description="Development server with request logging and API proxy.",
        version="1.0.0",
        docs_url=None,
        redoc_url=None,
    )
    app.state.dev_log = dev_log
    app.state.proxy = proxy

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = int((time.perf_counter() - start) * 1000)
        url = request.url.path
        if request.url.query:
            url = f"{url}?{request.url.query}"
        dev_log.http(request.method, url, response.status_code, duration_ms)
        return response

    @app.api_route(proxy.prefix, methods=PROXY_METHODS, include_in_schema=False)
    @app.api_route(proxy.prefix + "/{path:path}", methods=PROXY_METHODS, include_in_schema=False)
    async def forward_api(request: Request):
        return await proxy.forward(request)

    @app.get("/health", tags=["Health"])
    def health_check():
        """Dev server status."""
        return {
            "status": "operational",
            "mode": mode,
            "proxy_target": proxy.target,
            "proxy_prefix": proxy.prefix
        }

    @app.on_event("shutdown")
    async def shutdown_event():
        """Close the proxy client and the log file."""
        logger.info("Shutting down dev server...")
        await proxy.aclose()
        dev_log.close()

    dev_log.info("Dev server configured")
    return app


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "hrclock.devserver.app:create_dev_app",
        factory=True,
        host="127.0.0.1",
        port=int(os.getenv("DEV_SERVER_PORT", "5173")),
        reload=True,
        log_level="info"
    )
