"""
Reverse proxy for the development server.

Requests under the proxied prefix are forwarded to the backend origin with
their method, path, query string and body preserved. TLS certificates of
the backend are not verified.
"""
import logging
from typing import Optional

import httpx
from fastapi import HTTPException, Request, status
from fastapi.responses import Response

logger = logging.getLogger(__name__)

# Connection-level headers that must not be forwarded
HOP_BY_HOP_HEADERS = {
    "connection", "keep-alive", "proxy-authenticate", "proxy-authorization",
    "te", "trailers", "transfer-encoding", "upgrade",
}


class ApiProxy:
    """Forwards ``prefix`` requests to ``target``."""

    def __init__(self, target: str, prefix: str = "/api",
                 transport: Optional[httpx.AsyncBaseTransport] = None, timeout: float = 30.0):
        self.target = target.rstrip("/")
        self.prefix = "/" + prefix.strip("/")
        self._client = httpx.AsyncClient(
            base_url=self.target,
            verify=False,
            transport=transport,
            timeout=timeout,
        )

    def _upstream_headers(self, request: Request) -> dict:
        # Host is rewritten to the target origin by the client
        return {
            name: value for name, value in request.headers.items()
            if name.lower() not in HOP_BY_HOP_HEADERS and name.lower() not in ("host", "content-length")
        }

    async def forward(self, request: Request) -> Response:
        """
        Forward a request to the backend and relay its response.

        Args:
            request: Incoming dev server request

        Returns:
            Response: Backend response (status, headers, body)

        Raises:
            HTTPException: 502 if the backend cannot be reached
        """
        url = request.url.path
        if request.url.query:
            url = f"{url}?{request.url.query}"
        upstream = self._client.build_request(
            request.method,
            url,
            headers=self._upstream_headers(request),
            content=await request.body(),
        )
        try:
            reply = await self._client.send(upstream)
        except httpx.RequestError as e:
            logger.error(f"Proxy error for {request.method} {url}: {e}")
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail="Backend unavailable"
            )

        headers = {
            name: value for name, value in reply.headers.items()
            if name.lower() not in HOP_BY_HOP_HEADERS
            and name.lower() not in ("content-length", "content-encoding")
        }
        return Response(content=reply.content, status_code=reply.status_code, headers=headers)

    async def aclose(self):
        await self._client.aclose()
