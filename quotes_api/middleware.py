# quotes_api/middleware.py

import json
import logging
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

BODY_METHODS = ("POST", "PUT", "PATCH")


def _format_body(raw: bytes) -> str:
    try:
        return json.dumps(json.loads(raw), ensure_ascii=False, separators=(",", ":"))
    except ValueError:
        return raw.decode("utf-8", errors="replace")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Log method, path and client address of every request, plus the body of
    write requests. Never touches the request or the response.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        client_ip = request.client.host if request.client else "unknown"
        path = request.url.path
        if request.url.query:
            path = f"{path}?{request.url.query}"

        logger.info("%s %s - IP: %s", request.method, path, client_ip)

        if request.method in BODY_METHODS:
            # Starlette caches the body, so the endpoint still gets to read it
            raw = await request.body()
            if raw:
                logger.info("Body: %s", _format_body(raw))

        return await call_next(request)
