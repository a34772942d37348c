"""Structured access logging for the calculation endpoints."""

import time
from typing import Callable, Iterable

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

logger = structlog.get_logger("request")


def client_address(request: Request) -> str | None:
    """Format the originating address as ``host:port``.
    
    Args:
        request: Incoming request.
        
    Returns:
        The client address, or None when the server did not report one.
    """
    if request.client is None:
        return None
    return f"{request.client.host}:{request.client.port}"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log each request on arrival and its duration on completion.
    
    Attributes:
        paths: Exact request paths that are logged.
    """
    
    def __init__(self, app: ASGIApp, paths: Iterable[str]) -> None:
        super().__init__(app)
        self.paths = frozenset(paths)
    
    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if request.url.path not in self.paths:
            return await call_next(request)
        
        start_time = time.perf_counter()
        logger.info(
            "request_started",
            method=request.method,
            path=request.url.path,
            remote_addr=client_address(request),
        )
        
        response = await call_next(request)
        
        duration_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            "request_completed",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=round(duration_ms, 3),
        )
        return response
