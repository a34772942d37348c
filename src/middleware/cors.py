"""Permissive CORS headers for browser clients."""

from typing import Callable, Iterable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp


class CORSHeadersMiddleware(BaseHTTPMiddleware):
    """Add fixed CORS headers to every response on the given paths.
    
    Unlike Starlette's ``CORSMiddleware`` the headers are set whether or not
    the request carries an ``Origin`` header, and any OPTIONS request is
    answered with 200 without reaching the endpoint.
    """
    
    def __init__(
        self,
        app: ASGIApp,
        paths: Iterable[str],
        allow_origin: str = "*",
        allow_methods: str = "POST, OPTIONS",
        allow_headers: str = "Content-Type",
    ) -> None:
        """Initialize the middleware.
        
        Args:
            app: The downstream ASGI application.
            paths: Exact request paths the headers apply to.
            allow_origin: Value of ``Access-Control-Allow-Origin``.
            allow_methods: Value of ``Access-Control-Allow-Methods``.
            allow_headers: Value of ``Access-Control-Allow-Headers``.
        """
        super().__init__(app)
        self.paths = frozenset(paths)
        self.cors_headers = {
            "Access-Control-Allow-Origin": allow_origin,
            "Access-Control-Allow-Methods": allow_methods,
            "Access-Control-Allow-Headers": allow_headers,
        }
    
    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if request.url.path not in self.paths:
            return await call_next(request)
        
        # Pre-flight never reaches the endpoint
        if request.method == "OPTIONS":
            response = Response(status_code=200)
        else:
            response = await call_next(request)
        
        response.headers.update(self.cors_headers)
        return response
