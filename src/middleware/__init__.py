"""Request logging and CORS middleware for the calculation endpoints."""

from .cors import CORSHeadersMiddleware
from .request_logging import RequestLoggingMiddleware


__all__ = [
    "CORSHeadersMiddleware",
    "RequestLoggingMiddleware",
]
