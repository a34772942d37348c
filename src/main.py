import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.types import Receive, Scope, Send

from .config import get_settings
from .logging_config import configure_logging
from .calculator import router as calculator_router, CALCULATION_PATHS
from .calculator.exceptions import (
    InvalidBodyError,
    DomainError,
)
from .middleware import CORSHeadersMiddleware, RequestLoggingMiddleware

settings = get_settings()
logger = structlog.get_logger("calculator")

app = FastAPI(
    title=settings.APP_NAME,
    debug=settings.DEBUG
)

# Last added runs first: logging wraps CORS
app.add_middleware(
    CORSHeadersMiddleware,
    paths=CALCULATION_PATHS,
    allow_origin=settings.CORS_ALLOW_ORIGIN,
    allow_methods=settings.CORS_ALLOW_METHODS,
    allow_headers=settings.CORS_ALLOW_HEADERS,
)
app.add_middleware(RequestLoggingMiddleware, paths=CALCULATION_PATHS)


# Global exception handlers
@app.exception_handler(InvalidBodyError)
async def invalid_body_handler(request: Request, exc: InvalidBodyError):
    return JSONResponse(
        status_code=400,
        content={"error": exc.message}
    )

@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError):
    logger.info("calculation_rejected", path=request.url.path, error_code=exc.code)
    return JSONResponse(
        status_code=400,
        content={"error": exc.message}
    )

@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # Routing errors share the {"error": ...} envelope
    detail = "method not allowed" if exc.status_code == 405 else str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": detail},
        headers=exc.headers
    )


class HealthCheck:
    """ASGI endpoint answering every HTTP method with a healthy status.
    
    Mounted as a plain route so no method guard applies, and outside the
    calculation paths so the middleware leaves it alone.
    """
    
    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        response = JSONResponse(content={"status": "healthy"})
        await response(scope, receive, send)


app.add_route("/health", HealthCheck(), include_in_schema=False)

# Include routers
app.include_router(calculator_router)


def run() -> None:
    """Configure logging and serve the API until the process is stopped."""
    configure_logging(settings.LOG_LEVEL)
    logger.info(
        "server_starting",
        host=settings.HOST,
        port=settings.PORT,
        endpoints=[f"POST {route.path}" for route in calculator_router.routes] + ["ANY /health"],
    )
    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower()
    )


if __name__ == "__main__":
    run()
