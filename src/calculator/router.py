"""FastAPI router for the calculation endpoints."""

from typing import Callable

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from . import service
from .schemas import (
    BinaryRequest,
    UnaryRequest,
    CalculationResponse,
    ErrorResponse,
    OperationName,
    decode_request,
)


router = APIRouter(prefix="/api/v1/calculate", tags=["calculator"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid request body or arithmetic error"},
    405: {"model": ErrorResponse, "description": "Method not allowed"},
}


async def calculate(
    request: Request,
    schema: type[BinaryRequest] | type[UnaryRequest],
    operation: Callable[..., float],
    tag: OperationName,
) -> JSONResponse:
    """Run one calculation request through decode, compute and encode.

    Args:
        request: Incoming HTTP request.
        schema: Operand model the body is decoded into.
        operation: Service function receiving the operands as keywords.
        tag: Operation name reported in the response.

    Returns:
        JSONResponse with the result and operation tag.

    Raises:
        InvalidBodyError: If the body cannot be decoded.
        DomainError: If the service rejects the operands.
    """
    operands = decode_request(await request.body(), schema)
    result = operation(**operands.model_dump())

    response = CalculationResponse(result=result, operation=tag)
    return JSONResponse(status_code=200, content=response.model_dump())


@router.post("/add", response_model=CalculationResponse, responses=ERROR_RESPONSES)
async def add_endpoint(request: Request) -> JSONResponse:
    """Add two numbers."""
    return await calculate(request, BinaryRequest, service.add, OperationName.addition)


@router.post("/subtract", response_model=CalculationResponse, responses=ERROR_RESPONSES)
async def subtract_endpoint(request: Request) -> JSONResponse:
    """Subtract b from a."""
    return await calculate(request, BinaryRequest, service.subtract, OperationName.subtraction)


@router.post("/multiply", response_model=CalculationResponse, responses=ERROR_RESPONSES)
async def multiply_endpoint(request: Request) -> JSONResponse:
    """Multiply two numbers."""
    return await calculate(request, BinaryRequest, service.multiply, OperationName.multiplication)


@router.post("/divide", response_model=CalculationResponse, responses=ERROR_RESPONSES)
async def divide_endpoint(request: Request) -> JSONResponse:
    """Divide a by b. Division by zero is rejected with 400."""
    return await calculate(request, BinaryRequest, service.divide, OperationName.division)


@router.post("/power", response_model=CalculationResponse, responses=ERROR_RESPONSES)
async def power_endpoint(request: Request) -> JSONResponse:
    """Raise a to the power of b."""
    return await calculate(request, BinaryRequest, service.power, OperationName.power)


@router.post("/sqrt", response_model=CalculationResponse, responses=ERROR_RESPONSES)
async def sqrt_endpoint(request: Request) -> JSONResponse:
    """Square root of a. Negative operands are rejected with 400."""
    return await calculate(request, UnaryRequest, service.square_root, OperationName.sqrt)


@router.post("/percentage", response_model=CalculationResponse, responses=ERROR_RESPONSES)
async def percentage_endpoint(request: Request) -> JSONResponse:
    """Compute a percent of b."""
    return await calculate(request, BinaryRequest, service.percentage, OperationName.percentage)


CALCULATION_PATHS = frozenset(route.path for route in router.routes)
