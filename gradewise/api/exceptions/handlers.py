# gradewise/api/exceptions/handlers.py
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from gradewise.exceptions import WeightSumError
from gradewise.logging_config import app_logger
from gradewise.schema.base import BaseResponse


async def weight_sum_error_handler(request: Request, exc: WeightSumError) -> JSONResponse:
    app_logger.warning(f"{request.url.path}: {exc}")
    body = BaseResponse.failure(
        str(exc),
        "weight_sum",
        total_weight=exc.total_weight,
        required_total=exc.required_total,
    )
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=body.model_dump(),
    )


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    body = BaseResponse.failure(
        "Invalid request",
        "validation",
        detail=jsonable_encoder(exc.errors()),
    )
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=body.model_dump(),
    )


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    body = BaseResponse.failure(
        str(exc.detail), "http", status_code=exc.status_code
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=body.model_dump(),
        headers=getattr(exc, "headers", None),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(WeightSumError, weight_sum_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
