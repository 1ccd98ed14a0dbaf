"""Error responses shared by the API routers."""

from datetime import date
from typing import TypeVar

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

ModelT = TypeVar("ModelT", bound=BaseModel)


class ApiError(Exception):
    """An error rendered as ``{"message": ..., "errors": [...]}``."""

    def __init__(
        self,
        status_code: int,
        message: str,
        errors: list[dict[str, object]] | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.errors = errors


def parse_body(model: type[ModelT], payload: object, message: str) -> ModelT:
    """Validate a request body, raising a 400 ApiError with field errors."""
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise ApiError(
            status.HTTP_400_BAD_REQUEST,
            message,
            errors=exc.errors(
                include_url=False, include_context=False, include_input=False
            ),
        ) from exc


def parse_date(raw: str | None, message: str) -> date:
    """Parse a required YYYY-MM-DD query value."""
    if not raw:
        raise ApiError(status.HTTP_400_BAD_REQUEST, message)
    try:
        return date.fromisoformat(raw)
    except ValueError as exc:
        raise ApiError(status.HTTP_400_BAD_REQUEST, message) from exc


def register_error_handlers(app: FastAPI) -> None:
    """Render every error response with a ``message`` key."""

    @app.exception_handler(ApiError)
    async def api_error_handler(_request: Request, exc: ApiError) -> JSONResponse:
        content: dict[str, object] = {"message": exc.message}
        if exc.errors is not None:
            content["errors"] = jsonable_encoder(exc.errors)
        return JSONResponse(content, status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            {"message": "Invalid request", "errors": jsonable_encoder(exc.errors())},
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        _request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return JSONResponse(
            {"message": str(exc.detail)},
            status_code=exc.status_code,
            headers=getattr(exc, "headers", None),
        )
