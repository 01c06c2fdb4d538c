# salon_backend/gateway/error_handlers.py
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


def failure(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


def _field_name(loc) -> str:
    parts = [str(p) for p in loc if p not in ("body", "query", "path", "header")]
    return ".".join(parts) or "request body"


def validation_message(exc: RequestValidationError) -> str:
    missing, invalid = [], []
    for err in exc.errors():
        field = _field_name(err.get("loc", ()))
        if err.get("type") == "missing":
            missing.append(field)
        else:
            invalid.append(f"{field}: {err.get('msg')}")
    if missing:
        return "Missing required fields: " + ", ".join(missing)
    return "Invalid value for " + "; ".join(invalid)


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        message = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
        return failure(exc.status_code, message or "Request failed")

    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError):
        return failure(400, validation_message(exc))

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        if isinstance(exc, SQLAlchemyError):
            return failure(500, "Database error")
        return failure(500, str(exc) or "Internal server error")
