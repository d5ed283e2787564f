import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import DBAPIError
from starlette.exceptions import HTTPException as StarletteHTTPException

from config.settings import settings
from schemas.common import ErrorItem, envelope
from schemas.students import field_message
from utils.db_errors import FOREIGN_KEY_VIOLATION, INVALID_INPUT, UNIQUE_VIOLATION, classify

logger = logging.getLogger(__name__)

# 분류된 DB 오류 → (상태 코드, 메시지, error)
_DB_ERROR_RESPONSES = {
    UNIQUE_VIOLATION: (409, "A record with this email already exists", "Duplicate entry"),
    FOREIGN_KEY_VIOLATION: (400, "Invalid reference to related data", "Foreign key constraint violation"),
    INVALID_INPUT: (400, "Invalid data format", "Invalid input syntax"),
}


def _field_name(loc) -> str:
    # ("body", "email") → "email", ("path", "student_id") → "student_id"
    parts = [str(p) for p in loc if p not in ("body", "query", "path")]
    return ".".join(parts) or "body"


def validation_errors(exc: RequestValidationError) -> list:
    items = []
    for err in exc.errors():
        field = _field_name(err.get("loc", ()))
        message = field_message(field, err.get("type", ""), err.get("msg", "Invalid value"))
        items.append(ErrorItem(field=field, message=message))
    return items


def _internal_error(exc: Exception) -> JSONResponse:
    return JSONResponse(
        status_code=500,
        content=envelope(
            False,
            "Internal server error",
            error=str(exc) if settings.ENV == "dev" else "An error occurred",
        ),
    )


def add_error_handlers(app: FastAPI):
    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400,
            content=envelope(False, "Validation failed", errors=validation_errors(exc)),
        )

    @app.exception_handler(DBAPIError)
    async def database_error_handler(request: Request, exc: DBAPIError):
        kind = classify(exc)
        if kind is None:
            logger.exception(f"DB 오류: {request.method} {request.url.path}")
            return _internal_error(exc)

        status_code, message, error = _DB_ERROR_RESPONSES[kind]
        logger.warning(f"DB 제약 조건 위반({kind}): {request.method} {request.url.path}")
        return JSONResponse(status_code=status_code, content=envelope(False, message, error=error))

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            return JSONResponse(
                status_code=404,
                content=envelope(False, "Route not found", path=request.url.path),
            )
        return JSONResponse(
            status_code=exc.status_code,
            content=envelope(False, str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(f"처리되지 않은 오류: {request.method} {request.url.path}")
        return _internal_error(exc)
