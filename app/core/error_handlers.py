"""
Handlers globais de erro: toda resposta de falha segue {success: false, message}
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.exceptions import AppError

logger = logging.getLogger(__name__)

MISSING_FIELD_ERRORS = {"missing", "string_too_short"}


def error_body(message: str) -> dict:
    return {"success": False, "message": message}


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    logger.warning(f"{request.method} {request.url.path} rejeitado: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=error_body(exc.message))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = exc.detail if isinstance(exc.detail, str) else "Request failed."
    if exc.status_code == status.HTTP_404_NOT_FOUND and exc.detail == "Not Found":
        # Rota inexistente (não um recurso inexistente)
        message = "API endpoint not found"
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(message),
        headers=getattr(exc, "headers", None),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    logger.warning(f"{request.method} {request.url.path} com dados inválidos: {errors}")

    if any(error.get("type") in MISSING_FIELD_ERRORS for error in errors):
        message = "Missing required fields."
    elif errors:
        first = errors[0]
        field = ".".join(str(loc) for loc in first.get("loc", ()) if loc not in ("body", "path", "query"))
        message = f"Invalid value for '{field}': {first.get('msg')}" if field else first.get("msg")
    else:
        message = "Invalid request data."

    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=error_body(message))


async def rate_limit_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    logger.warning(f"Rate limit excedido em {request.url.path} ({exc.detail})")
    return JSONResponse(
        status_code=status.HTTP_429_TOO_MANY_REQUESTS,
        content=error_body(f"Rate limit exceeded: {exc.detail}"),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Erro inesperado em {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("Internal server error"),
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(RateLimitExceeded, rate_limit_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
