import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.services.errors import ExternalServiceError, NetworkError
from app.services.validation import InvalidArgument

logger = logging.getLogger(__name__)


def _error(status_code: int, error: str, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": error, "message": message})


async def handle_invalid_argument(request: Request, exc: InvalidArgument) -> JSONResponse:
    logger.error("Validation error on %s %s: %s", request.method, request.url.path, exc)
    return _error(400, "Validation Error", str(exc))


async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    problems = "; ".join(
        f"{'.'.join(str(part) for part in item.get('loc', ()))}: {item.get('msg', 'invalid')}" for item in exc.errors()
    )
    logger.error("Request validation error on %s %s: %s", request.method, request.url.path, problems)
    return _error(400, "Validation Error", problems or "Invalid request")


async def handle_external_service(request: Request, exc: ExternalServiceError) -> JSONResponse:
    logger.error("%s on %s %s: %s", exc.error_label, request.method, request.url.path, exc)
    if isinstance(exc, NetworkError):
        message = "Unable to connect to GitHub API. Please check your internet connection."
    else:
        message = f"Failed to fetch data from GitHub API: {exc}"
    return _error(exc.status_code, exc.error_label, message)


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unexpected error on %s %s", request.method, request.url.path, exc_info=exc)
    return _error(500, "Internal Server Error", "An unexpected error occurred. Please try again later.")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(InvalidArgument, handle_invalid_argument)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, handle_request_validation)  # type: ignore[arg-type]
    app.add_exception_handler(ExternalServiceError, handle_external_service)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, handle_unexpected)
