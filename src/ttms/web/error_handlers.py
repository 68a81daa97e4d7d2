import structlog
from fastapi import Request
from fastapi.responses import JSONResponse, Response

from ttms.errors import UserError, ValidationError

logger = structlog.get_logger(__name__)


def create_json_error_response(status_code: int, message: str, error_type: str) -> JSONResponse:
    """Create JSON error response with type for machine parsing."""
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "statusCode": status_code, "message": message, "type": error_type},
    )


async def user_error_handler(request: Request, exc: Exception) -> Response:
    """Handle all UserError subclasses with the status code they carry."""
    if not isinstance(exc, UserError):
        return await general_exception_handler(request, exc)

    logger.info(
        "request_failed",
        method=request.method,
        path=request.url.path,
        status_code=exc.status_code,
        message=str(exc),
    )
    return create_json_error_response(status_code=exc.status_code, message=str(exc), error_type=exc.error_type)


async def request_validation_error_handler(request: Request, exc: Exception) -> Response:
    """Report malformed request bodies as 400 instead of FastAPI's 422."""
    return await user_error_handler(request, ValidationError("Invalid request body"))


async def general_exception_handler(request: Request, exc: Exception) -> Response:
    """Handle unexpected errors (500)."""
    logger.error(
        "request_failed",
        method=request.method,
        path=request.url.path,
        status_code=500,
        message=str(exc),
        exc_info=exc,
    )
    return create_json_error_response(status_code=500, message="Internal Server Error", error_type="internal_server_error")
