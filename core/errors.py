"""
API error envelope.

Services raise ApiError for expected failures (bad ids, missing resources);
the handlers registered here turn those, framework HTTP errors, request
validation errors and anything unexpected into the same JSON shape:

    {"status": "error", "error": "Not Found", "message": "...", "data": null}
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import JSONResponse

from core.logging import get_logger
from schemas.common import ApiStatus

_TITLES = {
    400: "Invalid Request",
    404: "Not Found",
    405: "Method Not Allowed",
    500: "Internal Server Error",
    503: "Service Unavailable",
}


class ApiError(Exception):
    """An error with an HTTP status that should be reported to the client."""

    def __init__(self, status_code: int, message: str, error: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.error = error or _TITLES.get(status_code, "Error")

    @classmethod
    def not_found(cls, message: str) -> "ApiError":
        return cls(404, message)

    @classmethod
    def bad_request(cls, message: str, error: str = "Invalid Request") -> "ApiError":
        return cls(400, message, error)


def error_response(status_code: int, message: str, error: str | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "status": ApiStatus.ERROR.value,
            "error": error or _TITLES.get(status_code, "Error"),
            "message": message,
            "data": None,
        },
    )


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return error_response(exc.status_code, exc.message, exc.error)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == 404 and exc.detail == "Not Found":
        message = f"Route {request.method} {request.url.path} not found"
    else:
        message = str(exc.detail)
    return error_response(exc.status_code, message)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Typed path/query parameters that fail coercion (e.g. /matches/abc)
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ())[1:]) or "request"
        message = f"{field}: {first.get('msg', 'invalid value')}"
    else:
        message = "Invalid request"
    return error_response(400, message, "Invalid Request")


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    get_logger("api").exception("unhandled_request_error", error=str(exc))
    return error_response(500, "Something went wrong")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
