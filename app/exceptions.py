"""
Domain exceptions and the FastAPI handlers that render them.

Every error leaves the API as ``{"error": "<message>"}`` with the status
code carried by the exception, including FastAPI's own body-validation
errors (mapped to 400) and Starlette's routing errors (404/405).
"""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class BlogListError(Exception):
    """Base class for errors that map directly onto an HTTP response."""

    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self) -> dict:
        return {"error": self.message}


class ValidationError(BlogListError):
    """Missing or malformed field in a request body."""

    status_code = 400


class MalformedIdError(BlogListError):
    """Path identifier is not shaped like a generated record id."""

    status_code = 400

    def __init__(self, value: str):
        super().__init__("malformatted id")
        self.value = value


class AuthenticationError(BlogListError):
    """Bad credentials, or a missing, invalid or expired bearer token."""

    status_code = 401


class AuthorizationError(BlogListError):
    """Authenticated caller does not own the resource."""

    status_code = 403


class NotFoundError(BlogListError):
    status_code = 404

    def __init__(self, resource: str, resource_id: str):
        super().__init__(f"{resource} not found")
        self.resource_id = resource_id


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------

async def bloglist_exception_handler(request: Request, exc: BlogListError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    else:
        logger.info("%s %s -> %d: %s", request.method, request.url.path, exc.status_code, exc.message)
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict(), headers=headers)


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "invalid request"
    first = errors[0]
    # loc looks like ("body", "title"); drop the "body"/"path" source marker.
    location = [str(part) for part in first.get("loc", ()) if part not in ("body", "path", "query")]
    field = ".".join(location)
    message = first.get("msg", "invalid value")
    return f"{field}: {message}" if field else message


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = _describe_validation_error(exc)
    logger.info("%s %s -> 400: %s", request.method, request.url.path, message)
    return JSONResponse(status_code=400, content={"error": message})


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == 404 and exc.detail == "Not Found":
        message = "unknown endpoint"
    else:
        message = str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": message},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unexpected error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": "internal server error"})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BlogListError, bloglist_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
