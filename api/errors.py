"""
Exception handlers for the FastAPI application.

Every failure reaches the caller as a single ``{"detail": "<message>"}`` object.
Stack traces are never returned; the ASGI server logs them after the error response is sent.
"""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.translator import t
from registration.exceptions import RegistrationError

log = logging.getLogger(__name__)


def _lang(request: Request) -> str:
    return getattr(request.app.state, "language", "en")


def describe_validation_error(exc: RequestValidationError) -> str:
    """
    Summarize the first schema error of a request body.

    Returns:
        str: A "<field>: <reason>" string, e.g. "full_name: Input should be a valid string".
    """
    errors = exc.errors()
    if not errors:
        return "malformed body"
    first = errors[0]
    field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    return f"{field or 'body'}: {first.get('msg', 'invalid value')}"


def register_error_handlers(app: FastAPI) -> None:
    """Attach the handlers that map exceptions to HTTP responses."""

    @app.exception_handler(RegistrationError)
    async def registration_error_handler(request: Request, exc: RegistrationError):
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        reason = describe_validation_error(exc)
        log.info(f"Rejected request body on {request.url.path}: {reason}")
        return JSONResponse(
            status_code=400,
            content={"detail": t("validation.invalid_body", _lang(request), error=reason)}
        )

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        return JSONResponse(status_code=500, content={"detail": t("errors.unexpected", _lang(request))})
