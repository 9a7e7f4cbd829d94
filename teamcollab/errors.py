"""Domain errors and their HTTP mapping."""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse, Response

logger = logging.getLogger(__name__)


class TeamCollabError(Exception):
    """Base class for errors raised by the service layer."""

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class NotFoundError(TeamCollabError):
    """A referenced id has no record."""

    def __init__(self, entity: str, entity_id=None):
        message = f"{entity} not found" if entity_id is None else f"{entity} {entity_id} not found"
        super().__init__(message)
        self.entity = entity
        self.entity_id = entity_id


class ValidationError(TeamCollabError):
    """Duplicate unique values or otherwise unacceptable input."""


class AuthError(TeamCollabError):
    """Bad credentials or an invalid/expired token."""


def error_body(message: str) -> dict:
    return {"error": True, "message": message}


def empty_response(status_code: int) -> Response:
    return Response(status_code=status_code)


def not_found_handler(_: Request, exc: NotFoundError):
    logger.debug("Not found: %s", exc.message)
    return empty_response(status.HTTP_404_NOT_FOUND)


def validation_error_handler(_: Request, exc: ValidationError):
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=error_body(exc.message))


def auth_error_handler(_: Request, exc: AuthError):
    return PlainTextResponse(
        exc.message or "Unauthenticated request.",
        status_code=status.HTTP_401_UNAUTHORIZED,
        headers={"WWW-Authenticate": "Bearer"},
    )


def request_validation_handler(_: Request, exc: RequestValidationError):
    problems = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        problems.append(f"{location}: {err.get('msg')}" if location else str(err.get("msg")))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body("; ".join(problems) or "Invalid request"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(AuthError, auth_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
