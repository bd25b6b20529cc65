"""
Board error kinds and their JSON rendering.

Every error carries a user-displayable message; the exception handler in
``app.main`` renders it as ``{"error": {"code", "message", "status"}}``.
"""

from __future__ import annotations

from fastapi.exceptions import RequestValidationError
from starlette.requests import Request
from starlette.responses import JSONResponse


class BoardError(Exception):
    """Base class for failures surfaced to the board UI."""

    status_code = 400
    code = "BOARD_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_payload(self) -> dict:
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "status": self.status_code,
            }
        }


class AuthorizationError(BoardError):
    status_code = 403
    code = "INVALID_PASSWORD"


class ValidationError(BoardError):
    status_code = 422
    code = "VALIDATION_ERROR"


class NotFoundError(BoardError):
    status_code = 404
    code = "TASK_NOT_FOUND"


class StoreUnavailableError(BoardError):
    status_code = 503
    code = "STORE_UNAVAILABLE"


async def board_error_handler(request: Request, exc: BoardError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render malformed request bodies and parameters as a ValidationError."""
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        problems.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    message = "Invalid request: " + "; ".join(problems) if problems else "Invalid request."
    return await board_error_handler(request, ValidationError(message))
