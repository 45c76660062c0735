"""
Error Handlers
==============

Every error the API returns has the body `{"error": "<message>"}`.
These handlers translate framework exceptions into that shape.
"""
import logging
from typing import Any, Dict, Sequence

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


def error_body(message: str) -> Dict[str, str]:
    return {"error": message}


def _format_validation_errors(errors: Sequence[Dict[str, Any]]) -> str:
    parts = []
    for err in errors:
        # Drop the leading "body" segment; callers only see their own fields.
        loc = [str(p) for p in err.get("loc", ()) if p != "body"]
        msg = err.get("msg", "Invalid value")
        parts.append(f"{'.'.join(loc)}: {msg}" if loc else msg)
    return "Invalid request: " + "; ".join(parts)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed JSON and wrong field types are client errors (400, not 422)."""
    message = _format_validation_errors(exc.errors())
    logger.debug("Rejected %s %s: %s", request.method, request.url.path, message)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(message),
    )


def register_exception_handlers(application: FastAPI) -> None:
    application.add_exception_handler(StarletteHTTPException, http_exception_handler)
    application.add_exception_handler(RequestValidationError, validation_exception_handler)
