"""
JSON response helpers shared by the routers.
"""
from __future__ import annotations

from fastapi.responses import JSONResponse

from salesboard.analytics.common import sanitize_for_json
from salesboard.api.response_models import ErrorResponse

# Documented failure shape for every data endpoint
ERROR_RESPONSES = {500: {"model": ErrorResponse, "description": "Query or upstream failure"}}


def safe_json(data) -> JSONResponse:
    return JSONResponse(content=sanitize_for_json(data))


def error_json(message: str, exc: BaseException) -> JSONResponse:
    """500 with ``{message, error}``; the error is the exception text."""
    print(f"  {message}: {type(exc).__name__}: {exc}")
    return JSONResponse(status_code=500, content={"message": message, "error": str(exc) or type(exc).__name__})
