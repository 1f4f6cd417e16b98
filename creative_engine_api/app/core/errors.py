"""
HTTP error helpers.

All failures are reported as ``{"error": "<short message>"}`` with
status 400 (bad or missing input) or 500 (everything else).  Request
bodies FastAPI cannot validate would otherwise produce a 422; the
handler below folds them into the 400 case.
"""

import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return error_response(status.HTTP_400_BAD_REQUEST, "Invalid request body.")
