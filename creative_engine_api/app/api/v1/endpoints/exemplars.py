"""
Exemplar endpoints for API v1.

``POST /upload`` appends a sample ad to the exemplar library and
``GET /exemplars`` lists the library in upload order.
"""

import logging
from typing import Any, List

from fastapi import APIRouter, status

from creative_engine_api.app.core.errors import error_response
from creative_engine_api.app.schemas.common import ErrorResponse, MessageResponse
from creative_engine_api.app.schemas.exemplar import ExemplarCreate, ExemplarRead
from creative_engine_api.app.services.exemplar_service import ExemplarService

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post(
    "/upload",
    response_model=MessageResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def upload_exemplar(body: ExemplarCreate) -> Any:
    """Store a new exemplar.  Blank text is rejected with HTTP 400."""
    if not (body.text and body.text.strip()):
        return error_response(status.HTTP_400_BAD_REQUEST, "Text content is required.")
    try:
        await ExemplarService.add_exemplar(body.text)
    except Exception:
        logger.exception("Error in /upload route")
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to upload exemplar.")
    return MessageResponse(message="Exemplar uploaded successfully.")


@router.get("/exemplars", response_model=List[ExemplarRead], responses={500: {"model": ErrorResponse}})
async def list_exemplars() -> Any:
    """Return every stored exemplar, oldest first."""
    try:
        return await ExemplarService.list_exemplars()
    except Exception:
        logger.exception("Error in /exemplars route")
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to retrieve exemplars.")
