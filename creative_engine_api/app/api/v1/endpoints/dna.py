"""
Brand DNA endpoints for API v1.

The DNA document is read and replaced as a whole.  Any JSON object is
accepted on write; generation later requires ``voice`` and
``formats.brief`` to be present.
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Body, status

from creative_engine_api.app.core.errors import error_response
from creative_engine_api.app.schemas.common import ErrorResponse, MessageResponse
from creative_engine_api.app.services.dna_service import DNAService

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/dna", response_model=None, responses={500: {"model": ErrorResponse}})
async def get_dna() -> Any:
    """Return the stored brand DNA."""
    try:
        return await DNAService.get_dna()
    except Exception:
        logger.exception("Error in /dna GET route")
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to retrieve brand DNA.")


@router.post(
    "/dna",
    response_model=MessageResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def update_dna(new_dna: Dict[str, Any] = Body(...)) -> Any:
    """Replace the brand DNA with the request body."""
    try:
        await DNAService.update_dna(new_dna)
    except Exception:
        logger.exception("Error in /dna POST route")
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to update brand DNA.")
    return MessageResponse(message="Brand DNA updated successfully.")
