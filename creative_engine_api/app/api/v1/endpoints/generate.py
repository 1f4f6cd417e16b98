"""
Brief generation endpoint for API v1.

``POST /generate`` takes a product and an audience and returns the
brief produced by the generative model, shaped by the brand DNA's
``formats.brief`` schema.  Briefs are not stored.
"""

import logging
from typing import Any

from fastapi import APIRouter, status

from creative_engine_api.app.core.errors import error_response
from creative_engine_api.app.schemas.brief import BriefRequest
from creative_engine_api.app.schemas.common import ErrorResponse
from creative_engine_api.app.services.generation_service import GenerationService

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post(
    "/generate",
    response_model=None,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def generate_brief(body: BriefRequest) -> Any:
    """Generate a new creative brief.

    Returns HTTP 400 when ``product`` or ``audience`` is missing or
    blank.  Any failure while loading the DNA, calling the model or
    parsing its answer yields HTTP 500.
    """
    if not (body.product and body.product.strip()) or not (body.audience and body.audience.strip()):
        return error_response(status.HTTP_400_BAD_REQUEST, "Product and audience are required.")
    try:
        return await GenerationService.generate_brief(body.product, body.audience)
    except Exception:
        logger.exception("Error in /generate route")
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to generate brief.")
