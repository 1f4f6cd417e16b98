"""
Top‑level router for version 1 of the API.

This router aggregates the domain routers.  Each endpoint module
defines its own full path (``/generate``, ``/dna``, ``/upload``,
``/exemplars``), so no prefixes are added here.
"""

from fastapi import APIRouter

from .endpoints import dna, exemplars, generate

router = APIRouter()

router.include_router(generate.router, tags=["generate"])
router.include_router(dna.router, tags=["dna"])
router.include_router(exemplars.router, tags=["exemplars"])
