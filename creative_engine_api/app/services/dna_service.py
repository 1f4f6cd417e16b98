"""
Service layer for the brand DNA profile.

The DNA is a single JSON object with a ``voice`` section (free‑form
style guidance) and a ``formats`` section holding the JSON Schema for
generated briefs.  It is read and replaced wholesale: there are no
partial updates and no merge semantics.
"""

import logging
from typing import Any, Dict

from creative_engine_api.app.core import storage
from creative_engine_api.app.services.errors import DNAError


class DNAService:
    """Service for reading and overwriting the brand DNA file."""

    @classmethod
    async def get_dna(cls) -> Dict[str, Any]:
        """Return the stored brand DNA."""
        logger = logging.getLogger(__name__)
        path = storage.get_dna_path()
        try:
            return storage.read_json(path)
        except (OSError, ValueError) as exc:
            logger.error("Error loading brand DNA from %s: %s", path, exc)
            raise DNAError("Could not load brand DNA file.") from exc

    @classmethod
    async def update_dna(cls, new_dna: Dict[str, Any]) -> None:
        """Overwrite the brand DNA with ``new_dna``.

        Last writer wins; no concurrency control is applied.
        """
        logger = logging.getLogger(__name__)
        path = storage.get_dna_path()
        try:
            storage.write_json(path, new_dna)
        except (OSError, TypeError, ValueError) as exc:
            logger.error("Error saving brand DNA to %s: %s", path, exc)
            raise DNAError("Could not save brand DNA.") from exc
        logger.info("Brand DNA updated")
