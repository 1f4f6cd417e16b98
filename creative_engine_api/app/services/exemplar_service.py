"""
Service layer for exemplar ads.

Exemplars are sample ads or briefs that the generator studies for
style.  They are stored as a JSON array of ``{"id", "text"}`` objects
where ``id`` is the creation time in milliseconds.  Entries are only
ever appended; there is no deletion path and no deduplication.
"""

import logging
import time
from typing import Any, Dict, List

from creative_engine_api.app.core import storage
from creative_engine_api.app.services.errors import ExemplarError


class ExemplarService:
    """Service for the exemplar library."""

    @classmethod
    async def list_exemplars(cls) -> List[Dict[str, Any]]:
        """Return all stored exemplars in append order.

        A missing file is treated as an empty library.
        """
        logger = logging.getLogger(__name__)
        path = storage.get_exemplars_path()
        try:
            exemplars = storage.read_json(path)
        except FileNotFoundError:
            return []
        except (OSError, ValueError) as exc:
            logger.error("Error loading exemplars from %s: %s", path, exc)
            raise ExemplarError("Could not load exemplars file.") from exc
        if not isinstance(exemplars, list):
            logger.error("Exemplars file %s does not contain a JSON array", path)
            raise ExemplarError("Could not load exemplars file.")
        return exemplars

    @classmethod
    async def add_exemplar(cls, text: str) -> Dict[str, Any]:
        """Append a new exemplar and rewrite the file.

        This is a plain read‑modify‑write without locking, so concurrent
        uploads may lose entries.  Returns the stored entry.
        """
        logger = logging.getLogger(__name__)
        path = storage.get_exemplars_path()
        try:
            exemplars = await cls.list_exemplars()
            entry = {"id": int(time.time() * 1000), "text": text}
            exemplars.append(entry)
            storage.write_json(path, exemplars)
        except (ExemplarError, OSError, TypeError, ValueError) as exc:
            logger.error("Error saving exemplar to %s: %s", path, exc)
            raise ExemplarError("Could not save exemplar.") from exc
        logger.info("Stored exemplar %s (%d total)", entry["id"], len(exemplars))
        return entry
