"""Pydantic models for brief generation requests."""

from typing import Optional

from pydantic import BaseModel, Field


class BriefRequest(BaseModel):
    """Input for ``POST /generate``.  Both fields are required to be non‑empty."""

    product: Optional[str] = Field(None, example="Oat milk cold brew")
    audience: Optional[str] = Field(None, example="Commuters in their twenties")
