"""
Pydantic models for exemplar ads.

An exemplar is identified by its creation timestamp in milliseconds.
"""

from typing import Optional

from pydantic import BaseModel, Field


class ExemplarCreate(BaseModel):
    """Schema for uploading a new exemplar."""

    text: Optional[str] = Field(None, description="Full text of the sample ad or brief")


class ExemplarRead(BaseModel):
    """Schema for reading a stored exemplar."""

    id: int = Field(..., example=1717171717171)
    text: str
