"""Verification score model."""
from __future__ import annotations

from pydantic import BaseModel, Field

MAX_POINTS = 100


class VerificationScore(BaseModel):
    """Weighted completeness/quality score derived from a record.

    A breakdown key is present only when its criterion was awarded.
    """

    model_config = {"frozen": True}

    points: int = Field(ge=0, le=MAX_POINTS)
    breakdown: dict[str, bool | str] = Field(default_factory=dict)
    max_possible: int = Field(default=MAX_POINTS)
