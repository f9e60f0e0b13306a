"""Pydantic data models."""

from .persistence import HealthTestRecord, HealthTestType, PedigreeRecord
from .record import CanineIdentityRecord, RelativeRef, RelativeSummary, Sex
from .score import MAX_POINTS, VerificationScore
from .search import SearchCandidate

__all__ = [
    "CanineIdentityRecord",
    "RelativeRef",
    "RelativeSummary",
    "Sex",
    "VerificationScore",
    "MAX_POINTS",
    "SearchCandidate",
    "HealthTestRecord",
    "HealthTestType",
    "PedigreeRecord",
]
