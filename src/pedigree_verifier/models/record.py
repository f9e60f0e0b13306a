"""Canonical canine identity record produced by profile extraction."""
from __future__ import annotations

from datetime import UTC, datetime
from enum import Enum

from pydantic import BaseModel, Field


class Sex(str, Enum):
    """Registered sex of a dog."""

    MALE = "male"
    FEMALE = "female"
    UNKNOWN = "unknown"


class RelativeRef(BaseModel):
    """Reference to a sire or dam as linked from a profile."""

    model_config = {"frozen": True}

    name: str | None = Field(default=None)
    external_id: str | None = Field(default=None, description="Registry id from the profile link")
    url: str | None = Field(default=None)


class RelativeSummary(BaseModel):
    """Lightweight listing of a child or sibling; never expanded further."""

    model_config = {"frozen": True}

    name: str | None = Field(default=None)
    external_id: str | None = Field(default=None)
    pedigree_number: str | None = Field(default=None)
    titles: str | None = Field(default=None)
    date_of_birth: str | None = Field(default=None)
    color: str | None = Field(default=None)
    hip_score: str | None = Field(default=None)
    elbow_score: str | None = Field(default=None)


class CanineIdentityRecord(BaseModel):
    """Normalized, source-agnostic representation of one registry profile.

    Absent sire/dam means "unknown", not "none". Health results of "UNKNOWN"
    are kept verbatim here; the scorer treats them as not tested.
    """

    model_config = {"frozen": True}

    source_id: str = Field(description="Registry identifier of the profile")
    source: str = Field(default="canecorsopedigree.com")
    source_url: str | None = Field(default=None)

    # Identity
    registered_name: str | None = Field(default=None)
    pedigree_view_id: str | None = Field(
        default=None, description="Id of the pedigree view linked from the name"
    )
    sex: Sex | None = Field(default=None)
    sire: RelativeRef | None = Field(default=None)
    dam: RelativeRef | None = Field(default=None)

    # Registration
    pedigree_number: str | None = Field(default=None)
    titles: str | None = Field(default=None)
    extra_titles: str | None = Field(default=None)
    date_of_birth: str | None = Field(default=None)
    date_of_death: str | None = Field(default=None)
    color: str | None = Field(default=None)

    # Health
    hip_score: str | None = Field(default=None)
    elbow_score: str | None = Field(default=None)
    heart_result: str | None = Field(default=None)
    other_health_notes: str | None = Field(default=None)
    dna_profile: str | None = Field(default=None)
    dsra_result: str | None = Field(default=None)
    dsra_certified: bool = Field(default=False)
    dvl2_result: str | None = Field(default=None)
    dvl2_certified: bool = Field(default=False)
    dna_parentage_confirmed: bool = Field(default=False)

    # Inbreeding
    inbreeding_coefficient_percent: float | None = Field(default=None)
    dna_test_inbreeding: str | None = Field(default=None)

    added_by: str | None = Field(default=None)

    # Relatives
    children: list[RelativeSummary] = Field(default_factory=list)
    siblings: list[RelativeSummary] = Field(default_factory=list)

    retrieved_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
