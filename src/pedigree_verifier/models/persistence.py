"""Payloads written to the persistence store."""
from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

VERIFIED = "verified"


class HealthTestType(str, Enum):
    """Health test categories stored in the health_records table."""

    HIPS = "hips"
    ELBOWS = "elbows"
    DSRA = "dsra"
    DVL2 = "dvl2"
    CARDIAC = "cardiac"


class HealthTestRecord(BaseModel):
    """One row for the health_records table."""

    subject_id: str = Field(description="Id of the dog in the local store")
    test_type: HealthTestType
    result: str
    test_date: str | None = Field(default=None)
    verification_source: str
    verification_status: str = Field(default=VERIFIED)
    notes: str = Field(default="")

    def to_row(self) -> dict:
        row = self.model_dump(mode="json")
        row["dog_id"] = row.pop("subject_id")
        if row["test_date"] is None:
            row.pop("test_date")
        return row


class PedigreeRecord(BaseModel):
    """One row for the pedigrees table. ``lineage`` is a JSON string."""

    subject_id: str
    sire_name: str | None = Field(default=None)
    dam_name: str | None = Field(default=None)
    lineage: str
    verification_source: str
    verification_status: str = Field(default=VERIFIED)

    def to_row(self) -> dict:
        row = self.model_dump(mode="json")
        row["dog_id"] = row.pop("subject_id")
        return row
