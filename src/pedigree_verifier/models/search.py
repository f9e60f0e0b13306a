"""Search result candidate model."""

from pydantic import BaseModel, Field


class SearchCandidate(BaseModel):
    """One row of a registry name search."""

    model_config = {"frozen": True}

    external_id: str | None = Field(default=None)
    name: str | None = Field(default=None)
    pedigree_number: str | None = Field(default=None)
    titles: str | None = Field(default=None)
    date_of_birth: str | None = Field(default=None)
    color: str | None = Field(default=None)
    hip_score: str | None = Field(default=None)
    elbow_score: str | None = Field(default=None)
    profile_url: str | None = Field(default=None)
