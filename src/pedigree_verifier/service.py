"""Verification service: verify a dog by id or name, and save a verification.

This is the request surface without any HTTP plumbing. Collaborator errors
(FetchError, SinkError) propagate unchanged to the caller's boundary.
"""
from __future__ import annotations

from typing import Any, Literal

import structlog
from pydantic import BaseModel, Field

from .errors import InvalidRequestError
from .models.record import CanineIdentityRecord
from .models.score import VerificationScore
from .models.search import SearchCandidate
from .scoring import score_record
from .sinks.records import build_health_records, build_pedigree_record
from .sinks.supabase import HEALTH_RECORDS_TABLE, PEDIGREES_TABLE, SupabaseSink
from .sources.base import RegistrySource

logger = structlog.get_logger(__name__)

VERIFY_EXAMPLE = "verify --name 'HEART SKIPS PHOENIX BEAUTY'"


class ProfileReport(BaseModel):
    """A canonical record together with its freshly computed score."""

    record: CanineIdentityRecord
    score: VerificationScore

    @classmethod
    def from_record(cls, record: CanineIdentityRecord) -> ProfileReport:
        return cls(record=record, score=score_record(record))


class VerificationOutcome(BaseModel):
    """Result of a verify request: a profile, or candidates to choose from."""

    type: Literal["profile", "search"]
    message: str | None = Field(default=None)
    profile: ProfileReport | None = Field(default=None)
    results: list[SearchCandidate] = Field(default_factory=list)


class SaveOutcome(BaseModel):
    """Result of persisting a verification."""

    message: str
    health_records_created: list[Any] = Field(default_factory=list)
    pedigree_created: Any = Field(default=None)
    trust_score: VerificationScore


class VerificationService:
    """Coordinates a registry source, the extractors' output and the sink."""

    def __init__(self, source: RegistrySource | None = None, sink: SupabaseSink | None = None) -> None:
        self.source = source
        self.sink = sink

    async def verify(self, *, dog_id: str | None = None, name: str | None = None) -> VerificationOutcome:
        """Verify a dog by registry id or by name.

        A name with several matches is a successful outcome that returns the
        candidates for the caller to disambiguate.

        Raises:
            InvalidRequestError: If neither ``dog_id`` nor ``name`` is given.
        """
        if (dog_id or name) and self.source is None:
            raise InvalidRequestError("No registry source configured")

        if dog_id:
            record = await self.source.get_profile(dog_id)
            return VerificationOutcome(type="profile", profile=ProfileReport.from_record(record))

        if name:
            candidates = await self.source.search(name)

            if not candidates:
                return VerificationOutcome(type="search", message=f'No dogs found matching "{name}"')

            if len(candidates) == 1 and candidates[0].external_id:
                record = await self.source.get_profile(candidates[0].external_id)
                return VerificationOutcome(
                    type="profile",
                    message=f'Found exact match for "{name}"',
                    profile=ProfileReport.from_record(record),
                )

            return VerificationOutcome(
                type="search",
                message=f'Found {len(candidates)} dogs matching "{name}"',
                results=candidates,
            )

        raise InvalidRequestError("Provide a dog name or a registry id", example=VERIFY_EXAMPLE)

    async def save(self, subject_id: str | None, record: CanineIdentityRecord | None) -> SaveOutcome:
        """Persist health and pedigree rows derived from ``record``.

        Raises:
            InvalidRequestError: If the subject id or record is missing, or no
                sink is configured.
            SinkError: If the store rejects a write.
        """
        if not subject_id or record is None:
            raise InvalidRequestError(
                "Required: subject id (UUID from the dogs table) and a verification record"
            )
        if self.sink is None:
            raise InvalidRequestError("No persistence sink configured")

        source = self.sink.config.verification_source
        health_tests = build_health_records(subject_id, record, verification_source=source)
        pedigree = build_pedigree_record(subject_id, record, verification_source=source)

        created: list[Any] = []
        if health_tests:
            inserted = await self.sink.insert(HEALTH_RECORDS_TABLE, [t.to_row() for t in health_tests])
            created = inserted if isinstance(inserted, list) else [inserted]

        pedigree_created = await self.sink.insert(PEDIGREES_TABLE, pedigree.to_row())

        logger.info(
            "verification_saved",
            subject_id=subject_id,
            source_id=record.source_id,
            health_records=len(health_tests),
        )
        return SaveOutcome(
            message=(
                f"Verified {record.registered_name}. Created {len(health_tests)} health records "
                "and 1 pedigree record."
            ),
            health_records_created=created,
            pedigree_created=pedigree_created,
            trust_score=score_record(record),
        )
