"""Verification score for a canonical record.

Criteria are independent and additive. Each awarded criterion (and bonus) sets
a breakdown key; criteria that are not met leave their key absent.

| criterion        | points | bonus                               |
|------------------|--------|-------------------------------------|
| sire known       | 12.5   |                                     |
| dam known        | 12.5   |                                     |
| hip score        | 20     | +5 for an excellent/good rating     |
| elbow score      | 20     | +5 for a clear rating               |
| DSRA tested      | 10     | +2.5 when certified                 |
| DVL2 tested      | 10     | +2.5 when certified                 |
| DNA parentage    | 5      |                                     |
| pedigree number  | 5      |                                     |

The ideal total is 112.5, so top-quality health results alone saturate the
100 point cap.
"""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from .models.record import CanineIdentityRecord
from .models.score import MAX_POINTS, VerificationScore

UNKNOWN_RESULT = "unknown"

# Quality sets are exact, case-sensitive matches
GOOD_HIP_SCORES: frozenset[str] = frozenset({"HD-", "HD A", "OFA Excellent", "OFA Good"})
CLEAR_ELBOW_SCORES: frozenset[str] = frozenset({"0/Free/Vrij", "OFA Normal"})

PARENT_POINTS = Decimal("12.5")
HIP_POINTS = Decimal("20")
ELBOW_POINTS = Decimal("20")
QUALITY_BONUS = Decimal("5")
GENETIC_TEST_POINTS = Decimal("10")
CERTIFIED_BONUS = Decimal("2.5")
DNA_CONFIRMED_POINTS = Decimal("5")
PEDIGREE_NUMBER_POINTS = Decimal("5")


def is_tested(result: str | None) -> bool:
    """A result counts as on file unless missing or "unknown" in any case."""
    return bool(result) and result.strip().lower() != UNKNOWN_RESULT


def _round_points(total: Decimal) -> int:
    capped = max(Decimal(0), min(total, Decimal(MAX_POINTS)))
    return int(capped.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def score_record(record: CanineIdentityRecord) -> VerificationScore:
    """Compute the verification score of ``record``."""
    total = Decimal(0)
    breakdown: dict[str, bool | str] = {}

    if record.sire and record.sire.name:
        total += PARENT_POINTS
        breakdown["sire_verified"] = True
    if record.dam and record.dam.name:
        total += PARENT_POINTS
        breakdown["dam_verified"] = True

    if is_tested(record.hip_score):
        total += HIP_POINTS
        breakdown["hd_verified"] = True
        if record.hip_score in GOOD_HIP_SCORES:
            total += QUALITY_BONUS
            breakdown["hd_rating"] = "excellent/good"

    if is_tested(record.elbow_score):
        total += ELBOW_POINTS
        breakdown["ed_verified"] = True
        if record.elbow_score in CLEAR_ELBOW_SCORES:
            total += QUALITY_BONUS
            breakdown["ed_rating"] = "clear"

    if is_tested(record.dsra_result):
        total += GENETIC_TEST_POINTS
        breakdown["dsra_tested"] = True
        if record.dsra_certified:
            total += CERTIFIED_BONUS
            breakdown["dsra_certified"] = True

    if is_tested(record.dvl2_result):
        total += GENETIC_TEST_POINTS
        breakdown["dvl2_tested"] = True
        if record.dvl2_certified:
            total += CERTIFIED_BONUS
            breakdown["dvl2_certified"] = True

    if record.dna_parentage_confirmed:
        total += DNA_CONFIRMED_POINTS
        breakdown["dna_confirmed"] = True

    if record.pedigree_number:
        total += PEDIGREE_NUMBER_POINTS
        breakdown["pedigree_registered"] = True

    return VerificationScore(points=_round_points(total), breakdown=breakdown)
