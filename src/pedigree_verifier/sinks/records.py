"""Build persistence payloads from a canonical record."""
from __future__ import annotations

import json

from ..models.persistence import HealthTestRecord, HealthTestType, PedigreeRecord
from ..models.record import CanineIdentityRecord
from ..scoring import is_tested


def _certified_result(result: str, certified: bool) -> str:
    return f"{result} (Certified)" if certified else result


def build_health_records(
    subject_id: str,
    record: CanineIdentityRecord,
    *,
    verification_source: str,
) -> list[HealthTestRecord]:
    """Health test rows for every test the record shows as on file.

    Uses the scorer's notion of "tested", so results of "unknown" are never
    written. Hip and elbow rows carry the date of birth as the best available
    proxy for the test date.
    """
    source_url = record.source_url
    tests: list[HealthTestRecord] = []

    if is_tested(record.hip_score):
        tests.append(
            HealthTestRecord(
                subject_id=subject_id,
                test_type=HealthTestType.HIPS,
                result=record.hip_score,
                test_date=record.date_of_birth,
                verification_source=verification_source,
                notes=f"HD score: {record.hip_score}. Source: {source_url}",
            )
        )

    if is_tested(record.elbow_score):
        tests.append(
            HealthTestRecord(
                subject_id=subject_id,
                test_type=HealthTestType.ELBOWS,
                result=record.elbow_score,
                test_date=record.date_of_birth,
                verification_source=verification_source,
                notes=f"ED score: {record.elbow_score}. Source: {source_url}",
            )
        )

    if is_tested(record.dsra_result):
        tests.append(
            HealthTestRecord(
                subject_id=subject_id,
                test_type=HealthTestType.DSRA,
                result=_certified_result(record.dsra_result, record.dsra_certified),
                verification_source=verification_source,
                notes=f"DSRA: {record.dsra_result}, Certified: {record.dsra_certified}. Source: {source_url}",
            )
        )

    if is_tested(record.dvl2_result):
        tests.append(
            HealthTestRecord(
                subject_id=subject_id,
                test_type=HealthTestType.DVL2,
                result=_certified_result(record.dvl2_result, record.dvl2_certified),
                verification_source=verification_source,
                notes=f"DVL2: {record.dvl2_result}, Certified: {record.dvl2_certified}. Source: {source_url}",
            )
        )

    if record.heart_result:
        tests.append(
            HealthTestRecord(
                subject_id=subject_id,
                test_type=HealthTestType.CARDIAC,
                result=record.heart_result,
                verification_source=verification_source,
                notes=f"Heart: {record.heart_result}. Source: {source_url}",
            )
        )

    return tests


def build_pedigree_record(
    subject_id: str,
    record: CanineIdentityRecord,
    *,
    verification_source: str,
) -> PedigreeRecord:
    """Pedigree row with sire/dam names and a JSON lineage blob."""
    lineage = {
        "sire": record.sire.model_dump(mode="json") if record.sire else None,
        "dam": record.dam.model_dump(mode="json") if record.dam else None,
        "pedigree_number": record.pedigree_number,
        "inbreeding_coefficient": record.inbreeding_coefficient_percent,
        "titles": record.extra_titles or record.titles,
        "source_id": record.source_id,
    }
    return PedigreeRecord(
        subject_id=subject_id,
        sire_name=record.sire.name if record.sire else None,
        dam_name=record.dam.name if record.dam else None,
        lineage=json.dumps(lineage),
        verification_source=verification_source,
    )
