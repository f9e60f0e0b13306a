"""Tests for the verification score."""
from __future__ import annotations

from datetime import UTC, datetime

import pytest

from pedigree_verifier.extractors.profile import extract_profile
from pedigree_verifier.models.record import CanineIdentityRecord, RelativeRef, Sex
from pedigree_verifier.scoring import is_tested, score_record

FIXED = datetime(2024, 1, 1, tzinfo=UTC)


def make_record(**fields) -> CanineIdentityRecord:
    return CanineIdentityRecord(source_id="1", retrieved_at=FIXED, **fields)


@pytest.fixture
def sample_record():
    """The canonical sample profile."""
    return make_record(
        sex=Sex.FEMALE,
        sire=RelativeRef(name="UNION LA MIA FORTUNA BE COME THE STAR DRAGON", external_id="87626"),
        dam=RelativeRef(name="ENIGMA BLUE STAR PHOENIX BEAUTY", external_id="85609"),
        pedigree_number="LV-47136/19",
        hip_score="HD A",
        elbow_score="0/Free/Vrij",
        dsra_result="CLEAR",
        dsra_certified=True,
        dvl2_result="UNKNOWN",
        dna_parentage_confirmed=False,
        inbreeding_coefficient_percent=6.887995486613363,
    )


class TestSampleProfile:
    """Scoring of the canonical sample profile."""

    def test_points(self, sample_record):
        """92.5 rounds half up to 93."""
        assert score_record(sample_record).points == 93

    def test_breakdown(self, sample_record):
        assert score_record(sample_record).breakdown == {
            "sire_verified": True,
            "dam_verified": True,
            "hd_verified": True,
            "hd_rating": "excellent/good",
            "ed_verified": True,
            "ed_rating": "clear",
            "dsra_tested": True,
            "dsra_certified": True,
            "pedigree_registered": True,
        }

    def test_max_possible(self, sample_record):
        assert score_record(sample_record).max_possible == 100

    def test_extracted_page_scores_the_same(self, profile_document, base_url):
        record = extract_profile(profile_document, "110391", base_url=base_url)
        assert score_record(record).points == 93


class TestCriteria:
    """Individual criteria and bonuses."""

    def test_empty_record(self):
        score = score_record(make_record())
        assert score.points == 0
        assert score.breakdown == {}

    def test_parent_ref_without_name(self):
        """A sire reference with no name is not a known sire."""
        score = score_record(make_record(sire=RelativeRef(external_id="87626")))
        assert "sire_verified" not in score.breakdown

    def test_single_parent_rounds_half_up(self):
        assert score_record(make_record(dam=RelativeRef(name="DAM"))).points == 13

    @pytest.mark.parametrize("value", ["unknown", "Unknown", "UNKNOWN"])
    def test_unknown_hips_and_elbows_not_on_file(self, value):
        score = score_record(make_record(hip_score=value, elbow_score=value))
        assert score.points == 0

    def test_hip_quality_is_case_sensitive(self):
        """'hd a' is on file but not in the quality set."""
        score = score_record(make_record(hip_score="hd a"))
        assert score.points == 20
        assert "hd_rating" not in score.breakdown

    @pytest.mark.parametrize("value", ["HD-", "HD A", "OFA Excellent", "OFA Good"])
    def test_hip_quality_bonus(self, value):
        score = score_record(make_record(hip_score=value))
        assert score.points == 25
        assert score.breakdown["hd_rating"] == "excellent/good"

    def test_hip_without_bonus(self):
        score = score_record(make_record(hip_score="HD C"))
        assert score.points == 20
        assert score.breakdown == {"hd_verified": True}

    @pytest.mark.parametrize("value", ["0/Free/Vrij", "OFA Normal"])
    def test_elbow_quality_bonus(self, value):
        score = score_record(make_record(elbow_score=value))
        assert score.points == 25
        assert score.breakdown["ed_rating"] == "clear"

    @pytest.mark.parametrize("value", ["UNKNOWN", "unknown", "Unknown"])
    def test_unknown_genetic_tests_never_score(self, value):
        """UNKNOWN in any case counts as not tested, even when certified."""
        record = make_record(dsra_result=value, dsra_certified=True, dvl2_result=value, dvl2_certified=True)
        score = score_record(record)

        assert score.points == 0
        assert score.breakdown == {}
        assert record.dsra_result == value

    def test_dvl2_certified_bonus(self):
        """DVL2 certification earns the same bonus as DSRA."""
        score = score_record(make_record(dvl2_result="CLEAR", dvl2_certified=True))
        assert score.points == 13
        assert score.breakdown == {"dvl2_tested": True, "dvl2_certified": True}

    def test_uncertified_dsra(self):
        score = score_record(make_record(dsra_result="CARRIER"))
        assert score.points == 10
        assert "dsra_certified" not in score.breakdown

    def test_dna_and_pedigree_number(self):
        score = score_record(make_record(dna_parentage_confirmed=True, pedigree_number="LV-1/20"))
        assert score.points == 10
        assert score.breakdown == {"dna_confirmed": True, "pedigree_registered": True}


class TestClamp:
    """Points stay within [0, 100]."""

    def test_ideal_record_is_capped(self):
        record = make_record(
            sire=RelativeRef(name="S"),
            dam=RelativeRef(name="D"),
            hip_score="HD A",
            elbow_score="OFA Normal",
            dsra_result="CLEAR",
            dsra_certified=True,
            dvl2_result="CLEAR",
            dvl2_certified=True,
            dna_parentage_confirmed=True,
            pedigree_number="P",
        )
        score = score_record(record)
        assert score.points == 100
        assert len(score.breakdown) == 12

    def test_health_alone_saturates(self):
        record = make_record(
            sire=RelativeRef(name="S"),
            dam=RelativeRef(name="D"),
            hip_score="HD A",
            elbow_score="OFA Normal",
            dsra_result="CLEAR",
            dsra_certified=True,
            dvl2_result="CLEAR",
            dvl2_certified=True,
        )
        assert score_record(record).points == 100


class TestIsTested:
    def test_values(self):
        assert is_tested("CLEAR")
        assert not is_tested(None)
        assert not is_tested("")
        assert not is_tested(" unknown ")
