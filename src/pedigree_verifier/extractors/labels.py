"""Label normalization for registry profile rows.

Each known row label maps to a canonical record field and a value kind; each
value kind maps to exactly one coercion function. Lookups are total: unknown
labels return None and are ignored by the extractor.
"""
from __future__ import annotations

import re
from enum import Enum
from typing import Any, Callable, NamedTuple
from urllib.parse import urljoin

from ..models.record import RelativeRef, Sex
from .document import Cell

DATE_PLACEHOLDER = "YYYY/MM/DD"
PEDIGREE_LINK_ANNOTATION = "(click to view pedigree)"

PERCENT_PATTERN = re.compile(r"(\d+(?:\.\d+)?|\.\d+)\s*%")


class ValueKind(str, Enum):
    """How a row's value cell is turned into a record value."""

    TEXT = "text"
    FLAG = "flag"
    SENTINEL_DATE = "sentinel_date"
    PERCENT = "percent"
    RELATIVE = "relative"
    SEX = "sex"
    REGISTERED_NAME = "registered_name"


class FieldRule(NamedTuple):
    key: str
    kind: ValueKind


LABEL_RULES: dict[str, FieldRule] = {
    "name": FieldRule("registered_name", ValueKind.REGISTERED_NAME),
    "gender": FieldRule("sex", ValueKind.SEX),
    "father": FieldRule("sire", ValueKind.RELATIVE),
    "mother": FieldRule("dam", ValueKind.RELATIVE),
    "dog parental dna confirmed": FieldRule("dna_parentage_confirmed", ValueKind.FLAG),
    "ped#": FieldRule("pedigree_number", ValueKind.TEXT),
    "titles": FieldRule("titles", ValueKind.TEXT),
    "extra titles": FieldRule("extra_titles", ValueKind.TEXT),
    "dob": FieldRule("date_of_birth", ValueKind.SENTINEL_DATE),
    "colour": FieldRule("color", ValueKind.TEXT),
    "hd": FieldRule("hip_score", ValueKind.TEXT),
    "ed": FieldRule("elbow_score", ValueKind.TEXT),
    "heart": FieldRule("heart_result", ValueKind.TEXT),
    "date of death": FieldRule("date_of_death", ValueKind.SENTINEL_DATE),
    "other healthscores": FieldRule("other_health_notes", ValueKind.TEXT),
    "dna profile": FieldRule("dna_profile", ValueKind.TEXT),
    "dsra result": FieldRule("dsra_result", ValueKind.TEXT),
    "dsra result certified": FieldRule("dsra_certified", ValueKind.FLAG),
    "dvl2 result": FieldRule("dvl2_result", ValueKind.TEXT),
    "dvl2 result certified": FieldRule("dvl2_certified", ValueKind.FLAG),
    "dna test inbred percentage": FieldRule("dna_test_inbreeding", ValueKind.TEXT),
    "inbred percentage": FieldRule("inbreeding_coefficient_percent", ValueKind.PERCENT),
    "added by": FieldRule("added_by", ValueKind.TEXT),
}


def lookup_label(raw: object) -> FieldRule | None:
    """Return the field rule for a raw row label, or None if unrecognized."""
    if not isinstance(raw, str):
        return None
    return LABEL_RULES.get(raw.strip().lower())


def normalize_label(raw: object) -> str | None:
    """Map a raw row label to its canonical field key."""
    rule = lookup_label(raw)
    return rule.key if rule else None


# =============================================================================
# Coercions
# =============================================================================


def coerce_text(value: str) -> str | None:
    value = value.strip()
    return value or None


def coerce_flag(value: str) -> bool:
    return value.strip().lower() == "yes"


def coerce_sentinel_date(value: str) -> str | None:
    """Registry placeholder dates mean "not recorded"."""
    if value == DATE_PLACEHOLDER:
        return None
    return coerce_text(value)


def parse_percent(value: str) -> float | None:
    """First decimal number directly preceding a ``%`` sign."""
    match = PERCENT_PATTERN.search(value)
    return float(match.group(1)) if match else None


def coerce_sex(value: str) -> Sex | None:
    value = value.strip().lower()
    if not value:
        return None
    try:
        return Sex(value)
    except ValueError:
        return Sex.UNKNOWN


def coerce_registered_name(value: str) -> str | None:
    return coerce_text(value.replace(PEDIGREE_LINK_ANNOTATION, ""))


def coerce_relative(cell: Cell, base_url: str) -> RelativeRef:
    return RelativeRef(
        name=coerce_text(cell.text),
        external_id=cell.linked_id,
        url=urljoin(base_url + "/", cell.href) if cell.href else None,
    )


COERCIONS: dict[ValueKind, Callable[[Cell, str], Any]] = {
    ValueKind.TEXT: lambda cell, _: coerce_text(cell.text),
    ValueKind.FLAG: lambda cell, _: coerce_flag(cell.text),
    ValueKind.SENTINEL_DATE: lambda cell, _: coerce_sentinel_date(cell.text),
    ValueKind.PERCENT: lambda cell, _: parse_percent(cell.text),
    ValueKind.RELATIVE: coerce_relative,
    ValueKind.SEX: lambda cell, _: coerce_sex(cell.text),
    ValueKind.REGISTERED_NAME: lambda cell, _: coerce_registered_name(cell.text),
}


def coerce_value(rule: FieldRule, cell: Cell, base_url: str) -> Any:
    """Apply the coercion registered for ``rule.kind`` to a value cell."""
    return COERCIONS[rule.kind](cell, base_url)
