"""Extraction of canonical records from registry HTML."""

from .document import Cell, LabeledDocument, LabeledTable, Row, extract_id
from .labels import LABEL_RULES, FieldRule, ValueKind, lookup_label, normalize_label
from .profile import extract_fields, extract_profile
from .relatives import (
    CHILDREN_SECTION,
    SIBLINGS_SECTION,
    extract_relatives,
    is_relatives_header,
)
from .search_results import extract_search_results

__all__ = [
    "Cell",
    "Row",
    "LabeledTable",
    "LabeledDocument",
    "extract_id",
    "LABEL_RULES",
    "FieldRule",
    "ValueKind",
    "lookup_label",
    "normalize_label",
    "extract_fields",
    "extract_profile",
    "CHILDREN_SECTION",
    "SIBLINGS_SECTION",
    "extract_relatives",
    "is_relatives_header",
    "extract_search_results",
]
