"""Children and sibling listings from a registry profile.

Relatives are shown in a sub-table nested somewhere below a section title
cell ("children", "Brothers and sisters"). The page also nests unrelated
tables, so the relatives table is recognized by the header-marker heuristic
below. It is a heuristic, not a guarantee: a layout change on the registry
that renames those columns makes relatives silently disappear.
"""
from __future__ import annotations

import structlog

from ..models.record import RelativeSummary
from .document import LabeledDocument, Row
from .labels import coerce_text

logger = structlog.get_logger(__name__)

CHILDREN_SECTION = "children"
SIBLINGS_SECTION = "Brothers and sisters"

# Column headers that must all appear in the relatives table's first row
RELATIVES_HEADER_MARKERS: tuple[str, ...] = ("Name", "Ped#", "HD")

MIN_RELATIVE_CELLS = 7

SECTION_TITLES: frozenset[str] = frozenset({CHILDREN_SECTION, SIBLINGS_SECTION})


def is_relatives_header(header_text: str) -> bool:
    """Triple-marker check separating relatives tables from incidental ones."""
    return all(marker in header_text for marker in RELATIVES_HEADER_MARKERS)


def _summary_from_row(row: Row) -> RelativeSummary:
    first = row.cells[0]
    return RelativeSummary(
        name=coerce_text(first.link_text or first.text),
        external_id=first.linked_id,
        pedigree_number=coerce_text(row.cell_text(1)),
        titles=coerce_text(row.cell_text(2)),
        date_of_birth=coerce_text(row.cell_text(3)),
        color=coerce_text(row.cell_text(4)),
        hip_score=coerce_text(row.cell_text(5)),
        elbow_score=coerce_text(row.cell_text(6)),
    )


def extract_relatives(document: LabeledDocument, section_label: str) -> list[RelativeSummary]:
    """Extract the relatives listed under ``section_label``.

    Args:
        document: Parsed profile page
        section_label: Exact text of the section title cell

    Returns:
        Summaries in document order; empty when the section is absent.
    """
    section = document.find_cell(section_label)
    if section is None:
        return []

    # A section owns only the tables before the next section title
    for table in document.nested_tables(after=section, stop_at=SECTION_TITLES):
        if not is_relatives_header(table.header_text):
            continue
        rows = table.rows()[1:]
        relatives = [_summary_from_row(row) for row in rows if len(row.cells) >= MIN_RELATIVE_CELLS]
        logger.debug("relatives_extracted", section=section_label, count=len(relatives))
        return relatives

    logger.debug("relatives_table_missing", section=section_label)
    return []
