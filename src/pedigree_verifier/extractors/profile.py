"""Profile page extraction into a CanineIdentityRecord."""
from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

import structlog

from ..models.record import CanineIdentityRecord, RelativeSummary
from .document import LabeledDocument
from .labels import ValueKind, coerce_value, lookup_label
from .relatives import (
    CHILDREN_SECTION,
    SIBLINGS_SECTION,
    extract_relatives,
    is_relatives_header,
)

logger = structlog.get_logger(__name__)


def extract_fields(document: LabeledDocument, *, base_url: str) -> dict[str, Any]:
    """Collect recognized label/value rows into canonical field values.

    Rows with fewer than two cells, unrecognized labels, and rows belonging to
    relatives tables are skipped. A later row for the same label wins.
    """
    fields: dict[str, Any] = {}
    for row in document.rows():
        if len(row.cells) < 2 or is_relatives_header(row.table_header):
            continue
        rule = lookup_label(row.cells[0].text)
        if rule is None:
            continue

        value_cell = row.cells[1]
        fields[rule.key] = coerce_value(rule, value_cell, base_url)
        if rule.kind is ValueKind.REGISTERED_NAME:
            fields["pedigree_view_id"] = value_cell.linked_id
    return fields


def _without_self(relatives: list[RelativeSummary], source_id: str) -> list[RelativeSummary]:
    return [r for r in relatives if r.external_id != source_id]


def extract_profile(
    document: LabeledDocument,
    source_id: str,
    *,
    base_url: str,
    source: str = "canecorsopedigree.com",
    source_url: str | None = None,
    retrieved_at: datetime | None = None,
) -> CanineIdentityRecord:
    """Build the canonical record for one registry profile page.

    Missing rows leave their fields at None/False/empty; extraction never
    fails on sparse documents.

    Args:
        document: Parsed profile page
        source_id: Registry id the page was fetched for
        base_url: Registry base URL used to absolutize parent links
        source: Registry label stored on the record
        source_url: URL the page was fetched from
        retrieved_at: Extraction timestamp; defaults to now (UTC)

    Returns:
        The extracted record, including children and siblings.
    """
    fields = extract_fields(document, base_url=base_url)
    children = _without_self(extract_relatives(document, CHILDREN_SECTION), source_id)
    siblings = _without_self(extract_relatives(document, SIBLINGS_SECTION), source_id)

    record = CanineIdentityRecord(
        source_id=source_id,
        source=source,
        source_url=source_url,
        children=children,
        siblings=siblings,
        retrieved_at=retrieved_at or datetime.now(UTC),
        **fields,
    )
    logger.info(
        "profile_extracted",
        source_id=source_id,
        fields=len(fields),
        children=len(children),
        siblings=len(siblings),
    )
    return record
