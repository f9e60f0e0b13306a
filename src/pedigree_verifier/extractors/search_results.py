"""Registry name-search listings."""
from __future__ import annotations

from urllib.parse import urljoin

from ..models.search import SearchCandidate
from .document import LabeledDocument, Row
from .labels import coerce_text

PROFILE_PATH_MARKER = "view_dog"


def _candidate_from_row(row: Row, base_url: str) -> SearchCandidate | None:
    if not row.cells:
        return None
    first = row.cells[0]
    if not first.href or PROFILE_PATH_MARKER not in first.href:
        return None
    return SearchCandidate(
        external_id=first.linked_id,
        name=coerce_text(first.link_text or ""),
        pedigree_number=coerce_text(row.cell_text(1)),
        titles=coerce_text(row.cell_text(2)),
        date_of_birth=coerce_text(row.cell_text(3)),
        color=coerce_text(row.cell_text(4)),
        hip_score=coerce_text(row.cell_text(5)),
        elbow_score=coerce_text(row.cell_text(6)),
        profile_url=urljoin(base_url + "/", first.href),
    )


def extract_search_results(document: LabeledDocument, *, base_url: str) -> list[SearchCandidate]:
    """Parse a search results table into candidates, in source order.

    The first row is the column header. Rows whose first cell does not link
    to a profile (separators, paging) are skipped.
    """
    results: list[SearchCandidate] = []
    for index, row in enumerate(document.rows()):
        if index == 0:
            continue
        candidate = _candidate_from_row(row, base_url)
        if candidate is not None:
            results.append(candidate)
    return results
