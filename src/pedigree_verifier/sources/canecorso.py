"""canecorsopedigree.com source connector."""
from __future__ import annotations

from typing import Any

import structlog

from ..extractors.document import LabeledDocument
from ..extractors.profile import extract_profile
from ..extractors.search_results import extract_search_results
from ..models.record import CanineIdentityRecord
from ..models.search import SearchCandidate
from .base import BaseSource

logger = structlog.get_logger(__name__)


class CaneCorsoPedigreeSource(BaseSource):
    name = "CaneCorsoPedigree"

    async def search(self, term: str) -> list[SearchCandidate]:
        params: dict[str, Any] = {
            "searchTerm": term,
            "orderBy": "dog_name",
            "order": "ASC",
        }
        html = await self._fetch_html(self.config.search_url, params=params)
        results = extract_search_results(LabeledDocument.from_html(html), base_url=self.config.base_url)
        logger.info("search_completed", source=self.name, term=term, results=len(results))
        return results

    async def get_profile(self, dog_id: str) -> CanineIdentityRecord:
        url = self.config.profile_url(dog_id)
        html = await self._fetch_html(url)
        return extract_profile(
            LabeledDocument.from_html(html),
            dog_id,
            base_url=self.config.base_url,
            source=self.config.source_name,
            source_url=url,
        )
