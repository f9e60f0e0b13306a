"""Base interface for pedigree registry sources."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

import httpx
import structlog

from ..config import RegistryConfig
from ..errors import FetchError

logger = structlog.get_logger(__name__)

if TYPE_CHECKING:
    from ..models.record import CanineIdentityRecord
    from ..models.search import SearchCandidate


@runtime_checkable
class RegistrySource(Protocol):
    """Protocol defining the interface a pedigree registry must implement."""

    name: str

    async def search(self, term: str) -> list[SearchCandidate]:
        """Search the registry by dog name.

        Args:
            term: Free-text name

        Returns:
            Candidates in registry order
        """
        ...

    async def get_profile(self, dog_id: str) -> CanineIdentityRecord:
        """Fetch and extract one profile.

        Args:
            dog_id: The registry's identifier

        Returns:
            The canonical record
        """
        ...


class BaseSource(ABC):
    """Abstract base class for HTML pedigree registries.

    Owns one ``httpx.AsyncClient``. Fetches are single attempts: any
    transport error or non-2xx status becomes a ``FetchError``.
    """

    name: str = "base"

    def __init__(self, config: RegistryConfig | None = None, client: httpx.AsyncClient | None = None) -> None:
        """Initialize the source.

        Args:
            config: Registry configuration; defaults apply when omitted
            client: Optional preconfigured HTTP client
        """
        self.config = config or RegistryConfig()
        self._client = client

    @abstractmethod
    async def search(self, term: str) -> list[SearchCandidate]:
        """Search the registry by dog name."""

    @abstractmethod
    async def get_profile(self, dog_id: str) -> CanineIdentityRecord:
        """Fetch and extract one profile."""

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.config.timeout,
                follow_redirects=True,
                headers={
                    "User-Agent": self.config.user_agent,
                    "Accept": "text/html,application/xhtml+xml",
                },
            )
        return self._client

    async def _fetch_html(self, url: str, params: dict[str, Any] | None = None) -> str:
        """GET a page and return its markup.

        Raises:
            FetchError: On transport failure or a non-2xx status.
        """
        client = self._get_client()
        try:
            resp = await client.get(url, params=params)
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.error("fetch_failed", source=self.name, url=url, status=status)
            raise FetchError(f"{self.name} request failed with status {status}", url=url, status_code=status) from e
        except httpx.RequestError as e:
            logger.error("fetch_failed", source=self.name, url=url, error=str(e))
            raise FetchError(f"{self.name} request failed: {e}", url=url) from e

        logger.debug("fetch_ok", source=self.name, url=url, bytes=len(resp.content))
        return resp.text

    async def close(self) -> None:
        """Close HTTP client connection."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> BaseSource:
        """Async context manager entry."""
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> bool:
        """Async context manager exit - ensures connection cleanup."""
        await self.close()
        return False
