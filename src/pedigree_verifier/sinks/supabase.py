"""REST document store client (Supabase PostgREST surface)."""
from __future__ import annotations

from typing import Any

import httpx
import structlog

from ..config import SinkConfig
from ..errors import SinkError

logger = structlog.get_logger(__name__)

HEALTH_RECORDS_TABLE = "health_records"
PEDIGREES_TABLE = "pedigrees"


class SupabaseSink:
    """Writes rows to PostgREST tables.

    Example:
        config = SinkConfig(url="https://xyz.supabase.co", service_key="...")
        async with SupabaseSink(config) as sink:
            created = await sink.insert("pedigrees", row)
    """

    def __init__(self, config: SinkConfig, client: httpx.AsyncClient | None = None) -> None:
        self.config = config
        self._client = client

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.config.timeout)
        return self._client

    @property
    def headers(self) -> dict[str, str]:
        return {
            "apikey": self.config.service_key,
            "Authorization": f"Bearer {self.config.service_key}",
            "Content-Type": "application/json",
            "Prefer": "return=representation",
        }

    async def insert(self, table: str, rows: dict | list[dict]) -> Any:
        """POST one row or a batch of rows and return the created representation.

        Raises:
            SinkError: When the store is unreachable or rejects the write.
        """
        url = f"{self.config.rest_url}/{table}"
        try:
            resp = await self._get_client().post(url, json=rows, headers=self.headers)
        except httpx.RequestError as e:
            logger.error("sink_insert_failed", table=table, error=str(e))
            raise SinkError(f"Supabase POST {table} failed: {e}") from e

        try:
            data = resp.json()
        except ValueError:
            data = resp.text

        if resp.is_error:
            logger.error("sink_insert_failed", table=table, status=resp.status_code)
            raise SinkError(
                f"Supabase POST {table} failed: {data}",
                status_code=resp.status_code,
                response=data,
            )

        logger.info("sink_insert_ok", table=table, rows=len(rows) if isinstance(rows, list) else 1)
        return data

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> SupabaseSink:
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()
