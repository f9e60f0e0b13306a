"""Configuration for the registry source and the persistence sink.

Configuration is explicit: collaborators receive these objects at
construction. Extraction and scoring never read the environment.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

DEFAULT_BASE_URL = "https://www.canecorsopedigree.com"
DEFAULT_SOURCE_NAME = "canecorsopedigree.com"
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


@dataclass
class RegistryConfig:
    """Configuration for the pedigree registry website."""

    base_url: str = DEFAULT_BASE_URL
    source_name: str = DEFAULT_SOURCE_NAME
    timeout: float = 30.0
    user_agent: str = DEFAULT_USER_AGENT

    @property
    def search_url(self) -> str:
        return f"{self.base_url}/search_dog_results"

    def profile_url(self, dog_id: str) -> str:
        return f"{self.base_url}/view_dog?id={dog_id}"


@dataclass
class SinkConfig:
    """Configuration for the REST document store (Supabase PostgREST)."""

    url: str
    service_key: str
    verification_source: str = DEFAULT_SOURCE_NAME
    timeout: float = 30.0

    @property
    def rest_url(self) -> str:
        return f"{self.url.rstrip('/')}/rest/v1"


@dataclass
class AppConfig:
    """Settings resolved from the environment for the CLI."""

    registry: RegistryConfig = field(default_factory=RegistryConfig)
    supabase_url: str | None = None
    supabase_key: str | None = None

    def sink_config(self) -> SinkConfig:
        """Build the sink configuration.

        Raises:
            ValueError: If the Supabase URL or key is not set.
        """
        if not self.supabase_url or not self.supabase_key:
            raise ValueError(
                "SUPABASE_URL and SUPABASE_SERVICE_KEY must be set to save verifications. "
                "Please set them in the environment or a .env file."
            )
        return SinkConfig(
            url=self.supabase_url,
            service_key=self.supabase_key,
            verification_source=self.registry.source_name,
        )


def load_config() -> AppConfig:
    """Load configuration from .env and the environment.

    Raises:
        ValueError: If PEDIGREE_TIMEOUT is not a number of seconds.
    """
    load_dotenv()

    raw_timeout = os.getenv("PEDIGREE_TIMEOUT", "30")
    try:
        timeout = float(raw_timeout)
    except ValueError:
        raise ValueError(f"PEDIGREE_TIMEOUT must be a number of seconds, got {raw_timeout!r}") from None

    registry = RegistryConfig(
        base_url=os.getenv("PEDIGREE_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
        timeout=timeout,
    )
    return AppConfig(
        registry=registry,
        supabase_url=os.getenv("SUPABASE_URL") or os.getenv("REACT_APP_SUPABASE_URL"),
        supabase_key=os.getenv("SUPABASE_SERVICE_KEY") or os.getenv("REACT_APP_SUPABASE_ANON_KEY"),
    )
