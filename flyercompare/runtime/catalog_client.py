"""Fetch the flyer deal catalog from the hosted catalog service."""

from __future__ import annotations

import json
import time
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import httpx

from flyercompare.compare.ingest import deals_from_records
from flyercompare.domain.deal import Deal
from flyercompare.runtime.logging import get_logger
from flyercompare.runtime.settings import CompareSettings

logger = get_logger(__name__)


class CatalogUnavailable(RuntimeError):
    """Raised when the catalog service cannot be reached or returns an error."""


class CatalogClient:
    """Thin REST client for the ``flyer_items`` table."""

    def __init__(
        self,
        base_url: str,
        table: str = "flyer_items",
        api_key: str | None = None,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.table = table
        self.api_key = api_key
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: CompareSettings) -> CatalogClient:
        if not settings.catalog_url:
            raise CatalogUnavailable(
                "Catalog URL not configured (set FLYERCOMPARE_CATALOG_URL or [catalog].url)"
            )
        return cls(
            base_url=settings.catalog_url,
            table=settings.catalog_table,
            api_key=settings.catalog_api_key,
            timeout=settings.catalog_timeout,
        )

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["apikey"] = self.api_key
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    def fetch_rows(self) -> list[dict[str, Any]]:
        """Bulk-fetch raw catalog rows, newest first."""
        url = f"{self.base_url}/rest/v1/{self.table}"
        logger.info("Fetching deal catalog from %s...", url)

        try:
            start_time = time.time()
            with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
                response = client.get(
                    url,
                    params={"select": "*", "order": "created_at.desc"},
                    headers=self._headers(),
                )
            elapsed_time = time.time() - start_time
            logger.info("Catalog service returned in %.2f seconds", elapsed_time)
        except httpx.RequestError as e:
            logger.error("Failed to connect to catalog service: %s", e)
            raise CatalogUnavailable(f"Failed to connect to catalog service: {e}") from e

        if response.status_code != 200:
            logger.error("Catalog service error: %s", response.status_code)
            raise CatalogUnavailable(f"Catalog service error: {response.status_code}")

        try:
            rows = response.json()
        except ValueError as e:
            raise CatalogUnavailable(f"Catalog service returned invalid JSON: {e}") from e
        if not isinstance(rows, list):
            raise CatalogUnavailable("Catalog service returned an unexpected payload")
        return rows

    def fetch_deals(self) -> list[Deal]:
        deals = deals_from_records(self.fetch_rows())
        logger.info("Fetched %d deals", len(deals))
        return deals


def load_catalog_file(path: Path) -> list[Deal]:
    """Load a catalog JSON array (cache file or export)."""
    rows = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(rows, dict):
        rows = rows.get("deals", [])
    if not isinstance(rows, list):
        logger.warning("Catalog file %s holds no deal list", path)
        return []
    deals = deals_from_records(rows)
    logger.debug("Loaded %d deals from %s", len(deals), path)
    return deals


def save_catalog_file(path: Path, deals: Sequence[Deal]) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps([deal.to_dict() for deal in deals], indent=2), encoding="utf-8")
    logger.debug("Catalog saved to: %s", path)
    return path
