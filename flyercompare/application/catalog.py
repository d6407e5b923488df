"""Catalog refresh workflow orchestration."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from flyercompare.compare.catalog import Catalog
from flyercompare.runtime import get_logger, get_paths, load_settings
from flyercompare.runtime.catalog_client import (
    CatalogClient,
    CatalogUnavailable,
    load_catalog_file,
    save_catalog_file,
)

logger = get_logger(__name__)

CatalogStatus = Literal["ok", "catalog_unavailable", "file_not_found", "invalid_changes"]


@dataclass(frozen=True)
class CatalogFetchRequest:
    """Inputs for bulk-fetching the catalog into the local cache."""

    output_path: Path | None = None
    client: CatalogClient | None = None


@dataclass(frozen=True)
class CatalogSyncResult:
    """Outcome from catalog fetch or change application."""

    status: CatalogStatus
    path: Path | None = None
    deal_count: int = 0
    applied: int = 0
    error: str | None = None


def run_catalog_fetch(request: CatalogFetchRequest) -> CatalogSyncResult:
    """Fetch all deals from the catalog service and write the cache file."""
    output_path = request.output_path or get_paths().catalog_cache_file
    try:
        client = request.client or CatalogClient.from_settings(load_settings())
        deals = client.fetch_deals()
    except CatalogUnavailable as exc:
        return CatalogSyncResult(status="catalog_unavailable", error=str(exc))

    save_catalog_file(output_path, deals)
    logger.info("Cached %d deals to %s", len(deals), output_path)
    return CatalogSyncResult(status="ok", path=output_path, deal_count=len(deals))


@dataclass(frozen=True)
class CatalogChangesRequest:
    """Inputs for replaying realtime change payloads against the cache."""

    changes_path: Path
    catalog_path: Path | None = None


def run_apply_catalog_changes(request: CatalogChangesRequest) -> CatalogSyncResult:
    """Apply a JSON array of insert/update/delete payloads to the cached catalog."""
    catalog_path = request.catalog_path or get_paths().catalog_cache_file
    if not catalog_path.exists():
        return CatalogSyncResult(status="file_not_found", error=f"Catalog not found: {catalog_path}")
    if not request.changes_path.exists():
        return CatalogSyncResult(status="file_not_found", error=f"Changes file not found: {request.changes_path}")

    try:
        changes = json.loads(request.changes_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        return CatalogSyncResult(status="invalid_changes", error=f"Invalid changes file: {exc}")
    if isinstance(changes, dict):
        changes = [changes]
    if not isinstance(changes, list):
        return CatalogSyncResult(status="invalid_changes", error="Changes file must hold a JSON array")

    catalog = Catalog(load_catalog_file(catalog_path))
    applied = 0
    for payload in changes:
        if isinstance(payload, dict) and catalog.apply_change(payload):
            applied += 1
        else:
            logger.debug("Skipped change payload: %r", payload)

    save_catalog_file(catalog_path, catalog.deals)
    logger.info("Applied %d of %d catalog changes", applied, len(changes))
    return CatalogSyncResult(status="ok", path=catalog_path, deal_count=len(catalog), applied=applied)
