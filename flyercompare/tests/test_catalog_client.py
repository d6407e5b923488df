"""Tests for the catalog REST client."""

import json
from pathlib import Path

import httpx
import pytest

from flyercompare.runtime.catalog_client import (
    CatalogClient,
    CatalogUnavailable,
    load_catalog_file,
    save_catalog_file,
)
from flyercompare.runtime.settings import CompareSettings

ROWS = [
    {"id": 2, "item": ["Bread", "Milk"], "price": "25", "store": "B", "type": "combo"},
    {"id": 1, "item": "Rice", "price": "45", "store": "A"},
    {"item": "no id"},
]


def _client(handler) -> CatalogClient:
    return CatalogClient(
        base_url="https://catalog.example/",
        api_key="secret",
        transport=httpx.MockTransport(handler),
    )


def test_fetch_deals_sends_query_and_headers() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=ROWS)

    deals = _client(handler).fetch_deals()

    assert [deal.id for deal in deals] == [2, 1]
    request = seen[0]
    assert request.url.path == "/rest/v1/flyer_items"
    assert request.url.params["select"] == "*"
    assert request.url.params["order"] == "created_at.desc"
    assert request.headers["apikey"] == "secret"
    assert request.headers["Authorization"] == "Bearer secret"


def test_non_200_raises() -> None:
    client = _client(lambda request: httpx.Response(503, text="down"))
    with pytest.raises(CatalogUnavailable, match="503"):
        client.fetch_rows()


def test_connection_error_is_wrapped() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(CatalogUnavailable, match="Failed to connect") as excinfo:
        _client(handler).fetch_rows()
    assert isinstance(excinfo.value.__cause__, httpx.ConnectError)


def test_unexpected_payload_raises() -> None:
    client = _client(lambda request: httpx.Response(200, json={"rows": []}))
    with pytest.raises(CatalogUnavailable, match="unexpected payload"):
        client.fetch_rows()


def test_from_settings_requires_url() -> None:
    with pytest.raises(CatalogUnavailable, match="not configured"):
        CatalogClient.from_settings(CompareSettings())

    client = CatalogClient.from_settings(CompareSettings(catalog_url="https://x.example", catalog_table="deals"))
    assert client.base_url == "https://x.example"
    assert client.table == "deals"


def test_catalog_file_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "data" / "catalog.json"
    client = _client(lambda request: httpx.Response(200, json=ROWS))
    save_catalog_file(path, client.fetch_deals())

    deals = load_catalog_file(path)
    assert [deal.display_name for deal in deals] == ["Bread + Milk", "Rice"]
    assert deals[0].is_combo


def test_load_catalog_file_accepts_wrapped_export(tmp_path: Path) -> None:
    path = tmp_path / "export.json"
    path.write_text(json.dumps({"deals": ROWS}), encoding="utf-8")
    assert len(load_catalog_file(path)) == 2
