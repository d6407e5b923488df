"""Tests for the comparison HTTP service."""

import pytest
from fastapi.testclient import TestClient

from flyercompare.runtime.compare_server import app

CATALOG = [
    {"id": 1, "item": "Rice", "price": "$50", "store": "A"},
    {"id": 2, "item": "Rice", "price": "$45", "store": "B"},
    {"id": 3, "item": ["Rice", "Oil"], "price": "$80", "store": "C"},
]


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


def test_health(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_compare_groups_and_budget(client: TestClient) -> None:
    response = client.post(
        "/compare",
        json={"catalog": CATALOG, "picks": [CATALOG[0]], "basket": [CATALOG[1]], "budget": 100},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "success"
    assert len(body["groups"]) == 1
    group = body["groups"][0]
    assert group["display_name"] == "Rice"
    assert [deal["id"] for deal in group["deals"]] == [2, 1]
    assert group["cheapest_deal_id"] == 2
    assert group["deals"][0]["amount"] == "45.00"
    assert body["basket_total"] == "45.00"
    assert body["budget"] == "100.00"
    assert body["remaining"] == "55.00"


def test_compare_rejected_budget_leaves_none(client: TestClient) -> None:
    response = client.post("/compare", json={"catalog": CATALOG, "picks": [CATALOG[0]], "budget": "abc"})
    body = response.json()
    assert body["budget"] is None
    assert body["remaining"] is None
    assert body["basket_total"] == "0.00"


def test_compare_rejects_non_object_body(client: TestClient) -> None:
    assert client.post("/compare", json=[1, 2]).status_code == 400
    assert client.post("/compare", content="not json").status_code == 400


def test_search_reports_selected_total(client: TestClient) -> None:
    response = client.post("/search", json={"query": "rice", "catalog": CATALOG, "basket": [CATALOG[0]]})

    assert response.status_code == 200
    body = response.json()
    assert [deal["id"] for deal in body["results"]] == [2, 1, 3]
    assert body["selected_count"] == 1
    assert body["selected_total"] == "50.00"


def test_search_requires_query(client: TestClient) -> None:
    response = client.post("/search", json={"catalog": CATALOG})
    assert response.status_code == 400
    assert response.json()["message"] == "Missing search query"


@pytest.mark.parametrize(
    ("path", "body", "message"),
    [
        ("/search", {"query": "rice", "catalog": CATALOG, "mode": 5}, "Field 'mode' must be a string"),
        ("/search", {"query": "rice", "catalog": {"id": 1}}, "Field 'catalog' must be a list"),
        ("/search", {"query": "rice", "catalog": CATALOG, "basket": "1"}, "Field 'basket' must be a list"),
        ("/compare", {"catalog": CATALOG, "picks": {"id": 1}}, "Field 'picks' must be a list"),
        ("/compare", {"catalog": CATALOG, "picks": [CATALOG[0]], "basket": 3}, "Field 'basket' must be a list"),
    ],
)
def test_malformed_fields_are_rejected(client: TestClient, path: str, body: dict, message: str) -> None:
    response = client.post(path, json=body)
    assert response.status_code == 400
    assert response.json()["message"] == message


def test_compare_tolerates_oversized_prices(client: TestClient) -> None:
    catalog = [*CATALOG, {"id": 4, "item": "Rice", "price": "9" * 40, "store": "D"}]
    response = client.post("/compare", json={"catalog": catalog, "picks": [CATALOG[0]]})

    assert response.status_code == 200
    assert [deal["id"] for deal in response.json()["groups"][0]["deals"]] == [2, 1, 4]
