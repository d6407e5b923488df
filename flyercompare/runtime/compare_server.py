"""FastAPI service exposing the deal comparison engine.

Every request carries its own catalog, picks and basket; the service keeps no
state between requests, so one process can serve many shoppers.
"""

from collections.abc import Mapping
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from flyercompare.compare.grouping import build_comparison_groups
from flyercompare.compare.ingest import deal_from_record, deals_from_records
from flyercompare.compare.search import search_deals, selected_total
from flyercompare.domain.session import ShoppingSession
from flyercompare.runtime.logging import get_logger
from flyercompare.runtime.settings import load_settings
from flyercompare.util.money import format_money

logger = get_logger(__name__)

app = FastAPI(title="Flyer Deal Compare")


def _bad_request(message: str) -> JSONResponse:
    return JSONResponse({"status": "error", "message": message}, status_code=400)


async def _read_payload(request: Request) -> dict[str, Any] | None:
    try:
        payload = await request.json()
    except ValueError:
        return None
    return payload if isinstance(payload, dict) else None


_LIST_FIELDS = ("catalog", "picks", "basket")


def _invalid_list_field(payload: Mapping[str, Any]) -> str | None:
    """Name of the first list field holding something other than a JSON array."""
    for name in _LIST_FIELDS:
        value = payload.get(name)
        if value is not None and not isinstance(value, list):
            return name
    return None


def _session_from_payload(payload: Mapping[str, Any]) -> ShoppingSession:
    session = ShoppingSession()
    for row in payload.get("picks") or []:
        if isinstance(row, Mapping):
            deal = deal_from_record(row)
            session.picks.pick(deal, row.get("selected_store") or deal.store)
    for row in payload.get("basket") or []:
        if isinstance(row, Mapping):
            deal = deal_from_record(row)
            session.basket.toggle(deal, row.get("selected_store") or deal.store)
    if payload.get("budget") is not None and not session.budget.set_budget(payload["budget"]):
        logger.info("Rejected budget value %r", payload["budget"])
    return session


@app.post("/compare")
async def compare(request: Request) -> JSONResponse:
    """Group the request's catalog around its picks and report basket totals."""
    payload = await _read_payload(request)
    if payload is None:
        return _bad_request("Request body must be a JSON object")

    invalid = _invalid_list_field(payload)
    if invalid is not None:
        return _bad_request(f"Field '{invalid}' must be a list")

    settings = load_settings()
    catalog = deals_from_records(payload.get("catalog") or [])
    session = _session_from_payload(payload)
    groups = build_comparison_groups(
        session.picks.items,
        catalog,
        extra_items_allowed=settings.extra_items_allowed,
        sentinel=settings.unparsed_price_sentinel,
    )
    logger.debug("Built %d groups from %d deals", len(groups), len(catalog))

    remaining = session.remaining
    budget = session.budget.budget
    return JSONResponse(
        {
            "status": "success",
            "groups": [group.to_dict() for group in groups],
            "basket_total": format_money(session.spent),
            "budget": format_money(budget) if budget is not None else None,
            "remaining": f"{remaining:.2f}" if remaining is not None else None,
        }
    )


@app.post("/search")
async def search(request: Request) -> JSONResponse:
    """Free-text search over the request's catalog."""
    payload = await _read_payload(request)
    if payload is None:
        return _bad_request("Request body must be a JSON object")

    query = payload.get("query")
    if not isinstance(query, str):
        return _bad_request("Missing search query")

    mode = payload.get("mode")
    if mode is not None and not isinstance(mode, str):
        return _bad_request("Field 'mode' must be a string")
    invalid = _invalid_list_field(payload)
    if invalid is not None:
        return _bad_request(f"Field '{invalid}' must be a list")

    settings = load_settings()
    catalog = deals_from_records(payload.get("catalog") or [])
    session = _session_from_payload(payload)
    results = search_deals(catalog, query, mode=mode, sentinel=settings.unparsed_price_sentinel)
    return JSONResponse(
        {
            "status": "success",
            "results": [deal.to_dict() for deal in results],
            "selected_count": sum(1 for deal in results if session.basket.is_in_basket(deal)),
            "selected_total": format_money(selected_total(results, session.basket)),
        }
    )


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
