"""Shared payloads and a stub of the remote API."""

from typing import Any
from urllib.parse import parse_qsl

import pytest
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.testclient import TestClient


BANK_ACCOUNT = {
    "id": "ba_1",
    "object": "bank_account",
    "bank_name": "STRIPE TEST BANK",
    "country": "US",
    "currency": "usd",
    "last4": "6789",
    "routing_number": "110000000",
    "status": "new",
}

CARD = {
    "id": "card_1",
    "object": "card",
    "brand": "Visa",
    "exp_month": 8,
    "exp_year": 2030,
    "funding": "debit",
    "last4": "4242",
}

BALANCE_TRANSACTION = {
    "id": "txn_1",
    "object": "balance_transaction",
    "amount": -1000,
    "currency": "usd",
    "fee": 0,
    "net": -1000,
    "status": "pending",
    "type": "payout",
}


def payout_payload(**overrides: Any) -> dict[str, Any]:
    payload = {
        "id": "po_1",
        "object": "payout",
        "amount": 1000,
        "arrival_date": 1500000000,
        "automatic": True,
        "balance_transaction": "txn_1",
        "created": 1499900000,
        "currency": "usd",
        "destination": "ba_1",
        "failure_balance_transaction": None,
        "failure_code": None,
        "failure_message": None,
        "livemode": False,
        "metadata": {"order_id": "6735"},
        "method": "standard",
        "source_type": "card",
        "statement_descriptor": None,
        "status": "in_transit",
        "type": "bank_account",
    }
    payload.update(overrides)
    return payload


def source_payload(**overrides: Any) -> dict[str, Any]:
    payload = {
        "id": "src_1",
        "object": "source",
        "amount": None,
        "client_secret": "src_client_secret_1",
        "created": 1500000000,
        "currency": "eur",
        "flow": "none",
        "livemode": False,
        "metadata": {},
        "owner": {"email": "jenny@example.com", "name": "Jenny Rosen"},
        "status": "chargeable",
        "type": "card",
        "card": {"brand": "Visa", "country": "US", "last4": "4242", "three_d_secure": "optional"},
        "sepa_debit": {"iban_last4": "3000"},
        "usage": "reusable",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def bank_account() -> dict[str, Any]:
    return dict(BANK_ACCOUNT)


@pytest.fixture
def card() -> dict[str, Any]:
    return dict(CARD)


@pytest.fixture
def balance_transaction() -> dict[str, Any]:
    return dict(BALANCE_TRANSACTION)


@pytest.fixture
def payout() -> dict[str, Any]:
    return payout_payload()


@pytest.fixture
def source() -> dict[str, Any]:
    return source_payload()


def _error(status_code: int, error_type: str, message: str, **fields: Any) -> JSONResponse:
    return JSONResponse(
        {"error": {"type": error_type, "message": message, **fields}},
        status_code=status_code,
    )


def _expand_fields(pairs: list[tuple[str, str]]) -> set[str]:
    return {value for key, value in pairs if key.startswith("expand[")}


def create_stub_app() -> FastAPI:
    """Minimal stand-in for the payouts and sources endpoints."""
    app = FastAPI()
    payouts = {"po_1": payout_payload(), "po_2": payout_payload(id="po_2", destination="card_1")}
    expandable = {
        "ba_1": BANK_ACCOUNT,
        "card_1": CARD,
        "txn_1": BALANCE_TRANSACTION,
    }

    def expand(payload: dict[str, Any], fields: set[str]) -> dict[str, Any]:
        expanded = dict(payload)
        for field in fields:
            value = expanded.get(field)
            if isinstance(value, str) and value in expandable:
                expanded[field] = expandable[value]
        return expanded

    @app.middleware("http")
    async def require_api_key(request: Request, call_next):
        if not request.headers.get("authorization", "").startswith("Bearer sk_test_"):
            return _error(401, "authentication_error", "Invalid API Key provided.")
        return await call_next(request)

    @app.get("/v1/payouts")
    async def list_payouts(request: Request):
        pairs = list(request.query_params.multi_items())
        fields = _expand_fields(pairs)
        params = dict(pairs)
        data = [expand(item, {f[len("data."):] for f in fields if f.startswith("data.")}) for item in payouts.values()]
        if "limit" in params:
            data = data[: int(params["limit"])]
        return {
            "object": "list",
            "url": "/v1/payouts",
            "has_more": len(data) < len(payouts),
            "data": data,
        }

    @app.get("/v1/payouts/{payout_id}")
    async def retrieve_payout(payout_id: str, request: Request):
        if payout_id not in payouts:
            return _error(
                404,
                "invalid_request_error",
                f"No such payout: {payout_id}",
                param="id",
                request_id="req_404",
            )
        fields = _expand_fields(list(request.query_params.multi_items()))
        return expand(payouts[payout_id], fields)

    @app.post("/v1/payouts")
    async def create_payout(request: Request):
        form = dict(parse_qsl((await request.body()).decode()))
        if "amount" not in form:
            return _error(400, "invalid_request_error", "Missing required param: amount.", param="amount")
        metadata = {
            key[len("metadata[") : -1]: value
            for key, value in form.items()
            if key.startswith("metadata[")
        }
        return payout_payload(
            id="po_new",
            amount=int(form["amount"]),
            currency=form.get("currency", "usd"),
            destination=form.get("destination", "ba_1"),
            metadata=metadata,
            status="pending",
        )

    @app.post("/v1/sources")
    async def create_source(request: Request):
        form = dict(parse_qsl((await request.body()).decode()))
        source_type = form.get("type", "")
        type_data = {
            key[len(source_type) + 1 : -1]: value
            for key, value in form.items()
            if source_type and key.startswith(f"{source_type}[")
        }
        return source_payload(
            id="src_new",
            type=source_type,
            **{source_type: type_data},
        )

    @app.get("/v1/rate_limited")
    async def rate_limited():
        return _error(429, "rate_limit_error", "Too many requests hit the API too quickly.")

    @app.get("/v1/broken")
    async def broken():
        return PlainTextResponse("upstream exploded", status_code=502)

    return app


@pytest.fixture
def api_client() -> TestClient:
    client = TestClient(create_stub_app())
    client.headers["Authorization"] = "Bearer sk_test_123"
    return client
