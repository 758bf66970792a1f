"""Authenticated passthrough to the Escrow.com customer and transaction API."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, Header, Query, Request
from starlette.status import HTTP_200_OK, HTTP_201_CREATED

from vibes_api.core.security import require_requester
from vibes_api.integrations.escrow import EscrowClient, get_escrow_client
from vibes_api.schemas.generic import Envelope, ErrorEnvelope

AS_CUSTOMER_KEY = "asCustomer"

router = APIRouter(
    prefix="/integrations/escrow",
    tags=["escrow"],
    dependencies=[Depends(require_requester)],
    responses={
        401: {"model": ErrorEnvelope},
        500: {"model": ErrorEnvelope},
    },
)


def _split_body(payload: dict[str, Any]) -> tuple[str | None, dict[str, Any]]:
    """Separate the ``asCustomer`` impersonation key from the forwarded body."""
    body = dict(payload)
    as_customer = body.pop(AS_CUSTOMER_KEY, None)
    return as_customer, body


def _envelope(data: Any, message: str, status_code: int = HTTP_200_OK) -> dict:
    return {"status": status_code, "message": message, "data": data}


# --- Customers ---


@router.post("/customers", response_model=Envelope[Any], status_code=HTTP_201_CREATED)
async def create_escrow_customer(
    payload: dict[str, Any] = Body(...),
    idempotency_key: str | None = Header(default=None, alias="Idempotency-Key"),
    escrow: EscrowClient = Depends(get_escrow_client),
) -> dict:
    as_customer, body = _split_body(payload)
    data = await escrow.request(
        "POST",
        "/customer",
        json=body,
        as_customer=as_customer,
        idempotency_key=idempotency_key,
    )
    return _envelope(data, "Escrow customer created successfully", HTTP_201_CREATED)


@router.get("/customers", response_model=Envelope[Any])
async def list_escrow_customers(
    as_customer: str | None = Query(default=None, alias=AS_CUSTOMER_KEY),
    idempotency_key: str | None = Header(default=None, alias="Idempotency-Key"),
    escrow: EscrowClient = Depends(get_escrow_client),
) -> dict:
    data = await escrow.request(
        "GET", "/customer", as_customer=as_customer, idempotency_key=idempotency_key
    )
    return _envelope(data, "Escrow customers retrieved successfully")


@router.get("/customers/me", response_model=Envelope[Any])
async def get_escrow_customer_profile(
    as_customer: str | None = Query(default=None, alias=AS_CUSTOMER_KEY),
    idempotency_key: str | None = Header(default=None, alias="Idempotency-Key"),
    escrow: EscrowClient = Depends(get_escrow_client),
) -> dict:
    data = await escrow.request(
        "GET", "/customer/me", as_customer=as_customer, idempotency_key=idempotency_key
    )
    return _envelope(data, "Escrow customer profile retrieved successfully")


@router.get("/customers/{customer_id}", response_model=Envelope[Any])
async def get_escrow_customer(
    customer_id: str,
    as_customer: str | None = Query(default=None, alias=AS_CUSTOMER_KEY),
    idempotency_key: str | None = Header(default=None, alias="Idempotency-Key"),
    escrow: EscrowClient = Depends(get_escrow_client),
) -> dict:
    data = await escrow.request(
        "GET",
        f"/customer/{customer_id}",
        as_customer=as_customer,
        idempotency_key=idempotency_key,
    )
    return _envelope(data, "Escrow customer retrieved successfully")


@router.patch("/customers/{customer_id}", response_model=Envelope[Any])
async def update_escrow_customer(
    customer_id: str,
    payload: dict[str, Any] = Body(...),
    idempotency_key: str | None = Header(default=None, alias="Idempotency-Key"),
    escrow: EscrowClient = Depends(get_escrow_client),
) -> dict:
    as_customer, body = _split_body(payload)
    data = await escrow.request(
        "PATCH",
        f"/customer/{customer_id}",
        json=body,
        as_customer=as_customer,
        idempotency_key=idempotency_key,
    )
    return _envelope(data, "Escrow customer updated successfully")


# --- Transactions ---


@router.post("/transactions", response_model=Envelope[Any], status_code=HTTP_201_CREATED)
async def create_escrow_transaction(
    payload: dict[str, Any] = Body(...),
    idempotency_key: str | None = Header(default=None, alias="Idempotency-Key"),
    escrow: EscrowClient = Depends(get_escrow_client),
) -> dict:
    as_customer, body = _split_body(payload)
    data = await escrow.request(
        "POST",
        "/transaction",
        json=body,
        as_customer=as_customer,
        idempotency_key=idempotency_key,
    )
    return _envelope(data, "Escrow transaction created successfully", HTTP_201_CREATED)


@router.get("/transactions", response_model=Envelope[Any])
async def list_escrow_transactions(
    request: Request,
    idempotency_key: str | None = Header(default=None, alias="Idempotency-Key"),
    escrow: EscrowClient = Depends(get_escrow_client),
) -> dict:
    # Every query parameter except the impersonation key is forwarded as-is.
    params = dict(request.query_params)
    as_customer = params.pop(AS_CUSTOMER_KEY, None)
    data = await escrow.request(
        "GET",
        "/transaction",
        params=params or None,
        as_customer=as_customer,
        idempotency_key=idempotency_key,
    )
    return _envelope(data, "Escrow transactions retrieved successfully")


@router.get("/transactions/{transaction_id}", response_model=Envelope[Any])
async def get_escrow_transaction(
    transaction_id: str,
    as_customer: str | None = Query(default=None, alias=AS_CUSTOMER_KEY),
    idempotency_key: str | None = Header(default=None, alias="Idempotency-Key"),
    escrow: EscrowClient = Depends(get_escrow_client),
) -> dict:
    data = await escrow.request(
        "GET",
        f"/transaction/{transaction_id}",
        as_customer=as_customer,
        idempotency_key=idempotency_key,
    )
    return _envelope(data, "Escrow transaction retrieved successfully")


@router.patch("/transactions/{transaction_id}", response_model=Envelope[Any])
async def update_escrow_transaction(
    transaction_id: str,
    payload: dict[str, Any] = Body(...),
    idempotency_key: str | None = Header(default=None, alias="Idempotency-Key"),
    escrow: EscrowClient = Depends(get_escrow_client),
) -> dict:
    as_customer, body = _split_body(payload)
    data = await escrow.request(
        "PATCH",
        f"/transaction/{transaction_id}",
        json=body,
        as_customer=as_customer,
        idempotency_key=idempotency_key,
    )
    return _envelope(data, "Escrow transaction updated successfully")


@router.post("/transactions/{transaction_id}/action", response_model=Envelope[Any])
async def perform_escrow_transaction_action(
    transaction_id: str,
    payload: dict[str, Any] = Body(...),
    idempotency_key: str | None = Header(default=None, alias="Idempotency-Key"),
    escrow: EscrowClient = Depends(get_escrow_client),
) -> dict:
    """Run a lifecycle action (agree, ship, receive, accept, ...) on a transaction."""
    as_customer, body = _split_body(payload)
    data = await escrow.request(
        "POST",
        f"/transaction/{transaction_id}/action",
        json=body,
        as_customer=as_customer,
        idempotency_key=idempotency_key,
    )
    return _envelope(data, "Escrow transaction action performed successfully")


@router.post("/transactions/{transaction_id}/message", response_model=Envelope[Any])
async def send_escrow_transaction_message(
    transaction_id: str,
    payload: dict[str, Any] = Body(...),
    idempotency_key: str | None = Header(default=None, alias="Idempotency-Key"),
    escrow: EscrowClient = Depends(get_escrow_client),
) -> dict:
    as_customer, body = _split_body(payload)
    data = await escrow.request(
        "POST",
        f"/transaction/{transaction_id}/message",
        json=body,
        as_customer=as_customer,
        idempotency_key=idempotency_key,
    )
    return _envelope(data, "Escrow transaction message sent successfully")


@router.get("/test-connection", response_model=Envelope[Any])
async def test_escrow_connection(
    idempotency_key: str | None = Header(default=None, alias="Idempotency-Key"),
    escrow: EscrowClient = Depends(get_escrow_client),
) -> dict:
    data = await escrow.request("GET", "/customer/me", idempotency_key=idempotency_key)
    return _envelope(data, "Escrow API connection successful")
