"""Thin async client for the Escrow.com REST API.

The client injects the account's basic-auth credentials, forwards the
``As-Customer`` and ``Idempotency-Key`` headers, and turns every upstream
failure into an :class:`~vibes_api.core.errors.UpstreamError` carrying the
upstream status and body.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
from fastapi import Request

from vibes_api.core.config import Settings
from vibes_api.core.errors import UpstreamError

logger = logging.getLogger(__name__)

_STATUS_MESSAGES = {
    401: (
        "Escrow API authentication failed. Please check your "
        "ESCROW_API_EMAIL and ESCROW_API_KEY credentials."
    ),
    403: "Escrow API access forbidden. Please check your API key permissions.",
    404: "Escrow API resource not found.",
}
_VALIDATION_FALLBACK = "Escrow API validation error. Please check your request data."
_DEFAULT_FAILURE = "Escrow API request failed"


def _upstream_message(status_code: int, body: Any) -> str:
    body_message = None
    if isinstance(body, dict):
        body_message = body.get("message") or body.get("error")
    if status_code in _STATUS_MESSAGES:
        return _STATUS_MESSAGES[status_code]
    if status_code == 422:
        return body_message or _VALIDATION_FALLBACK
    return body_message or _DEFAULT_FAILURE


def _decode(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


class EscrowClient:
    """Escrow API adapter.

    Args:
        base_url: API root, e.g. ``https://api.escrow-sandbox.com/2017-09-01``.
        email: Account email used as the basic-auth user.
        api_key: Account API key used as the basic-auth password.
        timeout: Per-request timeout in seconds.
        http_client: Injected client (tests pass one built on ``httpx.MockTransport``).
    """

    def __init__(
        self,
        base_url: str,
        email: str | None,
        api_key: str | None,
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._email = email
        self._api_key = api_key
        self._http_client = http_client or httpx.AsyncClient(timeout=timeout)

    @classmethod
    def from_settings(cls, settings: Settings) -> EscrowClient:
        return cls(
            base_url=settings.escrow_base_url,
            email=settings.escrow_api_email,
            api_key=settings.escrow_api_key,
            timeout=settings.escrow_timeout,
        )

    @property
    def has_credentials(self) -> bool:
        return bool(self._email and self._api_key)

    async def request(
        self,
        method: str,
        path: str,
        json: Any = None,
        params: dict[str, Any] | None = None,
        as_customer: str | None = None,
        idempotency_key: str | None = None,
    ) -> Any:
        """Send one request and return the decoded JSON body.

        Raises:
            UpstreamError: Credentials are missing, the transport failed, or
                the API answered with a non-2xx status.
        """
        if not self.has_credentials:
            raise UpstreamError("Escrow API credentials are not configured", status_code=500)

        headers = {"Accept": "application/json", "Content-Type": "application/json"}
        if as_customer:
            headers["As-Customer"] = as_customer
        if idempotency_key:
            headers["Idempotency-Key"] = idempotency_key

        url = f"{self._base_url}/{path.lstrip('/')}"
        try:
            response = await self._http_client.request(
                method,
                url,
                json=json,
                params=params,
                headers=headers,
                auth=httpx.BasicAuth(self._email, self._api_key),
            )
        except httpx.HTTPError as exc:
            logger.error("Escrow API %s %s transport failure: %s", method, path, exc)
            raise UpstreamError(_DEFAULT_FAILURE, status_code=500) from None

        body = _decode(response)
        if response.is_success:
            return body

        message = _upstream_message(response.status_code, body)
        logger.error(
            "Escrow API error: %s %s -> %s %s", method, path, response.status_code, message
        )
        raise UpstreamError(message, status_code=response.status_code, details=body)

    async def aclose(self) -> None:
        await self._http_client.aclose()


def get_escrow_client(request: Request) -> EscrowClient:
    """Return the escrow client created during lifespan startup."""
    return request.app.state.escrow_client
