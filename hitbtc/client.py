"""
Asynchronous HitBTC REST client.

``Client`` exposes the public market-data endpoints. ``Client.login`` returns
an ``AuthenticatedClient`` that signs every request with HTTP Basic auth;
``AuthenticatedClient.logout`` hands back the original public client. Both
share one ``httpx.AsyncClient``, so copies are cheap and safe to use
concurrently.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, Literal, Optional, TypeVar, Union
from urllib.parse import quote
from uuid import UUID

import httpx
from pydantic import TypeAdapter, ValidationError

from hitbtc.base_client import Credentials
from hitbtc.config import ClientConfig
from hitbtc.errors import (
    HitbtcApiError,
    HitbtcDecodeError,
    HitbtcTransportError,
)
from hitbtc.models import (
    CurrencyInfo,
    DepositAddressInfo,
    Transaction,
    TransferDirection,
    TransferResult,
)
from hitbtc.params import (
    QueryBuilder,
    format_decimal,
    format_enum,
    format_integer,
    format_timestamp,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

CURRENCY_ENDPOINT = "/api/2/public/currency"
DEPOSIT_ADDRESS_ENDPOINT = "/api/2/account/crypto/address"
TRANSACTIONS_ENDPOINT = "/api/v2/account/transactions"
TRANSFER_ENDPOINT = "/api/v2/account/transfer"

_CURRENCY_LIST = TypeAdapter(list[CurrencyInfo])
_DEPOSIT_ADDRESS = TypeAdapter(DepositAddressInfo)
_TRANSACTION_LIST = TypeAdapter(list[Transaction])
# The transfer endpoint answers either {"id": "..."} or a bare UUID string.
_TRANSFER_RESULT = TypeAdapter(Union[TransferResult, UUID])


@dataclass(frozen=True, slots=True)
class Client:
    """Unauthenticated HitBTC client."""

    config: ClientConfig = field(default_factory=ClientConfig)
    http_client: httpx.AsyncClient = field(default=None, repr=False, compare=False)  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if self.http_client is None:
            object.__setattr__(
                self,
                "http_client",
                httpx.AsyncClient(
                    timeout=self.config.timeout,
                    headers={"User-Agent": self.config.user_agent},
                ),
            )

    @classmethod
    def from_env(cls) -> "Client":
        return cls(ClientConfig.from_env())

    async def get_currencies(self) -> list[CurrencyInfo]:
        """Return every currency listed on the exchange."""
        return await _execute(self, "GET", CURRENCY_ENDPOINT, _CURRENCY_LIST)

    def login(self, api_key: str, api_secret: str) -> "AuthenticatedClient":
        """
        Attach an API key pair and return an authenticated client.

        No request is made and the strings are not checked; bad credentials
        surface as an ``HitbtcApiError`` on the first private call.
        """
        return AuthenticatedClient(self, Credentials(api_key=api_key, api_secret=api_secret))

    async def aclose(self) -> None:
        """Close the shared transport for this client and every copy of it."""
        await self.http_client.aclose()

    async def __aenter__(self) -> "Client":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()


@dataclass(frozen=True, slots=True)
class AuthenticatedClient:
    """HitBTC client carrying an API key pair applied to every private request."""

    public: Client
    credentials: Credentials

    @classmethod
    def from_env(cls) -> "AuthenticatedClient":
        return cls(Client.from_env(), Credentials.from_env())

    @property
    def config(self) -> ClientConfig:
        return self.public.config

    def logout(self) -> Client:
        """Drop the credentials and return the embedded public client."""
        return self.public

    # ------------------------------------------------------------------
    # Public endpoints
    # ------------------------------------------------------------------
    async def get_currencies(self) -> list[CurrencyInfo]:
        return await self.public.get_currencies()

    # ------------------------------------------------------------------
    # Private endpoints
    # ------------------------------------------------------------------
    async def get_deposit_address(self, currency: str) -> DepositAddressInfo:
        path = f"{DEPOSIT_ADDRESS_ENDPOINT}/{quote(currency, safe='')}"
        return await self._request("POST", path, _DEPOSIT_ADDRESS)

    async def get_transactions_history(
        self,
        transaction_id: Optional[str] = None,
        from_: Optional[datetime] = None,
        till: Optional[datetime] = None,
        limit: Optional[int] = None,
    ) -> list[Transaction]:
        """
        Fetch the account transaction history.

        Args:
            transaction_id: Restrict the result to a single transaction.
            from_: Only transactions created at or after this moment.
            till: Only transactions created at or before this moment.
            limit: Maximum number of records to return.
        """
        path = TRANSACTIONS_ENDPOINT
        if transaction_id is not None:
            path = f"{path}/{quote(transaction_id, safe='')}"
        params = (
            QueryBuilder()
            .add("from", from_, format_timestamp)
            .add("till", till, format_timestamp)
            .add("limit", limit, format_integer)
            .build()
        )
        return await self._request("GET", path, _TRANSACTION_LIST, params)

    async def transfer_account_money(
        self,
        currency: str,
        amount: Decimal,
        direction: TransferDirection,
    ) -> UUID:
        """Move funds between the bank and exchange accounts; returns the transaction id."""
        params = (
            QueryBuilder()
            .require("currency", currency)
            .require("amount", amount, format_decimal)
            .require("type", direction, format_enum)
            .build()
        )
        result = await self._request("POST", TRANSFER_ENDPOINT, _TRANSFER_RESULT, params)
        if isinstance(result, TransferResult):
            return result.id
        return result

    async def aclose(self) -> None:
        await self.public.aclose()

    async def __aenter__(self) -> "AuthenticatedClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def _request(
        self,
        method: Literal["GET", "POST"],
        path: str,
        adapter: TypeAdapter[T],
        params: Optional[Dict[str, str]] = None,
    ) -> T:
        return await _execute(self.public, method, path, adapter, params, self.credentials)


async def _execute(
    client: Client,
    method: Literal["GET", "POST"],
    path: str,
    adapter: TypeAdapter[T],
    params: Optional[Dict[str, str]] = None,
    credentials: Credentials | None = None,
) -> T:
    url = client.config.url_for(path)
    auth = None
    if credentials is not None:
        auth = httpx.BasicAuth(credentials.api_key, credentials.api_secret)

    if client.http_client.is_closed:
        raise HitbtcTransportError(f"HitBTC {method} {path} failed: transport is closed")

    logger.debug("HitBTC %s %s params=%s authenticated=%s", method, url, params or {}, auth is not None)
    try:
        response = await client.http_client.request(method, url, params=params or None, auth=auth)
    except httpx.HTTPError as exc:
        raise HitbtcTransportError(f"HitBTC {method} {path} failed: {exc}", cause=exc) from exc
    logger.debug("HitBTC %s %s -> %s", method, url, response.status_code)

    if not response.is_success:
        payload = _error_payload(response)
        error = HitbtcApiError(
            response.status_code,
            f"HitBTC {method} {path} returned HTTP {response.status_code}",
            payload=payload,
        )
        logger.warning(
            "HitBTC API error on %s %s: status=%s code=%s message=%s",
            method,
            path,
            error.status_code,
            error.code,
            error.message,
        )
        raise error

    try:
        return adapter.validate_json(response.content)
    except ValidationError as exc:
        logger.warning("Failed to decode HitBTC response for %s %s: %s", method, path, exc)
        raise HitbtcDecodeError(
            f"Unexpected response body for {method} {path}",
            body=response.text,
            cause=exc,
        ) from exc


def _error_payload(response: httpx.Response) -> Optional[dict]:
    try:
        payload = response.json()
    except ValueError:
        return None
    return payload if isinstance(payload, dict) else None
