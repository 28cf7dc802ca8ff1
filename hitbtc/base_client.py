"""
Capability interfaces for the HitBTC client.

``PublicApi`` covers unauthenticated market data; ``PrivateApi`` extends it
with the account endpoints that require an API key pair.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Optional, Protocol, runtime_checkable
from uuid import UUID

if TYPE_CHECKING:
    from hitbtc.models import CurrencyInfo, DepositAddressInfo, Transaction, TransferDirection


@dataclass(frozen=True, slots=True)
class Credentials:
    """Typed container for HitBTC API key authentication data."""

    api_key: str
    api_secret: str = field(repr=False)

    @staticmethod
    def from_env() -> "Credentials":
        api_key = os.getenv("HITBTC_API_KEY")
        api_secret = os.getenv("HITBTC_API_SECRET")
        if not api_key or not api_secret:
            raise ValueError("HITBTC_API_KEY and HITBTC_API_SECRET must both be set")
        return Credentials(api_key=api_key, api_secret=api_secret)


@runtime_checkable
class PublicApi(Protocol):
    """Operations available without credentials."""

    async def get_currencies(self) -> list["CurrencyInfo"]:
        """Return every currency listed on the exchange."""


@runtime_checkable
class PrivateApi(PublicApi, Protocol):
    """Operations that require an authenticated client."""

    async def get_deposit_address(self, currency: str) -> "DepositAddressInfo":
        """Return the deposit address for ``currency``."""

    async def get_transactions_history(
        self,
        transaction_id: Optional[str] = None,
        from_: Optional[datetime] = None,
        till: Optional[datetime] = None,
        limit: Optional[int] = None,
    ) -> list["Transaction"]:
        """Return account transactions, optionally filtered."""

    async def transfer_account_money(
        self,
        currency: str,
        amount: Decimal,
        direction: "TransferDirection",
    ) -> UUID:
        """Move funds between the bank and exchange accounts."""
