"""
Response and request schemas for the HitBTC REST API.

Field names are transmitted in camelCase; the models expose snake_case
attributes. Unknown fields are ignored, missing required fields fail
validation.
"""

from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Optional
from uuid import UUID

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _WireEnum(str, Enum):
    """Enum whose members decode from their wire value in any casing."""

    @classmethod
    def _missing_(cls, value: object):
        if isinstance(value, str):
            lowered = value.lower()
            for member in cls:
                if member.value.lower() == lowered:
                    return member
        return None

    def __str__(self) -> str:
        return self.value


class TransactionStatus(_WireEnum):
    PENDING = "pending"
    FAILED = "failed"
    SUCCESS = "success"


class TransactionType(_WireEnum):
    PAYOUT = "payout"
    PAYIN = "payin"
    DEPOSIT = "deposit"
    WITHDRAW = "withdraw"
    BANK_TO_EXCHANGE = "bankToExchange"
    EXCHANGE_TO_BANK = "exchangeToBank"


class TransferDirection(_WireEnum):
    """Direction of an internal transfer between bank and exchange accounts."""

    BANK_TO_EXCHANGE = "bankToExchange"
    EXCHANGE_TO_BANK = "exchangeToBank"


class _Schema(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


class CurrencyInfo(_Schema):
    """Currency metadata returned by the public currency endpoint."""

    id: str
    full_name: str
    crypto: bool
    payin_enabled: bool
    payin_payment_id: bool
    payin_confirmations: int = Field(ge=0)
    payout_enabled: bool
    payout_is_payment_id: bool
    payout_fee: Decimal
    transfer_enabled: bool
    delisted: bool


class DepositAddressInfo(_Schema):
    address: str
    payment_id: Optional[str] = None


class Transaction(_Schema):
    """Single account transaction (deposit, withdrawal or internal transfer)."""

    id: UUID
    index: int = Field(ge=0)
    currency: str
    amount: Decimal
    fee: Decimal
    network_fee: Decimal
    address: str
    payment_id: Optional[str] = None
    hash: str
    status: TransactionStatus
    transaction_type: TransactionType = Field(alias="type")
    created_at: AwareDatetime
    updated_at: AwareDatetime


class TransferResult(_Schema):
    id: UUID
