from decimal import Decimal

import pytest
from pydantic import ValidationError

from hitbtc import (
    CurrencyInfo,
    DepositAddressInfo,
    Transaction,
    TransactionType,
    TransferDirection,
)

CURRENCY = {
    "id": "ETH",
    "fullName": "Ethereum",
    "crypto": True,
    "payinEnabled": True,
    "payinPaymentId": False,
    "payinConfirmations": 20,
    "payoutEnabled": True,
    "payoutIsPaymentId": False,
    "payoutFee": "0.00958",
    "transferEnabled": True,
    "delisted": False,
    "precisionPayout": 18,
}


def test_currency_info_ignores_unknown_fields():
    info = CurrencyInfo.model_validate(CURRENCY)

    assert info.payout_fee == Decimal("0.00958")
    assert not hasattr(info, "precision_payout")


def test_currency_info_rejects_negative_confirmations():
    with pytest.raises(ValidationError):
        CurrencyInfo.model_validate(dict(CURRENCY, payinConfirmations=-1))


def test_deposit_address_payment_id_optional():
    info = DepositAddressInfo.model_validate({"address": "0xabc"})

    assert info.payment_id is None


def test_transaction_requires_timezone():
    payload = {
        "id": "6a2fb54d-7466-490c-b3a6-95d8c882f7f7",
        "index": 1,
        "currency": "BTC",
        "amount": "1",
        "fee": "0",
        "networkFee": "0",
        "address": "addr",
        "hash": "h",
        "status": "failed",
        "type": "payout",
        "createdAt": "2019-05-18T12:05:36",
        "updatedAt": "2019-05-18T12:05:36",
    }

    with pytest.raises(ValidationError):
        Transaction.model_validate(payload)


def test_transaction_type_unknown_value():
    with pytest.raises(ValueError):
        TransactionType("airdrop")


def test_enum_lookup_is_case_insensitive():
    assert TransactionType("BANKTOEXCHANGE") is TransactionType.BANK_TO_EXCHANGE
    assert TransferDirection("exchangetobank") is TransferDirection.EXCHANGE_TO_BANK
    assert str(TransferDirection.BANK_TO_EXCHANGE) == "bankToExchange"
