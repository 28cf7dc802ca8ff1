"""
Typed asynchronous client for the HitBTC REST API.
"""

from .base_client import Credentials, PrivateApi, PublicApi  # noqa: F401
from .client import AuthenticatedClient, Client  # noqa: F401
from .config import ClientConfig  # noqa: F401
from .errors import (  # noqa: F401
    HitbtcApiError,
    HitbtcClientError,
    HitbtcDecodeError,
    HitbtcSerializationError,
    HitbtcTransportError,
)
from .models import (  # noqa: F401
    CurrencyInfo,
    DepositAddressInfo,
    Transaction,
    TransactionStatus,
    TransactionType,
    TransferDirection,
)
