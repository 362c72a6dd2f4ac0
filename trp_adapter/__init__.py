"""TRP Adapter - Python client for the tx3 Transaction Resolve Protocol."""

from .client import TRPClient
from .config import TRPSettings
from .exceptions import (
    TRPError,
    TRPNetworkError,
    TRPProtocolError,
    TRPRpcError,
    TRPServerError,
)
from .schemas import (
    BytesEncoding,
    BytesEnvelope,
    ResolveParams,
    SubmitParams,
    SubmitResponse,
    TirEnvelope,
    TxEnvelope,
    VKeyWitness,
)

__version__ = "0.1.0"

__all__ = [
    # Main classes
    "TRPClient",
    "TRPSettings",
    # Exceptions
    "TRPError",
    "TRPNetworkError",
    "TRPProtocolError",
    "TRPRpcError",
    "TRPServerError",
    # Schemas
    "BytesEncoding",
    "BytesEnvelope",
    "ResolveParams",
    "SubmitParams",
    "SubmitResponse",
    "TirEnvelope",
    "TxEnvelope",
    "VKeyWitness",
]
