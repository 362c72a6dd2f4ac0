"""TRP protocol schemas."""

from .common import BytesEncoding, BytesEnvelope, JsonRpcErrorBody, JsonRpcRequest
from .resolve import ResolveParams, TirEnvelope, TxEnvelope
from .submit import SubmitParams, SubmitResponse, VKeyWitness

__all__ = [
    "BytesEncoding",
    "BytesEnvelope",
    "JsonRpcErrorBody",
    "JsonRpcRequest",
    "ResolveParams",
    "TirEnvelope",
    "TxEnvelope",
    "SubmitParams",
    "SubmitResponse",
    "VKeyWitness",
]
