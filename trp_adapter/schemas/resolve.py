"""Resolve schemas for the TRP protocol."""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .common import BytesEncoding

_HEX_RE = re.compile(r"^[0-9a-fA-F]*$")


class TirEnvelope(BaseModel):
    """Transaction intermediate representation (TIR) of a template."""

    content: str = Field(..., description="Encoded template body")
    encoding: BytesEncoding = Field(default=BytesEncoding.HEX)
    version: str = Field(..., description="TIR version, e.g. 'v1beta0'")


class ResolveParams(BaseModel):
    """Parameters of a trp.resolve call."""

    tir: TirEnvelope
    args: dict[str, Any] = Field(default_factory=dict)


class TxEnvelope(BaseModel):
    """Resolved, unsigned transaction.

    On the wire the encoded transaction is called ``tx``; in code it is
    ``cbor``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    hash: str = Field(..., min_length=1, description="Transaction hash (hex)")
    cbor: str = Field(..., alias="tx", min_length=1, description="Transaction CBOR (hex)")

    @field_validator("cbor")
    @classmethod
    def validate_hex(cls, v: str) -> str:
        """CBOR must be an even-length hex string."""
        if len(v) % 2 != 0 or not _HEX_RE.match(v):
            raise ValueError("tx must be hex-encoded bytes")
        return v.lower()
