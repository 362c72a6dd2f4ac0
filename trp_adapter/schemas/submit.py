"""Submit schemas for the TRP protocol."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from .common import BytesEnvelope


class VKeyWitness(BaseModel):
    """Verification-key witness attached to a submitted transaction."""

    type: Literal["vkey"] = "vkey"
    key: BytesEnvelope = Field(..., description="Public key bytes")
    signature: BytesEnvelope = Field(..., description="Signature over the tx hash")


class SubmitParams(BaseModel):
    """Parameters of a trp.submit call."""

    tx: BytesEnvelope
    witnesses: list[VKeyWitness] = Field(default_factory=list)


class SubmitResponse(BaseModel):
    """Result of a trp.submit call."""

    hash: str = Field(..., min_length=1, description="Accepted transaction hash")
