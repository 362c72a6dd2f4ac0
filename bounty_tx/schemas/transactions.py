"""Signing, submission and tracking schemas."""
import re
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator

from bounty_tx.models.tracked_tx import TxStatus

_HEX_RE = re.compile(r"^[0-9a-fA-F]*$")


def _validate_hex(v: str) -> str:
    if len(v) % 2 != 0 or not _HEX_RE.match(v):
        raise ValueError("Must be hex-encoded bytes")
    return v.lower()


class SignPayloadRequest(BaseModel):
    """Schema for signing an arbitrary payload with a named key."""
    key_name: str = Field(..., min_length=1)
    payload: str = Field(..., description="Hex-encoded payload to sign")

    class Config:
        json_schema_extra = {
            "example": {
                "key_name": "payment-key",
                "payload": "a1b2c3"
            }
        }


class SignPayloadResponse(BaseModel):
    """Hex-encoded signature and the public key to verify it."""
    signature: str
    public_key: str


class WitnessIn(BaseModel):
    """Vkey witness supplied by a caller that signed elsewhere."""
    public_key: str
    signature: str

    @field_validator("public_key", "signature")
    @classmethod
    def validate_hex_fields(cls, v: str) -> str:
        """Witness parts must be hex."""
        return _validate_hex(v)


class SubmitTxRequest(BaseModel):
    """Schema for submitting an already-built transaction."""
    tx_cbor: str = Field(..., min_length=2)
    witnesses: List[WitnessIn] = []

    @field_validator("tx_cbor")
    @classmethod
    def validate_cbor(cls, v: str) -> str:
        """Transaction must be hex CBOR."""
        return _validate_hex(v)


class SubmitTxResponse(BaseModel):
    """Submission outcome."""
    success: bool
    tx_hash: Optional[str] = None
    tracked: bool = False


class TrackedTxResponse(BaseModel):
    """Schema for tracked transaction status."""
    tx_hash: str
    status: TxStatus
    block_hash: Optional[str] = None
    block_height: Optional[int] = None
    block_slot: Optional[int] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
