"""Common schemas for the TRP protocol."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class BytesEncoding(str, Enum):
    """Encoding of a byte payload carried inside a JSON message."""

    HEX = "hex"
    BASE64 = "base64"


class BytesEnvelope(BaseModel):
    """Encoded byte payload."""

    content: str = Field(..., description="Encoded bytes")
    encoding: BytesEncoding = Field(default=BytesEncoding.HEX)


class JsonRpcRequest(BaseModel):
    """JSON-RPC 2.0 request body."""

    jsonrpc: str = "2.0"
    method: str
    params: dict[str, Any]
    id: str


class JsonRpcErrorBody(BaseModel):
    """JSON-RPC 2.0 error member."""

    code: int | None = None
    message: str = ""
    data: Any = None
