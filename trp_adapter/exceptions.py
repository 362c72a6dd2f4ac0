"""Custom exceptions for the TRP adapter."""

from __future__ import annotations

from typing import Any


class TRPError(Exception):
    """Base exception for TRP errors."""

    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class TRPNetworkError(TRPError):
    """Network connectivity error or timeout."""

    pass


class TRPServerError(TRPError):
    """Non-2xx HTTP response from the TRP endpoint."""

    def __init__(self, message: str, details: Any = None, status_code: int | None = None):
        super().__init__(message, details)
        self.status_code = status_code


class TRPProtocolError(TRPError):
    """Response body is not a well-formed JSON-RPC reply."""

    pass


class TRPRpcError(TRPError):
    """JSON-RPC error member returned by the TRP server.

    Covers template errors (unknown TIR version, missing or malformed
    arguments) as well as node rejections on submit.
    """

    def __init__(self, message: str, code: int | None = None, data: Any = None):
        super().__init__(message, data)
        self.code = code
        self.data = data
