"""Error taxonomy for the transaction lifecycle."""

from __future__ import annotations

from typing import Any, List


class BountyTxError(Exception):
    """Base exception for transaction lifecycle errors."""

    error_code = "BOUNTY_TX_ERROR"

    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class MissingParameterError(BountyTxError):
    """Template parameters not satisfied by caller payload or static config."""

    error_code = "MISSING_PARAMETER"

    def __init__(self, template: str, missing: List[str]):
        super().__init__(
            f"Missing parameters for template '{template}'",
            {"missing": missing},
        )
        self.template = template
        self.missing = missing


class ResolutionError(BountyTxError):
    """Could not build a transaction from a template."""

    error_code = "RESOLUTION_FAILED"


class EvaluationTransportError(ResolutionError):
    """Evaluation endpoint unreachable or answered with garbage."""

    error_code = "EVALUATION_UNAVAILABLE"


class EvaluationError(BountyTxError):
    """Transaction would fail on-chain. ``details`` holds the raw response."""

    error_code = "EVALUATION_FAILED"


class SigningError(BountyTxError):
    """Signing capability failed or the payload was invalid."""

    error_code = "SIGNING_FAILED"


class InvalidPayloadError(SigningError):
    """Payload to sign is not valid hex."""

    error_code = "INVALID_PAYLOAD"


class SubmissionError(BountyTxError):
    """Network rejected or never received the transaction."""

    error_code = "SUBMISSION_FAILED"


class NotificationError(BountyTxError):
    """Confirmation webhook was not delivered. Never fatal."""

    error_code = "NOTIFICATION_FAILED"


class StoreError(BountyTxError):
    """Tracked-transaction store read or write failed."""

    error_code = "STORE_UNAVAILABLE"
