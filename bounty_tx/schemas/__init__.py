"""Pydantic schemas for API requests/responses."""
from trp_adapter.schemas import TxEnvelope

from bounty_tx.schemas.common import CorrelatedResponse, ErrorResponse
from bounty_tx.schemas.intents import (
    IntentKind, Intent, CreateBounty, AddFunds, DeploySettings, Transfer,
)
from bounty_tx.schemas.transactions import (
    SignPayloadRequest, SignPayloadResponse,
    WitnessIn, SubmitTxRequest, SubmitTxResponse,
    TrackedTxResponse,
)
from bounty_tx.schemas.chain import TxInput, ChainEvent, WebhookPayload, ChainEventAck

__all__ = [
    # Common
    "CorrelatedResponse",
    "ErrorResponse",
    # Envelope
    "TxEnvelope",
    # Intents
    "IntentKind",
    "Intent",
    "CreateBounty",
    "AddFunds",
    "DeploySettings",
    "Transfer",
    # Transactions
    "SignPayloadRequest",
    "SignPayloadResponse",
    "WitnessIn",
    "SubmitTxRequest",
    "SubmitTxResponse",
    "TrackedTxResponse",
    # Chain
    "TxInput",
    "ChainEvent",
    "WebhookPayload",
    "ChainEventAck",
]
