"""Signing, submission and tracking API endpoints."""
import re

from fastapi import APIRouter, Depends, HTTPException, status

from trp_adapter import BytesEnvelope, VKeyWitness

from bounty_tx.schemas.common import CorrelatedResponse
from bounty_tx.schemas.transactions import (
    SignPayloadRequest,
    SignPayloadResponse,
    SubmitTxRequest,
    SubmitTxResponse,
    TrackedTxResponse,
)
from bounty_tx.services.orchestrator import TxOrchestrator
from bounty_tx.services.tx_store import TrackedTxStore
from bounty_tx.api.deps import get_correlation_id, get_orchestrator, get_store

router = APIRouter(prefix="/v1", tags=["Transactions"])

_TX_HASH_RE = re.compile(r"^[0-9a-fA-F]{64}$")


def _check_tx_hash(tx_hash: str) -> None:
    if not _TX_HASH_RE.match(tx_hash):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="tx_hash must be 64 hex characters"
        )


@router.post("/sign-payload", response_model=CorrelatedResponse[SignPayloadResponse])
async def sign_payload(
    request: SignPayloadRequest,
    orchestrator: TxOrchestrator = Depends(get_orchestrator),
    correlation_id: str = Depends(get_correlation_id)
):
    """Sign a hex payload with a named key held by the signer."""
    signed = await orchestrator.sign(request.key_name, request.payload)
    return CorrelatedResponse(correlation_id=correlation_id, data=signed)


@router.post("/transactions/submit", response_model=CorrelatedResponse[SubmitTxResponse])
async def submit_transaction(
    request: SubmitTxRequest,
    orchestrator: TxOrchestrator = Depends(get_orchestrator),
    correlation_id: str = Depends(get_correlation_id)
):
    """
    Submit a transaction built and signed elsewhere.

    The transaction is evaluated first and tracked once accepted.
    """
    witnesses = [
        VKeyWitness(
            key=BytesEnvelope(content=w.public_key),
            signature=BytesEnvelope(content=w.signature),
        )
        for w in request.witnesses
    ]
    result = await orchestrator.submit(request.tx_cbor, witnesses)
    return CorrelatedResponse(
        correlation_id=correlation_id,
        data=SubmitTxResponse(success=True, tx_hash=result.tx_hash, tracked=result.tracked)
    )


@router.post("/transactions/{tx_hash}/track", response_model=CorrelatedResponse[TrackedTxResponse])
async def track_transaction(
    tx_hash: str,
    orchestrator: TxOrchestrator = Depends(get_orchestrator),
    store: TrackedTxStore = Depends(get_store),
    correlation_id: str = Depends(get_correlation_id)
):
    """Place a transaction submitted through another channel under tracking."""
    _check_tx_hash(tx_hash)
    await orchestrator.track(tx_hash)
    record = await store.get_record(tx_hash)
    return CorrelatedResponse(
        correlation_id=correlation_id,
        data=TrackedTxResponse.model_validate(record)
    )


@router.get("/transactions/{tx_hash}", response_model=CorrelatedResponse[TrackedTxResponse])
async def get_transaction(
    tx_hash: str,
    store: TrackedTxStore = Depends(get_store),
    correlation_id: str = Depends(get_correlation_id)
):
    """Get the tracking status of a transaction."""
    _check_tx_hash(tx_hash)
    record = await store.get_record(tx_hash)
    if not record:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Transaction {tx_hash} is not tracked"
        )

    return CorrelatedResponse(
        correlation_id=correlation_id,
        data=TrackedTxResponse.model_validate(record)
    )
