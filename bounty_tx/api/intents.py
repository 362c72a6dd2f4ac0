"""Intent API endpoints: one route per kind of transaction."""
from typing import Optional

from fastapi import APIRouter, Depends, Query

from trp_adapter import TxEnvelope

from bounty_tx.schemas.common import CorrelatedResponse
from bounty_tx.schemas.intents import AddFunds, CreateBounty, DeploySettings, Intent, Transfer
from bounty_tx.schemas.transactions import SubmitTxResponse
from bounty_tx.services.orchestrator import TxOrchestrator
from bounty_tx.api.deps import get_correlation_id, get_orchestrator

router = APIRouter(prefix="/v1", tags=["Intents"])


async def _sign_and_submit(
    orchestrator: TxOrchestrator,
    intent: Intent,
    key_name: Optional[str],
    correlation_id: str,
) -> CorrelatedResponse[SubmitTxResponse]:
    result = await orchestrator.sign_and_submit(intent, key_name)
    return CorrelatedResponse(
        correlation_id=correlation_id,
        data=SubmitTxResponse(success=True, tx_hash=result.tx_hash, tracked=result.tracked)
    )


@router.post("/create-bounty", response_model=CorrelatedResponse[TxEnvelope])
async def create_bounty(
    intent: CreateBounty,
    orchestrator: TxOrchestrator = Depends(get_orchestrator),
    correlation_id: str = Depends(get_correlation_id)
):
    """
    Build and evaluate a bounty creation transaction.

    Returns the unsigned envelope; 422 if the transaction would fail on-chain.
    """
    envelope = await orchestrator.process(intent)
    return CorrelatedResponse(correlation_id=correlation_id, data=envelope)


@router.post("/add-funds", response_model=CorrelatedResponse[TxEnvelope])
async def add_funds(
    intent: AddFunds,
    orchestrator: TxOrchestrator = Depends(get_orchestrator),
    correlation_id: str = Depends(get_correlation_id)
):
    """Build and evaluate a transaction adding funds to a bounty."""
    envelope = await orchestrator.process(intent)
    return CorrelatedResponse(correlation_id=correlation_id, data=envelope)


@router.post("/deploy-settings", response_model=CorrelatedResponse[TxEnvelope])
async def deploy_settings(
    intent: DeploySettings,
    orchestrator: TxOrchestrator = Depends(get_orchestrator),
    correlation_id: str = Depends(get_correlation_id)
):
    """Build the settings deployment transaction (not evaluated)."""
    envelope = await orchestrator.process(intent)
    return CorrelatedResponse(correlation_id=correlation_id, data=envelope)


@router.post("/transfer", response_model=CorrelatedResponse[TxEnvelope])
async def transfer(
    intent: Transfer,
    orchestrator: TxOrchestrator = Depends(get_orchestrator),
    correlation_id: str = Depends(get_correlation_id)
):
    """Build a plain value transfer."""
    envelope = await orchestrator.process(intent)
    return CorrelatedResponse(correlation_id=correlation_id, data=envelope)


@router.post("/create-bounty/submit", response_model=CorrelatedResponse[SubmitTxResponse])
async def submit_create_bounty(
    intent: CreateBounty,
    key_name: Optional[str] = Query(None),
    orchestrator: TxOrchestrator = Depends(get_orchestrator),
    correlation_id: str = Depends(get_correlation_id)
):
    """Build, evaluate, sign with the platform key, submit and track."""
    return await _sign_and_submit(orchestrator, intent, key_name, correlation_id)


@router.post("/add-funds/submit", response_model=CorrelatedResponse[SubmitTxResponse])
async def submit_add_funds(
    intent: AddFunds,
    key_name: Optional[str] = Query(None),
    orchestrator: TxOrchestrator = Depends(get_orchestrator),
    correlation_id: str = Depends(get_correlation_id)
):
    """Build, evaluate, sign, submit and track an add-funds transaction."""
    return await _sign_and_submit(orchestrator, intent, key_name, correlation_id)


@router.post("/deploy-settings/submit", response_model=CorrelatedResponse[SubmitTxResponse])
async def submit_deploy_settings(
    intent: DeploySettings,
    key_name: Optional[str] = Query(None),
    orchestrator: TxOrchestrator = Depends(get_orchestrator),
    correlation_id: str = Depends(get_correlation_id)
):
    """Build, evaluate, sign, submit and track the settings deployment."""
    return await _sign_and_submit(orchestrator, intent, key_name, correlation_id)


@router.post("/transfer/submit", response_model=CorrelatedResponse[SubmitTxResponse])
async def submit_transfer(
    intent: Transfer,
    key_name: Optional[str] = Query(None),
    orchestrator: TxOrchestrator = Depends(get_orchestrator),
    correlation_id: str = Depends(get_correlation_id)
):
    """Build, evaluate, sign, submit and track a transfer."""
    return await _sign_and_submit(orchestrator, intent, key_name, correlation_id)
