"""Chain event intake from the host chain follower."""
from fastapi import APIRouter, Depends

from bounty_tx.schemas.chain import ChainEvent, ChainEventAck
from bounty_tx.services.tracker import ConfirmationTracker
from bounty_tx.api.deps import get_tracker

router = APIRouter(prefix="/v1", tags=["Chain Events"])


@router.post("/chain-events", response_model=ChainEventAck)
async def receive_chain_event(
    event: ChainEvent,
    tracker: ConfirmationTracker = Depends(get_tracker)
):
    """
    Receive one confirmed transaction.

    Always acknowledged: tracking failures are reported in the body and never
    cause redelivery.
    """
    result = await tracker.handle_event(event)
    return ChainEventAck(
        acknowledged=True,
        outcome=result.outcome.value,
        notified=result.notified,
        error=result.error,
    )
