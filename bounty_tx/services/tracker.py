"""Chain event filter and confirmation tracker.

Per tracked transaction the lifecycle is NotTracked -> PENDING -> CONFIRMED.
PENDING is written by the orchestrator after a successful submission; this
module only reacts to confirmed-transaction events from the chain follower:

1. Skip events whose inputs do not spend from the monitored address (no
   store access).
2. Look the hash up in the store. Untracked and already-confirmed hashes
   are ignored.
3. For a PENDING hash, fire the webhook (failures are logged, not fatal) and
   write CONFIRMED.

Every event is acknowledged, whatever happens along the way.
"""
import asyncio
import enum
import logging
from dataclasses import dataclass
from typing import Optional

from bounty_tx.exceptions import NotificationError, StoreError
from bounty_tx.models.tracked_tx import TxStatus
from bounty_tx.schemas.chain import ChainEvent, WebhookPayload
from bounty_tx.services.notifier import WebhookNotifier
from bounty_tx.services.tx_store import TrackedTxStore

logger = logging.getLogger(__name__)


class TrackOutcome(str, enum.Enum):
    """What the tracker did with an event."""
    IGNORED_ADDRESS = "IGNORED_ADDRESS"
    NOT_TRACKED = "NOT_TRACKED"
    ALREADY_CONFIRMED = "ALREADY_CONFIRMED"
    CONFIRMED = "CONFIRMED"
    CONFIRMED_NOTIFY_FAILED = "CONFIRMED_NOTIFY_FAILED"
    STORE_FAILED = "STORE_FAILED"
    FAILED = "FAILED"


@dataclass
class TrackResult:
    """Result of handling one chain event."""
    outcome: TrackOutcome
    tx_hash: str
    notified: bool = False
    error: Optional[str] = None


def _normalize(address: str) -> str:
    return address.strip().lower()


def involves_address(event: ChainEvent, address: str) -> bool:
    """Check whether any input of the event spends from ``address``."""
    if not address:
        return False
    wanted = _normalize(address)
    return any(
        tx_input.address is not None and _normalize(tx_input.address) == wanted
        for tx_input in event.inputs
    )


class ConfirmationTracker:
    """Correlates chain events with tracked transactions."""

    def __init__(self, store: TrackedTxStore, notifier: WebhookNotifier, monitoring_address: str):
        self.store = store
        self.notifier = notifier
        self.monitoring_address = monitoring_address
        # Events are handled one at a time so get-then-set per hash is atomic
        self._lock = asyncio.Lock()

        if not monitoring_address:
            logger.warning("No monitoring address configured; all chain events will be ignored")

    async def handle_event(self, event: ChainEvent) -> TrackResult:
        """Process one chain event. Never raises."""
        async with self._lock:
            try:
                return await self._process(event)
            except Exception as e:
                logger.error(f"Unexpected error handling tx {event.tx_hash}: {e}", exc_info=True)
                return TrackResult(TrackOutcome.FAILED, event.tx_hash, error=str(e))

    async def _process(self, event: ChainEvent) -> TrackResult:
        tx_hash = event.tx_hash

        logger.info(
            f"=== TX EVENT RECEIVED: {tx_hash} (block: {event.block_height}, slot: {event.block_slot}) ==="
        )

        if not involves_address(event, self.monitoring_address):
            logger.debug(f"Transaction does not involve monitoring address, skipping: {tx_hash}")
            return TrackResult(TrackOutcome.IGNORED_ADDRESS, tx_hash)

        logger.info(f"Transaction involves monitoring address: {tx_hash}")

        try:
            status = await self.store.get(tx_hash)
        except StoreError as e:
            logger.error(f"Failed to read tx status: {e}")
            return TrackResult(TrackOutcome.STORE_FAILED, tx_hash, error=str(e))

        if status is None:
            logger.debug(f"Transaction not tracked: {tx_hash}")
            return TrackResult(TrackOutcome.NOT_TRACKED, tx_hash)

        if status == TxStatus.CONFIRMED:
            logger.debug(f"Transaction already confirmed: {tx_hash}")
            return TrackResult(TrackOutcome.ALREADY_CONFIRMED, tx_hash)

        logger.info(f"Found pending transaction confirmed: {tx_hash}")

        notified = True
        notify_error = None
        try:
            await self.notifier.notify(WebhookPayload.from_event(event))
        except NotificationError as e:
            # Continue processing even if webhook fails
            logger.error(f"Failed to send webhook: {e}")
            notified = False
            notify_error = str(e)
        except Exception as e:
            logger.error(f"Unexpected webhook error: {e}", exc_info=True)
            notified = False
            notify_error = str(e)

        try:
            await self.store.set(
                tx_hash,
                TxStatus.CONFIRMED,
                block_hash=event.block_hash,
                block_height=event.block_height,
                block_slot=event.block_slot,
            )
        except StoreError as e:
            logger.error(f"Failed to update tx status: {e}")
            return TrackResult(TrackOutcome.STORE_FAILED, tx_hash, notified=notified, error=str(e))

        logger.info(f"Transaction confirmation processed: {tx_hash}")

        if not notified:
            return TrackResult(TrackOutcome.CONFIRMED_NOTIFY_FAILED, tx_hash, error=notify_error)
        return TrackResult(TrackOutcome.CONFIRMED, tx_hash, notified=True)
