"""Tracked-transaction store: tx hash -> confirmation status."""
import logging
from datetime import datetime
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import async_sessionmaker

from bounty_tx.exceptions import StoreError
from bounty_tx.models.tracked_tx import TrackedTransaction, TxStatus

logger = logging.getLogger(__name__)


def _key(tx_hash: str) -> str:
    return tx_hash.strip().lower()


class TrackedTxStore:
    """
    Durable status map backed by the ``tracked_transactions`` table.

    Every call runs in its own session. ``get`` returning None means the
    transaction is not tracked, which is a normal outcome.
    """

    def __init__(self, session_maker: async_sessionmaker):
        self.session_maker = session_maker

    async def get(self, tx_hash: str) -> Optional[TxStatus]:
        """Get the status of a transaction, or None if not tracked."""
        record = await self.get_record(tx_hash)
        return record.status if record else None

    async def get_record(self, tx_hash: str) -> Optional[TrackedTransaction]:
        """Get the full tracked row, or None if not tracked."""
        try:
            async with self.session_maker() as session:
                result = await session.execute(
                    select(TrackedTransaction).where(TrackedTransaction.tx_hash == _key(tx_hash))
                )
                return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to read status for {tx_hash}", str(e))

    async def set(
        self,
        tx_hash: str,
        status: TxStatus,
        block_hash: Optional[str] = None,
        block_height: Optional[int] = None,
        block_slot: Optional[int] = None,
    ) -> TxStatus:
        """
        Write a status for a transaction.

        Reads and writes the row in one transaction (row lock on Postgres).
        A CONFIRMED row is never moved back to PENDING; the stored status is
        returned either way.
        """
        key = _key(tx_hash)
        try:
            async with self.session_maker() as session:
                async with session.begin():
                    result = await session.execute(
                        select(TrackedTransaction)
                        .where(TrackedTransaction.tx_hash == key)
                        .with_for_update()
                    )
                    record = result.scalar_one_or_none()

                    if record is None:
                        record = TrackedTransaction(tx_hash=key, status=status)
                        session.add(record)
                    elif record.status == status or not record.can_transition_to(status):
                        if record.status != status:
                            logger.warning(
                                f"Ignoring status change for {key}: {record.status.value} -> {status.value}"
                            )
                        return record.status
                    else:
                        record.status = status
                        record.updated_at = datetime.utcnow()

                    if status == TxStatus.CONFIRMED:
                        record.block_hash = block_hash
                        record.block_height = block_height
                        record.block_slot = block_slot

                return status
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to write status for {tx_hash}", str(e))
