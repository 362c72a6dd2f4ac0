"""Tracked transaction model and confirmation state machine."""
import enum
from datetime import datetime
from typing import Optional

from sqlalchemy import BigInteger, DateTime, Enum, String
from sqlalchemy.orm import Mapped, mapped_column

from bounty_tx.database import Base


class TxStatus(str, enum.Enum):
    """
    Confirmation status of a submitted transaction.

    No row means the transaction is not tracked.
    """
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"


# Valid state transitions (NotTracked -> PENDING is the explicit track call)
VALID_TRANSITIONS = {
    TxStatus.PENDING: [TxStatus.CONFIRMED],
    TxStatus.CONFIRMED: [],  # Terminal state
}


class TrackedTransaction(Base):
    """A transaction placed under confirmation monitoring after submission."""
    __tablename__ = "tracked_transactions"

    tx_hash: Mapped[str] = mapped_column(String(64), primary_key=True)
    status: Mapped[TxStatus] = mapped_column(Enum(TxStatus), nullable=False, index=True)

    # Filled in when the confirming block is seen
    block_hash: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    block_height: Mapped[Optional[int]] = mapped_column(BigInteger, nullable=True)
    block_slot: Mapped[Optional[int]] = mapped_column(BigInteger, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def can_transition_to(self, new_status: TxStatus) -> bool:
        """Check if transition to new status is valid."""
        return new_status in VALID_TRANSITIONS.get(self.status, [])
