"""Database models package."""
from bounty_tx.models.tracked_tx import TrackedTransaction, TxStatus, VALID_TRANSITIONS

__all__ = [
    "TrackedTransaction",
    "TxStatus",
    "VALID_TRANSITIONS",
]
