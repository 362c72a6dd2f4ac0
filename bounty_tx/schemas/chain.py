"""Chain event and confirmation webhook schemas."""
from typing import List, Optional
from pydantic import BaseModel, Field


class TxInput(BaseModel):
    """Transaction input as delivered by the chain follower.

    ``address`` is the address of the output being spent, when the follower
    resolved it.
    """
    address: Optional[str] = None


class ChainEvent(BaseModel):
    """Confirmed transaction delivered by the host chain follower."""
    tx_hash: str = Field(..., min_length=1)
    inputs: List[TxInput] = []
    block_hash: str
    block_height: int = Field(..., ge=0)
    block_slot: int = Field(..., ge=0)

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "tx_hash": "5f1c...e2",
                "inputs": [{"address": "addr_test1wz...githoney"}],
                "block_hash": "9a0b...77",
                "block_height": 100,
                "block_slot": 12345
            }
        }


class WebhookPayload(BaseModel):
    """Body of the confirmation webhook."""
    tx_hash: str
    block_hash: str
    block_height: int
    block_slot: int

    @classmethod
    def from_event(cls, event: ChainEvent) -> "WebhookPayload":
        """Build the payload from the confirming event's block fields."""
        return cls(
            tx_hash=event.tx_hash,
            block_hash=event.block_hash,
            block_height=event.block_height,
            block_slot=event.block_slot,
        )


class ChainEventAck(BaseModel):
    """Acknowledgement returned to the chain follower."""
    acknowledged: bool = True
    outcome: str
    notified: bool = False
    error: Optional[str] = None
