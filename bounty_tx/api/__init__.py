"""API routers package."""
from bounty_tx.api.intents import router as intents_router
from bounty_tx.api.transactions import router as transactions_router
from bounty_tx.api.chain_events import router as chain_events_router

__all__ = [
    "intents_router",
    "transactions_router",
    "chain_events_router",
]
