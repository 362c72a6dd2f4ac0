"""API dependencies for dependency injection.

Services are built once in the application lifespan and kept on
``app.state``; these dependencies hand them to the routes.
"""
from typing import Optional
from uuid import uuid4

from fastapi import Header, Request

from bounty_tx.services.orchestrator import TxOrchestrator
from bounty_tx.services.tracker import ConfirmationTracker
from bounty_tx.services.tx_store import TrackedTxStore


def get_correlation_id(
    x_correlation_id: Optional[str] = Header(None, alias="X-Correlation-ID")
) -> str:
    """Get or generate correlation ID for request tracing."""
    return x_correlation_id or str(uuid4())


def get_orchestrator(request: Request) -> TxOrchestrator:
    """Get transaction orchestrator instance."""
    return request.app.state.orchestrator


def get_tracker(request: Request) -> ConfirmationTracker:
    """Get confirmation tracker instance."""
    return request.app.state.tracker


def get_store(request: Request) -> TrackedTxStore:
    """Get tracked-transaction store instance."""
    return request.app.state.store
