"""Main FastAPI application."""
import logging
from contextlib import AsyncExitStack, asynccontextmanager

import httpx
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from trp_adapter import TRPClient, TRPSettings

from bounty_tx.config import get_settings
from bounty_tx.database import async_session_maker
from bounty_tx.exceptions import (
    BountyTxError,
    EvaluationError,
    InvalidPayloadError,
    MissingParameterError,
    StoreError,
)
from bounty_tx.schemas.common import ErrorResponse
from bounty_tx.api import chain_events_router, intents_router, transactions_router
from bounty_tx.services import (
    ConfirmationTracker,
    EvaluationClient,
    ResolutionClient,
    SigningClient,
    SubmissionClient,
    TemplateRegistry,
    TrackedTxStore,
    TxOrchestrator,
    WebhookNotifier,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

settings = get_settings()


def _trp_settings(timeout: float) -> TRPSettings:
    return TRPSettings(
        endpoint=settings.trp_endpoint,
        api_key=settings.trp_api_key,
        timeout_seconds=timeout,
        retry_attempts=settings.connect_retry_attempts,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info("Starting Bounty Transaction Service...")

    async with AsyncExitStack() as stack:
        # One client per capability, each with its own timeout
        resolve_trp = await stack.enter_async_context(
            TRPClient(_trp_settings(settings.resolve_timeout_seconds))
        )
        submit_trp = await stack.enter_async_context(
            TRPClient(_trp_settings(settings.submit_timeout_seconds))
        )
        evaluate_http = await stack.enter_async_context(
            httpx.AsyncClient(timeout=settings.evaluate_timeout_seconds)
        )
        sign_http = await stack.enter_async_context(
            httpx.AsyncClient(timeout=settings.sign_timeout_seconds)
        )
        webhook_http = await stack.enter_async_context(
            httpx.AsyncClient(timeout=settings.webhook_timeout_seconds)
        )

        store = TrackedTxStore(async_session_maker)
        signing = SigningClient(sign_http, settings.signer_url, settings.payment_key_public)
        notifier = WebhookNotifier(webhook_http, settings.webhook_url, settings.webhook_headers)

        app.state.store = store
        app.state.tracker = ConfirmationTracker(store, notifier, settings.monitoring_address)
        app.state.orchestrator = TxOrchestrator(
            templates=TemplateRegistry(settings),
            resolution=ResolutionClient(resolve_trp),
            evaluation=EvaluationClient(
                evaluate_http,
                settings.ogmios_url,
                settings.evaluation_failure_marker,
                api_key=settings.ogmios_api_key,
                retry_attempts=settings.connect_retry_attempts,
            ),
            signing=signing,
            submission=SubmissionClient(submit_trp),
            store=store,
            default_key_name=settings.payment_key_name,
        )
        logger.info(f"Clients ready - TRP: {settings.trp_endpoint}, evaluator: {settings.ogmios_url}")

        yield

        logger.info("Shutting down...")

    logger.info("Shutdown complete")


app = FastAPI(
    title="Bounty Transaction Service",
    description="""
## Transaction lifecycle for the bounty platform (Cardano)

### Features
- **Intents**: Create bounty, add funds, deploy settings, transfer
- **Resolution**: Templates resolved into unsigned transactions over TRP
- **Evaluation**: Script transactions are evaluated before they are returned or submitted
- **Signing**: Named-key signing through the signer service
- **Submission**: Signed transactions submitted and placed under tracking
- **Confirmation tracking**: Chain events confirm tracked transactions and fire a webhook
    """,
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _status_for(exc: BountyTxError) -> int:
    if isinstance(exc, (MissingParameterError, InvalidPayloadError)):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(exc, EvaluationError):
        return status.HTTP_422_UNPROCESSABLE_ENTITY
    if isinstance(exc, StoreError):
        return status.HTTP_503_SERVICE_UNAVAILABLE
    return status.HTTP_502_BAD_GATEWAY


@app.exception_handler(BountyTxError)
async def bounty_tx_exception_handler(request: Request, exc: BountyTxError):
    """Map lifecycle errors onto HTTP responses."""
    status_code = _status_for(exc)
    if status_code >= 500:
        logger.error(f"{exc.error_code}: {exc}")
    else:
        logger.warning(f"{exc.error_code}: {exc}")

    details = exc.details
    if details is not None and not isinstance(details, dict):
        details = {"detail": details}

    body = ErrorResponse(
        correlation_id=request.headers.get("X-Correlation-ID", "unknown"),
        error=exc.message,
        error_code=exc.error_code,
        details=details,
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle uncaught exceptions."""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "correlation_id": request.headers.get("X-Correlation-ID", "unknown"),
            "error": "Internal server error",
            "error_code": "INTERNAL_ERROR"
        }
    )


# Include routers
app.include_router(intents_router)
app.include_router(transactions_router)
app.include_router(chain_events_router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "environment": settings.environment,
        "monitoring_address": settings.monitoring_address or None,
    }


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": "Bounty Transaction API",
        "version": "0.1.0",
        "docs": "/docs",
        "openapi": "/openapi.json"
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("bounty_tx.main:app", host="0.0.0.0", port=8000, reload=True)
