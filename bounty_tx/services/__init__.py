"""Business logic services."""
from bounty_tx.services.templates import TemplateRegistry, TxTemplate, TEMPLATES
from bounty_tx.services.resolution import ResolutionClient
from bounty_tx.services.evaluation import EvaluationClient, is_script_failure
from bounty_tx.services.signing import SigningClient
from bounty_tx.services.submission import SubmissionClient
from bounty_tx.services.tx_store import TrackedTxStore
from bounty_tx.services.notifier import WebhookNotifier
from bounty_tx.services.tracker import ConfirmationTracker, TrackOutcome, TrackResult
from bounty_tx.services.orchestrator import TxOrchestrator, SubmitResult

__all__ = [
    "TemplateRegistry",
    "TxTemplate",
    "TEMPLATES",
    "ResolutionClient",
    "EvaluationClient",
    "is_script_failure",
    "SigningClient",
    "SubmissionClient",
    "TrackedTxStore",
    "WebhookNotifier",
    "ConfirmationTracker",
    "TrackOutcome",
    "TrackResult",
    "TxOrchestrator",
    "SubmitResult",
]
