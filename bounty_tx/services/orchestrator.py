"""Transaction Orchestrator - intent to resolved, evaluated, submitted transaction.

Flow: Intent -> TemplateArgs -> Resolve -> Evaluate (per template) -> Sign -> Submit -> Track

Each stage either hands its output to the next or raises a typed error; a
failed stage discards everything before it. Nothing is cached between calls
and nothing reaches Submission without passing Evaluation on the same path.
"""
from dataclasses import dataclass
from typing import List, Optional
import logging

from trp_adapter import BytesEnvelope, TxEnvelope, VKeyWitness

from bounty_tx.exceptions import SigningError, StoreError
from bounty_tx.models.tracked_tx import TxStatus
from bounty_tx.schemas.intents import Intent
from bounty_tx.schemas.transactions import SignPayloadResponse
from bounty_tx.services.evaluation import EvaluationClient
from bounty_tx.services.resolution import ResolutionClient
from bounty_tx.services.signing import SigningClient
from bounty_tx.services.submission import SubmissionClient
from bounty_tx.services.templates import TemplateRegistry
from bounty_tx.services.tx_store import TrackedTxStore

logger = logging.getLogger(__name__)


@dataclass
class SubmitResult:
    """Outcome of a submission."""
    tx_hash: str
    tracked: bool


class TxOrchestrator:
    """
    Sequences the external capabilities for each intent.

    All collaborators are constructed once at start-up and injected.
    """

    def __init__(
        self,
        templates: TemplateRegistry,
        resolution: ResolutionClient,
        evaluation: EvaluationClient,
        signing: SigningClient,
        submission: SubmissionClient,
        store: TrackedTxStore,
        default_key_name: str = "payment-key",
    ):
        self.templates = templates
        self.resolution = resolution
        self.evaluation = evaluation
        self.signing = signing
        self.submission = submission
        self.store = store
        self.default_key_name = default_key_name

    async def build(self, intent: Intent) -> TxEnvelope:
        """Derive template arguments and resolve the transaction."""
        template = self.templates.template_for(intent.kind)
        logger.info(f"Received {intent.kind.value} request")

        # Local checks first: no network call with incomplete arguments
        args = self.templates.build_args(intent)
        tir = self.templates.tir_for(intent.kind)

        envelope = await self.resolution.resolve(template.name, tir, args)
        logger.info(f"Generated CBOR for {intent.kind.value}: {envelope.hash}")
        return envelope

    async def build_and_evaluate(self, intent: Intent) -> TxEnvelope:
        """Build, then evaluate. A failing envelope is never returned."""
        envelope = await self.build(intent)
        await self.evaluation.evaluate(envelope.cbor)
        return envelope

    async def process(self, intent: Intent) -> TxEnvelope:
        """Build the intent, evaluating it when its template calls for it."""
        if self.templates.template_for(intent.kind).evaluate:
            return await self.build_and_evaluate(intent)
        return await self.build(intent)

    async def sign(self, key_name: str, payload_hex: str) -> SignPayloadResponse:
        """Sign a hex payload with a named key."""
        return await self.signing.sign(key_name, payload_hex)

    async def submit(self, tx_cbor: str, witnesses: Optional[List[VKeyWitness]] = None) -> SubmitResult:
        """Evaluate, submit and track a caller-built transaction."""
        await self.evaluation.evaluate(tx_cbor)
        return await self._submit_evaluated(tx_cbor, witnesses or [])

    async def sign_and_submit(self, intent: Intent, key_name: Optional[str] = None) -> SubmitResult:
        """Full pipeline: build, evaluate, sign the tx hash, submit, track."""
        key_name = key_name or self.default_key_name
        if not self.signing.public_key:
            raise SigningError("No public key configured for witness", {"key_name": key_name})

        envelope = await self.build_and_evaluate(intent)

        try:
            tx_hash_bytes = bytes.fromhex(envelope.hash)
        except ValueError as e:
            raise SigningError("Transaction hash is not hex", str(e))

        signature = await self.signing.sign_bytes(key_name, tx_hash_bytes)
        witness = VKeyWitness(
            key=BytesEnvelope(content=self.signing.public_key),
            signature=BytesEnvelope(content=signature.hex()),
        )
        result = await self._submit_evaluated(envelope.cbor, [witness])

        if result.tx_hash.lower() != envelope.hash.lower():
            logger.warning(f"Node accepted hash {result.tx_hash}, resolver reported {envelope.hash}")
        return result

    async def track(self, tx_hash: str) -> TxStatus:
        """Place a submitted transaction under confirmation tracking."""
        status = await self.store.set(tx_hash, TxStatus.PENDING)
        logger.info(f"Tracking transaction {tx_hash}: {status.value}")
        return status

    async def _submit_evaluated(self, tx_cbor: str, witnesses: List[VKeyWitness]) -> SubmitResult:
        tx_hash = await self.submission.submit(tx_cbor, witnesses)

        # The transaction is on its way; a tracking failure must not hide that
        try:
            await self.track(tx_hash)
        except StoreError as e:
            logger.error(f"Submitted {tx_hash} but failed to track it: {e}")
            return SubmitResult(tx_hash=tx_hash, tracked=False)

        return SubmitResult(tx_hash=tx_hash, tracked=True)
