"""Submission client: signed transaction -> network."""
import logging
from typing import List, Optional

from trp_adapter import BytesEnvelope, SubmitParams, TRPClient, VKeyWitness
from trp_adapter.exceptions import TRPError, TRPRpcError

from bounty_tx.exceptions import SubmissionError

logger = logging.getLogger(__name__)


class SubmissionClient:
    """Submits transactions through a TRP server."""

    def __init__(self, trp: TRPClient):
        self.trp = trp

    async def submit(self, tx_cbor: str, witnesses: Optional[List[VKeyWitness]] = None) -> str:
        """
        Submit a transaction and return the hash the network accepted.

        Raises:
            SubmissionError: node rejection (reason preserved) or transport failure.
        """
        params = SubmitParams(tx=BytesEnvelope(content=tx_cbor), witnesses=witnesses or [])
        try:
            response = await self.trp.submit(params)
        except TRPRpcError as e:
            raise SubmissionError(
                "Transaction rejected by node",
                {"code": e.code, "message": e.message, "data": e.data},
            )
        except TRPError as e:
            raise SubmissionError("Submission request failed", str(e))

        logger.info(f"Transaction submitted: {response.hash}")
        return response.hash
