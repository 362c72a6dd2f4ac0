"""Resolution client: template + arguments -> unsigned transaction."""
import logging
from typing import Dict

from trp_adapter import ResolveParams, TirEnvelope, TRPClient, TxEnvelope
from trp_adapter.exceptions import TRPError, TRPRpcError

from bounty_tx.exceptions import ResolutionError

logger = logging.getLogger(__name__)


class ResolutionClient:
    """Resolves tx3 templates through a TRP server."""

    def __init__(self, trp: TRPClient):
        self.trp = trp

    async def resolve(
        self,
        template_name: str,
        tir: TirEnvelope,
        args: Dict[str, str],
    ) -> TxEnvelope:
        """
        Resolve a template into a transaction envelope.

        Raises:
            ResolutionError: the resolver rejected the template or arguments,
                could not be reached, or replied with a malformed body.
        """
        try:
            envelope = await self.trp.resolve(ResolveParams(tir=tir, args=args))
        except TRPRpcError as e:
            raise ResolutionError(
                f"Resolver rejected template '{template_name}'",
                {"code": e.code, "message": e.message, "data": e.data},
            )
        except TRPError as e:
            raise ResolutionError(f"Resolver request failed for '{template_name}'", str(e))

        logger.info(f"Resolved template {template_name}: {envelope.hash}")
        return envelope
