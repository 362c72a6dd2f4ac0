"""Signing client for the remote key holder.

The signer resolves a key name to a private key on its side; this service
only ever handles payloads, signatures and the public key.
"""
import logging

import httpx

from bounty_tx.exceptions import InvalidPayloadError, SigningError
from bounty_tx.schemas.transactions import SignPayloadResponse

logger = logging.getLogger(__name__)


class SigningClient:
    """Signs payloads by key name through the signer endpoint."""

    def __init__(self, http: httpx.AsyncClient, signer_url: str, public_key: str = ""):
        self.http = http
        self.signer_url = signer_url
        self.public_key = public_key

    async def sign(self, key_name: str, payload_hex: str) -> SignPayloadResponse:
        """Sign a hex payload and return hex signature plus public key."""
        try:
            payload = bytes.fromhex(payload_hex)
        except ValueError as e:
            raise InvalidPayloadError("Invalid hex payload", str(e))
        if not payload:
            raise InvalidPayloadError("Invalid hex payload", "payload is empty")

        signature = await self.sign_bytes(key_name, payload)
        return SignPayloadResponse(signature=signature.hex(), public_key=self.public_key)

    async def sign_bytes(self, key_name: str, payload: bytes) -> bytes:
        """
        Sign raw bytes with the named key.

        Raises:
            SigningError: signer unreachable, non-2xx, or malformed reply.
        """
        try:
            response = await self.http.post(
                self.signer_url,
                json={"key_name": key_name, "payload": payload.hex()},
            )
        except httpx.HTTPError as e:
            raise SigningError("Sign request failed", str(e))

        if not response.is_success:
            raise SigningError(f"Signer returned HTTP {response.status_code}", response.text)

        try:
            signature = bytes.fromhex(response.json()["signature"])
        except (ValueError, KeyError, TypeError) as e:
            raise SigningError("Malformed signer response", str(e))

        logger.info(f"Payload signed with key {key_name}")
        return signature
