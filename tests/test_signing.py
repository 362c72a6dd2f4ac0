"""Unit tests for the signing client."""
import json

import httpx
import pytest

from bounty_tx.exceptions import InvalidPayloadError, SigningError
from bounty_tx.services.signing import SigningClient

SIGNER_URL = "http://signer.test/sign"
PUBLIC_KEY = "ab" * 32


def _client(handler) -> SigningClient:
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return SigningClient(http, SIGNER_URL, PUBLIC_KEY)


@pytest.mark.asyncio
async def test_sign_payload():
    """Test signing returns hex signature and the configured public key."""
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"signature": "CD" * 64})

    result = await _client(handler).sign("payment-key", "a1b2c3")

    assert seen["body"] == {"key_name": "payment-key", "payload": "a1b2c3"}
    assert result.signature == "cd" * 64
    assert result.public_key == PUBLIC_KEY


@pytest.mark.asyncio
@pytest.mark.parametrize("payload", ["xyz", "abc", ""])
async def test_sign_rejects_invalid_hex(payload):
    """Test invalid or empty hex never reaches the signer."""
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("signer must not be called")

    with pytest.raises(InvalidPayloadError):
        await _client(handler).sign("payment-key", payload)


@pytest.mark.asyncio
async def test_sign_signer_error_status():
    """Test a non-2xx from the signer is a signing error."""
    client = _client(lambda request: httpx.Response(404, text="unknown key"))

    with pytest.raises(SigningError, match="HTTP 404") as exc_info:
        await client.sign("missing-key", "a1b2")

    assert not isinstance(exc_info.value, InvalidPayloadError)


@pytest.mark.asyncio
async def test_sign_malformed_response():
    """Test a reply without a hex signature is a signing error."""
    client = _client(lambda request: httpx.Response(200, json={"sig": "00"}))

    with pytest.raises(SigningError, match="Malformed signer response"):
        await client.sign("payment-key", "a1b2")


@pytest.mark.asyncio
async def test_sign_transport_error():
    """Test an unreachable signer is a signing error."""
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    with pytest.raises(SigningError, match="Sign request failed"):
        await _client(handler).sign_bytes("payment-key", b"\x01\x02")
