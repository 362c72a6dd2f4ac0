"""Tests for TRP client."""

from unittest.mock import AsyncMock, patch

import httpx
import pytest

from trp_adapter import (
    BytesEnvelope,
    ResolveParams,
    SubmitParams,
    TirEnvelope,
    TRPClient,
    TRPSettings,
    VKeyWitness,
)
from trp_adapter.exceptions import (
    TRPNetworkError,
    TRPProtocolError,
    TRPRpcError,
    TRPServerError,
)


def _rpc_response(status: int = 200, **body) -> httpx.Response:
    return httpx.Response(status, json=body, request=httpx.Request("POST", "/"))


def _resolve_params(tir: str) -> ResolveParams:
    return ResolveParams(
        tir=TirEnvelope(content=tir, version="v1beta0"),
        args={"quantity": "5000000", "receiver": "addr_r", "sender": "addr_s"},
    )


class TestTRPClient:
    """Test TRP client methods."""

    @pytest.mark.asyncio
    async def test_context_manager(self, mock_settings: TRPSettings) -> None:
        """Test client works as async context manager."""
        async with TRPClient(mock_settings) as client:
            assert client._client is not None

        assert client._client is None

    @pytest.mark.asyncio
    async def test_client_not_initialized_error(self, mock_settings: TRPSettings) -> None:
        """Test error when using client outside context manager."""
        client = TRPClient(mock_settings)

        with pytest.raises(RuntimeError, match="Client not initialized"):
            _ = client.client

    @pytest.mark.asyncio
    async def test_resolve(self, mock_settings: TRPSettings, transfer_tir: str) -> None:
        """Test trp.resolve request shape and envelope parsing."""
        async with TRPClient(mock_settings) as client:
            with patch.object(client._client, "post", new_callable=AsyncMock) as mock_post:
                mock_post.return_value = _rpc_response(
                    jsonrpc="2.0", id="1", result={"tx": "84A400", "hash": "abc123"}
                )

                envelope = await client.resolve(_resolve_params(transfer_tir))

                assert envelope.hash == "abc123"
                assert envelope.cbor == "84a400"

                call = mock_post.call_args
                assert call.args[0] == "https://trp.test.example/rpc"
                body = call.kwargs["json"]
                assert body["jsonrpc"] == "2.0"
                assert body["method"] == "trp.resolve"
                assert body["params"]["tir"] == {
                    "content": transfer_tir,
                    "encoding": "hex",
                    "version": "v1beta0",
                }
                assert body["params"]["args"]["quantity"] == "5000000"
                assert call.kwargs["headers"]["dmtr-api-key"] == "test-api-key"

    @pytest.mark.asyncio
    async def test_api_key_header_omitted_when_empty(self, transfer_tir: str) -> None:
        """Test no api key header is sent when none is configured."""
        settings = TRPSettings(endpoint="https://trp.test.example/rpc", api_key="")
        async with TRPClient(settings) as client:
            with patch.object(client._client, "post", new_callable=AsyncMock) as mock_post:
                mock_post.return_value = _rpc_response(
                    result={"tx": "00", "hash": "ff"}
                )
                await client.resolve(_resolve_params(transfer_tir))

                assert "dmtr-api-key" not in mock_post.call_args.kwargs["headers"]

    @pytest.mark.asyncio
    async def test_resolve_rpc_error(self, mock_settings: TRPSettings, transfer_tir: str) -> None:
        """Test JSON-RPC error member raises TRPRpcError with code and data."""
        async with TRPClient(mock_settings) as client:
            with patch.object(client._client, "post", new_callable=AsyncMock) as mock_post:
                mock_post.return_value = _rpc_response(
                    error={
                        "code": -32602,
                        "message": "missing argument",
                        "data": {"arg": "quantity"},
                    }
                )

                with pytest.raises(TRPRpcError) as exc_info:
                    await client.resolve(_resolve_params(transfer_tir))

                assert exc_info.value.code == -32602
                assert exc_info.value.data == {"arg": "quantity"}
                assert "missing argument" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_resolve_server_error(self, mock_settings: TRPSettings, transfer_tir: str) -> None:
        """Test non-2xx status raises TRPServerError."""
        async with TRPClient(mock_settings) as client:
            with patch.object(client._client, "post", new_callable=AsyncMock) as mock_post:
                mock_post.return_value = httpx.Response(
                    503, text="unavailable", request=httpx.Request("POST", "/")
                )

                with pytest.raises(TRPServerError) as exc_info:
                    await client.resolve(_resolve_params(transfer_tir))

                assert exc_info.value.status_code == 503
                assert exc_info.value.details == "unavailable"
                # Upstream errors are surfaced, not retried
                assert mock_post.call_count == 1

    @pytest.mark.asyncio
    async def test_resolve_malformed_result(self, mock_settings: TRPSettings, transfer_tir: str) -> None:
        """Test result without tx/hash raises TRPProtocolError."""
        async with TRPClient(mock_settings) as client:
            with patch.object(client._client, "post", new_callable=AsyncMock) as mock_post:
                mock_post.return_value = _rpc_response(result={"hash": "abc"})

                with pytest.raises(TRPProtocolError):
                    await client.resolve(_resolve_params(transfer_tir))

    @pytest.mark.asyncio
    async def test_resolve_non_hex_tx(self, mock_settings: TRPSettings, transfer_tir: str) -> None:
        """Test non-hex transaction bytes are rejected."""
        async with TRPClient(mock_settings) as client:
            with patch.object(client._client, "post", new_callable=AsyncMock) as mock_post:
                mock_post.return_value = _rpc_response(result={"hash": "abc", "tx": "xyz"})

                with pytest.raises(TRPProtocolError):
                    await client.resolve(_resolve_params(transfer_tir))

    @pytest.mark.asyncio
    async def test_non_json_body(self, mock_settings: TRPSettings, transfer_tir: str) -> None:
        """Test a 200 response that is not JSON raises TRPProtocolError."""
        async with TRPClient(mock_settings) as client:
            with patch.object(client._client, "post", new_callable=AsyncMock) as mock_post:
                mock_post.return_value = httpx.Response(
                    200, text="<html>", request=httpx.Request("POST", "/")
                )

                with pytest.raises(TRPProtocolError, match="not JSON"):
                    await client.resolve(_resolve_params(transfer_tir))

    @pytest.mark.asyncio
    async def test_connect_error_is_retried(self, mock_settings: TRPSettings, transfer_tir: str) -> None:
        """Test connection failures are retried up to retry_attempts."""
        async with TRPClient(mock_settings) as client:
            with patch.object(client._client, "post", new_callable=AsyncMock) as mock_post:
                mock_post.side_effect = [
                    httpx.ConnectError("refused"),
                    _rpc_response(result={"tx": "00", "hash": "ff"}),
                ]

                envelope = await client.resolve(_resolve_params(transfer_tir))

                assert envelope.hash == "ff"
                assert mock_post.call_count == 2

    @pytest.mark.asyncio
    async def test_connect_error_exhausted(self, mock_settings: TRPSettings, transfer_tir: str) -> None:
        """Test persistent connection failure raises TRPNetworkError."""
        async with TRPClient(mock_settings) as client:
            with patch.object(client._client, "post", new_callable=AsyncMock) as mock_post:
                mock_post.side_effect = httpx.ConnectError("refused")

                with pytest.raises(TRPNetworkError):
                    await client.resolve(_resolve_params(transfer_tir))

                assert mock_post.call_count == 2

    @pytest.mark.asyncio
    async def test_timeout_not_retried(self, mock_settings: TRPSettings, transfer_tir: str) -> None:
        """Test read timeouts surface immediately as TRPNetworkError."""
        async with TRPClient(mock_settings) as client:
            with patch.object(client._client, "post", new_callable=AsyncMock) as mock_post:
                mock_post.side_effect = httpx.ReadTimeout("slow")

                with pytest.raises(TRPNetworkError, match="Timeout"):
                    await client.resolve(_resolve_params(transfer_tir))

                assert mock_post.call_count == 1

    @pytest.mark.asyncio
    async def test_submit(self, mock_settings: TRPSettings) -> None:
        """Test trp.submit request shape with a vkey witness."""
        params = SubmitParams(
            tx=BytesEnvelope(content="84a400"),
            witnesses=[
                VKeyWitness(
                    key=BytesEnvelope(content="aa" * 32),
                    signature=BytesEnvelope(content="bb" * 64),
                )
            ],
        )

        async with TRPClient(mock_settings) as client:
            with patch.object(client._client, "post", new_callable=AsyncMock) as mock_post:
                mock_post.return_value = _rpc_response(result={"hash": "abc123"})

                result = await client.submit(params)

                assert result.hash == "abc123"
                body = mock_post.call_args.kwargs["json"]
                assert body["method"] == "trp.submit"
                assert body["params"]["tx"] == {"content": "84a400", "encoding": "hex"}
                assert body["params"]["witnesses"][0]["type"] == "vkey"
                assert body["params"]["witnesses"][0]["key"]["content"] == "aa" * 32

    @pytest.mark.asyncio
    async def test_submit_rejected(self, mock_settings: TRPSettings) -> None:
        """Test node rejection is surfaced as TRPRpcError."""
        async with TRPClient(mock_settings) as client:
            with patch.object(client._client, "post", new_callable=AsyncMock) as mock_post:
                mock_post.return_value = _rpc_response(
                    error={"code": -32000, "message": "BadInputsUTxO"}
                )

                with pytest.raises(TRPRpcError, match="BadInputsUTxO"):
                    await client.submit(SubmitParams(tx=BytesEnvelope(content="00")))
