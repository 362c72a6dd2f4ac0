"""TRP (Transaction Resolve Protocol) JSON-RPC client."""

from __future__ import annotations

from typing import Any
from uuid import uuid4

import httpx
from pydantic import ValidationError
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from .config import TRPSettings
from .exceptions import (
    TRPNetworkError,
    TRPProtocolError,
    TRPRpcError,
    TRPServerError,
)
from .schemas import (
    JsonRpcErrorBody,
    JsonRpcRequest,
    ResolveParams,
    SubmitParams,
    SubmitResponse,
    TxEnvelope,
)

API_KEY_HEADER = "dmtr-api-key"


class TRPClient:
    """Async client for a TRP server.

    Usage:
        async with TRPClient(settings) as client:
            envelope = await client.resolve(params)
    """

    def __init__(self, settings: TRPSettings | None = None):
        """Initialize client.

        Args:
            settings: TRP settings. If not provided, loads from environment.
        """
        self.settings = settings or TRPSettings()
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "TRPClient":
        """Enter async context."""
        self._client = httpx.AsyncClient(
            timeout=httpx.Timeout(self.settings.timeout_seconds),
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit async context."""
        if self._client:
            await self._client.aclose()
            self._client = None

    @property
    def client(self) -> httpx.AsyncClient:
        """Get HTTP client, ensuring it's initialized."""
        if self._client is None:
            raise RuntimeError(
                "Client not initialized. Use 'async with TRPClient() as client:'"
            )
        return self._client

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.settings.api_key:
            headers[API_KEY_HEADER] = self.settings.api_key
        return headers

    def _create_retry_decorator(self):
        """Create retry decorator with current settings.

        Only connection failures are retried: the request never reached the
        server, so resending it cannot duplicate work.
        """
        return retry(
            retry=retry_if_exception_type(httpx.ConnectError),
            stop=stop_after_attempt(max(1, self.settings.retry_attempts)),
            wait=wait_exponential(
                min=self.settings.retry_min_wait_seconds,
                max=self.settings.retry_max_wait_seconds,
            ),
            reraise=True,
        )

    def _handle_response(self, response: httpx.Response) -> Any:
        """Extract the JSON-RPC result from a response.

        Raises:
            TRPServerError: For non-2xx responses.
            TRPProtocolError: For bodies that are not JSON-RPC replies.
            TRPRpcError: For replies carrying an error member.
        """
        if not response.is_success:
            try:
                details = response.json()
            except ValueError:
                details = response.text
            raise TRPServerError(
                f"HTTP {response.status_code}", details, status_code=response.status_code
            )

        try:
            body = response.json()
        except ValueError:
            raise TRPProtocolError("Response is not JSON", response.text)

        if not isinstance(body, dict):
            raise TRPProtocolError("Response is not a JSON-RPC object", body)

        if body.get("error") is not None:
            error = JsonRpcErrorBody.model_validate(body["error"])
            raise TRPRpcError(error.message or "TRP error", code=error.code, data=error.data)

        if "result" not in body:
            raise TRPProtocolError("Response has neither result nor error", body)

        return body["result"]

    async def _call(self, method: str, params: dict[str, Any]) -> Any:
        """Make a JSON-RPC call to the TRP endpoint.

        Args:
            method: JSON-RPC method name.
            params: Method parameters.

        Returns:
            The ``result`` member of the reply.
        """
        request = JsonRpcRequest(method=method, params=params, id=str(uuid4()))

        @self._create_retry_decorator()
        async def _do_request() -> httpx.Response:
            return await self.client.post(
                self.settings.endpoint,
                headers=self._headers(),
                json=request.model_dump(),
            )

        try:
            response = await _do_request()
        except httpx.TimeoutException as e:
            raise TRPNetworkError(f"Timeout: {e}")
        except httpx.HTTPError as e:
            raise TRPNetworkError(f"Network error: {e}")

        return self._handle_response(response)

    async def resolve(self, params: ResolveParams) -> TxEnvelope:
        """Resolve a template with arguments into a transaction.

        Args:
            params: TIR envelope and named arguments.

        Returns:
            Resolved transaction envelope.
        """
        result = await self._call("trp.resolve", params.model_dump(mode="json"))
        try:
            return TxEnvelope.model_validate(result)
        except ValidationError as e:
            raise TRPProtocolError("Malformed resolve result", e.errors())

    async def submit(self, params: SubmitParams) -> SubmitResponse:
        """Submit a signed transaction to the network.

        Args:
            params: Transaction bytes and witnesses.

        Returns:
            Accepted transaction hash.
        """
        result = await self._call("trp.submit", params.model_dump(mode="json"))
        try:
            return SubmitResponse.model_validate(result)
        except ValidationError as e:
            raise TRPProtocolError("Malformed submit result", e.errors())
