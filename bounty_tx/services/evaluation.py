"""Evaluation client: dry-run a transaction against node semantics."""
import logging

import httpx
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from bounty_tx.exceptions import EvaluationError, EvaluationTransportError

logger = logging.getLogger(__name__)

API_KEY_HEADER = "dmtr-api-key"


def is_script_failure(response_body: str, marker: str) -> bool:
    """Decide whether an evaluation response reports a failure.

    The evaluator signals failure through the body only, so this is a plain
    substring check. Status codes are ignored.
    """
    return marker in response_body


class EvaluationClient:
    """Ogmios-style ``evaluateTransaction`` JSON-RPC client."""

    def __init__(
        self,
        http: httpx.AsyncClient,
        url: str,
        failure_marker: str,
        api_key: str = "",
        retry_attempts: int = 3,
        retry_wait_seconds: float = 0.5,
    ):
        self.http = http
        self.url = url
        if not failure_marker:
            raise ValueError("failure_marker must not be empty")
        self.failure_marker = failure_marker
        self.api_key = api_key
        self.retry_attempts = max(1, retry_attempts)
        self.retry_wait_seconds = retry_wait_seconds

    def _headers(self) -> dict:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers[API_KEY_HEADER] = self.api_key
        return headers

    async def _post(self, body: dict) -> httpx.Response:
        # Evaluation is read-only; only retry when the connection never opened
        @retry(
            retry=retry_if_exception_type(httpx.ConnectError),
            stop=stop_after_attempt(self.retry_attempts),
            wait=wait_exponential(multiplier=self.retry_wait_seconds, max=5),
            reraise=True,
        )
        async def _do_post() -> httpx.Response:
            return await self.http.post(self.url, json=body, headers=self._headers())

        return await _do_post()

    async def evaluate(self, cbor_hex: str) -> str:
        """
        Evaluate a hex-encoded transaction.

        Returns the raw response body on success.

        Raises:
            EvaluationError: the body carries the failure marker.
            EvaluationTransportError: the evaluator could not be reached or
                answered with a non-2xx status and no failure marker.
        """
        body = {
            "jsonrpc": "2.0",
            "method": "evaluateTransaction",
            "params": {"transaction": {"cbor": cbor_hex}},
        }
        logger.info(f"Sending evaluateTransaction request to {self.url}")

        try:
            response = await self._post(body)
        except httpx.HTTPError as e:
            raise EvaluationTransportError(f"Evaluation request failed: {e.__class__.__name__}", str(e))

        text = response.text
        if is_script_failure(text, self.failure_marker):
            logger.warning(f"Evaluation reported failure: {text[:500]}")
            raise EvaluationError("Transaction failed evaluation", text)

        if not response.is_success:
            raise EvaluationTransportError(f"Evaluator returned HTTP {response.status_code}", text)

        return text
