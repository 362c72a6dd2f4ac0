"""Confirmation webhook notifier."""
import logging
from typing import Dict, Optional

import httpx

from bounty_tx.exceptions import NotificationError
from bounty_tx.schemas.chain import WebhookPayload

logger = logging.getLogger(__name__)


class WebhookNotifier:
    """
    Sends one POST per confirmed transaction.

    There is no retry or queue: a failed delivery is reported to the caller
    and dropped.
    """

    def __init__(self, http: httpx.AsyncClient, webhook_url: str, headers: Optional[Dict[str, str]] = None):
        self.http = http
        self.webhook_url = webhook_url
        self.headers = headers or {}

    async def notify(self, payload: WebhookPayload) -> None:
        """
        Deliver the payload.

        Raises:
            NotificationError: transport failure or non-2xx response.
        """
        logger.info(f"Sending confirmation webhook for tx: {payload.tx_hash}")

        headers = {**self.headers, "Content-Type": "application/json"}
        try:
            response = await self.http.post(
                self.webhook_url,
                json=payload.model_dump(),
                headers=headers,
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise NotificationError("Webhook request failed", str(e))

        if not response.is_success:
            logger.error(f"Webhook failed with status: {response.status_code}")
            raise NotificationError(f"Webhook request failed with status {response.status_code}")

        logger.info(f"Successfully sent webhook for tx: {payload.tx_hash}")
