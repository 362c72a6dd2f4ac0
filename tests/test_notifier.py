"""Unit tests for the confirmation webhook."""
import json

import httpx
import pytest

from bounty_tx.exceptions import NotificationError
from bounty_tx.schemas.chain import ChainEvent, TxInput, WebhookPayload
from bounty_tx.services.notifier import WebhookNotifier

WEBHOOK_URL = "http://hooks.test/tx-confirmed"


def _payload() -> WebhookPayload:
    event = ChainEvent(
        tx_hash="aa" * 32,
        inputs=[TxInput(address="addr_test1x")],
        block_hash="bb" * 32,
        block_height=100,
        block_slot=12345,
    )
    return WebhookPayload.from_event(event)


@pytest.mark.asyncio
async def test_notify_posts_block_fields():
    """Test the webhook body and headers."""
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["body"] = json.loads(request.content)
        seen["auth"] = request.headers.get("Authorization")
        seen["content_type"] = request.headers.get("Content-Type")
        return httpx.Response(200)

    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    notifier = WebhookNotifier(http, WEBHOOK_URL, {"Authorization": "Bearer hook-token"})

    await notifier.notify(_payload())

    assert seen["url"] == WEBHOOK_URL
    assert seen["body"] == {
        "tx_hash": "aa" * 32,
        "block_hash": "bb" * 32,
        "block_height": 100,
        "block_slot": 12345,
    }
    assert seen["auth"] == "Bearer hook-token"
    assert seen["content_type"] == "application/json"


@pytest.mark.asyncio
async def test_notify_non_2xx_raises():
    """Test a rejected webhook is reported."""
    http = httpx.AsyncClient(transport=httpx.MockTransport(lambda request: httpx.Response(500)))
    notifier = WebhookNotifier(http, WEBHOOK_URL)

    with pytest.raises(NotificationError, match="status 500"):
        await notifier.notify(_payload())


@pytest.mark.asyncio
async def test_notify_transport_error_raises():
    """Test an unreachable webhook is reported."""
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    notifier = WebhookNotifier(http, WEBHOOK_URL)

    with pytest.raises(NotificationError, match="Webhook request failed"):
        await notifier.notify(_payload())


@pytest.mark.asyncio
async def test_notify_invalid_url_raises_notification_error():
    """Test an unparseable webhook URL is reported as a notification failure."""
    async with httpx.AsyncClient() as http:
        notifier = WebhookNotifier(http, "http://localhost:abc/tx-confirmed")

        with pytest.raises(NotificationError, match="Webhook request failed"):
            await notifier.notify(_payload())
