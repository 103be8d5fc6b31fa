"""Webhook façade — configuration CRUD, event-checked triggering and ad-hoc test sends."""

import asyncio
import logging
from typing import Optional

from echoday.config import Settings, get_settings
from echoday.models import utcnow
from echoday.schemas import (
    WebhookConfig,
    WebhookCreate,
    WebhookEvent,
    WebhookPayload,
    WebhookResponse,
    WebhookSettings,
    WebhookTemplate,
    WebhookType,
    WebhookUpdate,
    WebhookUser,
)
from echoday.services import webhook_templates
from echoday.services.errors import EventNotSubscribedError, InvalidUrlError, WebhookNotFoundError
from echoday.services.webhook_dispatcher import WebhookDispatcher
from echoday.services.webhook_formatter import format_payload
from echoday.services.webhook_store import WebhookStore, is_valid_url

logger = logging.getLogger(__name__)

TEST_USER = WebhookUser(id="test", name="Test Kullanıcısı")
TEST_DATA = {"title": "Test Görevi", "description": "Bu bir test mesajıdır"}


class WebhookService:
    def __init__(
        self,
        store: WebhookStore,
        dispatcher: WebhookDispatcher,
        settings: Optional[Settings] = None,
    ):
        self.store = store
        self.dispatcher = dispatcher
        self.settings = settings or get_settings()

    # ── Configuration ────────────────────────────────────
    async def add_webhook(self, data: WebhookCreate) -> str:
        if data.settings is None:
            data = data.model_copy(update={"settings": webhook_templates.default_settings_for(data.type)})
        webhook_id = await self.store.add(data)
        logger.info(f"Webhook {webhook_id} added ({data.type.value} -> {data.url})")
        return webhook_id

    async def remove_webhook(self, webhook_id: str) -> bool:
        return await self.store.remove(webhook_id)

    async def update_webhook(self, webhook_id: str, data: WebhookUpdate) -> bool:
        return await self.store.update(webhook_id, data)

    async def toggle_webhook(self, webhook_id: str) -> bool:
        """Flip ``is_active`` and return the new state."""
        webhook = self.store.get(webhook_id)
        if webhook is None:
            raise WebhookNotFoundError(webhook_id)
        await self.store.update(webhook_id, WebhookUpdate(is_active=not webhook.is_active))
        return not webhook.is_active

    # ── Delivery ─────────────────────────────────────────
    async def _deliver(self, webhook: WebhookConfig, payload: WebhookPayload) -> WebhookResponse:
        body = format_payload(webhook.type, payload, webhook.settings)
        response = await self.dispatcher.send(
            webhook.url,
            body,
            timeout_ms=webhook.settings.timeout_ms or self.settings.webhook_timeout_ms,
            max_retries=webhook.settings.retry_count or self.settings.webhook_max_retries,
        )
        if response.success:
            await self.store.mark_triggered(webhook.id, utcnow())
        return response

    async def trigger_webhook(self, webhook_id: str, payload: WebhookPayload) -> WebhookResponse:
        webhook = self.store.get(webhook_id)
        if webhook is None:
            raise WebhookNotFoundError(webhook_id)
        if not webhook.is_active:
            raise WebhookNotFoundError(webhook_id, inactive=True)
        if payload.event not in webhook.events:
            raise EventNotSubscribedError(webhook_id, payload.event.value)
        return await self._deliver(webhook, payload)

    async def broadcast_event(self, payload: WebhookPayload) -> dict[str, WebhookResponse]:
        """Deliver one event to every active webhook subscribed to it, concurrently."""
        targets = [wh for wh in self.store.list_active() if payload.event in wh.events]
        results = await asyncio.gather(*(self._deliver(wh, payload) for wh in targets))
        return {wh.id: result for wh, result in zip(targets, results)}

    async def test_webhook(
        self,
        url: str,
        webhook_type: WebhookType = WebhookType.GENERIC,
    ) -> WebhookResponse:
        """Send a sample ``task_completed`` event to ``url`` without saving anything."""
        if not is_valid_url(url):
            raise InvalidUrlError(url)

        payload = WebhookPayload(
            event=WebhookEvent.TASK_COMPLETED,
            user=TEST_USER,
            data=dict(TEST_DATA),
        )
        body = format_payload(webhook_type, payload, WebhookSettings())
        return await self.dispatcher.send(
            url,
            body,
            timeout_ms=self.settings.webhook_timeout_ms,
            max_retries=self.settings.webhook_test_retries,
        )

    # ── Reads ────────────────────────────────────────────
    def list_webhooks(self) -> list[WebhookConfig]:
        return self.store.list_all()

    def list_active_webhooks(self) -> list[WebhookConfig]:
        return self.store.list_active()

    def get_webhook(self, webhook_id: str) -> Optional[WebhookConfig]:
        return self.store.get(webhook_id)

    def list_templates(self) -> list[WebhookTemplate]:
        return webhook_templates.list_templates()

    def get_template(self, webhook_type: WebhookType) -> WebhookTemplate:
        return webhook_templates.get_template(webhook_type)

    def list_events(self) -> list[str]:
        return [e.value for e in WebhookEvent]
