"""Webhook configuration store — in-memory map persisted as one blob on every change."""

import json
import logging
from datetime import datetime
from typing import Optional

from pydantic import AnyHttpUrl, TypeAdapter, ValidationError

from echoday.models import new_webhook_id, utcnow
from echoday.schemas import WebhookConfig, WebhookCreate, WebhookSettings, WebhookUpdate
from echoday.services.errors import InvalidUrlError
from echoday.services.kv_store import KeyValueBackend

logger = logging.getLogger(__name__)

_http_url = TypeAdapter(AnyHttpUrl)


def is_valid_url(url: str) -> bool:
    """True for absolute http(s) URLs with a host."""
    try:
        _http_url.validate_python(url)
    except ValidationError:
        return False
    return True


class WebhookStore:
    """Authoritative set of WebhookConfig records.

    Single-writer: every mutation rewrites the whole collection, so
    concurrent writers can lose updates.
    """

    def __init__(self, backend: KeyValueBackend, storage_key: str = "echoday_webhooks"):
        self._backend = backend
        self._storage_key = storage_key
        self._webhooks: dict[str, WebhookConfig] = {}

    # ── Persistence ──────────────────────────────────────
    async def load(self) -> None:
        """Replace the in-memory map with the persisted one, or empty on any problem."""
        self._webhooks = {}
        try:
            raw = await self._backend.get(self._storage_key)
        except Exception as e:
            logger.error(f"Could not read webhooks from storage: {e}")
            return
        if not raw:
            return
        try:
            entries = json.loads(raw)
            self._webhooks = {
                webhook_id: WebhookConfig.model_validate(data) for webhook_id, data in entries
            }
        except (json.JSONDecodeError, TypeError, ValueError) as e:
            self._webhooks = {}
            logger.error(f"Stored webhooks are corrupt, starting empty: {e}")
            return
        logger.info(f"Loaded {len(self._webhooks)} webhook(s)")

    async def _persist(self) -> None:
        try:
            data = [
                [webhook_id, wh.model_dump(mode="json")] for webhook_id, wh in self._webhooks.items()
            ]
            await self._backend.set(self._storage_key, json.dumps(data, ensure_ascii=False))
        except Exception as e:
            logger.error(f"Could not save webhooks: {e}")

    # ── Mutations ────────────────────────────────────────
    async def add(self, data: WebhookCreate) -> str:
        if not is_valid_url(data.url):
            raise InvalidUrlError(data.url)

        webhook_id = new_webhook_id()
        self._webhooks[webhook_id] = WebhookConfig(
            id=webhook_id,
            name=data.name,
            type=data.type,
            url=data.url,
            is_active=data.is_active,
            events=list(data.events),
            settings=data.settings or WebhookSettings(),
            created_at=utcnow(),
        )
        await self._persist()
        return webhook_id

    async def remove(self, webhook_id: str) -> bool:
        if webhook_id not in self._webhooks:
            return False
        del self._webhooks[webhook_id]
        await self._persist()
        return True

    async def update(self, webhook_id: str, data: WebhookUpdate) -> bool:
        """Shallow merge of the fields set on ``data``; settings are replaced, not merged."""
        current = self._webhooks.get(webhook_id)
        if current is None:
            return False

        updates = data.model_dump(exclude_unset=True)
        if updates.get("url") is not None and not is_valid_url(updates["url"]):
            raise InvalidUrlError(updates["url"])
        # Explicit nulls on required fields are ignored
        updates = {k: v for k, v in updates.items() if v is not None}

        self._webhooks[webhook_id] = WebhookConfig.model_validate({**current.model_dump(), **updates})
        await self._persist()
        return True

    async def mark_triggered(self, webhook_id: str, when: Optional[datetime] = None) -> bool:
        current = self._webhooks.get(webhook_id)
        if current is None:
            return False
        self._webhooks[webhook_id] = current.model_copy(update={"last_triggered": when or utcnow()})
        await self._persist()
        return True

    # ── Reads ────────────────────────────────────────────
    def get(self, webhook_id: str) -> Optional[WebhookConfig]:
        return self._webhooks.get(webhook_id)

    def list_all(self) -> list[WebhookConfig]:
        return list(self._webhooks.values())

    def list_active(self) -> list[WebhookConfig]:
        return [wh for wh in self._webhooks.values() if wh.is_active]
