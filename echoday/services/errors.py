"""Webhook error taxonomy. Messages are user-facing (Turkish)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class WebhookError(Exception):
    message: str
    code: str = "webhook_error"
    details: Optional[dict[str, Any]] = None

    def __str__(self) -> str:
        return self.message


class InvalidUrlError(WebhookError):
    def __init__(self, url: str):
        super().__init__(
            message="Geçersiz URL formatı",
            code="invalid_url",
            details={"url": url},
        )


class WebhookNotFoundError(WebhookError):
    """Unknown id, or a configuration that is switched off."""

    def __init__(self, webhook_id: str, *, inactive: bool = False):
        message = "Webhook aktif değil" if inactive else "Webhook bulunamadı"
        super().__init__(
            message=message,
            code="webhook_not_found",
            details={"webhook_id": webhook_id, "inactive": inactive},
        )
        self.inactive = inactive


class EventNotSubscribedError(WebhookError):
    def __init__(self, webhook_id: str, event: str):
        super().__init__(
            message="Bu event için webhook aktif değil",
            code="event_not_subscribed",
            details={"webhook_id": webhook_id, "event": event},
        )
