"""Pydantic schemas for webhook configuration, payloads and results."""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field


class WebhookType(str, Enum):
    """Supported integration targets."""
    SLACK = "slack"
    DISCORD = "discord"
    TELEGRAM = "telegram"
    TEAMS = "teams"
    ZAPIER = "zapier"
    MAKE = "make"
    NOTION = "notion"
    TRELLO = "trello"
    ASANA = "asana"
    N8N = "n8n"
    PABBLY = "pabbly"
    GOOGLE_CHAT = "google-chat"
    GENERIC = "generic"


class WebhookEvent(str, Enum):
    """Domain events a webhook can subscribe to."""
    TASK_COMPLETED = "task_completed"
    TASK_CREATED = "task_created"
    TASK_UPDATED = "task_updated"
    GOAL_COMPLETED = "goal_completed"
    DAILY_SUMMARY = "daily_summary"
    WEEKLY_REPORT = "weekly_report"
    REMINDER_TRIGGERED = "reminder_triggered"


# ── Configuration ────────────────────────────────────────
class WebhookSettings(BaseModel):
    """Per-webhook options. Unknown keys are kept as extras."""

    channel: Optional[str] = None
    username: Optional[str] = None
    custom_message: Optional[str] = None
    include_details: Optional[bool] = None
    retry_count: Optional[int] = None
    timeout_ms: Optional[int] = None

    model_config = {"extra": "allow"}


class WebhookCreate(BaseModel):
    name: str
    type: WebhookType = WebhookType.GENERIC
    url: str
    is_active: bool = True
    events: list[WebhookEvent] = Field(default_factory=lambda: [WebhookEvent.TASK_COMPLETED])
    # None means "use the template defaults for this type"
    settings: Optional[WebhookSettings] = None


class WebhookUpdate(BaseModel):
    name: Optional[str] = None
    type: Optional[WebhookType] = None
    url: Optional[str] = None
    is_active: Optional[bool] = None
    events: Optional[list[WebhookEvent]] = None
    settings: Optional[WebhookSettings] = None


class WebhookConfig(BaseModel):
    id: str
    name: str
    type: WebhookType
    url: str
    is_active: bool = True
    events: list[WebhookEvent] = Field(default_factory=list)
    settings: WebhookSettings = Field(default_factory=WebhookSettings)
    created_at: datetime
    last_triggered: Optional[datetime] = None


# ── Delivery ─────────────────────────────────────────────
class WebhookUser(BaseModel):
    id: str
    name: str


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class WebhookPayload(BaseModel):
    """Event envelope built by the caller; never persisted."""

    event: WebhookEvent
    timestamp: str = Field(default_factory=_now_iso)
    user: WebhookUser
    data: dict[str, Any] = Field(default_factory=dict)


class WebhookResponse(BaseModel):
    success: bool
    status_code: Optional[int] = None
    message: Optional[str] = None
    error: Optional[str] = None


class TestWebhookRequest(BaseModel):
    url: str
    type: WebhookType = WebhookType.GENERIC


# ── Catalogue ────────────────────────────────────────────
class WebhookTemplate(BaseModel):
    """Static description of an integration target."""

    type: WebhookType
    name: str
    description: str
    icon: str
    briefing: str = ""
    use_cases: list[str] = Field(default_factory=list)
    default_settings: WebhookSettings = Field(default_factory=WebhookSettings)
    setup_instructions: list[str] = Field(default_factory=list)
    example_url: str = ""
