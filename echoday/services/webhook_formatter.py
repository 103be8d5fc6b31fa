"""Payload formatting — maps an event envelope to the body each provider expects."""

from typing import Any, Optional

from jinja2 import BaseLoader, Environment

from echoday.schemas import WebhookEvent, WebhookPayload, WebhookSettings, WebhookType

# Plain-text chat messages, so no HTML escaping
_jinja_env = Environment(loader=BaseLoader(), autoescape=False)

DEFAULT_USERNAME = "EchoDay"
SLACK_ICON_EMOJI = ":white_check_mark:"
DISCORD_AVATAR_URL = "https://your-domain.com/icon.png"

DEFAULT_MESSAGES: dict[WebhookEvent, str] = {
    WebhookEvent.TASK_COMPLETED: "✅ {{ user }} görevi tamamladı: {{ data.title }}",
    WebhookEvent.TASK_CREATED: "📝 {{ user }} yeni görev ekledi: {{ data.title }}",
    WebhookEvent.GOAL_COMPLETED: "🎯 {{ user }} hedefini tamamladı!",
    WebhookEvent.DAILY_SUMMARY: "📊 Günlük özet: {{ data.completed }}/{{ data.total }} görev tamamlandı",
}
FALLBACK_MESSAGE = "🔔 EchoDay bildirimi: {{ event }}"


def default_message(payload: WebhookPayload) -> str:
    """Human-readable sentence for an event, used when no custom message is set."""
    source = DEFAULT_MESSAGES.get(payload.event, FALLBACK_MESSAGE)
    return _jinja_env.from_string(source).render(
        user=payload.user.name,
        data=payload.data,
        event=payload.event.value,
    )


def _message(payload: WebhookPayload, settings: WebhookSettings) -> str:
    return settings.custom_message or default_message(payload)


def format_payload(
    webhook_type: WebhookType,
    payload: WebhookPayload,
    settings: Optional[WebhookSettings] = None,
) -> dict[str, Any]:
    """
    Build the JSON body for ``webhook_type``.

    Slack and Discord get a chat message; every other target receives the
    envelope unchanged and is expected to map it on its own side.
    """
    settings = settings or WebhookSettings()

    if webhook_type == WebhookType.SLACK:
        body: dict[str, Any] = {"text": _message(payload, settings)}
        if settings.channel:
            body["channel"] = settings.channel
        body["username"] = settings.username or DEFAULT_USERNAME
        body["icon_emoji"] = SLACK_ICON_EMOJI
        return body

    if webhook_type == WebhookType.DISCORD:
        return {
            "content": _message(payload, settings),
            "username": settings.username or DEFAULT_USERNAME,
            "avatar_url": DISCORD_AVATAR_URL,
        }

    return payload.model_dump(mode="json")
