"""Test payload formatting per integration type."""

import pytest

from echoday.schemas import WebhookEvent, WebhookPayload, WebhookSettings, WebhookType, WebhookUser
from echoday.services.webhook_formatter import default_message, format_payload


def _payload(event=WebhookEvent.TASK_COMPLETED, **data) -> WebhookPayload:
    return WebhookPayload(
        event=event,
        timestamp="2026-10-19T08:00:00+00:00",
        user=WebhookUser(id="u1", name="Ada"),
        data=data,
    )


# ── Default messages ─────────────────────────────────────
def test_task_completed_message():
    assert default_message(_payload(title="Buy milk")) == "✅ Ada görevi tamamladı: Buy milk"


def test_task_created_message():
    msg = default_message(_payload(WebhookEvent.TASK_CREATED, title="Call mom"))
    assert msg == "📝 Ada yeni görev ekledi: Call mom"


def test_goal_completed_message():
    assert default_message(_payload(WebhookEvent.GOAL_COMPLETED)) == "🎯 Ada hedefini tamamladı!"


def test_daily_summary_message():
    msg = default_message(_payload(WebhookEvent.DAILY_SUMMARY, completed=4, total=7))
    assert msg == "📊 Günlük özet: 4/7 görev tamamlandı"


@pytest.mark.parametrize("event", [
    WebhookEvent.TASK_UPDATED,
    WebhookEvent.WEEKLY_REPORT,
    WebhookEvent.REMINDER_TRIGGERED,
])
def test_other_events_use_generic_message(event):
    assert default_message(_payload(event)) == f"🔔 EchoDay bildirimi: {event.value}"


def test_message_not_html_escaped():
    assert default_message(_payload(title="Tom & Jerry <3>")).endswith("Tom & Jerry <3>")


# ── Chat providers ───────────────────────────────────────
def test_slack_body():
    body = format_payload(WebhookType.SLACK, _payload(title="Buy milk"), WebhookSettings(channel="#team"))
    assert body == {
        "text": "✅ Ada görevi tamamladı: Buy milk",
        "channel": "#team",
        "username": "EchoDay",
        "icon_emoji": ":white_check_mark:",
    }


def test_slack_body_without_channel():
    body = format_payload(WebhookType.SLACK, _payload(title="x"), WebhookSettings(username="Bot"))
    assert "channel" not in body
    assert body["username"] == "Bot"


def test_discord_body():
    body = format_payload(WebhookType.DISCORD, _payload(title="Buy milk"))
    assert body["content"] == "✅ Ada görevi tamamladı: Buy milk"
    assert body["username"] == "EchoDay"
    assert body["avatar_url"].startswith("https://")


@pytest.mark.parametrize("webhook_type", [WebhookType.SLACK, WebhookType.DISCORD])
def test_custom_message_used_verbatim(webhook_type):
    settings = WebhookSettings(custom_message="{{ user }} did a thing")
    body = format_payload(webhook_type, _payload(title="Buy milk"), settings)
    message = body.get("text") or body.get("content")
    assert message == "{{ user }} did a thing"


# ── Pass-through providers ───────────────────────────────
@pytest.mark.parametrize("webhook_type", [
    t for t in WebhookType if t not in (WebhookType.SLACK, WebhookType.DISCORD)
])
def test_other_types_pass_payload_through(webhook_type):
    payload = _payload(title="Buy milk", priority="high")
    body = format_payload(webhook_type, payload, WebhookSettings(custom_message="ignored"))
    assert body == {
        "event": "task_completed",
        "timestamp": "2026-10-19T08:00:00+00:00",
        "user": {"id": "u1", "name": "Ada"},
        "data": {"title": "Buy milk", "priority": "high"},
    }
