"""Webhook management, trigger and test API."""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request

from echoday.schemas import (
    TestWebhookRequest,
    WebhookConfig,
    WebhookCreate,
    WebhookPayload,
    WebhookResponse,
    WebhookTemplate,
    WebhookType,
    WebhookUpdate,
)
from echoday.services.errors import EventNotSubscribedError, InvalidUrlError, WebhookNotFoundError
from echoday.services.webhook_service import WebhookService

router = APIRouter(prefix="/webhooks", tags=["webhooks"])


def get_webhook_service(request: Request) -> WebhookService:
    return request.app.state.webhook_service


def _get_or_404(service: WebhookService, webhook_id: str) -> WebhookConfig:
    wh = service.get_webhook(webhook_id)
    if not wh:
        raise HTTPException(404, "Webhook bulunamadı")
    return wh


# ── Catalogue ────────────────────────────────────────────
@router.get("/events", response_model=list[str])
async def list_event_types(service: WebhookService = Depends(get_webhook_service)):
    """List all available webhook event types."""
    return service.list_events()


@router.get("/templates", response_model=list[WebhookTemplate])
async def list_templates(service: WebhookService = Depends(get_webhook_service)):
    return service.list_templates()


@router.get("/templates/{webhook_type}", response_model=WebhookTemplate)
async def get_template(webhook_type: WebhookType, service: WebhookService = Depends(get_webhook_service)):
    return service.get_template(webhook_type)


# ── CRUD ─────────────────────────────────────────────────
@router.get("/", response_model=list[WebhookConfig])
async def list_webhooks(
    active: Optional[bool] = None,
    service: WebhookService = Depends(get_webhook_service),
):
    if active is True:
        return service.list_active_webhooks()
    webhooks = service.list_webhooks()
    if active is False:
        webhooks = [wh for wh in webhooks if not wh.is_active]
    return webhooks


@router.post("/", response_model=WebhookConfig, status_code=201)
async def create_webhook(data: WebhookCreate, service: WebhookService = Depends(get_webhook_service)):
    try:
        webhook_id = await service.add_webhook(data)
    except InvalidUrlError as e:
        raise HTTPException(400, str(e))
    return service.get_webhook(webhook_id)


@router.get("/{webhook_id}", response_model=WebhookConfig)
async def get_webhook(webhook_id: str, service: WebhookService = Depends(get_webhook_service)):
    return _get_or_404(service, webhook_id)


@router.patch("/{webhook_id}", response_model=WebhookConfig)
async def update_webhook(
    webhook_id: str,
    data: WebhookUpdate,
    service: WebhookService = Depends(get_webhook_service),
):
    try:
        updated = await service.update_webhook(webhook_id, data)
    except InvalidUrlError as e:
        raise HTTPException(400, str(e))
    if not updated:
        raise HTTPException(404, "Webhook bulunamadı")
    return service.get_webhook(webhook_id)


@router.delete("/{webhook_id}", status_code=204)
async def delete_webhook(webhook_id: str, service: WebhookService = Depends(get_webhook_service)):
    if not await service.remove_webhook(webhook_id):
        raise HTTPException(404, "Webhook bulunamadı")


@router.post("/{webhook_id}/toggle", response_model=WebhookConfig)
async def toggle_webhook(webhook_id: str, service: WebhookService = Depends(get_webhook_service)):
    """Switch a webhook between active and inactive."""
    _get_or_404(service, webhook_id)
    await service.toggle_webhook(webhook_id)
    return service.get_webhook(webhook_id)


# ── Delivery ─────────────────────────────────────────────
@router.post("/broadcast", response_model=dict[str, WebhookResponse])
async def broadcast_event(payload: WebhookPayload, service: WebhookService = Depends(get_webhook_service)):
    """Deliver an event to every active webhook subscribed to it."""
    return await service.broadcast_event(payload)


@router.post("/test", response_model=WebhookResponse)
async def test_webhook(data: TestWebhookRequest, service: WebhookService = Depends(get_webhook_service)):
    """Send a sample event to a URL without saving a webhook."""
    try:
        return await service.test_webhook(data.url, data.type)
    except InvalidUrlError as e:
        raise HTTPException(400, str(e))


@router.post("/{webhook_id}/trigger", response_model=WebhookResponse)
async def trigger_webhook(
    webhook_id: str,
    payload: WebhookPayload,
    service: WebhookService = Depends(get_webhook_service),
):
    try:
        return await service.trigger_webhook(webhook_id, payload)
    except WebhookNotFoundError as e:
        raise HTTPException(409 if e.inactive else 404, str(e))
    except EventNotSubscribedError as e:
        raise HTTPException(422, str(e))
