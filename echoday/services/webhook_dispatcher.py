"""Webhook dispatch — POSTs a formatted body with a timeout and linear-backoff retry."""

import asyncio
import json
import logging
import time
from typing import Any, Awaitable, Callable, Optional

import httpx

from echoday.schemas import WebhookResponse

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_MS = 5000
DEFAULT_MAX_RETRIES = 3
SUCCESS_MESSAGE = "Webhook başarıyla gönderildi"


class WebhookDispatcher:
    """Delivers one body to one URL.

    Delivery problems never raise: the last failure comes back as
    ``WebhookResponse(success=False, error=...)``.
    """

    def __init__(
        self,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
        backoff_seconds: float = 1.0,
    ):
        self._transport = transport
        self._sleep = sleep
        self._backoff_seconds = backoff_seconds

    async def _attempt(self, url: str, content: str, timeout_ms: int) -> httpx.Response:
        headers = {"Content-Type": "application/json"}
        timeout = timeout_ms / 1000
        async with httpx.AsyncClient(timeout=timeout, transport=self._transport) as client:
            # httpx limits each phase; the whole request shares one deadline
            return await asyncio.wait_for(client.post(url, content=content, headers=headers), timeout)

    async def send(
        self,
        url: str,
        body: dict,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        max_retries: int = DEFAULT_MAX_RETRIES,
    ) -> WebhookResponse:
        max_retries = max(1, max_retries)
        content = json.dumps(body, ensure_ascii=False)
        error = ""

        for attempt in range(1, max_retries + 1):
            start = time.monotonic()
            try:
                resp = await self._attempt(url, content, timeout_ms)
                if 200 <= resp.status_code < 300:
                    duration_ms = int((time.monotonic() - start) * 1000)
                    logger.info(f"Webhook delivered to {url}: {resp.status_code} in {duration_ms}ms")
                    return WebhookResponse(
                        success=True,
                        status_code=resp.status_code,
                        message=SUCCESS_MESSAGE,
                    )
                error = f"HTTP {resp.status_code}: {resp.reason_phrase}"
            except (httpx.TimeoutException, asyncio.TimeoutError):
                error = f"İstek zaman aşımına uğradı ({timeout_ms}ms)"
            except httpx.HTTPError as e:
                error = str(e) or e.__class__.__name__

            logger.warning(f"Webhook delivery failed (attempt {attempt}/{max_retries}) to {url}: {error}")
            if attempt < max_retries:
                await self._sleep(attempt * self._backoff_seconds)

        return WebhookResponse(success=False, error=error)
