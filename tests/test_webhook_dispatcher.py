"""Tests for HTTP delivery with retry."""

import asyncio
import json
import time
from unittest.mock import call

import httpx
import pytest

from echoday.services.webhook_dispatcher import WebhookDispatcher

URL = "https://hooks.example.com/abc"


@pytest.mark.asyncio
async def test_success_first_attempt(make_dispatcher, sleep):
    dispatcher, recorder = make_dispatcher(200)
    resp = await dispatcher.send(URL, {"text": "hi"})
    assert resp.success is True
    assert resp.status_code == 200
    assert resp.message == "Webhook başarıyla gönderildi"
    assert recorder.calls == 1
    sleep.assert_not_awaited()


@pytest.mark.asyncio
async def test_request_shape(make_dispatcher):
    dispatcher, recorder = make_dispatcher(204)
    await dispatcher.send(URL, {"text": "✅ Ada"})
    req = recorder.requests[0]
    assert req.method == "POST"
    assert str(req.url) == URL
    assert req.headers["content-type"] == "application/json"
    assert "authorization" not in req.headers
    assert json.loads(req.content) == {"text": "✅ Ada"}


@pytest.mark.asyncio
async def test_retries_then_succeeds_with_linear_backoff(make_dispatcher, sleep):
    dispatcher, recorder = make_dispatcher(500, 502, 200)
    resp = await dispatcher.send(URL, {}, max_retries=3)
    assert resp.success is True
    assert recorder.calls == 3
    assert sleep.await_args_list == [call(1.0), call(2.0)]


@pytest.mark.asyncio
async def test_backoff_base_is_configurable(make_dispatcher, sleep):
    dispatcher, _ = make_dispatcher(500, backoff_seconds=0.5)
    await dispatcher.send(URL, {}, max_retries=4)
    assert sleep.await_args_list == [call(0.5), call(1.0), call(1.5)]


@pytest.mark.asyncio
@pytest.mark.parametrize("max_retries", [1, 2, 5])
async def test_always_failing_makes_exactly_n_attempts(make_dispatcher, sleep, max_retries):
    dispatcher, recorder = make_dispatcher(500)
    resp = await dispatcher.send(URL, {}, max_retries=max_retries)
    assert resp.success is False
    assert recorder.calls == max_retries
    assert sleep.await_count == max_retries - 1


@pytest.mark.asyncio
async def test_error_is_last_attempt_error(make_dispatcher):
    dispatcher, _ = make_dispatcher(500, 503)
    resp = await dispatcher.send(URL, {}, max_retries=2)
    assert resp.success is False
    assert resp.error == "HTTP 503: Service Unavailable"
    assert resp.status_code is None


@pytest.mark.asyncio
async def test_timeout_reported(make_dispatcher):
    dispatcher, recorder = make_dispatcher(httpx.ReadTimeout)
    resp = await dispatcher.send(URL, {}, timeout_ms=1500, max_retries=2)
    assert resp.success is False
    assert resp.error == "İstek zaman aşımına uğradı (1500ms)"
    assert recorder.calls == 2


@pytest.mark.asyncio
async def test_network_error_then_success(make_dispatcher):
    dispatcher, recorder = make_dispatcher(httpx.ConnectError, 201)
    resp = await dispatcher.send(URL, {}, max_retries=3)
    assert resp.success is True
    assert resp.status_code == 201
    assert recorder.calls == 2


@pytest.mark.asyncio
async def test_network_error_message(make_dispatcher):
    dispatcher, _ = make_dispatcher(httpx.ConnectError)
    resp = await dispatcher.send(URL, {}, max_retries=1)
    assert resp.error == "simulated failure"


@pytest.mark.asyncio
async def test_zero_retries_still_attempts_once(make_dispatcher):
    dispatcher, recorder = make_dispatcher(200)
    resp = await dispatcher.send(URL, {}, max_retries=0)
    assert resp.success is True
    assert recorder.calls == 1


# ── Real socket ──────────────────────────────────────────
async def _dribble(reader, writer):
    """Send a 200 status line, then the body one byte every 200ms."""
    await reader.readuntil(b"\r\n\r\n")
    writer.write(b"HTTP/1.1 200 OK\r\nContent-Type: text/plain\r\nContent-Length: 20\r\n\r\n")
    try:
        for _ in range(20):
            writer.write(b"x")
            await writer.drain()
            await asyncio.sleep(0.2)
    except ConnectionError:
        pass
    finally:
        writer.close()


@pytest.mark.asyncio
async def test_slow_body_hits_overall_deadline(monkeypatch, sleep):
    for var in ("HTTP_PROXY", "HTTPS_PROXY", "ALL_PROXY", "http_proxy", "https_proxy", "all_proxy"):
        monkeypatch.delenv(var, raising=False)

    server = await asyncio.start_server(_dribble, "127.0.0.1", 0)
    port = server.sockets[0].getsockname()[1]
    try:
        dispatcher = WebhookDispatcher(sleep=sleep)
        start = time.monotonic()
        resp = await dispatcher.send(f"http://127.0.0.1:{port}/", {}, timeout_ms=500, max_retries=1)
        elapsed = time.monotonic() - start
    finally:
        server.close()
        await server.wait_closed()

    assert resp.success is False
    assert resp.error == "İstek zaman aşımına uğradı (500ms)"
    assert elapsed < 1.5
