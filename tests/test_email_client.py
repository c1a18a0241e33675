import json

import httpx
import pytest

from wanderer.config import settings
from wanderer.services.email_client import EmailClient, EmailDeliveryError, render_otp_email


def _client(handler) -> EmailClient:
    return EmailClient(transport=httpx.MockTransport(handler))


def test_render_otp_email_contains_code_and_expiry():
    html = render_otp_email("482913", 5)
    assert "482913" in html
    assert "expire in 5 minutes" in html


async def test_send_skipped_without_api_key(monkeypatch):
    monkeypatch.setattr(settings, "resend_api_key", "")

    def handler(request):
        raise AssertionError("no request expected")

    client = _client(handler)
    assert client.enabled is False
    assert await client.send_otp("maria@example.com", "123456") is None


async def test_send_posts_to_resend(monkeypatch):
    monkeypatch.setattr(settings, "resend_api_key", "re_test")
    captured = {}

    def handler(request: httpx.Request):
        captured["url"] = str(request.url)
        captured["auth"] = request.headers["Authorization"]
        captured["body"] = json.loads(request.content)
        return httpx.Response(200, json={"id": "email_abc"})

    client = _client(handler)
    message_id = await client.send_otp("maria@example.com", "123456")
    await client.close()

    assert message_id == "email_abc"
    assert captured["url"] == "https://api.resend.com/emails"
    assert captured["auth"] == "Bearer re_test"
    assert captured["body"]["to"] == ["maria@example.com"]
    assert captured["body"]["from"] == "Wanderer Albay <onboarding@resend.dev>"
    assert captured["body"]["subject"] == "Your Wanderer Albay Verification Code"
    assert "123456" in captured["body"]["html"]


async def test_send_raises_on_provider_error(monkeypatch):
    monkeypatch.setattr(settings, "resend_api_key", "re_test")

    def handler(request):
        return httpx.Response(422, json={"message": "Invalid `to` field"})

    client = _client(handler)
    with pytest.raises(EmailDeliveryError, match="422"):
        await client.send("bad", "Subject", "<p>hi</p>")


async def test_send_raises_on_network_error(monkeypatch):
    monkeypatch.setattr(settings, "resend_api_key", "re_test")

    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    client = _client(handler)
    with pytest.raises(EmailDeliveryError):
        await client.send("maria@example.com", "Subject", "<p>hi</p>")


async def test_send_raises_on_unreadable_reply(monkeypatch):
    monkeypatch.setattr(settings, "resend_api_key", "re_test")

    def handler(request):
        return httpx.Response(200, text="<html>gateway</html>")

    client = _client(handler)
    with pytest.raises(EmailDeliveryError, match="invalid provider response"):
        await client.send_otp("maria@example.com", "123456")
    await client.close()
