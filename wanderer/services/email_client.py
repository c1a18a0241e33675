"""Resend API client — transactional email delivery."""

import logging

import httpx

from wanderer.config import settings

logger = logging.getLogger(__name__)


class EmailDeliveryError(Exception):
    pass


def render_otp_email(otp_code: str, ttl_minutes: int) -> str:
    return f"""
      <div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
        <h1 style="color: #333;">Welcome to Wanderer Albay!</h1>
        <p style="font-size: 16px; color: #666;">Your verification code is:</p>
        <div style="background: #f5f5f5; padding: 20px; text-align: center; margin: 20px 0;">
          <h2 style="color: #333; font-size: 32px; letter-spacing: 8px; margin: 0;">{otp_code}</h2>
        </div>
        <p style="font-size: 14px; color: #999;">This code will expire in {ttl_minutes} minutes.</p>
        <p style="font-size: 14px; color: #999;">If you didn't request this code, please ignore this email.</p>
      </div>
    """


class EmailClient:
    """Adapter for the Resend REST API. Without an API key, delivery is skipped."""

    def __init__(self, transport: httpx.AsyncBaseTransport | None = None):
        self._client: httpx.AsyncClient | None = None
        self._transport = transport

    @property
    def enabled(self) -> bool:
        return bool(settings.resend_api_key)

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=settings.resend_base_url,
                timeout=15.0,
                transport=self._transport,
            )
        return self._client

    async def send(self, to: str, subject: str, html: str) -> str | None:
        """Send one email. Returns the provider message id, or None when disabled."""
        if not self.enabled:
            logger.warning(f"RESEND_API_KEY not set — email to {to} not sent ({subject})")
            return None

        client = await self._get_client()
        try:
            resp = await client.post(
                "/emails",
                json={
                    "from": settings.otp_email_sender,
                    "to": [to],
                    "subject": subject,
                    "html": html,
                },
                headers={"Authorization": f"Bearer {settings.resend_api_key}"},
            )
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"Resend rejected email to {to}: {e.response.status_code} {e.response.text}")
            raise EmailDeliveryError(f"Email delivery failed ({e.response.status_code})") from e
        except httpx.RequestError as e:
            logger.error(f"Resend request error: {e}")
            raise EmailDeliveryError("Email delivery failed") from e

        try:
            message_id = resp.json().get("id")
        except (ValueError, AttributeError) as e:
            logger.error(f"Resend returned an unreadable reply for {to}: {resp.text[:200]}")
            raise EmailDeliveryError("Email delivery failed (invalid provider response)") from e

        logger.info(f"Email sent to {to} (id={message_id})")
        return message_id

    async def send_otp(self, to: str, otp_code: str) -> str | None:
        return await self.send(
            to=to,
            subject="Your Wanderer Albay Verification Code",
            html=render_otp_email(otp_code, settings.otp_ttl_minutes),
        )

    async def close(self):
        if self._client:
            await self._client.aclose()
            self._client = None


email_client = EmailClient()
