"""
WhatsApp Template Sender

Sends a pre-approved template message through the Cloud API.
No formatting intelligence. No retries. No logic.
"""

import logging
from dataclasses import dataclass

import httpx

from .schemas import TemplateMessage, WhatsAppMessageResponse

logger = logging.getLogger(__name__)

GRAPH_API_BASE = "https://graph.facebook.com"


class WhatsAppSenderError(Exception):
    """Failed to send message to WhatsApp."""
    pass


@dataclass(frozen=True)
class WhatsAppSettings:
    access_token: str
    phone_number_id: str
    api_version: str = "v22.0"
    template_name: str = "gb_feedback_thankyou"
    language_code: str = "en"
    timeout_s: float = 30.0
    verify_ssl: bool = True

    @property
    def endpoint(self) -> str:
        return f"{GRAPH_API_BASE}/{self.api_version}/{self.phone_number_id}/messages"


async def send_template(
    message: TemplateMessage,
    settings: WhatsAppSettings,
) -> WhatsAppMessageResponse:
    """
    Send a template message via WhatsApp Cloud API.

    No formatting, no branching, no retries.
    If WhatsApp fails → log and raise.

    Args:
        message: Fully built TemplateMessage
        settings: Token, phone number id and API version

    Returns:
        WhatsAppMessageResponse from Meta API

    Raises:
        WhatsAppSenderError: If send fails or settings are incomplete
    """

    if not settings.access_token:
        raise WhatsAppSenderError("WHATSAPP_TOKEN not configured")
    if not settings.phone_number_id:
        raise WhatsAppSenderError("WHATSAPP_PHONE_NUMBER_ID not configured")

    headers = {
        "Authorization": f"Bearer {settings.access_token}",
        "Content-Type": "application/json",
        "Accept-Encoding": "identity",
    }

    # Send (no retries)
    try:
        async with httpx.AsyncClient(verify=settings.verify_ssl) as client:
            response = await client.post(
                settings.endpoint,
                json=message.model_dump(),
                headers=headers,
                timeout=settings.timeout_s,
            )
    except httpx.RequestError as e:
        logger.error(
            f"HTTP request failed: {e}",
            exc_info=True,
            extra={
                "recipient": message.to,
                "error": str(e),
            }
        )
        raise WhatsAppSenderError(f"HTTP request failed: {e}")

    if response.status_code != 200:
        error_text = response.text
        logger.error(
            f"WhatsApp API error: {response.status_code} - {error_text}",
            extra={
                "status_code": response.status_code,
                "error_body": error_text,
            }
        )
        raise WhatsAppSenderError(
            f"WhatsApp API returned {response.status_code}"
        )

    try:
        result = WhatsAppMessageResponse(**response.json())
    except ValueError as e:
        raise WhatsAppSenderError(f"Unreadable WhatsApp response: {e}")

    logger.info(
        f"Template {message.template.name} sent to {message.to}",
        extra={
            "recipient": message.to,
            "response_id": (result.messages or [{}])[0].get("id"),
        }
    )
    return result
