"""
WhatsApp Transport Layer - Pydantic Schemas

PURE DATA MODELS - NO LOGIC
Only defines the contract for template messages sent through the Cloud API.
"""

from typing import Literal

from pydantic import BaseModel, Field


# ============================================================================
# TEMPLATE MESSAGE (OUTPUT)
# ============================================================================

class TextParameter(BaseModel):
    """One positional {{n}} placeholder value."""
    type: Literal["text"] = "text"
    text: str


class TemplateComponent(BaseModel):
    """Template body component carrying the positional parameters."""
    type: Literal["body"] = "body"
    parameters: list[TextParameter] = Field(default_factory=list)


class TemplateLanguage(BaseModel):
    code: str = "en"


class Template(BaseModel):
    name: str
    language: TemplateLanguage = Field(default_factory=TemplateLanguage)
    components: list[TemplateComponent] = Field(default_factory=list)


class TemplateMessage(BaseModel):
    """
    Full template message request body.

    ref: https://developers.facebook.com/docs/whatsapp/cloud-api/guides/send-message-templates
    """

    messaging_product: Literal["whatsapp"] = "whatsapp"
    to: str = Field(..., description="Recipient number including country code")
    type: Literal["template"] = "template"
    template: Template

    @classmethod
    def build(
        cls,
        to: str,
        template_name: str,
        parameters: list[str],
        language_code: str = "en",
    ) -> "TemplateMessage":
        """Build a body-only template message from ordered text values."""
        return cls(
            to=to,
            template=Template(
                name=template_name,
                language=TemplateLanguage(code=language_code),
                components=[
                    TemplateComponent(
                        parameters=[TextParameter(text=value) for value in parameters]
                    )
                ],
            ),
        )


# ============================================================================
# WHATSAPP API RESPONSE
# ============================================================================

class WhatsAppMessageResponse(BaseModel):
    """Response from WhatsApp Cloud API when sending a message."""

    messaging_product: str = Field(default="whatsapp")
    contacts: list[dict[str, str]] = Field(default_factory=list)  # [{"input": "91...", "wa_id": "91..."}]
    messages: list[dict[str, str]] = Field(default_factory=list)  # [{"id": "wamid.xxx", "message_status": "accepted"}]

    class Config:
        extra = "allow"  # Meta may add fields
