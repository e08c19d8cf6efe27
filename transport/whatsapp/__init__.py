"""WhatsApp Transport Layer - Module Exports"""

from .schemas import (
    Template,
    TemplateComponent,
    TemplateLanguage,
    TemplateMessage,
    TextParameter,
    WhatsAppMessageResponse,
)
from .sender import WhatsAppSenderError, WhatsAppSettings, send_template

__all__ = [
    # Schemas
    "TemplateMessage",
    "Template",
    "TemplateComponent",
    "TemplateLanguage",
    "TextParameter",
    "WhatsAppMessageResponse",
    # Sender
    "send_template",
    "WhatsAppSettings",
    "WhatsAppSenderError",
]
