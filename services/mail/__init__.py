"""
Mail service exports.
"""

from .base import MailMessage, MailTransport, MailTransportError
from .smtp import SMTPMailTransport
from .stub import StubMailTransport

__all__ = [
    "MailMessage",
    "MailTransport",
    "MailTransportError",
    "SMTPMailTransport",
    "StubMailTransport",
]
