"""
Mail transport abstract interface.

Role: deliver one HTML message to one recipient.

Rules:
- No templating here (the notifier builds subject and body)
- Delivery failures are logged by the transport and reported as False
- Never raises on delivery failure; the case already exists by then
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


class MailTransportError(Exception):
    """Mail delivery failed."""
    pass


@dataclass(frozen=True)
class MailMessage:
    """One outbound email."""

    to: str
    subject: str
    html: str


class MailTransport(ABC):
    """
    Abstract mail boundary.
    The notifier depends ONLY on this interface.
    """

    @abstractmethod
    async def send(self, message: MailMessage) -> bool:
        """
        Deliver the message.

        Returns:
            True if handed to the mail server, False otherwise
        """
        raise NotImplementedError
