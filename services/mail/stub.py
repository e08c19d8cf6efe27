"""
Stub mail transport for testing and offline development.
"""

import logging
from typing import List

from .base import MailMessage, MailTransport

logger = logging.getLogger(__name__)

DEFAULT_MAX_MESSAGES = 100


class StubMailTransport(MailTransport):
    """
    Records messages in memory instead of sending them.

    Only the most recent `max_messages` are kept, so MAIL_BACKEND=stub is
    safe in a long-running dev server.
    """

    def __init__(self, max_messages: int = DEFAULT_MAX_MESSAGES):
        self.max_messages = max_messages
        self.sent: List[MailMessage] = []

    async def send(self, message: MailMessage) -> bool:
        self.sent.append(message)
        if len(self.sent) > self.max_messages:
            del self.sent[: len(self.sent) - self.max_messages]
        logger.info("Email captured by stub transport", extra={"to": message.to})
        return True
