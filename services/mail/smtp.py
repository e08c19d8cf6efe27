"""
SMTP mail transport.

smtplib is blocking, so each send runs in a worker thread.
"""

import asyncio
import logging
import smtplib
import ssl
from email.message import EmailMessage
from typing import Optional

from .base import MailMessage, MailTransport, MailTransportError

logger = logging.getLogger(__name__)


class SMTPMailTransport(MailTransport):
    """Send HTML mail through an SMTP relay (STARTTLS by default)."""

    def __init__(
        self,
        host: str,
        port: int = 587,
        username: Optional[str] = None,
        password: Optional[str] = None,
        sender: Optional[str] = None,
        use_tls: bool = True,
        timeout_s: float = 30.0,
        verify_ssl: bool = True,
    ):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.sender = sender or username or ""
        self.use_tls = use_tls
        self.timeout_s = timeout_s
        self.verify_ssl = verify_ssl

    def _build(self, message: MailMessage) -> EmailMessage:
        email = EmailMessage()
        email["From"] = self.sender
        email["To"] = message.to
        email["Subject"] = message.subject
        email.set_content("This message requires an HTML-capable mail client.")
        email.add_alternative(message.html, subtype="html")
        return email

    def _deliver(self, message: MailMessage) -> None:
        if not self.host:
            raise MailTransportError("SMTP_HOST not configured")
        if not self.sender:
            raise MailTransportError("MAIL_FROM not configured")

        try:
            email = self._build(message)
        except ValueError as e:
            # header injection (CR/LF) or otherwise malformed address
            raise MailTransportError(f"Invalid email message: {e}") from e

        context = ssl.create_default_context()
        if not self.verify_ssl:
            context.check_hostname = False
            context.verify_mode = ssl.CERT_NONE

        try:
            with smtplib.SMTP(self.host, self.port, timeout=self.timeout_s) as server:
                if self.use_tls:
                    server.starttls(context=context)
                if self.username and self.password:
                    server.login(self.username, self.password)
                server.send_message(email)
        except (smtplib.SMTPException, OSError) as e:
            raise MailTransportError(f"SMTP delivery failed: {e}") from e

    async def send(self, message: MailMessage) -> bool:
        try:
            await asyncio.to_thread(self._deliver, message)
        except MailTransportError as e:
            logger.error(
                f"Email send failed: {e}",
                exc_info=True,
                extra={"to": message.to},
            )
            return False

        logger.info("Email sent", extra={"to": message.to})
        return True
