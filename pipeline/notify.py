"""
Case Notifications

Email + WhatsApp template after the case exists.

Rules:
- Email only when a destination address is known (CRM email first)
- The mail transport reports its own delivery failures; not wrapped here
- WhatsApp failures are logged and swallowed: the case is already created
- No retries
"""

import html
import logging
from dataclasses import dataclass
from typing import Optional

from services.crm import CaseResult
from services.mail import MailMessage, MailTransport
from transport.whatsapp import TemplateMessage, WhatsAppSenderError, WhatsAppSettings, send_template

from .extraction import ExtractedFields
from .normalize import clean_mobile, format_service_time
from .record import CaseRecord

logger = logging.getLogger(__name__)

DEFAULT_REGION_PREFIX = "91"
NO_RATING = "Not provided"
NO_FEEDBACK = "No suggestions"

EMAIL_TEMPLATE = """
<h2 style="color: #004d40;">{brand} Service Update</h2>
<p>Dear {name},</p>
<p>We’ve received your request for <b>{issue}</b>.</p>
<p><b>Case ID:</b> {reference}</p>
<p><b>Registered Address:</b><br/>{address}</p>
<p><b>Service Time:</b> {service_time}</p>
<p><b>Registered Phone:</b> {phone}<br/><b>Registered Email:</b> {email}</p>
<p style="margin-top: 30px;">Regards,<br/><b>{brand} Service Team</b></p>
"""


@dataclass
class NotificationReport:
    email_sent: bool = False
    whatsapp_sent: bool = False


def build_email(
    to: str,
    reference: str,
    user_name: str,
    issue: str,
    address: str,
    service_time: str,
    phone: str,
    brand: str = "G&B",
) -> MailMessage:
    """Service-update email for a freshly created case."""
    body = EMAIL_TEMPLATE.format(
        brand=html.escape(brand),
        name=html.escape(user_name or "Customer"),
        issue=html.escape(issue),
        reference=html.escape(reference),
        address=html.escape(address),
        service_time=html.escape(service_time),
        phone=html.escape(phone),
        email=html.escape(to),
    )
    return MailMessage(
        to=to,
        subject=f"{brand} Service Update — Case {reference}",
        html=body,
    )


def build_template_parameters(rating: str, feedback: str, contact_number: str) -> list[str]:
    """
    Positional values for the feedback thank-you template:
    {{1}} rating out of 5, {{2}} suggestions, {{3}} contact number.
    """
    return [
        f"{rating or NO_RATING}/5",
        feedback or NO_FEEDBACK,
        contact_number,
    ]


def to_whatsapp_number(mobile: str, region_prefix: str = DEFAULT_REGION_PREFIX) -> str:
    """Country-code prefixed number, or "" when there is no mobile."""
    digits = clean_mobile(mobile)
    if not digits:
        return ""
    return f"{region_prefix}{digits}"


class Notifier:
    """
    Sends the post-case email and WhatsApp template.

    Either channel may be disabled by passing None.
    """

    def __init__(
        self,
        mailer: Optional[MailTransport] = None,
        whatsapp: Optional[WhatsAppSettings] = None,
        brand_name: str = "G&B",
        contact_number: str = "1800-123-456",
        display_timezone: str = "Asia/Kolkata",
        region_prefix: str = DEFAULT_REGION_PREFIX,
    ):
        self.mailer = mailer
        self.whatsapp = whatsapp
        self.brand_name = brand_name
        self.contact_number = contact_number
        self.display_timezone = display_timezone
        self.region_prefix = region_prefix

    async def notify(
        self,
        record: CaseRecord,
        fields: ExtractedFields,
        case: CaseResult,
    ) -> NotificationReport:
        report = NotificationReport()
        report.email_sent = await self._send_email(record, fields, case)
        report.whatsapp_sent = await self._send_whatsapp(record)
        return report

    async def _send_email(
        self,
        record: CaseRecord,
        fields: ExtractedFields,
        case: CaseResult,
    ) -> bool:
        mail_to = case.email or record.email
        if not mail_to:
            logger.info("No email address for case, skipping email", extra={"case_reference": case.reference})
            return False
        if self.mailer is None:
            logger.info("Email notifications disabled")
            return False

        message = build_email(
            to=mail_to,
            reference=case.reference,
            user_name=fields.user_name,
            issue=record.issuedesc,
            address=record.fulladdress,
            service_time=format_service_time(fields.visit_date, self.display_timezone),
            phone=record.mobile,
            brand=self.brand_name,
        )
        return await self.mailer.send(message)

    async def _send_whatsapp(self, record: CaseRecord) -> bool:
        if self.whatsapp is None:
            logger.info("WhatsApp notifications disabled")
            return False

        try:
            to = to_whatsapp_number(record.mobile, self.region_prefix)
            if not to:
                logger.info("No mobile number for case, skipping WhatsApp")
                return False

            message = TemplateMessage.build(
                to=to,
                template_name=self.whatsapp.template_name,
                parameters=build_template_parameters(record.rate, record.feedback, self.contact_number),
                language_code=self.whatsapp.language_code,
            )
            await send_template(message, self.whatsapp)
            return True
        except WhatsAppSenderError as e:
            logger.warning(f"WhatsApp send failed: {e}")
        except Exception as e:
            logger.warning(f"Unexpected WhatsApp error: {e}", exc_info=True)
        return False
