"""
Case Notification Tests

Verifies:
✔ Email goes to the CRM address first, then the caller's address
✔ No address → no email
✔ WhatsApp template carries rating, feedback and contact number
✔ WhatsApp failure is swallowed
"""

from unittest.mock import AsyncMock, patch

import pytest

from inference import EnrichmentResult
from pipeline.extraction import extract_fields
from pipeline.notify import (
    Notifier,
    build_email,
    build_template_parameters,
    to_whatsapp_number,
)
from pipeline.record import build_case_record
from services.crm import CaseResult
from services.mail import StubMailTransport
from transport.whatsapp import WhatsAppSenderError, WhatsAppSettings

WHATSAPP = WhatsAppSettings(access_token="tok", phone_number_id="123")


def make_case_inputs(**extracted):
    data = {
        "user_name": "Asha",
        "mobile": "+91-9876543210",
        "issuedesc": "AC not working",
        "fulladdress": "12 MG Road",
        "technician_visit_date": "2024-05-01T10:00:00Z",
    }
    data.update(extracted)
    fields = extract_fields({"extracted_data": data})
    record = build_case_record(
        fields,
        EnrichmentResult(translated_text="", sentiment="Neutral"),
        "Service Appointment",
    )
    return fields, record


class TestBuildEmail:
    def test_subject_and_body(self):
        message = build_email(
            to="asha@example.com",
            reference="SR-00001026",
            user_name="Asha",
            issue="AC not working",
            address="12 MG Road",
            service_time="1/5/2024, 3:30:00 pm",
            phone="9876543210",
        )

        assert message.to == "asha@example.com"
        assert message.subject == "G&B Service Update — Case SR-00001026"
        assert "Dear Asha," in message.html
        assert "<b>Case ID:</b> SR-00001026" in message.html
        assert "1/5/2024, 3:30:00 pm" in message.html
        assert "9876543210" in message.html
        assert "asha@example.com" in message.html

    def test_default_greeting_and_escaping(self):
        message = build_email(
            to="a@b.co",
            reference="SR-1",
            user_name="",
            issue="<script>",
            address="",
            service_time="",
            phone="",
        )
        assert "Dear Customer," in message.html
        assert "<script>" not in message.html
        assert "&lt;script&gt;" in message.html


class TestTemplateHelpers:
    def test_parameters(self):
        assert build_template_parameters("4", "Great", "1800") == ["4/5", "Great", "1800"]

    def test_parameter_defaults(self):
        assert build_template_parameters("", "", "1800") == ["Not provided/5", "No suggestions", "1800"]

    def test_whatsapp_number(self):
        assert to_whatsapp_number("9876543210") == "919876543210"
        assert to_whatsapp_number("+91 98765 43210") == "919876543210"

    def test_whatsapp_number_starting_with_91_kept(self):
        assert to_whatsapp_number("9123456789") == "919123456789"

    def test_whatsapp_number_empty(self):
        assert to_whatsapp_number("") == ""


class TestNotifier:
    @pytest.mark.asyncio
    async def test_email_prefers_crm_address(self):
        mailer = StubMailTransport()
        fields, record = make_case_inputs(email="asha at gmail dot com")
        case = CaseResult(data={"caseNumber": "42", "email": "crm@example.com"})

        report = await Notifier(mailer=mailer).notify(record, fields, case)

        assert report.email_sent is True
        assert mailer.sent[0].to == "crm@example.com"
        assert "SR-42" in mailer.sent[0].subject

    @pytest.mark.asyncio
    async def test_email_falls_back_to_caller_address(self):
        mailer = StubMailTransport()
        fields, record = make_case_inputs(email="asha at gmail dot com")

        await Notifier(mailer=mailer).notify(record, fields, CaseResult(data={"id": "500xx"}))

        assert mailer.sent[0].to == "asha@gmail.com"
        assert "500xx" in mailer.sent[0].subject

    @pytest.mark.asyncio
    async def test_no_address_no_email(self):
        mailer = StubMailTransport()
        fields, record = make_case_inputs()

        report = await Notifier(mailer=mailer).notify(record, fields, CaseResult(data={}))

        assert report.email_sent is False
        assert mailer.sent == []

    @pytest.mark.asyncio
    async def test_whatsapp_template_sent(self):
        fields, record = make_case_inputs(rate=5, feedback="Quick visit")
        notifier = Notifier(whatsapp=WHATSAPP, contact_number="1800-000-000")

        with patch("pipeline.notify.send_template", new_callable=AsyncMock) as mock_send:
            report = await notifier.notify(record, fields, CaseResult(data={"caseNumber": "1"}))

        assert report.whatsapp_sent is True
        message, settings = mock_send.call_args.args
        assert settings is WHATSAPP
        assert message.to == "919876543210"
        texts = [p.text for p in message.template.components[0].parameters]
        assert texts == ["5/5", "Quick visit", "1800-000-000"]

    @pytest.mark.asyncio
    async def test_whatsapp_failure_is_swallowed(self):
        fields, record = make_case_inputs()
        notifier = Notifier(mailer=StubMailTransport(), whatsapp=WHATSAPP)

        with patch(
            "pipeline.notify.send_template",
            new_callable=AsyncMock,
            side_effect=WhatsAppSenderError("WhatsApp API returned 401"),
        ):
            report = await notifier.notify(record, fields, CaseResult(data={}))

        assert report.whatsapp_sent is False

    @pytest.mark.asyncio
    async def test_unexpected_whatsapp_error_is_swallowed(self):
        fields, record = make_case_inputs()
        notifier = Notifier(whatsapp=WHATSAPP)

        with patch("pipeline.notify.send_template", new_callable=AsyncMock, side_effect=KeyError("x")):
            report = await notifier.notify(record, fields, CaseResult(data={}))

        assert report.whatsapp_sent is False

    @pytest.mark.asyncio
    async def test_no_mobile_skips_whatsapp(self):
        fields, record = make_case_inputs(mobile="")
        notifier = Notifier(whatsapp=WHATSAPP)

        with patch("pipeline.notify.send_template", new_callable=AsyncMock) as mock_send:
            report = await notifier.notify(record, fields, CaseResult(data={}))

        assert report.whatsapp_sent is False
        mock_send.assert_not_called()

    @pytest.mark.asyncio
    async def test_disabled_channels(self):
        fields, record = make_case_inputs(email="a@b.co")

        report = await Notifier().notify(record, fields, CaseResult(data={}))

        assert report.email_sent is False
        assert report.whatsapp_sent is False
