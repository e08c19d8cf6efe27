"""
Case Intake Handler

One webhook payload in, one Salesforce case out.

Flow:
  extract → normalize → enrich → classify → build record → submit → notify

Fatal stages: extraction (ExtractionError), token/case creation (CRMError).
Best-effort stages: enrichment (defaults), notification (logged, skipped).
Nothing is retried and nothing is rolled back.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from inference import EnrichmentBackend
from services.crm import CaseResult, SalesforceClient

from .classifier import classify_issue
from .extraction import ExtractedFields, extract_fields
from .notify import NotificationReport, Notifier
from .record import CaseRecord, build_case_record

logger = logging.getLogger(__name__)


@dataclass
class CaseIntakeResult:
    case: CaseResult
    record: CaseRecord
    notifications: NotificationReport = field(default_factory=NotificationReport)


class CaseIntakeHandler:
    """
    Runs the intake pipeline with injected collaborators.

    Usage:
        handler = CaseIntakeHandler(enrichment, crm, notifier)
        result = await handler.handle(payload)
    """

    def __init__(
        self,
        enrichment: EnrichmentBackend,
        crm: SalesforceClient,
        notifier: Optional[Notifier] = None,
    ):
        self.enrichment = enrichment
        self.crm = crm
        self.notifier = notifier

    async def build_record(self, fields: ExtractedFields) -> CaseRecord:
        """Enrich and classify extracted fields into a case record."""
        logger.info("Translating transcript and analyzing sentiment...")
        enrichment = await self.enrichment.enrich(fields.transcript)
        logger.info(f"Translation complete. Sentiment: {enrichment.sentiment}")

        case_type = classify_issue(fields.issue_desc)
        logger.info(f"Case type: {case_type}")

        return build_case_record(fields, enrichment, case_type)

    async def handle(self, payload: Any) -> CaseIntakeResult:
        """
        Process one webhook payload.

        Raises:
            ExtractionError: extracted_data missing or empty
            CRMError: token exchange or case creation failed
        """
        fields = extract_fields(payload)
        record = await self.build_record(fields)

        logger.info(
            "Sending case to Salesforce",
            extra={"subject": record.subject, "sentiment": record.sentiment},
        )
        case = await self.crm.submit(record.to_payload())

        notifications = NotificationReport()
        if self.notifier is not None:
            notifications = await self.notifier.notify(record, fields, case)

        logger.info(
            f"Case {case.reference} processed",
            extra={
                "case_reference": case.reference,
                "email_sent": notifications.email_sent,
                "whatsapp_sent": notifications.whatsapp_sent,
            },
        )
        return CaseIntakeResult(case=case, record=record, notifications=notifications)
