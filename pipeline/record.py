"""
Case Record

The exact body the Apex case service expects. Field names are an external
contract, including the misspelled conversationDueration. Every field is a
string; absent values are "" and never null.
"""

from pydantic import BaseModel, Field

from inference import DEFAULT_SENTIMENT, EnrichmentResult

from .extraction import ExtractedFields
from .normalize import clean_mobile, format_duration, spoken_to_email, to_iso_timestamp

DEFAULT_USER_NAME = "Web User"
CASE_ORIGIN = "Phone"
CASE_PRIORITY = "High"
CASE_OPERATION = "insert"


class CaseRecord(BaseModel):
    """Normalized case sent once to Salesforce, then discarded."""

    subject: str
    operation: str = CASE_OPERATION
    user_name: str = DEFAULT_USER_NAME
    email: str = ""
    mobile: str = ""
    pincode: str = ""
    preferred_date: str = ""
    preferred_time: str = ""
    issuedesc: str = ""
    fulladdress: str = ""
    recording_link: str = ""
    transcript: str = ""
    conversation_duration: str = Field("0 sec", alias="conversationDueration")
    sentiment: str = DEFAULT_SENTIMENT
    origin: str = CASE_ORIGIN
    priority: str = CASE_PRIORITY
    feedback: str = ""
    rate: str = ""

    class Config:
        frozen = True
        populate_by_name = True

    def to_payload(self) -> dict:
        """Body for the case service, keyed by the Apex field names."""
        return self.model_dump(by_alias=True)


def build_case_record(
    fields: ExtractedFields,
    enrichment: EnrichmentResult,
    case_type: str,
) -> CaseRecord:
    """Assemble the case record from extracted fields and enrichment."""
    visit_iso = to_iso_timestamp(fields.visit_date)
    return CaseRecord(
        subject=case_type,
        user_name=fields.user_name or DEFAULT_USER_NAME,
        email=spoken_to_email(fields.email),
        mobile=clean_mobile(fields.mobile),
        pincode=fields.pincode,
        preferred_date=visit_iso,
        preferred_time=visit_iso,
        issuedesc=fields.issue_desc,
        fulladdress=fields.full_address,
        recording_link=fields.recording_url,
        transcript=enrichment.translated_text or fields.transcript,
        conversation_duration=format_duration(fields.duration_seconds),
        sentiment=enrichment.sentiment or DEFAULT_SENTIMENT,
        feedback=fields.feedback,
        rate=fields.rating,
    )
